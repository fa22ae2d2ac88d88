import yaml

from sshKeyGen.print_info import convert_key_to_dict, print_info, print_public_key
from sshKeyGen.ssh_keys import fingerprint, generate_key, public_key_line


def test_convert_key_to_dict():
    _, public_key = generate_key("ecdsa", 384)
    assert convert_key_to_dict(public_key, "me@host") == {
        "type": "ecdsa-sha2-nistp384",
        "bits": 384,
        "fingerprint": fingerprint(public_key),
        "public_key": public_key_line(public_key, "me@host"),
    }


def test_print_info(capsys):
    _, public_key = generate_key("ecdsa", 256)
    print_info(public_key)
    out = yaml.safe_load(capsys.readouterr().out)
    assert out["type"] == "ecdsa-sha2-nistp256"
    assert out["bits"] == 256
    assert out["public_key"] == public_key_line(public_key)


def test_print_public_key(capsys):
    _, public_key = generate_key("ecdsa", 256)
    print_public_key(public_key, "me@host")
    assert capsys.readouterr().out == public_key_line(public_key, "me@host") + "\n"
