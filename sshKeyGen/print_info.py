import yaml

from .ssh_keys import fingerprint, public_key_line


def convert_key_to_dict(public_key, comment=None):
    _key = {
        "type": public_key.get_name(),
        "bits": public_key.get_bits(),
        "fingerprint": fingerprint(public_key),
        "public_key": public_key_line(public_key, comment),
    }
    return _key


def print_info(public_key, comment=None):
    print(yaml.dump(convert_key_to_dict(public_key, comment), sort_keys=False))


def print_public_key(public_key, comment=None):
    print(public_key_line(public_key, comment))
