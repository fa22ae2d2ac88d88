import argparse
import sys
from sshKeyGen.config import parse_config_yaml, resolve_settings
from sshKeyGen.ssh_keys import KeyGenerationError, generate_key
from sshKeyGen.print_info import print_info, print_public_key


def main(argv):
    parser = argparse.ArgumentParser(description='Generate an SSH key pair and print its public key.')
    parser.add_argument('--key-type', dest='key_type', required=False, help='Key type, "rsa" or "ecdsa"')
    parser.add_argument('--bits', type=int, required=False,
                        help='RSA bit length, or ECDSA curve size (256, 384, 521)')
    parser.add_argument('--comment', required=False, help='Comment appended to the public key')
    parser.add_argument('--config', required=False,
                        help='YAML file with key_type, bits and comment defaults')
    parser.add_argument('--info', action='store_true',
                        help='Print type, size and fingerprint along with the public key')

    args = parser.parse_args(argv)

    try:
        config = parse_config_yaml(args.config) if args.config else {}
        settings = resolve_settings(config, key_type=args.key_type, bits=args.bits, comment=args.comment)
        # the private key is discarded; only the public half is printed
        _, public_key = generate_key(settings["key_type"], settings["bits"])
    except (KeyGenerationError, ValueError, OSError) as e:
        sys.exit(str(e))

    if args.info:
        print_info(public_key, settings["comment"])
    else:
        print_public_key(public_key, settings["comment"])


if __name__ == "__main__":
    main(sys.argv[1:])
