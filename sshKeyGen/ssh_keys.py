import base64
import hashlib

import paramiko
from cryptography.hazmat.primitives.asymmetric import ec


class KeyGenerationError(Exception):
    pass


class UnsupportedKeyType(KeyGenerationError):
    pass


class UnsupportedKeySize(KeyGenerationError):
    pass


ECDSA_CURVES = {
    256: ec.SECP256R1,
    384: ec.SECP384R1,
    521: ec.SECP521R1,
}

DEFAULT_BITS = {
    "rsa": 3072,
    "ecdsa": 256,
}


def generate_rsa_key(bits):
    """
    Generate an RSA key pair of the given bit length.
    """
    key = paramiko.RSAKey.generate(bits=bits)
    public_key = paramiko.RSAKey(data=key.asbytes())
    return key, public_key


def generate_ecdsa_key(bits):
    """
    Generate an ECDSA key pair on the NIST curve selected by bits.
    """
    if bits not in ECDSA_CURVES:
        raise UnsupportedKeySize("Unsupported key size. Valid sizes are '256', '384', '521'")
    key = paramiko.ECDSAKey.generate(curve=ECDSA_CURVES[bits]())
    public_key = paramiko.ECDSAKey(data=key.asbytes())
    return key, public_key


KEY_TYPES = {
    "rsa": generate_rsa_key,
    "ecdsa": generate_ecdsa_key,
}


def generate_key(key_type, bits):
    """
    Generate a key pair of the named type.

    Returns a (private_key, public_key) tuple of paramiko keys. The public key
    is rebuilt from its SSH wire encoding and carries no private material.
    """
    try:
        generate = KEY_TYPES[key_type]
    except KeyError:
        raise UnsupportedKeyType(
            "Unsupported key type {}. Valid choices are {}".format(key_type, sorted(KEY_TYPES))
        ) from None
    return generate(bits)


def public_key_line(public_key, comment=None):
    line = f'{public_key.get_name()} {public_key.get_base64()}'
    if comment:
        line = f'{line} {comment}'
    return line


def fingerprint(public_key):
    # OpenSSH style: unpadded base64 of the sha256 of the wire blob
    digest = hashlib.sha256(public_key.asbytes()).digest()
    return "SHA256:{}".format(base64.b64encode(digest).decode("ascii").rstrip("="))
