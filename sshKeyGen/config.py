import yaml

from .ssh_keys import DEFAULT_BITS, KeyGenerationError


class ConfigError(KeyGenerationError):
    pass


CONFIG_KEYS = ("key_type", "bits", "comment")


def parse_config_yaml(config_yaml_file):
    with open(config_yaml_file, "r") as stream:
        try:
            config = yaml.safe_load(stream)
        except yaml.YAMLError as exc:
            print(exc)
            raise

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError("Config file {} must contain a mapping".format(config_yaml_file))

    unknown = sorted(set(config) - set(CONFIG_KEYS))
    if unknown:
        raise ConfigError("Unknown config keys {}. Valid keys are {}".format(unknown, list(CONFIG_KEYS)))

    bits = config.get("bits")
    if bits is not None and (isinstance(bits, bool) or not isinstance(bits, int)):
        raise ConfigError("bits must be an integer, got {!r}".format(bits))
    return config


def resolve_settings(config=None, key_type=None, bits=None, comment=None):
    """
    Merge command line values over config file values over defaults.
    """
    config = config or {}
    key_type = key_type or config.get("key_type") or "rsa"
    if bits is None:
        bits = config.get("bits")
    if bits is None:
        # unknown key types are rejected later by generate_key
        bits = DEFAULT_BITS.get(key_type)
    if comment is None:
        comment = config.get("comment")
    return {
        "key_type": key_type,
        "bits": bits,
        "comment": comment,
    }
