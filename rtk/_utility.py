"""Miscellaneous non-geometry stuff."""
import os
import logging
import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'rtk.yml'

DEFAULT_CONFIG = {'print_precision': 6}

_config = None


def load_config() -> dict:
    """Read rtk.yml from the current directory, falling back to the home directory.

    Returns empty dictionary if neither exists.
    """
    for path in os.curdir, os.path.expanduser('~'):
        filename = os.path.join(path, CONFIG_FILENAME)
        try:
            with open(filename, 'rt') as file:
                config = yaml.load(file, Loader=yaml.FullLoader)
        except FileNotFoundError:
            continue
        logger.debug(f'Loaded configuration from {filename}.')
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f'Expected a mapping in {filename}, got {type(config).__name__}.')
        return config
    return {}


def get_config() -> dict:
    """Defaults updated with load_config(). Cached after first call."""
    global _config
    if _config is None:
        _config = dict(DEFAULT_CONFIG)
        _config.update(load_config())
    return _config


def clear_config_cache():
    global _config
    _config = None
