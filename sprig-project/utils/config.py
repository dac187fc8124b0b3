# What it does: Manages all read/write operations for the `.sprig/config` file
# How it does: Known keys are checked when written, and again when read, so a hand-edited file fails with one readable error instead of breaking logging or locking
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import io

from loguru import logger

from .errors import UsageError, InvalidConfig

CONFIG = 'config'

DEFAULTS = {
    'core': {
        'loglevel': 'WARNING',
        'lock': 'true',
    },
}


def is_log_level(value): # True if loguru knows a level of that name
    try:
        logger.level(value.upper())
    except ValueError:
        return False
    return True


def is_boolean(value):
    return value.lower() in configparser.ConfigParser.BOOLEAN_STATES


# (section, option) -> (check, message when the check fails)
VALIDATORS = {
    ('core', 'loglevel'): (is_log_level, "Unknown log level '{}'."),
    ('core', 'lock'): (is_boolean, "core.lock must be true or false, not '{}'."),
}


def read_config(repo): # Reads and returns the configuration as a ConfigParser object, defaults filled in
    config = configparser.ConfigParser()
    config.read_dict(DEFAULTS)
    if repo is not None and repo.meta.exists(CONFIG):
        try:
            config.read_string(repo.meta.read(CONFIG).decode())
        except configparser.Error as e:
            raise InvalidConfig(f"Cannot parse .sprig/config: {e.message}") from e
    return config


def _save(repo, config):
    buffer = io.StringIO()
    config.write(buffer)
    repo.meta.write(CONFIG, buffer.getvalue().encode())


def write_default_config(repo):
    config = configparser.ConfigParser()
    config.read_dict(DEFAULTS)
    _save(repo, config)


def write_config(repo, key, value): # Sets a configuration key to a value and writes it to the config file
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise UsageError("Invalid key format. Should be 'section.key'.")

    check = VALIDATORS.get((section, option))
    if check is not None and not check[0](value):
        raise UsageError(check[1].format(value))

    # A broken file is replaced rather than parsed, so `sprig config` can repair it
    config = configparser.ConfigParser()
    if repo.meta.exists(CONFIG):
        try:
            config.read_string(repo.meta.read(CONFIG).decode())
        except configparser.Error:
            logger.warning("Discarding unreadable .sprig/config")
            config = configparser.ConfigParser()
            config.read_dict(DEFAULTS)

    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)
    _save(repo, config)


def get_log_level(repo):
    level = read_config(repo).get('core', 'loglevel')
    if not is_log_level(level):
        raise InvalidConfig(f"Unknown log level '{level}' in .sprig/config.")
    return level.upper()


def locking_enabled(repo):
    try:
        return read_config(repo).getboolean('core', 'lock', fallback=True)
    except ValueError:
        raise InvalidConfig("core.lock in .sprig/config must be true or false.") from None
