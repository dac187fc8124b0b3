# The command: sprig config <key> <value>
# What it does: A user-facing command to set a configuration key-value pair (e.g., core.loglevel or core.lock)
# How it does: It passes the key and value to `write_config` in `utils/config.py`, which rejects unknown log levels and non-boolean lock values before anything is written
# What data structure it uses: None directly, but it provides the interface to the underlying Map / Dictionary structure managed by `utils/config.py`

from utils import repository, config


def run(args): # Sets a key in the repository's config file, e.g. `sprig config core.loglevel DEBUG`
    repo = repository.open_repo()
    config.write_config(repo, args.key, args.value)
