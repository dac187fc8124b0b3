# What it does: Serializes commands that touch the same repository, so a commit and a checkout never see each other's half-written staging area
# How it does: Holds an exclusive advisory `flock` on `.sprig/lock` for the whole command. Repositories without an on-disk root (in-memory ones) need no lock

import fcntl
import os
from contextlib import contextmanager

from loguru import logger

from .repository import SPRIG_DIR

LOCK_FILE = 'lock'


@contextmanager
def repository_lock(repo):
    if repo.root is None:
        yield
        return

    lock_path = os.path.join(repo.root, SPRIG_DIR, LOCK_FILE)
    with open(lock_path, 'w') as lock_file:
        # Blocks until any other sprig process on this repository finishes
        fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
        logger.debug("Acquired {}", lock_path)
        try:
            yield
        finally:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)
