# Shared pytest fixtures for Sprig tests

import pytest
import os
import sys
import shutil
import tempfile
from datetime import datetime, timedelta, timezone

# Add sprig-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'sprig-project'))

from commands import init, add, commit
from utils import repository


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_repo(temp_dir):
    # Creates an initialized Sprig repository in a temporary directory and chdirs into it
    original_dir = os.getcwd()
    os.chdir(temp_dir)
    repo = repository.Repository.at(temp_dir)
    init.init_repository(repo)

    yield repo

    os.chdir(original_dir)


@pytest.fixture
def memory_repo():
    # Creates an initialized repository that lives entirely in memory
    repo = repository.Repository.in_memory()
    init.init_repository(repo)
    return repo


class Clock:
    # Hands out strictly increasing commit times so tests never depend on the wall clock
    def __init__(self):
        self.now = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock():
    return Clock()


def write_file(repo, name, text):
    repo.work.write(name, text.encode())


def read_file(repo, name):
    return repo.work.read(name).decode()


def commit_file(repo, name, text, message, now=None):
    # Writes, stages and commits a single file, returning the commit hash
    write_file(repo, name, text)
    add.add_file(repo, name)
    return commit.create_commit(repo, message, now=now)
