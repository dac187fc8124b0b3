# The command: sprig add <file>
# What it does: Takes a snapshot of a file from the working directory and stages it for the next commit
# How it does: It reads the file's bytes and hands them to the staging area, which drops any pending removal of the file and skips the addition when the bytes match the version already committed on the current branch
# What data structure it uses: Hash Table / Dictionary (the staging area maps names to the bytes to commit)

import os

from utils import repository, index
from utils.errors import MissingFile


def add_file(repo, name):
    # Only plain files at the top of the working directory are tracked
    if name not in repo.work.list():
        raise MissingFile()
    return index.stage_add(repo, name, repo.work.read(name))


def run(args):
    repo = repository.open_repo()
    add_file(repo, os.path.normpath(args.file))
