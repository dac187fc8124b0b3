# The command: sprig rm <file>
# What it does: Unstages a pending addition, or stages a tracked file for removal and deletes it from the working directory

import os

from utils import repository, index


def remove_file(repo, name):
    index.stage_remove(repo, name)


def run(args):
    repo = repository.open_repo()
    remove_file(repo, os.path.normpath(args.file))
