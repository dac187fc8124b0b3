# The command: sprig init
# What it does: Initializes a new repository by creating the hidden `.sprig` directory, the root commit and the `master` branch
# How it does: It creates the `blobs`, `commits`, `branches` and staging areas, writes the root commit (fixed message, epoch date, no parents, no files), points `master` at it and HEAD at `master`
# What data structure it uses: Tree (the file system directory structure is a tree). It also lays the foundation for a Hash Table (the object database) and a Directed Acyclic Graph (the commit history)

import os
from loguru import logger

from utils import repository, objects, index, config
from utils.errors import AlreadyInitialized

AREAS = ('blobs', 'commits', repository.BRANCHES, index.ADD_STAGE, index.REMOVAL_STAGE)


def init_repository(repo):
    if repo.is_initialized():
        raise AlreadyInitialized()

    for area in AREAS:
        repo.meta.make_area(area)

    root_hash = objects.write_commit(repo, objects.root_commit())
    repository.update_branch(repo, repository.DEFAULT_BRANCH, root_hash)
    repository.set_head(repo, repository.DEFAULT_BRANCH)
    config.write_default_config(repo)

    logger.info("Initialized repository, root commit {}", root_hash[:7])
    return root_hash


def run(args):
    init_repository(repository.Repository.at(os.getcwd()))
