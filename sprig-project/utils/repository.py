# What it does: Provides the Repository handle every operation receives, plus the branch pointers and HEAD that make up the mutable half of the commit graph
# How it does: A Repository pairs two storages (`.sprig` metadata and the working directory). HEAD holds the current branch name and `branches/<name>` holds that branch's tip commit id
# What data structure it uses: Uses recursion to find the repo root. Conceptually it manages pointers (HEAD and the branch files) into the commit DAG

import os
from loguru import logger

from .errors import NotInitialized, DuplicateBranch, NoSuchBranch, CannotRemoveCurrent
from .storage import FileStorage, MemoryStorage

SPRIG_DIR = '.sprig'
BRANCHES = 'branches'
HEAD = 'HEAD'
DEFAULT_BRANCH = 'master'


class Repository:
    """Explicit handle on one repository: metadata storage plus working directory storage."""

    def __init__(self, meta, work, root=None):
        self.meta = meta
        self.work = work
        self.root = root

    @classmethod
    def at(cls, path):
        path = os.path.abspath(path)
        return cls(FileStorage(os.path.join(path, SPRIG_DIR)), FileStorage(path), root=path)

    @classmethod
    def in_memory(cls):
        return cls(MemoryStorage(), MemoryStorage())

    def is_initialized(self):
        return self.meta.exists(HEAD)

    def __repr__(self):
        return f"Repository(meta={self.meta!r}, work={self.work!r})"


def find_repo_root(path='.'): # Recursively searches for the .sprig directory to find the repository root
    path = os.path.abspath(path)
    if os.path.isdir(os.path.join(path, SPRIG_DIR)):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


def open_repo(path='.'): # Returns the Repository enclosing `path`, or raises NotInitialized
    repo_root = find_repo_root(path)
    if not repo_root:
        raise NotInitialized()
    repo = Repository.at(repo_root)
    if not repo.is_initialized():
        raise NotInitialized()
    return repo


def get_current_branch(repo):
    return repo.meta.read(HEAD).decode().strip()


def set_head(repo, branch_name):
    repo.meta.write(HEAD, f"{branch_name}\n".encode())
    logger.debug("HEAD -> {}", branch_name)


def get_all_branches(repo):
    return repo.meta.list(BRANCHES)


def get_branch_commit(repo, branch_name): # Commit id the branch points to, or None if the branch doesn't exist
    key = f'{BRANCHES}/{branch_name}'
    if not repo.meta.exists(key):
        return None
    return repo.meta.read(key).decode().strip()


def update_branch(repo, branch_name, commit_hash):
    repo.meta.write(f'{BRANCHES}/{branch_name}', f"{commit_hash}\n".encode())
    logger.debug("{} -> {}", branch_name, commit_hash[:7])


def get_head_commit(repo): # Tip of the checked-out branch
    return get_branch_commit(repo, get_current_branch(repo))


def create_branch(repo, branch_name, commit_hash): # Creates a new branch pointing to the given commit hash
    if get_branch_commit(repo, branch_name) is not None:
        raise DuplicateBranch()
    update_branch(repo, branch_name, commit_hash)
    logger.info("Created branch {} at {}", branch_name, commit_hash[:7])


def delete_branch(repo, branch_name):
    if get_branch_commit(repo, branch_name) is None:
        raise NoSuchBranch()
    if branch_name == get_current_branch(repo):
        raise CannotRemoveCurrent()
    repo.meta.delete(f'{BRANCHES}/{branch_name}')
    logger.info("Removed branch {}", branch_name)
