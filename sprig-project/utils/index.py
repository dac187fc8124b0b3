# What it does: Provides centralized read/write operations for the staging area (the next commit's pending additions and removals)
# How it does: Staged additions live as `add_stage/<name>` holding the exact bytes to commit; staged removals as empty `removal_stage/<name>` markers
# What data structure it uses: Dictionary (additions: name -> bytes), Set (removals)

from loguru import logger

from . import objects, repository
from .errors import NothingToRemove

ADD_STAGE = 'add_stage'
REMOVAL_STAGE = 'removal_stage'


def read_additions(repo):
    return {name: repo.meta.read(f'{ADD_STAGE}/{name}') for name in repo.meta.list(ADD_STAGE)}


def read_removals(repo):
    return set(repo.meta.list(REMOVAL_STAGE))


def is_staged_for_addition(repo, name):
    return repo.meta.exists(f'{ADD_STAGE}/{name}')


def is_empty(repo):
    return not repo.meta.list(ADD_STAGE) and not repo.meta.list(REMOVAL_STAGE)


def head_snapshot(repo):
    return objects.read_commit(repo, repository.get_head_commit(repo)).snapshot


def stage_add(repo, name, content):
    """
    Stage `content` as the next version of `name`.

    A version identical to the current tip's is never recorded: any pending
    addition for it is dropped instead.
    """
    repo.meta.delete(f'{REMOVAL_STAGE}/{name}')

    if head_snapshot(repo).get(name) == objects.blob_id(name, content):
        repo.meta.delete(f'{ADD_STAGE}/{name}')
        logger.debug("{} matches the current commit, nothing staged", name)
        return False

    repo.meta.write(f'{ADD_STAGE}/{name}', content)
    logger.debug("Staged {} for addition", name)
    return True


def stage_remove(repo, name):
    tracked = name in head_snapshot(repo)
    if not tracked and not is_staged_for_addition(repo, name):
        raise NothingToRemove()

    repo.meta.delete(f'{ADD_STAGE}/{name}')
    if tracked:
        repo.meta.write(f'{REMOVAL_STAGE}/{name}', b'')
        repo.work.delete(name)
        logger.debug("Staged {} for removal", name)


def clear(repo):
    for name in repo.meta.list(ADD_STAGE):
        repo.meta.delete(f'{ADD_STAGE}/{name}')
    for name in repo.meta.list(REMOVAL_STAGE):
        repo.meta.delete(f'{REMOVAL_STAGE}/{name}')
