# What it does: Materializes commits into the working directory (single files, whole branches, resets) without silently throwing away unsaved edits
# How it does: Every destructive sync first runs `guard_overwrites` over the names it will touch, reads all the blobs it needs, and only then deletes and writes files
# What data structure it uses: Dictionary (name -> blob id for planned results and snapshots), Set (names to delete)

from loguru import logger

from . import objects, index, repository
from .errors import FileNotInCommit, UntrackedFileInTheWay


def working_blob_id(repo, name): # Blob id the working copy of `name` would get, None if there is no such file
    if not repo.work.exists(name):
        return None
    return objects.blob_id(name, repo.work.read(name))


def working_files(repo):
    return {name: working_blob_id(repo, name) for name in repo.work.list()}


def checkout_file(repo, commit_hash, name):
    snapshot = objects.read_commit(repo, commit_hash).snapshot
    if name not in snapshot:
        raise FileNotInCommit()
    repo.work.write(name, objects.read_blob(repo, snapshot[name]))
    logger.debug("Restored {} from {}", name, commit_hash[:7])


def guard_overwrites(repo, planned, tip_snapshot):
    """
    Abort before anything is touched if a working file would lose unsaved content.

    `planned` maps each name an operation will write or delete to the blob id
    left behind (None for a deletion). A working copy is safe to replace when
    it matches the current tip's version or the version that will survive.
    """
    for name in sorted(planned):
        working = working_blob_id(repo, name)
        if working is None:
            continue
        if working == tip_snapshot.get(name) or working == planned[name]:
            continue
        logger.debug("{} has unsaved content, refusing to overwrite", name)
        raise UntrackedFileInTheWay()


def checkout_commit(repo, target_hash, branch=None):
    """
    Replace the working directory with the snapshot of `target_hash`.

    With `branch`, HEAD moves to that branch (checkout). Without it, the
    current branch is moved to the target commit instead (reset).
    """
    target = objects.read_commit(repo, target_hash).snapshot
    tip = index.head_snapshot(repo)
    guard_overwrites(repo, dict(target), tip)

    contents = {name: objects.read_blob(repo, sha1) for name, sha1 in target.items()}

    # Every working file the target lacks goes, tracked or not
    for name in sorted(set(repo.work.list()) - set(target)):
        repo.work.delete(name)
    for name, content in contents.items():
        repo.work.write(name, content)
    index.clear(repo)

    if branch is not None:
        repository.set_head(repo, branch)
    else:
        repository.update_branch(repo, repository.get_current_branch(repo), target_hash)
    logger.info("Working directory now at {}", target_hash[:7])
