# The command: sprig commit <message>
# What it does: Creates a permanent, uniquely identified snapshot (a commit object) of the currently staged changes.
# How it does: It starts from the snapshot of the current branch's tip, overlays the staged additions (storing each as a blob) and drops the staged removals. The new commit records the message, the current time and its parents, and is hashed over all of that. Finally, it moves the current branch to the new commit and clears the staging area.
# What data structure it uses: Hash Table / Dictionary (the snapshot and the underlying object store), Directed Acyclic Graph (DAG) (as each commit links to its parents, forming the history graph)

from datetime import datetime, timezone
from loguru import logger

from utils import repository, objects, index
from utils.errors import EmptyStagingArea, EmptyMessage


def run(args):
    repo = repository.open_repo()
    create_commit(repo, args.message)


def create_commit(repo, message, extra_parents=(), now=None): # Creates a commit object and updates the current branch
    if index.is_empty(repo):
        raise EmptyStagingArea()
    if not message or not message.strip():
        raise EmptyMessage()

    current_branch = repository.get_current_branch(repo)
    parent_commit = repository.get_head_commit(repo)

    snapshot = dict(objects.read_commit(repo, parent_commit).snapshot)
    for name, content in index.read_additions(repo).items():
        snapshot[name] = objects.write_blob(repo, name, content)
    for name in index.read_removals(repo):
        snapshot.pop(name, None)

    commit = objects.Commit(
        message=message,
        timestamp=objects.format_timestamp(now or datetime.now(timezone.utc)),
        parents=(parent_commit,) + tuple(extra_parents),
        snapshot=snapshot,
    )
    commit_hash = objects.write_commit(repo, commit)

    repository.update_branch(repo, current_branch, commit_hash)
    index.clear(repo)

    logger.info("[{} {}] {}", current_branch, commit_hash[:7], message.splitlines()[0])
    return commit_hash
