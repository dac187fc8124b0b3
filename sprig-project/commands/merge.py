# The command: sprig merge <branch-name>
# What it does: Performs a three-way merge of the given branch into the current branch, committing the result with both tips as parents
# How it does: It finds the split point (nearest common ancestor), classifies every file against the split point, current tip and given tip, checks that nothing unsaved stands in the way, then writes and stages the results and commits them. Conflicting files get both versions between markers and the merge still commits
# What data structure it uses: DAG (for finding the split point), Dictionaries (snapshots and the per-file plan)

from collections import namedtuple
from loguru import logger

from utils import repository, objects, index, ancestry, workdir, diff as diff_utils
from utils.errors import MergeWithSelf, NoSuchBranch, UncommittedChanges, EmptyStagingArea
from commands import commit

ALREADY_MERGED = 'already-merged'
FAST_FORWARDED = 'fast-forwarded'
MERGED = 'merged'

MergeResult = namedtuple('MergeResult', ['status', 'commit', 'conflicts'])


def run(args):
    repo = repository.open_repo()
    result = merge_branch(repo, args.branch)

    if result.status == ALREADY_MERGED:
        print("Given branch is an ancestor of the current branch.")
    elif result.status == FAST_FORWARDED:
        print("Current branch fast-forwarded.")
    elif result.conflicts:
        print("Encountered a merge conflict.")


def merge_branch(repo, branch_to_merge, now=None):
    current_branch = repository.get_current_branch(repo)
    if branch_to_merge == current_branch:
        raise MergeWithSelf()

    merge_commit_hash = repository.get_branch_commit(repo, branch_to_merge)
    if merge_commit_hash is None:
        raise NoSuchBranch()

    if not index.is_empty(repo):
        raise UncommittedChanges()

    head_commit_hash = repository.get_head_commit(repo)
    relation, split_hash = ancestry.relate(repo, head_commit_hash, merge_commit_hash)

    if relation == ancestry.ANCESTOR:
        return MergeResult(ALREADY_MERGED, head_commit_hash, [])

    if relation == ancestry.FAST_FORWARD:
        workdir.checkout_commit(repo, merge_commit_hash)
        logger.info("Fast-forwarded {} to {}", current_branch, merge_commit_hash[:7])
        return MergeResult(FAST_FORWARDED, merge_commit_hash, [])

    head_files = objects.read_commit(repo, head_commit_hash).snapshot
    plan, conflicts = _plan_merge(
        repo,
        objects.read_commit(repo, split_hash).snapshot,
        head_files,
        objects.read_commit(repo, merge_commit_hash).snapshot,
    )
    if not plan:
        raise EmptyStagingArea()

    workdir.guard_overwrites(repo, {
        name: objects.blob_id(name, content) if content is not None else None
        for name, content in plan.items()
    }, head_files)

    _apply_plan(repo, plan)

    message = f"Merged {branch_to_merge} into {current_branch}."
    new_commit_hash = commit.create_commit(repo, message, extra_parents=(merge_commit_hash,), now=now)
    logger.info("Merged {} into {} as {} ({} conflicts)", branch_to_merge, current_branch,
                new_commit_hash[:7], len(conflicts))
    return MergeResult(MERGED, new_commit_hash, conflicts)


def _plan_merge(repo, split_files, head_files, merge_files):
    """
    Decide what the working directory must hold for every file the merge changes.

    Returns ({name: bytes to write, or None to remove}, [conflicting names]).
    Files the merge leaves as they are on the current branch are not in the plan.
    """
    plan = {}
    conflicts = []
    for file_path, outcome in diff_utils.classify(split_files, head_files, merge_files).items():
        if outcome == diff_utils.TAKE_GIVEN:
            plan[file_path] = objects.read_blob(repo, merge_files[file_path])
        elif outcome == diff_utils.REMOVE:
            plan[file_path] = None
        elif outcome == diff_utils.CONFLICT:
            conflicts.append(file_path)
            plan[file_path] = diff_utils.conflict_contents(
                _read_version(repo, head_files.get(file_path)),
                _read_version(repo, merge_files.get(file_path)),
            )
        logger.debug("{}: {}", file_path, outcome)
    return plan, conflicts


def _read_version(repo, blob_hash):
    if blob_hash is None:
        return None
    return objects.read_blob(repo, blob_hash)


def _apply_plan(repo, plan):
    for file_path, content in sorted(plan.items()):
        if content is None:
            index.stage_remove(repo, file_path)
        else:
            repo.work.write(file_path, content)
            index.stage_add(repo, file_path, content)
