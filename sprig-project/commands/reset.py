# The command: sprig reset <commit>
# What it does: Moves the current branch to an arbitrary commit and makes the working directory match it
# How it does: It resolves the (possibly abbreviated) commit id, then runs the same guarded working-directory sync as a branch checkout, except that HEAD stays put and the current branch's pointer moves instead
# What data structure it uses: Dictionary (snapshots being synced), pointer update on the commit DAG

from utils import repository, objects, workdir


def reset(repo, commit_prefix):
    target_hash = objects.resolve_commit(repo, commit_prefix)
    workdir.checkout_commit(repo, target_hash)
    return target_hash


def run(args):
    reset(repository.open_repo(), args.commit)
