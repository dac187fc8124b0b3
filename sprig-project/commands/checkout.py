# The command: sprig checkout -- <file> | sprig checkout <commit> -- <file> | sprig checkout <branch>
# What it does: Restores one file from a commit, OR switches branches.
# How it does:
#   - With a file: looks the name up in the commit's snapshot (the current tip when no commit is given) and overwrites the working copy. Nothing is staged.
#   - With a branch: checks nothing unsaved would be overwritten, replaces the working directory with the branch tip's snapshot, clears the staging area and points HEAD at the branch.
# What data structure it uses: List (argument forms), Dictionary (snapshots), Hash Table (object store lookup).

from utils import repository, objects, workdir
from utils.errors import UsageError, NoSuchBranch, AlreadyOnBranch


def checkout_file(repo, name, commit_prefix=None):
    if commit_prefix is None:
        commit_hash = repository.get_head_commit(repo)
    else:
        commit_hash = objects.resolve_commit(repo, commit_prefix)
    workdir.checkout_file(repo, commit_hash, name)


def checkout_branch(repo, branch_name):
    target_hash = repository.get_branch_commit(repo, branch_name)
    if target_hash is None:
        raise NoSuchBranch("No such branch exists.")
    if branch_name == repository.get_current_branch(repo):
        raise AlreadyOnBranch()
    workdir.checkout_commit(repo, target_hash, branch=branch_name)


def run(args):
    targets = args.targets
    if len(targets) == 2 and targets[0] == '--':
        checkout_file(repository.open_repo(), targets[1])
    elif len(targets) == 3 and targets[1] == '--':
        checkout_file(repository.open_repo(), targets[2], commit_prefix=targets[0])
    elif len(targets) == 1 and targets[0] != '--':
        checkout_branch(repository.open_repo(), targets[0])
    else:
        raise UsageError()
