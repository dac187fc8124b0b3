# The command: sprig branch [<branch-name>] | sprig rm-branch <branch-name>
# What it does: Creates a new branch pointer to the current commit, lists branches when no name is given, or deletes a branch pointer
# How it does: To create a branch, it takes the current tip's commit hash and writes it to `.sprig/branches/<branch-name>`. Deleting only removes that file, never any commit
# What data structure it uses: Map / Dictionary (conceptually, the `branches` directory maps branch names to commit hashes), List (to hold branch names for sorting and display)

from utils import repository


def create_branch(repo, name):
    head_commit_hash = repository.get_head_commit(repo)
    repository.create_branch(repo, name, head_commit_hash)
    return head_commit_hash


def remove_branch(repo, name):
    repository.delete_branch(repo, name)


def run(args):
    # With no arguments, lists all branches. With an argument, creates a new branch
    repo = repository.open_repo()

    if args.name:
        create_branch(repo, args.name)
    else:
        current_branch = repository.get_current_branch(repo)
        for branch in repository.get_all_branches(repo):
            if branch == current_branch:
                print(f"* {branch}")
            else:
                print(f"  {branch}")


def run_remove(args):
    remove_branch(repository.open_repo(), args.name)
