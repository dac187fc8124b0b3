# The command: sprig log | sprig global-log
# What it does: Displays the commit history. `log` walks back from the current branch's tip; `global-log` lists every commit ever made, in id order
# How it does: `log` starts with the tip commit and follows the first parent of each commit until it reaches the root, which has none. Merge commits show both parents, but only the first is followed
# What data structure it uses: It performs a Graph Traversal (specifically, a linear traversal up the first-parent chain) on the Directed Acyclic Graph (DAG) formed by the commits

from utils import repository, objects


def history(repo): # Yields (hash, commit) from the current tip back to the root
    visited = set()
    commit_hash = repository.get_head_commit(repo)
    while commit_hash and commit_hash not in visited:
        visited.add(commit_hash)
        commit = objects.read_commit(repo, commit_hash)
        yield commit_hash, commit
        commit_hash = commit.parents[0] if commit.parents else None


def format_commit(commit_hash, commit):
    lines = ["===", f"commit {commit_hash}"]
    if commit.is_merge:
        lines.append("Merge: " + " ".join(parent[:7] for parent in commit.parents))
    lines.append(f"Date: {commit.timestamp}")
    lines.append(commit.message)
    return "\n".join(lines) + "\n"


def run(args):
    repo = repository.open_repo()
    for commit_hash, commit in history(repo):
        print(format_commit(commit_hash, commit))


def run_global(args):
    repo = repository.open_repo()
    for commit_hash in objects.iter_commit_ids(repo):
        print(format_commit(commit_hash, objects.read_commit(repo, commit_hash)))
