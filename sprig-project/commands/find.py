# The command: sprig find <message>
# What it does: Prints the id of every commit whose message is exactly <message>, one per line

from utils import repository, objects
from utils.errors import NoMatchingCommit


def find_commits(repo, message):
    found = [
        commit_hash for commit_hash in objects.iter_commit_ids(repo)
        if objects.read_commit(repo, commit_hash).message == message
    ]
    if not found:
        raise NoMatchingCommit()
    return found


def run(args):
    repo = repository.open_repo()
    for commit_hash in find_commits(repo, args.message):
        print(commit_hash)
