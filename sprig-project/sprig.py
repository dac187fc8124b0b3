import argparse
import sys

from loguru import logger

from commands import (
    init, add, commit, rm, log, find, status,
    checkout, branch, reset, merge, config as config_command
)
from utils import repository, config, lock
from utils.errors import SprigError, UsageError, InvalidConfig
from utils.logger import configure_logging


class SprigArgumentParser(argparse.ArgumentParser):
    # Wrong operand counts are reported like every other Sprig failure
    def error(self, message):
        logger.debug("argparse: {}", message)
        raise UsageError()


# The main entry point for the Sprig version control system
def build_parser():
    # The main parser
    parser = SprigArgumentParser(prog="sprig", description="Sprig: a small version control system.")
    subparsers = parser.add_subparsers(dest="command", parser_class=SprigArgumentParser)

    # Command: init
    init_parser = subparsers.add_parser("init", help="Initialize a new, empty repository.")
    init_parser.set_defaults(func=init.run)

    # Command: add
    add_parser = subparsers.add_parser("add", help="Stage a file for the next commit.")
    add_parser.add_argument("file", help="File to add.")
    add_parser.set_defaults(func=add.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record the staged changes.")
    commit_parser.add_argument("message", nargs="?", default="", help="Commit message.")
    commit_parser.set_defaults(func=commit.run)

    # Command: rm
    rm_parser = subparsers.add_parser("rm", help="Unstage a file, or stage a tracked file for removal.")
    rm_parser.add_argument("file", help="File to remove.")
    rm_parser.set_defaults(func=rm.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the current branch's history.")
    log_parser.set_defaults(func=log.run)

    # Command: global-log
    global_log_parser = subparsers.add_parser("global-log", help="Show every commit ever made.")
    global_log_parser.set_defaults(func=log.run_global)

    # Command: find
    find_parser = subparsers.add_parser("find", help="Print the ids of commits with the given message.")
    find_parser.add_argument("message", help="Exact commit message.")
    find_parser.set_defaults(func=find.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Show the working tree status.")
    status_parser.set_defaults(func=status.run)

    # Command: checkout (arguments are split by hand, see parse_args)
    checkout_parser = subparsers.add_parser(
        "checkout", help="Restore a file, or switch branches.",
        usage="sprig checkout [<commit>] -- <file> | sprig checkout <branch>")
    checkout_parser.add_argument("targets", nargs="*")
    checkout_parser.set_defaults(func=checkout.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", help="List or create branches.")
    branch_parser.add_argument("name", nargs="?", help="The name of the branch to create.")
    branch_parser.set_defaults(func=branch.run)

    # Command: rm-branch
    rm_branch_parser = subparsers.add_parser("rm-branch", help="Delete a branch pointer.")
    rm_branch_parser.add_argument("name", help="The branch to delete.")
    rm_branch_parser.set_defaults(func=branch.run_remove)

    # Command: reset
    reset_parser = subparsers.add_parser("reset", help="Move the current branch to a commit.")
    reset_parser.add_argument("commit", help="Commit id (may be abbreviated).")
    reset_parser.set_defaults(func=reset.run)

    # Command: merge
    merge_parser = subparsers.add_parser("merge", help="Merge a branch into the current branch.")
    merge_parser.add_argument("branch", help="The branch to merge.")
    merge_parser.set_defaults(func=merge.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a repository configuration key.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.loglevel).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config_command.run)

    return parser, subparsers


def parse_args(argv):
    parser, subparsers = build_parser()
    if not argv:
        raise UsageError("Please enter a command.")
    if argv[0] not in subparsers.choices:
        raise UsageError("No command with that name exists.")
    # argparse would swallow the "--" that separates a commit id from a file name
    if argv[0] == "checkout":
        return argparse.Namespace(command="checkout", targets=list(argv[1:]), func=checkout.run)
    return parser.parse_args(argv)


# Commands that must still run while .sprig/config is broken, so it can be repaired
REPAIR_COMMANDS = ("config",)


def tolerate_bad_config(args, read_setting, fallback):
    try:
        return read_setting()
    except InvalidConfig:
        if args.command not in REPAIR_COMMANDS:
            raise
        return fallback


def run_command(args):
    repo_root = repository.find_repo_root()
    if args.command == "init" or repo_root is None:
        args.func(args)
        return

    repo = repository.Repository.at(repo_root)
    if tolerate_bad_config(args, lambda: config.locking_enabled(repo), True):
        with lock.repository_lock(repo):
            args.func(args)
    else:
        args.func(args)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)

    try:
        configure_logging()
        args = parse_args(argv)

        repo_root = repository.find_repo_root()
        repo = repository.Repository.at(repo_root) if repo_root else None
        level = tolerate_bad_config(args, lambda: config.get_log_level(repo), None)
        configure_logging(level)

        run_command(args)
    except SprigError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
