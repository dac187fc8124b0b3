# What it does: Defines every failure a Sprig command can report, grouped into four families (usage, state, reference, overwrite guard)
# How it does: Each class carries the exact line printed to the user and the exit status `sprig.main` terminates with
# What data structure it uses: Class hierarchy (a tree rooted at SprigError)


class SprigError(Exception):
    """Base exception for all Sprig failures."""

    exit_code = 1
    default_message = "Sprig command failed."

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class UsageError(SprigError):
    exit_code = 2
    default_message = "Incorrect operands."


class StateError(SprigError):
    exit_code = 3


class RefError(SprigError):
    exit_code = 4


class OverwriteGuardError(SprigError):
    exit_code = 5
    default_message = "There is an untracked file in the way; delete it, or add and commit it first."


# Usage
class EmptyMessage(UsageError):
    default_message = "Please enter a commit message."


# State
class NotInitialized(StateError):
    default_message = "Not in an initialized Sprig directory."


class AlreadyInitialized(StateError):
    default_message = "A Sprig version-control system already exists in the current directory."


class EmptyStagingArea(StateError):
    default_message = "No changes added to the commit."


class UncommittedChanges(StateError):
    default_message = "You have uncommitted changes."


class NothingToRemove(StateError):
    default_message = "No reason to remove the file."


class DuplicateBranch(StateError):
    default_message = "A branch with that name already exists."


class CannotRemoveCurrent(StateError):
    default_message = "Cannot remove the current branch."


class MergeWithSelf(StateError):
    default_message = "Cannot merge a branch with itself."


class AlreadyOnBranch(StateError):
    default_message = "No need to checkout the current branch."


class InvalidConfig(StateError):
    default_message = "The repository configuration is invalid."


# References
class NotFound(RefError):
    default_message = "Object not found."


class NoSuchBranch(RefError):
    default_message = "A branch with that name does not exist."


class NoSuchCommit(RefError):
    default_message = "No commit with that id exists."


class AmbiguousReference(RefError):
    default_message = "Commit id prefix is ambiguous."


class FileNotInCommit(RefError):
    default_message = "File does not exist in that commit."


class MissingFile(RefError):
    default_message = "File does not exist."


class NoMatchingCommit(RefError):
    default_message = "Found no commit with that message."


# Overwrite guard
class UntrackedFileInTheWay(OverwriteGuardError):
    pass
