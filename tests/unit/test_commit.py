# Unit tests for commit, log, find and branch commands

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'sprig-project'))

from utils import objects, index, repository
from utils.errors import EmptyStagingArea, EmptyMessage, MissingFile, NoMatchingCommit, DuplicateBranch
from commands import add, commit, log, find, branch, rm, checkout, merge
from conftest import commit_file, write_file


class TestAdd:

    def test_missing_file(self, memory_repo):
        with pytest.raises(MissingFile) as excinfo:
            add.add_file(memory_repo, 'ghost.txt')
        assert str(excinfo.value) == "File does not exist."

    def test_add_stages_bytes(self, memory_repo):
        write_file(memory_repo, 'a.txt', 'hello')
        add.add_file(memory_repo, 'a.txt')
        assert index.read_additions(memory_repo) == {'a.txt': b'hello'}


class TestCreateCommit:

    def test_commit_advances_branch(self, memory_repo, clock):
        root = repository.get_head_commit(memory_repo)
        commit_hash = commit_file(memory_repo, 'a.txt', 'hello', 'add a', now=clock())

        assert repository.get_head_commit(memory_repo) == commit_hash
        created = objects.read_commit(memory_repo, commit_hash)
        assert created.parents == (root,)
        assert created.message == 'add a'
        assert objects.read_blob(memory_repo, created.snapshot['a.txt']) == b'hello'
        assert index.is_empty(memory_repo)

    def test_snapshot_inherits_and_removes(self, memory_repo, clock):
        commit_file(memory_repo, 'a.txt', 'a', 'add a', now=clock())
        commit_file(memory_repo, 'b.txt', 'b', 'add b', now=clock())
        rm.remove_file(memory_repo, 'a.txt')
        write_file(memory_repo, 'c.txt', 'c')
        add.add_file(memory_repo, 'c.txt')

        commit_hash = commit.create_commit(memory_repo, 'swap', now=clock())

        assert sorted(objects.read_commit(memory_repo, commit_hash).snapshot) == ['b.txt', 'c.txt']

    def test_nothing_staged(self, memory_repo):
        commit_file(memory_repo, 'a.txt', 'same', 'first')
        head = repository.get_head_commit(memory_repo)
        add.add_file(memory_repo, 'a.txt')

        with pytest.raises(EmptyStagingArea) as excinfo:
            commit.create_commit(memory_repo, 'again')

        assert str(excinfo.value) == "No changes added to the commit."
        assert repository.get_head_commit(memory_repo) == head

    @pytest.mark.parametrize('message', ['', '   '])
    def test_blank_message(self, memory_repo, message):
        write_file(memory_repo, 'a.txt', 'x')
        add.add_file(memory_repo, 'a.txt')
        with pytest.raises(EmptyMessage):
            commit.create_commit(memory_repo, message)
        # The staging area survives a rejected commit
        assert not index.is_empty(memory_repo)

    def test_extra_parents(self, memory_repo, clock):
        other = repository.get_head_commit(memory_repo)
        write_file(memory_repo, 'a.txt', 'x')
        add.add_file(memory_repo, 'a.txt')
        commit_hash = commit.create_commit(memory_repo, 'merge-ish', extra_parents=(other,), now=clock())
        assert objects.read_commit(memory_repo, commit_hash).parents == (other, other)


class TestLog:

    def test_initial_log(self, memory_repo):
        entries = list(log.history(memory_repo))
        assert len(entries) == 1
        commit_hash, root = entries[0]
        assert root.message == 'initial commit'
        assert log.format_commit(commit_hash, root) == (
            f"===\ncommit {commit_hash}\nDate: Wed Dec 31 16:00:00 1969 -0800\ninitial commit\n")

    def test_history_newest_first(self, memory_repo, clock):
        first = commit_file(memory_repo, 'a.txt', '1', 'one', now=clock())
        second = commit_file(memory_repo, 'a.txt', '2', 'two', now=clock())
        hashes = [commit_hash for commit_hash, _ in log.history(memory_repo)]
        assert hashes[:2] == [second, first]
        assert len(hashes) == 3

    def test_history_follows_first_parent_through_merge(self, memory_repo, clock):
        root = repository.get_head_commit(memory_repo)
        base = commit_file(memory_repo, 'f.txt', 'base', 'base', now=clock())
        branch.create_branch(memory_repo, 'other')
        ahead = commit_file(memory_repo, 'm.txt', 'm', 'master work', now=clock())
        checkout.checkout_branch(memory_repo, 'other')
        side = commit_file(memory_repo, 'o.txt', 'o', 'other work', now=clock())
        checkout.checkout_branch(memory_repo, 'master')

        merged = merge.merge_branch(memory_repo, 'other', now=clock()).commit

        hashes = [commit_hash for commit_hash, _ in log.history(memory_repo)]
        assert hashes == [merged, ahead, base, root]
        assert side not in hashes

    def test_merge_line(self):
        merge_commit = objects.Commit(message='Merged a into b.', timestamp='T',
                                      parents=('1234567abc', '89abcdef00'))
        assert log.format_commit('f' * 40, merge_commit) == (
            f"===\ncommit {'f' * 40}\nMerge: 1234567 89abcde\nDate: T\nMerged a into b.\n")

    def test_global_log_lists_every_commit(self, memory_repo, clock, capsys, monkeypatch):
        commit_file(memory_repo, 'a.txt', '1', 'one', now=clock())
        repository.create_branch(memory_repo, 'side', repository.get_head_commit(memory_repo))
        commit_file(memory_repo, 'a.txt', '2', 'two', now=clock())
        monkeypatch.setattr(repository, 'open_repo', lambda: memory_repo)

        log.run_global(None)

        assert capsys.readouterr().out.count('===\ncommit ') == 3


class TestFind:

    def test_finds_all_matches(self, memory_repo, clock):
        first = commit_file(memory_repo, 'a.txt', '1', 'same message', now=clock())
        second = commit_file(memory_repo, 'a.txt', '2', 'same message', now=clock())
        assert sorted(find.find_commits(memory_repo, 'same message')) == sorted([first, second])

    def test_exact_match_only(self, memory_repo, clock):
        commit_file(memory_repo, 'a.txt', '1', 'same message', now=clock())
        with pytest.raises(NoMatchingCommit) as excinfo:
            find.find_commits(memory_repo, 'same')
        assert str(excinfo.value) == "Found no commit with that message."


class TestBranch:

    def test_create_points_at_head(self, memory_repo, clock):
        head = commit_file(memory_repo, 'a.txt', '1', 'one', now=clock())
        assert branch.create_branch(memory_repo, 'feature') == head
        assert repository.get_branch_commit(memory_repo, 'feature') == head
        assert repository.get_current_branch(memory_repo) == 'master'

    def test_create_duplicate(self, memory_repo):
        with pytest.raises(DuplicateBranch) as excinfo:
            branch.create_branch(memory_repo, 'master')
        assert str(excinfo.value) == "A branch with that name already exists."

    def test_remove_keeps_commits(self, memory_repo, clock):
        branch.create_branch(memory_repo, 'feature')
        commit_hash = commit_file(memory_repo, 'a.txt', '1', 'one', now=clock())
        branch.remove_branch(memory_repo, 'feature')
        assert repository.get_all_branches(memory_repo) == ['master']
        assert objects.read_commit(memory_repo, commit_hash).message == 'one'
