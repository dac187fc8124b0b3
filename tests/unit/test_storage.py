# Unit tests for utils/storage.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'sprig-project'))

from utils.storage import FileStorage, MemoryStorage


@pytest.fixture(params=['file', 'memory'])
def storage(request, temp_dir):
    if request.param == 'file':
        return FileStorage(temp_dir)
    return MemoryStorage()


class TestStorage:
    # Both backends must behave the same way

    def test_write_then_read(self, storage):
        storage.write('commits/abc', b'payload')
        assert storage.exists('commits/abc')
        assert storage.read('commits/abc') == b'payload'

    def test_read_missing_raises(self, storage):
        with pytest.raises(FileNotFoundError):
            storage.read('nope')

    def test_delete_is_idempotent(self, storage):
        storage.write('f.txt', b'x')
        storage.delete('f.txt')
        storage.delete('f.txt')
        assert not storage.exists('f.txt')

    def test_list_only_direct_children(self, storage):
        storage.write('b.txt', b'')
        storage.write('a.txt', b'')
        storage.write('stage/inner.txt', b'')
        assert storage.list() == ['a.txt', 'b.txt']
        assert storage.list('stage') == ['inner.txt']

    def test_list_missing_area_is_empty(self, storage):
        assert storage.list('missing') == []

    def test_make_area(self, storage):
        storage.make_area('branches')
        assert storage.has_area('branches')
        assert storage.list('branches') == []


class TestFileStorage:

    def test_keys_map_to_files(self, temp_dir):
        storage = FileStorage(temp_dir)
        storage.write('commits/abc', b'1')
        assert os.path.isfile(os.path.join(temp_dir, 'commits', 'abc'))

    def test_list_skips_directories(self, temp_dir):
        storage = FileStorage(temp_dir)
        os.makedirs(os.path.join(temp_dir, '.sprig'))
        storage.write('f.txt', b'')
        assert storage.list() == ['f.txt']
