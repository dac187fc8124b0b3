# What it does: Gives the engine a flat byte store for the `.sprig` metadata and for the working directory, so no other module builds file paths
# How it does: Keys look like "area/name" (or just "name" for the top level). FileStorage maps them onto a directory, MemoryStorage onto a dict
# What data structure it uses: Hash Table / Dictionary (MemoryStorage), the file system tree (FileStorage)

import os


class FileStorage:
    """Storage rooted at a directory on disk."""

    def __init__(self, base_dir):
        self.base_dir = os.path.abspath(base_dir)

    def _path(self, key):
        return os.path.join(self.base_dir, *key.split('/')) if key else self.base_dir

    def exists(self, key):
        return os.path.isfile(self._path(key))

    def has_area(self, area=''):
        return os.path.isdir(self._path(area))

    def make_area(self, area=''):
        os.makedirs(self._path(area), exist_ok=True)

    def read(self, key):
        with open(self._path(key), 'rb') as f:
            return f.read()

    def write(self, key, data):
        path = self._path(key)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'wb') as f:
            f.write(data)

    def delete(self, key):
        path = self._path(key)
        if os.path.isfile(path):
            os.remove(path)

    def list(self, area=''): # Plain files directly inside `area`, sorted; subdirectories are skipped
        path = self._path(area)
        if not os.path.isdir(path):
            return []
        return sorted(name for name in os.listdir(path) if os.path.isfile(os.path.join(path, name)))

    def __repr__(self):
        return f"FileStorage({self.base_dir!r})"


class MemoryStorage:
    """Storage kept entirely in memory, used by tests."""

    def __init__(self):
        self._blobs = {}
        self._areas = {''}

    def exists(self, key):
        return key in self._blobs

    def has_area(self, area=''):
        return area in self._areas

    def make_area(self, area=''):
        parts = area.split('/')
        for i in range(1, len(parts) + 1):
            self._areas.add('/'.join(parts[:i]))

    def read(self, key):
        try:
            return self._blobs[key]
        except KeyError:
            raise FileNotFoundError(key) from None

    def write(self, key, data):
        area, _, _ = key.rpartition('/')
        self.make_area(area)
        self._blobs[key] = bytes(data)

    def delete(self, key):
        self._blobs.pop(key, None)

    def list(self, area=''):
        prefix = f'{area}/' if area else ''
        names = []
        for key in self._blobs:
            if key.startswith(prefix) and '/' not in key[len(prefix):]:
                names.append(key[len(prefix):])
        return sorted(names)

    def __repr__(self):
        return f"MemoryStorage({len(self._blobs)} entries)"
