# What it does: Manages the object database, handling the storage and retrieval of all blobs and commits
# How it does: It implements a content-addressed storage system. `hash_object` saves content and returns its hash. `read_object` retrieves content using its hash. Commits are written as small text records whose hash covers every field
# What data structure it uses: Hash Table / Dictionary (the entire object store is a content-addressed dictionary where the SHA-1 hash is the key), Directed Acyclic Graph (commits point at their parents)

import hashlib
import zlib
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Tuple

from loguru import logger

from .errors import NotFound, AmbiguousReference, NoSuchCommit

OBJECT_AREAS = {'blob': 'blobs', 'commit': 'commits'}

# Commit dates are always rendered in one fixed zone
COMMIT_TZ = timezone(timedelta(hours=-8))
EPOCH = datetime.fromtimestamp(0, timezone.utc)
INITIAL_MESSAGE = 'initial commit'


def format_timestamp(moment):
    local = moment.astimezone(COMMIT_TZ)
    return f"{local:%a %b} {local.day} {local:%H:%M:%S %Y %z}"


def hash_object(repo, content, obj_type, name=None, write=True): # Hashes content and optionally writes it as an object of the given type ('blob', 'commit')
    header = f'{obj_type} {len(content)}'
    if name is not None:
        header += f' {name}'
    data = header.encode() + b'\0' + content

    sha1 = hashlib.sha1(data).hexdigest()

    if write:
        key = f'{OBJECT_AREAS[obj_type]}/{sha1}'
        if not repo.meta.exists(key):
            repo.meta.write(key, zlib.compress(data))
            logger.debug("Stored {} {}", obj_type, sha1[:7])

    return sha1


def read_object(repo, sha1, obj_type): # Reads an object by its SHA-1 hash and returns its content
    key = f'{OBJECT_AREAS[obj_type]}/{sha1}'
    if not repo.meta.exists(key):
        raise NotFound(f"Object not found: {sha1}")

    data = zlib.decompress(repo.meta.read(key))
    header, _, content = data.partition(b'\0')
    stored_type = header.decode().split(' ', 1)[0]
    if stored_type != obj_type:
        raise TypeError(f"Object {sha1} is a {stored_type}, not a {obj_type}")
    return content


def blob_id(name, content): # Identity of one file version: hash of its name and bytes
    return hash_object(None, content, 'blob', name=name, write=False)


def write_blob(repo, name, content):
    return hash_object(repo, content, 'blob', name=name)


def read_blob(repo, sha1):
    return read_object(repo, sha1, 'blob')


@dataclass(frozen=True)
class Commit:
    """
    Immutable commit record.

    Attributes:
        message: Log message
        timestamp: Creation time, already rendered (see format_timestamp)
        parents: Full ids of the parent commits: none for the root, two for merges
        snapshot: Tracked file name -> blob id
    """

    message: str
    timestamp: str
    parents: Tuple[str, ...] = ()
    snapshot: Dict[str, str] = field(default_factory=dict)

    @property
    def is_merge(self):
        return len(self.parents) > 1

    def serialize(self) -> bytes:
        lines = [f'date {self.timestamp}']
        for parent in self.parents:
            lines.append(f'parent {parent}')
        for name in sorted(self.snapshot):
            lines.append(f'file {self.snapshot[name]} {name}')
        lines.append('')
        lines.append(self.message)
        return '\n'.join(lines).encode()

    @classmethod
    def parse(cls, content: bytes) -> "Commit":
        header, _, message = content.decode().partition('\n\n')
        timestamp = None
        parents = []
        snapshot = {}
        for line in header.splitlines():
            key, value = line.split(' ', 1)
            if key == 'date':
                timestamp = value
            elif key == 'parent':
                parents.append(value)
            elif key == 'file':
                sha1, name = value.split(' ', 1)
                snapshot[name] = sha1
            else:
                raise ValueError(f'Unknown field {key}')
        return cls(message=message, timestamp=timestamp, parents=tuple(parents), snapshot=snapshot)


def root_commit() -> Commit:
    return Commit(message=INITIAL_MESSAGE, timestamp=format_timestamp(EPOCH))


def commit_id(commit: Commit) -> str: # Covers message, date, parents and snapshot, so different commits never share an id
    return hash_object(None, commit.serialize(), 'commit', write=False)


def write_commit(repo, commit: Commit) -> str:
    return hash_object(repo, commit.serialize(), 'commit')


def read_commit(repo, sha1) -> Commit:
    return Commit.parse(read_object(repo, sha1, 'commit'))


def iter_commit_ids(repo):
    return iter(repo.meta.list(OBJECT_AREAS['commit']))


def find_by_prefix(repo, prefix) -> Optional[str]:
    """
    Resolve a possibly abbreviated commit id.

    Returns the unique stored id starting with `prefix`, None when nothing
    matches, and raises AmbiguousReference when several commits match.
    """
    matches = [sha1 for sha1 in iter_commit_ids(repo) if sha1.startswith(prefix)]
    if len(matches) > 1:
        raise AmbiguousReference(f"Commit id prefix '{prefix}' is ambiguous.")
    return matches[0] if matches else None


def resolve_commit(repo, prefix): # Like find_by_prefix, but a miss is an error
    sha1 = find_by_prefix(repo, prefix) if prefix else None
    if sha1 is None:
        raise NoSuchCommit()
    return sha1
