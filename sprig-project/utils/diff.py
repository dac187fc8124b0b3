# What it does: Decides, file by file, how a three-way merge resolves
# How it does: States are {name: blob_id} dictionaries. `classify` looks at the split point, current and given versions of each name and picks one outcome; `conflict_contents` builds the marker-delimited file for names both sides changed differently
# What data structure it uses: Dictionary (for states), Set (for the union of names across the three states)

UNCHANGED = 'unchanged'
TAKE_GIVEN = 'take-given'
REMOVE = 'remove'
CONFLICT = 'conflict'

CONFLICT_HEAD = b'<<<<<<< HEAD\n'
CONFLICT_SEPARATOR = b'=======\n'
CONFLICT_END = b'>>>>>>>\n'


def classify_file(split_hash, current_hash, given_hash):
    """Merge outcome for one name; None means the name is absent from that state."""
    # Both sides agree (same edit, same deletion, or untouched)
    if current_hash == given_hash:
        return UNCHANGED
    # Only the given branch moved away from the split point
    if current_hash == split_hash:
        return TAKE_GIVEN if given_hash is not None else REMOVE
    # Only the current branch moved
    if given_hash == split_hash:
        return UNCHANGED
    return CONFLICT


def classify(split, current, given): # Returns {name: outcome} for every name in any of the three states
    names = set(split) | set(current) | set(given)
    return {
        name: classify_file(split.get(name), current.get(name), given.get(name))
        for name in sorted(names)
    }


def conflict_contents(current_content, given_content):
    return (CONFLICT_HEAD
            + (current_content or b'')
            + CONFLICT_SEPARATOR
            + (given_content or b'')
            + CONFLICT_END)
