# What it does: Answers ancestry questions about the commit DAG: how far back every ancestor of a commit lies, and where two branches split
# How it does: A breadth-first search over every parent edge (both parents of a merge) records each commit the first time it is reached, together with its hop distance. The split point is then a pure function of two such maps
# What data structure it uses: Queue (BFS frontier), ordered Dictionary (commit id -> hop distance, in visiting order)

from collections import deque
from loguru import logger

from . import objects

ANCESTOR = 'ancestor'
FAST_FORWARD = 'fast-forward'
SPLIT = 'split'


def ancestor_depths(repo, start):
    """
    Returns {commit_id: hops} for `start` and all of its ancestors.

    The mapping is ordered by BFS visiting order, parents in parent-list
    order, so earlier entries are never farther away than later ones.
    """
    depths = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for parent in objects.read_commit(repo, current).parents:
            if parent not in depths:
                depths[parent] = depths[current] + 1
                queue.append(parent)
    return depths


def find_split_point(current_depths, given_depths):
    # First common entry in BFS order is the nearest one to the current tip
    for sha1 in current_depths:
        if sha1 in given_depths:
            return sha1
    return None


def relate(repo, current, given):
    """
    Classify how the given tip relates to the current tip.

    Returns (ANCESTOR, None) when nothing needs merging, (FAST_FORWARD, None)
    when the current tip is behind the given one, and (SPLIT, split_id) otherwise.
    """
    current_depths = ancestor_depths(repo, current)
    if given in current_depths:
        return ANCESTOR, None

    given_depths = ancestor_depths(repo, given)
    if current in given_depths:
        return FAST_FORWARD, None

    split = find_split_point(current_depths, given_depths)
    logger.debug("Split point of {} and {} is {}", current[:7], given[:7], split[:7] if split else None)
    return SPLIT, split
