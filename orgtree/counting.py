from orgtree.errors import CyclicHierarchyError


def _walk(tree, start_id, counts):
    """
    Post-order walk from start_id, filling counts for every node below it
    and for start_id itself. Uses an explicit stack so deep reporting
    chains don't hit the recursion limit.
    """
    children_of = tree.children_of
    in_progress = set()
    # (node id, index of next child to visit, running total)
    stack = [[start_id, 0, 0]]
    in_progress.add(start_id)

    while stack:
        frame = stack[-1]
        node_id, next_child, total = frame
        children = children_of.get(node_id, [])

        if next_child < len(children):
            child = children[next_child]
            frame[1] += 1
            if child in in_progress:
                raise CyclicHierarchyError(child)
            stack.append([child, 0, 0])
            in_progress.add(child)
            continue

        stack.pop()
        in_progress.discard(node_id)
        counts[node_id] = total
        if stack:
            # the child itself plus everyone under it
            stack[-1][2] += total + 1

    return counts[start_id]


def count_subtree(tree, node_id):
    """Number of people below node_id (not counting node_id)."""
    return _walk(tree, node_id, {})


def count_descendants(tree):
    """
    Total descendants for every node reachable from a root.

    Roots get an entry under their own id, exactly like every node below
    them. Orphaned branches are never visited and get no entry.
    Raises CyclicHierarchyError if a root leads back into its own branch.
    """
    counts = {}
    for root in tree.roots:
        _walk(tree, root, counts)
    return counts
