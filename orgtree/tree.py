from dataclasses import dataclass, field


@dataclass
class Tree:
    """Adjacency view of a flat reporting list.

    roots:       ids with no manager, in the order they were first seen
    children_of: manager id -> direct report ids, in input order
    """

    roots: list = field(default_factory=list)
    children_of: dict = field(default_factory=dict)


def build_tree(records) -> Tree:
    """
    Single pass over the records:
    - no parentId -> root
    - otherwise   -> appended under children_of[parentId]

    A parentId that matches no record is kept as-is. Nothing under it is
    reachable from a root, so the whole branch drops out of the counts.
    Duplicate ids are not checked; every occurrence is appended.
    """
    tree = Tree()

    for item in records:
        parent_id = item.get("parentId")
        if parent_id is None:
            tree.roots.append(item["id"])
            continue
        tree.children_of.setdefault(parent_id, []).append(item["id"])

    return tree
