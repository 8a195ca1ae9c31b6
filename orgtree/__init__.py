"""Org chart data pipeline: flat reporting records -> tree -> descendant counts."""

from orgtree.counting import count_descendants, count_subtree
from orgtree.enrich import enrich_records
from orgtree.errors import CyclicHierarchyError, OrgTreeError, RecordLoadError
from orgtree.pipeline import process_records
from orgtree.tree import Tree, build_tree

__all__ = [
    "Tree",
    "build_tree",
    "count_descendants",
    "count_subtree",
    "enrich_records",
    "process_records",
    "OrgTreeError",
    "CyclicHierarchyError",
    "RecordLoadError",
]
