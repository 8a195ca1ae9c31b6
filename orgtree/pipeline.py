from collections import Counter

from orgtree import log
from orgtree.counting import count_descendants
from orgtree.enrich import enrich_records
from orgtree.tree import build_tree


def find_orphans(records):
    """Ids of records whose parentId points at no record in the list."""
    ids = {item["id"] for item in records}
    return [
        item["id"]
        for item in records
        if item.get("parentId") is not None and item["parentId"] not in ids
    ]


def find_duplicate_ids(records):
    seen = Counter(item["id"] for item in records)
    return [uid for uid, n in seen.items() if n > 1]


def process_records(records):
    """
    records -> tree -> descendant counts -> enriched copies of the records.

    Orphans and duplicate ids are reported but not fixed: orphans keep
    totalDescendants = 0 and are left out of every manager's total.
    """
    records = list(records)

    orphans = find_orphans(records)
    if orphans:
        log.warn(f"{len(orphans)} record(s) report to a missing manager and are left out of the counts: {orphans}")

    duplicates = find_duplicate_ids(records)
    if duplicates:
        log.warn(f"Duplicate ids found (last count wins): {duplicates}")

    tree = build_tree(records)
    if len(tree.roots) > 1:
        log.warn("Multiple roots detected. The chart will have multiple top-level trees.")

    counts = count_descendants(tree)
    log.info(f"Counted descendants for {len(counts)} of {len(records)} record(s) from {len(tree.roots)} root(s)")

    return enrich_records(records, counts)
