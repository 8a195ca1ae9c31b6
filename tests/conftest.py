import copy

import pytest

from orgtree.sample_data import SAMPLE_RECORDS


@pytest.fixture
def sample_records():
    """Fresh copy of the design team so tests can't leak mutations."""
    return copy.deepcopy(SAMPLE_RECORDS)


@pytest.fixture
def chain():
    """Builds r -> c1 -> ... -> cn for a given n."""

    def make(n):
        records = [{"id": "r"}]
        parent = "r"
        for i in range(1, n + 1):
            records.append({"id": f"c{i}", "parentId": parent})
            parent = f"c{i}"
        return records

    return make
