import copy

import pytest

from orgtree.enrich import enrich_records
from orgtree.errors import CyclicHierarchyError
from orgtree.pipeline import find_duplicate_ids, find_orphans, process_records

EXPECTED = {
    "0": 11, "1": 3, "2": 4, "3": 1, "8": 2,
    "4": 0, "5": 0, "6": 0, "7": 0, "9": 0, "10": 0, "11": 0,
}


def test_enrich_defaults_missing_to_zero():
    records = [{"id": "a", "name": "A"}, {"id": "b", "parentId": "z"}]
    out = enrich_records(records, {"a": 3})

    assert out == [
        {"id": "a", "name": "A", "totalDescendants": 3},
        {"id": "b", "parentId": "z", "totalDescendants": 0},
    ]


def test_enrich_returns_copies():
    records = [{"id": "a"}]
    out = enrich_records(records, {"a": 1})
    assert out[0] is not records[0]
    assert "totalDescendants" not in records[0]


def test_process_sample(sample_records):
    data = process_records(sample_records)
    assert {item["id"]: item["totalDescendants"] for item in data} == EXPECTED


def test_process_keeps_order_and_fields(sample_records):
    data = process_records(sample_records)

    assert len(data) == len(sample_records)
    for before, after in zip(sample_records, data):
        assert after["id"] == before["id"]
        assert after["name"] == before["name"]
        assert after["imageUrl"] == before["imageUrl"]


def test_process_does_not_mutate_input(sample_records):
    snapshot = copy.deepcopy(sample_records)
    process_records(sample_records)
    assert sample_records == snapshot


def test_process_is_idempotent(sample_records):
    assert process_records(sample_records) == process_records(sample_records)


def test_process_empty():
    assert process_records([]) == []


def test_process_reports_orphans(capsys):
    data = process_records([{"id": "A"}, {"id": "B", "parentId": "A"}, {"id": "C", "parentId": "Z"}])

    assert [item["totalDescendants"] for item in data] == [1, 0, 0]
    assert "[WARN]" in capsys.readouterr().out


def test_process_cycle_fails_fast():
    with pytest.raises(CyclicHierarchyError):
        process_records([{"id": "a"}, {"id": "b", "parentId": "a"}, {"id": "a", "parentId": "b"}])


def test_find_orphans():
    records = [{"id": "A"}, {"id": "C", "parentId": "Z"}, {"id": "D", "parentId": "C"}]
    assert find_orphans(records) == ["C"]


def test_find_duplicate_ids(sample_records):
    assert find_duplicate_ids(sample_records) == []
    assert find_duplicate_ids(sample_records + [{"id": "4"}]) == ["4"]
