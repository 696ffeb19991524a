#!filepath: tests/observability/test_ledger.py

from seqlaws.observability.ledger import OperationCounts


def test_counts_start_at_zero():
    c = OperationCounts()

    assert c.snapshot() == {"index_after": 0, "index_before": 0}
    assert c.total == 0


def test_reset():
    c = OperationCounts(index_after=4, index_before=2)
    assert c.total == 6

    c.reset()

    assert c.snapshot() == {"index_after": 0, "index_before": 0}
