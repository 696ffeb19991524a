#!filepath: tests/checks/test_mutable_contract.py
import pytest

from seqlaws.checks import RecordingSink, check_mutable_collection
from seqlaws.core.containers import ArrayCollection
from seqlaws.utils.errors import CheckerMisuseError


class WriteLog(ArrayCollection):
    def __init__(self, values=()):
        super().__init__(values)
        self.writes = []

    def __setitem__(self, i, value):
        self.writes.append((i, value))
        super().__setitem__(i, value)


class DropsLastWrite(ArrayCollection):
    """最后一个位置的写入被丢弃"""

    def __setitem__(self, i, value):
        if i == len(self) - 1:
            return
        super().__setitem__(i, value)


@pytest.mark.contract
def test_round_trip_writes_source_then_reversed_source():
    c = WriteLog([1, 2, 3])

    sink = check_mutable_collection(c, [3, 2, 1], RecordingSink())

    assert sink.passed, sink.failures
    assert c.writes == [(0, 3), (1, 2), (2, 1), (0, 1), (1, 2), (2, 3)]
    assert c.to_list() == [1, 2, 3]


@pytest.mark.contract
def test_lost_write_is_detected():
    sink = check_mutable_collection(DropsLastWrite([0, 0, 0]), [1, 2, 3], RecordingSink())

    assert len(sink.failures) == 2
    assert sink.failures[0].actual == [1, 2, 0]
    assert sink.failures[1].actual == [3, 2, 0]


def test_length_mismatch_is_misuse_and_writes_nothing():
    c = WriteLog([1, 2, 3])

    with pytest.raises(CheckerMisuseError):
        check_mutable_collection(c, [1, 2], RecordingSink())

    assert c.writes == []


@pytest.mark.parametrize("source", [[1, 2, 1], [7], []])
def test_palindrome_is_misuse_and_writes_nothing(source):
    c = WriteLog(range(len(source)))

    with pytest.raises(CheckerMisuseError):
        check_mutable_collection(c, source, RecordingSink())

    assert c.writes == []
