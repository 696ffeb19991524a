#!filepath: tests/checks/test_forward_contract.py
"""
Forward collection laws:

- 手动 index_after 遍历与 indices 一致
- 位置严格递增
- offset / limited offset / distance 与遍历一致
- 第二次遍历复现 expected
"""
import pytest

from seqlaws.checks import (
    RecordingSink,
    check_forward_collection,
    generic_distance,
    generic_index,
    generic_index_limited,
)
from seqlaws.core.containers import ArrayCollection, LinkedCollection
from seqlaws.core.interfaces import ForwardCollection


class ScrambledIndices(ArrayCollection):
    """indices 与 index_after 遍历不一致"""

    @property
    def indices(self):
        yield from [0, 2, 1][: len(self)]


class UnboundedLimit(ArrayCollection):
    """index_offset_limited 忽略 limit"""

    def index_offset_limited(self, i, n, limit):
        return self.index_offset(i, n)


class ZeroStepFails(ArrayCollection):
    """零步 limited offset 返回 None"""

    def index_offset_limited(self, i, n, limit):
        if n == 0:
            return None
        return super().index_offset_limited(i, n, limit)


class RepeatsLastIndex(ArrayCollection):
    """indices 在到达 end_index 后多产出一个位置"""

    @property
    def indices(self):
        n = len(self)
        yield from range(n)
        if n:
            yield n - 1


class NeverEnds(ForwardCollection):
    """index_after 每次跨两步，永远落不到 end_index"""

    start_index = 0
    end_index = 3

    def __getitem__(self, i):
        return i

    def index_after(self, i):
        return i + 2


def _messages(sink):
    return [f.message for f in sink.failures]


@pytest.mark.contract
@pytest.mark.parametrize("cls", [LinkedCollection, ArrayCollection])
def test_conforming_collections_pass(cls):
    sink = check_forward_collection(cls([10, 20, 30]), [10, 20, 30], RecordingSink())

    assert sink.passed, sink.failures


@pytest.mark.contract
@pytest.mark.parametrize("cls", [LinkedCollection, ArrayCollection])
def test_empty_collection_passes(cls):
    sink = check_forward_collection(cls([]), [], RecordingSink())

    assert sink.passed, sink.failures


@pytest.mark.contract
def test_single_element_collection_passes():
    sink = check_forward_collection(LinkedCollection(["x"]), ["x"], RecordingSink())

    assert sink.passed, sink.failures


@pytest.mark.contract
def test_scrambled_indices_are_detected():
    sink = check_forward_collection(ScrambledIndices([10, 20, 30]), [10, 20, 30], RecordingSink())

    messages = _messages(sink)
    assert "elements of indices don't match index_after results" in messages
    assert "second pass over indices doesn't match expectations" in messages


@pytest.mark.contract
def test_limited_offset_ignoring_limit_is_detected():
    sink = check_forward_collection(UnboundedLimit([1, 2, 3]), [1, 2, 3], RecordingSink())

    messages = _messages(sink)
    assert "limited offset passing the limit must return None" in messages
    # 其余定律仍然成立
    assert set(messages) == {"limited offset passing the limit must return None"}


@pytest.mark.contract
@pytest.mark.parametrize(
    "values, message",
    [
        ([1, 2], "Collection is shorter than expected: index_after reached end_index early"),
        ([1, 2, 3, 4], "Collection is longer than expected: index_after did not reach end_index"),
    ],
)
def test_count_mismatch_is_reported_without_raising(values, message):
    sink = check_forward_collection(LinkedCollection(values), [1, 2, 3], RecordingSink())

    assert not sink.passed
    assert message in _messages(sink)
    assert "elements don't match expectations" in _messages(sink)


@pytest.mark.contract
def test_index_after_skipping_end_index_terminates():
    """index_after 越过 end_index 时检查必须结束并报告"""
    sink = check_forward_collection(NeverEnds(), [0, 2, 4], RecordingSink())

    messages = _messages(sink)
    assert "Collection is longer than expected: index_after did not reach end_index" in messages
    assert "elements don't match expectations" in messages


@pytest.mark.contract
def test_zero_step_limited_offset_violation_is_reported():
    sink = check_forward_collection(ZeroStepFails([1, 2, 3]), [1, 2, 3], RecordingSink())

    messages = _messages(sink)
    assert "zero-step limited offset must return its starting position" in messages
    assert "zero-step limited offset at end_index must return end_index" in messages


@pytest.mark.contract
def test_indices_running_past_end_index_is_reported():
    sink = check_forward_collection(RepeatsLastIndex([1, 2, 3]), [1, 2, 3], RecordingSink())

    messages = _messages(sink)
    assert "indices yields positions past end_index" in messages
    assert "second pass over indices doesn't match expectations" in messages


@pytest.mark.contract
def test_wrong_element_is_reported():
    sink = check_forward_collection(LinkedCollection([1, 5, 3]), [1, 2, 3], RecordingSink())

    assert "first pass elements don't match expectations" in _messages(sink)


# -----------------------------------------------------------------------------
# generic accessors
# -----------------------------------------------------------------------------
def test_generic_accessors_match_declared_operations():
    c = LinkedCollection([1, 2, 3])
    s, e = c.start_index, c.end_index

    assert generic_index(c, s, 3) == e
    assert generic_index_limited(c, s, 4, e) is None
    assert generic_index_limited(c, s, 3, e) == e
    assert generic_distance(c, s, e) == 3


def test_generic_accessors_bypass_instance_shadows():
    """实例属性遮蔽不会影响 generic_* 的调用"""
    c = ArrayCollection([1, 2, 3])
    c.index_offset = lambda i, n: 0
    c.distance = lambda i, j: 42

    assert generic_index(c, 0, 2) == 2
    assert generic_distance(c, 0, 3) == 3
    # 直接调用仍会命中遮蔽
    assert c.index_offset(0, 2) == 0
