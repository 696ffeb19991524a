#!filepath: tests/core/test_capability.py
import pytest

from seqlaws.core.capability import (
    capabilities_of,
    is_bidirectional,
    is_capability,
    is_random_access,
)
from seqlaws.core.containers import (
    ArrayCollection,
    LinkedCollection,
    OneShotSequence,
    ReversedCollection,
    ReversedRandomAccessCollection,
)
from seqlaws.core.interfaces import BidirectionalCollection, RandomAccessCollection
from seqlaws.observability.counter import RandomAccessOperationCounter
from seqlaws.utils.errors import UnknownCapabilityError


def test_one_pass_sequence_is_not_bidirectional_nor_random_access():
    """只支持一次性迭代的类型必须两个更强能力都不满足"""
    assert is_capability(OneShotSequence, "sequence")
    assert not is_bidirectional(OneShotSequence)
    assert not is_random_access(OneShotSequence)


def test_linked_collection_is_forward_only():
    assert is_capability(LinkedCollection, "forward")
    assert not is_bidirectional(LinkedCollection)
    assert not is_random_access(LinkedCollection)
    assert not is_capability(LinkedCollection, "mutable")


def test_array_collection_declares_everything():
    assert capabilities_of(ArrayCollection) == [
        "sequence",
        "forward",
        "bidirectional",
        "random_access",
        "mutable",
    ]


def test_reversed_views_follow_their_declared_level():
    assert is_bidirectional(ReversedCollection)
    assert not is_random_access(ReversedCollection)
    assert is_random_access(ReversedRandomAccessCollection)


def test_counter_is_random_access_but_not_mutable():
    assert is_random_access(RandomAccessOperationCounter)
    assert not is_capability(RandomAccessOperationCounter, "mutable")


def test_capability_can_be_given_as_class():
    assert is_capability(ArrayCollection, RandomAccessCollection)
    assert not is_capability(LinkedCollection, BidirectionalCollection)


def test_registered_type_is_detected_without_instances():
    class Foreign:
        pass

    BidirectionalCollection.register(Foreign)

    assert is_bidirectional(Foreign)
    assert not is_random_access(Foreign)


def test_capability_is_false_for_non_types():
    assert not is_capability(ArrayCollection([1, 2]), "forward")
    assert not is_capability(list, "sequence")


def test_unknown_capability_raises():
    with pytest.raises(UnknownCapabilityError):
        is_capability(ArrayCollection, "contiguous")

    with pytest.raises(UnknownCapabilityError):
        is_capability(ArrayCollection, list)
