from __future__ import annotations

from typing import Dict, List, Type, Union

from seqlaws.core.interfaces import (
    BidirectionalCollection,
    ForwardCollection,
    MutableCollection,
    OnePassSequence,
    RandomAccessCollection,
)
from seqlaws.utils.errors import UnknownCapabilityError

# name -> capability ABC（从弱到强；mutable 独立）
CAPABILITIES: Dict[str, type] = {
    "sequence": OnePassSequence,
    "forward": ForwardCollection,
    "bidirectional": BidirectionalCollection,
    "random_access": RandomAccessCollection,
    "mutable": MutableCollection,
}

CapabilityRef = Union[str, type]


def resolve_capability(capability: CapabilityRef) -> type:
    if isinstance(capability, str):
        try:
            return CAPABILITIES[capability]
        except KeyError:
            raise UnknownCapabilityError(capability) from None
    if capability not in CAPABILITIES.values():
        raise UnknownCapabilityError(getattr(capability, "__name__", capability))
    return capability


def is_capability(cls: Type, capability: CapabilityRef) -> bool:
    """
    类型级谓词：cls 是否声明了 capability。

    只看声明（继承 / ABC.register），不构造实例。
    非 class 参数一律返回 False。
    """
    cap = resolve_capability(capability)
    if not isinstance(cls, type):
        return False
    return issubclass(cls, cap)


def is_bidirectional(cls: Type) -> bool:
    return is_capability(cls, BidirectionalCollection)


def is_random_access(cls: Type) -> bool:
    return is_capability(cls, RandomAccessCollection)


def capabilities_of(cls: Type) -> List[str]:
    return [name for name in CAPABILITIES if is_capability(cls, name)]
