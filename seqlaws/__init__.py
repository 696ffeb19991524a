#!filepath: seqlaws/__init__.py

from .utils.logger import Logging, logs
from .config.app_config import AppConfig, get_config, set_config
from .utils.errors import (
    CheckerMisuseError,
    ContractViolation,
    NavigationError,
    UnknownCapabilityError,
)
from .core.interfaces import (
    OnePassSequence,
    ForwardCollection,
    BidirectionalCollection,
    RandomAccessCollection,
    MutableCollection,
)
from .core.capability import (
    is_capability,
    is_bidirectional,
    is_random_access,
    capabilities_of,
)
from .observability.ledger import OperationCounts
from .observability.counter import RandomAccessOperationCounter
from .checks import (
    AssertionSink,
    Failure,
    RaisingSink,
    RecordingSink,
    check_sequence,
    check_forward_collection,
    check_bidirectional_collection,
    check_random_access_collection,
    check_mutable_collection,
    generic_index,
    generic_index_limited,
    generic_distance,
)

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "AppConfig", "get_config", "set_config",
    "CheckerMisuseError", "ContractViolation", "NavigationError", "UnknownCapabilityError",
    "OnePassSequence", "ForwardCollection", "BidirectionalCollection",
    "RandomAccessCollection", "MutableCollection",
    "is_capability", "is_bidirectional", "is_random_access", "capabilities_of",
    "OperationCounts", "RandomAccessOperationCounter",
    "AssertionSink", "Failure", "RaisingSink", "RecordingSink",
    "check_sequence", "check_forward_collection", "check_bidirectional_collection",
    "check_random_access_collection", "check_mutable_collection",
    "generic_index", "generic_index_limited", "generic_distance",
]
