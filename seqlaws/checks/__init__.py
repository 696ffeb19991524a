from seqlaws.checks.sink import AssertionSink, Failure, RaisingSink, RecordingSink
from seqlaws.checks.sequence import check_sequence
from seqlaws.checks.forward import (
    check_forward_collection,
    generic_distance,
    generic_index,
    generic_index_limited,
)
from seqlaws.checks.bidirectional import check_bidirectional_collection
from seqlaws.checks.random_access import check_random_access_collection
from seqlaws.checks.mutable import check_mutable_collection
