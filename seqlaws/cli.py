#!filepath: seqlaws/cli.py
from typing import List

import typer
from rich import print
from rich.table import Table

from seqlaws import __version__
from seqlaws.checks import (
    RecordingSink,
    check_bidirectional_collection,
    check_forward_collection,
    check_mutable_collection,
    check_random_access_collection,
    check_sequence,
)
from seqlaws.core.capability import CAPABILITIES, capabilities_of
from seqlaws.core.containers import (
    ArrayCollection,
    LinkedCollection,
    OneShotSequence,
    ReversedCollection,
    ReversedRandomAccessCollection,
    reversed_collection,
)
from seqlaws.observability.counter import RandomAccessOperationCounter

app = typer.Typer(help="seqlaws: container conformance checks")

BUILTIN_TYPES = [
    ArrayCollection,
    LinkedCollection,
    OneShotSequence,
    ReversedCollection,
    ReversedRandomAccessCollection,
    RandomAccessOperationCounter,
]


def _parse_values(values: str) -> List[int]:
    try:
        return [int(v) for v in values.split(",") if v.strip()]
    except ValueError:
        raise typer.BadParameter(f"expected comma separated integers, got {values!r}")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def capabilities():
    """
    打印内置容器的能力矩阵
    """
    table = Table(title="Declared capabilities")
    table.add_column("type")
    for name in CAPABILITIES:
        table.add_column(name)

    for cls in BUILTIN_TYPES:
        caps = set(capabilities_of(cls))
        table.add_row(cls.__name__, *["yes" if name in caps else "-" for name in CAPABILITIES])

    print(table)


@app.command()
def demo(values: str = typer.Option("10,20,30", help="comma separated integers")):
    """
    对每个内置容器运行适用的全部检查
    """
    expected = _parse_values(values)
    results = []

    sink = check_sequence(OneShotSequence(expected), expected, RecordingSink())
    results.append(("OneShotSequence", "sequence", sink))

    sink = check_forward_collection(LinkedCollection(expected), expected, RecordingSink())
    results.append(("LinkedCollection", "forward", sink))

    sink = check_bidirectional_collection(
        ReversedCollection(ArrayCollection(expected)), expected[::-1], RecordingSink()
    )
    results.append(("ReversedCollection", "bidirectional", sink))

    counter = RandomAccessOperationCounter(ArrayCollection(expected))
    sink = check_random_access_collection(counter, expected, sink=RecordingSink())
    results.append(("RandomAccessOperationCounter", "random_access", sink))

    view = reversed_collection(RandomAccessOperationCounter(ArrayCollection(expected)))
    sink = check_random_access_collection(
        view, expected[::-1], view.base.operation_counts, RecordingSink()
    )
    results.append((type(view).__name__, "random_access", sink))

    source = expected[::-1]
    if len(expected) > 1 and source != expected:
        sink = check_mutable_collection(ArrayCollection(expected), source, RecordingSink())
        results.append(("ArrayCollection", "mutable", sink))

    table = Table(title=f"Conformance for {expected}")
    table.add_column("container")
    table.add_column("checked as")
    table.add_column("failures", justify="right")
    failed = False
    for name, capability, sink in results:
        failed = failed or not sink.passed
        colour = "green" if sink.passed else "red"
        table.add_row(name, capability, f"[{colour}]{len(sink.failures)}[/{colour}]")
    print(table)

    for name, _, sink in results:
        for failure in sink.failures:
            print(f"[red]{name}[/red]: {failure}")

    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

# python -m seqlaws.cli demo --values 1,2,3
