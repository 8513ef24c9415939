"""
Algorithm definitions the benchmark can run.
"""
import importlib
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

from benchmark.algorithms.base.module import BaseRunningMedian


@dataclass
class Definition:
    algorithm: str
    module: str
    constructor: str
    arguments: List[Any] = field(default_factory=list)
    kwargs: Dict[str, Any] = field(default_factory=dict)


DEFINITIONS = [
    Definition("twoheap", "benchmark.algorithms.twoheap.module", "TwoHeapRunningMedian"),
    Definition("insort", "benchmark.algorithms.insort.module", "InsortRunningMedian"),
]


def get_definitions() -> Iterator[Definition]:
    yield from DEFINITIONS


def list_algorithms() -> None:
    print("The following algorithms are supported:")
    for definition in get_definitions():
        print(f"\t{definition.algorithm}: {definition.module}.{definition.constructor}")


def instantiate_algorithm(definition: Definition) -> BaseRunningMedian:
    """
    Imports the module of a definition and calls its constructor.

    Definitions only carry names so they can be handed to worker processes.
    """
    module = importlib.import_module(definition.module)
    constructor = getattr(module, definition.constructor)
    return constructor(*definition.arguments, **definition.kwargs)
