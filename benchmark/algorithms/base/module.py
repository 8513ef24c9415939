from abc import ABC, abstractmethod
from typing import Iterable

import numpy as np


class BaseRunningMedian(ABC):
    """
    Common interface of every running median implementation in the benchmark.

    Subclasses consume one value per `insert` and expose the median of
    everything inserted so far through `median`.
    """

    @abstractmethod
    def insert(self, value) -> None:
        pass

    @property
    @abstractmethod
    def median(self):
        pass

    def run(self, values: Iterable) -> np.ndarray:
        """ insert every value, returning the median after each one """
        medians = []
        for v in values:
            self.insert(v)
            medians.append(self.median)
        return np.array(medians)

    def get_additional(self) -> dict:
        return {}

    def __str__(self):
        return "{}"

    def __repr__(self):
        return "run"
