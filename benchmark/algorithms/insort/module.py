from benchmark.algorithms.base.module import BaseRunningMedian
from bisect import insort

class InsortRunningMedian(BaseRunningMedian):
    """ Reference implementation: keeps every value in a sorted list. """
    def __init__(self):
        self.values = []

    def insert(self, value):
        insort(self.values, value)

    @property
    def median(self):
        if not self.values:
            return None
        return self.values[(len(self.values) - 1) // 2]

    def __str__(self):
        return f"InsortRunningMedian()"

    def __repr__(self):
        return f"run"
