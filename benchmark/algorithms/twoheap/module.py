from benchmark.algorithms.base.module import BaseRunningMedian
from median import MedianTracker
import json

class TwoHeapRunningMedian(BaseRunningMedian):
    def __init__(self):
        self.tracker = MedianTracker()

    def insert(self, value):
        self.tracker.insert(value)

    @property
    def median(self):
        return self.tracker.median

    def get_additional(self):
        return {
            "left_size": len(self.tracker.left),
            "right_size": len(self.tracker.right),
        }

    def __str__(self):
        return json.dumps(dict(left="max", right="min"))

    def __repr__(self):
        return "run"
