from benchmark.results import load_all_results, build_result_filepath
from benchmark.datasets import get_dataset
from median import MedianTracker
from tqdm.auto import tqdm
import pandas as pd
import numpy as np
import argparse
import os

from typing import Optional

def count_files(dataset: Optional[str] = None, prefix: str = ".") -> int:
    count = 0
    for _, _, files in os.walk(os.path.join(prefix, build_result_filepath(dataset))):
        count += sum(1 for f in files if f.endswith(".hdf5"))
    return count

def brute_force_medians(values):
    # Sort every prefix and pick the lower middle
    values = np.asarray(values)
    return np.array([np.sort(values[:k])[(k-1)//2] for k in range(1, len(values)+1)])

def check_tracker(values):
    """
    Feeds `values` into a fresh MedianTracker and checks after every insert that
    both heaps are valid, their sizes differ by at most one and the left top does
    not exceed the right top. Raises ValueError naming the step that broke.
    Returns the running medians.
    """
    tracker = MedianTracker()
    medians = []
    for v in values:
        medians.append(tracker.insert(v))
        left, right = tracker.left, tracker.right
        if not (left.is_valid() and right.is_valid()):
            raise ValueError(f"step {len(medians)}: heap property broken")
        if abs(len(left) - len(right)) > 1:
            raise ValueError(f"step {len(medians)}: unbalanced sizes {len(left)}, {len(right)}")
        if not right.is_empty() and left.peek_top() > right.peek_top():
            raise ValueError(f"step {len(medians)}: left top {left.peek_top()} above right top {right.peek_top()}")
    return np.array(medians)

def evaluate(dataset, out=None):
    """
    Compares every stored run of `dataset` against its ground-truth medians.
    Returns one row per run and writes the frame to `out` when given.
    """
    with get_dataset(dataset) as f:
        gt = f["medians"][:] if "medians" in f else brute_force_medians(f["data"][:])

    data = []
    with tqdm(total=count_files(dataset), desc=f"Evaluating runs ({dataset})...") as pbar:
        for f in load_all_results(dataset):
            try:
                medians = f["medians"][:]
                data.append({
                    "algo": f.attrs["algo"],
                    "time": f.attrs["time"],
                    "n": len(medians),
                    "params": f.attrs["params"],
                    "correct": len(medians) == len(gt) and bool(np.all(medians == gt)),
                    "mismatches": int(np.sum(medians != gt)) if len(medians) == len(gt) else -1,
                    "final_median": medians[-1] if len(medians) else np.nan,
                    "median_sum": medians.sum(),
                })
            finally:
                f.close()
            pbar.update(1)

    df = pd.DataFrame(data)
    if out is not None:
        df.to_csv(out, index=False)
    return df

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--dataset", default="example")
    parser.add_argument("--out", default=None)
    args = parser.parse_args()
    print(evaluate(args.dataset, args.out or f"{args.dataset}_evaluation.csv"))
