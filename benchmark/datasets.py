"""
Functionality to create the number streams used in the benchmark.
"""
import math
import os
import time
from bisect import insort

import h5py
import numpy as np

from typing import List, Union

Number = Union[int, float]

EXAMPLE_STREAM = [6, 3, 1, 9, 2, 4, 10, 8, 5, 7]


def parse_number(line: str, lineno: int = 0) -> Number:
    """ parse one line of a stream file, keeping integers as int """
    text = line.strip()
    try:
        value = int(text)
    except ValueError:
        try:
            value = float(text)
        except ValueError:
            raise ValueError(f"line {lineno}: not a number: {text!r}") from None
    if isinstance(value, float) and math.isnan(value):
        raise ValueError(f"line {lineno}: NaN is not totally ordered")
    return value


def read_stream(path: str) -> List[Number]:
    """
    Reads a text file holding one number per line.

    Both \\n and \\r\\n line endings are accepted and blank lines are skipped.

    Args:
        path (str): The file to read.

    Returns:
        List[Number]: The values in file order.

    Raises:
        ValueError: If a line is not a number or is NaN.
    """
    with open(path) as f:
        return [parse_number(line, i + 1) for i, line in enumerate(f) if line.strip()]


def reference_medians(values) -> np.ndarray:
    """ running lower medians computed with a sorted list """
    seen, medians = [], []
    for v in values:
        insort(seen, v)
        medians.append(seen[(len(seen) - 1) // 2])
    return np.array(medians)


def get_dataset_fn(dataset_name: str) -> str:
    """
    Returns the full file path for a given dataset name in the data directory.

    Args:
        dataset_name (str): The name of the dataset.

    Returns:
        str: The full file path of the dataset.
    """
    if not os.path.exists("data"):
        os.mkdir("data")
    return os.path.join("data", f"{dataset_name}.hdf5")


def get_dataset(dataset_name: str, path: str = ".") -> h5py.File:
    """
    Opens a dataset for reading, creating it locally first if it's not
    already present.

    Args:
        dataset_name (str): The name of the dataset.

    Returns:
        h5py.File: The opened HDF5 file, holding `data` and usually `medians`.
    """
    hdf5_filename = get_dataset_fn(dataset_name)
    if not os.path.exists(os.path.join(path, hdf5_filename)):
        if dataset_name not in DATASETS:
            raise KeyError(f"Unknown dataset {dataset_name}")
        print("Creating dataset locally")
        DATASETS[dataset_name]['prepare']()

    return h5py.File(os.path.join(path, hdf5_filename), "r")


def compute_groundtruth(X: np.ndarray) -> np.ndarray:
    print("Computing groundtruth...")
    start = time.time()
    medians = reference_medians(X.tolist())
    end = time.time()
    print(f"Computing groundtruth took {(end - start):.2f}s.")
    return medians


def write_output(X: np.ndarray, name: str, compute_gt=True):
    with h5py.File(get_dataset_fn(name), "w") as f:
        f.create_dataset("data", data=X)
        if compute_gt:
            f.create_dataset("medians", data=compute_groundtruth(X))


def example():
    if os.path.exists(get_dataset_fn("example")):
        return
    write_output(np.array(EXAMPLE_STREAM, dtype=np.int64), "example")


def from_text(path: str, name: str, compute_gt=True):
    """ import a one-number-per-line text file as dataset `name` """
    values = read_stream(path)
    dtype = np.int64 if all(isinstance(v, int) for v in values) else np.float64
    write_output(np.array(values, dtype=dtype), name, compute_gt)


def uniform(n):
    name = f"uniform-{n // 1000}k"
    if os.path.exists(get_dataset_fn(name)):
        return
    rng = np.random.default_rng(42)
    write_output(rng.integers(0, 10 * n, size=n), name)


def gaussian(n):
    name = f"gaussian-{n // 1000}k"
    if os.path.exists(get_dataset_fn(name)):
        return
    rng = np.random.default_rng(42)
    write_output(rng.normal(0.0, 1.0, size=n), name)


def ascending(n):
    name = f"ascending-{n // 1000}k"
    if os.path.exists(get_dataset_fn(name)):
        return
    write_output(np.arange(1, n + 1), name)


def descending(n):
    name = f"descending-{n // 1000}k"
    if os.path.exists(get_dataset_fn(name)):
        return
    write_output(np.arange(n, 0, -1), name)


DATASETS = {
    'example': {
        'prepare': example,
    },
    'uniform-10k': {
        'prepare': lambda: uniform(10_000),
    },
    'uniform-100k': {
        'prepare': lambda: uniform(100_000),
    },
    'gaussian-10k': {
        'prepare': lambda: gaussian(10_000),
    },
    'gaussian-100k': {
        'prepare': lambda: gaussian(100_000),
    },
    'ascending-10k': {
        'prepare': lambda: ascending(10_000),
    },
    'descending-10k': {
        'prepare': lambda: descending(10_000),
    },
}
