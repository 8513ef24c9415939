"""
Storage of benchmark runs: one HDF5 file per run under results/.
"""
import os
import re
from typing import Iterator, Optional

import h5py
import numpy as np


def build_result_filepath(dataset: Optional[str] = None, algorithm: Optional[str] = None,
                          run_name: Optional[str] = None) -> str:
    """
    Path of a run file, or of the directory holding a dataset's or an
    algorithm's runs when the trailing parts are left out.
    """
    d = ["results"]
    if dataset:
        d.append(dataset)
    if algorithm:
        d.append(algorithm)
    if run_name:
        d.append(re.sub(r"\W+", "_", run_name) + ".hdf5")
    return os.path.join(*d)


def store_results(dataset: str, algorithm: str, run_name: str, attrs: dict, medians: np.ndarray) -> str:
    fn = build_result_filepath(dataset, algorithm, run_name)
    head, _ = os.path.split(fn)
    if not os.path.isdir(head):
        os.makedirs(head)
    with h5py.File(fn, "w") as f:
        for k, v in attrs.items():
            f.attrs[k] = v
        f.create_dataset("medians", data=medians)
    return fn


def load_all_results(dataset: Optional[str] = None, algorithm: Optional[str] = None) -> Iterator[h5py.File]:
    """ yields every stored run, the caller closes the files """
    for root, _, files in os.walk(build_result_filepath(dataset, algorithm)):
        for fn in sorted(files):
            if os.path.splitext(fn)[-1] != ".hdf5":
                continue
            yield h5py.File(os.path.join(root, fn), "r")
