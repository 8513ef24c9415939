import argparse
import numpy as np
import time
import multiprocessing
import os
from queue import Empty

from typing import List

from benchmark.datasets import DATASETS, get_dataset, from_text
from benchmark.definitions import instantiate_algorithm, get_definitions, list_algorithms, Definition
from benchmark.algorithms.base.module import BaseRunningMedian
from benchmark.results import store_results

def run_experiment(values: List, algo: BaseRunningMedian):
    start = time.time()
    medians = algo.run(values)
    end = time.time()
    return end - start, medians


def load_values(dataset: str) -> List:
    with get_dataset(dataset) as f:
        return f["data"][:].tolist()


def report(name: str, elapsed: float, medians: np.ndarray) -> dict:
    total = medians.sum().item() if len(medians) else 0
    final = medians[-1].item() if len(medians) else None
    print(f"[{name}] Final Median: {final if final is not None else 'n/a'}")
    print(f"[{name}] Sum: {total}")
    print(f"[{name}] Sum modulo 10000: {total % 10000}")
    print(f"[{name}] took {elapsed * 1000:.2f} milliseconds")
    return {"n": len(medians), "median_sum": total, "final_median": final}


def run_worker(dataset: str, store: bool, queue: multiprocessing.Queue) -> None:
    values = load_values(dataset)
    while True:
        try:
            definition = queue.get(timeout=1)
        except Empty:
            break

        runner = instantiate_algorithm(definition)

        elapsed, medians = run_experiment(values, runner)
        summary = report(definition.algorithm, elapsed, medians)
        attrs = {
            "time": elapsed,
            "ds": dataset,
            "algo": definition.algorithm,
            "params": str(runner),
            "n": summary["n"],
            "median_sum": summary["median_sum"],
        }
        if summary["final_median"] is not None:
            attrs["final_median"] = summary["final_median"]
        attrs.update(runner.get_additional())
        if store:
            store_results(dataset, definition.algorithm,
                          repr(runner), attrs, medians)

def create_workers_and_execute(dataset: str, store: bool, definitions: List[Definition]) -> None:
    """
    Runs every definition on the stream in a worker process.

    Args:
        dataset (str): Name of the dataset to stream.
        store (bool): Whether to write a result file per run.
        definitions (List[Definition]): Algorithm definitions to be processed.
    """
    task_queue = multiprocessing.Queue()
    for run in definitions:
        task_queue.put(run)

    workers = []
    try:
        workers = [multiprocessing.Process(target=run_worker, args=(dataset, store, task_queue))]
        [worker.start() for worker in workers]
        [worker.join() for worker in workers]
    finally:
        print("Terminating %d workers" % len(workers))
        [worker.terminate() for worker in workers]

def main(argv=None):
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    parser.add_argument(
        '--dataset',
        metavar='NAME',
        help='the number stream to run',
        default='example',
        choices=DATASETS.keys()
    )

    parser.add_argument(
        '--file',
        metavar='PATH',
        help='import a text file with one number per line as a dataset and stream it'
    )

    parser.add_argument(
        '--algorithm',
        help='run only this algorithm'
    )

    parser.add_argument(
        '--list-algorithms',
        action='store_true',
        help="list available algorithms"
    )

    parser.add_argument(
        '--prepare',
        action='store_true',
        help='only prepare the dataset'
    )

    parser.add_argument(
        '--no-store',
        action='store_true',
        help='do not write result files'
    )

    args = parser.parse_args(argv)


    if args.list_algorithms:
        list_algorithms()
        exit(0)

    definitions = list(get_definitions())

    if args.algorithm:
        definitions = [d for d in definitions if d.algorithm == args.algorithm]
        if not definitions:
            print(f"Unknown algorithm {args.algorithm}")
            exit(1)

    dataset = args.dataset
    if args.file is not None:
        # text streams become a dataset named after the file
        dataset = os.path.splitext(os.path.basename(args.file))[0]
        print(f"importing {args.file} as {dataset}")
        from_text(args.file, dataset)
    else:
        print(f"preparing {dataset}")
        DATASETS[dataset]['prepare']()

    if args.prepare:
        exit(0)

    create_workers_and_execute(dataset, not args.no_store, definitions)


if __name__ == "__main__":
    main()
