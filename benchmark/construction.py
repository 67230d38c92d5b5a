"""
Compares the cost of bottom-up heap construction against building the same
heap one insertion at a time.
"""
import logging
import time

from typing import Dict, Iterable, List, Tuple

from tqdm.auto import tqdm

from benchmark.datasets import get_dataset
from heaps import Heap, Order, as_order

LOGGER = logging.getLogger(__name__)


class CountingOrder(Order):
    """An order that counts how often it is asked to compare two elements."""
    def __init__(self, order=None):
        base = as_order(order)
        self.comparisons = 0

        def before(a, b):
            self.comparisons += 1
            return base.before(a, b)

        super().__init__(before, base.name)


def build_bottom_up(values: List, order=None) -> Tuple[Heap, int]:
    counter = CountingOrder(order)
    heap = Heap.build(values, order=counter)
    return heap, counter.comparisons

def build_by_insertion(values: List, order=None) -> Tuple[Heap, int]:
    counter = CountingOrder(order)
    heap = Heap(order=counter)
    for v in values:
        heap.insert(v)
    return heap, counter.comparisons


METHODS = {
    'bottom-up': build_bottom_up,
    'insertion': build_by_insertion,
}


def run_experiment(values: List, method: str, order=None) -> Dict:
    start = time.time()
    _, comparisons = METHODS[method](values, order)
    end = time.time()
    return {
        "n": len(values),
        "method": method,
        "comparisons": comparisons,
        "time": end - start,
    }

def compare_construction(sizes: Iterable[int] = (1_000, 10_000, 100_000),
                         dataset: str = 'random', seed: int = 0,
                         order=None, progress: bool = True) -> List[Dict]:
    """
    Runs every construction method on each size of the given dataset.

    Args:
        sizes (Iterable[int]): Heap sizes to build.
        dataset (str): Name of the dataset in ``benchmark.datasets.DATASETS``.
        seed (int): Seed passed to the dataset generator.
        order: Heap order, anything ``heaps.as_order`` accepts.
        progress (bool): Show a progress bar.

    Returns:
        List[Dict]: One result per (size, method), see ``run_experiment``.
    """
    sizes = list(sizes)
    results = []
    for n in tqdm(sizes, desc="Building heaps", disable=not progress):
        values = get_dataset(dataset, n, seed)
        for method in METHODS:
            attrs = run_experiment(values, method, order)
            attrs["ds"] = dataset
            LOGGER.info("%s n=%d: %d comparisons in %.4fs",
                        method, n, attrs["comparisons"], attrs["time"])
            results.append(attrs)
    return results
