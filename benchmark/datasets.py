"""
Functionality to create datasets used in the construction benchmark.
"""
import numpy as np

from typing import List


def random_values(n: int, rng: np.random.Generator) -> List[float]:
    return rng.random(n).tolist()

def ascending(n: int, rng: np.random.Generator) -> List[float]:
    return np.sort(rng.random(n)).tolist()

def descending(n: int, rng: np.random.Generator) -> List[float]:
    return np.sort(rng.random(n))[::-1].tolist()

def duplicates(n: int, rng: np.random.Generator) -> List[int]:
    # Few distinct keys, lots of ties
    return rng.integers(0, max(1, n // 100) + 1, size=n).tolist()


def get_dataset(dataset_name: str, n: int, seed: int = 0) -> List:
    """
    Generates ``n`` values of the named dataset as plain Python numbers.

    Args:
        dataset_name (str): A key of ``DATASETS``.
        n (int): Number of values.
        seed (int): Seed for ``numpy.random.default_rng``.

    Returns:
        List: The generated values.

    Raises:
        KeyError: If the dataset name is unknown.
    """
    if dataset_name not in DATASETS:
        raise KeyError(f"Unknown dataset {dataset_name!r}, choose one of {sorted(DATASETS)}")
    rng = np.random.default_rng(seed)
    return DATASETS[dataset_name]['generate'](n, rng)


DATASETS = {
    'random': {
        'generate': random_values,
    },
    'ascending': {
        'generate': ascending,
    },
    'descending': {
        'generate': descending,
    },
    'duplicates': {
        'generate': duplicates,
    },
}
