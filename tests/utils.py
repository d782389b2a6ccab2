# tests/utils.py
"""
Small, reusable helpers used across the Lloyd test suite.

Functions:
- same_partition(a, b): True if two label vectors group the points identically.
- perm_invariant_accuracy(y_pred, y_true, K): best accuracy over label permutations.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import itertools
import time
from contextlib import contextmanager
from typing import Any, Dict, Union

import numpy as np
import torch

ArrayLike = Union[np.ndarray, torch.Tensor, list]


def _to_numpy_labels(y: ArrayLike) -> np.ndarray:
    if isinstance(y, torch.Tensor):
        y = y.detach().cpu().numpy()
    y = np.asarray(y)
    if y.ndim != 1:
        raise ValueError(f"Expected 1D labels, got shape {y.shape}")
    return y


def same_partition(a: ArrayLike, b: ArrayLike) -> bool:
    """
    True if ``a`` and ``b`` induce the same grouping of points, whatever
    integers name the groups.
    """
    a = _to_numpy_labels(a)
    b = _to_numpy_labels(b)
    if a.shape != b.shape:
        return False
    forward: Dict[int, int] = {}
    backward: Dict[int, int] = {}
    for x, y in zip(a.tolist(), b.tolist()):
        if forward.setdefault(x, y) != y or backward.setdefault(y, x) != x:
            return False
    return True


def perm_invariant_accuracy(y_pred: ArrayLike, y_true: ArrayLike, K: int) -> float:
    """
    Best accuracy of ``y_pred`` against ``y_true`` over all relabelings of
    the K predicted clusters.

    Brute force over K! permutations; tests keep K small.
    """
    y_pred = _to_numpy_labels(y_pred)
    y_true = _to_numpy_labels(y_true)
    if y_pred.shape != y_true.shape:
        raise ValueError(f"Shape mismatch: {y_pred.shape} vs {y_true.shape}")
    n = y_pred.size
    if n == 0:
        return 1.0

    best = 0.0
    for perm in itertools.permutations(range(K)):
        mapping = np.array(perm)
        acc = float(np.sum(mapping[y_pred] == y_true)) / n
        best = max(best, acc)
    return best


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Example
    -------
    >>> with time_block("fit", {"n": 400, "d": 3, "K": 2}):
    ...     model.fit(X)

    Output
    ------
    [timing] fit {"n":400,"d":3,"K":2} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """
    Print timing in a compact, machine-readable single line.
    """
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"))
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
