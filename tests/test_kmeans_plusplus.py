# tests/test_kmeans_plusplus.py
"""
K-means++ seeding: centers come from the data, spread across separated
groups, tolerate identical points and are reproducible for a given seed.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch

from lloyd.initialization import KMeansPlusPlusInit
from lloyd.utils.random import LinearCongruentialGenerator
from data_gen import make_blobs, make_identical_points


def _rows_in(means: torch.Tensor, X: torch.Tensor) -> bool:
    return all(bool((X == m).all(dim=1).any()) for m in means)


def test_centers_are_data_points(torch_device):
    X, _, _ = make_blobs(n_per=30, seed=0)
    X = torch.from_numpy(X).to(torch_device)

    means = KMeansPlusPlusInit().initialize(X, 5, LinearCongruentialGenerator(1))

    assert means.shape == (5, 2)
    assert means.dtype == X.dtype
    assert _rows_in(means, X)


@pytest.mark.parametrize("seed", range(10))
def test_one_center_per_separated_blob(seed):
    X, y, _ = make_blobs(n_per=40, seed=seed)
    X = torch.from_numpy(X)

    means = KMeansPlusPlusInit().initialize(X, 3, LinearCongruentialGenerator(seed))

    owners = set()
    for m in means:
        idx = torch.nonzero((X == m).all(dim=1))[0].item()
        owners.add(int(y[idx]))
    assert owners == {0, 1, 2}


def test_already_chosen_point_is_not_drawn_again():
    # Once (5, 5) or a (0, 0) copy is chosen, only the other location has weight
    X = torch.tensor([[0.0, 0.0], [0.0, 0.0], [5.0, 5.0]])

    for seed in range(20):
        means = KMeansPlusPlusInit().initialize(X, 2, LinearCongruentialGenerator(seed))
        assert sorted(means[:, 0].tolist()) == [0.0, 5.0]


def test_identical_points_fall_back_to_uniform_draw():
    X = torch.from_numpy(make_identical_points(3))

    means = KMeansPlusPlusInit().initialize(X, 5, LinearCongruentialGenerator(4))

    assert means.shape == (5, 3)
    assert torch.equal(means, X[0].expand(5, 3))


def test_same_seed_same_centers():
    X, _, _ = make_blobs(n_per=50, seed=3)
    X = torch.from_numpy(X)
    init = KMeansPlusPlusInit()

    a = init.initialize(X, 4, LinearCongruentialGenerator(99))
    b = init.initialize(X, 4, LinearCongruentialGenerator(99))

    assert torch.equal(a, b)


def test_centers_do_not_alias_input():
    X = torch.tensor([[1.0, 2.0], [3.0, 4.0]])
    means = KMeansPlusPlusInit().initialize(X, 2, LinearCongruentialGenerator(0))

    means += 100.0
    assert torch.equal(X, torch.tensor([[1.0, 2.0], [3.0, 4.0]]))


def test_integer_data_keeps_dtype():
    X = torch.tensor([[0, 0], [1, 1], [50, 50], [51, 51]], dtype=torch.int32)

    means = KMeansPlusPlusInit().initialize(X, 2, LinearCongruentialGenerator(8))

    assert means.dtype == torch.int32
    assert _rows_in(means, X)


def test_preconditions_are_asserted():
    X = torch.zeros(4, 2)
    with pytest.raises(AssertionError):
        KMeansPlusPlusInit().initialize(X, 0, LinearCongruentialGenerator(0))
    with pytest.raises(AssertionError):
        KMeansPlusPlusInit().initialize(torch.zeros(0, 2), 1, LinearCongruentialGenerator(0))
