# tests/test_data_structures.py
"""
Containers recorded by the main loop: ClusterAssignment queries and the
per-iteration AlgorithmState.
"""

from __future__ import annotations

import pytest
import torch

from lloyd import AlgorithmState, ClusterAssignment, ClusteringStatus, ClusterState, KMeans


def test_cluster_assignment_queries():
    assignment = ClusterAssignment(torch.tensor([2, 0, 2, 2, 0]), n_clusters=4)

    assert len(assignment) == 5
    assert assignment.get_cluster_indices(2).tolist() == [0, 2, 3]
    assert assignment.get_cluster_indices(0).tolist() == [1, 4]
    assert assignment.get_cluster_indices(1).numel() == 0
    assert assignment.count_per_cluster().tolist() == [2, 0, 3, 0]
    assert assignment.empty_clusters().tolist() == [1, 3]
    assert repr(assignment) == "ClusterAssignment(n_points=5, n_clusters=4)"


def test_cluster_assignment_equality_and_range():
    labels = torch.tensor([0, 1, 1])

    assert ClusterAssignment(labels, 2) == ClusterAssignment(labels.clone(), 2)
    assert ClusterAssignment(labels, 2) != ClusterAssignment(labels, 3)
    with pytest.raises(AssertionError):
        ClusterAssignment(torch.tensor([0, 2]), 2)
    with pytest.raises(AssertionError):
        ClusterAssignment(torch.tensor([-1, 0]), 2)


def test_cluster_state_checks_shape():
    ClusterState(means=torch.zeros(3, 2), n_clusters=3, dimension=2)
    with pytest.raises(AssertionError):
        ClusterState(means=torch.zeros(3, 2), n_clusters=2, dimension=2)


def test_recorded_assignments_match_cluster_indices(four_points):
    km = KMeans(n_clusters=2, min_delta=0.0, random_state=0).fit(four_points)
    state = km.history_[-1]

    assert isinstance(state, AlgorithmState)
    assert state.status is ClusteringStatus.CONVERGED
    low = km.labels_[0].item()
    assert state.assignments.get_cluster_indices(low).tolist() == [0, 1]
    assert state.assignments.get_cluster_indices(1 - low).tolist() == [2, 3]
    assert state.metadata == {'empty_clusters': []}
