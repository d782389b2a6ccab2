"""
Core data structures for the Lloyd k-means implementation.

This module provides the containers for the mean set, the hard cluster
assignment and the per-iteration state recorded by the main loop.
"""

from typing import Dict, Any
from enum import Enum
import torch
from torch import Tensor
from dataclasses import dataclass, field


class ClusteringStatus(Enum):
    """Phase of a clustering run."""
    INITIALIZING = 'initializing'
    ITERATING = 'iterating'
    CONVERGED = 'converged'
    MAX_ITER_REACHED = 'max_iter_reached'

    @property
    def is_terminal(self) -> bool:
        return self in (ClusteringStatus.CONVERGED, ClusteringStatus.MAX_ITER_REACHED)


@dataclass
class ClusterState:
    """Container for the means of all clusters at a given iteration.

    ``means`` keeps the scalar type of the data, so integer datasets produce
    integer means.
    """

    means: Tensor  # (K, d) cluster centers
    n_clusters: int
    dimension: int

    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        assert self.means.shape == (self.n_clusters, self.dimension)


class ClusterAssignment:
    """Hard cluster assignment of every point to one of K clusters.

    Element i of the wrapped tensor is the index of the mean closest to
    point i. Instances are rebuilt every iteration, never patched.
    """

    def __init__(self, assignments: Tensor, n_clusters: int):
        """
        Args:
            assignments: (n,) hard assignments
            n_clusters: Number of clusters K
        """
        self.n_clusters = n_clusters
        self._validate_and_store(assignments)

    def _validate_and_store(self, assignments: Tensor):
        """Validate and store assignments in canonical format."""
        assert assignments.dim() == 1
        if assignments.numel() > 0:
            assert assignments.max() < self.n_clusters
            assert assignments.min() >= 0
        self._assignments = assignments.long()

    @property
    def n_points(self) -> int:
        """Number of data points."""
        return self._assignments.shape[0]

    def get_hard(self) -> Tensor:
        """Get the (n,) tensor of cluster indices."""
        return self._assignments

    def get_cluster_indices(self, cluster_idx: int) -> Tensor:
        """Get indices of points assigned to a specific cluster."""
        return torch.where(self._assignments == cluster_idx)[0]

    def count_per_cluster(self) -> Tensor:
        """Count points per cluster."""
        return torch.bincount(self._assignments, minlength=self.n_clusters)

    def empty_clusters(self) -> Tensor:
        """Indices of clusters with no assigned point."""
        return torch.where(self.count_per_cluster() == 0)[0]

    def __len__(self) -> int:
        return self.n_points

    def __eq__(self, other) -> bool:
        if not isinstance(other, ClusterAssignment):
            return NotImplemented
        return (self.n_clusters == other.n_clusters
                and torch.equal(self._assignments, other._assignments))

    def __repr__(self) -> str:
        return f"ClusterAssignment(n_points={self.n_points}, n_clusters={self.n_clusters})"


@dataclass
class AlgorithmState:
    """Complete state of a clustering run after one iteration.

    Used for convergence checking and debugging.
    """
    iteration: int
    cluster_state: ClusterState
    assignments: ClusterAssignment
    deltas: Tensor  # (K,) float64 displacement of each mean
    objective_value: float

    status: ClusteringStatus = ClusteringStatus.ITERATING
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def max_delta(self) -> float:
        return self.deltas.max().item()

    @property
    def converged(self) -> bool:
        return self.status is ClusteringStatus.CONVERGED
