"""
Core interfaces for the Lloyd k-means components.

This module defines the abstract base classes that the seeding, assignment,
update and convergence components implement, so the alternating loop in
``clustering_base`` can be written once against a stable API.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any
from torch import Tensor


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor, means: Tensor,
                            **kwargs) -> Tensor:
        """Compute cluster assignments for points.

        Args:
            points: (n, d) tensor of data points
            means: (k, d) tensor of current cluster means
            **kwargs: Strategy-specific parameters

        Returns:
            (n,) long tensor of cluster indices
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for cluster parameter update strategies."""

    @abstractmethod
    def update(self, points: Tensor,
               assignments: Tensor,
               previous_means: Tensor,
               n_clusters: int,
               **kwargs) -> Tensor:
        """Compute new means from points and their assignments.

        Args:
            points: (n, d) tensor of all data points
            assignments: (n,) hard assignments
            previous_means: (k, d) means of the previous iteration
            n_clusters: Number of clusters k
            **kwargs: Update-specific parameters

        Returns:
            (k, d) tensor of new means
        """
        pass


class DistanceMetric(ABC):
    """Abstract base class for distance computations."""

    @abstractmethod
    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        """Compute distances from points to a single center.

        Args:
            points: (n, d) tensor of points
            center: (d,) tensor
            **kwargs: Metric-specific parameters

        Returns:
            (n,) tensor of distances
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for cluster initialization strategies."""

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   generator, **kwargs) -> Tensor:
        """Choose initial cluster means.

        Args:
            points: (n, d) tensor of data points
            n_clusters: Number of clusters to initialize
            generator: Random source owned by the current run
            **kwargs: Strategy-specific parameters

        Returns:
            (k, d) tensor of initial means
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the algorithm should stop.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if the criterion is met, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []


class ClusteringObjective(ABC):
    """Abstract base class for clustering objective functions."""

    @abstractmethod
    def compute(self, points: Tensor, means: Tensor,
                assignments: Tensor) -> Tensor:
        """Compute objective function value.

        Args:
            points: (n, d) tensor of data points
            means: (k, d) cluster means
            assignments: (n,) hard cluster assignments

        Returns:
            Scalar objective value
        """
        pass
