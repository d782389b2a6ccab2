"""
K-means++ initialization strategy.

Selects initial cluster centers using the K-means++ algorithm, which chooses
centers that are far apart to improve convergence speed and quality.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..distances.euclidean import distance_squared
from ..utils.random import LinearCongruentialGenerator


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first center uniformly at random
    2. For each remaining center:
       - Compute squared distance from each point to nearest existing center
       - Choose next center with probability proportional to that distance

    Centers are drawn from the data with repetition allowed, so more clusters
    than distinct points is legal and yields duplicate centers.
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[LinearCongruentialGenerator] = None,
                   **kwargs) -> Tensor:
        """Initialize cluster centers using K-means++.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Random source; a freshly seeded one is created if None

        Returns:
            (k, d) tensor of initial means in the dtype of ``points``
        """
        n_points = points.shape[0]
        assert n_clusters > 0, "n_clusters must be positive"
        assert n_points > 0, "cannot initialize clusters from an empty dataset"

        if generator is None:
            generator = LinearCongruentialGenerator()

        center_indices = [generator.randint(n_points)]

        # Squared distance from every point to its nearest chosen center
        distances = distance_squared(points, points[center_indices[0]])

        for _ in range(1, n_clusters):
            next_idx = generator.weighted_index(distances)
            center_indices.append(next_idx)

            new_center_distances = distance_squared(points, points[next_idx])
            distances = torch.minimum(distances, new_center_distances)

        return points[torch.tensor(center_indices, device=points.device)].clone()
