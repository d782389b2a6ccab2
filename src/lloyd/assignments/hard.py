"""
Hard assignment strategy for Lloyd k-means.

Assigns each point to its nearest mean under squared Euclidean distance.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DistanceMetric
from ..distances.euclidean import EuclideanDistance


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest mean.

    Means are scanned in index order and a later mean only takes a point over
    when it is strictly closer, so ties resolve to the lowest index. The
    result depends only on the points and the means.
    """

    def __init__(self, metric: Optional[DistanceMetric] = None):
        """
        Args:
            metric: Distance to minimize, squared Euclidean by default
        """
        super().__init__()
        self.metric = metric if metric is not None else EuclideanDistance(squared=True)

    def compute_assignments(self, points: Tensor, means: Tensor,
                            **kwargs) -> Tensor:
        """Assign each point to nearest mean.

        Args:
            points: (n, d) data points
            means: (k, d) current means, k >= 1
            **kwargs: Ignored for basic hard assignment

        Returns:
            (n,) long tensor of cluster indices
        """
        n_clusters = means.shape[0]
        assert n_clusters > 0, "cannot assign points to an empty mean set"

        best_distances = self.metric.compute(points, means[0])
        assignments = torch.zeros(points.shape[0], dtype=torch.long, device=points.device)

        for k in range(1, n_clusters):
            distances = self.metric.compute(points, means[k])
            closer = distances < best_distances
            assignments = torch.where(closer, torch.full_like(assignments, k), assignments)
            best_distances = torch.where(closer, distances, best_distances)

        return assignments
