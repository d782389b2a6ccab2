"""
Euclidean distance metric for clustering.

The only metric used by Lloyd k-means. Squared distances are computed in the
scalar type of the data; the square root is only taken where an actual
length is needed (mean displacement).
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


def distance_squared(points: Tensor, center: Tensor) -> Tensor:
    """Squared Euclidean distance from each row of ``points`` to ``center``.

    Args:
        points: (n, d) tensor
        center: (d,) tensor

    Returns:
        (n,) tensor in the dtype of ``points``
    """
    diff = points - center.unsqueeze(0)
    return torch.sum(diff * diff, dim=1, dtype=points.dtype)


def mean_displacement(old_means: Tensor, new_means: Tensor) -> Tensor:
    """Euclidean distance each mean moved between two iterations.

    Returns:
        (k,) float64 tensor
    """
    assert old_means.shape == new_means.shape, \
        f"Mean sets differ in shape: {tuple(old_means.shape)} vs {tuple(new_means.shape)}"
    diff = old_means.to(torch.float64) - new_means.to(torch.float64)
    return torch.sqrt(torch.sum(diff * diff, dim=1))


class EuclideanDistance(DistanceMetric):
    """Squared Euclidean distance metric.

    Computes ||x - μ||² where μ is the cluster center.
    """

    def __init__(self, squared: bool = True):
        """
        Args:
            squared: If True, return squared distances (default).
                    If False, return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, points: Tensor, center: Tensor, **kwargs) -> Tensor:
        """Compute Euclidean distances from points to a cluster center.

        Args:
            points: (n, d) tensor of points
            center: (d,) cluster mean

        Returns:
            (n,) tensor of distances
        """
        if center.shape != (points.shape[1],):
            raise ValueError(f"Expected center of dimension {points.shape[1]}, "
                             f"got shape {tuple(center.shape)}")

        squared_distances = distance_squared(points, center)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances.to(torch.float64))
