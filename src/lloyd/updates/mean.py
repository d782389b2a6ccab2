"""
Mean update strategy for Lloyd k-means.
"""

import torch
from torch import Tensor

from ..base.interfaces import ParameterUpdater


class MeanUpdater(ParameterUpdater):
    """Recomputes every mean as the average of its assigned points.

    Sums are accumulated in the scalar type of the data and then divided by
    the member count; integer data divides with truncation toward zero. A
    cluster with no members keeps its previous mean unchanged.
    """

    def update(self, points: Tensor,
               assignments: Tensor,
               previous_means: Tensor,
               n_clusters: int,
               **kwargs) -> Tensor:
        """Compute the new mean set.

        Args:
            points: (n, d) data points
            assignments: (n,) hard assignments in [0, n_clusters)
            previous_means: (k, d) means the assignments were computed against
            n_clusters: Number of clusters k
            **kwargs: Ignored

        Returns:
            (k, d) tensor of new means, a new tensor (``previous_means`` is
            not modified)
        """
        assert previous_means.shape[0] == n_clusters, \
            f"Expected {n_clusters} previous means, got {previous_means.shape[0]}"
        assert assignments.shape[0] == points.shape[0]

        dtype = points.dtype
        new_means = previous_means.clone()

        for k in range(n_clusters):
            mask = assignments == k
            count = int(mask.sum().item())
            if count == 0:
                # Empty cluster - keep previous mean
                continue

            sums = torch.sum(points[mask], dim=0, dtype=dtype)
            if dtype.is_floating_point:
                new_means[k] = sums / count
            else:
                new_means[k] = torch.div(sums, count, rounding_mode='trunc')

        return new_means
