"""
Clustering evaluation helpers.

Quantities computed from a finished clustering: the within-cluster sum of
squares and the members of a single cluster.
"""

from typing import Union
import torch
from torch import Tensor
import numpy as np

from .validation import validate_data, validate_labels
from ..distances.euclidean import distance_squared


def inertia(X: Union[Tensor, np.ndarray, list],
            labels: Union[Tensor, np.ndarray, list],
            centers: Tensor) -> float:
    """Compute sum of squared distances of points to their assigned centers.

    Accumulated in float64 whatever the scalar type of the data.

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        centers: (k, d) cluster centers

    Returns:
        Total inertia (lower is better)
    """
    X = validate_data(X, ensure_finite=False).to(torch.float64)
    labels = validate_labels(labels, n_samples=X.shape[0]).to(X.device)
    centers = torch.as_tensor(centers).to(device=X.device, dtype=torch.float64)

    if centers.dim() != 2 or centers.shape[1] != X.shape[1]:
        raise ValueError(f"Expected centers of shape (k, {X.shape[1]}), "
                         f"got {tuple(centers.shape)}")
    if len(labels) > 0 and labels.max().item() >= centers.shape[0]:
        raise ValueError(f"Label {labels.max().item()} out of range for "
                         f"{centers.shape[0]} centers")

    total = 0.0
    n_clusters = centers.shape[0]

    for k in range(n_clusters):
        mask = labels == k
        if mask.any():
            total += distance_squared(X[mask], centers[k]).sum().item()

    return total


def get_cluster(X: Union[Tensor, np.ndarray, list],
                labels: Union[Tensor, np.ndarray, list],
                index: int) -> Tensor:
    """Return the points assigned to cluster ``index``, in dataset order.

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        index: Cluster to extract

    Returns:
        (m, d) tensor, m possibly 0
    """
    X = validate_data(X, ensure_finite=False)
    labels = validate_labels(labels, n_samples=X.shape[0]).to(X.device)
    return X[labels == index]
