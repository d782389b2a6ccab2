"""Distance metrics for clustering algorithms."""

from .euclidean import (
    EuclideanDistance,
    distance_squared,
    mean_displacement
)

__all__ = [
    'EuclideanDistance',
    'distance_squared',
    'mean_displacement'
]
