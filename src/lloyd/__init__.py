"""
Lloyd: k-means clustering with k-means++ seeding.

This package implements Lloyd's algorithm over (n, d) tensors of any
floating or signed integer scalar type:
- k-means++ initialization driven by a reproducible 64-bit LCG
- nearest-mean assignment (ties go to the lowest index)
- mean update that freezes empty clusters
- stopping on mean displacement and/or an iteration cap

Example usage:
    >>> import torch
    >>> from lloyd import ClusteringParameters, cluster
    >>>
    >>> X = torch.tensor([[0., 0.], [0., 1.], [10., 10.], [10., 11.]])
    >>> params = ClusteringParameters(2).set_min_delta(1e-6).set_random_seed(7)
    >>> means, labels = cluster(X, params)
    >>>
    >>> # Estimator interface
    >>> from lloyd import KMeans
    >>> labels = KMeans(n_clusters=2, random_state=7).fit_predict(X)
"""

__version__ = '0.1.0'

from .algorithms.kmeans import KMeans, cluster, kmeans_lloyd, get_best_means

from .base import (
    ClusteringParameters,
    ClusteringStatus,
    ClusterState,
    ClusterAssignment,
    AlgorithmState
)

from .utils import inertia, get_cluster, LinearCongruentialGenerator

__all__ = [
    # Entry points
    'cluster',
    'kmeans_lloyd',
    'get_best_means',
    'KMeans',

    # Configuration
    'ClusteringParameters',

    # Core data structures
    'ClusteringStatus',
    'ClusterState',
    'ClusterAssignment',
    'AlgorithmState',

    # Utilities
    'inertia',
    'get_cluster',
    'LinearCongruentialGenerator',

    # Version
    '__version__'
]
