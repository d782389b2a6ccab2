"""Clustering algorithms."""

from .kmeans import KMeans, KMeansObjective, cluster, kmeans_lloyd, get_best_means

__all__ = [
    'KMeans',
    'KMeansObjective',
    'cluster',
    'kmeans_lloyd',
    'get_best_means'
]
