"""Initialization strategies for clustering algorithms."""

from .kmeans_plusplus import KMeansPlusPlusInit

__all__ = [
    'KMeansPlusPlusInit'
]
