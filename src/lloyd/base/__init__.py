"""Base classes and interfaces for the Lloyd k-means components."""

from .interfaces import (
    AssignmentStrategy,
    ParameterUpdater,
    DistanceMetric,
    InitializationStrategy,
    ConvergenceCriterion,
    ClusteringObjective
)

from .data_structures import (
    ClusteringStatus,
    ClusterState,
    ClusterAssignment,
    AlgorithmState
)

from .parameters import ClusteringParameters

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'AssignmentStrategy',
    'ParameterUpdater',
    'DistanceMetric',
    'InitializationStrategy',
    'ConvergenceCriterion',
    'ClusteringObjective',

    # Data structures
    'ClusteringStatus',
    'ClusterState',
    'ClusterAssignment',
    'AlgorithmState',

    # Configuration
    'ClusteringParameters',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
