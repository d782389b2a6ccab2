"""Utility functions for the Lloyd k-means implementation."""

from .convergence import (
    MeanDisplacement,
    MaxIterations,
    StoppingRule
)

from .metrics import (
    inertia,
    get_cluster
)

from .random import LinearCongruentialGenerator

from .validation import (
    validate_data,
    validate_labels
)

__all__ = [
    # Convergence criteria
    'MeanDisplacement',
    'MaxIterations',
    'StoppingRule',

    # Metrics
    'inertia',
    'get_cluster',

    # Random source
    'LinearCongruentialGenerator',

    # Validation
    'validate_data',
    'validate_labels'
]
