"""
Base class for the Lloyd clustering loop.

Provides the algorithmic skeleton: seed the means once, then alternate
assignment and update steps until a stopping criterion fires.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, Union
import torch
from torch import Tensor
import numpy as np
import time
import warnings

from .interfaces import (
    AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ClusteringObjective
)
from .data_structures import (
    ClusterState, ClusterAssignment, AlgorithmState, ClusteringStatus
)
from ..distances.euclidean import mean_displacement
from ..utils.random import LinearCongruentialGenerator
from ..utils.validation import validate_data


class BaseClusteringAlgorithm:
    """Base class implementing the alternating optimization loop.

    Subclasses need to specify:
    - Assignment strategy
    - Parameter update strategy
    - Initialization strategy
    - Stopping rule
    - Objective function

    The loop runs until the stopping rule fires. With neither an iteration
    cap nor a displacement threshold configured nothing bounds it; the
    caller is warned but the run is not interrupted.
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: Optional[int] = 100,
                 min_delta: Optional[float] = None,
                 verbose: int = 0,
                 random_state: Optional[int] = None,
                 device: Optional[torch.device] = None,
                 keep_history: bool = True):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Maximum iterations, None for no cap
            min_delta: Convergence threshold on mean displacement, None to disable
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed for the centroid initialization, None for a
                          non-deterministic seed
            device: Torch device (None keeps the data where it is)
            keep_history: Record every iteration in history_; when False only
                          the last iteration is kept
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.min_delta = min_delta
        self.verbose = verbose
        self.random_state = random_state
        self.device = device
        self.keep_history = keep_history

        # These will be set by subclasses
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.stopping_rule = None
        self.objective: Optional[ClusteringObjective] = None

        # Algorithm state
        self.fitted_ = False
        self.n_iter_ = 0
        self.history_ = []
        self.status_: Optional[ClusteringStatus] = None
        self.random_seed_: Optional[int] = None
        self.labels_: Optional[Tensor] = None
        self._means: Optional[Tensor] = None

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.stopping_rule
        - self.objective
        """
        pass

    def fit(self, X: Union[Tensor, np.ndarray, list], y=None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: (n, d) data
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        return self._fit(X)

    def fit_predict(self, X: Union[Tensor, np.ndarray, list], y=None) -> Tensor:
        """Fit and return the assignments of the final iteration.

        Args:
            X: (n, d) data
            y: Ignored

        Returns:
            (n,) tensor of cluster assignments
        """
        self._fit(X)
        return self.labels_

    def predict(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Assign new data to the nearest fitted mean.

        Args:
            X: (n, d) data

        Returns:
            (n,) tensor of cluster assignments
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        X = self._validate_data(X)
        if X.shape[1] != self._means.shape[1]:
            raise ValueError(f"Expected dimension {self._means.shape[1]}, got {X.shape[1]}")

        X = X.to(dtype=self._means.dtype, device=self._means.device)
        return self.assignment_strategy.compute_assignments(X, self._means)

    def _fit(self, X: Union[Tensor, np.ndarray, list]) -> 'BaseClusteringAlgorithm':
        """Internal fit method implementing the alternating optimization."""
        X = self._validate_data(X)
        n_points, dimension = X.shape

        self._create_components()
        self.fitted_ = False

        if not self.stopping_rule.is_bounded:
            warnings.warn("Neither max_iter nor min_delta is set; the loop only "
                          "ends if the caller interrupts it")

        # A fresh generator per run keeps runs independent of each other
        generator = LinearCongruentialGenerator(self.random_state)
        self.random_seed_ = generator.seed

        self.status_ = ClusteringStatus.INITIALIZING
        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters (seed={self.random_seed_})...")

        start_time = time.time()
        means = self.initialization_strategy.initialize(X, self.n_clusters, generator)
        assert means.shape == (self.n_clusters, dimension)

        self.n_iter_ = 0
        self.history_ = []
        self.stopping_rule.reset()
        self.status_ = ClusteringStatus.ITERATING

        while not self.status_.is_terminal:
            iter_start_time = time.time()

            # Assignment step
            assignments = self.assignment_strategy.compute_assignments(X, means)
            assignment = ClusterAssignment(assignments, self.n_clusters)

            # Update step
            new_means = self.update_strategy.update(
                X, assignments, means, self.n_clusters
            )
            deltas = mean_displacement(means, new_means)
            means = new_means
            self.n_iter_ += 1

            objective_value = self.objective.compute(X, means, assignments).item()

            status = self.stopping_rule.check({
                'iteration': self.n_iter_ - 1,
                'n_iter': self.n_iter_,
                'deltas': deltas,
                'objective': objective_value,
                'assignments': assignments
            })
            if status is not None:
                self.status_ = status

            state = AlgorithmState(
                iteration=self.n_iter_ - 1,
                cluster_state=ClusterState(
                    means=means,
                    n_clusters=self.n_clusters,
                    dimension=dimension
                ),
                assignments=assignment,
                deltas=deltas,
                objective_value=objective_value,
                status=self.status_,
                metadata={'empty_clusters': assignment.empty_clusters().tolist()}
            )
            if self.keep_history:
                self.history_.append(state)
            else:
                self.history_ = [state]

            # Logging
            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and (self.n_iter_ - 1) % 10 == 0):
                print(f"Iteration {self.n_iter_ - 1:3d}: objective = {objective_value:.6f} "
                      f"max delta = {deltas.max().item():.6g} ({iter_time:.3f}s)")

        total_time = time.time() - start_time

        if self.verbose:
            if self.status_ is ClusteringStatus.CONVERGED:
                print(f"Converged at iteration {self.n_iter_ - 1}")
            elif self.min_delta is not None:
                warnings.warn(f"Failed to converge after {self.n_iter_} iterations")
            print(f"Total fitting time: {total_time:.3f}s")

        self._means = means
        self.labels_ = assignments
        self.fitted_ = True
        return self

    def _validate_data(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Validate and prepare input data."""
        return validate_data(X, device=self.device)

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centers/means."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self._means

    @property
    def inertia_(self) -> float:
        """Get final objective value."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self.history_[-1].objective_value

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'min_delta': self.min_delta,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'device': self.device,
            'keep_history': self.keep_history
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(f"Invalid parameter {key!r} for {type(self).__name__}")
            setattr(self, key, value)
        return self
