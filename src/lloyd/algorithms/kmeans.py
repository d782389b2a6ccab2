"""
K-means clustering with Lloyd's algorithm and k-means++ seeding.

The estimator class plugs the k-means components into the alternating loop
of ``BaseClusteringAlgorithm``; the module-level functions are the
functional entry points built on top of it.
"""

from typing import Optional, Tuple, Union
import torch
from torch import Tensor
import numpy as np

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import ClusteringObjective
from ..base.parameters import ClusteringParameters, _check_int
from ..assignments.hard import HardAssignment
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..updates.mean import MeanUpdater
from ..utils.convergence import MeanDisplacement, MaxIterations, StoppingRule
from ..utils.metrics import inertia
from ..utils.validation import validate_data

ArrayLike = Union[Tensor, np.ndarray, list]


class KMeansObjective(ClusteringObjective):
    """K-means objective: sum of squared distances to centroids."""

    def compute(self, points: Tensor, means: Tensor,
                assignments: Tensor) -> Tensor:
        """Compute within-cluster sum of squares (float64)."""
        diff = points.to(torch.float64) - means.to(torch.float64)[assignments]
        return torch.sum(diff * diff)


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Lloyd's algorithm seeded with k-means++. Partitions data into K clusters
    by alternating nearest-mean assignment and mean recomputation.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    max_iter : int or None, default=100
        Maximum number of assignment/update cycles; None for no cap
    min_delta : float or None, default=None
        Stop once no mean moves farther than this in one cycle; None to
        disable
    verbose : int, default=0
        Verbosity level
    random_state : int, optional
        Seed in [0, 2**64) for the k-means++ draws
    device : torch.device, optional
        Device for computation; None keeps the data's device
    keep_history : bool, default=True
        Record every iteration in ``history_``; when False only the last
        one is kept, so memory does not grow with the number of iterations

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Cluster means, in the dtype of the training data
    labels_ : Tensor of shape (n_samples,)
        Assignments computed in the final iteration
    inertia_ : float
        Sum of squared distances of the training points to their mean
    n_iter_ : int
        Number of assignment/update cycles run
    status_ : ClusteringStatus
        CONVERGED or MAX_ITER_REACHED after fitting
    random_seed_ : int
        Seed actually used for initialization
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: Optional[int] = 100,
                 min_delta: Optional[float] = None,
                 verbose: int = 0,
                 random_state: Optional[int] = None,
                 device: Optional[torch.device] = None,
                 keep_history: bool = True):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            min_delta=min_delta,
            verbose=verbose,
            random_state=random_state,
            device=device,
            keep_history=keep_history
        )
        self.parameters: Optional[ClusteringParameters] = None

    @classmethod
    def from_parameters(cls, params: ClusteringParameters, **kwargs) -> 'KMeans':
        """Build an estimator that runs exactly as ``params`` describes.

        Options unset in ``params`` stay unset (no default iteration cap).
        """
        return cls(
            n_clusters=params.k,
            max_iter=params.max_iteration,
            min_delta=params.min_delta,
            random_state=params.random_seed,
            **kwargs
        )

    def _create_components(self) -> None:
        """Create K-means specific components."""
        # Validates the current hyper-parameters
        self.parameters = ClusteringParameters(
            self.n_clusters,
            max_iteration=self.max_iter,
            min_delta=self.min_delta,
            random_seed=self.random_state
        )

        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater()
        self.initialization_strategy = KMeansPlusPlusInit()

        self.stopping_rule = StoppingRule(
            displacement=(MeanDisplacement(self.parameters.min_delta)
                          if self.parameters.has_min_delta else None),
            iterations=(MaxIterations(self.parameters.max_iteration)
                        if self.parameters.has_max_iteration else None)
        )

        self.objective = KMeansObjective()

    def score(self, X: ArrayLike, y=None) -> float:
        """Opposite of the value of X on the K-means objective.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            New data
        y : Ignored
            Not used

        Returns
        -------
        score : float
            Negative of sum of squared distances to centers
        """
        labels = self.predict(X)
        return -inertia(X, labels, self.cluster_centers_)


def cluster(data: ArrayLike, params: ClusteringParameters) -> Tuple[Tensor, Tensor]:
    """Run Lloyd's algorithm seeded with k-means++.

    Args:
        data: (n, d) points, n >= 1, of a floating or signed integer type.
            The scalar type is kept: a nested list of Python ints becomes
            int64 and its means are truncated, so pass floats (or a float
            tensor) for fractional means
        params: Cluster count, stopping conditions and seed

    Returns:
        means: (k, d) tensor in the scalar type of ``data``
        assignments: (n,) long tensor, index of the mean each point was
            assigned to in the final iteration
    """
    model = KMeans.from_parameters(params, keep_history=False).fit(data)
    return model.cluster_centers_, model.labels_


def kmeans_lloyd(data: ArrayLike,
                 k: int,
                 max_iteration: Optional[int] = None,
                 min_delta: Optional[float] = None,
                 random_seed: Optional[int] = None) -> Tuple[Tensor, Tensor]:
    """Shortcut for ``cluster`` that builds the parameters from arguments.

    Integer data yields truncated integer means, e.g. the points
    ``[[0, 0], [0, 1], [10, 10], [10, 11]]`` written as int literals give
    means ``[0, 0]`` and ``[10, 10]``; write ``0.0`` etc. to get
    ``[0, 0.5]`` and ``[10, 10.5]``.
    """
    params = ClusteringParameters(
        k,
        max_iteration=max_iteration,
        min_delta=min_delta,
        random_seed=random_seed
    )
    return cluster(data, params)


def get_best_means(data: ArrayLike,
                   params: ClusteringParameters,
                   n_tries: int) -> Tuple[Tensor, Tensor]:
    """Cluster ``n_tries`` times and keep the result with the lowest inertia.

    When ``params`` carries a seed, try ``t`` uses ``random_seed + t``
    (wrapping at 2**64), so the search as a whole is reproducible. Ties keep
    the earliest try.

    Returns:
        (means, assignments) of the best try
    """
    n_tries = _check_int('n_tries', n_tries)
    if n_tries < 1:
        raise ValueError(f"n_tries must be at least 1, got {n_tries}")

    data = validate_data(data)

    best = None
    best_inertia = float('inf')
    for t in range(n_tries):
        try_params = params.copy()
        if params.has_random_seed:
            try_params.set_random_seed((params.random_seed + t) % 2 ** 64)

        means, assignments = cluster(data, try_params)
        value = inertia(data, assignments, means)
        if best is None or value < best_inertia:
            best = (means, assignments)
            best_inertia = value

    return best
