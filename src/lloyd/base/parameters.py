"""
Configuration holder for a clustering run.

``k`` is required; the stopping conditions and the random seed are optional
and an unset option is ``None``.
"""

from typing import Optional, Dict, Any
import math
import numbers


_SEED_LIMIT = 2 ** 64


def _check_int(name: str, value) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be int, got {type(value)}")
    return int(value)


class ClusteringParameters:
    """Parameters of a Lloyd k-means run.

    Examples
    --------
    >>> params = ClusteringParameters(3).set_max_iteration(100).set_min_delta(1e-4)
    >>> params.has_random_seed
    False
    """

    def __init__(self,
                 k: int,
                 max_iteration: Optional[int] = None,
                 min_delta: Optional[float] = None,
                 random_seed: Optional[int] = None):
        """
        Args:
            k: Number of clusters (> 0)
            max_iteration: Cap on assignment/update cycles (>= 1)
            min_delta: Convergence threshold on mean displacement (>= 0)
            random_seed: Seed for the centroid initialization, in [0, 2**64)
        """
        k = _check_int('k', k)
        if k <= 0:
            raise ValueError(f"k must be positive, got {k}")
        self._k = k
        self._max_iteration = None
        self._min_delta = None
        self._random_seed = None

        if max_iteration is not None:
            self.set_max_iteration(max_iteration)
        if min_delta is not None:
            self.set_min_delta(min_delta)
        if random_seed is not None:
            self.set_random_seed(random_seed)

    @property
    def k(self) -> int:
        return self._k

    @property
    def max_iteration(self) -> Optional[int]:
        return self._max_iteration

    @property
    def min_delta(self) -> Optional[float]:
        return self._min_delta

    @property
    def random_seed(self) -> Optional[int]:
        return self._random_seed

    @property
    def has_max_iteration(self) -> bool:
        return self._max_iteration is not None

    @property
    def has_min_delta(self) -> bool:
        return self._min_delta is not None

    @property
    def has_random_seed(self) -> bool:
        return self._random_seed is not None

    def set_max_iteration(self, max_iteration: int) -> 'ClusteringParameters':
        """Stop after this many assignment/update cycles."""
        max_iteration = _check_int('max_iteration', max_iteration)
        if max_iteration < 1:
            raise ValueError(f"max_iteration must be at least 1, got {max_iteration}")
        self._max_iteration = max_iteration
        return self

    def set_min_delta(self, min_delta: float) -> 'ClusteringParameters':
        """Stop once no mean moves farther than ``min_delta`` in one iteration."""
        if isinstance(min_delta, bool) or not isinstance(min_delta, numbers.Real):
            raise TypeError(f"min_delta must be a real number, got {type(min_delta)}")
        min_delta = float(min_delta)
        if math.isnan(min_delta) or min_delta < 0:
            raise ValueError(f"min_delta must be non-negative, got {min_delta}")
        self._min_delta = min_delta
        return self

    def set_random_seed(self, random_seed: int) -> 'ClusteringParameters':
        """Make the centroid initialization deterministic."""
        random_seed = _check_int('random_seed', random_seed)
        if not 0 <= random_seed < _SEED_LIMIT:
            raise ValueError(f"random_seed must be in [0, 2**64), got {random_seed}")
        self._random_seed = random_seed
        return self

    def get_params(self) -> Dict[str, Any]:
        return {
            'k': self._k,
            'max_iteration': self._max_iteration,
            'min_delta': self._min_delta,
            'random_seed': self._random_seed
        }

    def copy(self) -> 'ClusteringParameters':
        return ClusteringParameters(**self.get_params())

    def __eq__(self, other) -> bool:
        if not isinstance(other, ClusteringParameters):
            return NotImplemented
        return self.get_params() == other.get_params()

    def __repr__(self) -> str:
        args = ', '.join(f"{key}={value!r}" for key, value in self.get_params().items()
                         if value is not None)
        return f"ClusteringParameters({args})"
