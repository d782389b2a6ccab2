"""
Stopping criteria for the Lloyd loop.

- Displacement of every mean below a threshold
- Iteration cap

Both are only consulted after a complete assignment/update cycle.
"""

from typing import Dict, Any, Optional
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion
from ..base.data_structures import ClusteringStatus


class MeanDisplacement(ConvergenceCriterion):
    """Converged once no mean moved farther than ``min_delta``."""

    def __init__(self, min_delta: float):
        """
        Args:
            min_delta: Largest displacement (Euclidean) still considered stable
        """
        super().__init__()
        if min_delta < 0:
            raise ValueError(f"min_delta must be non-negative, got {min_delta}")
        self.min_delta = min_delta

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if every mean moved at most ``min_delta``."""
        deltas: Tensor = current_state['deltas']
        max_delta = deltas.max().item()

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'max_delta': max_delta
        })

        return bool((deltas <= self.min_delta).all().item())


class MaxIterations(ConvergenceCriterion):
    """Stop once ``max_iteration`` cycles have completed."""

    def __init__(self, max_iteration: int):
        super().__init__()
        if max_iteration < 1:
            raise ValueError(f"max_iteration must be at least 1, got {max_iteration}")
        self.max_iteration = max_iteration

    def check(self, current_state: Dict[str, Any]) -> bool:
        """``current_state['n_iter']`` is the number of completed cycles."""
        n_iter = current_state['n_iter']
        self.history.append({'n_iter': n_iter})
        return n_iter >= self.max_iteration


class StoppingRule:
    """Ordered pair of optional criteria deciding how a run ends.

    Displacement is tested before the iteration cap, so a run that converges
    on its last allowed iteration reports convergence.
    """

    def __init__(self, displacement: Optional[MeanDisplacement] = None,
                 iterations: Optional[MaxIterations] = None):
        self.displacement = displacement
        self.iterations = iterations

    @property
    def is_bounded(self) -> bool:
        """Whether at least one criterion is configured."""
        return self.displacement is not None or self.iterations is not None

    def check(self, current_state: Dict[str, Any]) -> Optional[ClusteringStatus]:
        """Return the terminal status, or None to keep iterating."""
        if self.displacement is not None and self.displacement.check(current_state):
            return ClusteringStatus.CONVERGED
        if self.iterations is not None and self.iterations.check(current_state):
            return ClusteringStatus.MAX_ITER_REACHED
        return None

    def reset(self):
        for criterion in (self.displacement, self.iterations):
            if criterion is not None:
                criterion.reset()
