"""
Input validation utilities.

Converts caller data into a 2D tensor while keeping its scalar type, and
checks the arguments of a clustering run.
"""

from typing import Optional, Union
import torch
from torch import Tensor
import numpy as np


# Squared distances and sums are computed in the data's own type, so narrow
# integer types wrap: int8 overflows once a coordinate difference exceeds 11,
# int16 once it exceeds 181. Widen such data before clustering.
SUPPORTED_DTYPES = (
    torch.float16, torch.bfloat16, torch.float32, torch.float64,
    torch.int8, torch.int16, torch.int32, torch.int64,
)


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: Optional[torch.dtype] = None,
                  device: Optional[torch.device] = None,
                  ensure_finite: bool = True,
                  ensure_min_samples: int = 1,
                  ensure_min_features: int = 1) -> Tensor:
    """Validate and convert input data to an (n, d) tensor.

    The scalar type of the input is preserved unless ``dtype`` is given.
    Integer data is clustered in its own type; int8 and int16 distances
    overflow silently for moderate coordinate ranges, so convert such data
    to a wider type (e.g. ``dtype=torch.int64`` or a float) first.

    Args:
        X: Input data (tensor, numpy array, or list of points)
        dtype: Target data type, None to keep the input's
        device: Target device, None to keep the input's
        ensure_finite: Whether to check floating data for inf/nan
        ensure_min_samples: Minimum number of samples required
        ensure_min_features: Minimum number of features required

    Returns:
        Validated tensor

    Raises:
        TypeError: If the container or scalar type is not supported
        ValueError: If validation fails
    """
    if isinstance(X, Tensor):
        pass
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(np.ascontiguousarray(X))
    elif isinstance(X, (list, tuple)):
        X = torch.tensor(X)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if dtype is not None or device is not None:
        X = X.to(dtype=dtype, device=device)

    if X.dtype not in SUPPORTED_DTYPES:
        raise TypeError(f"Unsupported scalar type {X.dtype}; expected a floating "
                        f"or signed integer dtype")

    if X.dim() != 2:
        raise ValueError(f"Expected 2D array, got {X.dim()}D")

    n_samples, n_features = X.shape

    if n_samples < ensure_min_samples:
        raise ValueError(f"Found {n_samples} samples, but need at least "
                         f"{ensure_min_samples}")

    if n_features < ensure_min_features:
        raise ValueError(f"Found {n_features} features, but need at least "
                         f"{ensure_min_features}")

    if ensure_finite and X.dtype.is_floating_point:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def validate_labels(labels: Union[Tensor, np.ndarray, list],
                    n_samples: Optional[int] = None) -> Tensor:
    """Validate cluster labels.

    Args:
        labels: Cluster labels
        n_samples: Expected number of samples

    Returns:
        Validated (n,) long tensor
    """
    if isinstance(labels, Tensor):
        labels = labels.long()
    elif isinstance(labels, np.ndarray):
        labels = torch.from_numpy(labels).long()
    elif isinstance(labels, (list, tuple)):
        labels = torch.tensor(labels, dtype=torch.long)
    else:
        raise TypeError(f"Cannot convert {type(labels)} to label tensor")

    if labels.dim() != 1:
        raise ValueError(f"Labels must be 1D, got {labels.dim()}D")

    if n_samples is not None and len(labels) != n_samples:
        raise ValueError(f"Expected {n_samples} labels, got {len(labels)}")

    if (labels < 0).any():
        raise ValueError("Labels must be non-negative")

    return labels

