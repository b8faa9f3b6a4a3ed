from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.stats import norm

from ..error import validation_error


def plotting_position_offset(n: int) -> float:
    return 0.375 if n <= 10 else 0.5


def quantile_normalize(values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Replace values by standard normal quantiles of their ranks.

    Ties keep their input order. Missing values must be removed beforehand.
    """
    data = np.asarray(values, dtype=float)
    if data.ndim != 1:
        raise validation_error(f"Expected a vector of values, got shape {data.shape}.")
    if not np.all(np.isfinite(data)):
        raise validation_error("Quantile normalization needs finite values only.")
    n = data.size
    order = np.argsort(data, kind="stable")
    a = plotting_position_offset(n)
    ranks = np.arange(1, n + 1, dtype=float)
    normalized = np.empty(n, dtype=float)
    normalized[order] = norm.ppf((ranks - a) / (n + 1 - 2 * a))
    return normalized


def log10_weighted_sum(
    log_values: Sequence[float] | np.ndarray,
    weights: Sequence[float] | np.ndarray | None = None,
) -> float:
    """Return log10(sum_i w_i 10^v_i), uniform weights 1/n by default.

    Explicit weights are used as given.
    """
    values = np.asarray(log_values, dtype=float)
    if values.size == 0:
        raise validation_error("Need at least one value for a weighted log10 sum.")
    if weights is None:
        w = np.full(values.size, 1.0 / values.size)
    else:
        w = np.asarray(weights, dtype=float)
        if w.shape != values.shape:
            raise validation_error(
                f"Got {values.size} values but {w.size} weights."
            )
    max_value = float(np.max(values))
    if np.isneginf(max_value):
        return max_value
    total = float(np.sum(w * np.power(10.0, values - max_value)))
    return max_value + float(np.log10(total))
