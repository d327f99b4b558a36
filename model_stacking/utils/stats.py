"""Weighted statistics used to weight deviations among ensembled predictions."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..core.logger import get_logger


logger = get_logger("stats")


def _recycled_product(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Elementwise product, repeating the shorter array up to the longer length."""
    n = max(a.size, b.size)
    return np.resize(a, n) * np.resize(b, n)


def weighted_sd(
    x: Sequence[float] | np.ndarray,
    weights: Sequence[float] | np.ndarray | None = None,
    normwt: bool = False,
    na_rm: bool = False,
) -> float:
    """Weighted standard deviation.

    Without weights this is the ordinary sample standard deviation. A weight
    vector whose length differs from ``x`` is recycled inside the weighted
    products only; ``sum(w)`` and ``len(x)`` keep their own lengths. A warning
    is logged in that case.

    Args:
        x: Values
        weights: Optional weights, one per value
        normwt: Rescale weights so they sum to ``len(x)``
        na_rm: Drop values (and their weights) where either is missing

    Returns:
        sqrt(sum(w * (x - xbar)^2) / sum(w)) with xbar the weighted mean
    """
    x_arr = np.asarray(x, dtype=float).ravel()

    if weights is None or len(weights) == 0:
        if na_rm:
            x_arr = x_arr[~np.isnan(x_arr)]
        if x_arr.size < 2:
            return float("nan")
        return float(np.std(x_arr, ddof=1))

    w_arr = np.asarray(weights, dtype=float).ravel()
    if x_arr.size == 0:
        return float("nan")

    if w_arr.size != x_arr.size:
        logger.warning(
            f"length of the weights vector ({w_arr.size}) != the length of the x vector "
            f"({x_arr.size}), weights are being recycled."
        )

    if na_rm:
        if w_arr.size == x_arr.size:
            keep = ~(np.isnan(x_arr) | np.isnan(w_arr))
            x_arr = x_arr[keep]
            w_arr = w_arr[keep]
        else:
            # No pairing to respect, each vector drops its own gaps
            x_arr = x_arr[~np.isnan(x_arr)]
            w_arr = w_arr[~np.isnan(w_arr)]

    if normwt:
        w_arr = w_arr * x_arr.size / w_arr.sum()

    total = w_arr.sum()
    xbar = np.sum(_recycled_product(w_arr, x_arr)) / total
    return float(np.sqrt(np.sum(_recycled_product(w_arr, (x_arr - xbar) ** 2)) / total))
