"""histogram_mean package.

Main entry points:
- python histogram_mean.py <count> [<count> ...]
- python -m histogram_mean.cli <count> [<count> ...]
"""

from .stats import (
    EmptyDistribution,
    HistogramError,
    InvalidInput,
    WeightedMeanResult,
    compute_mean,
    histogram_from_values,
    histogram_quantile,
)

__all__ = [
    "EmptyDistribution",
    "HistogramError",
    "InvalidInput",
    "WeightedMeanResult",
    "compute_mean",
    "histogram_from_values",
    "histogram_quantile",
]
