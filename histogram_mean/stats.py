"""Weighted statistics over index=value histograms.

A histogram here is an ordered sequence of counts where the index *is* the
observed value: ``counts[3] == 7`` means seven observations of value 3.
Bucket widths other than 1 are not supported; callers with wider buckets
must rescale the result themselves.
"""

from dataclasses import dataclass
from fractions import Fraction
from numbers import Integral


class HistogramError(ValueError):
    """Base class for histogram input errors."""


class EmptyDistribution(HistogramError):
    """The distribution holds no observations, so the mean is undefined."""


class InvalidInput(HistogramError):
    """A count or observation is negative or not an integer."""


@dataclass(frozen=True)
class WeightedMeanResult:
    total_count: int
    total_weighted_sum: int

    @property
    def mean(self) -> float:
        return self.total_weighted_sum / self.total_count

    def as_dict(self) -> dict:
        return {
            "total_count": self.total_count,
            "total_weighted_sum": self.total_weighted_sum,
            "mean": self.mean,
        }


def _check_count(idx: int, c) -> int:
    # bool is an Integral subclass but never a meaningful count
    if isinstance(c, bool) or not isinstance(c, Integral):
        raise InvalidInput(f"count at index {idx} is not an integer: {c!r}")
    if c < 0:
        raise InvalidInput(f"count at index {idx} is negative: {c}")
    return int(c)


def _validated(counts) -> list[int]:
    if counts is None:
        raise InvalidInput("counts must be a sequence, got None")
    return [_check_count(i, c) for i, c in enumerate(counts)]


def compute_mean(counts) -> WeightedMeanResult:
    """Weighted mean of the bucket index over all observations.

    Raises InvalidInput for negative or non-integer counts and
    EmptyDistribution when the counts sum to zero.
    """
    checked = _validated(counts)

    total_count = 0
    total_weighted_sum = 0
    for value, c in enumerate(checked):
        total_count += c
        total_weighted_sum += value * c

    if total_count == 0:
        raise EmptyDistribution(f"no observations in {len(checked)} bucket(s)")
    return WeightedMeanResult(total_count, total_weighted_sum)


def histogram_quantile(counts, q: float) -> int:
    """Smallest bucket whose cumulative count reaches ``q`` of the total.

    q is clamped to [0, 1]. Empty buckets are never returned.
    """
    checked = _validated(counts)
    total = sum(checked)
    if total == 0:
        raise EmptyDistribution(f"no observations in {len(checked)} bucket(s)")
    q = max(0.0, min(1.0, float(q)))

    cutoff = Fraction(q) * total
    acc = 0
    last = 0
    for value, c in enumerate(checked):
        if c == 0:
            continue
        acc += c
        last = value
        if acc >= cutoff:
            return value
    return last


def histogram_from_values(values) -> list[int]:
    """Count raw integer observations into an index=value histogram."""
    counts: list[int] = []
    for idx, v in enumerate(values):
        if v is None:
            continue
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise InvalidInput(f"observation at position {idx} is not an integer: {v!r}")
        if v < 0:
            raise InvalidInput(f"observation at position {idx} is negative: {v}")
        v = int(v)
        if v >= len(counts):
            counts.extend([0] * (v + 1 - len(counts)))
        counts[v] += 1
    return counts
