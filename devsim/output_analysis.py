"""Statistical analysis of simulation outputs.

Independent, identically-distributed samples are analysed with
``IndependentSample``.  Time series, including those with initialization
bias and autocorrelation, are analysed with ``TerminatingSimulationOutput``
or ``SteadyStateOutput``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from devsim.errors import PrerequisiteCalcError
from devsim.t_scores import t_score
from devsim.utils import integer_sqrt

# Schmeiser found little benefit from more than 30 batches for a fixed
# total sample size, even where independence of batch means is retained.
_MAX_BATCH_COUNT = 30


def _sample_mean(points: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sample."""
    if not points:
        return math.nan
    return sum(points, 0.0) / len(points)


def _sample_variance(points: Sequence[float], mean: float) -> float:
    """Variance about ``mean``, divided by the number of points."""
    if not points:
        return math.nan
    return sum(((point - mean) * (point - mean) for point in points), 0.0) / len(
        points
    )


def _float_min(a: float, b: float) -> float:
    """Minimum of two floats that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


@dataclass(frozen=True)
class ConfidenceInterval:
    """Lower and upper estimates of an output."""

    lower: float
    upper: float

    def half_width(self) -> float:
        """Half the distance between the bounds."""
        return (self.upper - self.lower) / 2.0


class IndependentSample:
    """An independent, identically-distributed sample.

    No assumptions beyond independence are made; in particular the data
    need not be normally distributed.
    """

    def __init__(self, points: Iterable[float]) -> None:
        self._points = [float(point) for point in points]
        self._mean = _sample_mean(self._points)
        self._variance = _sample_variance(self._points, self._mean)

    @property
    def points(self) -> list[float]:
        """A copy of the sample points."""
        return list(self._points)

    def confidence_interval_mean(self, alpha: float) -> ConfidenceInterval:
        """Confidence interval of the mean at significance ``alpha``."""
        count = len(self._points)
        if count == 1:
            return ConfidenceInterval(self._mean, self._mean)
        margin = (
            t_score(alpha, count - 1) * math.sqrt(self._variance) / math.sqrt(count)
        )
        return ConfidenceInterval(self._mean - margin, self._mean + margin)

    def point_estimate_mean(self) -> float:
        """The sample mean."""
        return self._mean

    def variance(self) -> float:
        """The sample variance."""
        return self._variance


class TerminatingSimulationOutput:
    """Replicated output of a simulation with known initial and final conditions."""

    def __init__(self, time_series: Iterable[float]) -> None:
        self._replications: list[list[float]] = [list(time_series)]

    @property
    def replications(self) -> list[list[float]]:
        """Copies of the loaded replications, in load order."""
        return [list(series) for series in self._replications]

    def put_time_series(self, time_series: Iterable[float]) -> None:
        """Add one more replication's time series."""
        self._replications.append(list(time_series))


class SteadyStateOutput:
    """Output of a single long-running replication.

    Initialization bias is reduced by deleting points from the start of the
    series (MSER), and autocorrelation by batching the remainder.  The
    processing runs once, on first request of an estimate.
    """

    def __init__(self, time_series: Iterable[float]) -> None:
        self._time_series = [float(point) for point in time_series]
        self._deletion_point: int | None = None
        self._batch_size: int | None = None
        self._batch_count: int | None = None
        self._batch_means: list[float] = []
        self._batches_mean: float | None = None
        self._batches_variance: float | None = None

    @property
    def deletion_point(self) -> int | None:
        """Points removed from the start of the series, once computed."""
        return self._deletion_point

    @property
    def batch_count(self) -> int | None:
        """Number of batches, once computed."""
        return self._batch_count

    @property
    def batch_size(self) -> int | None:
        """Points per batch, once computed."""
        return self._batch_size

    @property
    def batch_means(self) -> list[float]:
        """Copies of the batch means, once computed."""
        return list(self._batch_means)

    def _set_to_fixed_budget(self) -> None:
        series = self._time_series
        length = len(series)
        if length < 2:
            raise ValueError("steady-state analysis needs at least two points")
        mser = [0.0] * (length - 1)
        total = 0.0
        squares = 0.0
        for d in range(length - 2, -1, -1):
            point = series[d + 1]
            total += point
            squares += point * point
            mser[d] = squares - total * total / float(length - d) ** 3
        min_mser = math.inf
        for value in mser[: (length - 1) // 2]:
            min_mser = _float_min(min_mser, value)
        deletion_point = next(
            (index for index, value in enumerate(mser) if value == min_mser), None
        )
        if deletion_point is None:
            raise PrerequisiteCalcError()
        remaining = length - deletion_point
        batch_count = min(integer_sqrt(remaining), _MAX_BATCH_COUNT)
        batch_size = remaining // batch_count
        self._batch_count = batch_count
        # Points left over are removed from the beginning.
        self._deletion_point = length - batch_count * batch_size
        self._batch_size = batch_size

    def _calculate_batch_statistics(self) -> None:
        if self._batch_count is None:
            self._set_to_fixed_budget()
        if (
            self._deletion_point is None
            or self._batch_size is None
            or self._batch_count is None
        ):
            raise PrerequisiteCalcError()
        start = self._deletion_point
        size = self._batch_size
        self._batch_means = [
            _sample_mean(
                self._time_series[start + size * index : start + size * (index + 1)]
            )
            for index in range(self._batch_count)
        ]
        batches_mean = _sample_mean(self._batch_means)
        self._batches_variance = _sample_variance(self._batch_means, batches_mean)
        self._batches_mean = batches_mean

    def confidence_interval_mean(self, alpha: float) -> ConfidenceInterval:
        """Confidence interval of the mean at significance ``alpha``."""
        if self._batches_mean is None:
            self._calculate_batch_statistics()
        if (
            self._batches_mean is None
            or self._batch_count is None
            or self._batches_variance is None
        ):
            raise PrerequisiteCalcError()
        mean = self._batches_mean
        count = self._batch_count
        if count == 1:
            return ConfidenceInterval(mean, mean)
        spread = math.sqrt(self._batches_variance) / math.sqrt(count)
        return ConfidenceInterval(
            mean - t_score(alpha, count) * spread,
            mean + t_score(alpha, count - 1) * spread,
        )

    def point_estimate_mean(self) -> float:
        """Point estimate of the mean, the mean of the batch means."""
        if self._batches_mean is None:
            self._calculate_batch_statistics()
        if self._batches_mean is None:
            raise PrerequisiteCalcError()
        return self._batches_mean