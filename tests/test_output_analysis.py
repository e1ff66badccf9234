import math

import pytest

from devsim.errors import PrerequisiteCalcError
from devsim.output_analysis import (
    ConfidenceInterval,
    IndependentSample,
    SteadyStateOutput,
    TerminatingSimulationOutput,
)

EPSILON = 1.0e-12


def test_independent_sample_confidence_interval_mean():
    sample = IndependentSample(
        [1.02, 0.73, 3.20, 0.23, 1.76, 0.47, 1.89, 1.45, 0.44, 0.23]
    )
    interval = sample.confidence_interval_mean(0.1)
    assert abs(interval.lower - 0.7492630635369267) < EPSILON
    assert abs(interval.upper - 1.534736936463073) < EPSILON


def test_independent_sample_mean_and_variance():
    sample = IndependentSample([1.0, 2.0, 3.0, 4.0])
    assert sample.point_estimate_mean() == pytest.approx(2.5)
    assert sample.variance() == pytest.approx(1.25)


def test_independent_sample_single_point_is_degenerate():
    interval = IndependentSample([7.5]).confidence_interval_mean(0.05)
    assert interval.lower == 7.5
    assert interval.upper == 7.5
    assert interval.half_width() == 0.0


def test_independent_sample_empty_mean_is_nan():
    sample = IndependentSample([])
    mean = sample.point_estimate_mean()
    assert math.isnan(mean) is True


def test_independent_sample_rejects_unknown_alpha():
    sample = IndependentSample([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        sample.confidence_interval_mean(0.2)


def test_independent_sample_interval_is_symmetric_about_mean():
    sample = IndependentSample([3.0, 5.0, 4.0, 6.0, 2.0])
    interval = sample.confidence_interval_mean(0.05)
    mean = sample.point_estimate_mean()
    assert interval.lower < mean < interval.upper
    assert mean - interval.lower == pytest.approx(interval.upper - mean)


def test_confidence_interval_half_width():
    assert ConfidenceInterval(1.0, 4.0).half_width() == 1.5


def test_terminating_output_collects_replications():
    output = TerminatingSimulationOutput([1.0, 2.0])
    output.put_time_series([3.0])
    output.put_time_series([4.0, 5.0, 6.0])
    assert output.replications == [[1.0, 2.0], [3.0], [4.0, 5.0, 6.0]]


def test_steady_state_constant_series():
    output = SteadyStateOutput([4.0] * 100)
    interval = output.confidence_interval_mean(0.05)
    assert interval.lower == pytest.approx(4.0)
    assert interval.upper == pytest.approx(4.0)
    assert output.point_estimate_mean() == pytest.approx(4.0)


def test_steady_state_single_batch_is_degenerate():
    output = SteadyStateOutput([1.0, 2.0, 3.0])
    interval = output.confidence_interval_mean(0.05)
    assert output.batch_count == 1
    assert interval.lower == pytest.approx(2.0)
    assert interval.upper == pytest.approx(2.0)


def test_steady_state_batches_cover_the_series_tail():
    series = [float((index * 37) % 11) for index in range(200)]
    output = SteadyStateOutput(series)
    estimate = output.point_estimate_mean()
    assert 1 <= output.batch_count <= 30
    assert output.deletion_point + output.batch_count * output.batch_size == len(series)
    assert len(output.batch_means) == output.batch_count
    assert estimate == pytest.approx(
        sum(output.batch_means) / len(output.batch_means)
    )
    interval = output.confidence_interval_mean(0.05)
    assert interval.lower <= estimate <= interval.upper


def test_steady_state_two_points_cannot_find_deletion_point():
    with pytest.raises(PrerequisiteCalcError):
        SteadyStateOutput([1.0, 2.0]).point_estimate_mean()


def test_steady_state_too_short_raises():
    with pytest.raises(ValueError):
        SteadyStateOutput([1.0]).confidence_interval_mean(0.05)