import pytest

from devsim.t_scores import ALPHAS, t_score


def test_first_row_values():
    assert t_score(0.1, 1) == 3.078
    assert t_score(0.0005, 1) == 636.578


def test_last_t_row():
    assert t_score(0.001, 100) == 3.174


def test_z_score_beyond_one_hundred():
    assert t_score(0.05, 101) == 1.6449
    assert t_score(0.025, 5000) == 1.9600


def test_z_scores_are_below_t_scores():
    for alpha in ALPHAS:
        assert t_score(alpha, 101) < t_score(alpha, 100)


def test_non_increasing_with_degrees_of_freedom():
    for alpha in ALPHAS:
        values = [t_score(alpha, df) for df in range(1, 101)]
        assert all(a >= b for a, b in zip(values, values[1:]))


def test_increasing_as_alpha_shrinks():
    for df in (1, 10, 50, 100, 150):
        values = [t_score(alpha, df) for alpha in ALPHAS]
        assert all(a < b for a, b in zip(values, values[1:]))


def test_unknown_alpha_rejected():
    with pytest.raises(ValueError):
        t_score(0.2, 10)


def test_zero_degrees_of_freedom_rejected():
    with pytest.raises(ValueError):
        t_score(0.05, 0)