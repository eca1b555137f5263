import math

import pytest

from labcalc.errors import EmptySample
from labcalc.stats import intervals
from labcalc.stats.intervals import critical_value, mean_confidence_interval


def test_interval_is_centered_on_mean():
    ci = mean_confidence_interval([1, 2, 3, 4, 5])
    assert ci["mean"] == 3.0
    assert ci["dof"] == 4
    assert math.isclose(ci["lower"] + ci["upper"], 6.0)
    assert ci["half_width"] > ci["sem"]


def test_student_t_half_width():
    stats = pytest.importorskip("scipy.stats")
    ci = mean_confidence_interval([1, 2, 3, 4, 5], confidence=0.95)
    expected = stats.t.ppf(0.975, 4) * math.sqrt(2.5) / math.sqrt(5)
    assert ci["method"] == "student_t"
    assert math.isclose(ci["half_width"], expected)


def test_normal_fallback_without_scipy(monkeypatch):
    monkeypatch.setattr(intervals, "HAVE_SCIPY", False)
    t_crit, method = critical_value(0.95, 10)
    assert method == "normal"
    assert math.isclose(t_crit, 1.96, abs_tol=1e-3)
    with pytest.raises(ValueError, match="scipy is required"):
        critical_value(0.90, 10)


def test_single_observation_has_undefined_width():
    ci = mean_confidence_interval([2.0])
    assert ci["dof"] == 0
    assert math.isnan(ci["half_width"])
    assert ci["method"] == "undefined"


@pytest.mark.parametrize("level", [0.0, 1.0, 1.5, -0.1])
def test_invalid_confidence_level(level):
    with pytest.raises(ValueError, match="confidence must be in"):
        mean_confidence_interval([1, 2, 3], confidence=level)


def test_empty_sample():
    with pytest.raises(EmptySample):
        mean_confidence_interval(["x"])
