# tests/test_timeline.py
"""
RegularTimeLine: half-open sampling, degenerate bounds, one-shot iteration.
"""

import pytest

from rody import RegularTimeLine


def test_construction_fields():
    tl = RegularTimeLine(0.0, 1.0, 10)
    assert abs(tl.current_time) < 1e-10
    assert abs(tl.time_step - 0.1) < 1e-10
    assert abs(tl.max_time - 1.0) < 1e-10


def test_half_open_samples():
    samples = list(RegularTimeLine(0.0, 1.0, 10))
    assert len(samples) == 10
    for i, time in enumerate(samples):
        assert abs(time - i * 0.1) < 1e-10
    assert all(t < 1.0 for t in samples)
    assert samples == sorted(set(samples))


def test_offset_interval():
    samples = list(RegularTimeLine(2.0, 3.0, 4))
    assert samples == pytest.approx([2.0, 2.25, 2.5, 2.75])


@pytest.mark.parametrize("bounds", [(1.0, 0.0), (1.0, 1.0)])
def test_min_not_below_max_is_empty(bounds):
    tl = RegularTimeLine(bounds[0], bounds[1], 10)
    assert abs(tl.time_step) < 1e-10
    assert tl.exhausted
    for _ in tl:
        pytest.fail("degenerate timeline must not yield")


@pytest.mark.parametrize("nstep", [0, -3])
def test_nstep_below_one_rejected(nstep):
    with pytest.raises(ValueError):
        RegularTimeLine(0.0, 1.0, nstep)


def test_not_restartable():
    tl = RegularTimeLine(0.0, 1.0, 5)
    assert len(list(tl)) == 5
    assert tl.exhausted
    assert tl.current_time >= tl.max_time
    assert list(tl) == []
    with pytest.raises(StopIteration):
        next(tl)


def test_step_readable_during_iteration():
    tl = RegularTimeLine(0.0, 2.0, 4)
    step = tl.time_step
    for _ in tl:
        assert tl.time_step == step
    assert step == pytest.approx(0.5)


def test_single_step():
    assert list(RegularTimeLine(0.0, 0.1, 1)) == [0.0]


@pytest.mark.parametrize("nstep", [0, -1])
def test_degenerate_bounds_accept_any_step_count(nstep):
    tl = RegularTimeLine(1.0, 0.0, nstep)
    assert tl.time_step == 0.0
    assert list(tl) == []


def test_non_integral_nstep_rejected():
    with pytest.raises(TypeError):
        RegularTimeLine(0.0, 1.0, 2.7)
