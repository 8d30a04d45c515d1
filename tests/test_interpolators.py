"""
test_interpolators.py
---------------------
Unit tests for curvekit.core.interpolators
"""

import pytest

from curvekit.core import DomainError, OutOfRange, easing_registry, register_easing
from curvekit.core import interpolators as ip

GRID = [i / 100 for i in range(101)]

SMOOTH_STEPS = [ip.smooth_step3, ip.smooth_step5, ip.smooth_step7]
ARCHES = [ip.arch2, ip.arch4, ip.arch6]
ALL_EASINGS = [
    ip.smooth_start2, ip.smooth_start3, ip.smooth_start4,
    ip.smooth_stop2, ip.smooth_stop3, ip.smooth_stop4,
    *SMOOTH_STEPS, *ARCHES,
]


# ---------------------------------------------------------------------------
# Shape of the easing families
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("fn", SMOOTH_STEPS)
def test_smooth_step_endpoints(fn):
    assert fn(0.0) == pytest.approx(0.0)
    assert fn(1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("fn", SMOOTH_STEPS + [ip.smooth_start2, ip.smooth_start3, ip.smooth_start4,
                                               ip.smooth_stop2, ip.smooth_stop3, ip.smooth_stop4])
def test_monotonic_on_unit_interval(fn):
    values = [fn(t) for t in GRID]
    assert all(b >= a - 1e-12 for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("fn", ARCHES)
def test_arch_zero_at_ends_peak_in_middle(fn):
    assert fn(0.0) == pytest.approx(0.0)
    assert fn(1.0) == pytest.approx(0.0, abs=1e-12)
    assert fn(0.5) == pytest.approx(1.0)
    assert max(fn(t) for t in GRID) == pytest.approx(1.0)


@pytest.mark.parametrize("n, fn", [(2, ip.smooth_start2), (3, ip.smooth_start3), (4, ip.smooth_start4)])
def test_smooth_start_is_power(n, fn):
    for t in GRID:
        assert fn(t) == pytest.approx(t ** n)


@pytest.mark.parametrize("n, fn", [(2, ip.smooth_stop2), (3, ip.smooth_stop3), (4, ip.smooth_stop4)])
def test_smooth_stop_mirrors_smooth_start(n, fn):
    for t in GRID:
        assert fn(t) == pytest.approx(1 - (1 - t) ** n)


def test_smooth_step_polynomials():
    for t in GRID:
        assert ip.smooth_step3(t) == pytest.approx(3 * t**2 - 2 * t**3)
        assert ip.smooth_step5(t) == pytest.approx(6 * t**5 - 15 * t**4 + 10 * t**3)
        assert ip.smooth_step7(t) == pytest.approx(-20 * t**7 + 70 * t**6 - 84 * t**5 + 35 * t**4, abs=1e-12)
        assert ip.arch6(t) == pytest.approx(64 * t**3 - 192 * t**4 + 192 * t**5 - 64 * t**6, abs=1e-12)


def test_normalized_bezier3():
    assert ip.normalized_bezier3(0.2, 0.9, 0.0) == 0.0
    assert ip.normalized_bezier3(0.2, 0.9, 1.0) == pytest.approx(1.0)
    # inner controls at thirds make the curve the identity
    for t in GRID:
        assert ip.normalized_bezier3(1 / 3, 2 / 3, t) == pytest.approx(t)


# ---------------------------------------------------------------------------
# Range mapping
# ---------------------------------------------------------------------------

def test_lerp_does_not_clamp():
    assert ip.lerp(0.5, 10.0, 20.0) == 15.0
    assert ip.lerp(2.0, 0.0, 10.0) == 20.0


def test_range_map01():
    assert ip.range_map01(5.0, 0.0, 10.0) == pytest.approx(0.5)
    assert ip.range_map01(2.0, 10.0, 0.0) == pytest.approx(0.8)
    assert ip.range_map01(20.0, 0.0, 10.0) == 1.0
    assert ip.range_map01(-3.0, 0.0, 10.0) == 0.0


def test_range_map():
    assert ip.range_map(5.0, 0.0, 10.0, 100.0, 200.0) == pytest.approx(150.0)
    assert ip.range_map(50.0, 0.0, 10.0, 100.0, 200.0) == pytest.approx(200.0)


def test_range_map01_rejects_empty_range():
    with pytest.raises(ValueError):
        ip.range_map01(1.0, 2.0, 2.0)


# ---------------------------------------------------------------------------
# Out-of-range policy
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("fn", ALL_EASINGS)
def test_clamp_policy_saturates(fn):
    assert fn(1.5) == pytest.approx(fn(1.0))
    assert fn(-0.5) == pytest.approx(fn(0.0))


@pytest.mark.parametrize("fn", ALL_EASINGS)
def test_strict_policy_raises(fn):
    with pytest.raises(DomainError):
        fn(1.5, policy=OutOfRange.STRICT)
    assert fn(0.25, policy=OutOfRange.STRICT) == pytest.approx(fn(0.25))


def test_strict_range_map01():
    with pytest.raises(DomainError):
        ip.range_map01(11.0, 0.0, 10.0, policy=OutOfRange.STRICT)
    assert ip.range_map01(7.0, 10.0, 0.0, policy=OutOfRange.STRICT) == pytest.approx(0.3)


def test_domain_error_is_value_error():
    with pytest.raises(ValueError):
        ip.normalized_bezier3(0.0, 1.0, 2.0, policy=OutOfRange.STRICT)


def test_default_policy_switch(restore_interpolation_policy):
    assert ip.get_default_policy() is OutOfRange.CLAMP
    ip.set_default_policy(OutOfRange.STRICT)
    with pytest.raises(DomainError):
        ip.smooth_step3(2.0)
    # an explicit policy wins over the default
    assert ip.smooth_step3(2.0, policy=OutOfRange.CLAMP) == pytest.approx(1.0)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def test_every_easing_is_registered():
    assert set(easing_registry) == {
        "smooth_start2", "smooth_start3", "smooth_start4",
        "smooth_stop2", "smooth_stop3", "smooth_stop4",
        "smooth_step3", "smooth_step5", "smooth_step7",
        "arch2", "arch4", "arch6",
    }


def test_ease_by_name():
    assert ip.ease("arch2", 0.5) == pytest.approx(1.0)
    assert ip.ease("smooth_start3", 0.5) == pytest.approx(0.125)
    with pytest.raises(DomainError):
        ip.ease("arch4", -1.0, policy=OutOfRange.STRICT)
    with pytest.raises(KeyError):
        ip.ease("bounce", 0.5)


def test_duplicate_easing_name_rejected():
    with pytest.raises(ValueError):
        register_easing("arch2")(lambda t, policy=None: t)
    with pytest.raises(ValueError):
        register_easing("")(lambda t, policy=None: t)
