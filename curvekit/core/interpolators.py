"""
One-dimensional easing functions.

Every function maps a normalized parameter to an eased scalar. Inputs outside
the valid range are handled by an ``OutOfRange`` policy:

  - CLAMP  (default) saturate the input to its range before computing
  - STRICT raise DomainError

Pass ``policy=`` per call or change the process default with
``set_default_policy``. ``lerp`` has no policy and never clamps.
"""
import functools
import logging
from enum import Enum
from typing import Callable

from .errors import DomainError
from .registries import easing_registry, register_easing

logger = logging.getLogger(__name__)


class OutOfRange(Enum):
    CLAMP = "clamp"
    STRICT = "strict"


_default_policy = OutOfRange.CLAMP


def set_default_policy(policy: OutOfRange) -> None:
    global _default_policy
    _default_policy = OutOfRange(policy)
    logger.debug("interpolation out-of-range policy set to %s", _default_policy.value)


def get_default_policy() -> OutOfRange:
    return _default_policy


def saturate(t: float) -> float:
    return max(0.0, min(1.0, t))


def _apply_policy(t: float, policy: OutOfRange | None, lo: float = 0.0, hi: float = 1.0) -> float:
    if lo <= t <= hi:
        return t
    if (policy or _default_policy) is OutOfRange.STRICT:
        raise DomainError(f"t={t} must be between {lo} and {hi}")
    return max(lo, min(hi, t))


def _unit_interval(fn: Callable[[float], float]) -> Callable[..., float]:
    @functools.wraps(fn)
    def wrapper(t: float, *, policy: OutOfRange | None = None) -> float:
        return fn(_apply_policy(t, policy))
    return wrapper


# ---- range mapping ----------------------------------------------------------

def lerp(t: float, lo: float, hi: float) -> float:
    """Not guaranteed to return exactly `hi` for t == 1."""
    return lo + t * (hi - lo)


def range_map01(t: float, lo: float, hi: float, *, policy: OutOfRange | None = None) -> float:
    """Map t from [lo, hi] onto [0, 1]."""
    if hi == lo:
        raise ValueError("range_map01 needs a non-empty input range")
    _apply_policy(t, policy, min(lo, hi), max(lo, hi))
    return saturate((t - lo) / (hi - lo))


def range_map(t: float, in_lo: float, in_hi: float, out_lo: float, out_hi: float,
              *, policy: OutOfRange | None = None) -> float:
    """Map t from [in_lo, in_hi] onto [out_lo, out_hi]."""
    return lerp(range_map01(t, in_lo, in_hi, policy=policy), out_lo, out_hi)


# ---- ease in ----------------------------------------------------------------

@register_easing("smooth_start2")
@_unit_interval
def smooth_start2(t: float) -> float:
    return t * t


@register_easing("smooth_start3")
@_unit_interval
def smooth_start3(t: float) -> float:
    return t * t * t


@register_easing("smooth_start4")
@_unit_interval
def smooth_start4(t: float) -> float:
    t2 = t * t
    return t2 * t2


# ---- ease out: 1 - (1 - t)^N, expanded ---------------------------------------

@register_easing("smooth_stop2")
@_unit_interval
def smooth_stop2(t: float) -> float:
    return t * (2 - t)


@register_easing("smooth_stop3")
@_unit_interval
def smooth_stop3(t: float) -> float:
    return t * (3 + t * (t - 3))


@register_easing("smooth_stop4")
@_unit_interval
def smooth_stop4(t: float) -> float:
    return t * (4 + t * (t * (4 - t) - 6))


# ---- ease in-out ------------------------------------------------------------

@register_easing("smooth_step3")
@_unit_interval
def smooth_step3(t: float) -> float:
    return t * t * (3 - 2 * t)


@register_easing("smooth_step5")
@_unit_interval
def smooth_step5(t: float) -> float:
    return t * t * t * (10 + t * (6 * t - 15))


@register_easing("smooth_step7")
@_unit_interval
def smooth_step7(t: float) -> float:
    t2 = t * t
    return t2 * t2 * (35 + t * (t * (70 - 20 * t) - 84))


# ---- arches: 0 at both ends, 1 at t = 0.5 -----------------------------------

@register_easing("arch2")
@_unit_interval
def arch2(t: float) -> float:
    return 4 * t * (1 - t)


@register_easing("arch4")
@_unit_interval
def arch4(t: float) -> float:
    a = t * (1 - t)
    return 16 * a * a


@register_easing("arch6")
@_unit_interval
def arch6(t: float) -> float:
    return t * t * t * (64 + t * (t * (192 - 64 * t) - 192))


def normalized_bezier3(b: float, c: float, t: float, *, policy: OutOfRange | None = None) -> float:
    """Cubic Bezier through 0 and 1 with free inner control values b and c."""
    t = _apply_policy(t, policy)
    s = 1 - t
    return 3 * b * s * s * t + 3 * c * s * t * t + t * t * t


def ease(name: str, t: float, *, policy: OutOfRange | None = None) -> float:
    """Apply the easing registered under `name`."""
    return easing_registry[name](t, policy=policy)
