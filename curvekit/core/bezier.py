"""
Planar Bezier evaluation by repeated linear interpolation (de Casteljau).

`t` is not clamped: values outside [0, 1] extrapolate along the curve.
"""
from .math import Point, dist, lerp_point


def evaluate_quadratic(a: Point, b: Point, c: Point, t: float) -> Point:
    return lerp_point(lerp_point(a, b, t), lerp_point(b, c, t), t)


def evaluate_cubic(a: Point, b: Point, c: Point, d: Point, t: float) -> Point:
    return lerp_point(evaluate_quadratic(a, b, c, t), evaluate_quadratic(b, c, d, t), t)


def cubic_control_net_length(a: Point, b: Point, c: Point, d: Point) -> float:
    return dist(a, b) + dist(b, c) + dist(c, d)


def estimate_cubic_length(a: Point, b: Point, c: Point, d: Point) -> float:
    """Chord plus half the control net: cheap, lies between the two bounds."""
    return dist(a, d) + cubic_control_net_length(a, b, c, d) * 0.5


def sample_cubic(a: Point, b: Point, c: Point, d: Point, n: int = 20) -> list[Point]:
    n = max(2, int(n))
    return [evaluate_cubic(a, b, c, d, i / (n - 1)) for i in range(n)]
