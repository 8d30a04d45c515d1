import math
from typing import Literal

Point = tuple[float, float]
Op = tuple[Literal["M", "L", "C", "Z"], tuple]


def add(a: Point, b: Point) -> Point:
    return a[0] + b[0], a[1] + b[1]


def sub(a: Point, b: Point) -> Point:
    return a[0] - b[0], a[1] - b[1]


def scale(a: Point, k: float) -> Point:
    return a[0] * k, a[1] * k


def lerp_point(a: Point, b: Point, t: float) -> Point:
    # a*(1-t) + b*t keeps both endpoints exact
    u = 1.0 - t
    return a[0] * u + b[0] * t, a[1] * u + b[1] * t


def midpoint(a: Point, b: Point) -> Point:
    return (a[0] + b[0]) * 0.5, (a[1] + b[1]) * 0.5


def mirror(p: Point, about: Point) -> Point:
    """Reflect p through `about` (2*about - p)."""
    return 2.0 * about[0] - p[0], 2.0 * about[1] - p[1]


def length(v: Point) -> float:
    return math.hypot(v[0], v[1])


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def dist(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def normalize(v: Point) -> Point:
    n = length(v)
    if n == 0.0:
        return 0.0, 0.0
    return v[0] / n, v[1] / n


def cross(a: Point, b: Point) -> float:
    return a[0] * b[1] - a[1] * b[0]


def as_point(p) -> Point:
    return float(p[0]), float(p[1])


def project_point_to_segment(p: Point, a: Point, b: Point) -> tuple[Point, float]:
    ax, ay = a; bx, by = b; px, py = p
    vx, vy = bx - ax, by - ay
    denom = vx * vx + vy * vy
    if denom == 0.0:
        dx = px - ax; dy = py - ay
        return a, dx * dx + dy * dy
    t = ((px - ax) * vx + (py - ay) * vy) / denom
    if t < 0.0:
        qx, qy = ax, ay
    elif t > 1.0:
        qx, qy = bx, by
    else:
        qx, qy = ax + t * vx, ay + t * vy
    dx = px - qx; dy = py - qy
    return (qx, qy), dx * dx + dy * dy
