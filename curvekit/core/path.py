import logging
import math
from copy import deepcopy
from typing import Iterator, Sequence, TYPE_CHECKING

from .bezier import evaluate_cubic, estimate_cubic_length, sample_cubic
from .errors import EditPolicy, InvalidOperation
from .math import Op, Point, add, as_point, dist, dist2, mirror, normalize, project_point_to_segment, scale, sub
from .point_editors import ManualPE, PointEditorComponent
from .registries import point_editor_registry

if TYPE_CHECKING:
    from PySide6 import QtGui

logger = logging.getLogger(__name__)


class BezierPath:
    """
    Editable piecewise cubic Bezier path.

    Points are stored flat, in groups of three:
        [anchor0, out0, in1, anchor1, out1, in2, anchor2, ...]
    so index i is an anchor iff i % 3 == 0. An open path holds 3k + 1 points,
    a closed one 3k: its last handle leads back into anchor 0.

      - points: the flat point list (read-only view, use the edit methods)
      - closed: whether the path loops back to its first anchor
      - auto_set_control_points: handles derived from anchors (editor "auto")
        or placed by hand (editor "manual")
      - policy: what refused edits do, see EditPolicy
    """

    def __init__(self, points: Sequence[Point] | None = None, closed: bool = False,
                 editor: PointEditorComponent | None = None, policy: EditPolicy = EditPolicy.SILENT):
        if points is None:
            points = self._default_points((0.0, 0.0))
        pts = [as_point(p) for p in points]
        closed = bool(closed)
        minimum = 6 if closed else 4
        if len(pts) < minimum or len(pts) % 3 != (0 if closed else 1):
            raise ValueError(
                f"{'closed' if closed else 'open'} path cannot hold {len(pts)} points"
            )
        self._points: list[Point] = pts
        self._closed = closed
        self._editor: PointEditorComponent = editor or ManualPE()
        self.policy = EditPolicy(policy)

    @staticmethod
    def _default_points(center: Point) -> list[Point]:
        return [
            add(center, (-1.0, 0.0)),
            add(center, (-0.5, 0.5)),
            add(center, (0.5, -0.5)),
            add(center, (1.0, 0.0)),
        ]

    @classmethod
    def create(cls, center: Point = (0.0, 0.0), *, auto_set_control_points: bool = False,
               policy: EditPolicy = EditPolicy.SILENT) -> "BezierPath":
        """One open segment spanning center +/- (1, 0)."""
        path = cls(cls._default_points(as_point(center)), policy=policy)
        path.auto_set_control_points = auto_set_control_points
        return path

    def __repr__(self) -> str:
        return (f"BezierPath(points={len(self._points)}, closed={self._closed}, "
                f"editor={self._editor.name!r})")

    # read-only views
    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def point_count(self) -> int:
        return len(self._points)

    @property
    def segment_count(self) -> int:
        return len(self._points) // 3

    @property
    def editor(self) -> PointEditorComponent:
        return self._editor

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(tuple(self._points))

    def __getitem__(self, index: int) -> Point:
        self._check_point_index(index)
        return self._points[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, BezierPath):
            return NotImplemented
        return (self._points == other._points and self._closed == other._closed
                and self._editor.name == other._editor.name)

    @staticmethod
    def is_anchor(index: int) -> bool:
        return index % 3 == 0

    def anchors(self) -> tuple[Point, ...]:
        return tuple(self._points[::3])

    def loop_index(self, i: int) -> int:
        n = len(self._points)
        return ((i % n) + n) % n

    def points_in_segment(self, segment: int) -> tuple[Point, Point, Point, Point]:
        self._check_segment_index(segment)
        offset = segment * 3
        p = self._points
        return p[offset], p[offset + 1], p[offset + 2], p[self.loop_index(offset + 3)]

    def _check_point_index(self, index: int) -> None:
        if not 0 <= index < len(self._points):
            raise IndexError(f"point index {index} out of range [0, {len(self._points)})")

    def _check_segment_index(self, segment: int) -> None:
        if not 0 <= segment < self.segment_count:
            raise IndexError(f"segment index {segment} out of range [0, {self.segment_count})")

    def _refuse(self, message: str) -> bool:
        if self.policy is EditPolicy.RAISE:
            raise InvalidOperation(message)
        logger.debug("%s; path left unchanged", message)
        return False

    # ---- modes -------------------------------------------------------------------
    @property
    def closed(self) -> bool:
        return self._closed

    @closed.setter
    def closed(self, value: bool) -> None:
        if bool(value) != self._closed:
            self.toggle_closed()

    @property
    def auto_set_control_points(self) -> bool:
        return self._editor.auto_set

    @auto_set_control_points.setter
    def auto_set_control_points(self, value: bool) -> None:
        if bool(value) != self._editor.auto_set:
            self.set_point_editor("auto" if value else "manual")

    def set_point_editor(self, new_editor: PointEditorComponent | str) -> "BezierPath":
        """
        Switch editing strategy by instance or registered name. The new editor
        re-derives whatever handles it owns ("auto" recomputes all of them).
        """
        if isinstance(new_editor, str):
            new_editor = point_editor_registry[new_editor]()
        self._editor = new_editor
        self._points = new_editor.refresh(self._points, self._closed)
        logger.debug("point editor set to %r", new_editor.name)
        return self

    def toggle_closed(self) -> None:
        pts = list(self._points)
        self._closed = not self._closed
        if self._closed:
            pts.append(mirror(pts[-2], pts[-1]))
            pts.append(mirror(pts[1], pts[0]))
        else:
            del pts[-2:]
        self._points = self._editor.closed_changed(pts, self._closed)

    # ---- edits -------------------------------------------------------------------
    def add_segment(self, anchor_pos: Point) -> bool:
        """
        Append a segment ending at anchor_pos. Its first handle mirrors the
        last outgoing tangent, the second sits halfway to the new anchor.
        """
        if self._closed:
            return self._refuse("cannot add a segment to a closed path")
        anchor_pos = as_point(anchor_pos)
        pts = list(self._points)
        handle = mirror(pts[-2], pts[-1])
        pts.append(handle)
        pts.append(scale(add(handle, anchor_pos), 0.5))
        pts.append(anchor_pos)
        self._points = self._editor.anchor_added(pts, len(pts) - 1, self._closed)
        return True

    def move_point(self, index: int, new_pos: Point) -> None:
        self._check_point_index(index)
        self._points = self._editor.edit_point(self._points, index, as_point(new_pos), self._closed)

    def split_segment(self, anchor_pos: Point, segment_index: int) -> bool:
        """Insert a new anchor at anchor_pos, turning segment_index into two segments."""
        self._check_segment_index(segment_index)
        anchor_pos = as_point(anchor_pos)
        pts = list(self._points)
        offset = segment_index * 3 + 2
        pts[offset:offset] = [(0.0, 0.0), anchor_pos, (0.0, 0.0)]
        self._points = self._editor.anchor_inserted(pts, segment_index * 3 + 3, self._closed)
        return True

    def delete_segment(self, anchor_index: int) -> bool:
        """Remove the anchor at anchor_index together with its two handles."""
        self._check_point_index(anchor_index)
        if not self.is_anchor(anchor_index):
            raise ValueError(f"point {anchor_index} is a handle, not an anchor")
        if not (self.segment_count > 2 or (not self._closed and self.segment_count > 1)):
            return self._refuse(
                f"cannot delete from a {'closed' if self._closed else 'open'} path "
                f"with {self.segment_count} segment(s)"
            )

        pts = list(self._points)
        if anchor_index == 0:
            if self._closed:
                pts[-1] = pts[2]
            del pts[:3]
        elif anchor_index == len(pts) - 1 and not self._closed:
            del pts[-3:]
        else:
            del pts[anchor_index - 1:anchor_index + 2]
        self._points = self._editor.segment_deleted(pts, self._closed)
        return True

    # ---- sampling ----------------------------------------------------------------
    def calculate_evenly_spaced_points(self, spacing: float, resolution: float = 1.0) -> list[Point]:
        """
        Resample the path into points `spacing` apart, measured along the curve.

        Each segment is walked in parameter steps sized from a cheap length
        estimate (chord + half the control net) times `resolution`; whenever
        the travelled distance passes `spacing` a point is emitted, backed off
        by the overshoot, and the overshoot carries into the next step.
        """
        if spacing <= 0:
            raise ValueError(f"spacing must be positive, got {spacing}")
        if resolution <= 0:
            raise ValueError(f"resolution must be positive, got {resolution}")

        evenly_spaced: list[Point] = [self._points[0]]
        previous = self._points[0]
        since_last = 0.0

        for segment in range(self.segment_count):
            a, b, c, d = self.points_in_segment(segment)
            estimated = estimate_cubic_length(a, b, c, d)
            if estimated == 0.0:
                continue
            divisions = math.ceil(estimated * resolution * 10)
            for step in range(1, divisions + 1):
                on_curve = evaluate_cubic(a, b, c, d, step / divisions)
                since_last += dist(previous, on_curve)
                while since_last >= spacing:
                    overshoot = since_last - spacing
                    back = normalize(sub(previous, on_curve))
                    new_point = add(on_curve, scale(back, overshoot))
                    evenly_spaced.append(new_point)
                    since_last = overshoot
                    previous = new_point
                previous = on_curve

        return evenly_spaced

    def place_evenly(self, spacing: float, resolution: float = 1.0) -> list[tuple[Point, Point]]:
        """
        Evenly spaced (position, unit tangent) pairs, for laying objects out
        along the path.
        """
        positions = self.calculate_evenly_spaced_points(spacing, resolution)
        if len(positions) == 1:
            return [(positions[0], normalize(sub(self._points[1], self._points[0])))]
        placed = []
        for i, p in enumerate(positions):
            before = positions[max(0, i - 1)]
            after = positions[min(len(positions) - 1, i + 1)]
            placed.append((p, normalize(sub(after, before))))
        return placed

    def interpolate(self, n: int = 100) -> list[Point]:
        """n points spread evenly in parameter (not distance) over all segments."""
        n = max(2, int(n))
        count = self.segment_count
        out: list[Point] = []
        for i in range(n):
            u = i / (n - 1) * count
            segment = min(int(u), count - 1)
            out.append(evaluate_cubic(*self.points_in_segment(segment), u - segment))
        return out

    def closest_point(self, point: Point) -> Point:
        """
        Return the closest point on the interpolated path to the given point.

        The path is sampled densely (200 points) and the shortest projection
        onto the resulting polyline is returned.
        """
        samples = self.interpolate(n=200)
        best_point = samples[0]
        best_d2 = dist2(point, best_point)
        for a, b in zip(samples, samples[1:]):
            candidate, d2 = project_point_to_segment(point, a, b)
            if d2 < best_d2:
                best_point = candidate
                best_d2 = d2
        return best_point

    def closest_segment(self, point: Point, samples_per_segment: int = 20) -> int:
        """Index of the segment passing nearest to point (where to split_segment)."""
        best_segment = 0
        best_d2 = float("inf")
        for segment in range(self.segment_count):
            samples = sample_cubic(*self.points_in_segment(segment), n=samples_per_segment)
            for a, b in zip(samples, samples[1:]):
                _, d2 = project_point_to_segment(point, a, b)
                if d2 < best_d2:
                    best_d2 = d2
                    best_segment = segment
        return best_segment

    # ---- drawing -----------------------------------------------------------------
    def segments(self) -> tuple[tuple[Point, Point, Point], ...]:
        """(c1, c2, p2) for each cubic segment, assuming a moveTo at points[0]."""
        return tuple(self.points_in_segment(i)[1:] for i in range(self.segment_count))

    def path_ops(self) -> list[Op]:
        """
        Drawing ops:
          - ("M", (x,y))       moveTo
          - ("C", (c1,c2,p2))  cubicTo
          - ("Z", ())          closePath
        """
        ops: list[Op] = [("M", self._points[0])]
        for c1, c2, p2 in self.segments():
            ops.append(("C", (c1, c2, p2)))
        if self._closed:
            ops.append(("Z", ()))
        return ops

    def make_qpath(self) -> "QtGui.QPainterPath":
        from PySide6 import QtCore, QtGui

        qp = QtGui.QPainterPath()
        qpf = lambda t: QtCore.QPointF(t[0], t[1])

        for op, data in self.path_ops():
            if op == "M":
                qp.moveTo(qpf(data))
            elif op == "C":
                c1, c2, p2 = data
                qp.cubicTo(qpf(c1), qpf(c2), qpf(p2))
            elif op == "Z":
                qp.closeSubpath()
        return qp

    # ---- serialization -----------------------------------------------------------
    def copy(self) -> "BezierPath":
        return deepcopy(self)

    def to_dict(self) -> dict:
        """Points, closed flag and editor name are the complete state."""
        return {
            "points": [list(p) for p in self._points],
            "closed": self._closed,
            "editor": self._editor.name,
        }

    @classmethod
    def from_dict(cls, data: dict, policy: EditPolicy = EditPolicy.SILENT) -> "BezierPath":
        pts: list[Point] = [tuple(map(float, p)) for p in data["points"]]
        editor = point_editor_registry[data.get("editor", "manual")]()
        return cls(points=pts, closed=bool(data.get("closed", False)), editor=editor, policy=policy)
