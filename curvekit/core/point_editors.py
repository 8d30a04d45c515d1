from abc import ABC, abstractmethod
from typing import override

from .math import Point, add, dist, length, midpoint, normalize, scale, sub
from .registries import register_point_editor


# ---- control point derivation ------------------------------------------------
# These work in place on a flat [anchor, handle, handle, anchor, ...] list.

def auto_set_anchor_control_points(pts: list[Point], anchor_index: int, closed: bool) -> None:
    """
    Place both handles of an anchor on the line bisecting its neighbours,
    each at half the distance to the neighbouring anchor on its side.
    """
    n = len(pts)
    anchor = pts[anchor_index]
    direction = (0.0, 0.0)
    neighbour_distances = [0.0, 0.0]

    if anchor_index - 3 >= 0 or closed:
        offset = sub(pts[(anchor_index - 3) % n], anchor)
        direction = add(direction, normalize(offset))
        neighbour_distances[0] = length(offset)
    if anchor_index + 3 < n or closed:
        offset = sub(pts[(anchor_index + 3) % n], anchor)
        direction = sub(direction, normalize(offset))
        neighbour_distances[1] = -length(offset)

    direction = normalize(direction)

    for i in range(2):
        control_index = anchor_index + i * 2 - 1
        if 0 <= control_index < n or closed:
            pts[control_index % n] = add(anchor, scale(direction, neighbour_distances[i] * 0.5))


def auto_set_start_and_end_controls(pts: list[Point], closed: bool) -> None:
    if closed:
        return
    pts[1] = midpoint(pts[0], pts[2])
    pts[-2] = midpoint(pts[-1], pts[-3])


def auto_set_affected_control_points(pts: list[Point], anchor_index: int, closed: bool) -> None:
    n = len(pts)
    for i in range(anchor_index - 3, anchor_index + 4, 3):
        if 0 <= i < n or closed:
            auto_set_anchor_control_points(pts, i % n, closed)
    auto_set_start_and_end_controls(pts, closed)


def auto_set_all_control_points(pts: list[Point], closed: bool) -> None:
    for i in range(0, len(pts), 3):
        auto_set_anchor_control_points(pts, i, closed)
    auto_set_start_and_end_controls(pts, closed)


def owning_anchor(index: int, n: int) -> int:
    """Anchor a handle belongs to (an anchor owns itself)."""
    r = index % 3
    if r == 0:
        return index
    return (index - 1) % n if r == 1 else (index + 1) % n


# ---- editors -----------------------------------------------------------------

class PointEditorComponent(ABC):
    """
    Editing strategy for a BezierPath. Every hook receives the current point
    list and returns a new one; the input list is never modified.
    """
    name: str = ""
    auto_set: bool = False

    @abstractmethod
    def edit_point(self, path_points: list[Point], idx: int, edited_point: Point, closed: bool) -> list[Point]:
        """
        Move a point; implementations may move other points to respect constraints.
        """

    @abstractmethod
    def anchor_added(self, path_points: list[Point], anchor_index: int, closed: bool) -> list[Point]:
        """
        Called after a segment was appended ending at `anchor_index`.
        """

    @abstractmethod
    def anchor_inserted(self, path_points: list[Point], anchor_index: int, closed: bool) -> list[Point]:
        """
        Called after a segment was split at `anchor_index`. Its handles are
        placeholders until derived.
        """

    @abstractmethod
    def closed_changed(self, path_points: list[Point], closed: bool) -> list[Point]:
        """
        Called after the wrap-around handles were appended (closed=True) or removed.
        """

    def segment_deleted(self, path_points: list[Point], closed: bool) -> list[Point]:
        return list(path_points)

    def refresh(self, path_points: list[Point], closed: bool) -> list[Point]:
        """
        Called when the editor becomes active on an existing path.
        """
        return list(path_points)


@register_point_editor("manual")
class ManualPE(PointEditorComponent):
    """
    Free handle editing:
      - anchors drag their two handles along with them
      - a dragged handle keeps the opposite handle collinear through the anchor
    """
    auto_set = False

    @override
    def edit_point(self, path_points: list[Point], idx: int, edited_point: Point, closed: bool) -> list[Point]:
        pts = list(path_points)
        n = len(pts)
        delta = sub(edited_point, pts[idx])
        pts[idx] = edited_point

        if idx % 3 == 0:
            if idx + 1 < n or closed:
                j = (idx + 1) % n
                pts[j] = add(pts[j], delta)
            if idx - 1 >= 0 or closed:
                j = (idx - 1) % n
                pts[j] = add(pts[j], delta)
            return pts

        next_is_anchor = (idx + 1) % 3 == 0
        opposite = idx + 2 if next_is_anchor else idx - 2
        if 0 <= opposite < n or closed:
            anchor = pts[(idx + 1 if next_is_anchor else idx - 1) % n]
            opposite %= n
            d = dist(anchor, pts[opposite])
            direction = normalize(sub(anchor, edited_point))
            pts[opposite] = add(anchor, scale(direction, d))
        return pts

    @override
    def anchor_added(self, path_points: list[Point], anchor_index: int, closed: bool) -> list[Point]:
        return list(path_points)

    @override
    def anchor_inserted(self, path_points: list[Point], anchor_index: int, closed: bool) -> list[Point]:
        pts = list(path_points)
        auto_set_anchor_control_points(pts, anchor_index, closed)
        return pts

    @override
    def closed_changed(self, path_points: list[Point], closed: bool) -> list[Point]:
        return list(path_points)


@register_point_editor("auto")
class AutoSetPE(PointEditorComponent):
    """
    Handles are derived from neighbouring anchors and never placed by hand.
    Only anchors move; moving a handle just re-derives its anchor's handles.
    """
    auto_set = True

    @override
    def edit_point(self, path_points: list[Point], idx: int, edited_point: Point, closed: bool) -> list[Point]:
        pts = list(path_points)
        if idx % 3 == 0:
            pts[idx] = edited_point
        auto_set_affected_control_points(pts, owning_anchor(idx, len(pts)), closed)
        return pts

    @override
    def anchor_added(self, path_points: list[Point], anchor_index: int, closed: bool) -> list[Point]:
        pts = list(path_points)
        auto_set_affected_control_points(pts, anchor_index, closed)
        return pts

    @override
    def anchor_inserted(self, path_points: list[Point], anchor_index: int, closed: bool) -> list[Point]:
        return self.anchor_added(path_points, anchor_index, closed)

    @override
    def closed_changed(self, path_points: list[Point], closed: bool) -> list[Point]:
        pts = list(path_points)
        if closed:
            auto_set_anchor_control_points(pts, 0, closed)
            auto_set_anchor_control_points(pts, len(pts) - 3, closed)
        else:
            auto_set_start_and_end_controls(pts, closed)
        return pts

    @override
    def segment_deleted(self, path_points: list[Point], closed: bool) -> list[Point]:
        return self.refresh(path_points, closed)

    @override
    def refresh(self, path_points: list[Point], closed: bool) -> list[Point]:
        pts = list(path_points)
        auto_set_all_control_points(pts, closed)
        return pts
