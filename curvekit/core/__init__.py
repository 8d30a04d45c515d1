from .math import Point, Op, dist, dist2, project_point_to_segment
from .errors import CurvekitError, DomainError, InvalidOperation, EditPolicy
from .registries import point_editor_registry, easing_registry, register_point_editor, register_easing
from .interpolators import OutOfRange, ease, lerp, range_map, range_map01
from .bezier import evaluate_quadratic, evaluate_cubic
from .point_editors import PointEditorComponent, ManualPE, AutoSetPE
from .path import BezierPath
