from .core import (
    BezierPath, EditPolicy, OutOfRange,
    CurvekitError, DomainError, InvalidOperation,
    evaluate_cubic, evaluate_quadratic, ease,
)

__version__ = "0.1.0"
