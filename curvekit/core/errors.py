from enum import Enum


class CurvekitError(Exception):
    """Base class for errors raised by curvekit."""


class DomainError(CurvekitError, ValueError):
    """An interpolation input is outside its valid range (strict policy only)."""


class InvalidOperation(CurvekitError, RuntimeError):
    """A structural edit was refused by a path using EditPolicy.RAISE."""


class EditPolicy(Enum):
    """What a path does with an edit it cannot perform."""
    SILENT = "silent"  # leave the path untouched and return False
    RAISE = "raise"    # raise InvalidOperation
