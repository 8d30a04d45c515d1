from typing import TYPE_CHECKING, Callable
if TYPE_CHECKING:
    from .point_editors import PointEditorComponent

point_editor_registry: dict[str, type["PointEditorComponent"]] = {}
easing_registry: dict[str, Callable[..., float]] = {}


def register_point_editor(name: str):
    def _decorator(cls: type["PointEditorComponent"]) -> type["PointEditorComponent"]:
        if not name or name in point_editor_registry:
            raise ValueError(f"Invalid or duplicate point editor name '{name}'")
        cls.name = name
        point_editor_registry[name] = cls
        return cls
    return _decorator


def register_easing(name: str):
    def _decorator(fn: Callable[..., float]) -> Callable[..., float]:
        if not name or name in easing_registry:
            raise ValueError(f"Invalid or duplicate easing name '{name}'")
        easing_registry[name] = fn
        return fn
    return _decorator
