"""UI-agnostic controllers."""

from .engine_controller import EngineController

__all__ = [
    "EngineController",
]
