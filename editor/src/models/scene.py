"""Scene-level editor state that is not part of the asset transform."""
from dataclasses import dataclass, field
from enum import Enum

from constants import (
    AXES, DEFAULT_AMBIENT_INTENSITY, DEFAULT_LIGHT_POSITION,
    DEFAULT_MATERIAL_COLOR, DEFAULT_SHOW_GRID
)
from models.transform import Vec3


class TransformMode(Enum):
    TRANSLATE = 'translate'
    ROTATE = 'rotate'
    SCALE = 'scale'

    @property
    def field_name(self):
        """Transform field edited by this gizmo mode."""
        return {
            TransformMode.TRANSLATE: 'position',
            TransformMode.ROTATE: 'rotation',
            TransformMode.SCALE: 'scale',
        }[self]


@dataclass
class AxisConstraints:
    """Per-mode, per-axis gizmo enable flags. UI state only, never persisted."""
    translate: dict = field(default_factory=lambda: {axis: True for axis in AXES})
    rotate: dict = field(default_factory=lambda: {axis: True for axis in AXES})
    scale: dict = field(default_factory=lambda: {axis: True for axis in AXES})

    def for_mode(self, mode):
        return getattr(self, TransformMode(mode).value)

    def is_enabled(self, mode, axis):
        return self.for_mode(mode)[axis]

    def toggle(self, mode, axis):
        flags = self.for_mode(mode)
        flags[axis] = not flags[axis]
        return flags[axis]

    def enabled_axes(self, mode):
        flags = self.for_mode(mode)
        return [axis for axis in AXES if flags[axis]]


@dataclass(frozen=True)
class SceneSettings:
    """Lighting, material and grid parameters for the viewport.

    Edited through sliders but kept out of the undo history.
    """
    ambient_intensity: float = DEFAULT_AMBIENT_INTENSITY
    light_position: Vec3 = field(default_factory=lambda: Vec3(*DEFAULT_LIGHT_POSITION))
    material_color: str = DEFAULT_MATERIAL_COLOR
    show_grid: bool = DEFAULT_SHOW_GRID
