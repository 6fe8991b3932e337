"""Transform data structures for asset pose representation."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vec3:
    """3D vector for positions, Euler angles and scale factors.

    Frozen so that history snapshots can share instances safely.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        """Allow tuple unpacking: x, y, z = vec3"""
        return iter((self.x, self.y, self.z))


def _default_scale():
    return Vec3(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Transform:
    """Asset pose: position, rotation and scale.

    - position: world units
    - rotation: XYZ Euler angles in radians (no wrapping)
    - scale: per-axis factors (not clamped here)
    """
    position: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=_default_scale)
