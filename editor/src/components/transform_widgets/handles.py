"""Gizmo handle system - ABC-based handle architecture.

Each handle type is a class that knows:
- How to draw itself
- How to test if a mouse position hits it
- Which screen direction a drag along it follows

Handles work on a GizmoGeometry: the gizmo's world axes already projected
to widget pixels for the current camera.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np
from PyQt5.QtCore import QPointF, Qt
from PyQt5.QtGui import QBrush, QColor, QPen, QPolygonF

from constants import AXES, GIZMO_AXIS_COLORS, GIZMO_AXIS_LENGTH

RING_SEGMENTS = 48


@dataclass
class GizmoGeometry:
    """Projected gizmo frame.

    center: (x, y) pixel position of the asset origin
    tips: axis -> (x, y) pixel position of the axis end
    rings: axis -> list of (x, y) points of the rotation circle around the axis
    """
    center: tuple
    tips: dict = field(default_factory=dict)
    rings: dict = field(default_factory=dict)


def compute_gizmo_geometry(camera, position, width, height, length=GIZMO_AXIS_LENGTH):
    """Project gizmo axes and rings around a world position.

    Returns:
        GizmoGeometry, or None when the origin is behind the camera
    """
    origin = np.array(list(position), dtype=np.float64)
    screen, _, visible = camera.project([origin], width, height)
    if not visible[0]:
        return None
    geometry = GizmoGeometry(center=tuple(screen[0]))

    for index, axis in enumerate(AXES):
        tip = origin.copy()
        tip[index] += length
        tip_screen, _, tip_visible = camera.project([tip], width, height)
        if tip_visible[0]:
            geometry.tips[axis] = tuple(tip_screen[0])

        # Circle in the plane perpendicular to the axis
        u_index, v_index = [i for i in range(3) if i != index]
        angles = np.linspace(0.0, 2.0 * math.pi, RING_SEGMENTS + 1)
        circle = np.tile(origin, (len(angles), 1))
        circle[:, u_index] += length * np.cos(angles)
        circle[:, v_index] += length * np.sin(angles)
        ring_screen, _, ring_visible = camera.project(circle, width, height)
        if ring_visible.all():
            geometry.rings[axis] = [tuple(p) for p in ring_screen]
    return geometry


def distance_to_segment(px, py, ax, ay, bx, by):
    """Pixel distance from point P to segment AB"""
    abx, aby = bx - ax, by - ay
    length_sq = abx * abx + aby * aby
    if length_sq == 0:
        return math.hypot(px - ax, py - ay)
    t = max(0.0, min(1.0, ((px - ax) * abx + (py - ay) * aby) / length_sq))
    return math.hypot(px - (ax + t * abx), py - (ay + t * aby))


class Handle(ABC):
    """Abstract base class for gizmo handles."""

    def __init__(self, axis, handle_size, hit_tolerance):
        self.axis = axis
        self.handle_size = handle_size
        self.hit_tolerance = hit_tolerance

    @property
    def color(self):
        return QColor(GIZMO_AXIS_COLORS[self.axis])

    @abstractmethod
    def hit_test(self, mouse_x, mouse_y, geometry) -> bool:
        """Test if mouse position hits this handle.

        Args:
            mouse_x, mouse_y: Mouse position in widget pixel coordinates
            geometry: GizmoGeometry for the current frame

        Returns:
            bool: True if mouse hits this handle
        """
        pass

    @abstractmethod
    def draw(self, painter, geometry, highlighted=False):
        pass

    def screen_direction(self, geometry):
        """Unit pixel direction a drag should follow, None for free drags"""
        return None

    def get_cursor(self):
        return Qt.SizeAllCursor


class _AxisLineHandle(Handle):
    """Shared logic for handles drawn along a projected axis."""

    def _segment(self, geometry):
        tip = geometry.tips.get(self.axis)
        if tip is None:
            return None
        return geometry.center, tip

    def hit_test(self, mouse_x, mouse_y, geometry):
        segment = self._segment(geometry)
        if segment is None:
            return False
        (cx, cy), (tx, ty) = segment
        return distance_to_segment(mouse_x, mouse_y, cx, cy, tx, ty) <= self.handle_size + self.hit_tolerance

    def screen_direction(self, geometry):
        segment = self._segment(geometry)
        if segment is None:
            return None
        (cx, cy), (tx, ty) = segment
        length = math.hypot(tx - cx, ty - cy)
        if length < 1e-6:
            return None
        return ((tx - cx) / length, (ty - cy) / length)

    def _pen(self, highlighted):
        color = QColor('#ffd84d') if highlighted else self.color
        return QPen(color, 3 if highlighted else 2)


class ArrowHandle(_AxisLineHandle):
    """Translate arrow along one world axis."""

    def draw(self, painter, geometry, highlighted=False):
        segment = self._segment(geometry)
        if segment is None:
            return
        (cx, cy), (tx, ty) = segment
        pen = self._pen(highlighted)
        painter.setPen(pen)
        painter.setBrush(QBrush(pen.color()))
        painter.drawLine(QPointF(cx, cy), QPointF(tx, ty))

        direction = self.screen_direction(geometry)
        if direction is None:
            return
        dx, dy = direction
        head = float(self.handle_size) * 1.5
        # Perpendicular for the arrow head base
        nx, ny = -dy, dx
        base_x, base_y = tx - dx * head, ty - dy * head
        painter.drawPolygon(QPolygonF([
            QPointF(tx, ty),
            QPointF(base_x + nx * head / 2, base_y + ny * head / 2),
            QPointF(base_x - nx * head / 2, base_y - ny * head / 2),
        ]))


class ScaleBoxHandle(_AxisLineHandle):
    """Scale handle: axis line ending in a filled square."""

    def draw(self, painter, geometry, highlighted=False):
        segment = self._segment(geometry)
        if segment is None:
            return
        (cx, cy), (tx, ty) = segment
        pen = self._pen(highlighted)
        painter.setPen(pen)
        painter.setBrush(QBrush(pen.color()))
        painter.drawLine(QPointF(cx, cy), QPointF(tx, ty))
        size = float(self.handle_size)
        painter.drawRect(int(tx - size / 2), int(ty - size / 2), int(size), int(size))

    def get_cursor(self):
        return Qt.SizeFDiagCursor


class RingHandle(Handle):
    """Rotation ring around one world axis."""

    def hit_test(self, mouse_x, mouse_y, geometry):
        ring = geometry.rings.get(self.axis)
        if not ring:
            return False
        limit = self.hit_tolerance + 2
        for (ax, ay), (bx, by) in zip(ring, ring[1:]):
            if distance_to_segment(mouse_x, mouse_y, ax, ay, bx, by) <= limit:
                return True
        return False

    def draw(self, painter, geometry, highlighted=False):
        ring = geometry.rings.get(self.axis)
        if not ring:
            return
        color = QColor('#ffd84d') if highlighted else self.color
        painter.setPen(QPen(color, 3 if highlighted else 2))
        painter.setBrush(Qt.NoBrush)
        painter.drawPolyline(QPolygonF([QPointF(x, y) for x, y in ring]))

    def get_cursor(self):
        return Qt.CrossCursor
