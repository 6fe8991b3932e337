"""Orbit camera for the viewport.

Stores orbital angles around a target point plus the perspective
parameters, and builds numpy view/projection matrices (column-vector
convention) to project world points onto the widget.
"""

import math

import numpy as np

from constants import (
    CAMERA_DISTANCE, CAMERA_FAR, CAMERA_FOV, CAMERA_MAX_DISTANCE,
    CAMERA_MIN_DISTANCE, CAMERA_NEAR
)

_MAX_PITCH = math.pi / 2 - 0.01


def look_at(eye, target, up=(0.0, 1.0, 0.0)):
    eye = np.asarray(eye, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    forward = target - eye
    forward /= np.linalg.norm(forward)
    side = np.cross(forward, np.asarray(up, dtype=np.float64))
    side /= np.linalg.norm(side)
    true_up = np.cross(side, forward)

    view = np.identity(4)
    view[0, :3] = side
    view[1, :3] = true_up
    view[2, :3] = -forward
    view[0, 3] = -np.dot(side, eye)
    view[1, 3] = -np.dot(true_up, eye)
    view[2, 3] = np.dot(forward, eye)
    return view


def perspective(fov_degrees, aspect, near, far):
    f = 1.0 / math.tan(math.radians(fov_degrees) / 2.0)
    proj = np.zeros((4, 4))
    proj[0, 0] = f / aspect
    proj[1, 1] = f
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = 2.0 * far * near / (near - far)
    proj[3, 2] = -1.0
    return proj


class OrbitCamera:
    """Camera orbiting a target at a clamped distance.

    yaw rotates around the world Y axis, pitch tilts toward the poles.
    """

    def __init__(self, fov=CAMERA_FOV, distance=CAMERA_DISTANCE,
                 near=CAMERA_NEAR, far=CAMERA_FAR):
        self.fov = fov
        self.near = near
        self.far = far
        self.distance = distance
        self.yaw = math.radians(35)
        self.pitch = math.radians(25)
        self.target = np.zeros(3)

    @property
    def eye(self):
        cp = math.cos(self.pitch)
        offset = np.array([
            cp * math.sin(self.yaw),
            math.sin(self.pitch),
            cp * math.cos(self.yaw),
        ])
        return self.target + self.distance * offset

    def orbit(self, dyaw, dpitch):
        """Adjust orbital angles by delta (radians); pitch stays off the poles"""
        self.yaw += dyaw
        self.pitch = max(-_MAX_PITCH, min(_MAX_PITCH, self.pitch + dpitch))

    def zoom(self, factor):
        """Multiply the distance by factor, clamped to the allowed range"""
        self.distance = max(CAMERA_MIN_DISTANCE, min(CAMERA_MAX_DISTANCE, self.distance * factor))

    def view_matrix(self):
        return look_at(self.eye, self.target)

    def projection_matrix(self, aspect):
        return perspective(self.fov, aspect, self.near, self.far)

    def project(self, points, width, height):
        """Project world points to widget pixels.

        Args:
            points: (N, 3) array-like of world coordinates
            width, height: Widget size in pixels

        Returns:
            (screen, depth, visible): (N, 2) pixel coordinates, (N,) view
            depth, and (N,) bool mask of points in front of the near plane
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
        if len(pts) == 0:
            return np.zeros((0, 2)), np.zeros(0), np.zeros(0, dtype=bool)
        aspect = width / height if height else 1.0
        matrix = self.projection_matrix(aspect) @ self.view_matrix()
        homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
        clip = homogeneous @ matrix.T

        depth = clip[:, 3]
        visible = depth > self.near
        w = np.where(visible, depth, 1.0)
        ndc = clip[:, :2] / w[:, None]
        screen = np.empty((len(pts), 2))
        screen[:, 0] = (ndc[:, 0] + 1.0) * 0.5 * width
        screen[:, 1] = (1.0 - ndc[:, 1]) * 0.5 * height
        return screen, depth, visible
