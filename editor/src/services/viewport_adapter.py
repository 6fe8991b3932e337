"""Viewport render adapter.

Turns the editor session (transform, scene settings, loaded asset) into a
RenderScene of plain numpy data that the viewport widget paints, and maps
gizmo drags from pixels back to transforms. Nothing here touches Qt.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from constants import (
    DIRECTIONAL_LIGHT_INTENSITY, GRID_COLOR, GRID_DIVISIONS, GRID_SIZE,
    IMAGE_TARGET_PLANE_SIZE, MAX_MODEL_EDGES, MAX_MODEL_FACES, MIN_GIZMO_SCALE, PLACEHOLDER_BOX_SIZE,
    PLACEHOLDER_COLOR, ROTATE_PER_PIXEL, ROTATE_SNAP, SCALE_PER_PIXEL, SCALE_SNAP,
    TRANSLATE_PER_PIXEL, TRANSLATE_SNAP
)
from models.asset import AssetKind
from models.scene import TransformMode
from utils.transform_math import snap, with_transform_axis, with_uniform_scale

_AXIS_INDEX = {'x': 0, 'y': 1, 'z': 2}


# ======================================================================
# MATRICES
# ======================================================================

def rotation_matrix(rx, ry, rz):
    """3x3 rotation for XYZ Euler angles (applied X first): Rz @ Ry @ Rx"""
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)
    rot_x = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    rot_y = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rot_z = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])
    return rot_z @ rot_y @ rot_x


def model_matrix(transform):
    """4x4 world matrix T @ R @ S for a Transform"""
    matrix = np.identity(4)
    matrix[:3, :3] = rotation_matrix(*transform.rotation) @ np.diag(list(transform.scale))
    matrix[:3, 3] = list(transform.position)
    return matrix


def apply_matrix(matrix, points):
    """Transform (N, 3) points by a 4x4 matrix"""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    return pts @ matrix[:3, :3].T + matrix[:3, 3]


# ======================================================================
# GEOMETRY
# ======================================================================

def plane_geometry(size):
    """Square in the XY plane facing +Z: (vertices, faces, edges)"""
    h = size / 2.0
    vertices = np.array([[-h, -h, 0], [h, -h, 0], [h, h, 0], [-h, h, 0]], dtype=np.float64)
    faces = np.array([[0, 1, 2], [0, 2, 3]])
    edges = np.array([[0, 1], [1, 2], [2, 3], [3, 0]])
    return vertices, faces, edges


def box_geometry(size):
    """Axis-aligned cube centered on the origin: (vertices, faces, edges)"""
    h = size / 2.0
    vertices = np.array([
        [-h, -h, -h], [h, -h, -h], [h, h, -h], [-h, h, -h],
        [-h, -h, h], [h, -h, h], [h, h, h], [-h, h, h],
    ], dtype=np.float64)
    faces = np.array([
        [0, 2, 1], [0, 3, 2],  # back
        [4, 5, 6], [4, 6, 7],  # front
        [0, 1, 5], [0, 5, 4],  # bottom
        [3, 7, 6], [3, 6, 2],  # top
        [0, 4, 7], [0, 7, 3],  # left
        [1, 2, 6], [1, 6, 5],  # right
    ])
    edges = np.array([
        [0, 1], [1, 2], [2, 3], [3, 0],
        [4, 5], [5, 6], [6, 7], [7, 4],
        [0, 4], [1, 5], [2, 6], [3, 7],
    ])
    return vertices, faces, edges


def grid_segments(size=GRID_SIZE, divisions=GRID_DIVISIONS):
    """Line segments of a ground grid on the XZ plane, shape (K, 2, 3)"""
    h = size / 2.0
    segments = []
    for t in np.linspace(-h, h, divisions + 1):
        segments.append([[t, 0.0, -h], [t, 0.0, h]])
        segments.append([[-h, 0.0, t], [h, 0.0, t]])
    return np.array(segments, dtype=np.float64)


# ======================================================================
# COLOR AND SHADING
# ======================================================================

def hex_to_rgb(color):
    color = color.lstrip('#')
    if len(color) == 3:
        color = ''.join(c * 2 for c in color)
    return tuple(int(color[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb):
    return '#{:02x}{:02x}{:02x}'.format(*(int(max(0, min(255, round(c)))) for c in rgb))


def shade_faces(world_vertices, faces, base_rgb, ambient, light_position,
                directional=DIRECTIONAL_LIGHT_INTENSITY):
    """Flat Lambert shading per face, two-sided.

    Returns:
        (M, 3) float array of RGB values in 0-255
    """
    if len(faces) == 0:
        return np.zeros((0, 3))
    tri = world_vertices[faces[:, :3]]
    normals = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])
    lengths = np.linalg.norm(normals, axis=1)
    lengths[lengths == 0] = 1.0
    normals /= lengths[:, None]

    centroids = tri.mean(axis=1)
    to_light = np.asarray(light_position, dtype=np.float64) - centroids
    distances = np.linalg.norm(to_light, axis=1)
    distances[distances == 0] = 1.0
    to_light /= distances[:, None]

    diffuse = np.abs(np.einsum('ij,ij->i', normals, to_light))
    intensity = np.clip(ambient + directional * diffuse, 0.0, 1.0)
    return np.outer(intensity, np.asarray(base_rgb, dtype=np.float64))


# ======================================================================
# RENDER SCENE
# ======================================================================

@dataclass
class RenderNode:
    """The asset as drawable geometry.

    vertices are in node-local space; local_matrix (model fit) is applied
    before the transform's matrix.
    """
    geometry: str  # 'plane', 'box' or 'mesh'
    vertices: np.ndarray
    faces: np.ndarray
    edges: np.ndarray
    matrix: np.ndarray
    color: str
    placeholder: bool = False
    local_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    @property
    def world_matrix(self):
        return self.matrix @ self.local_matrix

    def world_vertices(self):
        return apply_matrix(self.world_matrix, self.vertices)


@dataclass
class RenderScene:
    node: Optional[RenderNode]
    ambient_intensity: float
    light_position: np.ndarray
    directional_intensity: float = DIRECTIONAL_LIGHT_INTENSITY
    grid: Optional[np.ndarray] = None
    grid_color: str = GRID_COLOR
    warning: Optional[str] = None


def fit_matrix(loaded):
    """Center the model on the origin and scale its largest extent to the fit size"""
    matrix = np.identity(4)
    factor = loaded.fit_scale
    matrix[:3, :3] *= factor
    matrix[:3, 3] = -loaded.center * factor
    return matrix


def _limit_edges(edges, limit=MAX_MODEL_EDGES):
    if len(edges) <= limit:
        return edges
    stride = int(math.ceil(len(edges) / limit))
    return edges[::stride]


def build_asset_node(asset, loaded, transform, material_color):
    """RenderNode for asset, falling back to flat placeholder geometry"""
    matrix = model_matrix(transform)
    if loaded is None or loaded.placeholder:
        if asset.kind == AssetKind.MODEL:
            vertices, faces, edges = box_geometry(PLACEHOLDER_BOX_SIZE)
            geometry = 'box'
        else:
            vertices, faces, edges = plane_geometry(IMAGE_TARGET_PLANE_SIZE)
            geometry = 'plane'
        return RenderNode(geometry, vertices, faces, edges, matrix, PLACEHOLDER_COLOR, placeholder=True)

    if loaded.kind == AssetKind.IMAGE_TARGET:
        vertices, faces, edges = plane_geometry(IMAGE_TARGET_PLANE_SIZE)
        color = rgb_to_hex(loaded.tint) if loaded.tint else material_color
        return RenderNode('plane', vertices, faces, edges, matrix, color)

    return RenderNode(
        'mesh', loaded.vertices, loaded.faces, _limit_edges(loaded.edges),
        matrix, material_color, local_matrix=fit_matrix(loaded),
    )


def build_render_scene(session, loaded_asset=None):
    """Describe what the viewport should draw for the session's current state.

    Args:
        session: EditorSession
        loaded_asset: LoadedAsset for the selected asset, None while loading

    Returns:
        RenderScene (node is None when no asset is selected)
    """
    settings = session.settings
    node = None
    warning = None
    if session.asset is not None:
        node = build_asset_node(session.asset, loaded_asset, session.transform, settings.material_color)
        if loaded_asset is not None and loaded_asset.placeholder:
            warning = loaded_asset.warning or "Failed to load asset"
    return RenderScene(
        node=node,
        ambient_intensity=settings.ambient_intensity,
        light_position=np.array(list(settings.light_position), dtype=np.float64),
        grid=grid_segments() if settings.show_grid else None,
        warning=warning,
    )


# ======================================================================
# GIZMO DRAG MAPPING
# ======================================================================

_DRAG_RULES = {
    TransformMode.TRANSLATE: (TRANSLATE_PER_PIXEL, TRANSLATE_SNAP),
    TransformMode.ROTATE: (ROTATE_PER_PIXEL, ROTATE_SNAP),
    TransformMode.SCALE: (SCALE_PER_PIXEL, SCALE_SNAP),
}


def screen_axis_direction(camera, transform, axis, width, height):
    """Unit 2D pixel direction of a world axis through the transform's position.

    Returns None when the axis points straight at the camera.
    """
    origin = np.array(list(transform.position), dtype=np.float64)
    tip = origin.copy()
    tip[_AXIS_INDEX[axis]] += 1.0
    screen, _, visible = camera.project([origin, tip], width, height)
    if not visible.all():
        return None
    direction = screen[1] - screen[0]
    length = np.linalg.norm(direction)
    if length < 1e-6:
        return None
    return tuple(direction / length)


def drag_amount(dx, dy, screen_dir=None):
    """Pixels moved along screen_dir (or right/up when no direction is known)"""
    if screen_dir is None:
        return dx - dy
    return dx * screen_dir[0] + dy * screen_dir[1]


def gizmo_drag(start, mode, axis, dx, dy, constraints, uniform_scale, screen_dir=None):
    """Transform produced by dragging a gizmo handle.

    Args:
        start: Transform at drag start
        mode: TransformMode of the handle
        axis: 'x', 'y' or 'z'
        dx, dy: Total mouse movement since drag start, in pixels
        constraints: AxisConstraints; a disabled axis leaves start untouched
        uniform_scale: Scale drags set every enabled scale axis when True
        screen_dir: Projected axis direction (see screen_axis_direction)

    Returns:
        Transform with the dragged component snapped to the mode's step
    """
    mode = TransformMode(mode)
    if not constraints.is_enabled(mode, axis):
        return start
    amount = drag_amount(dx, dy, screen_dir)
    if amount == 0:
        return start
    per_pixel, step = _DRAG_RULES[mode]
    field_name = mode.field_name
    current = getattr(getattr(start, field_name), axis)
    value = snap(current + amount * per_pixel, step)

    if mode == TransformMode.SCALE:
        value = max(MIN_GIZMO_SCALE, value)
        if uniform_scale:
            # Uniform drags still leave disabled scale axes alone
            return with_uniform_scale(start, value, constraints.enabled_axes(mode))
    return with_transform_axis(start, field_name, axis, value)


# ======================================================================
# PROJECTION FOR PAINTING
# ======================================================================

def project_segments(segments, camera, width, height):
    """Project (K, 2, 3) world segments; segments behind the camera are dropped.

    Returns:
        list of ((x1, y1), (x2, y2)) pixel tuples
    """
    if segments is None or len(segments) == 0:
        return []
    flat = np.asarray(segments, dtype=np.float64).reshape(-1, 3)
    screen, _, visible = camera.project(flat, width, height)
    screen = screen.reshape(-1, 2, 2)
    visible = visible.reshape(-1, 2).all(axis=1)
    return [(tuple(seg[0]), tuple(seg[1])) for seg, ok in zip(screen, visible) if ok]


def project_faces(scene, camera, width, height):
    """Shaded, projected faces of the scene node sorted back to front.

    Returns:
        list of (points, color_hex) where points is a list of (x, y) pixels
    """
    node = scene.node
    if node is None or node.faces is None or len(node.faces) == 0:
        return []
    if node.geometry == 'mesh' and len(node.faces) > MAX_MODEL_FACES:
        return []

    world = node.world_vertices()
    screen, depth, visible = camera.project(world, width, height)
    if node.placeholder:
        colors = np.tile(np.asarray(hex_to_rgb(node.color), dtype=np.float64), (len(node.faces), 1))
    else:
        colors = shade_faces(world, node.faces, hex_to_rgb(node.color),
                             scene.ambient_intensity, scene.light_position,
                             scene.directional_intensity)

    polygons = []
    for face, rgb in zip(node.faces, colors):
        if not visible[face].all():
            continue
        polygons.append((float(depth[face].mean()), [tuple(screen[i]) for i in face], rgb_to_hex(rgb)))
    polygons.sort(key=lambda item: item[0], reverse=True)
    return [(points, color) for _, points, color in polygons]


def project_edges(node, camera, width, height):
    """Projected outline/wireframe edges of a node"""
    if node is None or node.edges is None or len(node.edges) == 0:
        return []
    world = node.world_vertices()
    return project_segments(world[node.edges], camera, width, height)
