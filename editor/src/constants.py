"""
AR Scene Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Default transform and scene settings
- Slider ranges and steps for the controls panel
- Gizmo snapping and drag sensitivity
- Viewport camera, grid and fallback colors
- Backend table/bucket defaults
"""

import math

# ======================================================================
# TRANSFORM DEFAULTS
# ======================================================================
# Applied when an asset record has no stored transform (or a null component)

DEFAULT_POSITION = (0.0, 0.0, 0.0)
DEFAULT_ROTATION = (0.0, 0.0, 0.0)  # Radians
DEFAULT_SCALE = (1.0, 1.0, 1.0)

# Fallback values for malformed numeric input (NaN, inf, empty text)
POSITION_INPUT_FALLBACK = 0.0
ROTATION_INPUT_FALLBACK = 0.0
SCALE_INPUT_FALLBACK = 1.0

AXES = ('x', 'y', 'z')

# ======================================================================
# SCENE SETTINGS DEFAULTS
# ======================================================================

DEFAULT_AMBIENT_INTENSITY = 0.5
DEFAULT_LIGHT_POSITION = (5.0, 5.0, 5.0)
DEFAULT_MATERIAL_COLOR = '#ffffff'
DEFAULT_SHOW_GRID = True
DIRECTIONAL_LIGHT_INTENSITY = 1.0

# ======================================================================
# SLIDER RANGES
# ======================================================================
# (min, max, step) per slider family

POSITION_SLIDER_RANGE = (-5.0, 5.0, 0.1)
ROTATION_SLIDER_RANGE = (-math.pi, math.pi, 0.01)
SCALE_SLIDER_RANGE = (0.1, 5.0, 0.1)
AMBIENT_SLIDER_RANGE = (0.0, 1.0, 0.01)
LIGHT_POSITION_SLIDER_RANGE = (-10.0, 10.0, 0.1)

# ======================================================================
# GIZMO
# ======================================================================

TRANSLATE_SNAP = 0.1
ROTATE_SNAP = math.radians(5)
SCALE_SNAP = 0.1

# Pixel-to-world drag sensitivity
TRANSLATE_PER_PIXEL = 0.01
ROTATE_PER_PIXEL = 0.01
SCALE_PER_PIXEL = 0.01

# Smallest scale a gizmo drag can produce (keeps the mesh from inverting)
MIN_GIZMO_SCALE = 0.01

GIZMO_AXIS_LENGTH = 1.0  # World units
GIZMO_HANDLE_SIZE = 7  # Pixels
GIZMO_HIT_TOLERANCE = 5  # Pixels
GIZMO_AXIS_COLORS = {
    'x': '#e5484d',
    'y': '#46a758',
    'z': '#3e63dd',
}

# ======================================================================
# VIEWPORT
# ======================================================================

CAMERA_FOV = 60.0
CAMERA_NEAR = 0.1
CAMERA_FAR = 1000.0
CAMERA_DISTANCE = 5.0
CAMERA_MIN_DISTANCE = 1.0
CAMERA_MAX_DISTANCE = 50.0
CAMERA_ORBIT_SPEED = 0.005  # Radians per pixel
CAMERA_ZOOM_SPEED = 1.2

GRID_SIZE = 20.0
GRID_DIVISIONS = 20
GRID_COLOR = '#4a4a4a'
VIEWPORT_BACKGROUND = '#1e1e1e'

PLACEHOLDER_COLOR = '#cccccc'  # Flat color for assets that failed to load

IMAGE_TARGET_PLANE_SIZE = 2.0
PLACEHOLDER_BOX_SIZE = 1.0
MODEL_FIT_SIZE = 2.0  # Loaded models are normalized to fit this extent

# Caps drawing cost for dense meshes (above MAX_MODEL_FACES only edges are drawn)
MAX_MODEL_EDGES = 4000
MAX_MODEL_FACES = 6000

# ======================================================================
# HISTORY
# ======================================================================

MAX_HISTORY_ENTRIES = None  # Unbounded: history[0] stays the selection-time transform
SLIDER_COMMIT_DELAY_MS = 400  # Keyboard-driven slider changes commit after this idle time

# ======================================================================
# BACKEND
# ======================================================================

DEFAULT_ASSET_TABLE = 'ar_assets'
DEFAULT_STORAGE_BUCKET = 'ar-assets'
DEFAULT_PUBLIC_ORIGIN = 'http://localhost:3000'
DEFAULT_REQUEST_TIMEOUT = 10.0

ASSET_COLUMNS = (
    'id', 'project_name', 'target_path', 'media_path', 'project_type',
    'published', 'rotation', 'scale', 'position',
)

IMAGE_TARGET_KIND = 'image_target'

# ======================================================================
# USER CONFIG
# ======================================================================

CONFIG_DIR_NAME = '.arscene'
MAX_RECENT_ASSETS = 10
