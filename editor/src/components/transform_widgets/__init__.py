"""
AR Scene Editor - Gizmo Widget Components

This package contains the gizmo widget architecture:
- handles.py: ABC-based handle classes (ArrowHandle, RingHandle, ScaleBoxHandle)
- modes.py: Mode classes defining handle sets per transform mode
- drag_context.py: Unified drag state management
"""

from .handles import (
    Handle, ArrowHandle, RingHandle, ScaleBoxHandle,
    GizmoGeometry, compute_gizmo_geometry
)
from .modes import GizmoMode, TranslateGizmo, RotateGizmo, ScaleGizmo, create_mode
from .drag_context import DragContext

__all__ = [
    'Handle', 'ArrowHandle', 'RingHandle', 'ScaleBoxHandle',
    'GizmoGeometry', 'compute_gizmo_geometry',
    'GizmoMode', 'TranslateGizmo', 'RotateGizmo', 'ScaleGizmo', 'create_mode',
    'DragContext',
]
