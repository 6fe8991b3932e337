"""
AR Scene Editor - Data Models

This module contains the data model classes for an editable asset.
This is the MODEL in MVC architecture.

Public API: Transform, Vec3 and the scene settings types.
AssetRecord lives in models.asset and EditorSession in models.editor_session;
import those from their modules directly (they depend on utils/services).
"""

from .transform import Transform, Vec3
from .scene import SceneSettings, AxisConstraints, TransformMode

__all__ = [
    'Transform', 'Vec3',
    'SceneSettings', 'AxisConstraints', 'TransformMode',
]
