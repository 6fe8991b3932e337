"""UI components for the AR Scene Editor

This package contains all UI components organized into subpackages:
- transform_widgets: gizmo handles, modes and drag state
- controls_panel_widgets: sliders and vector editors for the controls panel

Direct imports for convenience:
"""

from .hierarchy_panel import HierarchyPanel
from .viewport_area import ViewportArea
from .viewport_widget import ViewportWidget
from .transform_widget import TransformWidget
from .controls_panel import ControlsPanel
from .publish_dialog import PublishDialog
from .shortcuts_dialog import ShortcutsDialog

__all__ = [
    'HierarchyPanel',
    'ViewportArea',
    'ViewportWidget',
    'TransformWidget',
    'ControlsPanel',
    'PublishDialog',
    'ShortcutsDialog',
]
