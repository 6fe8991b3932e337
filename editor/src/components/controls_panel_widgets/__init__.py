"""
AR Scene Editor - Controls Panel Widget Components

This package contains the editor widgets used by controls_panel.py:
float sliders, per-axis vector editors, the scale editor and the color swatch.
"""

from .property_editors import PropertySlider, Vec3Editor, ScaleEditor, ColorButton

__all__ = ['PropertySlider', 'Vec3Editor', 'ScaleEditor', 'ColorButton']
