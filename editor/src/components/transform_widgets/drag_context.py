"""Drag context dataclass for the gizmo widget.

Unified drag state management instead of multiple boolean flags.
"""

from dataclasses import dataclass


@dataclass
class DragContext:
    """Drag state for one gizmo interaction, from press to release."""
    handle: object  # Handle being dragged
    start_x: float
    start_y: float

    def offset(self, x, y):
        """Mouse movement since the press, in pixels"""
        return x - self.start_x, y - self.start_y
