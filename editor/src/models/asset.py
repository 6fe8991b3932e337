"""Asset reference held by the editor session.

The backend owns the record; the editor only keeps a read reference plus the
transform it is responsible for writing back.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from constants import IMAGE_TARGET_KIND
from models.transform import Transform
from utils.transform_math import transform_from_record


class AssetKind(Enum):
    """Discriminator between flat image targets and 3D model placements."""
    IMAGE_TARGET = 'image_target'
    MODEL = 'model'

    @classmethod
    def from_project_type(cls, project_type):
        """Anything that is not an image target is rendered as a model."""
        if project_type == IMAGE_TARGET_KIND:
            return cls.IMAGE_TARGET
        return cls.MODEL


@dataclass(frozen=True)
class AssetRecord:
    id: str
    name: str = ""
    resource_url: str = ""
    kind: AssetKind = AssetKind.IMAGE_TARGET
    published: bool = False
    transform: Transform = field(default_factory=Transform)
    project_type: Optional[str] = None

    @classmethod
    def from_row(cls, row, resource_url=None):
        """Build a record from a backend row.

        Args:
            row: dict with id, project_name, target_path, project_type,
                published, position, rotation, scale
            resource_url: Resolved public URL; defaults to row['target_path']
        """
        project_type = row.get('project_type')
        return cls(
            id=str(row['id']),
            name=row.get('project_name') or "",
            resource_url=resource_url if resource_url is not None else (row.get('target_path') or ""),
            kind=AssetKind.from_project_type(project_type),
            published=bool(row.get('published') or False),
            transform=transform_from_record(row),
            project_type=project_type,
        )
