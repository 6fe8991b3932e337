"""Asset resource loading for the viewport.

Downloads an asset's resource file and turns it into something the viewport
can draw: an image target becomes a plane tinted with the image mean color,
a 3D model becomes a vertex/face/edge set. Failures never raise; they yield a
placeholder LoadedAsset carrying a warning for the UI.
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import requests
import trimesh
from PIL import Image

from constants import DEFAULT_REQUEST_TIMEOUT, MODEL_FIT_SIZE
from models.asset import AssetKind

logger = logging.getLogger('AssetLoader')

MODEL_EXTENSIONS = ('glb', 'gltf', 'obj', 'stl', 'ply', 'off')


@dataclass
class LoadedAsset:
    """Drawable form of an asset resource.

    vertices/faces/edges are only set for models. tint is the mean RGB of an
    image target (0-255). When placeholder is True the viewport draws the
    fallback geometry and shows warning.
    """
    kind: AssetKind
    placeholder: bool = False
    warning: Optional[str] = None
    tint: Optional[Tuple[int, int, int]] = None
    image_size: Optional[Tuple[int, int]] = None
    vertices: Optional[np.ndarray] = None
    faces: Optional[np.ndarray] = None
    edges: Optional[np.ndarray] = None
    bounds: Optional[np.ndarray] = None

    @classmethod
    def placeholder_for(cls, kind, warning):
        return cls(kind=kind, placeholder=True, warning=warning)

    @property
    def fit_scale(self):
        """Uniform factor that makes the model's largest extent MODEL_FIT_SIZE"""
        if self.bounds is None:
            return 1.0
        extent = float(np.max(self.bounds[1] - self.bounds[0]))
        if extent <= 0:
            return 1.0
        return MODEL_FIT_SIZE / extent

    @property
    def center(self):
        if self.bounds is None:
            return np.zeros(3)
        return (self.bounds[0] + self.bounds[1]) / 2.0


def model_file_type(url):
    """Guess the trimesh file type from a URL, defaulting to glb"""
    path = url.split('?', 1)[0].split('#', 1)[0]
    if '.' in path.rsplit('/', 1)[-1]:
        ext = path.rsplit('.', 1)[-1].lower()
        if ext in MODEL_EXTENSIONS:
            return ext
    return 'glb'


def decode_image(data):
    """Decode image bytes into (tint, size)"""
    img = Image.open(io.BytesIO(data)).convert('RGB')
    pixels = np.asarray(img, dtype=np.float64).reshape(-1, 3)
    tint = tuple(int(round(c)) for c in pixels.mean(axis=0))
    return tint, img.size


def decode_mesh(data, file_type):
    """Decode model bytes into a single trimesh.Trimesh"""
    mesh = trimesh.load(io.BytesIO(data), file_type=file_type)
    if isinstance(mesh, trimesh.Scene):
        if not mesh.geometry:
            raise ValueError("Model contains no geometry")
        mesh = trimesh.util.concatenate(tuple(mesh.geometry.values()))
    if len(mesh.vertices) == 0:
        raise ValueError("Model contains no vertices")
    return mesh


class AssetLoader:
    """Fetches and decodes asset resources.

    Args:
        session: requests.Session (or compatible) used for downloads
        timeout: Download timeout in seconds
    """

    def __init__(self, session=None, timeout=DEFAULT_REQUEST_TIMEOUT):
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def fetch(self, url):
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.content

    def load(self, asset):
        """Load asset's resource. Never raises.

        Returns:
            LoadedAsset (placeholder=True with a warning on any failure)
        """
        if not asset.resource_url:
            logger.warning("Asset %s has no resource URL", asset.id)
            return LoadedAsset.placeholder_for(asset.kind, "Asset has no resource file")

        try:
            data = self.fetch(asset.resource_url)
        except requests.exceptions.RequestException as e:
            logger.warning("Failed to download %s: %s", asset.resource_url, e)
            return LoadedAsset.placeholder_for(asset.kind, f"Failed to load asset: {e}")

        try:
            if asset.kind == AssetKind.IMAGE_TARGET:
                tint, size = decode_image(data)
                logger.debug("Loaded image target %s (%dx%d)", asset.id, size[0], size[1])
                return LoadedAsset(kind=asset.kind, tint=tint, image_size=size)

            mesh = decode_mesh(data, model_file_type(asset.resource_url))
            logger.debug("Loaded model %s (%d vertices, %d faces)",
                         asset.id, len(mesh.vertices), len(mesh.faces))
            return LoadedAsset(
                kind=asset.kind,
                vertices=np.asarray(mesh.vertices, dtype=np.float64),
                faces=np.asarray(mesh.faces, dtype=np.int64),
                edges=np.asarray(mesh.edges_unique, dtype=np.int64),
                bounds=np.asarray(mesh.bounds, dtype=np.float64),
            )
        except Exception as e:
            # Decoders raise a wide range of types for corrupt files
            logger.warning("Failed to decode %s: %s", asset.resource_url, e)
            return LoadedAsset.placeholder_for(asset.kind, f"Failed to load asset: {e}")
