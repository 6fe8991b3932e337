"""
Shared fixtures for AR Scene Editor tests.

Provides asset rows and records, an editor session wired to a fake backend,
and fake HTTP sessions for the requests-based services.
"""
import sys
import os
import threading
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

import numpy as np
import requests

from models.asset import AssetKind, AssetRecord
from models.editor_session import EditorSession
from services.asset_loader import LoadedAsset
from services.persistence import PersistenceBridge
from services.supabase_client import BackendError
from services.viewport_adapter import box_geometry


# ── Sample backend rows ─────────────────────────────────────────────────

IMAGE_ROW = {
    'id': 'a1',
    'project_name': 'Poster',
    'target_path': 'targets/poster.png',
    'project_type': 'image_target',
    'published': False,
    'position': {'x': 0.5, 'y': 0.0, 'z': -1.0},
    'rotation': {'x': 0.0, 'y': 1.5707963267948966, 'z': 0.0},
    'scale': {'x': 2.0, 'y': 2.0, 'z': 2.0},
}

MODEL_ROW = {
    'id': 'm1',
    'project_name': 'Chair',
    'target_path': 'models/chair.glb',
    'project_type': 'model',
    'published': False,
    'position': None,
    'rotation': None,
    'scale': None,
}


# ── Fakes ───────────────────────────────────────────────────────────────

class FakeBackendClient:
    """In-memory stand-in for SupabaseClient"""

    def __init__(self, rows=(), fail_updates=False):
        self.rows = {str(row['id']): dict(row) for row in rows}
        self.updates = []
        self.fail_updates = fail_updates

    def fetch_asset(self, asset_id):
        if asset_id not in self.rows:
            raise BackendError(f"Asset {asset_id} not found")
        return dict(self.rows[asset_id])

    def list_assets(self):
        return [dict(row) for row in self.rows.values()]

    def update_asset(self, asset_id, fields):
        if self.fail_updates:
            raise BackendError("HTTP 500: database unavailable")
        self.updates.append((asset_id, dict(fields)))
        self.rows.setdefault(asset_id, {'id': asset_id}).update(fields)

    def public_url(self, target_path):
        if not target_path:
            return ""
        return f"https://cdn.example.test/{target_path}"


class GatedBackendClient(FakeBackendClient):
    """FakeBackendClient whose calls block until the test opens their gate

    fetch_asset waits on the gate named after the asset id, update_asset on
    the 'update' gate. Gates time out so a failing test cannot hang.
    """

    def __init__(self, rows=()):
        super().__init__(rows)
        self.gates = {}

    def gate(self, name):
        return self.gates.setdefault(name, threading.Event())

    def release_all(self):
        for event in list(self.gates.values()):
            event.set()

    def fetch_asset(self, asset_id):
        self.gate(asset_id).wait(5)
        return super().fetch_asset(asset_id)

    def update_asset(self, asset_id, fields):
        self.gate('update').wait(5)
        super().update_asset(asset_id, fields)


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, content=b"", text="", reason="OK"):
        self.status_code = status_code
        self._json = json_data
        self.content = content
        self.text = text
        self.reason = reason

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error")


class FakeHTTPSession:
    """Records requests and replays canned responses (or raises error)"""

    def __init__(self, responses=(), error=None):
        self.responses = list(responses)
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)

    def get(self, url, **kwargs):
        return self.request('GET', url, **kwargs)


class FakeAssetLoader:
    """Returns a loaded image target (tinted plane) or model (unit box) for every asset"""

    def __init__(self, tint=(200, 100, 50)):
        self.tint = tint
        self.loaded = []

    def load(self, asset):
        self.loaded.append(asset.id)
        if asset.kind == AssetKind.MODEL:
            vertices, faces, edges = box_geometry(1.0)
            return LoadedAsset(kind=asset.kind, vertices=vertices, faces=faces, edges=edges,
                               bounds=np.array([vertices.min(axis=0), vertices.max(axis=0)]))
        return LoadedAsset(kind=asset.kind, tint=self.tint, image_size=(4, 4))


# ── Fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def image_row():
    return dict(IMAGE_ROW)


@pytest.fixture
def model_row():
    return dict(MODEL_ROW)


@pytest.fixture
def image_asset(image_row):
    """Image target record with a non-default stored transform"""
    return AssetRecord.from_row(image_row, "https://cdn.example.test/targets/poster.png")


@pytest.fixture
def model_asset(model_row):
    """3D model record with no stored transform"""
    return AssetRecord.from_row(model_row, "https://cdn.example.test/models/chair.glb")


@pytest.fixture
def fake_client(image_row, model_row):
    return FakeBackendClient([image_row, model_row])


@pytest.fixture
def failing_client(image_row):
    return FakeBackendClient([image_row], fail_updates=True)


@pytest.fixture
def session(fake_client):
    """Editor session wired to the in-memory backend"""
    return EditorSession(persistence=PersistenceBridge(fake_client, "https://ar.example.test"))


@pytest.fixture
def session_with_asset(session, image_asset):
    session.select_asset(image_asset)
    return session


@pytest.fixture
def http_session_factory():
    """Build a FakeHTTPSession: factory(responses=[...], error=None)"""
    return FakeHTTPSession


@pytest.fixture
def response_factory():
    return FakeResponse


@pytest.fixture
def fake_loader():
    return FakeAssetLoader()


@pytest.fixture
def gated_client(image_row, model_row):
    client = GatedBackendClient([image_row, model_row])
    yield client
    client.release_all()
