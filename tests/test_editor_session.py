"""
Tests for EditorSession, the single owner of editing state.

Covers:
- Asset selection resets history to the stored transform
- preview/commit/apply semantics and listener reasons
- Undo/redo through the session (including pending previews)
- Stale asset loads are discarded
- Reset, modes, constraints and scene settings
- Save and publish through the persistence bridge, including failures
"""
import threading
import pytest

from constants import DEFAULT_AMBIENT_INTENSITY
from models.editor_session import EditorSession
from models.scene import SceneSettings, TransformMode
from models.transform import Transform, Vec3
from services.asset_loader import LoadedAsset
from services.persistence import PersistenceBridge
from utils.transform_math import transform_to_payload


def _moved(x):
    return Transform(position=Vec3(x, 0.0, 0.0))


# ══════════════════════════════════════════════════════════════════════════
# Selection
# ══════════════════════════════════════════════════════════════════════════

class TestSelection:

    def test_select_loads_stored_transform(self, session, image_asset):
        session.select_asset(image_asset)
        assert session.asset is image_asset
        assert session.transform == image_asset.transform
        assert len(session.history) == 1
        assert session.history.current() == image_asset.transform

    def test_select_resets_history(self, session_with_asset, model_asset):
        session = session_with_asset
        session.apply(_moved(1.0), "move")
        session.select_asset(model_asset)
        assert len(session.history) == 1
        assert session.transform == Transform()
        assert not session.history.can_undo()

    def test_generation_increments(self, session, image_asset, model_asset):
        first = session.select_asset(image_asset)
        second = session.select_asset(model_asset)
        assert second == first + 1

    def test_listener_reason(self, session, image_asset):
        reasons = []
        session.add_listener(reasons.append)
        session.select_asset(image_asset)
        assert reasons == ['asset']


class TestAssetLoads:

    def test_current_load_applied(self, session, image_asset):
        generation = session.select_asset(image_asset)
        loaded = LoadedAsset(kind=image_asset.kind, tint=(1, 2, 3))
        assert session.apply_loaded_asset(generation, loaded) is True
        assert session.loaded_asset is loaded
        assert session.asset_warning is None

    def test_stale_load_discarded(self, session, image_asset, model_asset):
        stale = session.select_asset(image_asset)
        session.select_asset(model_asset)
        loaded = LoadedAsset(kind=image_asset.kind, tint=(1, 2, 3))
        assert session.apply_loaded_asset(stale, loaded) is False
        assert session.loaded_asset is None

    def test_placeholder_sets_warning(self, session, model_asset):
        generation = session.select_asset(model_asset)
        loaded = LoadedAsset.placeholder_for(model_asset.kind, "Failed to load asset: 404")
        session.apply_loaded_asset(generation, loaded)
        assert session.asset_warning == "Failed to load asset: 404"


# ══════════════════════════════════════════════════════════════════════════
# Edits and history
# ══════════════════════════════════════════════════════════════════════════

class TestEdits:

    def test_preview_does_not_record(self, session_with_asset):
        session = session_with_asset
        session.preview(_moved(2.0))
        assert session.transform == _moved(2.0)
        assert len(session.history) == 1
        assert session.has_pending_edit

    def test_commit_records_once(self, session_with_asset):
        session = session_with_asset
        session.preview(_moved(2.0))
        assert session.commit("drag") is True
        assert session.commit("drag") is False
        assert len(session.history) == 2

    def test_commit_without_change_records_nothing(self, session_with_asset):
        assert session_with_asset.commit("noop") is False
        assert len(session_with_asset.history) == 1

    def test_apply_records(self, session_with_asset):
        session = session_with_asset
        session.apply(_moved(3.0), "type")
        assert session.history.current() == _moved(3.0)

    def test_apply_same_value_notifies_preview(self, session_with_asset):
        session = session_with_asset
        reasons = []
        session.add_listener(reasons.append)
        session.apply(session.transform, "same")
        assert reasons == ['preview']
        assert len(session.history) == 1

    def test_undo_redo(self, session_with_asset, image_asset):
        session = session_with_asset
        session.apply(_moved(1.0))
        session.apply(_moved(2.0))
        assert session.undo() == _moved(1.0)
        assert session.transform == _moved(1.0)
        assert session.undo() == image_asset.transform
        assert session.undo() is None
        assert session.redo() == _moved(1.0)
        assert session.redo() == _moved(2.0)
        assert session.transform == _moved(2.0)

    def test_undo_commits_pending_preview_first(self, session_with_asset, image_asset):
        session = session_with_asset
        session.preview(_moved(4.0))
        session.undo()
        assert session.transform == image_asset.transform
        assert session.redo() == _moved(4.0)

    def test_reset(self, session_with_asset):
        session = session_with_asset
        session.update_settings(ambient_intensity=0.9)
        session.reset()
        assert session.transform == Transform()
        assert session.settings == SceneSettings()
        assert session.settings.ambient_intensity == DEFAULT_AMBIENT_INTENSITY
        # Reset is undoable
        assert session.undo() is not None


class TestModesAndSettings:

    def test_default_mode(self, session):
        assert session.mode == TransformMode.TRANSLATE

    def test_set_mode_accepts_strings(self, session):
        reasons = []
        session.add_listener(reasons.append)
        session.set_mode('rotate')
        session.set_mode(TransformMode.ROTATE)
        assert session.mode == TransformMode.ROTATE
        assert reasons == ['mode']

    def test_toggle_constraint(self, session):
        assert session.toggle_axis_constraint(TransformMode.SCALE, 'y') is False
        assert session.constraints.enabled_axes(TransformMode.SCALE) == ['x', 'z']
        assert session.constraints.is_enabled(TransformMode.TRANSLATE, 'y')

    def test_settings_not_in_history(self, session_with_asset):
        session = session_with_asset
        session.update_settings(material_color='#ff0000')
        assert session.toggle_grid() is False
        assert len(session.history) == 1
        assert session.settings.material_color == '#ff0000'

    def test_uniform_scale_default_on(self, session):
        assert session.uniform_scale is True
        session.set_uniform_scale(False)
        assert session.uniform_scale is False


# ══════════════════════════════════════════════════════════════════════════
# Persistence
# ══════════════════════════════════════════════════════════════════════════

class TestSave:

    def test_save_sends_live_transform(self, session_with_asset, fake_client):
        session = session_with_asset
        session.apply(_moved(1.5))
        assert session.save() is True
        assert fake_client.updates == [('a1', transform_to_payload(_moved(1.5)))]

    def test_save_uses_given_asset_and_transform(self, session_with_asset, fake_client):
        session = session_with_asset
        session.apply(_moved(4.0))
        assert session.save('m1', _moved(1.0)) is True
        assert fake_client.updates == [('m1', transform_to_payload(_moved(1.0)))]
        assert session.transform == _moved(4.0)

    def test_save_without_asset(self, session, fake_client):
        assert session.save() is False
        assert fake_client.updates == []

    def test_save_failure_keeps_transform(self, failing_client, image_asset):
        session = EditorSession(persistence=PersistenceBridge(failing_client))
        errors = []
        session.add_error_listener(errors.append)
        session.select_asset(image_asset)
        session.apply(_moved(2.0))
        assert session.save() is False
        assert session.transform == _moved(2.0)
        assert len(session.history) == 2
        assert errors and errors[0].startswith("Failed to save transformations")
        assert session.last_error == errors[0]


class TestPublish:

    def test_publish_sets_flag_and_returns_link(self, session_with_asset, fake_client):
        result = session_with_asset.publish()
        assert result.url == "https://ar.example.test/ar/a1"
        assert result.qr_png.startswith(b'\x89PNG')
        assert session_with_asset.asset.published is True
        assert fake_client.updates == [('a1', {'published': True})]

    def test_publish_twice_updates_once(self, session_with_asset, fake_client):
        assert session_with_asset.publish() is not None
        assert session_with_asset.publish() is None
        assert len(fake_client.updates) == 1
        assert not session_with_asset.can_publish()

    def test_publish_while_in_flight_is_ignored(self, session_with_asset, fake_client):
        session = session_with_asset
        session._publish_lock.acquire()
        try:
            assert not session.can_publish()
            assert session.publish() is None
        finally:
            session._publish_lock.release()
        assert fake_client.updates == []

    def test_concurrent_publish_single_update(self, fake_client, image_asset):
        started = threading.Event()
        release = threading.Event()

        class SlowBridge(PersistenceBridge):
            def publish(self, asset_id):
                started.set()
                release.wait(5)
                return super().publish(asset_id)

        session = EditorSession(persistence=SlowBridge(fake_client))
        session.select_asset(image_asset)
        results = []
        worker = threading.Thread(target=lambda: results.append(session.publish()))
        worker.start()
        assert started.wait(5)
        assert session.publish() is None
        release.set()
        worker.join(5)
        assert results[0] is not None
        assert len(fake_client.updates) == 1

    def test_publish_failure(self, failing_client, image_asset):
        session = EditorSession(persistence=PersistenceBridge(failing_client))
        errors = []
        session.add_error_listener(errors.append)
        session.select_asset(image_asset)
        assert session.publish() is None
        assert session.asset.published is False
        assert errors[0].startswith("Failed to publish project")
        # Lock released: another attempt is allowed
        assert session.can_publish()
