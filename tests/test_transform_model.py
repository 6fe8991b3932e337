"""
Tests for the transform value types and transform math helpers.

Covers:
- Vec3/Transform defaults, equality and immutability
- Unit conversion, clamping, snapping
- Malformed input coercion
- Backend row reading (per-component fallback) and save payloads
- AssetRecord construction from rows
"""
import dataclasses
import math
import pytest

from models.asset import AssetKind, AssetRecord
from models.transform import Transform, Vec3
from utils.transform_math import (
    clamp, coerce_number, degrees_to_radians, input_fallback, radians_to_degrees,
    snap, transform_from_record, transform_to_payload, transforms_close,
    with_axis, with_transform_axis, with_uniform_scale
)


# ══════════════════════════════════════════════════════════════════════════
# Value types
# ══════════════════════════════════════════════════════════════════════════

class TestTransformValue:

    def test_defaults(self):
        t = Transform()
        assert t.position == Vec3(0.0, 0.0, 0.0)
        assert t.rotation == Vec3(0.0, 0.0, 0.0)
        assert t.scale == Vec3(1.0, 1.0, 1.0)

    def test_equality_is_by_value(self):
        a = Transform(position=Vec3(1, 2, 3))
        b = Transform(position=Vec3(1, 2, 3))
        assert a == b
        assert a != Transform()

    def test_frozen(self):
        t = Transform()
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.position = Vec3(1, 1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            t.scale.x = 5.0

    def test_vec3_unpacks(self):
        x, y, z = Vec3(1.0, 2.0, 3.0)
        assert (x, y, z) == (1.0, 2.0, 3.0)

    def test_scale_not_clamped_by_model(self):
        t = Transform(scale=Vec3(-2.0, 0.0, 100.0))
        assert t.scale.x == -2.0
        assert t.scale.y == 0.0

    def test_rotation_not_wrapped(self):
        t = Transform(rotation=Vec3(10 * math.pi, 0.0, 0.0))
        assert t.rotation.x == 10 * math.pi


# ══════════════════════════════════════════════════════════════════════════
# Math helpers
# ══════════════════════════════════════════════════════════════════════════

class TestConversions:

    def test_degrees_radians(self):
        assert degrees_to_radians(180.0) == pytest.approx(math.pi)
        assert radians_to_degrees(math.pi / 2) == pytest.approx(90.0)

    @pytest.mark.parametrize("value,expected", [(-10, -5), (10, 5), (1.5, 1.5)])
    def test_clamp(self, value, expected):
        assert clamp(value, -5, 5) == expected

    def test_snap(self):
        assert snap(0.26, 0.1) == pytest.approx(0.3)
        assert snap(math.radians(7), math.radians(5)) == pytest.approx(math.radians(5))
        assert snap(0.26, 0) == 0.26


class TestCoercion:

    @pytest.mark.parametrize("text", ["", "   ", "abc", "nan", "inf", "-inf", None])
    def test_malformed_falls_back(self, text):
        assert coerce_number(text, 7.0) == 7.0

    def test_parses_text_and_numbers(self):
        assert coerce_number(" 2.5 ", 0.0) == 2.5
        assert coerce_number("1,5", 0.0) == 1.5
        assert coerce_number(3, 0.0) == 3.0

    def test_field_fallbacks(self):
        assert input_fallback('position') == 0.0
        assert input_fallback('rotation') == 0.0
        assert input_fallback('scale') == 1.0


class TestDerivedTransforms:

    def test_with_axis(self):
        assert with_axis(Vec3(1, 2, 3), 'y', 9) == Vec3(1, 9, 3)

    def test_with_axis_rejects_unknown(self):
        with pytest.raises(ValueError):
            with_axis(Vec3(), 'w', 1)

    def test_with_transform_axis_leaves_original(self):
        t = Transform()
        moved = with_transform_axis(t, 'position', 'x', 1.5)
        assert moved.position.x == 1.5
        assert t.position.x == 0.0

    def test_with_uniform_scale(self):
        t = with_uniform_scale(Transform(scale=Vec3(1, 2, 3)), 0.5)
        assert t.scale == Vec3(0.5, 0.5, 0.5)

    def test_with_uniform_scale_selected_axes(self):
        t = with_uniform_scale(Transform(scale=Vec3(1, 2, 3)), 0.5, ('x', 'z'))
        assert t.scale == Vec3(0.5, 2, 0.5)

    def test_transforms_close(self):
        a = Transform(position=Vec3(0.1 + 0.2, 0, 0))
        b = Transform(position=Vec3(0.3, 0, 0))
        assert transforms_close(a, b)
        assert not transforms_close(a, Transform())


# ══════════════════════════════════════════════════════════════════════════
# Backend rows and payloads
# ══════════════════════════════════════════════════════════════════════════

class TestRecords:

    def test_payload_shape(self):
        t = Transform(position=Vec3(1, 2, 3), rotation=Vec3(0.1, 0.2, 0.3), scale=Vec3(2, 2, 2))
        assert transform_to_payload(t) == {
            'position': {'x': 1, 'y': 2, 'z': 3},
            'rotation': {'x': 0.1, 'y': 0.2, 'z': 0.3},
            'scale': {'x': 2, 'y': 2, 'z': 2},
        }

    def test_missing_fields_use_defaults(self):
        assert transform_from_record({}) == Transform()

    def test_null_components_fall_back_individually(self):
        t = transform_from_record({
            'position': {'x': 1.0, 'y': None},
            'scale': {'x': None, 'y': 3.0, 'z': 'junk'},
        })
        assert t.position == Vec3(1.0, 0.0, 0.0)
        assert t.scale == Vec3(1.0, 3.0, 1.0)

    def test_payload_reads_back(self):
        t = Transform(position=Vec3(-1, 0.5, 2), rotation=Vec3(0, math.pi, 0), scale=Vec3(1, 2, 3))
        assert transform_from_record(transform_to_payload(t)) == t


class TestAssetRecord:

    def test_from_image_row(self, image_row):
        asset = AssetRecord.from_row(image_row, "https://cdn/x.png")
        assert asset.id == 'a1'
        assert asset.name == 'Poster'
        assert asset.kind == AssetKind.IMAGE_TARGET
        assert asset.resource_url == "https://cdn/x.png"
        assert asset.transform.position == Vec3(0.5, 0.0, -1.0)
        assert asset.transform.scale == Vec3(2.0, 2.0, 2.0)

    def test_anything_else_is_model(self, model_row):
        model_row['project_type'] = 'video'
        asset = AssetRecord.from_row(model_row)
        assert asset.kind == AssetKind.MODEL
        assert asset.resource_url == 'models/chair.glb'
        assert asset.transform == Transform()

    def test_published_flag(self, image_row):
        image_row['published'] = None
        assert AssetRecord.from_row(image_row).published is False
        image_row['published'] = True
        assert AssetRecord.from_row(image_row).published is True
