"""
AR Scene Editor - Transform Math Utilities

Pure functions for unit conversion, input coercion, clamping, snapping and
(de)serialization of transforms. No UI dependencies.
"""

import math
from dataclasses import replace

from constants import (
    AXES, DEFAULT_POSITION, DEFAULT_ROTATION, DEFAULT_SCALE,
    POSITION_INPUT_FALLBACK, ROTATION_INPUT_FALLBACK, SCALE_INPUT_FALLBACK
)
from models.transform import Transform, Vec3


_INPUT_FALLBACKS = {
    'position': POSITION_INPUT_FALLBACK,
    'rotation': ROTATION_INPUT_FALLBACK,
    'scale': SCALE_INPUT_FALLBACK,
}


def degrees_to_radians(value):
    return value * math.pi / 180.0


def radians_to_degrees(value):
    return value * 180.0 / math.pi


def clamp(value, min_val, max_val):
    """Clamp value into [min_val, max_val]"""
    return max(min_val, min(max_val, value))


def snap(value, step):
    """Round value to the nearest multiple of step (no-op for falsy step)"""
    if not step:
        return value
    return round(value / step) * step


def coerce_number(value, fallback):
    """Convert user input to a finite float.

    Accepts numbers or text. Empty text, unparseable text, NaN and infinities
    all collapse to fallback.
    """
    if isinstance(value, str):
        value = value.strip().replace(',', '.')
        if not value:
            return fallback
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    if math.isnan(number) or math.isinf(number):
        return fallback
    return number


def input_fallback(field_name):
    """Type-appropriate default for malformed input on a transform field"""
    return _INPUT_FALLBACKS[field_name]


def with_axis(vec, axis, value):
    """Return a copy of vec with one component replaced"""
    if axis not in AXES:
        raise ValueError(f"Unknown axis: {axis}")
    return replace(vec, **{axis: float(value)})


def with_transform_axis(transform, field_name, axis, value):
    """Return a copy of transform with transform.<field_name>.<axis> = value"""
    vec = getattr(transform, field_name)
    return replace(transform, **{field_name: with_axis(vec, axis, value)})


def with_uniform_scale(transform, value, axes=AXES):
    """Return a copy of transform with the given scale axes (default all) set to value"""
    value = float(value)
    return replace(transform, scale=replace(transform.scale, **{axis: value for axis in axes}))


def vec_to_dict(vec):
    return {'x': vec.x, 'y': vec.y, 'z': vec.z}


def vec_from_dict(data, default):
    """Build a Vec3 from a {x, y, z} mapping, falling back per component.

    None/missing components (or a missing mapping) take the default value,
    matching how records written by older clients are read.
    """
    data = data or {}
    values = []
    for axis, fallback in zip(AXES, default):
        component = data.get(axis) if isinstance(data, dict) else None
        values.append(coerce_number(component, fallback) if component is not None else fallback)
    return Vec3(*values)


def transform_to_payload(transform):
    """Serialize a transform into the backend update payload.

    Returns:
        {'position': {x,y,z}, 'rotation': {x,y,z}, 'scale': {x,y,z}}
    """
    return {
        'position': vec_to_dict(transform.position),
        'rotation': vec_to_dict(transform.rotation),
        'scale': vec_to_dict(transform.scale),
    }


def transform_from_record(record):
    """Read position/rotation/scale columns from a backend row"""
    return Transform(
        position=vec_from_dict(record.get('position'), DEFAULT_POSITION),
        rotation=vec_from_dict(record.get('rotation'), DEFAULT_ROTATION),
        scale=vec_from_dict(record.get('scale'), DEFAULT_SCALE),
    )


def transforms_close(a, b, tolerance=1e-9):
    """Component-wise comparison with tolerance"""
    for field_name in ('position', 'rotation', 'scale'):
        for left, right in zip(getattr(a, field_name), getattr(b, field_name)):
            if abs(left - right) > tolerance:
                return False
    return True
