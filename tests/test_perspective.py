import math

import pytest

from rayshooter.perspective import Perspective


def test_from_angle_level():
    p = Perspective.from_angle(0.0, 0.65, 0.0, 100.0)
    assert p.y_offset == 0.0
    assert p.horizon_height == pytest.approx(0.65)


def test_from_angle_uses_tangent():
    p = Perspective.from_angle(math.pi / 4, 1.0, 0.25, 200.0)
    assert p.y_offset == pytest.approx(200.0)
    assert p.horizon_height == pytest.approx(0.75)


def test_offset_camera():
    p = Perspective(3.0, 0.5)
    q = p.offset_camera(0.2)
    assert q.horizon_height == pytest.approx(0.7)
    assert q.y_offset == 3.0
    assert p.horizon_height == 0.5


def test_offset_subject_identity():
    p = Perspective(1.0, 0.65)
    assert p.offset_subject(0.0, 1.0) == p


def test_offset_subject_value():
    q = Perspective(0.0, 1.0).offset_subject(0.5, 2.0)
    assert q.horizon_height == pytest.approx(0.375)


def test_is_immutable():
    p = Perspective(0.0, 0.5)
    with pytest.raises(AttributeError):
        p.horizon_height = 1.0
    assert p.horizon_height == 0.5
    assert p.y_offset == 0.0