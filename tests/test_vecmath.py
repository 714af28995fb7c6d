import math

import pytest

from brickbreak.vecmath import (
    Vec2,
    clamp,
    clamp_vec,
    identity,
    mat_mul,
    ortho,
    rotate,
    rotate_y,
    rotate_z,
    scale,
    translate,
)

SAMPLE = tuple(float(i) for i in range(1, 17))


def _apply(m, point):
    x, y, z, w = point
    return tuple(m[i] * x + m[4 + i] * y + m[8 + i] * z + m[12 + i] * w for i in range(4))


def test_vector_add_sub_round_trip():
    a, b = Vec2(1.5, -2.0), Vec2(3.25, 4.0)
    assert (a + b) - b == a
    assert -a + a == Vec2(0.0, 0.0)


def test_vector_scalar_ops():
    a = Vec2(1.5, -2.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert (a * 4) / 4 == a
    assert a + 1 == Vec2(a.x + 1, a.y + 1)


def test_dot_and_length():
    a, b = Vec2(3.0, 4.0), Vec2(-2.0, 7.5)
    assert a.dot(b) == b.dot(a)
    assert math.isclose(a.dot(a), a.length() ** 2)


def test_normalized_is_unit():
    v = Vec2(-7.0, 2.5).normalized()
    assert math.isclose(v.length(), 1.0)


def test_normalized_zero_stays_zero():
    assert Vec2(0.0, 0.0).normalized() == Vec2(0.0, 0.0)


@pytest.mark.parametrize("value,expected", [(5.0, 1.0), (-1.0, 0.0), (0.5, 0.5)])
def test_clamp(value, expected):
    assert clamp(value, 0.0, 1.0) == expected


def test_clamp_vec_with_vector_bounds():
    half = Vec2(10.0, 3.0)
    result = clamp_vec(Vec2(20.0, -8.0), -half, half)
    assert result == Vec2(half.x, -half.y)


def test_clamp_vec_with_scalar_bounds():
    assert clamp_vec(Vec2(2.0, -2.0), -1.0, 1.0) == Vec2(1.0, -1.0)


def test_identity_is_neutral_for_mul():
    assert mat_mul(identity(), SAMPLE) == SAMPLE
    assert mat_mul(SAMPLE, identity()) == SAMPLE


def test_mat_mul_is_associative():
    b = tuple(float((i * 7) % 5) for i in range(16))
    c = tuple(float((i * 3) % 4) for i in range(16))
    assert mat_mul(mat_mul(SAMPLE, b), c) == mat_mul(SAMPLE, mat_mul(b, c))


def test_translate_identity():
    m = translate(identity(), (2.0, 3.0, 4.0))
    assert m[:12] == identity()[:12]
    assert m[12:] == (2.0, 3.0, 4.0, 1.0)


def test_scale_identity():
    m = scale(identity(), (2.0, 3.0, 4.0))
    assert (m[0], m[5], m[10], m[15]) == (2.0, 3.0, 4.0, 1.0)


def test_ortho_maps_screen_corners():
    m = ortho(0, 720, 480, 0, -1, 1)
    assert m[12] == pytest.approx(-1.0)
    assert m[13] == pytest.approx(1.0)
    top_left = _apply(m, (0.0, 0.0, 0.0, 1.0))
    bottom_right = _apply(m, (720.0, 480.0, 0.0, 1.0))
    assert top_left[:2] == pytest.approx((-1.0, 1.0), abs=1e-9)
    assert bottom_right[:2] == pytest.approx((1.0, -1.0), abs=1e-9)


def test_rotate_zero_angle_is_unchanged():
    result = rotate(SAMPLE, 0.0, (0.3, 1.0, 2.0))
    assert len(result) == 16
    assert tuple(result) == pytest.approx(SAMPLE, abs=1e-9)


def test_rotate_about_z_matches_rotate_z():
    angle = 0.7
    result = rotate(identity(), angle, (0.0, 0.0, 5.0))
    expected = rotate_z(identity(), angle)
    assert len(result) == len(expected)
    assert tuple(result) == pytest.approx(tuple(expected), abs=1e-9)
    assert result[0] == pytest.approx(math.cos(angle), abs=1e-9)


def test_rotate_about_y_matches_rotate_y():
    angle = 1.3
    result = rotate(identity(), angle, (0.0, 2.0, 0.0))
    expected = rotate_y(identity(), angle)
    assert len(result) == len(expected)
    assert tuple(result) == pytest.approx(tuple(expected), abs=1e-9)
    assert result[5] == pytest.approx(1.0, abs=1e-9)


def test_rotate_z_full_turn_is_identity():
    result = rotate_z(identity(), 2 * math.pi)
    assert len(result) == 16
    assert tuple(result) == pytest.approx(tuple(identity()), abs=1e-9)