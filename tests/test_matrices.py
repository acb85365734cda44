import pytest

from isotiles.matrices import (
    Mat3,
    Mat4,
    look_at,
    perspective,
    quat_to_mat4,
    rotate_x_deg,
    rotate_y_deg,
    rotate_z_deg,
    scale,
    translate,
)
from isotiles.vectors import Vec3, Vec4, Versor


def _sample() -> Mat4:
    m = translate(Mat4.identity(), Vec3(1.0, -2.0, 3.0))
    m = rotate_x_deg(m, 30.0)
    m = rotate_y_deg(m, 45.0)
    return scale(m, Vec3(2.0, 3.0, 0.5))


def test_mat3_identity_and_zero():
    assert Mat3.identity().m == (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
    assert Mat3.zero().m == (0.0,) * 9


def test_mat4_identity_diagonal():
    ident = Mat4.identity()
    assert [ident[i] for i in (0, 5, 10, 15)] == [1.0, 1.0, 1.0, 1.0]
    assert sum(ident) == 4.0


def test_wrong_length_rejected():
    with pytest.raises(ValueError):
        Mat4((1.0, 2.0))
    with pytest.raises(ValueError):
        Mat3((0.0,) * 10)


def test_identity_is_neutral():
    m = _sample()
    assert (Mat4.identity() * m).m == pytest.approx(m.m)
    assert (m * Mat4.identity()).m == pytest.approx(m.m)


def test_translate_moves_point():
    m = translate(Mat4.identity(), Vec3(1.0, -2.0, 3.0))
    assert tuple(m * Vec4(0.0, 0.0, 0.0, 1.0)) == pytest.approx((1.0, -2.0, 3.0, 1.0))


def test_scale_scales_point():
    m = scale(Mat4.identity(), Vec3(2.0, 3.0, 4.0))
    assert tuple(m * Vec4(1.0, 1.0, 1.0, 1.0)) == pytest.approx((2.0, 3.0, 4.0, 1.0))


def test_rotate_z_quarter_turn():
    m = rotate_z_deg(Mat4.identity(), 90.0)
    assert tuple(m * Vec4(1.0, 0.0, 0.0, 1.0)) == pytest.approx(
        (0.0, 1.0, 0.0, 1.0), abs=1e-9
    )


def test_rotations_preserve_determinant():
    m = rotate_z_deg(rotate_y_deg(rotate_x_deg(Mat4.identity(), 17.0), 29.0), 41.0)
    assert m.determinant() == pytest.approx(1.0)


def test_determinant_of_scale_is_product():
    m = scale(Mat4.identity(), Vec3(2.0, 3.0, 4.0))
    assert m.determinant() == pytest.approx(2.0 * 3.0 * 4.0)
    assert Mat4.zero().determinant() == 0.0


def test_inverse_round_trip():
    m = _sample()
    assert (m * m.inverse()).m == pytest.approx(Mat4.identity().m, abs=1e-9)
    assert (m.inverse() * m).m == pytest.approx(Mat4.identity().m, abs=1e-9)


def test_inverse_of_translation():
    m = translate(Mat4.identity(), Vec3(4.0, 5.0, 6.0))
    expected = translate(Mat4.identity(), Vec3(-4.0, -5.0, -6.0))
    assert m.inverse().m == pytest.approx(expected.m)


def test_inverse_of_singular_warns_and_returns_same():
    m = Mat4.zero()
    with pytest.warns(RuntimeWarning):
        result = m.inverse()
    assert result == m


def test_transpose_twice_is_identity_operation():
    m = _sample()
    assert m.transposed().transposed() == m
    assert m.transposed()[4] == m[1]
    assert m.transposed()[12] == m[3]


def test_transpose_of_rotation_is_inverse():
    m = rotate_y_deg(Mat4.identity(), 33.0)
    assert m.transposed().m == pytest.approx(m.inverse().m)


def test_quat_identity_gives_identity_matrix():
    assert quat_to_mat4(Versor()).m == pytest.approx(Mat4.identity().m)


def test_quat_matches_axis_rotation():
    q = Versor.from_axis_deg(90.0, 0.0, 0.0, 1.0)
    expected = rotate_z_deg(Mat4.identity(), 90.0)
    assert quat_to_mat4(q).m == pytest.approx(expected.m, abs=1e-9)


def test_look_at_moves_camera_to_origin():
    cam = Vec3(0.0, 0.0, 5.0)
    view = look_at(cam, Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    assert tuple(view * Vec4.from_vec3(cam, 1.0)) == pytest.approx(
        (0.0, 0.0, 0.0, 1.0), abs=1e-9
    )
    assert tuple(view * Vec4(0.0, 0.0, 0.0, 1.0)) == pytest.approx(
        (0.0, 0.0, -5.0, 1.0), abs=1e-9
    )


def test_perspective_layout():
    p = perspective(67.0, 1.5, 0.1, 100.0)
    assert p[11] == -1.0
    assert p[15] == 0.0
    assert p[0] == pytest.approx(p[5] / 1.5)


def test_mat4_str_rows():
    text = str(Mat4.identity())
    assert text.splitlines()[1] == "[1.00][0.00][0.00][0.00]"