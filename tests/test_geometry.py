import io
import math

import pytest

from wireframe3d.geometry import (
    PI,
    DataError,
    FigureError,
    MoveData,
    Point,
    RotateData,
    ScaleData,
    export_points,
    points_center,
    read_count,
    read_point,
    read_points,
    rotate_points,
    scale_points,
    to_rad,
    tokenize,
    translate_points,
)

SAMPLE = [Point(1.5, -2.25, 3.0), Point(-4.0, 0.5, 2.0), Point(0.0, 8.0, -1.75)]
SAMPLE_FLAT = [c for p in SAMPLE for c in (p.x, p.y, p.z)]


def _dist(a, b):
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


def test_to_rad_uses_source_pi():
    assert to_rad(180) == pytest.approx(PI)
    assert to_rad(0) == 0


def test_tokenize_splits_whitespace():
    assert list(tokenize(" 1\n2\t3  ")) == ["1", "2", "3"]


def test_read_points_parses_count_and_vertices():
    tokens = tokenize("2\n1.5 -2.25 3\n-4 0.5 2\n")
    assert read_points(tokens) == SAMPLE[:2]


def test_read_points_leaves_rest_of_stream():
    tokens = tokenize("1 1 2 3 7")
    read_points(tokens)
    assert next(tokens) == "7"


@pytest.mark.parametrize("text", ["", "x", "-1", "2.5"])
def test_read_count_rejects_bad_input(text):
    with pytest.raises(DataError, match="invalid vertex count format"):
        read_count(tokenize(text), "vertex")


@pytest.mark.parametrize("text", ["1 2", "1 a 3", ""])
def test_read_point_rejects_bad_input(text):
    with pytest.raises(DataError, match="invalid vertex format"):
        read_point(tokenize(text))


def test_read_points_too_few_vertices():
    with pytest.raises(FigureError):
        read_points(tokenize("3 1 2 3 4 5 6"))


def test_export_points_format():
    out = io.StringIO()
    export_points(out, [Point(1, 2, 3)])
    assert out.getvalue() == "1\n1.000000 2.000000 3.000000\n"


def test_export_then_read_round_trip():
    out = io.StringIO()
    export_points(out, SAMPLE)
    assert read_points(tokenize(out.getvalue())) == SAMPLE


def test_points_center_of_single_point():
    assert points_center([SAMPLE[0]]) == SAMPLE[0]


def test_points_center_empty_raises():
    with pytest.raises(DataError):
        points_center([])


def test_translate_moves_center_by_offset():
    moved = translate_points(SAMPLE, MoveData(1.0, -2.0, 0.5))
    after = points_center(moved)
    before = points_center(SAMPLE)
    assert (after.x, after.y, after.z) == pytest.approx(
        (before.x + 1.0, before.y - 2.0, before.z + 0.5), abs=1e-9
    )


def test_translate_then_back_restores():
    moved = translate_points(SAMPLE, MoveData(3, 4, 5))
    back = translate_points(moved, MoveData(-3, -4, -5))
    assert [c for p in back for c in (p.x, p.y, p.z)] == pytest.approx(SAMPLE_FLAT, abs=1e-9)


@pytest.mark.parametrize("data", [ScaleData(0, 1, 1), ScaleData(1, -1, 1), ScaleData(1, 1, 0)])
def test_scale_rejects_non_positive(data):
    with pytest.raises(DataError):
        data.validate()
    with pytest.raises(DataError):
        scale_points(SAMPLE, points_center(SAMPLE), data)


def test_scale_keeps_center_fixed():
    center = points_center(SAMPLE)
    scaled = scale_points(SAMPLE, center, ScaleData(2, 3, 0.5))
    after = points_center(scaled)
    assert (after.x, after.y, after.z) == pytest.approx((center.x, center.y, center.z), abs=1e-9)


def test_scale_then_inverse_restores():
    center = points_center(SAMPLE)
    scaled = scale_points(SAMPLE, center, ScaleData(2, 4, 0.5))
    back = scale_points(scaled, center, ScaleData(0.5, 0.25, 2))
    assert [c for p in back for c in (p.x, p.y, p.z)] == pytest.approx(SAMPLE_FLAT, abs=1e-9)


def test_uniform_scale_multiplies_distance_to_center():
    center = points_center(SAMPLE)
    scaled = scale_points(SAMPLE, center, ScaleData(3, 3, 3))
    for before, after in zip(SAMPLE, scaled):
        assert _dist(after, center) == pytest.approx(3 * _dist(before, center))


def test_rotation_preserves_distances_to_center():
    center = points_center(SAMPLE)
    rotated = rotate_points(SAMPLE, center, RotateData(30, 45, 60))
    for before, after in zip(SAMPLE, rotated):
        assert _dist(after, center) == pytest.approx(_dist(before, center))


def test_rotation_keeps_center_fixed():
    center = points_center(SAMPLE)
    rotated = rotate_points(SAMPLE, center, RotateData(10, 20, 30))
    after = points_center(rotated)
    assert (after.x, after.y, after.z) == pytest.approx((center.x, center.y, center.z), abs=1e-9)


@pytest.mark.parametrize(
    "data, inverse",
    [
        (RotateData(ax=37), RotateData(ax=-37)),
        (RotateData(ay=-80), RotateData(ay=80)),
        (RotateData(az=123), RotateData(az=-123)),
    ],
)
def test_single_axis_rotation_is_inverted(data, inverse):
    center = Point(1, 1, 1)
    back = rotate_points(rotate_points(SAMPLE, center, data), center, inverse)
    assert [c for p in back for c in (p.x, p.y, p.z)] == pytest.approx(SAMPLE_FLAT, abs=1e-9)


def test_rotation_about_x_keeps_x():
    rotated = rotate_points(SAMPLE, Point(0, 0, 0), RotateData(ax=50))
    assert [p.x for p in rotated] == [p.x for p in SAMPLE]


def test_rotation_about_z_keeps_z():
    rotated = rotate_points(SAMPLE, Point(0, 0, 0), RotateData(az=50))
    assert [p.z for p in rotated] == [p.z for p in SAMPLE]


def test_quarter_turn_about_z():
    rotated = rotate_points([Point(1, 0, 0)], Point(0, 0, 0), RotateData(az=90))
    result = rotated[0]
    assert (result.x, result.y, result.z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-5)