import numpy as np
import pytest

from fingerspell.SkinDetection import (
    BoundingBox,
    contour_bounding_box,
    detect_skin,
    extract_largest_region,
    find_contours,
    flood_fill,
    find_largest_contour,
    frame_to_hsv,
    is_skin_color,
    rgb_to_hsv,
    skin_pixels,
)

SKIN = (220, 150, 120)


def blank(height=20, width=30, channels=3):
    return np.zeros((height, width, channels), dtype=np.uint8)


def paint(frame, x, y, w, h, color=SKIN):
    frame[y:y + h, x:x + w, :3] = color
    return frame


@pytest.mark.parametrize(
    "rgb, hsv",
    [
        ((255, 0, 0), (0, 100.0, 100.0)),
        ((0, 255, 0), (120, 100.0, 100.0)),
        ((0, 0, 255), (240, 100.0, 100.0)),
        ((255, 0, 255), (300, 100.0, 100.0)),
        ((0, 0, 0), (0, 0.0, 0.0)),
        ((255, 255, 255), (0, 0.0, 100.0)),
    ],
)
def test_rgb_to_hsv(rgb, hsv):
    h, s, v = rgb_to_hsv(*rgb)
    assert h == hsv[0]
    assert s == pytest.approx(hsv[1])
    assert v == pytest.approx(hsv[2])


def test_skin_color_thresholds():
    assert is_skin_color(*rgb_to_hsv(*SKIN))
    assert not is_skin_color(*rgb_to_hsv(255, 255, 255))
    assert not is_skin_color(*rgb_to_hsv(0, 0, 0))
    assert not is_skin_color(*rgb_to_hsv(0, 0, 255))
    # saturation/value bounds are on the percent scale
    assert is_skin_color(10, 100, 100)
    assert not is_skin_color(10, 19.9, 90)
    assert not is_skin_color(10, 50, 69.9)
    assert not is_skin_color(21, 50, 90)


def test_vectorised_hsv_matches_scalar():
    rng = np.random.default_rng(0)
    frame = rng.integers(0, 256, size=(12, 12, 3), dtype=np.uint8)
    h, s, v = frame_to_hsv(frame)
    for y in range(12):
        for x in range(12):
            eh, es, ev = rgb_to_hsv(*(int(c) for c in frame[y, x]))
            assert h[y, x] == eh
            assert s[y, x] == pytest.approx(es)
            assert v[y, x] == pytest.approx(ev)


def test_skin_mask_is_opaque_black_and_white():
    frame = paint(blank(4, 5), 1, 1, 2, 2)
    mask = detect_skin(frame)
    assert mask.shape == (4, 5, 4)
    assert mask.dtype == np.uint8
    assert (mask[..., 3] == 255).all()
    assert (mask[1:3, 1:3, :3] == 255).all()
    assert mask[..., 0].sum() == 4 * 255
    assert (mask[0, :, :3] == 0).all()


def test_rgba_frames_are_accepted():
    frame = paint(blank(4, 5, channels=4), 0, 0, 1, 1)
    assert skin_pixels(frame).sum() == 1


def test_bad_frame_shape_rejected():
    with pytest.raises(ValueError):
        detect_skin(np.zeros((10, 10), dtype=np.uint8))
    with pytest.raises(ValueError):
        detect_skin(np.zeros((10, 10, 2), dtype=np.uint8))


def test_largest_of_two_blobs():
    frame = blank()
    paint(frame, 1, 1, 5, 2)  # area 10
    paint(frame, 10, 5, 10, 5)  # area 50
    box = extract_largest_region(frame)
    assert box == BoundingBox(10, 5, 9, 4)


def test_all_black_returns_none():
    assert extract_largest_region(blank()) is None
    assert find_largest_contour(detect_skin(blank())) is None


def test_diagonal_pixels_are_connected():
    white = np.zeros((5, 5), dtype=bool)
    for i in range(5):
        white[i, i] = True
    contour = find_largest_contour(white)
    assert contour.area == 5
    assert contour_bounding_box(contour) == BoundingBox(0, 0, 4, 4)


def test_tie_keeps_first_in_raster_order():
    white = np.zeros((6, 10), dtype=bool)
    white[4:6, 0:2] = True
    white[0:2, 7:9] = True
    contour = find_largest_contour(white)
    assert contour.area == 4
    assert contour_bounding_box(contour) == BoundingBox(7, 0, 1, 1)


def test_find_contours_lists_every_component():
    white = np.zeros((6, 10), dtype=bool)
    white[0, 0] = True
    white[3:5, 3:6] = True
    white[0:3, 9] = True
    areas = [c.area for c in find_contours(white)]
    assert areas == [1, 3, 6]


def test_single_pixel_box():
    white = np.zeros((3, 3), dtype=np.uint8)
    white[1, 2] = 255
    contour = find_largest_contour(white)
    assert contour.points == [(2, 1)]
    assert contour_bounding_box(contour) == BoundingBox(2, 1, 0, 0)


def test_large_blob_does_not_recurse():
    frame = paint(blank(200, 200), 0, 0, 200, 200)
    box = extract_largest_region(frame)
    assert box == BoundingBox(0, 0, 199, 199)


def test_custom_skin_range():
    frame = paint(blank(), 0, 0, 3, 3, color=(0, 0, 255))
    assert extract_largest_region(frame) is None
    blue = {"h_min": 230, "h_max": 250, "s_min": 50, "s_max": 100, "v_min": 50, "v_max": 100}
    assert extract_largest_region(frame, blue) == BoundingBox(0, 0, 2, 2)


def test_flood_fill_on_flat_buffers():
    # 3x4 grid, flat index y*4+x
    white = [
        True, True, False, False,
        False, False, False, True,
        True, False, False, True,
    ]
    visited = bytearray(12)
    contour = flood_fill(white, visited, 4, 3, 0)
    assert contour.area == 2
    assert sorted(contour.points) == [(0, 0), (1, 0)]
    # the far column must not wrap around to the next row
    contour = flood_fill(white, visited, 4, 3, 7)
    assert sorted(contour.points) == [(3, 1), (3, 2)]
    assert visited[8] == 0


def test_full_camera_frame():
    frame = paint(blank(480, 640), 0, 0, 640, 480)
    frame[:, 320] = 0
    box = extract_largest_region(frame)
    # column 320 splits the frame; the left part is one pixel wider
    assert box == BoundingBox(0, 0, 319, 479)
