import math
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

# HSV skin range. Hue in degrees, saturation/value in percent (0..100).
SKIN_RANGE = {
    "h_min": 0,
    "h_max": 20,
    "s_min": 20,
    "s_max": 100,
    "v_min": 70,
    "v_max": 100,
}

WHITE = 255


class BoundingBox(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    def to_dict(self):
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


class Contour(NamedTuple):
    points: List[Tuple[int, int]]
    area: int


# ---------- colour ----------
def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[int, float, float]:
    """
    RGB (0..255) -> (hue degrees rounded to int, saturation %, value %).
    """
    r /= 255.0
    g /= 255.0
    b /= 255.0

    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    h = 0
    s = 0.0 if mx == 0 else delta / mx
    v = mx

    if delta != 0:
        if mx == r:
            hh = math.fmod((g - b) / delta, 6)
        elif mx == g:
            hh = (b - r) / delta + 2
        else:
            hh = (r - g) / delta + 4
        h = _round_half_up(hh * 60)
        if h < 0:
            h += 360

    return h, s * 100.0, v * 100.0


def is_skin_color(h: float, s: float, v: float, skin_range=None) -> bool:
    rng = skin_range or SKIN_RANGE
    return (
        rng["h_min"] <= h <= rng["h_max"]
        and rng["s_min"] <= s <= rng["s_max"]
        and rng["v_min"] <= v <= rng["v_max"]
    )


def _check_frame(frame) -> np.ndarray:
    arr = np.asarray(frame)
    if arr.ndim != 3 or arr.shape[2] not in (3, 4):
        raise ValueError(f"expected HxWx3 or HxWx4 pixel buffer, got shape {arr.shape}")
    return arr


def frame_to_hsv(frame) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Vectorised rgb_to_hsv over a whole RGB/RGBA frame."""
    arr = _check_frame(frame)
    rgb = arr[..., :3].astype(np.float64) / 255.0
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    mx = rgb.max(axis=2)
    mn = rgb.min(axis=2)
    delta = mx - mn
    safe = np.where(delta == 0, 1.0, delta)

    hue = np.zeros_like(mx)
    red_max = (mx == r) & (delta != 0)
    green_max = (mx == g) & ~red_max & (delta != 0)
    blue_max = ~red_max & ~green_max & (delta != 0)
    hue[red_max] = np.fmod((g - b) / safe, 6)[red_max]
    hue[green_max] = ((b - r) / safe + 2)[green_max]
    hue[blue_max] = ((r - g) / safe + 4)[blue_max]
    hue = np.floor(hue * 60 + 0.5)
    hue[hue < 0] += 360

    sat = np.where(mx == 0, 0.0, delta / np.where(mx == 0, 1.0, mx)) * 100.0
    val = mx * 100.0
    return hue, sat, val


def skin_pixels(frame, skin_range=None) -> np.ndarray:
    """Boolean HxW array, True where the pixel falls in the skin range."""
    rng = skin_range or SKIN_RANGE
    h, s, v = frame_to_hsv(frame)
    return (
        (h >= rng["h_min"]) & (h <= rng["h_max"])
        & (s >= rng["s_min"]) & (s <= rng["s_max"])
        & (v >= rng["v_min"]) & (v <= rng["v_max"])
    )


def detect_skin(frame, skin_range=None) -> np.ndarray:
    """
    Build an RGBA skin mask with the frame's dimensions:
    opaque white for skin, opaque black otherwise.
    """
    skin = skin_pixels(frame, skin_range)
    height, width = skin.shape
    mask = np.zeros((height, width, 4), dtype=np.uint8)
    mask[skin, :3] = WHITE
    mask[..., 3] = 255
    return mask


# ---------- segmentation ----------
def _white_plane(mask) -> np.ndarray:
    arr = np.asarray(mask)
    if arr.ndim == 3:
        # RGBA / RGB mask: red channel carries the label
        return arr[..., 0] == WHITE
    if arr.dtype == bool:
        return arr
    return arr == WHITE


def flood_fill(white, visited, width: int, height: int, start: int) -> Contour:
    """
    Collect the 8-connected white component containing flat index `start`.
    `white` is a flat list of bools and `visited` a bytearray, both indexed
    y*width+x; `visited` is updated in place. Uses an explicit stack, and a
    pixel is marked when pushed, so the stack never exceeds the pixel count.
    """
    stack = [start]
    visited[start] = 1
    points = []

    while stack:
        idx = stack.pop()
        y, x = divmod(idx, width)
        points.append((x, y))

        left = x > 0
        right = x < width - 1
        rows = []
        if y > 0:
            rows.append(idx - width)
        rows.append(idx)
        if y < height - 1:
            rows.append(idx + width)
        for row in rows:
            for n in (row - 1 if left else -1, row, row + 1 if right else -1):
                if n < 0 or n == idx or visited[n] or not white[n]:
                    continue
                visited[n] = 1
                stack.append(n)

    return Contour(points, len(points))


def _iter_contours(mask):
    """Yield white components in raster order of their first pixel."""
    plane = _white_plane(mask)
    height, width = plane.shape
    white = plane.ravel().tolist()
    visited = bytearray(height * width)
    for start in np.flatnonzero(plane).tolist():
        if visited[start]:
            continue
        yield flood_fill(white, visited, width, height, start)


def find_contours(mask) -> List[Contour]:
    """All white components in raster order of their first pixel."""
    return list(_iter_contours(mask))


def find_largest_contour(mask) -> Optional[Contour]:
    """Largest component by area; ties keep the earliest in raster order."""
    largest = None
    for contour in _iter_contours(mask):
        if largest is None or contour.area > largest.area:
            largest = contour
    return largest


def contour_bounding_box(contour: Contour) -> Optional[BoundingBox]:
    if not contour.points:
        return None
    xs = [p[0] for p in contour.points]
    ys = [p[1] for p in contour.points]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    return BoundingBox(min_x, min_y, max_x - min_x, max_y - min_y)


def extract_largest_region(frame, skin_range=None) -> Optional[BoundingBox]:
    """Skin mask -> largest connected skin region -> its bounding box."""
    mask = detect_skin(frame, skin_range)
    contour = find_largest_contour(mask)
    if contour is None:
        return None
    return contour_bounding_box(contour)
