from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np

NUM_LANDMARKS = 21

# Each tuple describes (tip, mcp, pip) landmark indices for a finger.
# The thumb only uses tip and mcp for its lateral test.
FINGER_INDICES = {
    "thumb": (4, 2, 3),
    "index": (8, 6, 7),
    "middle": (12, 10, 11),
    "ring": (16, 14, 15),
    "pinky": (20, 18, 19),
}


class InvalidLandmarkSet(ValueError):
    """Raised when a hand does not consist of exactly 21 readable landmarks."""


class Landmark(NamedTuple):
    x: float
    y: float
    z: float = 0.0
    visibility: Optional[float] = None


Hand = Tuple[Landmark, ...]


def _extract_landmark(entry) -> Landmark:
    if hasattr(entry, "x") and hasattr(entry, "y"):
        vis = getattr(entry, "visibility", None)
        return Landmark(
            float(entry.x),
            float(entry.y),
            float(getattr(entry, "z", 0.0)),
            None if vis is None else float(vis),
        )
    if isinstance(entry, dict):
        vis = entry.get("visibility")
        return Landmark(
            float(entry["x"]),
            float(entry["y"]),
            float(entry.get("z", 0.0)),
            None if vis is None else float(vis),
        )
    if isinstance(entry, np.ndarray) and entry.ndim != 1:
        raise ValueError(f"Unsupported landmark array shape {entry.shape}")
    if isinstance(entry, (list, tuple, np.ndarray)) and 2 <= len(entry) <= 4:
        values = [float(v) for v in entry]
        while len(values) < 3:
            values.append(0.0)
        vis = values[3] if len(values) == 4 else None
        return Landmark(values[0], values[1], values[2], vis)
    raise ValueError("Unsupported landmark format; expected object with x,y,z or sequence of 2-4 values.")


def to_hand(points: Sequence[object]) -> Hand:
    """
    Validate and convert raw tracker output into a Hand.
    Accepts MediaPipe landmark objects, dicts or plain sequences.
    """
    if points is None:
        raise InvalidLandmarkSet("invalid landmark set: no landmarks")
    # MediaPipe NormalizedLandmarkList wraps the points in .landmark
    if hasattr(points, "landmark"):
        points = points.landmark
    points = list(points)
    if len(points) != NUM_LANDMARKS:
        raise InvalidLandmarkSet(
            f"invalid landmark set: expected {NUM_LANDMARKS} points, got {len(points)}"
        )
    try:
        return tuple(_extract_landmark(p) for p in points)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidLandmarkSet(f"invalid landmark set: {e}") from e


def bounding_box(hand: Hand) -> Tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y) over all landmarks."""
    xs = [p.x for p in hand]
    ys = [p.y for p in hand]
    return min(xs), min(ys), max(xs), max(ys)


def serialize_hand(hand: Hand):
    """JSON-friendly list of landmark dicts."""
    out = []
    for p in hand:
        item = {"x": p.x, "y": p.y, "z": p.z}
        if p.visibility is not None:
            item["visibility"] = p.visibility
        out.append(item)
    return out
