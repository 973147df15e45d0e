import pytest

from fingerspell.Landmarks import Landmark

# x position of each finger column
FINGER_X = {"index": 0.45, "middle": 0.5, "ring": 0.55, "pinky": 0.6}
FINGER_BASE = {"index": 5, "middle": 9, "ring": 13, "pinky": 17}


def make_points(thumb=False, index=False, middle=False, ring=False, pinky=False):
    """
    Upright right hand, wrist at the bottom, roughly 0.35 x 0.5 in size.
    Each flag decides whether that finger's tip clears its joints.
    """
    pts = [None] * 21
    pts[0] = Landmark(0.5, 0.8, 0.0)

    # thumb: 1..4, lateral offset decides extension
    pts[1] = Landmark(0.45, 0.75, 0.0)
    pts[2] = Landmark(0.42, 0.7, 0.0)
    pts[3] = Landmark(0.40, 0.66, 0.0)
    pts[4] = Landmark(0.42 - 0.15 if thumb else 0.42 - 0.02, 0.64, 0.0)

    flags = {"index": index, "middle": middle, "ring": ring, "pinky": pinky}
    for name, base in FINGER_BASE.items():
        x = FINGER_X[name]
        pts[base] = Landmark(x, 0.6, 0.0)
        pts[base + 1] = Landmark(x, 0.5, 0.0)
        pts[base + 2] = Landmark(x, 0.45, 0.0)
        pts[base + 3] = Landmark(x, 0.3 if flags[name] else 0.55, 0.0)
    return pts


def diagonal_points(size, origin=0.1):
    """21 points spread along a diagonal so the bounding box is size x size."""
    return [Landmark(origin + size * i / 20.0, origin + size * i / 20.0, 0.0) for i in range(21)]


class FakeClock:
    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.now


@pytest.fixture
def clock():
    return FakeClock()
