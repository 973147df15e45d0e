from typing import Callable, NamedTuple, Optional, Tuple

from .Landmarks import FINGER_INDICES, NUM_LANDMARKS, Hand, InvalidLandmarkSet, bounding_box

TOO_FAR = "too_far"
TOO_CLOSE = "too_close"
GOOD = "good"


class FingerState(NamedTuple):
    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool
    is_curved: bool = False

    def fingers(self) -> Tuple[bool, bool, bool, bool, bool]:
        return (self.thumb, self.index, self.middle, self.ring, self.pinky)

    def to_dict(self):
        return {
            "thumb": self.thumb,
            "index": self.index,
            "middle": self.middle,
            "ring": self.ring,
            "pinky": self.pinky,
            "is_curved": self.is_curved,
        }


Observer = Callable[[str, Optional[FingerState]], None]


# ---------- per-finger tests ----------
def thumb_extended(hand: Hand, margin: float = 0.1) -> bool:
    """Lateral test: thumb tip displaced sideways from its MCP."""
    tip, mcp, _ = FINGER_INDICES["thumb"]
    return abs(hand[tip].x - hand[mcp].x) > margin


def finger_extended(hand: Hand, name: str, margin: float = 0.1) -> bool:
    """Tip must sit above both MCP and PIP (smaller y is higher in the image)."""
    tip, mcp, pip = FINGER_INDICES[name]
    tip_y = hand[tip].y
    return tip_y < hand[mcp].y - margin and tip_y < hand[pip].y - margin


def judge_distance(hand: Hand, too_far: float = 0.1, too_close: float = 0.8) -> str:
    min_x, min_y, max_x, max_y = bounding_box(hand)
    size = max(max_x - min_x, max_y - min_y)
    if size < too_far:
        return TOO_FAR
    if size > too_close:
        return TOO_CLOSE
    return GOOD


class LandmarkAnalyzer:
    """
    Turns one validated Hand into a FingerState plus a framing judgment.
    Frames with the hand too far or too close are skipped (None).
    """

    def __init__(self, cfg=None, observer: Optional[Observer] = None):
        self.too_far = 0.1
        self.too_close = 0.8
        self.thumb_margin = 0.1
        self.finger_margin = 0.1
        self.observer = observer
        self.last_judgment = None
        self.last_state = None
        if cfg:
            self.configure(**cfg)

    def configure(
        self,
        too_far: float = None,
        too_close: float = None,
        thumb_margin: float = None,
        finger_margin: float = None,
        **_ignored,
    ) -> None:
        if too_far is not None:
            self.too_far = float(too_far)
        if too_close is not None:
            self.too_close = float(too_close)
        if thumb_margin is not None:
            self.thumb_margin = float(thumb_margin)
        if finger_margin is not None:
            self.finger_margin = float(finger_margin)

    def finger_state(self, hand: Hand) -> FingerState:
        # curvature detection is not implemented; is_curved stays False
        return FingerState(
            thumb=thumb_extended(hand, self.thumb_margin),
            index=finger_extended(hand, "index", self.finger_margin),
            middle=finger_extended(hand, "middle", self.finger_margin),
            ring=finger_extended(hand, "ring", self.finger_margin),
            pinky=finger_extended(hand, "pinky", self.finger_margin),
            is_curved=False,
        )

    def analyze(self, hand: Hand) -> Optional[Tuple[FingerState, str]]:
        if hand is None or len(hand) != NUM_LANDMARKS:
            count = 0 if hand is None else len(hand)
            raise InvalidLandmarkSet(
                f"invalid landmark set: expected {NUM_LANDMARKS} points, got {count}"
            )
        judgment = judge_distance(hand, self.too_far, self.too_close)
        self.last_judgment = judgment

        state = None
        if judgment == GOOD:
            state = self.finger_state(hand)
        self.last_state = state

        if self.observer is not None:
            self.observer(judgment, state)

        if state is None:
            return None
        return state, judgment
