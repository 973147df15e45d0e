from collections import OrderedDict
from itertools import product
from typing import List, NamedTuple, Optional

from .LandmarkAnalyzer import FingerState


class LetterPattern(NamedTuple):
    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool
    # None means "don't care"
    is_curved: Optional[bool] = None

    def matches(self, state: FingerState) -> bool:
        if (self.thumb, self.index, self.middle, self.ring, self.pinky) != state.fingers():
            return False
        return self.is_curved is None or self.is_curved == state.is_curved

    def covers(self, other: "LetterPattern") -> bool:
        """True if every state matched by `other` is also matched by self."""
        if self[:5] != other[:5]:
            return False
        return self.is_curved is None or self.is_curved == other.is_curved


# Static single-pose letters. J and Z need motion and are left out.
# Order is significant: the first matching entry wins.
ASL_PATTERNS = OrderedDict(
    [
        ("A", LetterPattern(True, False, False, False, False)),
        ("B", LetterPattern(False, True, True, True, True)),
        ("C", LetterPattern(True, False, False, False, False, is_curved=True)),
        ("D", LetterPattern(False, True, False, False, False)),
        ("E", LetterPattern(False, False, False, False, False)),
        ("F", LetterPattern(False, False, True, True, True)),
        ("G", LetterPattern(True, True, False, False, False, is_curved=True)),
        ("H", LetterPattern(False, True, True, False, False, is_curved=True)),
        ("I", LetterPattern(False, False, False, False, True)),
        ("K", LetterPattern(True, True, True, False, False)),
        ("L", LetterPattern(True, True, False, False, False)),
        ("M", LetterPattern(False, False, False, False, False, is_curved=False)),
        ("N", LetterPattern(False, False, False, False, False, is_curved=False)),
        ("O", LetterPattern(True, False, False, False, False, is_curved=True)),
        ("P", LetterPattern(True, True, True, False, False, is_curved=True)),
        ("Q", LetterPattern(True, True, False, False, False, is_curved=True)),
        ("R", LetterPattern(False, True, True, False, False, is_curved=True)),
        ("S", LetterPattern(False, False, False, False, False)),
        ("T", LetterPattern(False, False, False, False, False)),
        ("U", LetterPattern(False, True, True, False, False)),
        ("V", LetterPattern(False, True, True, False, False)),
        ("W", LetterPattern(False, True, True, True, False)),
        ("X", LetterPattern(False, True, False, False, False, is_curved=True)),
        ("Y", LetterPattern(True, False, False, False, True)),
    ]
)


def match(state: FingerState, patterns=None) -> Optional[str]:
    """Return the first letter whose pattern matches `state`, or None."""
    table = ASL_PATTERNS if patterns is None else patterns
    for letter, pattern in table.items():
        if pattern.matches(state):
            return letter
    return None


def shadowed_letters(patterns=None) -> List[str]:
    """Letters fully covered by an earlier table entry; match() never returns them."""
    table = ASL_PATTERNS if patterns is None else patterns
    seen: List[LetterPattern] = []
    shadowed = []
    for letter, pattern in table.items():
        if any(prev.covers(pattern) for prev in seen):
            shadowed.append(letter)
        seen.append(pattern)
    return shadowed


def reachable_letters(is_curved: bool = False, patterns=None) -> List[str]:
    """
    Letters match() can actually return when the analyzer reports the given
    curvature flag, in table order.
    """
    table = ASL_PATTERNS if patterns is None else patterns
    hits = set()
    for fingers in product((False, True), repeat=5):
        letter = match(FingerState(*fingers, is_curved=is_curved), table)
        if letter is not None:
            hits.add(letter)
    return [letter for letter in table if letter in hits]
