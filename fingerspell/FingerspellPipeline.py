import copy
import time

from .Debouncer import DEFAULT_WINDOW_MS, Debouncer
from .HandData import HandData
from .LandmarkAnalyzer import LandmarkAnalyzer
from .Landmarks import to_hand
from .Letters import ASL_PATTERNS, match, shadowed_letters
from .RecognitionSession import RecognitionSession
from .SkinDetection import SKIN_RANGE, extract_largest_region
from .helpers import deep_merge

DEFAULT_CONFIG = {
    "analyzer": {
        "too_far": 0.1,
        "too_close": 0.8,
        "thumb_margin": 0.1,
        "finger_margin": 0.1,
    },
    "debounce": {
        "window_ms": DEFAULT_WINDOW_MS,
    },
    "skin": dict(SKIN_RANGE),
}


class FingerspellPipeline:
    """
    landmarks -> LandmarkAnalyzer -> letter match -> Debouncer -> session text.

    Also owns the skin-region path, which runs on raw frames and only
    reports a bounding box.
    """

    def __init__(self, cfg=None, observer=None, remote=None, clock=time.monotonic):
        self.cfg = copy.deepcopy(DEFAULT_CONFIG)
        self.clock = clock
        self.session = RecognitionSession()
        self.analyzer = LandmarkAnalyzer(observer=observer)
        self.debouncer = Debouncer(self.session)
        self.remote = remote
        self.patterns = ASL_PATTERNS
        self.update_config(cfg)

        shadowed = shadowed_letters(self.patterns)
        if shadowed:
            print(
                "[PY] WARNING: letters shadowed by earlier patterns and never matched: "
                + ", ".join(shadowed)
            )

    def update_config(self, cfg):
        # deep-merge new cfg into self.cfg
        deep_merge(self.cfg, cfg)
        self.analyzer.configure(**(self.cfg.get("analyzer") or {}))
        self.debouncer.configure(**(self.cfg.get("debounce") or {}))
        self.skin_range = dict(SKIN_RANGE)
        self.skin_range.update(self.cfg.get("skin") or {})

    # ---------- session control ----------
    def start(self):
        self.debouncer.reset()
        print("[SESSION] Recording started.")

    def stop(self):
        # an in-flight debounce window is dropped, not flushed
        self.debouncer.cancel()
        self.session.stop()
        print("[SESSION] Recording stopped.")

    def clear(self):
        self.session.clear()

    @property
    def text(self):
        return self.session.text

    # ---------- landmark path ----------
    def _now(self, now):
        return self.clock() if now is None else now

    def classify_single(self, hand: HandData, now=None):
        """Analyze one hand and feed its letter (if any) to the debouncer."""
        now = self._now(now)
        result = self.analyzer.analyze(hand.landmarks)
        hand.distance = self.analyzer.last_judgment
        if result is None:
            hand.finger_state = None
            hand.letter = None
            return hand

        state, _ = result
        hand.finger_state = state
        hand.letter = match(state, self.patterns)
        if hand.letter is not None and self.session.recording:
            self.debouncer.on_candidate(hand.letter, now)
        return hand

    def process_landmarks(self, points, now=None, handedness="Unknown"):
        """Validate raw points (raises InvalidLandmarkSet) and classify them."""
        now = self._now(now)
        hand = HandData()
        hand.landmarks = to_hand(points)
        hand.handedness = handedness
        hand.timestamp = now
        self.classify_single(hand, now)
        self.tick(now)
        return hand

    def process_hands(self, hands, now=None):
        """
        Per-frame entry for tracker output. Only the first hand is spelled;
        frames without a hand still advance the debounce timer.
        Returns the letter accepted during this frame, if any.
        """
        now = self._now(now)
        if hands:
            self.classify_single(hands[0], now)
        return self.tick(now)

    def tick(self, now=None):
        return self.debouncer.poll(self._now(now))

    # ---------- remote classifier path ----------
    def classify_remote(self, hand: HandData):
        """
        Ask the remote classifier; its answer is appended without debouncing.
        Only consulted while recording.
        """
        if self.remote is None or not self.session.recording:
            return None
        if hand is None or hand.landmarks is None:
            return None
        letter = self.remote.classify(hand.landmarks)
        if letter is not None:
            self.session.append_direct(letter)
        return letter

    # ---------- skin-region path ----------
    def extract_region(self, frame_rgb):
        return extract_largest_region(frame_rgb, self.skin_range)
