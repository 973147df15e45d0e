import mediapipe as mp

from .HandData import HandData
from .Landmarks import InvalidLandmarkSet, to_hand


class HandTracker:
    def __init__(self, cfg):
        tcfg = cfg.get("tracker", {})

        self.mp_hands = mp.solutions.hands.Hands(
            model_complexity=tcfg.get("model_complexity", 1),
            min_detection_confidence=tcfg.get("min_detection_confidence", 0.5),
            min_tracking_confidence=tcfg.get("min_tracking_confidence", 0.5),
            max_num_hands=tcfg.get("max_num_hands", 1),
        )

    def process_frame(self, frame_rgb, timestamp):
        """
        Process an RGB frame (BGR->RGB done by the caller).
        Returns list of HandData with validated landmarks + handedness set.
        timestamp: absolute time (seconds) for this frame.
        """
        result = self.mp_hands.process(frame_rgb)
        hands = []

        if not result.multi_hand_landmarks:
            return hands

        for lm, handed in zip(result.multi_hand_landmarks, result.multi_handedness):
            try:
                landmarks = to_hand(lm)
            except InvalidLandmarkSet as e:
                print("[TRACKER] Dropping hand:", e)
                continue
            h = HandData()
            h.raw_landmarks = lm
            h.landmarks = landmarks
            h.handedness = handed.classification[0].label
            h.timestamp = timestamp
            hands.append(h)

        return hands

    def close(self):
        self.mp_hands.close()
