class HandData:
    """
    Simple container for per-hand data that flows between modules.
    """

    def __init__(self):
        # raw mediapipe landmark object (for drawing)
        self.raw_landmarks = None

        # validated Hand: tuple of 21 Landmark
        self.landmarks = None

        # "Left" / "Right"
        self.handedness = "Unknown"

        # timing
        self.timestamp = 0.0  # absolute time (seconds)

        # analysis results
        self.distance = None  # too_far / too_close / good
        self.finger_state = None  # FingerState or None
        self.letter = None  # raw per-frame match, before debouncing

    def to_dict(self):
        """Serialize to JSON-friendly dict."""
        return {
            "handedness": self.handedness,
            "distance": self.distance,
            "finger_state": self.finger_state.to_dict() if self.finger_state else None,
            "letter": self.letter,
            "wrist": (
                {"x": self.landmarks[0].x, "y": self.landmarks[0].y, "z": self.landmarks[0].z}
                if self.landmarks
                else None
            ),
            "timestamp": self.timestamp,
        }
