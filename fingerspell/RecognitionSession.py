# ==========================================
# PERSISTENT STATE (between frames)
# ==========================================
class RecognitionSession:
    """
    Output text plus the last letter accepted by the debouncer.
    Written by the debouncer (and the remote classifier path), read and
    cleared by the caller.
    """

    def __init__(self):
        self.last_recognized = None
        self.text = ""
        self.recording = False

    def start(self):
        """Begin a fresh recording; anything from a previous run is dropped."""
        self.last_recognized = None
        self.text = ""
        self.recording = True

    def stop(self):
        self.recording = False

    def clear(self):
        self.last_recognized = None
        self.text = ""

    def accept(self, letter):
        """Debounced path: append and remember as the last recognized letter."""
        self.text += letter
        self.last_recognized = letter

    def append_direct(self, letter):
        """Remote classifier path: append without touching last_recognized."""
        self.text += letter

    def to_dict(self):
        return {
            "text": self.text,
            "last_recognized": self.last_recognized,
            "recording": self.recording,
        }
