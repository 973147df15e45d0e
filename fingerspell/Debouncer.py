from typing import NamedTuple, Optional

from .RecognitionSession import RecognitionSession

DEFAULT_WINDOW_MS = 500


class Pending(NamedTuple):
    letter: str
    deadline: float


class Debouncer:
    """
    Quiet-window debounce as an explicit state machine.

    States: Idle (pending is None) and Pending(letter, deadline).
    - new candidate: replace any pending window with a fresh one
    - deadline reached (poll): fire; accept only if the letter differs from
      session.last_recognized
    - reset / cancel: back to Idle

    Time is supplied by the caller (seconds, monotonic) so the frame loop
    drives the timer and tests can step it.
    """

    def __init__(self, session: RecognitionSession, window_ms: float = DEFAULT_WINDOW_MS):
        self.session = session
        self.window = window_ms / 1000.0
        self.pending: Optional[Pending] = None

    @property
    def idle(self) -> bool:
        return self.pending is None

    def configure(self, window_ms: float = None, **_ignored) -> None:
        if window_ms is not None:
            self.window = float(window_ms) / 1000.0

    def on_candidate(self, letter: str, now: float) -> bool:
        """
        Register this frame's match. Returns True if a previously pending
        letter was accepted while processing this call.
        """
        accepted = self.poll(now) is not None
        self.pending = Pending(letter, now + self.window)
        return accepted

    def poll(self, now: float) -> Optional[str]:
        """Fire the pending window if its deadline has passed."""
        pending = self.pending
        if pending is None or now < pending.deadline:
            return None
        self.pending = None
        if pending.letter == self.session.last_recognized:
            return None
        self.session.accept(pending.letter)
        return pending.letter

    def cancel(self) -> None:
        """Abandon an in-flight window without firing it."""
        self.pending = None

    def reset(self) -> None:
        self.pending = None
        self.session.start()
