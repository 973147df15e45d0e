import re

import requests

from .Landmarks import Hand, serialize_hand

UNKNOWN = "unknown"
_LETTER_RE = re.compile(r"^[A-Z]$")

PROMPT = (
    "You are given the 21 MediaPipe hand landmarks of one hand (normalized x, y, z; "
    "index 0 is the wrist). Reply with the single uppercase ASL finger-spelling letter "
    "the hand shows, or the word 'unknown'."
)


def _clean(body: str) -> str:
    return body.strip().strip('"').strip()


def parse_reply(body: str):
    """Return an uppercase letter, or None for 'unknown' / anything malformed."""
    if body is None:
        return None
    reply = _clean(body)
    if reply.lower() == UNKNOWN:
        return None
    if _LETTER_RE.match(reply):
        return reply
    return None


class RemoteClassifier:
    """
    Client for an external text-model classifier reached over HTTP.
    Failures are reported on the console and yield None; they never
    reach the session text.
    """

    def __init__(self, url, timeout=2.0, session=None):
        self.url = url
        self.timeout = timeout
        self.http = session or requests

    @classmethod
    def from_config(cls, cfg):
        rcfg = (cfg or {}).get("remote", {})
        if not rcfg.get("enabled", False) or not rcfg.get("url"):
            return None
        return cls(rcfg["url"], timeout=rcfg.get("timeout", 2.0))

    def build_payload(self, hand: Hand):
        return {"prompt": PROMPT, "landmarks": serialize_hand(hand)}

    def classify(self, hand: Hand):
        try:
            resp = self.http.post(self.url, json=self.build_payload(hand), timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            print(f"[REMOTE] Request failed: {e}")
            return None

        content_type = resp.headers.get("Content-Type", "")
        if "application/json" in content_type:
            try:
                data = resp.json()
            except ValueError as e:
                print(f"[REMOTE] Malformed JSON reply: {e}")
                return None
            body = data.get("letter") if isinstance(data, dict) else None
            if not isinstance(body, str):
                print(f"[REMOTE] Unexpected reply: {data!r}")
                return None
        else:
            body = resp.text or ""

        letter = parse_reply(body)
        if letter is None and _clean(body).lower() != UNKNOWN:
            print(f"[REMOTE] Ignoring malformed reply: {body!r}")
        return letter
