import json
import os
import time


def deep_merge(base, override):
    """
    Merge nested dict `override` into `base` in place and return it.
    A section that is a dict in `base` is only replaced by another dict;
    anything else (e.g. null) is ignored and the existing section kept.
    """
    if not override:
        return base
    for k, v in override.items():
        if isinstance(base.get(k), dict):
            if isinstance(v, dict):
                deep_merge(base[k], v)
            else:
                print(f"[PY] WARNING: ignoring non-object config section '{k}': {v!r}")
        else:
            base[k] = v
    return base


def load_config(path="config.json"):
    if not os.path.exists(path):
        print(f"[PY] config '{path}' not found, using defaults.")
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        print("[PY] Failed to load config:", e)
        return {}


class ConfigWatcher:
    """
    Watches a JSON config file and reloads it when the file changes.
    Usage:
        watcher = ConfigWatcher("config.json")
        cfg = watcher.get_config()        # initial load
        # later:
        cfg = watcher.check_reload()      # returns new cfg or same dict
    """

    def __init__(self, path="config.json", min_check_interval=0.5, clock=time.monotonic):
        self.path = path
        self._cfg = {}
        self._mtime = 0.0
        self._last_checked = None
        self._min_check_interval = min_check_interval  # seconds between checks
        self._clock = clock
        self._load()

    def _load(self):
        try:
            if not os.path.exists(self.path):
                self._cfg = {}
                self._mtime = 0.0
                return
            m = os.path.getmtime(self.path)
            with open(self.path, "r", encoding="utf-8") as f:
                self._cfg = json.load(f)
            self._mtime = m
        except (OSError, ValueError) as e:
            print("[ConfigWatcher] failed to load config:", e)
            self._cfg = {}

    def get_config(self):
        return self._cfg

    def check_reload(self):
        """
        Call every frame. Only stats the file every _min_check_interval seconds.
        Returns current config (reloaded if changed).
        """
        now = self._clock()
        if self._last_checked is not None and now - self._last_checked < self._min_check_interval:
            return self._cfg
        self._last_checked = now

        try:
            if not os.path.exists(self.path):
                # file missing -> keep existing config
                return self._cfg
            m = os.path.getmtime(self.path)
            if m != self._mtime:
                print(f"[ConfigWatcher] Detected {self.path} change, reloading...")
                self._load()
        except OSError as e:
            print("[ConfigWatcher] check_reload error:", e)

        return self._cfg
