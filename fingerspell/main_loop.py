import time

import cv2

from .FingerspellPipeline import FingerspellPipeline
from .RemoteClassifier import RemoteClassifier
from .drawing import draw_hand_debug, draw_region, draw_text
from .helpers import ConfigWatcher

KEY_ESC = 27
KEY_RECORD = ord(" ")
KEY_CLEAR = ord("c")
KEY_REMOTE = ord("g")


def _open_camera(cfg):
    camera_cfg = cfg.get("camera", {})
    cap = cv2.VideoCapture(camera_cfg.get("index", 0))
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, camera_cfg.get("frame_width", 640))
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, camera_cfg.get("frame_height", 480))
    return cap


def run(config_path="config.json", mode="landmarks"):
    """
    Single-threaded camera loop: every frame is processed to completion
    before the next one is read.
    mode: "landmarks" (MediaPipe + letter matching) or "skin" (contour box only).
    """
    cfg_watcher = ConfigWatcher(config_path)
    current_cfg = cfg_watcher.get_config()

    pipeline = FingerspellPipeline(current_cfg, remote=RemoteClassifier.from_config(current_cfg))
    tracker = None
    if mode == "landmarks":
        from .HandTracker import HandTracker

        tracker = HandTracker(current_cfg)

    cap = _open_camera(current_cfg)
    if not cap.isOpened():
        print("[PY] ERROR: Cannot open camera")
        return 1

    window = "Fingerspell"
    print("[PY] Loop started. SPACE start/stop, C clear, G remote classify, ESC quit.")
    pipeline.start()

    last_hand = None
    try:
        while True:
            ok, frame = cap.read()
            if not ok:
                time.sleep(0.01)
                continue

            new_cfg = cfg_watcher.check_reload()
            if new_cfg is not current_cfg:
                current_cfg = new_cfg
                pipeline.update_config(current_cfg)

            now = time.monotonic()
            frame = cv2.flip(frame, 1)
            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

            if tracker is not None:
                hands = tracker.process_frame(rgb, now)
                accepted = pipeline.process_hands(hands, now)
                last_hand = hands[0] if hands else None
                if last_hand is not None:
                    draw_hand_debug(frame, last_hand)
            else:
                box = pipeline.extract_region(rgb)
                draw_region(frame, box)
                accepted = pipeline.tick(now)

            if accepted:
                print(f"[PY] Letter: {accepted}  text: {pipeline.text}")

            draw_text(frame, pipeline.text)
            cv2.imshow(window, frame)

            key = cv2.waitKey(1) & 0xFF
            if key == KEY_ESC:
                break
            if key == KEY_RECORD:
                if pipeline.session.recording:
                    pipeline.stop()
                else:
                    pipeline.start()
            elif key == KEY_CLEAR:
                pipeline.clear()
            elif key == KEY_REMOTE:
                letter = pipeline.classify_remote(last_hand)
                if letter:
                    print(f"[PY] Remote letter: {letter}  text: {pipeline.text}")
    finally:
        cap.release()
        if tracker is not None:
            tracker.close()
        cv2.destroyAllWindows()

    print("[PY] Shutdown complete.")
    return 0
