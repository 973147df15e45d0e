import cv2

# Landmark pairs forming the hand skeleton.
HAND_CONNECTIONS = (
    (0, 1), (1, 2), (2, 3), (3, 4),
    (0, 5), (5, 6), (6, 7), (7, 8),
    (5, 9), (9, 10), (10, 11), (11, 12),
    (9, 13), (13, 14), (14, 15), (15, 16),
    (13, 17), (0, 17), (17, 18), (18, 19), (19, 20),
)

DISTANCE_HINTS = {
    "too_far": "Move closer",
    "too_close": "Move back",
    "good": "",
}


def draw_hand_debug(frame, hand_data, offset_y=0):
    """
    Draw landmarks + text overlay for a single hand.
    offset_y shifts text block vertically (useful for multiple hands).
    """
    h, w, _ = frame.shape
    lm = hand_data.landmarks
    if lm:
        for a, b in HAND_CONNECTIONS:
            pa = (int(lm[a].x * w), int(lm[a].y * h))
            pb = (int(lm[b].x * w), int(lm[b].y * h))
            cv2.line(frame, pa, pb, (255, 255, 255), 2)
        for p in lm:
            cv2.circle(frame, (int(p.x * w), int(p.y * h)), 3, (0, 0, 255), -1)

    x0, y0 = 10, 30 + offset_y
    dy = 22
    info = [f"hand: {hand_data.handedness}", f"distance: {hand_data.distance}"]
    hint = DISTANCE_HINTS.get(hand_data.distance, "")
    if hint:
        info.append(hint)
    if hand_data.finger_state is not None:
        fs = hand_data.finger_state
        flags = "".join("1" if v else "0" for v in fs.fingers())
        info.append(f"fingers (T I M R P): {flags}")
    info.append(f"letter: {hand_data.letter or '-'}")

    for i, line in enumerate(info):
        cv2.putText(
            frame,
            line,
            (x0, y0 + i * dy),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.6,
            (0, 255, 0),
            1,
            cv2.LINE_AA,
        )


def draw_region(frame, box, color=(0, 255, 255)):
    if box is None:
        return
    cv2.rectangle(frame, (box.x, box.y), (box.x + box.width, box.y + box.height), color, 2)


def draw_text(frame, text):
    h = frame.shape[0]
    cv2.putText(
        frame,
        text[-40:],
        (10, h - 20),
        cv2.FONT_HERSHEY_SIMPLEX,
        1.0,
        (255, 255, 0),
        2,
        cv2.LINE_AA,
    )
