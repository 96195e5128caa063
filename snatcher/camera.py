"""OpenCV camera loop for processing board frames on demand."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

ENTER_KEYS = (10, 13)
ESC_KEY = 27
WINDOW_NAME = "Snatcher - ENTER to read board, ESC to quit"


def print_key_options() -> None:
    print("\n===== Available Actions =====")
    print("Press Enter: Read the words on the current frame.")
    print("Press Esc: Exit.")
    print("=============================")


def run_camera_loop(on_frame: Callable[[np.ndarray], np.ndarray | None],
                    camera_index: int = 0) -> None:
    """Show a live preview and call *on_frame* with the frame when Enter is pressed.

    If *on_frame* returns an image it is shown in a second window.
    """
    import cv2

    cap = cv2.VideoCapture(camera_index)
    if not cap.isOpened():
        raise RuntimeError("Could not open camera. Check that a camera is connected.")

    width = cap.get(cv2.CAP_PROP_FRAME_WIDTH)
    height = cap.get(cv2.CAP_PROP_FRAME_HEIGHT)
    print(f"Camera opened at {width:.0f} x {height:.0f}.")
    print_key_options()

    try:
        while True:
            ret, frame = cap.read()
            if not ret:
                raise RuntimeError("Camera disconnected.")

            cv2.imshow(WINDOW_NAME, frame)
            key = cv2.waitKey(10) & 0xFF
            if key in ENTER_KEYS:
                annotated = on_frame(frame)
                if annotated is not None:
                    cv2.imshow("Recognized tiles", annotated)
                print_key_options()
            elif key == ESC_KEY:
                print("Esc pressed, stopping.")
                break
    finally:
        cap.release()
        cv2.destroyAllWindows()
