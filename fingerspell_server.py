"""
Entry point for the finger-spelling recognizer.

Usage examples:
    python fingerspell_server.py                 # MediaPipe landmarks -> letters
    python fingerspell_server.py --mode skin     # skin-region bounding box only
"""

from __future__ import annotations

import argparse
import sys

from fingerspell.main_loop import run


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="ASL finger-spelling recognizer")
    parser.add_argument(
        "--mode",
        choices=("landmarks", "skin"),
        default="landmarks",
        help="'landmarks' spells letters from MediaPipe hand landmarks, 'skin' shows the largest skin region.",
    )
    parser.add_argument(
        "--config",
        default="config.json",
        help="Path to the JSON config file (hot-reloaded while running).",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    return run(config_path=args.config, mode=args.mode)


if __name__ == "__main__":
    sys.exit(main())
