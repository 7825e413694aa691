import curses
import logging
import os
import sys

import config_paths
from file_loader import FileLoadError, load_bytes
from logging_config import setup_logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator
from terminal import Terminal

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


logger = logging.getLogger(__name__)

USAGE = "hexview - terminal hex viewer\n\nUsage:\n  hexview <path>\n  hexview -v\n  hexview -h\n"


def _configure_logging(cfg):
    level = logging.getLevelName(cfg["LOG_LEVEL"])
    try:
        config_paths.ensure_config_dirs()
        log_file = config_paths.LOG_PATH
    except OSError:
        log_file = None
    try:
        setup_logging(level=level, log_file=log_file)
    except OSError:
        setup_logging(level=level)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or "--help" in args:
        print(USAGE)
        return 0

    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    cfg = config_paths.load_config()
    _configure_logging(cfg)

    path = args[0]
    try:
        data = load_bytes(path)
    except FileLoadError as e:
        logger.error(f"Load failed: {e}")
        print(f"Load failed: {e}", file=sys.stderr)
        return 1

    def curses_main(stdscr):
        Orchestrator(Terminal(stdscr), data, fps=cfg["FPS"]).run()

    try:
        curses.wrapper(curses_main)
    except (curses.error, OSError) as e:
        logger.exception("Viewer aborted")
        print(f"hexview: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
