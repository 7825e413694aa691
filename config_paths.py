import json
import logging
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "hexview")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "hexview.log")

# default settings
FPS_DEFAULT = 15
LOG_LEVEL_DEFAULT = "WARNING"


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _valid_fps(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value > 0


def _valid_log_level(value):
    if not isinstance(value, str):
        return False
    return isinstance(logging.getLevelName(value.upper()), int)


def load_config():
    cfg = {
        "FPS": FPS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return cfg

    if isinstance(data, dict):
        fps = data.get("fps")
        if _valid_fps(fps):
            cfg["FPS"] = fps
        level = data.get("log_level")
        if _valid_log_level(level):
            cfg["LOG_LEVEL"] = level.upper()

    return cfg
