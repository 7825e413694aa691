import logging
import os


logger = logging.getLogger(__name__)


class FileLoadError(OSError):
    pass


def load_bytes(path: str) -> bytes:
    """Read the whole file at `path` into memory."""
    if os.path.isdir(path):
        raise FileLoadError(f"{path} is a directory")
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise FileLoadError(f"{path}: {reason}") from exc
    logger.info(f"Loaded {len(data)} bytes from {path}")
    return data
