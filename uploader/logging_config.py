import logging
import os

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _resolve_level(level):
    if isinstance(level, int):
        return level
    name = (level or os.getenv("UPLOADER_LOG_LEVEL", "INFO")).upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level=None, force: bool = False) -> int:
    resolved = _resolve_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, force=force)
    # The SDK's HTTP logging policy is chatty at INFO
    logging.getLogger("azure").setLevel(max(resolved, logging.WARNING))
    return resolved
