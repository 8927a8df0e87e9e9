# ==============================================================================
# log_utils.py — Logging setup
# ==============================================================================
# Purpose: Configure console logging for archive runs
# ==============================================================================

import logging

__all__ = ["setup_logging"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once per process."""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, str(level).upper(), logging.INFO),
    )
    # third-party debug output drowns the progress lines
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
