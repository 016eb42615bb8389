"""
Session-wide settings shared by the pages and elements of one browser session
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .base import WaitDelegate


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass
class SessionParameters:
    """Settings handed to every page of a session"""
    default_wait_seconds: int = 0
    poll_interval_seconds: float = 0.5
    link_settle_seconds: float = 2.0
    wait_delegate: Optional[WaitDelegate] = None
    debug: bool = False

    def __post_init__(self):
        if self.default_wait_seconds < 0:
            raise ValueError("default_wait_seconds cannot be negative")
        if self.poll_interval_seconds <= 0:
            raise ValueError("poll_interval_seconds must be positive")
        if self.link_settle_seconds < 0:
            raise ValueError("link_settle_seconds cannot be negative")

    @classmethod
    def from_env(cls, wait_delegate: Optional[WaitDelegate] = None) -> "SessionParameters":
        """Build parameters from PAGE_ELEMENTS_* environment variables"""
        return cls(
            default_wait_seconds=int(_env_float("PAGE_ELEMENTS_DEFAULT_WAIT", 0)),
            poll_interval_seconds=_env_float("PAGE_ELEMENTS_POLL_INTERVAL", 0.5),
            link_settle_seconds=_env_float("PAGE_ELEMENTS_LINK_SETTLE", 2.0),
            wait_delegate=wait_delegate,
            debug=os.getenv("PAGE_ELEMENTS_DEBUG", "").lower() in ("1", "true", "yes", "on"),
        )

    def configure_logging(self) -> None:
        """
        Route page_elements debug output to stderr when debug is on.

        Page calls this on construction; call it directly when using elements
        without a Page.
        """
        logger = logging.getLogger("page_elements")
        if not self.debug:
            return
        logger.setLevel(logging.DEBUG)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s"))
            logger.addHandler(handler)
