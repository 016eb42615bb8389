"""
Polling wait for element visibility
"""

import logging
import time
from typing import TYPE_CHECKING, Optional

from .base import Node, WaitDelegate
from .exceptions import AutomationError, DriverError, StaleNodeError, WaitTimeoutError
from .null_element import NonExistentElement

if TYPE_CHECKING:
    from .handle import Element

logger = logging.getLogger(__name__)


class VisibilityWaiter:
    """
    Blocks until an element resolves to a displayed node.

    The element is re-resolved on every tick, so references invalidated by a
    page refresh never leak out of the wait. The only way out besides success
    is the timeout; errors raised by the delegate end the wait immediately.
    """

    def __init__(self, element: "Element", timeout: float,
                 delegate: Optional[WaitDelegate] = None, poll_interval: float = 0.5):
        self.element = element
        self.timeout = timeout
        self.delegate = delegate
        self.poll_interval = poll_interval

    def until_visible(self) -> Node:
        """Return the displayed node or raise WaitTimeoutError"""
        start_time = time.time()
        deadline = start_time + self.timeout
        ticks = 0

        while True:
            ticks += 1
            try:
                node = self._check()
                if node is not None:
                    logger.debug("Visible after %d tick(s): %s", ticks, self.element)
                    return node
            except StaleNodeError:
                logger.debug("Stale reference on tick %d, re-polling: %s", ticks, self.element)

            remaining = deadline - time.time()
            if remaining <= 0:
                break
            time.sleep(min(self.poll_interval, remaining))

        elapsed = time.time() - start_time
        raise WaitTimeoutError(self.timeout, elapsed, str(self.element))

    def _check(self) -> Optional[Node]:
        # A navigation can invalidate the lookup itself, not just the node
        try:
            resolved = self.element.resolve()
        except StaleNodeError:
            raise
        except DriverError as e:
            raise AutomationError(f"{e} {self.element}") from e

        if self.delegate is not None:
            self.delegate()

        if isinstance(resolved, NonExistentElement):
            return None

        try:
            displayed = resolved.is_displayed()
        except StaleNodeError:
            raise
        except DriverError as e:
            raise AutomationError(f"Automation Exception thrown for -> {self.element} : {e}") from e

        return resolved if displayed else None
