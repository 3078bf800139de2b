#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2ui/deprecation.py
"""Caller-owned state for one-time deprecation warnings.

The compiler itself keeps no state between calls. Applications that want a
deprecated option to be reported once per process create one
:class:`WarningRegistry` and pass it to every render call; tests create a
fresh one (or call :meth:`WarningRegistry.reset`).
"""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class WarningRegistry:
    """Set of warning keys that have already been logged.

    Examples
    --------
    >>> registry = WarningRegistry()
    >>> registry.warn_once("source", "please stop using `source`")
    True
    >>> registry.warn_once("source", "please stop using `source`")
    False

    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._warned: set[str] = set()
        self._lock = threading.Lock()

    def __contains__(self, key: object) -> bool:
        """Check whether ``key`` has already been warned about."""
        return key in self._warned

    def warn_once(self, key: str, message: str) -> bool:
        """Log ``message`` unless ``key`` was already warned about.

        Parameters
        ----------
        key : str
            Identity of the warning (usually the deprecated option key)
        message : str
            Text to log

        Returns
        -------
        bool
            True if the message was logged by this call

        """
        with self._lock:
            if key in self._warned:
                return False
            self._warned.add(key)
        logger.warning(message)
        return True

    def reset(self) -> None:
        """Forget every warning issued so far."""
        with self._lock:
            self._warned.clear()
