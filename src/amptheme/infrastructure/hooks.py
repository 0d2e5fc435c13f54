"""Ordered filter/action registry for pre-parse rules.

The host rendering pipeline fires these events while it produces a
document. Callbacks run by ascending priority; equal priorities run in
registration order. A registry is meant to live for one document.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any, NamedTuple

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

# Start of a rendering pass; per-pass counters reset here.
DOCUMENT_START = "document_start"
# Filter over the list of body classes.
BODY_CLASS = "body_class"
# Action fired when stylesheets are enqueued.
ENQUEUE_STYLES = "enqueue_styles"
# Filter over one nav menu item's HTML: (item_html, item) -> str.
NAV_MENU_ITEM_HTML = "nav_menu_item_html"


class _Registration(NamedTuple):
    priority: int
    sequence: int
    callback: Callable[..., Any]


class HookRegistry:
    """Callbacks keyed by event name."""

    def __init__(self) -> None:
        self._callbacks: dict[str, list[_Registration]] = {}
        self._sequence = itertools.count()

    def add_filter(
        self,
        event: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register *callback*; it receives the current value plus event args."""
        registrations = self._callbacks.setdefault(event, [])
        registrations.append(_Registration(priority, next(self._sequence), callback))
        registrations.sort()
        logger.debug("Registered %s callback at priority %d", event, priority)

    def add_action(
        self,
        event: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register *callback*; its return value is ignored."""
        self.add_filter(event, callback, priority)

    def has(self, event: str) -> bool:
        return bool(self._callbacks.get(event))

    def count(self, event: str) -> int:
        return len(self._callbacks.get(event, ()))

    def apply_filters(self, event: str, value: Any, *args: Any) -> Any:
        """Thread *value* through every callback for *event*."""
        for registration in self._callbacks.get(event, ()):
            value = registration.callback(value, *args)
        return value

    def do_action(self, event: str, *args: Any) -> None:
        for registration in self._callbacks.get(event, ()):
            registration.callback(*args)
