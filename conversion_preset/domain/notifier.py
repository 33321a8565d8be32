"""
Change notifications for presets.

Hosts that bind a preset to a view register handlers here and are told the name
of every field that changed ("Name", "OutputType", "InputTypes", "Settings").
"""

from typing import Callable, List

from loguru import logger

ChangeHandler = Callable[[str], None]


class ChangeNotifier:
    """
    Keeps an ordered list of change handlers and calls them synchronously.

    Handlers run in registration order, before the mutating call returns. Every
    notification is delivered; nothing is coalesced. An exception raised by a
    handler propagates to the code that triggered the change.
    """

    def __init__(self):
        self._handlers: List[ChangeHandler] = []

    def subscribe(self, handler: ChangeHandler) -> ChangeHandler:
        """
        Registers `handler` and returns it, so the return value can be kept as the
        handle for `unsubscribe` (or the method used as a decorator).
        """
        if not callable(handler):
            raise TypeError(f"Change handler must be callable, got {handler!r}.")
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: ChangeHandler):
        """Removes the first registration of `handler`. Unknown handlers are ignored."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            logger.debug(f"Change handler {handler!r} was not subscribed.")

    def notify(self, field_name: str):
        # Handlers subscribed during dispatch only see later notifications.
        for handler in list(self._handlers):
            handler(field_name)

    def __len__(self) -> int:
        return len(self._handlers)
