"""IntentQueue: typed intent routing with FIFO ordering."""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from survival_craft.actor import Actor


class IntentQueue:
    """Routes intents to typed handlers, one intent at a time.

    One handler per intent class, dispatched by type.  Handlers are called as
    ``handler(intent, actor) -> bool`` and return True to accept, False to
    reject.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[..., bool]] = {}
        self._pending: deque[Any] = deque()

    def handle(self, intent_type: type[Any], handler: Callable[..., bool]) -> None:
        """Register a handler for an intent type. Later calls overwrite."""
        self._handlers[intent_type] = handler

    def enqueue(self, intent: Any) -> None:
        self._pending.append(intent)

    def pending(self) -> int:
        """Return the number of intents waiting to be processed."""
        return len(self._pending)

    def process_next(self, actor: Actor) -> tuple[Any, bool] | None:
        """Process the oldest intent. Returns ``(intent, accepted)`` or None if empty.

        Raises ``TypeError`` if no handler is registered for the intent's type.
        """
        if not self._pending:
            return None
        intent = self._pending.popleft()
        intent_type = type(intent)
        handler = self._handlers.get(intent_type)
        if handler is None:
            raise TypeError(f"No handler registered for {intent_type.__qualname__}")
        return intent, handler(intent, actor)

    def drain(
        self,
        actor: Actor,
        on_result: Callable[[Any, bool], None] | None = None,
    ) -> list[tuple[Any, bool]]:
        """Process all pending intents. Returns ``[(intent, accepted), ...]``.

        *on_result* is called as ``on_result(intent, accepted)`` right after each
        handler, before the next intent runs.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            result = self.process_next(actor)
            if result is None:
                break
            results.append(result)
            if on_result is not None:
                on_result(*result)
        return results
