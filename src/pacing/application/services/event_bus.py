from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Type

logger = logging.getLogger(__name__)

Handler = Callable[[object], None]


@dataclass(order=True)
class _Subscription:
    priority: int
    order: int
    handler: Handler = field(compare=False)


class EventBus:
    """Synchronous publish/subscribe between the simulation and whatever displays it.

    Lower ``priority`` runs first; equal priorities run in subscription order.
    A handler that raises is logged and skipped, and the rest still run.
    """

    def __init__(self) -> None:
        self._subscriptions: Dict[Type[object], List[_Subscription]] = {}
        self._subscribed = 0
        self._failures: List[Exception] = []

    def subscribe(self, event_type: Type[object], handler: Handler, *, priority: int = 100) -> None:
        self._subscribed += 1
        rows = self._subscriptions.setdefault(event_type, [])
        bisect.insort(rows, _Subscription(int(priority), self._subscribed, handler))

    def unsubscribe(self, event_type: Type[object], handler: Handler) -> bool:
        rows = self._subscriptions.get(event_type)
        if not rows:
            return False
        for index, row in enumerate(rows):
            if row.handler is handler:
                del rows[index]
                return True
        return False

    def subscriber_count(self, event_type: Type[object]) -> int:
        return len(self._subscriptions.get(event_type, ()))

    def publish(self, event: object) -> None:
        self._failures = []
        for row in tuple(self._subscriptions.get(type(event), ())):
            try:
                row.handler(event)
            except Exception as exc:
                self._failures.append(exc)
                logger.exception(
                    "Handler %s failed on %s",
                    getattr(row.handler, "__qualname__", repr(row.handler)),
                    type(event).__name__,
                    extra={"priority": row.priority},
                )

    def last_publish_errors(self) -> List[Exception]:
        return list(self._failures)
