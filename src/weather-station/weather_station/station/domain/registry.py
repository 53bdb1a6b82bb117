"""ListenerRegistry — ordered, non-owning collection of listeners for one topic."""

import weakref
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from weather_station.station.domain.errors import (
    ListenerNotWeakReferenceableError,
    RegistryMutationError,
)
from weather_station.station.domain.topic import Topic


class ListenerRegistry[T]:
    """Holds weak references to listeners in registration order.

    The registry never owns its listeners: once the caller drops the last
    strong reference, the listener is skipped and pruned on the next access.
    Duplicate registrations are kept and notified once per entry. Removal is
    by identity and drops every entry for that listener.

    Listeners must support weak references; adding one that does not raises
    ListenerNotWeakReferenceableError. Adding or removing while a notification
    pass is running raises RegistryMutationError.
    """

    def __init__(self, topic: Topic) -> None:
        self._topic = topic
        self._refs: list[weakref.ref[T]] = []
        # Nesting depth of running notification passes.
        self._depth = 0

    @property
    def topic(self) -> Topic:
        return self._topic

    def add(self, listener: T) -> None:
        """Append listener.

        Raises:
            ListenerNotWeakReferenceableError: if listener does not support
                weak references.
            RegistryMutationError: if called during a notification pass.
        """
        self._check_not_notifying()
        try:
            ref = weakref.ref(listener)
        except TypeError as exc:
            raise ListenerNotWeakReferenceableError(
                topic=self._topic, listener_type=type(listener).__name__
            ) from exc
        self._refs.append(ref)

    def remove(self, listener: T) -> None:
        """Remove every entry for listener; a no-op if it was never added."""
        self._check_not_notifying()
        self._refs = [ref for ref in self._refs if ref() is not listener]

    def listeners(self) -> tuple[T, ...]:
        """Return the live listeners in notification order."""
        self._prune()
        return tuple(self._iter_live())

    def __len__(self) -> int:
        return len(self.listeners())

    def __contains__(self, listener: object) -> bool:
        return any(ref() is listener for ref in self._refs)

    def notify(self, call: Callable[[T], None]) -> None:
        """Invoke call for every live listener, in registration order.

        Iterates a snapshot taken before the first call. Exceptions raised by
        call propagate to the caller.
        """
        snapshot = self.listeners()
        with self._notification_pass():
            for listener in snapshot:
                call(listener)

    def _iter_live(self) -> Iterator[T]:
        for ref in self._refs:
            listener = ref()
            if listener is not None:
                yield listener

    def _prune(self) -> None:
        if self._depth:
            return
        self._refs = [ref for ref in self._refs if ref() is not None]

    def _check_not_notifying(self) -> None:
        if self._depth:
            raise RegistryMutationError(topic=self._topic)

    @contextmanager
    def _notification_pass(self) -> Iterator[None]:
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
