"""
EventEmitter - per-node listener registry with ancestor bubbling

Dispatch happens in three tiers:
1. a local ``event`` notification carrying the emitted arguments
2. the local listeners for the emitted type
3. the bubbling channel (``ElementEvent(type)``) on the emitter and then on
   each ancestor, with the emitter prepended to the arguments

A listener returning exactly ``False`` cancels the rest of the dispatch.
The root of a tree (the screen) never bubbles.
"""

from __future__ import annotations

from typing import Any, Callable, NamedTuple, Union

from nodetui.errors import UnhandledErrorEvent

Listener = Callable[..., Any]


class ElementEvent(NamedTuple):
    """
    Key of the bubbling channel for an event type.

    Listening on ``ElementEvent("click")`` on a container receives every
    ``click`` emitted by the container itself or any of its descendants,
    with the originating node as first argument. Being a distinct type, it
    never collides with a plain event name.
    """

    type: str


EventKey = Union[str, ElementEvent]


class _OnceListener:
    """Wrapper that unregisters itself before forwarding the first call."""

    def __init__(self, emitter: EventEmitter, type: EventKey, listener: Listener) -> None:
        self.emitter = emitter
        self.type = type
        self.listener = listener

    def __call__(self, *args: Any) -> Any:
        self.emitter.remove_listener(self.type, self)
        return self.listener(*args)


def _matches(entry: Listener, listener: Listener) -> bool:
    # == rather than `is` so bound methods fetched twice still match
    return entry == listener or getattr(entry, "listener", None) == listener


class EventEmitter:
    """
    Ordered listener registry shared by every node.

    Subclasses take part in bubbling by exposing a ``parent`` and may opt
    out of it (the screen does) by overriding ``_bubbles``.
    """

    parent: EventEmitter | None = None

    def __init__(self) -> None:
        self._events: dict[EventKey, list[Listener]] = {}

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add_listener(self, type: EventKey, listener: Listener) -> None:
        """Append a listener for ``type`` and fire ``new_listener`` locally."""
        self._events.setdefault(type, []).append(listener)
        self._emit("new_listener", (type, listener))

    on = add_listener

    def once(self, type: EventKey, listener: Listener) -> None:
        """Register a listener that runs at most once."""
        self.on(type, _OnceListener(self, type, listener))

    def remove_listener(self, type: EventKey, listener: Listener) -> None:
        """
        Remove the first registration of ``listener`` for ``type``.

        Listeners added with ``once`` can be removed by passing the original
        callable. Does nothing if the listener isn't registered.
        """
        bucket = self._events.get(type)
        if not bucket:
            return
        for i, entry in enumerate(bucket):
            if _matches(entry, listener):
                del bucket[i]
                if not bucket:
                    del self._events[type]
                self._emit("remove_listener", (type, listener))
                return

    off = remove_listener

    def remove_all_listeners(self, type: EventKey | None = None) -> None:
        if type is None:
            self._events = {}
        else:
            self._events.pop(type, None)

    def listeners(self, type: EventKey) -> list[Listener]:
        """Return the listeners for ``type`` in registration order."""
        return list(self._events.get(type, ()))

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def _emit(self, type: EventKey, args: tuple[Any, ...] | list[Any]) -> bool | None:
        """
        Run the local listeners for ``type``.

        Iterates a snapshot of the bucket, so listeners may add or remove
        listeners while being called.

        Returns:
            False if any listener returned exactly False, True otherwise,
            None when there were no listeners

        Raises:
            The first argument if it is an exception and ``type`` is
            ``error`` with no listeners, UnhandledErrorEvent for any other
            unhandled ``error`` payload
        """
        bucket = self._events.get(type)
        if not bucket:
            if type == "error":
                payload = args[0] if args else None
                if isinstance(payload, BaseException):
                    raise payload
                raise UnhandledErrorEvent(payload)
            return None

        ret = True
        for listener in list(bucket):
            if listener(*args) is False:
                ret = False
        return ret

    def _bubbles(self) -> bool:
        return True

    def emit(self, type: str, *args: Any) -> bool | None:
        """
        Emit ``type`` locally, then bubble it up the parent chain.

        Args:
            type: Event name
            *args: Arguments passed to every listener

        Returns:
            False if any listener cancelled the dispatch, True otherwise.
            On a non-bubbling root, the result of the local dispatch.
        """
        self._emit("event", args)

        if not self._bubbles():
            return self._emit(type, args)

        if self._emit(type, args) is False:
            return False

        channel = ElementEvent(type)
        bubbled = (self, *args)
        el: EventEmitter | None = self
        while el is not None:
            if channel in el._events and el._emit(channel, bubbled) is False:
                return False
            el = el.parent
        return True
