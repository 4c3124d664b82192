from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .clipboard import Clipboard
from .intent import Add, Intent, ListIds, Lookup, Remove
from .storage import IdStore

Echo = Callable[[str], Any]
Handler = Callable[[Any], None]

log = logging.getLogger(__name__)


class Resolver:
    """Run one intent against an ``IdStore`` and echo the outcome."""

    def __init__(self, store: IdStore, clipboard: Clipboard, echo: Echo = print) -> None:
        self.store = store
        self.clipboard = clipboard
        self.echo = echo
        self._handlers: dict[type, Handler] = {}
        self.register(ListIds, self._list)
        self.register(Add, self._add)
        self.register(Remove, self._remove)
        self.register(Lookup, self._lookup)

    def register(self, intent_type: type, handler: Handler) -> None:
        self._handlers[intent_type] = handler

    def resolve(self, intent: Intent) -> None:
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"no handler registered for {type(intent).__name__}")
        log.debug("resolving", extra={"event_type": type(intent).__name__.lower()})
        handler(intent)

    def _list(self, intent: ListIds) -> None:
        names = self.store.names()
        if not names:
            self.echo("no ids found")
            return
        self.echo("\n".join(names))

    def _add(self, intent: Add) -> None:
        name = self.store.add(intent.name, intent.identifier)
        self.echo(f"added id with name {name}")

    def _remove(self, intent: Remove) -> None:
        removed = self.store.remove(intent.name)
        if removed is None:
            self.echo(f"no id with name {intent.name} found")
            return
        self.echo(f"removed id with name {removed}")

    def _lookup(self, intent: Lookup) -> None:
        identifier = self.store.lookup(intent.name)

        if intent.print_id:
            self.echo(identifier)

        if intent.copy:
            self.clipboard.set_text(identifier)
            self.echo("copied id to the clipboard")
