from __future__ import annotations

import logging

from .clipboard import Clipboard, SystemClipboard
from .config import Settings, get_settings, resolve_storage_path
from .intent import Intent
from .redaction import Redactor
from .resolver import Echo, Resolver
from .storage import IdStore


def run(
    intent: Intent,
    settings: Settings | None = None,
    clipboard: Clipboard | None = None,
    echo: Echo = print,
) -> None:
    """Resolve the storage file, load it and carry out ``intent``."""

    settings = settings or get_settings()
    clipboard = clipboard or SystemClipboard()
    log = logging.getLogger(__name__)

    path = resolve_storage_path(settings.data)
    log.debug("using ids file", extra={"event_type": "path_resolved", "path": str(path)})

    store = IdStore.load(path, redactor=Redactor(enabled=settings.redact_ids))
    Resolver(store, clipboard, echo).resolve(intent)
