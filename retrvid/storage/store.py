from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import DecodeError, NotFoundError, StorageIOError, ValidationError
from ..redaction import Redactor
from .codec import Codec, TomlCodec

log = logging.getLogger(__name__)


@dataclass
class IdStore:
    """Name to id mapping backed by a single file.

    Every mutation rewrites the whole file. The dataset is expected to be
    small enough for that to be instant.
    """

    path: Path
    ids: dict[str, str] = field(default_factory=dict)
    codec: Codec = field(default_factory=TomlCodec)
    redactor: Redactor = field(default_factory=Redactor)

    @classmethod
    def load(
        cls,
        path: Path,
        codec: Codec | None = None,
        redactor: Redactor | None = None,
    ) -> IdStore:
        """Load the store at ``path``, creating an empty file if it is missing."""

        codec = codec or TomlCodec()
        redactor = redactor or Redactor()
        path = Path(path)
        if not path.exists():
            store = cls(path=path, codec=codec, redactor=redactor)
            store.save()
            log.info(
                "created ids file",
                extra={"event_type": "store_created", "path": str(path)},
            )
            return store

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise StorageIOError(f"unable to read {path}: {e}") from e
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"ids file {path} is not valid UTF-8: {e}") from e

        ids = codec.decode(text)
        log.debug(
            "loaded ids file",
            extra={"event_type": "store_loaded", "path": str(path), "entries": len(ids)},
        )
        return cls(path=path, ids=ids, codec=codec, redactor=redactor)

    def names(self) -> list[str]:
        """Return every stored name, sorted. An empty list means no entries."""
        return sorted(self.ids)

    def add(self, name: str | None, identifier: str | None) -> str:
        """Insert or overwrite ``name`` and write the store back."""

        if not name or identifier is None:
            raise ValidationError("name and/or id to add not specified")
        self.ids[name] = identifier
        self.save()
        log.info(
            "added id %s",
            self.redactor.mask(identifier),
            extra={"event_type": "id_added", "id_name": name},
        )
        return name

    def remove(self, name: str | None) -> str | None:
        """Remove ``name`` and write the store back.

        Returns ``None`` without writing when ``name`` is not stored.
        """

        if not name:
            raise ValidationError("id to remove not specified")
        if self.ids.pop(name, None) is None:
            log.debug("nothing to remove", extra={"event_type": "id_missing", "id_name": name})
            return None
        self.save()
        log.info("removed id", extra={"event_type": "id_removed", "id_name": name})
        return name

    def lookup(self, name: str | None) -> str:
        if not name:
            raise ValidationError("no id name specified")
        try:
            return self.ids[name]
        except KeyError:
            raise NotFoundError(f"id `{name}` not found") from None

    def save(self) -> None:
        """Atomically replace the file with the encoded store.

        The new contents go to a temporary file in the same directory which is
        then renamed over the target, so readers see either the old or the new
        document.
        """

        text = self.codec.encode(self.ids)
        # Write through symlinks to the real file.
        target = self.path.resolve()
        tmp_name: str | None = None
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=str(target.parent),
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            if target.exists():
                os.chmod(tmp_name, stat.S_IMODE(target.stat().st_mode))
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageIOError(f"unable to write {self.path}: {e}") from e
