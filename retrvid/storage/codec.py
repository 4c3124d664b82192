"""Serialization of the name to id mapping."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from typing import Protocol

import tomli_w

from ..errors import DecodeError


class Codec(Protocol):
    def decode(self, text: str) -> dict[str, str]:  # noqa: D401
        """Decode ``text`` into a flat mapping of names to ids."""

    def encode(self, ids: Mapping[str, str]) -> str:  # noqa: D401
        """Encode ``ids`` into the on-disk representation."""


class TomlCodec:
    """Flat TOML document of ``name = "id"`` pairs."""

    def decode(self, text: str) -> dict[str, str]:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise DecodeError(f"invalid TOML in ids file: {e}") from e

        ids: dict[str, str] = {}
        for name, value in data.items():
            if not isinstance(value, str):
                raise DecodeError(
                    f"invalid value for `{name}`: expected a string, "
                    f"found {type(value).__name__}"
                )
            ids[name] = value
        return ids

    def encode(self, ids: Mapping[str, str]) -> str:
        return tomli_w.dumps({name: ids[name] for name in sorted(ids)})
