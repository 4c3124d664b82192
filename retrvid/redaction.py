"""Identifier masking for log output."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Redactor:
    """Mask stored identifiers before they reach a log record."""

    enabled: bool = True
    visible: int = 2
    mask_char: str = "*"

    def mask(self, identifier: str) -> str:
        """Return ``identifier`` with all but the first ``visible`` characters masked.

        Values no longer than ``visible`` are masked entirely so that short
        ids are never leaked.
        """
        if not self.enabled:
            return identifier
        if len(identifier) <= self.visible:
            return self.mask_char * len(identifier)
        hidden = len(identifier) - self.visible
        return identifier[: self.visible] + self.mask_char * hidden
