"""retrvid package.

Store opaque ids (account numbers, tokens, ...) under memorable names and
retrieve them on demand. Modules do not touch the filesystem or the clipboard
on import.
"""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
