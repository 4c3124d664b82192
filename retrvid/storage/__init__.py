"""On-disk id storage."""

from .codec import Codec, TomlCodec
from .store import IdStore

__all__ = ["Codec", "IdStore", "TomlCodec"]
