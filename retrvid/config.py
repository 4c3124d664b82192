from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from pathlib import Path

import platformdirs
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import PathResolutionError

DATA_SUBPATH = Path("retrvid") / "ids.toml"


class Settings(BaseSettings):
    """Runtime configuration for retrvid.

    Values are loaded from ``RETRVID_*`` environment variables.
    """

    # Literal path to the ids file (RETRVID_DATA); overrides the data directory.
    data: str | None = None

    # Mask ids in log records.
    redact_ids: bool = True

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(env_prefix="RETRVID_", case_sensitive=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def platform_data_dir() -> Path | None:
    """Return the per-user data directory, or ``None`` if it is unknown."""
    path = platformdirs.user_data_path()
    if not path.is_absolute():
        # platformdirs falls back to an unexpanded "~" when HOME is missing.
        return None
    return path


def resolve_storage_path(
    override: str | Path | None,
    data_dir: Callable[[], Path | None] = platform_data_dir,
) -> Path:
    """Resolve the storage file path.

    ``override`` is used verbatim when set. Otherwise the file lives at
    ``retrvid/ids.toml`` under the directory returned by ``data_dir``.
    """
    if override is not None and str(override) != "":
        return Path(override)
    base = data_dir()
    if base is None:
        raise PathResolutionError("unable to retrieve data directory path")
    return base / DATA_SUBPATH
