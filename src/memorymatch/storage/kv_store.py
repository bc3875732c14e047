from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Protocol

from memorymatch.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class JsonFileStore:
    """Durable string store keeping one ``<key>.json`` file per key.

    Values are replaced whole on every write, so no locking is needed with a
    single writer.
    """

    def __init__(self, directory: Path | str | None = None) -> None:
        self._directory = Path(directory) if directory is not None else self._default_directory()

    @staticmethod
    def _default_directory() -> Path:
        return Path(__file__).resolve().parents[3] / "data"

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        try:
            with path.open("r", encoding="utf-8") as handle:
                return handle.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Failed to read {path}") from exc

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as handle:
                handle.write(value)
        except OSError as exc:
            raise StorageError(f"Failed to write {path}") from exc
        logger.debug("Wrote %d bytes to %s", len(value), path)


class MemoryStore:
    """Process-local store with the same contract as ``JsonFileStore``."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self.values: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self.values.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.values[key] = value
