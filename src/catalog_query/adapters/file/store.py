"""File adapter – JsonFileKeyValueStore."""
from __future__ import annotations

import json
import logging
import pathlib

from catalog_query.kernel.errors import SerializationError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """All keys kept in one JSON object on disk.

    The file is re-read on every ``get`` so several stores pointed at the same
    path see each other's writes (last writer wins). A missing file is an
    empty store; a file that does not hold a JSON object raises
    :class:`SerializationError`.
    """

    def __init__(self, path: str | pathlib.Path) -> None:
        self._path = pathlib.Path(path)

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def delete(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def _read(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        text = self._path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise SerializationError(
                f"Store file {self._path} is not valid JSON", payload_type="key_value_store", cause=exc
            ) from exc
        if not isinstance(data, dict):
            raise SerializationError(
                f"Store file {self._path} must hold a JSON object", payload_type="key_value_store"
            )
        return data

    def _write(self, data: dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self._path)
        logger.debug("file_store.written path=%s keys=%d", self._path, len(data))


__all__ = ["JsonFileKeyValueStore"]
