import json
import os
from pathlib import Path

from docwatch.logging.logger import Log
from docwatch.properties.base import BasePropertyStore
from docwatch.properties.exceptions import PropertyStoreError


class JsonFilePropertyStore(BasePropertyStore):
    """Keeps properties in a single JSON object on disk.

    Keys missing from the file fall back to ``defaults`` (typically seeded
    from Settings), so configuration can live in the environment while the
    processed-file list lives in the file.
    """

    def __init__(self, path: Path, defaults: dict[str, str] | None = None) -> None:
        self._path = path
        self._defaults = dict(defaults or {})

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        if value is None:
            value = self._defaults.get(key)
        return value or None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._write(data)
        Log.debug(f"Stored property {key} in {self._path}")

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as exc:
            raise PropertyStoreError(f"Cannot read properties from {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PropertyStoreError(f"Properties file {self._path} must hold a JSON object")
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def _write(self, data: dict[str, str]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise PropertyStoreError(f"Cannot write properties to {self._path}: {exc}") from exc
