"""Local durable key/value store: one JSON document per key inside a data directory."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Maps each key to ``<data_dir>/<key>.json``. Writes are atomic (temp file + move)."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[Any]:
        """Return the decoded value for key, or None if the key is absent or unreadable."""
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Invalid JSON in store slot '{key}': {e}")
            return None
        except OSError as e:
            logger.error(f"Could not read store slot '{key}': {e}")
            return None

    def set(self, key: str, value: Any) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{key}_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(value, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self._path(key))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def __contains__(self, key: str) -> bool:
        return self._path(key).exists()
