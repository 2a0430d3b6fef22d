"""Storage for the unit id -> photo folder mapping.

The mapping is maintained by hand (see ``flask unit-folders``) and read at
request time. Keys are unit ids as strings, the way they appear in the JSON
file: ``{"12": "sunset-villa-2a", ...}``.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Optional

logger = logging.getLogger(__name__)


class FolderMappingStore:
    """Key-value store of unit id -> folder name."""

    def all(self) -> dict[str, str]:
        raise NotImplementedError

    def set(self, unit_id, folder: str) -> None:
        raise NotImplementedError

    def delete(self, unit_id) -> bool:
        raise NotImplementedError

    def get(self, unit_id) -> Optional[str]:
        folder = self.all().get(str(unit_id))
        if isinstance(folder, str) and folder.strip():
            return folder.strip()
        return None


class InMemoryFolderMappingStore(FolderMappingStore):
    def __init__(self, mapping: Optional[dict] = None):
        self._mapping = {str(k): v for k, v in (mapping or {}).items()}

    def all(self) -> dict[str, str]:
        return dict(self._mapping)

    def set(self, unit_id, folder: str) -> None:
        self._mapping[str(unit_id)] = folder

    def delete(self, unit_id) -> bool:
        return self._mapping.pop(str(unit_id), None) is not None


class JsonFileFolderMappingStore(FolderMappingStore):
    """Mapping persisted as a flat JSON object on disk.

    Reads never raise: a missing file is an empty mapping, and an unreadable
    or malformed file is logged and treated as empty. Writes replace the file
    atomically and do raise on I/O errors.
    """

    def __init__(self, path: str):
        self.path = path

    def __repr__(self):
        return f"<JsonFileFolderMappingStore {self.path}>"

    def all(self) -> dict[str, str]:
        if not os.path.isfile(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Unreadable folder mapping file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Folder mapping file %s is not a JSON object", self.path)
            return {}
        return {str(k): v for k, v in data.items()}

    def set(self, unit_id, folder: str) -> None:
        mapping = self.all()
        mapping[str(unit_id)] = folder
        self._write(mapping)

    def delete(self, unit_id) -> bool:
        mapping = self.all()
        if mapping.pop(str(unit_id), None) is None:
            return False
        self._write(mapping)
        return True

    def _write(self, mapping: dict) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(mapping, f, indent=4)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
