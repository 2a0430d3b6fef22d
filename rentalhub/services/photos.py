"""Resolve the photo URLs shown for a rental unit.

Sources are tried in order and the first one that yields photos wins:

1. the unit's mapped folder under the public storage root
2. the ``unit_photos`` list stored on the unit itself
"""
from __future__ import annotations

import json
import logging
import os
from typing import Iterable, Optional

from flask import current_app

from .folder_store import FolderMappingStore, InMemoryFolderMappingStore, JsonFileFolderMappingStore

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp", "jfif"}
UNITS_DIRECTORY = "rental_units"
STORE_EXTENSION_KEY = "folder_mapping_store"


def _split_name(filename: str) -> tuple[str, str]:
    stem, _, ext = filename.rpartition(".")
    if not stem:
        return filename.lower(), ""
    return stem.lower(), ext.lower()


def _photo_sort_key(filename: str):
    stem, _ = _split_name(filename)
    # "main" first, the rest alphabetically
    return (stem != "main", stem, filename)


class PhotoSource:
    name = "source"

    def photos_for(self, unit) -> Optional[list[str]]:
        raise NotImplementedError


class MappedFolderSource(PhotoSource):
    """Image files in ``<photo_root>/rental_units/<folder>`` for the unit's mapped folder."""

    name = "mapped_folder"

    def __init__(self, store: FolderMappingStore, photo_root: str, url_prefix: str = "/storage"):
        self.store = store
        self.photo_root = photo_root
        self.url_prefix = url_prefix.rstrip("/")

    def photos_for(self, unit) -> Optional[list[str]]:
        folder = self.store.get(unit.id)
        if not folder:
            return None

        units_dir = os.path.realpath(os.path.join(self.photo_root, UNITS_DIRECTORY))
        path = os.path.realpath(os.path.join(units_dir, folder))
        if os.path.dirname(path) != units_dir:
            logger.warning("Ignoring photo folder %r for unit %s: not directly under %s", folder, unit.id, units_dir)
            return None
        if not os.path.isdir(path):
            logger.debug("Mapped photo folder %s for unit %s does not exist", path, unit.id)
            return None

        try:
            entries = os.listdir(path)
        except OSError as e:
            logger.warning("Cannot list photo folder %s: %s", path, e)
            return None

        images = [
            name for name in entries
            if _split_name(name)[1] in IMAGE_EXTENSIONS and os.path.isfile(os.path.join(path, name))
        ]
        images.sort(key=_photo_sort_key)
        return [f"{self.url_prefix}/{UNITS_DIRECTORY}/{folder}/{name}" for name in images]


class StoredPhotosSource(PhotoSource):
    """The legacy ``unit_photos`` field, either a list or a JSON-encoded list."""

    name = "stored_photos"

    def photos_for(self, unit) -> Optional[list[str]]:
        value = unit.unit_photos
        if not value:
            return None
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                logger.debug("Unit %s has unparsable unit_photos", unit.id)
                return None
        if not isinstance(value, list):
            return None
        return list(value)


class PhotoFolderResolver:
    def __init__(self, sources: Iterable[PhotoSource]):
        self.sources = list(sources)

    def resolve(self, unit) -> list[str]:
        for source in self.sources:
            photos = source.photos_for(unit)
            if photos:
                return photos
        return []


def build_folder_store(config) -> FolderMappingStore:
    path = config.get("UNIT_FOLDER_MAPPING_FILE")
    if path:
        return JsonFileFolderMappingStore(path)
    return InMemoryFolderMappingStore()


def get_folder_store() -> FolderMappingStore:
    return current_app.extensions[STORE_EXTENSION_KEY]


def get_photo_resolver() -> PhotoFolderResolver:
    """Resolver wired to the current app's mapping store and storage root."""
    config = current_app.config
    return PhotoFolderResolver([
        MappedFolderSource(
            get_folder_store(),
            config.get("UNIT_PHOTO_ROOT") or "",
            config.get("UNIT_PHOTO_URL_PREFIX", "/storage"),
        ),
        StoredPhotosSource(),
    ])
