import json
from types import SimpleNamespace

import pytest

from rentalhub.services.folder_store import InMemoryFolderMappingStore, JsonFileFolderMappingStore
from rentalhub.services.photos import MappedFolderSource, PhotoFolderResolver, StoredPhotosSource
from tests.conftest import auth_headers, make_unit


def _unit(unit_id=1, unit_photos=None):
    return SimpleNamespace(id=unit_id, unit_photos=unit_photos)


def _touch(folder, *names):
    folder.mkdir(parents=True, exist_ok=True)
    for name in names:
        (folder / name).write_bytes(b"x")


def _resolver(store, root, prefix="/storage"):
    return PhotoFolderResolver([MappedFolderSource(store, str(root), prefix), StoredPhotosSource()])


def test_main_photo_sorts_first(tmp_path):
    _touch(tmp_path / "rental_units" / "sunset-2a", "b.png", "Main.JPG", "a.jpeg", "notes.txt")
    (tmp_path / "rental_units" / "sunset-2a" / "nested.jpg").mkdir()
    store = InMemoryFolderMappingStore({"7": "sunset-2a"})

    photos = _resolver(store, tmp_path).resolve(_unit(7))

    assert photos == [
        "/storage/rental_units/sunset-2a/Main.JPG",
        "/storage/rental_units/sunset-2a/a.jpeg",
        "/storage/rental_units/sunset-2a/b.png",
    ]


def test_all_image_extensions_are_listed(tmp_path):
    _touch(tmp_path / "rental_units" / "f", "1.jpg", "2.jpeg", "3.png", "4.gif", "5.webp", "6.jfif", "7.bmp", "README")
    store = InMemoryFolderMappingStore({"1": "f"})

    photos = _resolver(store, tmp_path, prefix="https://cdn.example.com/").resolve(_unit(1))

    assert [p.rsplit("/", 1)[1] for p in photos] == ["1.jpg", "2.jpeg", "3.png", "4.gif", "5.webp", "6.jfif"]
    assert photos[0] == "https://cdn.example.com/rental_units/f/1.jpg"


def test_no_mapping_and_no_stored_photos_is_empty(tmp_path):
    assert _resolver(InMemoryFolderMappingStore(), tmp_path).resolve(_unit(3)) == []


def test_missing_folder_falls_back_to_stored_list(tmp_path):
    store = InMemoryFolderMappingStore({"3": "gone"})
    unit = _unit(3, unit_photos=["/uploads/one.jpg", "/uploads/two.jpg"])

    assert _resolver(store, tmp_path).resolve(unit) == ["/uploads/one.jpg", "/uploads/two.jpg"]


def test_folder_without_images_falls_back_to_stored_list(tmp_path):
    _touch(tmp_path / "rental_units" / "empty", "floorplan.pdf")
    store = InMemoryFolderMappingStore({"3": "empty"})
    unit = _unit(3, unit_photos=["/uploads/one.jpg"])

    assert _resolver(store, tmp_path).resolve(unit) == ["/uploads/one.jpg"]


@pytest.mark.parametrize("stored, expected", [
    ('["/a.jpg", "/b.jpg"]', ["/a.jpg", "/b.jpg"]),
    ("not json", []),
    ('{"a": 1}', []),
    ("", []),
    (None, []),
])
def test_stored_photos_parsing(tmp_path, stored, expected):
    resolver = _resolver(InMemoryFolderMappingStore(), tmp_path)
    assert resolver.resolve(_unit(9, unit_photos=stored)) == expected


def test_mapped_folder_wins_over_stored_list(tmp_path):
    _touch(tmp_path / "rental_units" / "f", "main.png")
    store = InMemoryFolderMappingStore({"5": "f"})
    unit = _unit(5, unit_photos=["/uploads/old.jpg"])

    assert _resolver(store, tmp_path).resolve(unit) == ["/storage/rental_units/f/main.png"]


def test_json_store_reads_mapping_file(tmp_path):
    _touch(tmp_path / "rental_units" / "villa", "main.jpg")
    mapping_file = tmp_path / "unit_folder_mappings.json"
    mapping_file.write_text(json.dumps({"4": "villa"}))

    photos = _resolver(JsonFileFolderMappingStore(str(mapping_file)), tmp_path).resolve(_unit(4))

    assert photos == ["/storage/rental_units/villa/main.jpg"]


def test_unit_photos_endpoint(client, app, landlord, folder_store, photo_root):
    unit = make_unit(landlord)
    _touch(photo_root / "rental_units" / "unit-1a", "kitchen.jpg", "MAIN.webp")
    folder_store.set(unit.id, "unit-1a")

    resp = client.get(f"/api/units/{unit.id}/photos", headers=auth_headers(landlord))

    assert resp.status_code == 200
    assert resp.get_json() == {
        "unit_id": unit.id,
        "photos": [
            "/storage/rental_units/unit-1a/MAIN.webp",
            "/storage/rental_units/unit-1a/kitchen.jpg",
        ],
    }


def test_unit_photos_endpoint_requires_auth(client, landlord):
    unit = make_unit(landlord)
    assert client.get(f"/api/units/{unit.id}/photos").status_code == 401


def test_unit_photos_endpoint_unknown_unit(client, landlord):
    assert client.get("/api/units/999/photos", headers=auth_headers(landlord)).status_code == 404


@pytest.mark.parametrize("folder", ["../private", "../../etc", "a/../../private", ".."])
def test_folder_outside_units_directory_is_ignored(tmp_path, folder):
    _touch(tmp_path / "private", "secret.jpg")
    _touch(tmp_path / "rental_units" / "a")
    store = InMemoryFolderMappingStore({"2": folder})
    unit = _unit(2, unit_photos=["/uploads/fallback.jpg"])

    assert _resolver(store, tmp_path).resolve(unit) == ["/uploads/fallback.jpg"]
