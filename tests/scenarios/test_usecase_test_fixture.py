"""Test-fixture use case: seed a disposable disk, mutate it, reset it."""
from webdisk import DiskRegistry

from tests.helpers.trees import SAMPLE_TREE


def test_each_test_gets_a_pristine_disk():
    registry = DiskRegistry()
    registry.register("fixture", SAMPLE_TREE)

    disk = registry.open("fixture")
    disk.create_file("/docs/planet-report.txt", "Pluto is a planet.")
    disk.remove_dir("/pics")
    assert disk.read_dir("/") == ["/docs"]

    registry.reset("fixture")
    disk = registry.open("fixture")
    assert disk.read_dir("/") == ["/docs", "/pics"]
    assert not disk.exists("/docs/planet-report.txt")


def test_reorganize_photo_library(sample_disk):
    sample_disk.create_dir("/archive/2024")
    sample_disk.move_dir("/pics/large-pics/backup", "/archive/2024")
    sample_disk.copy_file("/pics/asterix.jpg", "/archive/2024/asterix-copy.jpg")
    sample_disk.move("/pics/large-pics", "/pics/originals")

    assert sample_disk.read_dir_recursive("/archive") == [
        "/archive/2024",
        "/archive/2024/backup",
        "/archive/2024/backup/asterix-large-bak.jpg",
        "/archive/2024/backup/obelix-large-bak.jpg",
        "/archive/2024/asterix-copy.jpg",
    ]
    assert sample_disk.read_dir("/pics") == [
        "/pics/asterix.jpg",
        "/pics/obelix.jpg",
        "/pics/originals",
    ]
