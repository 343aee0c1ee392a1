import threading

from webdisk import Disk

from tests.helpers.concurrency import run_in_threads


def test_concurrent_creates_are_not_lost(disk):
    """Writers on separate paths serialize; every file survives."""
    n_threads = 8
    per_thread = 50

    def writer(thread_id):
        disk.create_dir(f"/t{thread_id}")
        for i in range(per_thread):
            disk.create_file(f"/t{thread_id}/f{i}.txt", f"{thread_id}:{i}")

    errors = run_in_threads(writer, n_threads)
    assert errors == [None] * n_threads
    assert len(disk.read_dir("/")) == n_threads
    assert len(disk.read_dir_recursive("/")) == n_threads * (per_thread + 1)
    assert disk.read_file("/t3/f7.txt") == "3:7"


def test_concurrent_moves_keep_tree_consistent():
    disk = Disk({"name": "/", "contents": [{"name": "a", "contents": []}, {"name": "b", "contents": []}]})
    for i in range(20):
        disk.create_file(f"/a/f{i}", str(i))

    def mover(i):
        disk.move(f"/a/f{i}", "/b")

    errors = run_in_threads(mover, 20)
    assert errors == [None] * 20
    assert disk.read_dir("/a") == []
    assert sorted(disk.read_dir("/b")) == sorted(f"/b/f{i}" for i in range(20))


def test_readers_never_see_partial_trees():
    disk = Disk()
    disk.create_dir("/src")
    disk.create_dir("/dst")
    stop = threading.Event()

    def reader():
        last_total = 0
        while not stop.is_set():
            root = disk.snapshot()
            src = {c.name for c in root.child("src").children}
            dst = {c.name for c in root.child("dst").children}
            # A moved file is in exactly one place, and files are never lost.
            assert not src & dst
            assert len(src) + len(dst) >= last_total
            last_total = len(src) + len(dst)

    def writer():
        try:
            for i in range(200):
                disk.create_file(f"/src/f{i}", "x")
                disk.move(f"/src/f{i}", "/dst")
        finally:
            stop.set()

    errors = run_in_threads(lambda i: writer() if i == 0 else reader(), 4)
    assert errors == [None] * 4
    assert len(disk.read_dir("/dst")) == 200
