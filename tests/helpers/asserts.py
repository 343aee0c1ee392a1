def child_names(disk, path):
    return [p.rsplit("/", 1)[-1] for p in disk.read_dir(path)]


def assert_unchanged(disk, before):
    assert disk.snapshot() == before
    assert disk.snapshot() is before
