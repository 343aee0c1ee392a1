import pytest
from webdisk import Disk
from tests.helpers.trees import SAMPLE_TREE

pytest_plugins = ["webdisk._pytest_plugin"]


@pytest.fixture
def sample_disk() -> Disk:
    """An opened disk loaded with the docs/pics sample tree."""
    return Disk(SAMPLE_TREE).open()
