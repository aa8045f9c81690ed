from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from volmeta.volumes.errors import UnrecognizedOptionError
from volmeta.volumes.manager import VolumeMetadataManager
from volmeta.volumes.store import MetadataStore


@pytest.fixture
def manager(tmp_path):
    return VolumeMetadataManager(store=MetadataStore(str(tmp_path)))


def test_create_stamps_and_persists(manager):
    before = datetime.now(timezone.utc)
    metadata = manager.create("vol1", "acct", {"share": "myshare", "nolock": "true"})
    after = datetime.now(timezone.utc)

    assert before <= metadata.created_at <= after
    assert metadata.account == "acct"
    assert metadata.options.share == "myshare"
    assert metadata.options.no_lock is True
    assert manager.get("vol1") == metadata


def test_create_with_unrecognized_option_stores_nothing(manager):
    with pytest.raises(UnrecognizedOptionError):
        manager.create("vol1", "acct", {"size": "10G"})

    assert manager.list() == []


def test_list_metadata(manager):
    manager.create("a", "acct", {"share": "s1"})
    manager.create("b", "acct", {"share": "s2"})

    result = manager.list_metadata()

    assert set(result) == {"a", "b"}
    assert result["a"].options.share == "s1"
    assert result["b"].options.share == "s2"


def test_delete_delegates_to_store():
    store = MagicMock()
    manager = VolumeMetadataManager(store=store)

    manager.delete("vol1")

    store.delete.assert_called_once_with("vol1")
