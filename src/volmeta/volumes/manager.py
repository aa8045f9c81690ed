import logging
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional

from volmeta.volumes.models import VolumeMetadata
from volmeta.volumes.store import MetadataStore
from volmeta.volumes.validator import OptionsValidator

logger = logging.getLogger(__name__)


class VolumeMetadataManager:
    """Validates driver options and assembles the full record before it is stored."""

    def __init__(self, store: Optional[MetadataStore] = None, validator: Optional[OptionsValidator] = None):
        self.store = store or MetadataStore()
        self.validator = validator or OptionsValidator()

    def create(self, name: str, account: str, options: Mapping[str, str]) -> VolumeMetadata:
        volume_options = self.validator.validate(options)
        metadata = VolumeMetadata(
            created_at=datetime.now(timezone.utc),
            account=account,
            options=volume_options,
        )
        self.store.set(name, metadata)
        logger.info(f"Created volume {name} for account '{account}'")
        return metadata

    def get(self, name: str) -> VolumeMetadata:
        return self.store.get(name)

    def delete(self, name: str) -> None:
        self.store.delete(name)

    def list(self) -> List[str]:
        return self.store.list()

    def list_metadata(self) -> Dict[str, VolumeMetadata]:
        return {name: self.store.get(name) for name in self.store.list()}
