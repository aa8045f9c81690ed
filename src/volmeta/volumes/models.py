from datetime import datetime, timezone
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class VolumeOptions(BaseModel):
    """Driver options for a single volume, keyed on disk by their option names."""

    model_config = ConfigDict(populate_by_name=True)

    share: str = ""
    file_mode: str = Field(default="", alias="filemode")
    dir_mode: str = Field(default="", alias="dirmode")
    uid: str = ""
    gid: str = ""
    no_lock: bool = Field(default=False, alias="nolock")
    remote_path: str = Field(default="", alias="remotepath")
    quota: str = ""


class VolumeMetadata(BaseModel):
    created_at: datetime = EPOCH
    account: str = ""
    options: VolumeOptions = Field(default_factory=VolumeOptions)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "VolumeMetadata":
        return cls.model_validate_json(data)
