from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from volmeta.volumes.models import VolumeMetadata


class BaseResponse(BaseModel):
    status: str = "success"
    message: Optional[str] = None


class SuccessResponse(BaseResponse):
    pass


class ErrorResponse(BaseResponse):
    status: str = "error"


class VolumeCreate(BaseModel):
    name: str
    account: Optional[str] = None
    options: Dict[str, str] = {}


class VersionInfo(BaseModel):
    version: str


class DataResponse(BaseResponse):
    data: Optional[Union[
        VolumeMetadata,
        VersionInfo,
        List[str],
    ]] = None
