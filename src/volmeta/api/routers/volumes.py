from fastapi import APIRouter, HTTPException
from fastapi.logger import logger
import traceback

from volmeta.api.dtos import DataResponse, SuccessResponse, VolumeCreate
from volmeta.config.settings import config
from volmeta.volumes.errors import (
    InvalidNameError,
    MetadataError,
    MetadataNotFoundError,
    UnrecognizedOptionError,
)
from volmeta.volumes.manager import VolumeMetadataManager

router = APIRouter(prefix="/volumes", tags=["Volumes"])

@router.get("", response_model=DataResponse)
def list_volumes_endpoint():
    try:
        manager = VolumeMetadataManager()
        return DataResponse(data=manager.list())
    except MetadataError as e:
        logger.error(f"Error listing volumes: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/{name}", response_model=DataResponse)
def get_volume_endpoint(name: str):
    try:
        manager = VolumeMetadataManager()
        return DataResponse(data=manager.get(name))
    except MetadataNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidNameError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MetadataError as e:
        logger.error(f"Error getting volume {name}: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("", response_model=DataResponse)
def create_volume_endpoint(volume: VolumeCreate):
    try:
        manager = VolumeMetadataManager()
        account = volume.account if volume.account is not None else config.default_account
        metadata = manager.create(volume.name, account, volume.options)
        return DataResponse(message=f"Volume {volume.name} created.", data=metadata)
    except (UnrecognizedOptionError, InvalidNameError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MetadataError as e:
        logger.error(f"Error creating volume {volume.name}: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=str(e))

@router.delete("/{name}", response_model=SuccessResponse)
def delete_volume_endpoint(name: str):
    try:
        manager = VolumeMetadataManager()
        manager.delete(name)
        return SuccessResponse(message=f"Volume {name} deleted.")
    except InvalidNameError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except MetadataError as e:
        logger.error(f"Error deleting volume {name}: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=str(e))
