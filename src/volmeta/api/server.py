from fastapi import FastAPI

from volmeta.api.dtos import DataResponse, VersionInfo
from volmeta.api.routers import volumes
from volmeta.version import get_version

app = FastAPI(
    title="Volmeta API",
    description="An API for managing volume driver metadata.",
    version=get_version(),
)

app.include_router(volumes.router)


@app.get("/version", response_model=DataResponse)
def version_endpoint():
    return DataResponse(data=VersionInfo(version=get_version()))
