import logging
import os
import shutil
import tempfile
from typing import List, Optional

from pydantic import ValidationError

from volmeta.config.settings import config
from volmeta.volumes.errors import (
    DeleteError,
    DeserializationError,
    InitError,
    InvalidNameError,
    ListError,
    MetadataNotFoundError,
    ReadError,
    SerializationError,
    WriteError,
)
from volmeta.volumes.models import VolumeMetadata

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".tmp-"


def _makedirs_private(path: str) -> None:
    """Creates ``path`` and every missing parent with mode 0700; existing directories are left alone."""
    missing = []
    current = os.path.abspath(path)
    while not os.path.isdir(current):
        missing.append(current)
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent

    for directory in reversed(missing):
        try:
            os.mkdir(directory, 0o700)
        except FileExistsError:
            if not os.path.isdir(directory):
                raise


class MetadataStore:
    """
    Persists volume metadata as one JSON file per volume inside ``base_dir``.

    Nothing is cached: every call goes to the filesystem.
    """

    def __init__(self, base_dir: Optional[str] = None):
        self.base_dir = config.metadata_directory if base_dir is None else base_dir
        if not self.base_dir:
            raise InitError("metadata directory must not be empty", "init")
        try:
            _makedirs_private(self.base_dir)
        except OSError as e:
            logger.error(f"Error creating metadata directory {self.base_dir}: {e}")
            raise InitError(f"cannot create {self.base_dir}", "init", cause=e) from e

    def path(self, name: str) -> str:
        return os.path.join(self.base_dir, name)

    def _check_name(self, name: str, operation: str) -> None:
        if not name or name in (".", ".."):
            raise InvalidNameError("volume name must not be empty, '.' or '..'", operation, name)
        if any(sep in name for sep in ("/", "\\", "\0")):
            raise InvalidNameError("volume name must not contain path separators", operation, name)
        if name.startswith(TEMP_PREFIX):
            raise InvalidNameError(f"volume name must not start with {TEMP_PREFIX!r}", operation, name)
        try:
            os.fsencode(name)
        except UnicodeEncodeError as e:
            raise InvalidNameError("volume name is not a valid file name", operation, name, e) from e

    def set(self, name: str, metadata: VolumeMetadata) -> None:
        """Replaces the stored record for ``name`` with ``metadata``."""
        self._check_name(name, "set")
        try:
            payload = metadata.to_json().encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError("cannot serialize metadata", "set", name, e) from e

        tmp_path = None
        try:
            # mkstemp creates the file with mode 0600
            fd, tmp_path = tempfile.mkstemp(dir=self.base_dir, prefix=TEMP_PREFIX)
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path(name))
            tmp_path = None
        except OSError as e:
            logger.error(f"Error writing metadata for volume {name}: {e}")
            raise WriteError("cannot write metadata", "set", name, e) from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        logger.info(f"Stored metadata for volume {name}")

    def get(self, name: str) -> VolumeMetadata:
        self._check_name(name, "get")
        try:
            with open(self.path(name), "rb") as f:
                data = f.read()
        except FileNotFoundError as e:
            raise MetadataNotFoundError("no metadata stored", "get", name, e) from e
        except OSError as e:
            logger.error(f"Error reading metadata for volume {name}: {e}")
            raise ReadError("cannot read metadata", "get", name, e) from e

        try:
            return VolumeMetadata.from_json(data)
        except ValidationError as e:
            raise DeserializationError("cannot deserialize metadata", "get", name, e) from e

    def exists(self, name: str) -> bool:
        self._check_name(name, "exists")
        return os.path.isfile(self.path(name))

    def delete(self, name: str) -> None:
        """Removes the record for ``name``. Deleting a missing volume is not an error."""
        self._check_name(name, "delete")
        path = self.path(name)
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except FileNotFoundError:
            return
        except OSError as e:
            logger.error(f"Error deleting metadata for volume {name}: {e}")
            raise DeleteError("cannot delete volume metadata", "delete", name, e) from e

        logger.info(f"Deleted metadata for volume {name}")

    def list(self) -> List[str]:
        """Returns the names of all stored volumes. Subdirectories are skipped, not descended into."""
        volumes = []
        try:
            with os.scandir(self.base_dir) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        continue
                    if entry.name.startswith(TEMP_PREFIX):
                        continue
                    volumes.append(entry.name)
        except OSError as e:
            logger.error(f"Error listing metadata directory {self.base_dir}: {e}")
            raise ListError(f"cannot list {self.base_dir}", "list", cause=e) from e

        return sorted(volumes)
