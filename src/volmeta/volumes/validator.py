from typing import FrozenSet, Mapping

from volmeta.volumes.errors import UnrecognizedOptionError
from volmeta.volumes.models import VolumeOptions

RECOGNIZED_OPTIONS: FrozenSet[str] = frozenset(
    ["share", "filemode", "dirmode", "uid", "gid", "nolock", "remotepath", "quota"]
)


class OptionsValidator:
    recognized_options = RECOGNIZED_OPTIONS

    def validate(self, meta: Mapping[str, str]) -> VolumeOptions:
        """
        Converts raw driver options into VolumeOptions.

        Raises UnrecognizedOptionError for the first key outside the
        recognized set. Missing keys keep their zero value and ``nolock`` is
        only enabled by the exact string "true".
        """
        for key in meta:
            if key not in self.recognized_options:
                raise UnrecognizedOptionError(key)

        return VolumeOptions(
            share=meta.get("share", ""),
            file_mode=meta.get("filemode", ""),
            dir_mode=meta.get("dirmode", ""),
            uid=meta.get("uid", ""),
            gid=meta.get("gid", ""),
            no_lock=meta.get("nolock") == "true",
            remote_path=meta.get("remotepath", ""),
            quota=meta.get("quota", ""),
        )


_default_validator = OptionsValidator()


def validate_options(meta: Mapping[str, str]) -> VolumeOptions:
    return _default_validator.validate(meta)
