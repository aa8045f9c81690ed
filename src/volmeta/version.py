from importlib.metadata import PackageNotFoundError, version

from volmeta.config.settings import config

DISTRIBUTION = "volmeta"


def get_version() -> str:
    """
    Reports the running volmeta version.

    A release build may pin it through VOLMETA_VERSION; otherwise the version
    recorded for the installed distribution is used. A source tree that was
    never installed reports "unknown".
    """
    if config.version_override:
        return config.version_override
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "unknown"
