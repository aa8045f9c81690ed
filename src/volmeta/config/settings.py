import os

class Config:
    metadata_directory = os.getenv("VOLMETA_METADATA_DIRECTORY", "/var/lib/volmeta/metadata")
    default_account = os.getenv("VOLMETA_DEFAULT_ACCOUNT", "")
    log_level = os.getenv("VOLMETA_LOG_LEVEL", "INFO").upper()
    version_override = os.getenv("VOLMETA_VERSION", "")

config = Config()
