from importlib.metadata import PackageNotFoundError
from unittest.mock import patch

from volmeta.version import get_version


def test_version_override_wins():
    with patch("volmeta.version.config.version_override", "1.2.3"):
        with patch("volmeta.version.version") as mock_version:
            assert get_version() == "1.2.3"
            mock_version.assert_not_called()


def test_version_from_installed_distribution():
    with patch("volmeta.version.config.version_override", ""):
        with patch("volmeta.version.version", return_value="0.1.0") as mock_version:
            assert get_version() == "0.1.0"
            mock_version.assert_called_once_with("volmeta")


def test_version_unknown_when_not_installed():
    with patch("volmeta.version.config.version_override", ""):
        with patch("volmeta.version.version", side_effect=PackageNotFoundError("volmeta")):
            assert get_version() == "unknown"
