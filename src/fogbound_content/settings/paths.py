"""
Path-related settings for fogbound-content.
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class PathSettings:
    """Manages custom content locations.

    Both paths are optional; when unset the packs and powergates bundled
    with the package are used.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_path(self, key: str) -> Optional[Path]:
        value = self.settings.value(key, "")
        path_str = str(value) if value is not None else ""
        return Path(path_str) if path_str else None

    def _set_path(self, key: str, value: Optional[Path]) -> None:
        self.settings.setValue(key, str(value) if value else "")
        self.settings.sync()

    @property
    def content_path(self) -> Optional[Path]:
        """Get custom content pack directory."""
        return self._get_path("paths/content")

    @content_path.setter
    def content_path(self, value: Optional[Path]) -> None:
        """Set custom content pack directory (None restores the built-in packs)."""
        self._set_path("paths/content", value)

    @property
    def powergates_file(self) -> Optional[Path]:
        """Get custom powergate definitions file."""
        return self._get_path("paths/powergates")

    @powergates_file.setter
    def powergates_file(self, value: Optional[Path]) -> None:
        """Set custom powergate definitions file."""
        self._set_path("paths/powergates", value)
