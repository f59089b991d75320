"""
File loaders for content packs and powergate definitions.

Reads pack JSON with orjson. A pack file holds either a single pack object
or a list of packs. Built-in data ships inside the package under
``fogbound_content/data`` and is read through importlib.resources.
"""

import logging
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, List, Union

import orjson

from ..progression.models import Powergate
from .models import ContentPack
from .types import ContentLoadError

PathLike = Union[Path, Traversable]

BUILTIN_PACKAGE = "fogbound_content"
BUILTIN_DATA_DIR = "data"


class ContentPackLoader:
    """Loads content packs and powergates from JSON files."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("ContentPackLoader initialized")

    def _read_json(self, path: PathLike) -> Any:
        """Read and parse a JSON file.

        Raises:
            ContentLoadError: If the file is missing or not valid JSON
        """
        try:
            return orjson.loads(path.read_bytes())
        except FileNotFoundError as e:
            raise ContentLoadError(f"Content file not found: {path}") from e
        except orjson.JSONDecodeError as e:
            raise ContentLoadError(f"Failed to parse JSON from {path}: {e}") from e
        except OSError as e:
            raise ContentLoadError(f"Error reading content file {path}: {e}") from e

    def load_pack_file(self, path: PathLike) -> List[ContentPack]:
        """Load every pack defined in one JSON file.

        Malformed category entries are skipped and logged as warnings; a pack
        without a ``tier`` makes the whole file invalid.

        Args:
            path: JSON file holding a pack object or a list of pack objects

        Returns:
            Packs in file order

        Raises:
            ContentLoadError: If the file cannot be parsed or a pack is malformed
        """
        data = self._read_json(path)
        raw_packs: List[Any] = data if isinstance(data, list) else [data]

        packs: List[ContentPack] = []
        for raw in raw_packs:
            skipped: List[str] = []
            try:
                pack = ContentPack.from_dict(raw, skipped=skipped)
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                raise ContentLoadError(f"Invalid content pack in {path}: {e!r}") from e

            for message in skipped:
                self.logger.warning(f"Skipped malformed entry in {path}: {message}")
            packs.append(pack)

        self.logger.debug(f"Loaded {len(packs)} pack(s) from {path}")
        return packs

    def load_directory(self, directory: PathLike) -> List[ContentPack]:
        """Load all ``*.json`` pack files from a directory, in file-name order.

        Raises:
            ContentLoadError: If the directory does not exist or a file is invalid
        """
        if not directory.is_dir():
            raise ContentLoadError(f"Content pack directory not found: {directory}")

        json_files = sorted(
            (f for f in directory.iterdir() if f.name.endswith(".json")),
            key=lambda f: f.name,
        )
        if not json_files:
            self.logger.warning(f"No pack files found in {directory}")

        packs: List[ContentPack] = []
        for json_file in json_files:
            packs.extend(self.load_pack_file(json_file))

        self.logger.info(f"Loaded {len(packs)} content pack(s) from {directory}")
        return packs

    def load_powergates_file(self, path: PathLike) -> List[Powergate]:
        """Load powergate definitions (a JSON list of gates).

        Raises:
            ContentLoadError: If the file cannot be parsed or a gate is malformed
        """
        data = self._read_json(path)
        raw_gates: List[Any] = data if isinstance(data, list) else [data]
        try:
            gates = [Powergate.from_dict(raw) for raw in raw_gates]
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise ContentLoadError(f"Invalid powergate definition in {path}: {e!r}") from e

        self.logger.debug(f"Loaded {len(gates)} powergate(s) from {path}")
        return gates

    def load_builtin_packs(self) -> List[ContentPack]:
        """Load the packs bundled with the package."""
        return self.load_directory(files(BUILTIN_PACKAGE) / BUILTIN_DATA_DIR / "packs")

    def load_builtin_powergates(self) -> List[Powergate]:
        """Load the powergates bundled with the package."""
        return self.load_powergates_file(files(BUILTIN_PACKAGE) / BUILTIN_DATA_DIR / "powergates.json")
