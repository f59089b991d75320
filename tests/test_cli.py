"""Tests for the command line entry point."""

import logging
from pathlib import Path
from typing import Any, Iterator

import pytest

CLI_PROFILE = "pytest_fogbound_cli"


@pytest.fixture(autouse=True)
def cli_profile() -> Iterator[None]:
    from fogbound_content.settings import AppSettings

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    AppSettings(profile=CLI_PROFILE).clear()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCli:
    """Test `python -m fogbound_content`."""

    def test_summary(self, capsys: Any) -> None:
        """Test a seeded run prints the tier summary and sample rolls."""
        from fogbound_content.__main__ import main

        code = main(["--unlock-level", "1", "--seed", "3", "--rolls", "2", "--profile", CLI_PROFILE])
        out = capsys.readouterr().out

        assert code == 0
        assert "active tier 1" in out
        assert "#1:" in out and "#2:" in out
        assert "shop:" in out

    def test_bad_pack_directory(self, tmp_path: Path, capsys: Any) -> None:
        """Test a missing pack directory exits with status 1."""
        from fogbound_content.__main__ import main

        code = main(["--packs", str(tmp_path / "missing"), "--profile", CLI_PROFILE])

        assert code == 1
        assert "missing" in capsys.readouterr().err
