"""Shared XFL fixtures."""

from pathlib import Path

import pytest

from .samples import default_members, write_fla


@pytest.fixture
def fla_file(tmp_path: Path) -> Path:
    """A zipped .fla with one symbol and one opaque library asset."""
    return write_fla(tmp_path / "movie.fla", default_members())


@pytest.fixture
def xfl_dir(tmp_path: Path) -> Path:
    """The same content as ``fla_file`` unpacked into an XFL folder."""
    root = tmp_path / "movie"
    for name, data in default_members().items():
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            target.write_text(data, encoding="utf-8")
        else:
            target.write_bytes(data)
    return root
