"""Pytest configuration and shared helpers."""

import os
import re
from pathlib import Path
from typing import Callable, Optional

import pytest

# CSI sequences: ESC [ params final
CSI_PATTERN = re.compile(r'\x1b\[([0-9;?]*)([A-Za-z])')

ParsedCsi = list[tuple[list[int], str]]


def split_csi(text: str) -> ParsedCsi:
    """
    Split text made only of CSI sequences into (params, final) pairs.

    Fails the test if anything other than CSI sequences is present.
    """
    result: ParsedCsi = []
    pos = 0
    while pos < len(text):
        match = CSI_PATTERN.match(text, pos)
        if match is None:
            pytest.fail(f"Not a CSI sequence at offset {pos}: {text[pos:]!r}")
        params_str = match.group(1).lstrip('?')
        params = [int(p) if p else 0 for p in params_str.split(';')] if params_str else []
        result.append((params, match.group(2)))
        pos = match.end()
    return result


@pytest.fixture
def parse_csi() -> Callable[[str], ParsedCsi]:
    """Fixture exposing the CSI splitter."""
    return split_csi


def get_test_image() -> Optional[Path]:
    """
    Get an external image from the environment.

    Set ANSI_ESCAPES_TEST_IMAGE to run the real-file image tests.
    """
    if env_path := os.environ.get("ANSI_ESCAPES_TEST_IMAGE"):
        path = Path(env_path).expanduser()
        if path.is_file():
            return path
    return None


@pytest.fixture(scope="session")
def external_image() -> Path:
    """Fixture providing an external image, skips if unavailable."""
    path = get_test_image()
    if path is None:
        pytest.skip("External image not found. Set ANSI_ESCAPES_TEST_IMAGE")
    return path


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """A tiny PNG written with Pillow."""
    Image = pytest.importorskip("PIL.Image")
    path = tmp_path / "dot.png"
    Image.new("RGB", (2, 2), (255, 0, 0)).save(path)
    return path
