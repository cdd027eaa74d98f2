"""Shared fixtures, plus optional external art files."""

import os
from pathlib import Path
from typing import Callable, Optional

import pytest
from PIL import Image

from bbs_irc_art.core.canvas import Canvas
from bbs_irc_art.render.glyphs import Glyph, GlyphMetrics

ART_SUFFIXES = ("*.ans", "*.ANS", "*.irc", "*.txt")


class BoxGlyphSource:
    """
    Deterministic glyph source for image tests.

    Cells are ``size // 2`` wide and ``size`` tall with the baseline at
    three quarters of the height. Every visible character is a solid box
    one pixel in from the left edge, reaching half a cell above the
    baseline.
    """

    def __init__(self) -> None:
        self.requests: list[tuple[str, int, bool]] = []

    def metrics(self, size: int) -> GlyphMetrics:
        return GlyphMetrics(advance=size // 2, ascent=size * 3 // 4, descent=size // 4)

    def glyph(self, char: str, size: int, bold: bool = False) -> Optional[Glyph]:
        self.requests.append((char, size, bold))
        if char.isspace():
            return None
        width = max(1, size // 4)
        height = max(1, size // 2)
        return Glyph(Image.new("L", (width, height), 255), left=1, top=-height)


@pytest.fixture
def glyphs() -> BoxGlyphSource:
    return BoxGlyphSource()


@pytest.fixture
def make_canvas() -> Callable[..., Canvas]:
    """Factory for canvases pre-filled with plain text, one string per row."""

    def factory(*lines: str, width: int = 80) -> Canvas:
        from bbs_irc_art.core.color import DEFAULT_BG, DEFAULT_FG

        canvas = Canvas(width=width)
        for i, line in enumerate(lines):
            if i:
                canvas.new_line()
            for char in line:
                canvas.set_cell(char, DEFAULT_FG, DEFAULT_BG)
        return canvas

    return factory


def get_test_art_dir() -> Optional[Path]:
    """
    Get external art directory from the environment.

    Set BBS_IRC_ART_TEST_DIR to a directory of .ans/.irc files to run the
    tests marked ``external``.
    """
    if env_path := os.environ.get("BBS_IRC_ART_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


def _art_files(art_dir: Path) -> list[Path]:
    files: set[Path] = set()
    for pattern in ART_SUFFIXES:
        files.update(art_dir.glob(pattern))
    # Limit to avoid very slow tests
    return sorted(files)[:50]


@pytest.fixture(scope="session")
def test_art_dir() -> Path:
    """Fixture providing external art directory, skips if unavailable."""
    art_dir = get_test_art_dir()
    if art_dir is None:
        pytest.skip("External art directory not found. Set BBS_IRC_ART_TEST_DIR")
    return art_dir


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize ``art_file`` over the external art directory."""
    if "art_file" in metafunc.fixturenames:
        art_dir = get_test_art_dir()
        files = _art_files(art_dir) if art_dir else []
        metafunc.parametrize("art_file", files, ids=lambda p: p.name)
