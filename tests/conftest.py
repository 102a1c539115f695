"""Shared test fixtures."""

from pathlib import Path

import pytest

from capline.core.models import Segment

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_srt(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample.srt"


@pytest.fixture
def sample_vtt(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample.vtt"


@pytest.fixture
def sample_transcript(fixtures_dir: Path) -> Path:
    return fixtures_dir / "transcript.json"


@pytest.fixture
def segments() -> list[Segment]:
    return [
        Segment(start=0.0, end=2.5, text="hello there"),
        Segment(start=2.5, end=6.0, text="this is a longer sentence with nine words in it"),
        Segment(start=7.0, end=8.25, text="bye."),
    ]
