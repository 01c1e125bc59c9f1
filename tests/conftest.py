"""Pytest configuration and shared fixtures."""

from typing import Callable

import pytest
import structlog

from bbs_ansi_html.logging import configure_default_logging
from bbs_ansi_html.sauce.record import SauceRecord
from bbs_ansi_html.sauce.writer import append_sauce


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging configuration left behind by CLI invocations."""
    yield
    structlog.reset_defaults()
    configure_default_logging()


@pytest.fixture
def sample_record() -> SauceRecord:
    """SAUCE record with the common character-art fields filled in."""
    return SauceRecord(
        title="Test Title",
        author="Artist",
        group="Group",
        date="20240115",
        width=80,
        height=25,
    )


@pytest.fixture
def with_sauce() -> Callable[..., bytes]:
    """Build file bytes: content + SUB + optional COMNT + SAUCE record."""
    def build(content: bytes, **fields) -> bytes:
        return append_sauce(SauceRecord(**fields), content)
    return build


@pytest.fixture
def art_file(tmp_path, with_sauce):
    """Write an art file with a SAUCE trailer and return its path."""
    path = tmp_path / "art.ans"
    path.write_bytes(with_sauce(
        b"\x1b[31mRed\x1b[0m\r\n",
        title="Test Title",
        author="Artist",
        date="20240115",
        width=80,
        height=25,
        comments=("First comment",),
    ))
    return path
