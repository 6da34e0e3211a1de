"""Tests for the structlog configuration used by the CLI."""

from __future__ import annotations

import io
import logging
import typing as typ

import pytest

from site_views.logging_setup import configure_logging
from site_views.views import project_page_basic

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from site_views.content import ContentIndex


@pytest.fixture
def log_stream() -> cabc.Iterator[io.StringIO]:
    """Yield a buffer for log output and restore quiet logging afterwards."""
    stream = io.StringIO()
    yield stream
    configure_logging()


def test_verbose_logging_emits_projection_events(
    site_index: ContentIndex, log_stream: io.StringIO
) -> None:
    """Debug events name the projected entity."""
    configure_logging(verbose=True, stream=log_stream)
    project_page_basic(site_index.get_page("en/post.md"), site_index)
    output = log_stream.getvalue()
    assert "page_projected" in output, f"expected a projection event in {output!r}"
    assert "key=en/post.md" in output
    assert logging.getLogger().level == logging.DEBUG


def test_default_logging_hides_debug_events(
    site_index: ContentIndex, log_stream: io.StringIO
) -> None:
    """Only warnings and errors reach the stream by default."""
    configure_logging(stream=log_stream)
    project_page_basic(site_index.get_page("en/post.md"), site_index)
    assert log_stream.getvalue() == ""


def test_broken_reference_is_logged(
    site_index: ContentIndex, log_stream: io.StringIO
) -> None:
    """Failed lookups are reported at error level before raising."""
    configure_logging(stream=log_stream)
    with pytest.raises(KeyError):
        site_index.get_page("en/missing.md")
    output = log_stream.getvalue()
    assert "broken_reference" in output
    assert "error" in output
