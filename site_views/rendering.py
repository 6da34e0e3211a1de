"""Render Jinja templates against page and section views.

This module is the thin driver that sits between the content index and a
template: it projects the requested entity at full fidelity, converts the
view into plain data, and hands it to Jinja as ``page`` or ``section``.
Templates may call ``get_page(path)`` and ``get_section(path)`` to fetch a
basic view of any other entity by the paths found in ``translations``,
``ancestors``, ``subsections`` or ``includers``.

Example
-------
>>> from pathlib import Path
>>> from site_views.content import load_content_index
>>> from site_views.rendering import ViewRenderer
>>> index = load_content_index(Path("content/graph.yaml"))  # doctest: +SKIP
>>> renderer = ViewRenderer(index)  # doctest: +SKIP
>>> html = renderer.render_page("blog/post.md")  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import structlog
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .views import (
    project_page_basic,
    project_page_full,
    project_section_basic,
    project_section_full,
    to_context,
)

if typ.TYPE_CHECKING:
    from .content import ContentIndex, ContentKey

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_TEMPLATE = "page.jinja"
DEFAULT_SECTION_TEMPLATE = "section.jinja"


class ViewRenderer:
    """Render templates with projected views of index entities."""

    def __init__(
        self, index: ContentIndex, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        index : ContentIndex
            Index every projection reads from. It must not change while the
            renderer is in use.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the templates
            shipped with the package.
        """
        self.index = index
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.globals["get_page"] = self._get_page
        self.env.globals["get_section"] = self._get_section

    def render_page(
        self, key: ContentKey, template: str = DEFAULT_PAGE_TEMPLATE
    ) -> str:
        """Render ``template`` with the full view of the page under ``key``."""
        view = project_page_full(self.index.get_page(key), self.index)
        logger.debug("render_page", key=key, template=template)
        return self.env.get_template(template).render(page=to_context(view))

    def render_section(
        self, key: ContentKey, template: str = DEFAULT_SECTION_TEMPLATE
    ) -> str:
        """Render ``template`` with the full view of the section under ``key``."""
        view = project_section_full(self.index.get_section(key), self.index)
        logger.debug("render_section", key=key, template=template)
        return self.env.get_template(template).render(section=to_context(view))

    @staticmethod
    def write(html: str, output_path: Path) -> Path:
        """Write rendered HTML to ``output_path``, creating parent folders."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if not html.endswith("\n"):
            html += "\n"
        output_path.write_text(html, encoding="utf-8")
        return output_path

    def _get_page(self, path: str) -> dict[str, typ.Any]:
        """Template global returning a basic page view looked up by path."""
        page = self.index.get_page_by_path(path)
        return to_context(project_page_basic(page, self.index))

    def _get_section(self, path: str) -> dict[str, typ.Any]:
        """Template global returning a basic section view looked up by path."""
        section = self.index.get_section_by_path(path)
        return to_context(project_section_basic(section, self.index))


__all__ = ["DEFAULT_PAGE_TEMPLATE", "DEFAULT_SECTION_TEMPLATE", "ViewRenderer"]
