"""Cyclopts CLI entrypoint for inspecting and rendering content views.

The ``views`` console script loads a YAML snapshot of a content graph and
either prints the view a template would receive, renders a Jinja template
with it, or checks the graph for broken references. It is mostly used to
debug templates and to validate graphs produced by the content pipeline.

Examples
--------
Print the full view of a page as JSON:

>>> from site_views.cli import app
>>> app(["page", "blog/post.md", "--content", "graph.yaml"])  # doctest: +SKIP

Render a section with a custom template directory:

>>> app(
...     ["render", "list.jinja", "--section", "blog", "--templates", "tpl"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONTENT_GRAPH
from .content import find_broken_references, load_content_index
from .logging_setup import configure_logging
from .rendering import ViewRenderer
from .views import (
    project_page_basic,
    project_page_full,
    project_section_basic,
    project_section_full,
    to_json,
)

app = App(name="views", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ContentOption = typ.Annotated[
    Path, Parameter(help="Path to the content graph YAML", env_var="INPUT_CONTENT")
]
VerboseOption = typ.Annotated[
    bool, Parameter(help="Log every projection at debug level")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(name="page", help="Print the view of a page as JSON.")
def show_page(
    key: str,
    /,
    *,
    content: ContentOption = DEFAULT_CONTENT_GRAPH,
    basic: typ.Annotated[
        bool, Parameter(help="Skip navigation pointers (basic fidelity)")
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Print the projected view of the page stored under ``key``.

    Parameters
    ----------
    key : str
        Stable key of the page in the content graph.
    content : Path, optional
        Content graph YAML file (overridable via ``INPUT_CONTENT``).
    basic : bool, optional
        Print the basic-fidelity view instead of the full one.
    verbose : bool, optional
        Enable debug logging on stderr.

    Raises
    ------
    BrokenReferenceError
        If ``key`` or any key the page references is missing.
    """
    configure_logging(verbose=verbose)
    index = load_content_index(content)
    page = index.get_page(key)
    view = project_page_basic(page, index) if basic else project_page_full(page, index)
    print(to_json(view))


@app.command(name="section", help="Print the view of a section as JSON.")
def show_section(
    key: str,
    /,
    *,
    content: ContentOption = DEFAULT_CONTENT_GRAPH,
    basic: typ.Annotated[
        bool, Parameter(help="Leave out child pages (basic fidelity)")
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Print the projected view of the section stored under ``key``."""
    configure_logging(verbose=verbose)
    index = load_content_index(content)
    section = index.get_section(key)
    if basic:
        view = project_section_basic(section, index)
    else:
        view = project_section_full(section, index)
    print(to_json(view))


@app.command(help="Render a Jinja template with the view of a page or section.")
def render(
    template: str,
    /,
    *,
    page: typ.Annotated[str | None, Parameter(help="Page key to render")] = None,
    section: typ.Annotated[
        str | None, Parameter(help="Section key to render")
    ] = None,
    content: ContentOption = DEFAULT_CONTENT_GRAPH,
    templates: typ.Annotated[
        Path | None, Parameter(help="Template directory", env_var="INPUT_TEMPLATES")
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write HTML here instead of stdout")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Render ``template`` for exactly one page or section.

    Parameters
    ----------
    template : str
        Template name relative to the template directory.
    page, section : str or None
        Key of the entity to render; exactly one must be given.
    content : Path, optional
        Content graph YAML file.
    templates : Path or None, optional
        Template directory; defaults to the packaged templates.
    output : Path or None, optional
        File to write; the HTML is printed when omitted.
    verbose : bool, optional
        Enable debug logging on stderr.

    Raises
    ------
    ValueError
        If neither or both of ``page`` and ``section`` are supplied.
    """
    if (page is None) == (section is None):
        msg = "Pass exactly one of --page or --section."
        raise ValueError(msg)
    configure_logging(verbose=verbose)
    renderer = ViewRenderer(load_content_index(content), templates_dir=templates)
    if page is not None:
        html = renderer.render_page(page, template)
    else:
        html = renderer.render_section(typ.cast("str", section), template)
    if output is None:
        print(html)
        return
    written = renderer.write(html, output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Report keys in the content graph that do not resolve.")
def check(
    *,
    content: ContentOption = DEFAULT_CONTENT_GRAPH,
    verbose: VerboseOption = False,
) -> None:
    """List every broken reference and exit non-zero when any exist."""
    configure_logging(verbose=verbose)
    index = load_content_index(content)
    broken = find_broken_references(index)
    for reference in broken:
        print(reference.describe())
    if broken:
        raise SystemExit(1)
    print(
        f"ok: {len(index.pages)} pages, {len(index.sections)} sections, "
        f"{len(index.translations)} translation groups"
    )


def main() -> None:
    """Invoke the Cyclopts application that powers the ``views`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
