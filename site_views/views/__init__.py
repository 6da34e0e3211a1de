"""Project content index entities into template-ready view records."""

from .models import PageView, SectionView, TranslatedContent
from .pages import Fidelity, project_page, project_page_basic, project_page_full
from .sections import project_section, project_section_basic, project_section_full
from .serialize import to_context, to_json
from .translations import (
    page_translations,
    resolve_translations,
    section_translations,
)

__all__ = [
    "Fidelity",
    "PageView",
    "SectionView",
    "TranslatedContent",
    "page_translations",
    "project_page",
    "project_page_basic",
    "project_page_full",
    "project_section",
    "project_section_basic",
    "project_section_full",
    "resolve_translations",
    "section_translations",
    "to_context",
    "to_json",
]
