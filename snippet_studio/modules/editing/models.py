"""Edit buffer value objects."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from snippet_studio.modules.templates import Template


class FragmentKind(str, Enum):
    HTML = "html"
    CSS = "css"
    JS = "js"


@dataclass(frozen=True, slots=True)
class FragmentSet:
    html: str
    css: str
    js: str

    @classmethod
    def from_template(cls, template: Template) -> "FragmentSet":
        return cls(html=template.code_html, css=template.code_css, js=template.code_js)


@dataclass(frozen=True, slots=True)
class EditBuffer:
    """Unsaved drafts of one template's fragments.

    Instances are immutable; every edit yields a new buffer so a reader never
    observes a half-applied change.
    """

    html_draft: str
    css_draft: str
    js_draft: str
    original_ref: int

    @classmethod
    def seeded_from(cls, template: Template) -> "EditBuffer":
        return cls(
            html_draft=template.code_html,
            css_draft=template.code_css,
            js_draft=template.code_js,
            original_ref=template.id,
        )


_DRAFT_FIELDS = {
    FragmentKind.HTML: "html_draft",
    FragmentKind.CSS: "css_draft",
    FragmentKind.JS: "js_draft",
}


def set_fragment(buffer: EditBuffer, kind: FragmentKind | str, text: str) -> EditBuffer:
    """Replace exactly one draft. The text is not validated; empty is fine."""
    kind = FragmentKind(kind)
    return replace(buffer, **{_DRAFT_FIELDS[kind]: text})


def snapshot(buffer: EditBuffer) -> FragmentSet:
    return FragmentSet(html=buffer.html_draft, css=buffer.css_draft, js=buffer.js_draft)
