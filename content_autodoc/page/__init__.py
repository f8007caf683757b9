"""Page intermediate representation and the assembler that builds it."""

from content_autodoc.page.assembler import DocumentAssembler, flatten, resolve_type_link
from content_autodoc.page.page import (
    Hyperlink,
    Page,
    Paragraph,
    RawText,
    Row,
    Section,
    Table,
    in_page_link,
    page_link,
    page_section_link,
)

__all__ = [
    "DocumentAssembler",
    "Hyperlink",
    "Page",
    "Paragraph",
    "RawText",
    "Row",
    "Section",
    "Table",
    "flatten",
    "in_page_link",
    "page_link",
    "page_section_link",
    "resolve_type_link",
]
