"""Turns a root TypeModel into a Page of cross-linked sections.

Every model in the root's sub-class tree gets one content section, attached
to the page depth-first. Each content section carries, in order: the type's
doc comments, an Attributes table, an Elements table, and one table per
referenced enum. Empty tables are left out entirely.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from content_autodoc.logging import get_autodoc_logger
from content_autodoc.model.type_model import TypeModel
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

logger = get_autodoc_logger(__name__)

ATTRIBUTES_TITLE = "Attributes"
ELEMENTS_TITLE = "Elements"
ATTRIBUTES_HEAD = Row("Attribute", "Type", "Default value", "Description")
ELEMENTS_HEAD = Row("Element", "Type", "Description")
ENUM_HEAD = Row("Value", "Description")
BASE_CLASS_NOTE = "This type also supports the attributes defined in: "


@dataclass
class ContentSection:
    key: str
    model: TypeModel
    section: Section


class DocumentAssembler:
    """Builds one Page per root key.

    ``diagnostics`` holds the warnings raised by the most recent ``assemble``
    call; they are also logged.
    """

    def __init__(self) -> None:
        self.diagnostics: list[str] = []

    def assemble(self, root_key: str, root_model: TypeModel, all_known_keys: Iterable[str]) -> Page:
        """Assemble the page for ``root_key``.

        Args:
            root_key: Title of the page and key of its first section.
            root_model: Model whose sub-class tree is documented on this page.
            all_known_keys: Every root key documented in this run; used for
                links to other pages and for the base-class note.
        """
        self.diagnostics = []
        known_keys = _case_insensitive_index(all_known_keys)

        content_sections = [ContentSection(key, model, self._create_section(key, model)) for key, model in flatten(root_key, root_model)]
        page_keys = _case_insensitive_index(content.key for content in content_sections)

        page = Page(title=root_key)
        for content in content_sections:
            if elements := self._element_section(content, page_keys, known_keys):
                content.section.subsections.append(elements)

            if content.key == root_key:
                for note in _base_class_notes(content.model, known_keys):
                    content.section.body.append(note)

            content.section.subsections.extend(_enum_sections(content.model))
            page.subsections.append(content.section)
        return page

    def _create_section(self, key: str, model: TypeModel) -> Section:
        section = Section(title=key)
        for comment in model.comments:
            if comment.strip():
                section.body.append(RawText(comment.strip()))

        table = Table(head_row=ATTRIBUTES_HEAD)
        for prop in model.serializable_properties:
            table.body_rows.append(Row(prop.name, prop.type_name, prop.default_display, prop.description))
        for assigned in model.xml_assigned_fields:
            table.body_rows.append(
                Row(
                    assigned.xml_identifier,
                    assigned.declared_field.type_name,
                    assigned.default_display,
                    assigned.declared_field.description,
                )
            )
        if table.body_rows:
            section.subsections.append(Section(title=ATTRIBUTES_TITLE, body=[table]))
        return section

    def _element_section(self, content: ContentSection, page_keys: dict[str, str], known_keys: dict[str, str]) -> Section | None:
        table = Table(head_row=ELEMENTS_HEAD)
        for element in content.model.supported_sub_elements:
            target = element.target_field
            if not element.is_resolvable:
                message = f"Element {element.xml_name} of {content.key} has no type"
                logger.warning("%s", message)
                self.diagnostics.append(message)
                continue
            link = resolve_type_link(target.type_name, target.description, page_keys, known_keys)
            table.body_rows.append(Row(element.xml_name, link.to_markdown(), target.description))

        if not table.body_rows:
            return None
        return Section(title=ELEMENTS_TITLE, body=[table])


def flatten(root_key: str, root_model: TypeModel) -> Iterator[tuple[str, TypeModel]]:
    """Yield the root and then every sub-class model, depth-first."""
    yield root_key, root_model
    for name, sub_model in root_model.sub_classes.items():
        yield from flatten(name, sub_model)


def resolve_type_link(type_name: str, description: str, page_keys: dict[str, str], known_keys: dict[str, str]) -> Hyperlink:
    """Link to a section on this page if one matches, otherwise to the type's own page."""
    lowered = type_name.lower()
    if lowered in page_keys:
        url = in_page_link(page_keys[lowered])
    elif lowered in known_keys:
        url = page_link(known_keys[lowered])
    else:
        url = page_link(type_name)
    return Hyperlink(url=url, text=type_name, alt_text=description)


def _base_class_notes(model: TypeModel, known_keys: dict[str, str]) -> list[Paragraph]:
    notes: list[Paragraph] = []
    for base in model.base_classes:
        canonical = known_keys.get(base.lower())
        if canonical is None:
            continue
        notes.append(Paragraph(parts=(RawText(BASE_CLASS_NOTE), Hyperlink(url=page_section_link(canonical), text=canonical))))
    return notes


def _enum_sections(model: TypeModel) -> list[Section]:
    sections: list[Section] = []
    for enum_name, values in model.enums.items():
        table = Table(head_row=ENUM_HEAD, body_rows=[Row(value.name, value.description) for value in values])
        sections.append(Section(title=enum_name, body=[table]))
    return sections


def _case_insensitive_index(keys: Iterable[str]) -> dict[str, str]:
    """lowercased key -> first key spelled that way."""
    index: dict[str, str] = {}
    for key in keys:
        index.setdefault(key.lower(), key)
    return index
