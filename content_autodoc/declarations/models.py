"""Raw class declarations handed to the model builder.

A declaration source (the Python scanner or the manifest loader) produces one
RawDeclaration per class it finds. The same logical name may be produced by
several source roots; merging them is the model builder's job.
"""

from enum import StrEnum
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MemberKind(StrEnum):
    """How a declared member is bound to XML."""

    PROPERTY = "property"
    FIELD = "field"
    SUB_ELEMENT = "sub_element"


class DeclaredField(BaseModel):
    """A field backing a sub-element."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_name: str = ""
    description: str = ""

    @property
    def has_type(self) -> bool:
        return bool(self.type_name.strip())


class EnumValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""


class EnumReference(BaseModel):
    """An enum type referenced by a member, with its values in declaration order."""

    model_config = ConfigDict(frozen=True)

    name: str
    values: tuple[EnumValue, ...] = ()


class RawMember(BaseModel):
    """A declared member together with its attribute metadata.

    ``xml_identifier`` is the XML attribute or element name when it differs
    from ``name``. ``initializer_method`` is set for fields discovered inside
    a method body. ``backing_fields`` are the fields a sub-element populates.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: MemberKind = MemberKind.PROPERTY
    type_name: str = ""
    default_value: str = ""
    description: str = ""
    xml_identifier: str = ""
    initializer_method: str = ""
    backing_fields: tuple[DeclaredField, ...] = ()
    enum: EnumReference | None = None

    @field_validator("default_value", mode="before")
    @classmethod
    def stringify_default(cls, value: Any) -> Any:
        """Manifests may carry YAML scalars; defaults are kept as source text."""
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @property
    def identifier(self) -> str:
        return self.xml_identifier or self.name


class RawDeclaration(BaseModel):
    """One class declaration as found in one source root."""

    model_config = ConfigDict(frozen=True)

    name: str
    base_classes: tuple[str, ...] = ()
    comments: tuple[str, ...] = ()
    members: tuple[RawMember, ...] = ()
    nested: tuple["RawDeclaration", ...] = ()
    source: str = Field(default="", description="File the declaration was read from")


class DeclarationSource(Protocol):
    """Anything that turns a source root into raw declarations."""

    def scan(self, root: Path) -> list[RawDeclaration]: ...
