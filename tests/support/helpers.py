"""Builders for raw declarations used across the test suite."""

from content_autodoc.declarations.models import (
    DeclaredField,
    EnumReference,
    EnumValue,
    MemberKind,
    RawDeclaration,
    RawMember,
)


def prop(name: str, type_name: str = "float", default: str = "0", description: str = "", enum: EnumReference | None = None) -> RawMember:
    return RawMember(name=name, kind=MemberKind.PROPERTY, type_name=type_name, default_value=default, description=description, enum=enum)


def xml_field(
    xml_name: str,
    type_name: str = "float",
    default: str = "0",
    description: str = "",
    method: str = "LoadEffects",
    name: str | None = None,
) -> RawMember:
    return RawMember(
        name=name or xml_name.lower(),
        kind=MemberKind.FIELD,
        type_name=type_name,
        default_value=default,
        description=description,
        xml_identifier=xml_name,
        initializer_method=method,
    )


def sub_element(xml_name: str, type_name: str, description: str = "", field_name: str | None = None) -> RawMember:
    backing = DeclaredField(name=field_name or xml_name.lower(), type_name=type_name, description=description)
    return RawMember(
        name=backing.name,
        kind=MemberKind.SUB_ELEMENT,
        type_name=type_name,
        description=description,
        xml_identifier=xml_name,
        backing_fields=(backing,),
    )


def enum_ref(name: str, *values: str) -> EnumReference:
    return EnumReference(name=name, values=tuple(EnumValue(name=value, description=f"{value} desc") for value in values))


def declaration(
    name: str,
    *members: RawMember,
    bases: tuple[str, ...] = (),
    comments: tuple[str, ...] = (),
    nested: tuple[RawDeclaration, ...] = (),
) -> RawDeclaration:
    return RawDeclaration(name=name, base_classes=bases, comments=comments, members=members, nested=nested)
