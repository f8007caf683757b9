"""Raw class declarations and the sources that produce them."""

from content_autodoc.declarations.loader import ManifestLoader, load_manifest
from content_autodoc.declarations.models import (
    DeclarationSource,
    DeclaredField,
    EnumReference,
    EnumValue,
    MemberKind,
    RawDeclaration,
    RawMember,
)
from content_autodoc.declarations.scanner import DeclarationScanner

__all__ = [
    "DeclarationScanner",
    "DeclarationSource",
    "DeclaredField",
    "EnumReference",
    "EnumValue",
    "ManifestLoader",
    "MemberKind",
    "RawDeclaration",
    "RawMember",
    "load_manifest",
]
