"""Content AutoDoc - Markdown reference pages for annotated content-type classes.

Scans the declarations of a content-type family (for example Afflictions),
merges declarations of the same type found in several source roots, and
writes one cross-linked ``<Key>.md`` page per type with its attributes,
child elements and enums.

Quick Start:
    >>> from pathlib import Path
    >>> from content_autodoc import AFFLICTIONS, DeclarationScanner, run_family
    >>>
    >>> scanner = DeclarationScanner(AFFLICTIONS.initializer_method_names)
    >>> report = run_family(AFFLICTIONS, Path("repo"), Path("docs"), scanner)
    >>> report.raise_for_failures()
"""

from .declarations import (
    DeclarationScanner,
    DeclarationSource,
    DeclaredField,
    EnumReference,
    EnumValue,
    ManifestLoader,
    MemberKind,
    RawDeclaration,
    RawMember,
)
from .exceptions import (
    AutoDocError,
    DeclarationLoadError,
    OutputWriteError,
    RunFailedError,
    UnknownFamilyError,
)
from .families import AFFLICTIONS, FAMILIES, ContentFamily, get_family
from .logging import get_autodoc_logger, setup_logging
from .model import ParsingOptions, TypeModel, TypeModelRegistry, create_model
from .page import DocumentAssembler, Page
from .runner import RunReport, build_models, collect_declarations, render_family, run_family
from .settings import Settings, settings

__version__ = "0.3.0"

__all__ = [
    "AFFLICTIONS",
    "FAMILIES",
    "AutoDocError",
    "ContentFamily",
    "DeclarationLoadError",
    "DeclarationScanner",
    "DeclarationSource",
    "DeclaredField",
    "DocumentAssembler",
    "EnumReference",
    "EnumValue",
    "ManifestLoader",
    "MemberKind",
    "OutputWriteError",
    "Page",
    "ParsingOptions",
    "RawDeclaration",
    "RawMember",
    "RunFailedError",
    "RunReport",
    "Settings",
    "TypeModel",
    "TypeModelRegistry",
    "UnknownFamilyError",
    "build_models",
    "collect_declarations",
    "create_model",
    "get_autodoc_logger",
    "get_family",
    "render_family",
    "run_family",
    "settings",
    "setup_logging",
]
