"""Merged content-type models built from raw declarations."""

from content_autodoc.model.default_value import NONE_TOKEN, make_more_presentable
from content_autodoc.model.type_model import (
    ParsingOptions,
    SerializableProperty,
    SupportedSubElement,
    TypeModel,
    TypeModelRegistry,
    XmlAssignedField,
    create_model,
)

__all__ = [
    "NONE_TOKEN",
    "ParsingOptions",
    "SerializableProperty",
    "SupportedSubElement",
    "TypeModel",
    "TypeModelRegistry",
    "XmlAssignedField",
    "create_model",
    "make_more_presentable",
]
