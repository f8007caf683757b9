"""Merged, inheritance-aware models of content types.

A TypeModel accumulates every raw declaration that shares its key. Merging
only ever appends: nothing recorded by an earlier merge is removed or
rewritten, and merging the same declaration twice records it twice.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from content_autodoc.declarations.models import (
    DeclaredField,
    EnumValue,
    MemberKind,
    RawDeclaration,
    RawMember,
)
from content_autodoc.logging import get_autodoc_logger
from content_autodoc.model.default_value import make_more_presentable

logger = get_autodoc_logger(__name__)


@dataclass(frozen=True)
class ParsingOptions:
    """Options fixed when a model is created and inherited by its sub-models.

    Attributes:
        initializer_method_names: Methods whose field assignments document
            XML attributes. Fields assigned anywhere else are ignored.
    """

    initializer_method_names: frozenset[str] = frozenset()


@dataclass(frozen=True)
class SerializableProperty:
    name: str
    type_name: str
    default_value: str
    description: str

    @property
    def default_display(self) -> str:
        return make_more_presentable(self.default_value, self.type_name)


@dataclass(frozen=True)
class XmlAssignedField:
    """A field populated from an XML attribute inside an initializer method."""

    xml_identifier: str
    declared_field: DeclaredField
    default_value: str

    @property
    def default_display(self) -> str:
        return make_more_presentable(self.default_value, self.declared_field.type_name)


@dataclass(frozen=True)
class SupportedSubElement:
    """A child XML element and the fields it populates."""

    xml_name: str
    affected_fields: tuple[DeclaredField, ...]

    @property
    def target_field(self) -> DeclaredField:
        return self.affected_fields[0]

    @property
    def is_resolvable(self) -> bool:
        return self.target_field.has_type


@dataclass
class TypeModel:
    """Everything documented about one content type, across all its declarations.

    Mutable while declarations are merged in, read-only once assembly starts.
    ``sub_classes`` holds the models of nested declarations, built with the
    same options and owned by this model.
    """

    key: str
    options: ParsingOptions = field(default_factory=ParsingOptions)
    base_classes: list[str] = field(default_factory=list)
    serializable_properties: list[SerializableProperty] = field(default_factory=list)
    xml_assigned_fields: list[XmlAssignedField] = field(default_factory=list)
    supported_sub_elements: list[SupportedSubElement] = field(default_factory=list)
    enums: dict[str, tuple[EnumValue, ...]] = field(default_factory=dict)
    comments: list[str] = field(default_factory=list)
    sub_classes: dict[str, "TypeModel"] = field(default_factory=dict)

    @classmethod
    def create(cls, declaration: RawDeclaration, options: ParsingOptions | None = None) -> "TypeModel":
        """Start a model from the first declaration seen for its key."""
        model = cls(key=declaration.name, options=options or ParsingOptions())
        model.merge(declaration)
        return model

    def merge(self, declaration: RawDeclaration) -> None:
        """Fold another declaration of this type into the model."""
        for base in declaration.base_classes:
            if base not in self.base_classes:
                self.base_classes.append(base)

        self.comments.extend(declaration.comments)

        for member in declaration.members:
            self._merge_member(member)

        for nested in declaration.nested:
            existing = self.sub_classes.get(nested.name)
            if existing is None:
                self.sub_classes[nested.name] = TypeModel.create(nested, self.options)
            else:
                existing.merge(nested)

    def _merge_member(self, member: RawMember) -> None:
        match member.kind:
            case MemberKind.PROPERTY:
                self.serializable_properties.append(
                    SerializableProperty(
                        name=member.identifier,
                        type_name=member.type_name,
                        default_value=member.default_value,
                        description=member.description,
                    )
                )
            case MemberKind.FIELD:
                if member.initializer_method not in self.options.initializer_method_names:
                    return
                self.xml_assigned_fields.append(
                    XmlAssignedField(
                        xml_identifier=member.identifier,
                        declared_field=DeclaredField(name=member.name, type_name=member.type_name, description=member.description),
                        default_value=member.default_value,
                    )
                )
            case MemberKind.SUB_ELEMENT:
                if not member.backing_fields:
                    logger.debug("%s: sub-element %s has no backing field", self.key, member.identifier)
                    return
                self.supported_sub_elements.append(SupportedSubElement(xml_name=member.identifier, affected_fields=member.backing_fields))

        if member.enum is not None and member.enum.name not in self.enums:
            self.enums[member.enum.name] = member.enum.values

    @property
    def unresolved_sub_elements(self) -> list[SupportedSubElement]:
        return [element for element in self.supported_sub_elements if not element.is_resolvable]


def create_model(declaration: RawDeclaration, options: ParsingOptions | None = None) -> TypeModel:
    return TypeModel.create(declaration, options)


class TypeModelRegistry:
    """Key -> TypeModel map filled while scanning source roots.

    Keys are case-sensitive: ``Bleeding`` and ``bleeding`` are different types.
    """

    def __init__(self, options: ParsingOptions | None = None):
        self.options = options or ParsingOptions()
        self._models: dict[str, TypeModel] = {}

    def add(self, declaration: RawDeclaration) -> TypeModel:
        model = self._models.get(declaration.name)
        if model is None:
            model = create_model(declaration, self.options)
            self._models[declaration.name] = model
        else:
            model.merge(declaration)
        return model

    def add_all(self, declarations: Iterable[RawDeclaration]) -> None:
        for declaration in declarations:
            self.add(declaration)

    def get(self, key: str) -> TypeModel | None:
        return self._models.get(key)

    def keys(self) -> list[str]:
        return list(self._models)

    def items(self) -> list[tuple[str, TypeModel]]:
        return list(self._models.items())

    def __contains__(self, key: object) -> bool:
        return key in self._models

    def __len__(self) -> int:
        return len(self._models)
