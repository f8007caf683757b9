"""AST-based discovery of content-type declarations in Python sources.

Recognized conventions inside a class body:

    class Bleeding(Affliction):
        '''Drains blood over time.'''

        strength: float = Serialize(0.0, description="How fast blood is lost.")
        sprite: Sprite = SubElement("Sprite", "Icon")
        '''Icon drawn in the health interface.'''

        def load_effects(self, element):
            self.threshold = element.get_attribute_float("Threshold", 0.5)

Enum classes anywhere under the scanned roots are indexed so members whose
annotation names one carry its values.
"""

import ast
from collections.abc import Iterable
from pathlib import Path

from content_autodoc.declarations.models import (
    DeclaredField,
    EnumReference,
    EnumValue,
    MemberKind,
    RawDeclaration,
    RawMember,
)
from content_autodoc.logging import get_autodoc_logger

logger = get_autodoc_logger(__name__)

ENUM_BASES: frozenset[str] = frozenset({"Enum", "IntEnum", "StrEnum", "Flag", "IntFlag"})
PROPERTY_MARKERS: frozenset[str] = frozenset({"Serialize", "serialize"})
SUB_ELEMENT_MARKERS: frozenset[str] = frozenset({"SubElement", "sub_element"})
ATTRIBUTE_GETTER_PREFIX = "get_attribute_"

# get_attribute_<suffix> -> documented type when the field has no annotation
ATTRIBUTE_TYPES: dict[str, str] = {
    "bool": "bool",
    "boolean": "bool",
    "float": "float",
    "int": "int",
    "integer": "int",
    "str": "string",
    "string": "string",
    "identifier": "Identifier",
    "color": "Color",
    "vector2": "Vector2",
    "float_array": "float[]",
    "string_array": "string[]",
}


class DeclarationScanner:
    """Scans directories of Python sources for class declarations.

    One scanner is meant to be reused for every source root of a family: the
    enum index persists across ``scan`` calls.
    """

    def __init__(self, initializer_method_names: Iterable[str] = ()):
        self.initializer_method_names = frozenset(initializer_method_names)
        self.enums: dict[str, EnumReference] = {}

    def scan(self, root: Path) -> list[RawDeclaration]:
        """Return the top-level class declarations found under ``root``, in sorted file order."""
        files = [root] if root.is_file() else sorted(root.rglob("*.py"))
        parsed: list[tuple[Path, ast.Module, list[str]]] = []
        for path in files:
            try:
                source = path.read_text(encoding="utf-8")
                tree = ast.parse(source)
            except (SyntaxError, UnicodeDecodeError) as e:
                logger.warning("Skipping %s: %s", path, e)
                continue
            parsed.append((path, tree, source.splitlines()))

        for _, tree, _ in parsed:
            self._index_enums(tree)

        declarations: list[RawDeclaration] = []
        for path, tree, lines in parsed:
            for node in tree.body:
                if isinstance(node, ast.ClassDef) and not is_enum_class(node):
                    declarations.append(self._extract_declaration(node, lines, str(path)))
        logger.debug("Found %d declarations under %s", len(declarations), root)
        return declarations

    def _index_enums(self, tree: ast.Module) -> None:
        for node in ast.walk(tree):
            if not isinstance(node, ast.ClassDef) or not is_enum_class(node):
                continue
            docs = _attribute_docstrings(node.body)
            values: list[EnumValue] = []
            for item in node.body:
                name = _assigned_name(item)
                if name and not name.startswith("_"):
                    values.append(EnumValue(name=name, description=docs.get(name, "")))
            self.enums.setdefault(node.name, EnumReference(name=node.name, values=tuple(values)))

    def _extract_declaration(self, node: ast.ClassDef, source_lines: list[str], source: str) -> RawDeclaration:
        comments: list[str] = []
        if docstring := ast.get_docstring(node):
            comments.append(docstring)
        if leading := _leading_comment(node, source_lines):
            comments.append(leading)

        annotations = {
            item.target.id: ast.unparse(item.annotation)
            for item in node.body
            if isinstance(item, ast.AnnAssign) and isinstance(item.target, ast.Name)
        }
        docs = _attribute_docstrings(node.body)

        members: list[RawMember] = []
        nested: list[RawDeclaration] = []
        for item in node.body:
            if isinstance(item, ast.ClassDef):
                if not is_enum_class(item):
                    nested.append(self._extract_declaration(item, source_lines, source))
            elif isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)):
                members.extend(self._extract_method_members(item, annotations, docs))
            elif isinstance(item, (ast.Assign, ast.AnnAssign)):
                members.extend(self._extract_assigned_members(item, docs))

        return RawDeclaration(
            name=node.name,
            base_classes=tuple(base_name(b) for b in node.bases),
            comments=tuple(comments),
            members=tuple(members),
            nested=tuple(nested),
            source=source,
        )

    def _extract_assigned_members(self, item: ast.Assign | ast.AnnAssign, docs: dict[str, str]) -> list[RawMember]:
        name = _assigned_name(item)
        if not name or not isinstance(item.value, ast.Call):
            return []
        marker = call_name(item.value)
        type_name = ast.unparse(item.annotation) if isinstance(item, ast.AnnAssign) else ""
        description = _keyword_string(item.value, "description") or docs.get(name, "")

        if marker in PROPERTY_MARKERS:
            return [self._property(name, type_name, item.value, description)]

        if marker in SUB_ELEMENT_MARKERS:
            xml_names = [a.value for a in item.value.args if isinstance(a, ast.Constant) and isinstance(a.value, str)]
            backing = DeclaredField(name=name, type_name=strip_optional(type_name), description=description)
            return [
                RawMember(
                    name=name,
                    kind=MemberKind.SUB_ELEMENT,
                    type_name=backing.type_name,
                    description=description,
                    xml_identifier=xml_name,
                    backing_fields=(backing,),
                )
                for xml_name in xml_names or [name]
            ]
        return []

    def _extract_method_members(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef,
        annotations: dict[str, str],
        docs: dict[str, str],
    ) -> list[RawMember]:
        for decorator in node.decorator_list:
            if isinstance(decorator, ast.Call) and call_name(decorator) in PROPERTY_MARKERS:
                type_name = ast.unparse(node.returns) if node.returns else ""
                description = _keyword_string(decorator, "description") or ast.get_docstring(node) or ""
                return [self._property(node.name, type_name, decorator, description)]

        if node.name not in self.initializer_method_names:
            return []
        return self._extract_initializer_fields(node, annotations, docs)

    def _extract_initializer_fields(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef,
        annotations: dict[str, str],
        docs: dict[str, str],
    ) -> list[RawMember]:
        found: list[tuple[int, int, RawMember]] = []
        for stmt in ast.walk(node):
            if isinstance(stmt, ast.Assign) and len(stmt.targets) == 1:
                target = stmt.targets[0]
            elif isinstance(stmt, ast.AnnAssign) and stmt.value is not None:
                target = stmt.target
            else:
                continue
            if not (isinstance(target, ast.Attribute) and isinstance(target.value, ast.Name) and target.value.id == "self"):
                continue
            call = stmt.value
            if not isinstance(call, ast.Call) or not isinstance(call.func, ast.Attribute):
                continue
            getter = call.func.attr
            if not getter.startswith(ATTRIBUTE_GETTER_PREFIX) or not call.args:
                continue
            xml_arg = call.args[0]
            if not (isinstance(xml_arg, ast.Constant) and isinstance(xml_arg.value, str)):
                continue

            suffix = getter.removeprefix(ATTRIBUTE_GETTER_PREFIX)
            type_name = annotations.get(target.attr) or ATTRIBUTE_TYPES.get(suffix, suffix)
            default = call.args[1] if len(call.args) > 1 else _keyword(call, "default")
            member = RawMember(
                name=target.attr,
                kind=MemberKind.FIELD,
                type_name=type_name,
                default_value=ast.unparse(default) if default is not None else "",
                description=docs.get(target.attr, ""),
                xml_identifier=xml_arg.value,
                initializer_method=node.name,
                enum=self._enum_reference(type_name),
            )
            found.append((stmt.lineno, stmt.col_offset, member))
        return [member for _, _, member in sorted(found, key=lambda entry: entry[:2])]

    def _property(self, name: str, type_name: str, marker: ast.Call, description: str) -> RawMember:
        default = marker.args[0] if marker.args else _keyword(marker, "default")
        if not description and len(marker.args) > 1:
            second = marker.args[1]
            if isinstance(second, ast.Constant) and isinstance(second.value, str):
                description = second.value
        return RawMember(
            name=name,
            kind=MemberKind.PROPERTY,
            type_name=type_name,
            default_value=ast.unparse(default) if default is not None else "",
            description=description,
            xml_identifier=_keyword_string(marker, "xml_name"),
            enum=self._enum_reference(type_name),
        )

    def _enum_reference(self, type_name: str) -> EnumReference | None:
        return self.enums.get(strip_optional(type_name))


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def call_name(node: ast.expr) -> str:
    if isinstance(node, ast.Call):
        return call_name(node.func)
    if isinstance(node, ast.Attribute):
        return node.attr
    if isinstance(node, ast.Name):
        return node.id
    return ""


def base_name(node: ast.expr) -> str:
    """``health.Affliction[T]`` -> ``Affliction``."""
    return ast.unparse(node).split("[")[0].rsplit(".", 1)[-1]


def is_enum_class(node: ast.ClassDef) -> bool:
    return any(base_name(b) in ENUM_BASES for b in node.bases)


def strip_optional(type_name: str) -> str:
    """Reduce ``Optional[X]``, ``X | None`` and quoted forward references to ``X``."""
    name = type_name.strip().strip("'\"")
    if name.startswith("Optional[") and name.endswith("]"):
        name = name[len("Optional[") : -1]
    parts = [p.strip() for p in name.split("|") if p.strip() != "None"]
    if len(parts) == 1:
        name = parts[0]
    return name.rsplit(".", 1)[-1]


def _assigned_name(item: ast.stmt) -> str:
    if isinstance(item, ast.AnnAssign) and isinstance(item.target, ast.Name):
        return item.target.id
    if isinstance(item, ast.Assign) and len(item.targets) == 1 and isinstance(item.targets[0], ast.Name):
        return item.targets[0].id
    return ""


def _attribute_docstrings(body: list[ast.stmt]) -> dict[str, str]:
    """Map attribute names to the string literal placed right after their assignment."""
    docs: dict[str, str] = {}
    for current, following in zip(body, body[1:]):
        name = _assigned_name(current)
        if (
            name
            and isinstance(following, ast.Expr)
            and isinstance(following.value, ast.Constant)
            and isinstance(following.value.value, str)
        ):
            docs[name] = " ".join(following.value.value.split())
    return docs


def _leading_comment(node: ast.ClassDef, source_lines: list[str]) -> str:
    first_line = node.decorator_list[0].lineno if node.decorator_list else node.lineno
    collected: list[str] = []
    index = first_line - 2
    while index >= 0 and source_lines[index].strip().startswith("#"):
        collected.append(source_lines[index].strip().lstrip("#").strip())
        index -= 1
    return "\n".join(reversed(collected)).strip()


def _keyword(call: ast.Call, name: str) -> ast.expr | None:
    for keyword in call.keywords:
        if keyword.arg == name:
            return keyword.value
    return None


def _keyword_string(call: ast.Call, name: str) -> str:
    value = _keyword(call, name)
    if isinstance(value, ast.Constant) and isinstance(value.value, str):
        return value.value
    return ""
