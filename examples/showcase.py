"""Build the Bleeding page from two partial declarations and print it.

Run with:
    python examples/showcase.py
"""

from content_autodoc import DocumentAssembler, MemberKind, ParsingOptions, RawDeclaration, RawMember, TypeModelRegistry
from content_autodoc.declarations import DeclaredField, EnumReference, EnumValue


def main() -> None:
    damage_type = EnumReference(
        name="BleedingKind",
        values=(EnumValue(name="Internal", description="No visible wound."), EnumValue(name="External")),
    )
    shared = RawDeclaration(
        name="Bleeding",
        base_classes=("Affliction",),
        comments=("Drains blood until treated.",),
        members=(
            RawMember(name="Strength", type_name="float", default_value="0", description="desc"),
            RawMember(name="Kind", type_name="BleedingKind", default_value="BleedingKind.External", enum=damage_type),
            RawMember(
                name="icon",
                kind=MemberKind.SUB_ELEMENT,
                xml_identifier="Icon",
                backing_fields=(DeclaredField(name="icon", type_name="Sprite", description="Shown in the health UI."),),
            ),
        ),
    )
    client = RawDeclaration(
        name="Bleeding",
        members=(RawMember(name="BleedingReduction", type_name="float", default_value="1f"),),
    )
    affliction = RawDeclaration(name="Affliction", members=(RawMember(name="Identifier", type_name="Identifier"),))

    registry = TypeModelRegistry(ParsingOptions(initializer_method_names=frozenset({"LoadEffects"})))
    registry.add_all([affliction, shared, client])

    assembler = DocumentAssembler()
    page = assembler.assemble("Bleeding", registry.get("Bleeding"), registry.keys())
    print(page.to_markdown())


if __name__ == "__main__":
    main()
