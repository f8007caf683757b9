from hypothesis import given
from hypothesis import strategies as st

from content_autodoc.declarations.models import MemberKind, RawMember
from content_autodoc.model import ParsingOptions, TypeModel, TypeModelRegistry, create_model
from tests.support.helpers import declaration, enum_ref, prop, sub_element, xml_field

OPTIONS = ParsingOptions(initializer_method_names=frozenset({"LoadEffects"}))

_names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8)


# ---------------------------------------------------------------------------
# create / merge
# ---------------------------------------------------------------------------


def test_create_model_uses_declaration_name_as_key():
    model = create_model(declaration("Bleeding", prop("Strength")), OPTIONS)
    assert model.key == "Bleeding"
    assert [p.name for p in model.serializable_properties] == ["Strength"]


def test_merge_from_second_root_appends_properties_in_order():
    shared = declaration("Bleeding", prop("Strength", default="0", description="desc"))
    client = declaration("Bleeding", prop("BleedingReduction", default="1"))
    model = TypeModel.create(shared, OPTIONS)
    model.merge(client)
    assert [(p.name, p.default_value) for p in model.serializable_properties] == [
        ("Strength", "0"),
        ("BleedingReduction", "1"),
    ]


def test_merge_same_declaration_twice_duplicates_contributions():
    decl = declaration("Bleeding", prop("Strength"), comments=("Drains blood.",))
    model = TypeModel.create(decl, OPTIONS)
    model.merge(decl)
    assert [p.name for p in model.serializable_properties] == ["Strength", "Strength"]
    assert model.comments == ["Drains blood.", "Drains blood."]


def test_base_classes_accumulate_without_duplicates():
    model = TypeModel.create(declaration("Bleeding", bases=("Affliction",)), OPTIONS)
    model.merge(declaration("Bleeding", bases=("Affliction", "IDisposable")))
    assert model.base_classes == ["Affliction", "IDisposable"]


def test_property_uses_xml_identifier_when_present():
    member = RawMember(name="strength", kind=MemberKind.PROPERTY, type_name="float", xml_identifier="Strength")
    model = TypeModel.create(declaration("Bleeding", member), OPTIONS)
    assert model.serializable_properties[0].name == "Strength"


# ---------------------------------------------------------------------------
# classification
# ---------------------------------------------------------------------------


def test_field_from_initializer_method_is_xml_assigned():
    model = TypeModel.create(declaration("Bleeding", xml_field("Threshold", default="0.5", description="When to start")), OPTIONS)
    assert len(model.xml_assigned_fields) == 1
    assigned = model.xml_assigned_fields[0]
    assert assigned.xml_identifier == "Threshold"
    assert assigned.declared_field.type_name == "float"
    assert assigned.declared_field.description == "When to start"
    assert assigned.default_display == "0.5"


def test_field_from_other_method_is_ignored():
    model = TypeModel.create(declaration("Bleeding", xml_field("Threshold", method="Update")), OPTIONS)
    assert model.xml_assigned_fields == []
    assert model.serializable_properties == []


def test_sub_element_with_backing_field_is_recorded():
    model = TypeModel.create(declaration("Bleeding", sub_element("Sprite", "Sprite", "Icon")), OPTIONS)
    element = model.supported_sub_elements[0]
    assert element.xml_name == "Sprite"
    assert element.target_field.type_name == "Sprite"
    assert element.is_resolvable is True


def test_sub_element_without_backing_field_is_skipped():
    member = RawMember(name="icon", kind=MemberKind.SUB_ELEMENT, xml_identifier="Icon")
    model = TypeModel.create(declaration("Bleeding", member), OPTIONS)
    assert model.supported_sub_elements == []


def test_sub_element_without_type_is_kept_and_flagged():
    model = TypeModel.create(declaration("Bleeding", sub_element("Effect", ""), sub_element("Sprite", "Sprite")), OPTIONS)
    assert len(model.supported_sub_elements) == 2
    assert [e.xml_name for e in model.unresolved_sub_elements] == ["Effect"]


def test_enum_values_first_occurrence_wins():
    first = enum_ref("DamageType", "Burn", "Blunt")
    second = enum_ref("DamageType", "Other")
    model = TypeModel.create(declaration("Burn", prop("Kind", "DamageType", enum=first)), OPTIONS)
    model.merge(declaration("Burn", prop("Secondary", "DamageType", enum=second)))
    assert [v.name for v in model.enums["DamageType"]] == ["Burn", "Blunt"]


def test_enums_keep_encounter_order():
    model = TypeModel.create(
        declaration("Burn", prop("B", "Beta", enum=enum_ref("Beta", "x")), prop("A", "Alpha", enum=enum_ref("Alpha", "y"))),
        OPTIONS,
    )
    assert list(model.enums) == ["Beta", "Alpha"]


# ---------------------------------------------------------------------------
# nested declarations
# ---------------------------------------------------------------------------


def test_nested_declarations_become_sub_classes():
    inner = declaration("Periodic", prop("Interval"))
    model = TypeModel.create(declaration("Bleeding", nested=(inner,)), OPTIONS)
    assert list(model.sub_classes) == ["Periodic"]
    assert model.sub_classes["Periodic"].options is OPTIONS
    assert model.sub_classes["Periodic"].serializable_properties[0].name == "Interval"


def test_existing_sub_class_is_merged_not_replaced():
    model = TypeModel.create(declaration("Bleeding", nested=(declaration("Periodic", prop("Interval")),)), OPTIONS)
    model.merge(declaration("Bleeding", nested=(declaration("Periodic", prop("Duration")),)))
    assert [p.name for p in model.sub_classes["Periodic"].serializable_properties] == ["Interval", "Duration"]


def test_nested_sub_classes_recurse():
    leaf = declaration("Leaf", prop("Depth"))
    middle = declaration("Middle", nested=(leaf,))
    model = TypeModel.create(declaration("Root", nested=(middle,)), OPTIONS)
    assert model.sub_classes["Middle"].sub_classes["Leaf"].serializable_properties[0].name == "Depth"


# ---------------------------------------------------------------------------
# registry
# ---------------------------------------------------------------------------


def test_registry_routes_same_name_into_one_model():
    registry = TypeModelRegistry(OPTIONS)
    registry.add(declaration("Bleeding", prop("Strength")))
    registry.add(declaration("Bleeding", prop("BleedingReduction")))
    assert registry.keys() == ["Bleeding"]
    assert len(registry.get("Bleeding").serializable_properties) == 2


def test_registry_keys_are_case_sensitive():
    registry = TypeModelRegistry(OPTIONS)
    registry.add(declaration("Bleeding", prop("Strength")))
    registry.add(declaration("bleeding", prop("Other")))
    assert registry.keys() == ["Bleeding", "bleeding"]
    assert [p.name for p in registry.get("Bleeding").serializable_properties] == ["Strength"]
    assert "BLEEDING" not in registry


# ---------------------------------------------------------------------------
# properties
# ---------------------------------------------------------------------------


@given(st.lists(st.lists(_names, max_size=5), min_size=1, max_size=5))
def test_merge_concatenates_members_in_call_order(member_names_per_declaration):
    declarations = [declaration("Bleeding", *(prop(name) for name in names)) for names in member_names_per_declaration]
    model = TypeModel.create(declarations[0], OPTIONS)
    for decl in declarations[1:]:
        model.merge(decl)
    expected = [name for names in member_names_per_declaration for name in names]
    assert [p.name for p in model.serializable_properties] == expected


@given(_names, st.integers(min_value=2, max_value=6))
def test_same_property_name_from_several_roots_is_duplicated(name, roots):
    model = TypeModel.create(declaration("Bleeding", prop(name)), OPTIONS)
    for _ in range(roots - 1):
        model.merge(declaration("Bleeding", prop(name)))
    assert [p.name for p in model.serializable_properties] == [name] * roots
