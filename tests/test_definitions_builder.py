"""
Unit tests for DefinitionsBuilder: traversal order, dedup, visibility and cycles.
"""
import pytest

from schema_catalog.classification.type_utils import type_identity
from schema_catalog.models.catalog import index_definitions
from schema_catalog.models.common import ParameterType
from schema_catalog.schema_gen.definitions_builder import DefinitionsBuilder, build_catalog

from catalog_fixtures import (
    AuditEntry,
    AuditTrail,
    Author,
    Blank,
    Book,
    Color,
    Holder,
    Malformed,
    NodeA,
    NodeB,
    Order,
    Plain,
    Price,
    Secret,
    Widget,
    WidgetList,
    make_widget_variant,
)


@pytest.fixture
def builder() -> DefinitionsBuilder:
    return DefinitionsBuilder()


def names(definitions) -> list[str]:
    return [d.name for d in definitions]


def test_empty_or_missing_roots_give_empty_catalog(builder: DefinitionsBuilder) -> None:
    assert builder.build(set(), []) == []
    assert builder.build(None, None) == []


def test_seed_order_is_last_in_first_out(builder: DefinitionsBuilder) -> None:
    definitions = builder.build(set(), [Price, Color])
    assert names(definitions) == [type_identity(Color), type_identity(Price)]


def test_duplicate_roots_collapse_to_one_entry(builder: DefinitionsBuilder) -> None:
    definitions = builder.build(set(), [Color, Price, Color, Color])
    assert names(definitions) == [type_identity(Price), type_identity(Color)]


def test_referenced_type_is_converted_once(builder: DefinitionsBuilder) -> None:
    # Widget is both a root and reachable from Order.lines.
    definitions = builder.build(set(), [Widget, Order])
    all_names = names(definitions)
    assert len(all_names) == len(set(all_names))
    assert all_names.count(type_identity(Widget)) == 1


def test_mutually_referencing_types_terminate(builder: DefinitionsBuilder) -> None:
    definitions = builder.build(set(), [NodeA])
    assert names(definitions) == [type_identity(NodeA), type_identity(NodeB)]

    by_name = index_definitions(definitions)
    a_partner = by_name[type_identity(NodeA)].type_schema.properties[0]
    b_partner = by_name[type_identity(NodeB)].type_schema.properties[0]
    assert a_partner.ref == type_identity(NodeB)
    assert b_partner.ref == type_identity(NodeA)


def test_cycle_through_collection_terminates(builder: DefinitionsBuilder) -> None:
    definitions = builder.build(set(), [Author, Book])
    assert sorted(names(definitions)) == sorted([type_identity(Author), type_identity(Book)])


def test_hidden_category_excludes_type_and_its_subtree(builder: DefinitionsBuilder) -> None:
    definitions = builder.build({"internal"}, [Order])
    all_names = names(definitions)
    assert type_identity(AuditTrail) not in all_names
    assert type_identity(AuditEntry) not in all_names

    order = index_definitions(definitions)[type_identity(Order)].type_schema
    titles = [p.title for p in order.properties]
    assert "cost_center" not in titles
    assert "secret" not in titles
    # The reference stays even though its target was left out.
    audit = next(p for p in order.properties if p.title == "audit")
    assert audit.ref == type_identity(AuditTrail)


def test_category_visible_when_not_hidden(builder: DefinitionsBuilder) -> None:
    all_names = names(builder.build(set(), [Order]))
    assert type_identity(AuditTrail) in all_names
    assert type_identity(AuditEntry) in all_names


def test_hidden_root_type_is_skipped(builder: DefinitionsBuilder) -> None:
    assert builder.build({"internal"}, [AuditTrail]) == []


def test_type_identity_in_hidden_tags_hides_type(builder: DefinitionsBuilder) -> None:
    definitions = builder.build({type_identity(Widget)}, [Order])
    assert type_identity(Widget) not in names(definitions)


def test_always_hidden_type_leaves_dangling_reference(builder: DefinitionsBuilder) -> None:
    definitions = builder.build(set(), [Holder])
    assert names(definitions) == [type_identity(Holder)]
    secret_prop = definitions[0].type_schema.properties[0]
    assert secret_prop.ref == type_identity(Secret)
    assert secret_prop.ref not in index_definitions(definitions)


def test_required_aggregation(builder: DefinitionsBuilder) -> None:
    widget = builder.build(set(), [Widget])[0].type_schema
    assert [p.title for p in widget.properties] == ["sku", "color", "weightKg"]
    assert widget.required == ["sku"]


def test_no_required_members_leaves_required_empty(builder: DefinitionsBuilder) -> None:
    plain = builder.build(set(), [Plain])[0].type_schema
    assert not plain.required


def test_enum_type_definition_keeps_declaration_order(builder: DefinitionsBuilder) -> None:
    color = builder.build(set(), [Color])[0].type_schema
    assert color.type_format.type == ParameterType.STRING
    assert color.type_format.format == "enum"
    assert color.enum == ["Red", "Green", "Blue"]
    assert color.properties is None


def test_array_of_objects_property_discovers_element(builder: DefinitionsBuilder) -> None:
    definitions = builder.build(set(), [Order])
    order = index_definitions(definitions)[type_identity(Order)].type_schema
    lines = next(p for p in order.properties if p.title == "lines")
    assert lines.type_format.type == ParameterType.ARRAY
    assert lines.items.ref == type_identity(Widget)
    assert type_identity(Widget) in names(definitions)


def test_collection_type_root_references_element(builder: DefinitionsBuilder) -> None:
    definitions = builder.build(set(), [WidgetList])
    widget_list = definitions[0].type_schema
    assert widget_list.type_format.type == ParameterType.ARRAY
    assert widget_list.ref == type_identity(Widget)
    assert widget_list.properties is None
    assert names(definitions) == [type_identity(WidgetList), type_identity(Widget)]


def test_generic_collection_root(builder: DefinitionsBuilder) -> None:
    definitions = builder.build(set(), [list[Price]])
    assert names(definitions) == [type_identity(list[Price]), type_identity(Price)]


def test_external_docs_only_when_non_blank(builder: DefinitionsBuilder) -> None:
    by_name = index_definitions(builder.build(set(), [Price, Blank]))
    docs = by_name[type_identity(Price)].type_schema.external_documentation
    assert docs.description == "Pricing rules"
    assert docs.url == "https://docs.example.com/pricing"
    assert by_name[type_identity(Blank)].type_schema.external_documentation is None


def test_type_description(builder: DefinitionsBuilder) -> None:
    widget = builder.build(set(), [Widget])[0].type_schema
    assert widget.description == "A thing on a shelf."


def test_builder_is_reusable_across_builds(builder: DefinitionsBuilder) -> None:
    first = builder.build(set(), [NodeA])
    second = builder.build(set(), [NodeA])
    assert names(first) == names(second)


def test_build_catalog_wrapper() -> None:
    definitions = build_catalog(["internal"], [Order])
    assert type_identity(AuditTrail) not in names(definitions)


def test_unparsable_member_does_not_abort_build(builder: DefinitionsBuilder) -> None:
    definitions = builder.build(set(), [Malformed, Widget])
    assert names(definitions) == [type_identity(Widget), type_identity(Malformed)]
    malformed = index_definitions(definitions)[type_identity(Malformed)].type_schema
    assert [p.title for p in malformed.properties] == ["good"]


def test_classes_from_the_same_factory_stay_distinct(builder: DefinitionsBuilder) -> None:
    first, second = make_widget_variant(), make_widget_variant()
    definitions = builder.build(set(), [first, second])
    assert names(definitions) == [type_identity(second), type_identity(first)]
    assert len(set(names(definitions))) == 2
