from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import pytest

from modelsync.domain.model import (
    DataclassIntrospector,
    ModelIntrospector,
    RecordIntrospector,
    record_field,
)
from tests.helpers.records import Host, Item, make_host


def test_dataclass_introspector_lists_fields_in_declaration_order() -> None:
    host = make_host("1")

    fields = DataclassIntrospector().fields(host)

    assert [field.name for field in fields] == [
        "id",
        "revision",
        "name",
        "address",
        "labels",
        "seen_at",
    ]


def test_dataclass_introspector_reads_reconciliation_metadata() -> None:
    fields = {field.name: field for field in DataclassIntrospector().fields(make_host("1"))}

    assert fields["id"].primary_key is True
    assert fields["revision"].incremented is True
    assert fields["seen_at"].tag("eq") == "-"
    assert fields["name"].primary_key is False
    assert fields["name"].incremented is False
    assert fields["name"].tag("eq") is None


def test_field_value_reads_and_writes_the_owning_record() -> None:
    host = make_host("1", "before")
    name_field = next(
        field for field in DataclassIntrospector().fields(host) if field.name == "name"
    )

    assert name_field.value == "before"
    name_field.value = "after"

    assert host.name == "after"


def test_dataclass_introspector_rejects_non_dataclass_values() -> None:
    introspector = DataclassIntrospector()

    with pytest.raises(TypeError):
        introspector.fields(object())
    with pytest.raises(TypeError):
        introspector.fields(Host)


def test_record_field_keeps_caller_metadata() -> None:
    @dataclass
    class Example:
        value: int = record_field(default=1, tags={"eq": "-"}, metadata={"doc": "kept"})

    (field,) = dataclasses.fields(Example)

    assert field.metadata["doc"] == "kept"
    assert Example().value == 1


def test_model_introspector_reads_json_schema_extra_metadata() -> None:
    item = Item(id="1", title="before")

    fields = {field.name: field for field in ModelIntrospector().fields(item)}

    assert list(fields) == ["id", "version", "title", "attributes", "fetched_at"]
    assert fields["id"].primary_key is True
    assert fields["version"].incremented is True
    assert fields["fetched_at"].tag("eq") == "-"
    assert fields["title"].tag("eq") is None
    fields["title"].value = "after"
    assert item.title == "after"


def test_model_introspector_rejects_other_values() -> None:
    with pytest.raises(TypeError):
        ModelIntrospector().fields(make_host("1"))
    with pytest.raises(TypeError):
        ModelIntrospector().fields(Item)


def test_record_introspector_dispatches_on_record_kind() -> None:
    introspector = RecordIntrospector()

    assert [field.name for field in introspector.fields(make_host("1"))][0] == "id"
    assert [field.name for field in introspector.fields(Item(id="1"))][-1] == "fetched_at"
    with pytest.raises(TypeError):
        introspector.fields(object())
    with pytest.raises(TypeError):
        introspector.fields(Host)
