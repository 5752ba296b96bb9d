from __future__ import annotations

from dataclasses import dataclass

import pytest

from modelsync.config import ReconcileConfig
from modelsync.domain.model import record_field
from modelsync.domain.reconciliation import (
    DefaultShepherd,
    SchemaMismatchError,
    Shepherd,
    values_equal,
)
from tests.helpers.records import Item, Stub, make_host


@dataclass(eq=False, kw_only=True)
class TaggedHost:
    id: str = record_field(primary_key=True)
    name: str = ""
    etag: str = record_field(default="", tags={"compare": "skip"})

    @property
    def pk(self) -> str:
        return self.id


def test_default_shepherd_satisfies_shepherd_protocol() -> None:
    assert isinstance(DefaultShepherd(), Shepherd)


def test_equals_ignores_primary_key() -> None:
    assert DefaultShepherd().equals(make_host("1", "same"), make_host("2", "same"))


def test_equals_ignores_incremented_fields() -> None:
    stored = make_host("1", revision=7)
    desired = make_host("1", revision=0)

    assert DefaultShepherd().equals(stored, desired)


def test_equals_ignores_excluded_fields() -> None:
    stored = make_host("1", seen_at=10.0)
    desired = make_host("1", seen_at=99.0)

    assert DefaultShepherd().equals(stored, desired)


@pytest.mark.parametrize(
    ("stored_kwargs", "desired_kwargs"),
    [
        ({"name": "a"}, {"name": "b"}),
        ({"address": None}, {"address": "10.0.0.1"}),
        ({"labels": {"env": "prod"}}, {"labels": {"env": "dev"}}),
        ({"labels": {"env": "prod"}}, {"labels": {}}),
    ],
)
def test_equals_detects_differences_in_compared_fields(
    stored_kwargs: dict[str, object],
    desired_kwargs: dict[str, object],
) -> None:
    stored = make_host("1", **stored_kwargs)
    desired = make_host("1", **desired_kwargs)

    assert not DefaultShepherd().equals(stored, desired)


def test_equals_compares_nested_values_structurally() -> None:
    stored = make_host("1", labels={"env": "prod", "tier": "web"})
    desired = make_host("1", labels={"tier": "web", "env": "prod"})

    assert stored.labels is not desired.labels
    assert DefaultShepherd().equals(stored, desired)


def test_update_copies_compared_fields_and_preserves_ignored_ones() -> None:
    stored = make_host("1", "old", address="10.0.0.1", revision=4, seen_at=1.0)
    desired = make_host(
        "1", "new", address="10.0.0.2", labels={"env": "prod"}, revision=0, seen_at=2.0
    )

    DefaultShepherd().update(stored, desired)

    assert stored.name == "new"
    assert stored.address == "10.0.0.2"
    assert stored.labels == {"env": "prod"}
    assert stored.id == "1"
    assert stored.revision == 4
    assert stored.seen_at == 1.0
    assert DefaultShepherd().equals(stored, desired)


def test_update_never_overwrites_the_primary_key() -> None:
    stored = make_host("1", "old")

    DefaultShepherd().update(stored, make_host("2", "new"))

    assert stored.id == "1"
    assert stored.name == "new"


def test_custom_exclusion_tag_comes_from_config() -> None:
    config = ReconcileConfig(exclude_tag="compare", exclude_sentinel="skip")
    shepherd = DefaultShepherd(config=config)
    stored = TaggedHost(id="1", name="a", etag="x")
    desired = TaggedHost(id="1", name="a", etag="y")

    assert shepherd.equals(stored, desired)
    assert not DefaultShepherd().equals(stored, desired)


def test_equals_reports_layout_mismatch_as_unequal() -> None:
    assert DefaultShepherd().equals(make_host("1"), Stub(id="1")) is False


def test_equals_raises_on_layout_mismatch_in_strict_mode() -> None:
    shepherd = DefaultShepherd(config=ReconcileConfig(strict_schema=True))

    with pytest.raises(SchemaMismatchError):
        shepherd.equals(make_host("1"), Stub(id="1"))


def test_update_raises_on_layout_mismatch_without_copying() -> None:
    stored = make_host("1", "old")

    with pytest.raises(SchemaMismatchError) as exc:
        DefaultShepherd().update(stored, Stub(id="1"))

    assert exc.value.stored_len == 6
    assert exc.value.desired_len == 1
    assert stored.name == "old"


@pytest.mark.parametrize(
    ("left", "right"),
    [
        (1, True),
        (1, 1.0),
        ({"enabled": 1}, {"enabled": True}),
        ([1, 2], (1, 2)),
        ({"nested": [0]}, {"nested": [False]}),
    ],
)
def test_values_equal_distinguishes_value_types(left: object, right: object) -> None:
    assert not values_equal(left, right)


def test_values_equal_accepts_same_typed_structures() -> None:
    assert values_equal({"a": [1, (2, "x")], "b": None}, {"b": None, "a": [1, (2, "x")]})


def test_equals_detects_type_only_change_in_nested_labels() -> None:
    stored = make_host("1", labels={"replicas": 1})  # pyright: ignore[reportArgumentType]
    desired = make_host("1", labels={"replicas": True})  # pyright: ignore[reportArgumentType]

    assert not DefaultShepherd().equals(stored, desired)


def test_default_shepherd_handles_pydantic_records() -> None:
    stored = Item(id="1", version=5, title="old", fetched_at=1.0)
    desired = Item(id="1", title="new", attributes={"tier": "web"}, fetched_at=2.0)
    shepherd = DefaultShepherd()

    assert not shepherd.equals(stored, desired)
    shepherd.update(stored, desired)

    assert stored.title == "new"
    assert stored.attributes == {"tier": "web"}
    assert stored.version == 5
    assert stored.fetched_at == 1.0
    assert shepherd.equals(stored, desired)
