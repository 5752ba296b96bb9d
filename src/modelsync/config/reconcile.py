"""Reconciliation defaults for the default shepherd."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_flag, optional_env_var

DEFAULT_EXCLUDE_TAG = "eq"
DEFAULT_EXCLUDE_SENTINEL = "-"


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    """Controls which fields the default shepherd compares and copies.

    A field tagged ``exclude_tag`` with the value ``exclude_sentinel`` is skipped
    alongside primary-key and storage-incremented fields. ``strict_schema`` makes
    comparison of records with differing field layouts raise instead of
    reporting them unequal.
    """

    exclude_tag: str = DEFAULT_EXCLUDE_TAG
    exclude_sentinel: str = DEFAULT_EXCLUDE_SENTINEL
    strict_schema: bool = False


def get_reconcile_config() -> ReconcileConfig:
    return ReconcileConfig(
        exclude_tag=optional_env_var("MODELSYNC_EXCLUDE_TAG") or DEFAULT_EXCLUDE_TAG,
        exclude_sentinel=(
            optional_env_var("MODELSYNC_EXCLUDE_SENTINEL") or DEFAULT_EXCLUDE_SENTINEL
        ),
        strict_schema=env_flag("MODELSYNC_STRICT_SCHEMA"),
    )
