"""Serialization utilities: Composition ↔ JSON-safe dict conversion.

The dict stores the element registrations, the last user inputs and the
lock state; derived fractions are included for reference but are always
recomputed on load.

A locked composition is restored by applying the stored inputs unlocked and
locking again, so fixed elements are re-seeded from the latest inputs.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from alloycomp.constants import COMPOSITION_SCHEMA_VERSION
from alloycomp.core.composition import Composition
from alloycomp.models.element import ElementDefinition


def _element_to_dict(el) -> dict[str, Any]:
    d = dataclasses.asdict(el)
    # Runtime flags are rebuilt by the lifecycle on load
    for key in ("is_allowed_to_vary", "is_updated", "is_composition_locked"):
        d.pop(key)
    return d


def composition_to_dict(composition: Composition) -> dict[str, Any]:
    """Serialize a Composition to a JSON-safe dict.

    Args:
        composition: The composition to serialize.

    Returns:
        Dict with schema_version embedded.
    """
    return {
        "schema_version": COMPOSITION_SCHEMA_VERSION,
        "is_locked": composition.is_composition_locked,
        "molar_mass_avg": composition.molar_mass_avg,
        "elements": [_element_to_dict(el) for el in composition],
    }


def dict_to_composition(data: dict[str, Any]) -> Composition:
    """Deserialize dict to Composition.

    Args:
        data: JSON-parsed dict (from :func:`composition_to_dict`).

    Returns:
        Reconstructed Composition with fractions updated.

    Raises:
        ValueError: If the schema version is unsupported or no elements
            are present.
    """
    version = data.get("schema_version", COMPOSITION_SCHEMA_VERSION)
    if version.split(".")[0] != COMPOSITION_SCHEMA_VERSION.split(".")[0]:
        raise ValueError(f"Unsupported composition schema version: {version!r}")

    entries = data.get("elements", [])
    if not entries:
        raise ValueError("Composition data has no elements")

    comp = Composition(
        ElementDefinition(
            symbol=e["symbol"],
            is_interstitial=e.get("is_interstitial", False),
            is_variable=e.get("is_variable", False),
            is_major=e.get("is_major", False),
        )
        for e in entries
    )

    for e in entries:
        if e.get("is_major", False):
            continue
        if e.get("user_x", 0.0) > 0:
            comp.set_x(e["symbol"], e["user_x"])
        elif e.get("user_w", 0.0) > 0:
            comp.set_w(e["symbol"], e["user_w"])

    if data.get("is_locked", False):
        comp.lock_composition()
    else:
        comp.update_fractions()
    return comp
