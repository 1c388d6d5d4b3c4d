"""Alloy library service: loads alloy definitions from JSON files.

Loads every ``*.json`` file from ``alloycomp/data/alloys/`` and builds
compositions from them, applying the nominal fractions stored in the file.

File format::

    {
      "alloy_id": "fe_c_mn",
      "name": "Fe-C-Mn ternary",
      "elements": [
        {"symbol": "Fe", "is_major": true},
        {"symbol": "C", "is_interstitial": true, "is_variable": true}
      ],
      "mole_fractions": {"C": 0.005}
    }
"""

import json
import logging
import pathlib

from alloycomp.core.composition import Composition
from alloycomp.models.alloy import AlloyDefinition
from alloycomp.models.element import ElementDefinition

logger = logging.getLogger(__name__)


def parse_alloy_definition(raw: dict, default_id: str = "") -> AlloyDefinition:
    """Build an AlloyDefinition from a JSON-parsed dict.

    Raises:
        ValueError: If the element list is missing or an entry has no symbol.
    """
    entries = raw.get("elements")
    if not entries:
        raise ValueError(f"Alloy {raw.get('alloy_id', default_id)!r} has no elements")

    elements: list[ElementDefinition] = []
    for entry in entries:
        if "symbol" not in entry:
            raise ValueError(f"Element entry without symbol: {entry!r}")
        elements.append(
            ElementDefinition(
                symbol=entry["symbol"],
                is_interstitial=bool(entry.get("is_interstitial", False)),
                is_variable=bool(entry.get("is_variable", False)),
                is_major=bool(entry.get("is_major", False)),
            )
        )

    alloy_id = raw.get("alloy_id", default_id)
    return AlloyDefinition(
        alloy_id=alloy_id,
        name=raw.get("name", alloy_id),
        elements=elements,
        mole_fractions={k: float(v) for k, v in raw.get("mole_fractions", {}).items()},
        weight_fractions={k: float(v) for k, v in raw.get("weight_fractions", {}).items()},
    )


class AlloyLibrary:
    """Registry of alloy definitions.

    Args:
        data_dir: Directory with alloy JSON files. If *None*, the
                  ``data/alloys`` directory shipped with the package is used.
    """

    def __init__(self, data_dir: str | pathlib.Path | None = None) -> None:
        if data_dir is None:
            data_dir = pathlib.Path(__file__).resolve().parents[1] / "data" / "alloys"
        self._data_dir = pathlib.Path(data_dir)
        self._alloys: dict[str, AlloyDefinition] = {}
        self._load_alloys()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_all_alloys(self) -> list[AlloyDefinition]:
        """Return all loaded alloy definitions."""
        return list(self._alloys.values())

    def get_alloy(self, alloy_id: str) -> AlloyDefinition:
        """Return a single alloy definition by ID.

        Raises:
            KeyError: If *alloy_id* is not found.
        """
        try:
            return self._alloys[alloy_id]
        except KeyError:
            raise KeyError(f"Unknown alloy: {alloy_id!r}")

    def register(self, alloy: AlloyDefinition) -> None:
        """Add or replace an alloy definition."""
        self._alloys[alloy.alloy_id] = alloy

    def create_composition(self, alloy_id: str, apply_nominal: bool = True) -> Composition:
        """Build a composition for *alloy_id*.

        Args:
            alloy_id: Alloy identifier.
            apply_nominal: Set the nominal fractions from the definition and
                run a fraction update.

        Returns:
            New, unlocked Composition.
        """
        alloy = self.get_alloy(alloy_id)
        comp = Composition(alloy.elements)
        if apply_nominal:
            for symbol, w in alloy.weight_fractions.items():
                comp.set_w(symbol, w)
            for symbol, x in alloy.mole_fractions.items():
                comp.set_x(symbol, x)
            comp.update_fractions()
        return comp

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _load_alloys(self) -> None:
        """Load all alloy JSON files into the registry."""
        if not self._data_dir.is_dir():
            logger.warning("Alloy directory not found: %s", self._data_dir)
            return
        for filepath in sorted(self._data_dir.glob("*.json")):
            try:
                self._load_single(filepath)
            except Exception:
                logger.exception("Failed to load alloy from %s", filepath)

    def _load_single(self, filepath: pathlib.Path) -> None:
        """Parse a single alloy JSON file."""
        with open(filepath, encoding="utf-8") as f:
            raw = json.load(f)
        alloy = parse_alloy_definition(raw, default_id=filepath.stem)
        self._alloys[alloy.alloy_id] = alloy
