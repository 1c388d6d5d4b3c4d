"""Composition: alloy fraction bookkeeping with lock/unlock lifecycle.

A composition owns a fixed list of element records, classifies them once,
and converts between mole, mass and site fractions on demand.

Usage::

    comp = Composition([
        ElementDefinition("Fe", is_major=True),
        ElementDefinition("C", is_interstitial=True, is_variable=True),
        ElementDefinition("Mn", is_variable=True),
    ])
    comp.set_x("C", 0.005)
    comp.set_x("Mn", 0.02)
    comp.lock_composition()
    comp.get_x("Fe")   # 0.975
"""

from __future__ import annotations

import copy
import logging
from typing import Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from alloycomp.core.classifier import classify
from alloycomp.core.conversions import (
    average_molar_mass,
    mole_to_mass,
    site_fractions,
)
from alloycomp.core.fraction_engine import (
    update_fractions_full,
    update_fractions_incremental,
)
from alloycomp.core.periodic_table import get_element, normalize_symbol
from alloycomp.models.composition import ElementCategories, FractionCache
from alloycomp.models.element import ElementDefinition, ElementRecord

logger = logging.getLogger(__name__)


class Composition:
    """Multi-element alloy composition.

    Elements are registered once at construction; membership never changes.
    While unlocked, every update recomputes all fractions from the user
    inputs. While locked, fixed (non-variable) elements keep their site
    fractions and only variable elements may be changed, in mole fraction.

    Args:
        definitions: Element registrations, exactly one flagged as major.

    Raises:
        KeyError: If a symbol is not in the periodic table.
        ValueError: If a symbol is registered twice.
    """

    def __init__(self, definitions: Iterable[ElementDefinition]) -> None:
        records: list[ElementRecord] = []
        seen: set[str] = set()
        for definition in definitions:
            definition = ElementDefinition(*definition)
            element = get_element(definition.symbol)
            if element.symbol in seen:
                raise ValueError(f"Element {element.symbol!r} defined more than once")
            seen.add(element.symbol)
            records.append(ElementRecord.from_definition(element, definition))

        self._elements: list[ElementRecord] = records
        self._categories: ElementCategories | None = None
        self._is_classified = False
        self._cache = FractionCache()
        self._is_locked = False
        self._build_categories()

    @classmethod
    def _from_records(
        cls, records: list[ElementRecord], cache: FractionCache, is_locked: bool,
    ) -> Composition:
        comp = cls.__new__(cls)
        comp._elements = records
        comp._categories = None
        comp._is_classified = False
        comp._cache = cache
        comp._is_locked = is_locked
        comp._build_categories()
        return comp

    def _build_categories(self) -> ElementCategories | None:
        """Classify elements once; later calls return the memoized views.

        A failed classification is memoized too (None), so its error is
        logged only once.
        """
        if not self._is_classified:
            self._categories = classify(self._elements)
            self._is_classified = True
        return self._categories

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def element(self, symbol: str) -> ElementRecord:
        """Return the record of *symbol* (case-insensitive).

        Raises:
            KeyError: If *symbol* is not defined in this composition.
        """
        name = normalize_symbol(symbol)
        for el in self._elements:
            if el.symbol == name:
                return el
        raise KeyError(f"Element {name!r} is not defined")

    def __getitem__(self, symbol: str) -> ElementRecord:
        return self.element(symbol)

    def __contains__(self, symbol: object) -> bool:
        if not isinstance(symbol, str):
            return False
        name = normalize_symbol(symbol)
        return any(el.symbol == name for el in self._elements)

    def __iter__(self) -> Iterator[ElementRecord]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        symbols = ", ".join(el.symbol for el in self._elements)
        state = "locked" if self._is_locked else "unlocked"
        return f"Composition([{symbols}], {state})"

    @property
    def elements(self) -> list[ElementRecord]:
        """All records in registration order."""
        return list(self._elements)

    @property
    def symbols(self) -> list[str]:
        return [el.symbol for el in self._elements]

    @property
    def categories(self) -> ElementCategories | None:
        return self._build_categories()

    @property
    def major_element(self) -> ElementRecord | None:
        categories = self._build_categories()
        if categories is None:
            return None
        return self._elements[categories.major]

    @property
    def major_element_symbol(self) -> str | None:
        major = self.major_element
        return major.symbol if major is not None else None

    @property
    def molar_mass_avg(self) -> float:
        """Average molar mass [g/mol] from the last update (0.0 before any)."""
        return self._cache.molar_mass_avg

    @property
    def cache(self) -> FractionCache:
        return self._cache

    @property
    def is_composition_locked(self) -> bool:
        return self._is_locked

    # ------------------------------------------------------------------
    # Setters / getters
    # ------------------------------------------------------------------

    def set_x(self, symbol: str, x: float) -> bool:
        """Set the mole fraction of *symbol*. Returns False if rejected."""
        return self.element(symbol).set_x(x)

    def set_w(self, symbol: str, w: float) -> bool:
        """Set the mass fraction of *symbol* (unlocked only). Returns False if rejected."""
        return self.element(symbol).set_w(w)

    def get_x(self, symbol: str) -> float:
        return self.element(symbol).x

    def get_w(self, symbol: str) -> float:
        return self.element(symbol).w

    def get_u(self, symbol: str) -> float:
        return self.element(symbol).u

    def get_molar_mass(self, symbol: str) -> float:
        return self.element(symbol).molar_mass

    def fraction_arrays(self) -> dict[str, NDArray[np.float64]]:
        """Current fractions as arrays aligned with :attr:`symbols`.

        Returns:
            Dict with keys ``"x"``, ``"w"``, ``"u"`` and ``"molar_mass"``.
        """
        return {
            "x": np.array([el.x for el in self._elements], dtype=np.float64),
            "w": np.array([el.w for el in self._elements], dtype=np.float64),
            "u": np.array([el.u for el in self._elements], dtype=np.float64),
            "molar_mass": np.array(
                [el.molar_mass for el in self._elements], dtype=np.float64,
            ),
        }

    def fraction_deviation(self) -> float:
        """Largest difference between the stored fractions and a direct
        conversion of the current mole fractions.

        W and U are compared absolutely, the average molar mass relative to
        its recomputed value. Zero up to rounding after an unlocked update.

        Raises:
            ValueError: If fractions have not been updated yet.
        """
        if self._cache.molar_mass_avg <= 0.0:
            raise ValueError("Fractions have not been updated")
        arrays = self.fraction_arrays()
        x, m = arrays["x"], arrays["molar_mass"]
        interstitial = [el.is_interstitial for el in self._elements]

        m_avg = average_molar_mass(x, m)
        return max(
            abs(self._cache.molar_mass_avg - m_avg) / m_avg,
            float(np.max(np.abs(arrays["w"] - mole_to_mass(x, m)))),
            float(np.max(np.abs(arrays["u"] - site_fractions(x, interstitial)))),
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def lock_composition(self) -> bool:
        """Lock the composition.

        Runs a full update, then keeps the site fractions of fixed elements
        constant: fixed elements reject further input and variable elements
        accept only mole fractions.

        Returns:
            False if no major element is resolved (composition stays unlocked).
        """
        categories = self._build_categories()
        if categories is None:
            logger.error("Cannot lock composition: no major element defined")
            return False

        update_fractions_full(self._elements, categories, self._cache)

        for i in categories.fixed:
            self._elements[i].is_allowed_to_vary = False
        for i in categories.alloying:
            self._elements[i].is_composition_locked = True

        self._cache.seeded = True
        self._is_locked = True
        return True

    def unlock_composition(self) -> None:
        """Unlock the composition (see :meth:`lock_composition`)."""
        categories = self._build_categories()
        if categories is not None:
            for i in categories.alloying:
                el = self._elements[i]
                el.is_allowed_to_vary = True
                el.is_composition_locked = False

        self._cache.seeded = False
        self._is_locked = False

    def update_fractions(self) -> bool:
        """Bring derived fractions in line with the latest inputs.

        Returns:
            False if no major element is resolved, or if the composition is
            locked and nothing changed since the last update.
        """
        categories = self._build_categories()
        if categories is None:
            logger.error("Cannot update fractions: no major element defined")
            return False

        if not self._is_locked:
            update_fractions_full(self._elements, categories, self._cache)
            return True
        return update_fractions_incremental(self._elements, categories, self._cache)

    # ------------------------------------------------------------------
    # Copy
    # ------------------------------------------------------------------

    def copy(self) -> Composition:
        """Independent copy with its own records and rebuilt category views."""
        return Composition._from_records(
            [copy.copy(el) for el in self._elements],
            copy.copy(self._cache),
            self._is_locked,
        )

    def __copy__(self) -> Composition:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Composition:
        return self.copy()


def build_composition(
    definitions: Iterable[ElementDefinition | tuple],
) -> Composition:
    """Build a composition from ``(symbol, interstitial, variable, major)`` tuples."""
    return Composition(definitions)
