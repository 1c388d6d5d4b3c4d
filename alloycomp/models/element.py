"""Element data models.

Defines periodic-table entries, alloy registration tuples and the per-element
fraction record owned by a Composition.
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodicElement:
    """Single periodic-table entry.

    Attributes:
        symbol: Chemical symbol (e.g. "Fe").
        name: English element name.
        atomic_number: Atomic number Z.
        molar_mass: Standard molar mass [g/mol].
    """
    symbol: str
    name: str
    atomic_number: int
    molar_mass: float


class ElementDefinition(NamedTuple):
    """Registration entry for one element of an alloy system.

    Field order follows the usual shorthand ``(symbol, interstitial,
    variable, major)``, so ``ElementDefinition("C", True, True)`` declares
    a variable interstitial element.
    """
    symbol: str
    is_interstitial: bool = False
    is_variable: bool = False
    is_major: bool = False


@dataclass
class ElementRecord:
    """Single element of a Composition: identity, flags and fractions.

    Classification flags are fixed at construction. ``x``, ``w`` and ``u``
    are derived values written only by ``alloycomp.core.fraction_engine``;
    callers change the composition through :meth:`set_x` / :meth:`set_w`.

    Attributes:
        symbol: Chemical symbol, unique within the composition.
        molar_mass: Molar mass [g/mol].
        is_major: Solvent (balance) element.
        is_interstitial: Interstitial element (substitutional otherwise).
        is_variable: Composition may change even while locked.
        is_allowed_to_vary: Setters enabled.
        is_updated: Derived fractions consistent with the last input.
        is_composition_locked: Mirror of the owning composition's lock.
        user_x: Mole fraction last supplied by the caller.
        user_w: Mass fraction last supplied by the caller.
        x: Mole (atomic) fraction.
        w: Mass (weight) fraction.
        u: Site fraction.
    """
    symbol: str
    molar_mass: float
    is_major: bool = False
    is_interstitial: bool = False
    is_variable: bool = False
    is_allowed_to_vary: bool = True
    is_updated: bool = False
    is_composition_locked: bool = False
    user_x: float = 0.0
    user_w: float = 0.0
    x: float = 0.0
    w: float = 0.0
    u: float = 0.0

    @classmethod
    def from_definition(
        cls, element: PeriodicElement, definition: ElementDefinition,
    ) -> "ElementRecord":
        """Build a record from a periodic-table entry and its flags."""
        if element.molar_mass <= 0.0:
            raise ValueError(f"Invalid molar mass for element {element.symbol!r}")
        return cls(
            symbol=element.symbol,
            molar_mass=element.molar_mass,
            is_major=definition.is_major,
            is_interstitial=definition.is_interstitial,
            is_variable=definition.is_variable,
        )

    @property
    def is_substitutional(self) -> bool:
        return not self.is_interstitial

    def set_x(self, x: float) -> bool:
        """Set the mole fraction.

        Clears any mass fraction input and the site fraction.

        Returns:
            True if the value was accepted.
        """
        if self.is_major:
            logger.error("Cannot set X(%s): major element is the balance", self.symbol)
            return False
        if not self.is_allowed_to_vary:
            logger.error("Cannot set locked X(%s) composition", self.symbol)
            return False
        self.user_x = self.x = x
        self.user_w = self.w = self.u = 0.0
        self.is_updated = False
        return True

    def set_w(self, w: float) -> bool:
        """Set the mass fraction.

        Only available while the composition is unlocked.

        Returns:
            True if the value was accepted.
        """
        if self.is_major:
            logger.error("Cannot set W(%s): major element is the balance", self.symbol)
            return False
        if not self.is_allowed_to_vary:
            logger.error("Cannot set locked W(%s) composition", self.symbol)
            return False
        if self.is_composition_locked:
            logger.error(
                "Setting mass fraction W(%s) not supported when composition is "
                "locked. Set the atomic fraction (set_x) instead",
                self.symbol,
            )
            return False
        self.user_w = self.w = w
        self.user_x = self.x = self.u = 0.0
        self.is_updated = False
        return True
