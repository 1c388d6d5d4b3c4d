"""Composition-level data models.

Category views over a composition's element list and the aggregate values
cached between fraction updates.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ElementCategories:
    """Index views into a composition's element list.

    Built by :func:`alloycomp.core.classifier.classify`. Indices refer to
    registration order, so the views stay valid for any copy of the
    composition with the same definitions.

    Attributes:
        major: Index of the major (solvent) element.
        variable_interstitial: Interstitial elements allowed to vary when locked.
        fixed_interstitial: Interstitial elements with fixed site fraction.
        variable_substitutional: Substitutional elements allowed to vary when locked.
        fixed_substitutional: Substitutional elements with fixed site fraction.
    """
    major: int
    variable_interstitial: tuple[int, ...] = ()
    fixed_interstitial: tuple[int, ...] = ()
    variable_substitutional: tuple[int, ...] = ()
    fixed_substitutional: tuple[int, ...] = ()

    @property
    def interstitial(self) -> tuple[int, ...]:
        return self.variable_interstitial + self.fixed_interstitial

    @property
    def substitutional(self) -> tuple[int, ...]:
        return self.variable_substitutional + self.fixed_substitutional

    @property
    def variable(self) -> tuple[int, ...]:
        return self.variable_interstitial + self.variable_substitutional

    @property
    def fixed(self) -> tuple[int, ...]:
        return self.fixed_interstitial + self.fixed_substitutional

    @property
    def alloying(self) -> tuple[int, ...]:
        """All non-major elements, interstitials first."""
        return self.interstitial + self.substitutional


@dataclass
class FractionCache:
    """Aggregate values produced by the fraction update passes.

    ``molar_mass_avg_fixed_partial`` and ``x_sum_substitutional_fixed_partial``
    hold the contribution of the fixed elements. They are only valid for the
    locked update while ``seeded`` is True, i.e. between a lock and the next
    unlock.

    Attributes:
        molar_mass_avg: Average molar mass of the alloy [g/mol].
        molar_mass_avg_fixed_partial: Σ u·(M_major − M) over fixed elements.
        x_sum_substitutional_fixed_partial: 1 − Σ x over fixed interstitials.
        seeded: Partial sums come from the full pass run at lock time.
    """
    molar_mass_avg: float = 0.0
    molar_mass_avg_fixed_partial: float = 0.0
    x_sum_substitutional_fixed_partial: float = 0.0
    seeded: bool = False
