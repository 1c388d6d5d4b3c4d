"""Stateless fraction conversions on NumPy arrays.

Closed-form mole ↔ mass conversions for a complete set of fractions (all
elements given, no balance element). The composition uses them to
cross-check the fractions produced by its update passes.

All arrays are aligned: index i refers to the same element everywhere.
Molar masses in g/mol.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray


def _as_arrays(
    fractions: ArrayLike, molar_masses: ArrayLike,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    f = np.asarray(fractions, dtype=np.float64)
    m = np.asarray(molar_masses, dtype=np.float64)
    if f.shape != m.shape:
        raise ValueError(
            f"Shape mismatch: fractions {f.shape} vs molar masses {m.shape}"
        )
    if np.any(m <= 0.0):
        raise ValueError("Molar masses must be positive")
    return f, m


def average_molar_mass(x: ArrayLike, molar_masses: ArrayLike) -> float:
    """M_avg = Σ xᵢ·Mᵢ for mole fractions summing to 1."""
    x, m = _as_arrays(x, molar_masses)
    return float(np.dot(x, m))


def mole_to_mass(x: ArrayLike, molar_masses: ArrayLike) -> NDArray[np.float64]:
    """Mole fractions → mass fractions: wᵢ = xᵢ·Mᵢ / Σ xⱼ·Mⱼ."""
    x, m = _as_arrays(x, molar_masses)
    xm = x * m
    return xm / xm.sum()


def site_fractions(
    x: ArrayLike, interstitial: ArrayLike,
) -> NDArray[np.float64]:
    """Mole fractions → site fractions on the substitutional sublattice.

    uᵢ = xᵢ / (1 − Σ x_interstitial)

    Args:
        x: Mole fractions of all elements.
        interstitial: Boolean mask, True for interstitial elements.
    """
    x = np.asarray(x, dtype=np.float64)
    mask = np.asarray(interstitial, dtype=bool)
    if x.shape != mask.shape:
        raise ValueError(f"Shape mismatch: x {x.shape} vs mask {mask.shape}")
    return x / (1.0 - x[mask].sum())
