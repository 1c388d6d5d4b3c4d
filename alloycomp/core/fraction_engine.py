"""Fraction conversion engine: mole ↔ mass ↔ site fractions.

Two update passes operate on a composition's element records in place:

* :func:`update_fractions_full` recomputes every derived fraction from the
  user inputs (``user_x`` / ``user_w``). Used while the composition is
  unlocked, and once at lock time to seed the cached partial sums.
* :func:`update_fractions_incremental` is used while the composition is
  locked. Fixed elements keep their site fractions; only the variable
  elements flagged as not updated are re-derived, reusing the partial sums
  stored in :class:`~alloycomp.models.composition.FractionCache`.

Sums run over the alloying (non-major) elements; the major element is the
balance. Site fractions are taken on the substitutional sublattice:
``u = x / (1 − Σ x_interstitial)``.
"""

from __future__ import annotations

import logging
from typing import Sequence

from alloycomp.models.composition import ElementCategories, FractionCache
from alloycomp.models.element import ElementRecord

logger = logging.getLogger(__name__)


def _select(
    records: Sequence[ElementRecord], indices: tuple[int, ...],
) -> list[ElementRecord]:
    return [records[i] for i in indices]


def update_fractions_full(
    records: Sequence[ElementRecord],
    categories: ElementCategories,
    cache: FractionCache,
) -> None:
    """Recompute all fractions from the user inputs.

    Average molar mass:

        M_avg = (M_major − Σ (M_major − M_i)·X_i) / (1 + Σ (M_major/M_i − 1)·W_i)

    where X_i / W_i are the user-supplied mole / mass fractions. The major
    element takes the balance ``1 − Σ X_i − M_avg·Σ W_i/M_i``.

    Also stores the fixed-element partial sums in *cache* for the locked
    update.

    Args:
        records: Element records in registration order.
        categories: Category views over *records*.
        cache: Aggregate values, updated in place.
    """
    major = records[categories.major]
    alloying = _select(records, categories.alloying)
    m_major = major.molar_mass

    m_avg_num = m_major
    m_avg_den = 1.0
    x_sum = 0.0
    w_sum = 0.0
    for el in alloying:
        x_sum += el.user_x
        m_avg_num -= (m_major - el.molar_mass) * el.user_x

        w_sum += el.user_w / el.molar_mass
        m_avg_den += (m_major / el.molar_mass - 1.0) * el.user_w

    m_avg = m_avg_num / m_avg_den
    cache.molar_mass_avg = m_avg

    x_major = 1.0 - x_sum - w_sum * m_avg
    major.x = x_major
    major.w = x_major * m_major / m_avg

    for el in alloying:
        conversion_factor = m_avg / el.molar_mass
        if el.user_x > 0:
            el.w = el.user_x / conversion_factor
        elif el.user_w > 0:
            el.x = el.user_w * conversion_factor

    x_sum_substitutional = 1.0
    for el in _select(records, categories.interstitial):
        x_sum_substitutional -= el.x

    major.u = major.x / x_sum_substitutional
    major.is_updated = True

    for el in _select(records, categories.variable):
        el.u = el.x / x_sum_substitutional
        el.is_updated = True

    cache.molar_mass_avg_fixed_partial = 0.0
    for el in _select(records, categories.fixed):
        el.u = el.x / x_sum_substitutional
        cache.molar_mass_avg_fixed_partial += el.u * (m_major - el.molar_mass)
        el.is_updated = True

    cache.x_sum_substitutional_fixed_partial = 1.0
    for el in _select(records, categories.fixed_interstitial):
        cache.x_sum_substitutional_fixed_partial -= el.x

    logger.debug(
        "Full fraction update: M_avg=%g, x(%s)=%g", m_avg, major.symbol, x_major,
    )


def update_fractions_incremental(
    records: Sequence[ElementRecord],
    categories: ElementCategories,
    cache: FractionCache,
) -> bool:
    """Update fractions of a locked composition.

    Site fractions of the fixed elements are held constant. Variable elements
    whose ``is_updated`` flag is cleared (by ``set_x``) are re-derived from
    their mole fraction; clean variable elements keep their site fraction.
    When a variable interstitial changed, the substitutional sublattice size
    changes too, so the mole fractions of all clean alloying elements are
    resynchronized from their site fractions. Elements changed without an
    interstitial change stay dirty and keep their user mole fraction.

    Args:
        records: Element records in registration order.
        categories: Category views over *records*.
        cache: Aggregate values seeded by :func:`update_fractions_full`.

    Returns:
        False if no variable element is dirty (nothing is recomputed),
        True otherwise.
    """
    assert cache.seeded, "locked update requires partial sums seeded at lock time"

    major = records[categories.major]
    m_major = major.molar_mass

    x_m_sum_product = 0.0
    x_sum_substitutional = cache.x_sum_substitutional_fixed_partial
    dirty_interstitial = 0
    dirty_substitutional = 0

    variable_interstitial = _select(records, categories.variable_interstitial)
    variable_substitutional = _select(records, categories.variable_substitutional)

    for el in variable_interstitial:
        if not el.is_updated:
            dirty_interstitial += 1
        x_sum_substitutional -= el.x
        x_m_sum_product += el.x * (m_major - el.molar_mass)

    # Needs the complete interstitial sum, so runs after the loop above
    for el in variable_substitutional:
        if not el.is_updated:
            x_m_sum_product += el.x * (m_major - el.molar_mass)
            dirty_substitutional += 1
        else:
            x_m_sum_product += x_sum_substitutional * el.u * (m_major - el.molar_mass)

    if dirty_interstitial + dirty_substitutional == 0:
        return False

    m_avg = (
        m_major
        - x_m_sum_product
        - x_sum_substitutional * cache.molar_mass_avg_fixed_partial
    )
    cache.molar_mass_avg = m_avg

    if dirty_interstitial > 0:
        for el in variable_interstitial:
            if not el.is_updated:
                el.u = el.x / x_sum_substitutional

    for el in variable_substitutional:
        if not el.is_updated:
            el.u = el.x / x_sum_substitutional

    x_sum_alloying = 0.0
    for el in _select(records, categories.alloying):
        # Dirty elements are only marked clean by a pass with an interstitial change
        if dirty_interstitial > 0:
            if el.is_updated:
                el.x = el.u * x_sum_substitutional
            else:
                el.is_updated = True
        el.w = el.x * el.molar_mass / m_avg
        x_sum_alloying += el.x

    major.x = 1.0 - x_sum_alloying
    major.w = major.x * m_major / m_avg
    major.u = major.x / x_sum_substitutional

    logger.debug(
        "Locked fraction update: %d interstitial, %d substitutional changed, "
        "M_avg=%g",
        dirty_interstitial, dirty_substitutional, m_avg,
    )
    return True
