"""Element classification: major / interstitial / substitutional, fixed / variable."""

from __future__ import annotations

import logging
from typing import Sequence

from alloycomp.models.composition import ElementCategories
from alloycomp.models.element import ElementRecord

logger = logging.getLogger(__name__)


def classify(records: Sequence[ElementRecord]) -> ElementCategories | None:
    """Partition *records* into category index views.

    Exactly one record must be flagged as major. Non-major records are
    bucketed by interstitial/substitutional and variable/fixed, keeping
    registration order inside each bucket.

    Args:
        records: Element records in registration order.

    Returns:
        The category views, or None if zero or several major elements are
        defined (the error is logged).
    """
    major: int | None = None
    variable_interstitial: list[int] = []
    fixed_interstitial: list[int] = []
    variable_substitutional: list[int] = []
    fixed_substitutional: list[int] = []

    for i, el in enumerate(records):
        if el.is_major:
            if major is not None:
                logger.error(
                    "More than one major element defined (%s and %s)",
                    records[major].symbol, el.symbol,
                )
                return None
            major = i
        elif el.is_interstitial:
            if el.is_variable:
                variable_interstitial.append(i)
            else:
                fixed_interstitial.append(i)
        else:
            if el.is_variable:
                variable_substitutional.append(i)
            else:
                fixed_substitutional.append(i)

    if major is None:
        logger.error("No major element defined")
        return None

    return ElementCategories(
        major=major,
        variable_interstitial=tuple(variable_interstitial),
        fixed_interstitial=tuple(fixed_interstitial),
        variable_substitutional=tuple(variable_substitutional),
        fixed_substitutional=tuple(fixed_substitutional),
    )
