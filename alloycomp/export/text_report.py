"""Fixed-width text report of a composition.

Layout (one row per element with x > 0)::

            | At. fraction (X) | Wt. fraction (W) | Site fraction (U)
      ------+------------------+------------------+-------------------
        Fe* |            0.975 |         0.989... |          0.979...
         C  |            0.005 |         ...      |          ...
       >Cr< |             0.03 |         ...      |          ...
      Average molar mass:  55.2...

``*`` marks the major element, ``>  <`` elements that are not allowed to
vary (fixed elements of a locked composition).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from alloycomp.constants import FRACTION_SUM_TOLERANCE, REPORT_HEADER
from alloycomp.core.composition import Composition

logger = logging.getLogger(__name__)

_LEFT_MARKS = ">  "
_RIGHT_MARKS = "< *"


@dataclass
class ReportRow:
    """One element line of the report."""
    symbol: str
    x: float
    w: float
    u: float
    is_major: bool = False
    is_allowed_to_vary: bool = True


def report_rows(composition: Composition) -> list[ReportRow]:
    """Report rows for all elements of *composition*, in registration order."""
    return [
        ReportRow(
            symbol=el.symbol,
            x=el.x,
            w=el.w,
            u=el.u,
            is_major=el.is_major,
            is_allowed_to_vary=el.is_allowed_to_vary,
        )
        for el in composition
    ]


def format_row(row: ReportRow) -> str:
    pos = 2 if row.is_major else (1 if row.is_allowed_to_vary else 0)
    return (
        f"   {_LEFT_MARKS[pos]}{row.symbol:>2}{_RIGHT_MARKS[pos]}"
        f" | {row.x:16.6g} | {row.w:16.6g} | {row.u:17.6g}\n"
    )


def format_report(
    rows: Iterable[ReportRow], molar_mass_avg: float, preamble: str = "",
) -> str:
    """Render already-computed fractions as a text table.

    Args:
        rows: Element rows; rows with x <= 0 are skipped.
        molar_mass_avg: Average molar mass [g/mol].
        preamble: Text placed before the header.
    """
    parts = [preamble, REPORT_HEADER]
    parts.extend(format_row(row) for row in rows if row.x > 0)
    parts.append(f"  Average molar mass: {molar_mass_avg:8g}\n")
    return "".join(parts)


def composition_report(composition: Composition, preamble: str = "") -> str | None:
    """Update fractions of *composition* and render the report.

    Returns:
        The report text, or None if the composition has no major element.
    """
    if composition.major_element is None:
        logger.error("Cannot print composition: no major element defined")
        return None
    composition.update_fractions()
    deviation = composition.fraction_deviation()
    if deviation > FRACTION_SUM_TOLERANCE:
        logger.warning(
            "Stored fractions deviate from direct conversion by %g", deviation,
        )
    return format_report(report_rows(composition), composition.molar_mass_avg, preamble)


def log_composition(
    composition: Composition,
    level: int = logging.INFO,
    preamble: str = "",
    log: logging.Logger | None = None,
) -> None:
    """Emit the composition report through a logger at *level*."""
    text = composition_report(composition, preamble)
    if text is not None:
        (log or logger).log(level, "%s", text)
