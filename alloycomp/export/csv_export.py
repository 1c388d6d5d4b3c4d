"""CSV export: per-element fraction table.

BOM UTF-8 encoding for Excel compatibility.
"""

from __future__ import annotations

import csv

from alloycomp.core.composition import Composition

_HEADERS = [
    "Element", "Molar mass (g/mol)",
    "Mole fraction (X)", "Mass fraction (W)", "Site fraction (U)",
    "Major", "Interstitial", "Variable",
]


class CsvExporter:
    """CSV file export operations."""

    def export_composition(
        self, composition: Composition, output_path: str,
    ) -> None:
        """Export all elements with their current fractions.

        Fractions are written as stored; call ``update_fractions`` first if
        inputs changed since the last update.

        Args:
            composition: Composition to export.
            output_path: Destination file path (.csv).
        """
        with open(output_path, "w", newline="", encoding="utf-8-sig") as f:
            writer = csv.writer(f)
            writer.writerow(_HEADERS)
            arrays = composition.fraction_arrays()
            for i, el in enumerate(composition):
                writer.writerow([
                    el.symbol,
                    f"{arrays['molar_mass'][i]:.6g}",
                    f"{arrays['x'][i]:.8g}",
                    f"{arrays['w'][i]:.8g}",
                    f"{arrays['u'][i]:.8g}",
                    int(el.is_major),
                    int(el.is_interstitial),
                    int(el.is_variable),
                ])
