"""PDF report generator: ReportLab composition summary.

Single A4 document with a title block, the element table (X, W, U, role)
and the average molar mass.
"""

from __future__ import annotations

from datetime import datetime

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from alloycomp.constants import APP_NAME, APP_VERSION
from alloycomp.core.composition import Composition
from alloycomp.export.text_report import report_rows

_ACCENT = colors.HexColor("#3B82F6")
_HEADER_BG = colors.HexColor("#334155")
_BORDER = colors.HexColor("#94A3B8")


def _role(is_major: bool, is_allowed_to_vary: bool) -> str:
    if is_major:
        return "Major"
    return "Variable" if is_allowed_to_vary else "Fixed"


class PdfReportExporter:
    """Composition PDF report generator."""

    def __init__(self):
        self._styles = getSampleStyleSheet()
        self._styles.add(ParagraphStyle(
            name="ReportTitle",
            fontSize=20, leading=26,
            textColor=_ACCENT, spaceAfter=10,
        ))
        self._styles.add(ParagraphStyle(
            name="ReportSubtitle",
            fontSize=11, leading=15,
            textColor=colors.gray, spaceAfter=4,
        ))

    def generate_report(
        self,
        composition: Composition,
        output_path: str = "composition.pdf",
        title: str = "Alloy composition",
    ) -> None:
        """Update fractions and save the PDF report.

        Args:
            composition: Composition to report.
            output_path: File path for output PDF.
            title: Report title.

        Raises:
            ValueError: If the composition has no major element.
        """
        if composition.major_element is None:
            raise ValueError("Cannot report composition without a major element")
        composition.update_fractions()

        doc = SimpleDocTemplate(
            output_path,
            pagesize=A4,
            leftMargin=20 * mm,
            rightMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
        )
        state = "locked" if composition.is_composition_locked else "unlocked"
        story: list = [
            Paragraph(title, self._styles["ReportTitle"]),
            Paragraph(f"{APP_NAME} v{APP_VERSION}", self._styles["ReportSubtitle"]),
            Paragraph(
                f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
                self._styles["ReportSubtitle"],
            ),
            Paragraph(
                f"Major element: {composition.major_element_symbol} ({state})",
                self._styles["ReportSubtitle"],
            ),
            Spacer(1, 8 * mm),
            self._build_table(composition),
            Spacer(1, 6 * mm),
            Paragraph(
                f"Average molar mass: {composition.molar_mass_avg:.6g} g/mol",
                self._styles["BodyText"],
            ),
            Paragraph(
                f"Max. deviation from direct conversion: "
                f"{composition.fraction_deviation():.2g}",
                self._styles["BodyText"],
            ),
        ]
        doc.build(story)

    def _build_table(self, composition: Composition) -> Table:
        data = [["Element", "X", "W", "U", "Role"]]
        for row in report_rows(composition):
            if row.x <= 0:
                continue
            data.append([
                row.symbol,
                f"{row.x:.6g}",
                f"{row.w:.6g}",
                f"{row.u:.6g}",
                _role(row.is_major, row.is_allowed_to_vary),
            ])
        table = Table(data, colWidths=[25 * mm, 35 * mm, 35 * mm, 35 * mm, 30 * mm])
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), _HEADER_BG),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTSIZE", (0, 0), (-1, -1), 9),
            ("ALIGN", (1, 1), (3, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("GRID", (0, 0), (-1, -1), 0.5, _BORDER),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F1F5F9")]),
        ]))
        return table
