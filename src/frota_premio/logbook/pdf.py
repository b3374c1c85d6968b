from __future__ import annotations

import io
from typing import Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .model import LogbookEntry

_HEADER = ["Data", "Sentido", "Origem", "KM Inicial", "Hora Inicial", "Destino", "Hora Final"]


def build_logbook_pdf(
    *,
    driver_name: str,
    tractor: str,
    trailer: str,
    period: str,
    week: str,
    entries: Sequence[LogbookEntry],
    justification: str = "",
    signature: str = "",
) -> bytes:
    """Render the weekly 'DIÁRIO DE BORDO' document and return the PDF bytes."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=12 * mm,
        leftMargin=12 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=f"Diário de Bordo {week}",
    )
    styles = getSampleStyleSheet()

    elements = [
        Paragraph("DIÁRIO DE BORDO", styles["Title"]),
        Spacer(1, 4 * mm),
    ]

    meta = Table(
        [
            ["Motorista", driver_name],
            ["Cavalo", tractor],
            ["Carreta", trailer],
            ["Horário", period],
            ["Semana", week],
        ],
        colWidths=[35 * mm, 120 * mm],
    )
    meta.setStyle(
        TableStyle(
            [
                ("GRID", (0, 0), (-1, -1), 0.6, colors.HexColor("#707070")),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("BACKGROUND", (0, 0), (0, -1), colors.HexColor("#F4F4F4")),
            ]
        )
    )
    elements += [meta, Spacer(1, 6 * mm)]

    rows = [_HEADER]
    for e in entries:
        rows.append(
            [
                e.trip_date.strftime("%d/%m/%Y"),
                e.direction.value.upper(),
                e.origin,
                f"{e.km_start:g}",
                e.start_time.strftime("%H:%M"),
                e.destination,
                e.end_time.strftime("%H:%M"),
            ]
        )

    legs = Table(rows, repeatRows=1)
    legs.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2F5597")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#707070")),
                ("FONTSIZE", (0, 0), (-1, -1), 8),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F4F4F4")]),
            ]
        )
    )
    elements.append(legs)

    if justification:
        elements += [Spacer(1, 6 * mm), Paragraph(f"<b>Justificativa:</b> {_escape(justification)}", styles["Normal"])]
    if signature:
        elements += [Spacer(1, 10 * mm), Paragraph(f"Assinatura: {_escape(signature)}", styles["Normal"])]

    doc.build(elements)
    return buffer.getvalue()


def _escape(text: str) -> str:
    # Paragraph parses a small XML markup
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
