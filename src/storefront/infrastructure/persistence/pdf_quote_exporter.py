"""Quote exporter that renders the quote document as a PDF."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from storefront.application.dto import QuoteDocument
from storefront.application.export_quote import QuoteExporter


class PdfQuoteExporter(QuoteExporter):

    def __init__(self, export_dir: Path, filename: str | None = None) -> None:
        self._export_dir = export_dir
        self._filename = filename

    def export(self, document: QuoteDocument) -> Path:
        self._export_dir.mkdir(parents=True, exist_ok=True)
        filename = self._filename or (
            f"quote_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}.pdf"
        )
        path = self._export_dir / filename

        c = canvas.Canvas(str(path), pagesize=A4)
        _, h = A4

        y = h - 50
        c.setFont("Helvetica-Bold", 16)
        c.drawString(40, y, "QUOTE")
        y -= 24

        header = document.header
        c.setFont("Helvetica", 11)
        for label, value in (
            ("Company", header.company_name),
            ("Contact", header.contact_name),
            ("Email", header.email),
            ("Phone", header.phone),
            ("Tax ID", header.tax_id),
            ("Address", header.address),
        ):
            c.drawString(40, y, f"{label}: {value}")
            y -= 16
        y -= 8

        # table header
        c.setFont("Helvetica-Bold", 10)
        c.drawString(40, y, "Product")
        c.drawRightString(320, y, "Qty")
        c.drawRightString(410, y, "Unit price")
        c.drawRightString(470, y, "Disc.")
        c.drawRightString(550, y, "Subtotal")
        y -= 10
        c.line(40, y, 550, y)
        y -= 16

        c.setFont("Helvetica", 10)
        for row in document.rows:
            c.drawString(40, y, row.product_name[:42])
            c.drawRightString(320, y, str(row.quantity))
            c.drawRightString(410, y, row.unit_price)
            c.drawRightString(470, y, row.discount)
            c.drawRightString(550, y, row.subtotal)
            y -= 14
            if y < 100:
                c.showPage()
                y = h - 50
                c.setFont("Helvetica", 10)

        y -= 10
        c.line(40, y, 550, y)
        y -= 18
        c.drawRightString(550, y, f"Subtotal: {document.subtotal}")
        y -= 16
        c.drawRightString(550, y, f"Discount: {document.discount}")
        y -= 18
        c.setFont("Helvetica-Bold", 12)
        c.drawRightString(550, y, f"TOTAL: {document.total}")

        c.save()
        return path
