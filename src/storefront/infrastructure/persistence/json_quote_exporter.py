"""Quote exporter that writes the quote document as a JSON file."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from storefront.application.dto import QuoteDocument
from storefront.application.export_quote import QuoteExporter


class JsonQuoteExporter(QuoteExporter):

    def __init__(self, export_dir: Path, filename: str | None = None) -> None:
        self._export_dir = export_dir
        self._filename = filename

    def export(self, document: QuoteDocument) -> Path:
        self._export_dir.mkdir(parents=True, exist_ok=True)
        filename = self._filename or (
            f"quote_{datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')}.json"
        )
        path = self._export_dir / filename
        path.write_text(
            json.dumps(asdict(document), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        return path
