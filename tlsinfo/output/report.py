"""
tlsinfo Report Generator
=========================

JSON renderings of the structured encoder output and of the
classification tables, for use by scripts, CI pipelines, and other tools.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from tlsinfo.core.models import Description, TLSDescription


def registry_records(registry: Mapping[int, Description]) -> list[dict[str, Any]]:
    """Flatten a classification table into JSON-friendly records, sorted by code."""
    return [
        {
            "id": f"0x{code:04x}",
            "name": d.name,
            "slug": d.slug,
            "quality": d.quality.label,
        }
        for code, d in sorted(registry.items())
    ]


class TLSReportGenerator:
    """Writes tlsinfo results as JSON documents."""

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def build_report(self, description: TLSDescription) -> dict[str, Any]:
        """Wrap a connection description with report metadata."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "tlsinfo",
                "version": self.version,
            },
            "connection": description.model_dump(),
        }

    def generate_json(self, description: TLSDescription, output_path: Path) -> Path:
        """Write the report for *description* to *output_path*.

        Parent directories are created as needed.

        Returns:
            Path to the generated JSON file.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(self.build_report(description), fh, indent=2, ensure_ascii=False)
            fh.write("\n")
        return output_path
