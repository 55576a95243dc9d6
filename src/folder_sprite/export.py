"""
Serialization of placed layer positions as CSS or JSON text.

Records are emitted from the topmost layer down, which is the reverse of
the order images were added. Offsets come from each layer's trimmed
content box; ``y`` is always written negated, and CSS negates ``x``
as well, matching ``background-position`` semantics.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from typing import TYPE_CHECKING

from folder_sprite.config_defaults import DEFAULT_OUTPUT_FORMAT, DEFAULT_UNIT
from folder_sprite.type_defs import ExportRecord

if TYPE_CHECKING:  # pragma: no cover
    from folder_sprite.canvas import Canvas
    from folder_sprite.type_defs import OutputFormat


def collect_records(canvas: Canvas) -> list[ExportRecord]:
    """Return one record per layer, topmost first."""
    records = []
    for layer in reversed(canvas.layers):
        bounds = canvas.layer_bounds(layer)
        records.append(ExportRecord(layer.name, bounds.left, bounds.top))
    return records


def css_rule(record: ExportRecord, unit: str = DEFAULT_UNIT) -> str:
    """
    Format a single CSS background-position rule.

    The layer name is used verbatim as the class selector. Names with
    spaces, dots, or a leading digit yield selectors a browser will not
    match; rename such source files rather than relying on escaping.
    """
    return (
        f".{record.name} {{ background-position: "
        f"-{record.x}{unit} -{record.y}{unit}; }}"
    )


def json_object(record: ExportRecord, unit: str = DEFAULT_UNIT) -> str:
    """Format a single JSON object with string-valued offsets."""
    name = json.dumps(record.name, ensure_ascii=False)
    return (
        f'{{"layer": {name}, "x": "{record.x}{unit}", '
        f'"y": "-{record.y}{unit}"}}'
    )


class CoordinateExporter:
    """Produces coordinate text for a finalized canvas."""

    def __init__(
        self,
        fmt: OutputFormat = DEFAULT_OUTPUT_FORMAT,
        unit: str = DEFAULT_UNIT,
    ) -> None:
        if fmt not in ("css", "json"):
            msg = f"Unsupported output format: {fmt!r}"
            raise ValueError(msg)
        self.fmt = fmt
        self.unit = unit

    def export(self, canvas: Canvas) -> Iterator[str]:
        """Yield output lines in topmost-first layer order."""
        records = collect_records(canvas)
        if self.fmt == "css":
            for record in records:
                yield css_rule(record, self.unit)
            return

        yield "["
        for idx, record in enumerate(records):
            prefix = "," if idx > 0 else ""
            yield prefix + json_object(record, self.unit)
        yield "]"

    def render(self, canvas: Canvas) -> str:
        """Return the full output as newline-terminated text."""
        return "".join(f"{line}\n" for line in self.export(canvas))
