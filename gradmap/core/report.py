"""Report builder — text and JSON output for gradmap results."""

import json
import os
from typing import Any

from gradmap.core.stops import css_gradient
from gradmap.core.types import ColorStop, Report


def _pct(position: float) -> str:
    return f'{position * 100:.1f}%'


def stops_to_json(stops: list[ColorStop]) -> list[dict[str, Any]]:
    return [{'color': s.hex, 'rgb': list(s.color), 'position': s.position} for s in stops]


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.image_path:
        dim = f'{report.image_width}×{report.image_height}'
        header = f'gradmap: {os.path.basename(report.image_path)} ({dim})'
        if report.output_path:
            header += f' → {report.output_path}'
        lines.append(header)
        lines.append('')

    lines.append(f'stops: {len(report.stops)}')
    for stop in report.stops:
        lines.append(f'  {stop.hex}  {_pct(stop.position):>6}')
    lines.append(f'css: {css_gradient(report.stops)}')

    for section, data in report.sections.items():
        lines.append('')
        lines.append(f'── {section}')
        for k, v in data.items():
            lines.append(f'  {k}: {v}')

    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'colors': report.colors, 'stops': stops_to_json(report.stops)}
    if report.image_path:
        obj['image'] = report.image_path
        obj['dimensions'] = {'width': report.image_width, 'height': report.image_height}
    if report.output_path:
        obj['output'] = report.output_path
    obj['css'] = css_gradient(report.stops)
    obj.update(report.sections)
    return json.dumps(obj, indent=2)
