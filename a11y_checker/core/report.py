"""Report builder: text and JSON output for a11y-tool results."""

import json
import os
from typing import Any

from a11y_checker.core.types import Report


def _mark(passed: bool) -> str:
    return '✓' if passed else '✗'


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'a11y-tool: {report.theme_name} (WCAG {report.level})'
    if report.theme_path:
        header += f' — {os.path.basename(report.theme_path)} ({len(report.items)} items)'
    lines.append(header)
    lines.append('')

    for item_name, checks in report.items.items():
        lines.append(f'── {item_name}')
        for check_name, data in checks.items():
            if 'error' in data:
                lines.append(f'  {check_name}: {data["error"]}  {_mark(False)}')
            elif check_name == 'contrast':
                ratio = data['ratio']
                req = data['required']
                size = data.get('size', 'normal')
                lines.append(
                    f'  contrast: {data["fg"]} on {data["bg"]}  {ratio:.2f}:1  '
                    f'(needs {req:g}:1, {size})  {_mark(data["is_valid"])}'
                )
            elif check_name == 'targets':
                lines.append(
                    f'  target: {data["width"]:g}×{data["height"]:g}  '
                    f'(min {data["min_size"]:g})  {_mark(data["is_valid"])}'
                )
            elif check_name == 'tokens':
                lines.append(f'  token: {data["value"]} → {data["hex"]}  {_mark(True)}')
            elif check_name == 'matrix':
                lines.append(
                    f'  matrix: best partner {data["best_partner"]} {data["best_ratio"]:.2f}:1, '
                    f'{data["aa_partners"]} AA partner(s)'
                )
            elif check_name == 'swatches':
                lines.append(f'  swatch: {data["file"]}')
            else:
                # Generic fallback
                for k, v in data.items():
                    lines.append(f'  {check_name}.{k}: {v}')
        lines.append('')

    if report.total > 0:
        lines.append(f'PASS {report.pass_count}/{report.total}  FAIL {report.fail_count}/{report.total}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'theme': report.theme_name,
        'level': report.level,
    }
    if report.theme_path:
        obj['path'] = report.theme_path

    obj['items'] = [{'name': name, 'checks': checks} for name, checks in report.items.items()]
    obj['summary'] = {
        'total': report.total,
        'pass': report.pass_count,
        'fail': report.fail_count,
    }
    return json.dumps(obj, indent=2)
