"""
Report rendering: plain text for terminals, JSON for tooling.
"""

import json
from typing import List

from cxxlint.diagnostics import Diagnostic, count_by_category


def format_text(diagnostics: List[Diagnostic]) -> str:
    if not diagnostics:
        return "No issues found"
    return "\n".join(f"Issue: {diag.message}" for diag in diagnostics)


def format_json(diagnostics: List[Diagnostic]) -> str:
    payload = {
        "issues": [diag.to_dict() for diag in diagnostics],
        "count": len(diagnostics),
    }
    return json.dumps(payload, indent=2)


def format_markdown(diagnostics: List[Diagnostic], title: str) -> str:
    """Markdown table used by the MCP tools."""
    if not diagnostics:
        return f"## {title}\n\nNo issues found."

    counts = count_by_category(diagnostics)
    breakdown = ", ".join(f"`{rule}`: {n}" for rule, n in counts.items())
    md = f"## {title}\n\nFound {len(diagnostics)} issue(s) ({breakdown}).\n\n"
    md += "| Line | Col | Rule | Message |\n"
    md += "|------|-----|------|---------|\n"
    for diag in diagnostics:
        md += f"| {diag.line} | {diag.column} | `{diag.category.value}` | {diag.message} |\n"
    return md
