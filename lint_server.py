"""
C++ Style Linter — MCP Server

Exposes tools to editor agents via the Model Context Protocol:

  1.  lint_file        — lint a C++ file and list every issue
  2.  lint_code        — lint a snippet passed inline
  3.  explain_rule     — full rule explanation with examples
  4.  fix_file         — apply auto-fixes (dry run shows the rewritten source)
  5.  coverage_report  — list all rules and whether they auto-fix
"""

from mcp.server.fastmcp import FastMCP
import os
import sys

# Ensure the package is importable when run from a checkout
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from cxxlint.engine import CppLinter
from cxxlint.reporter import format_markdown
from cxxlint.rule_catalog import format_rule_explanation, get_all_rules
from cxxlint.source_reader import read_source, write_source

# ═══════════════════════════════════════════════════════════════════════
#  Server Setup
# ═══════════════════════════════════════════════════════════════════════

mcp = FastMCP("C++ Style Linter")

linter = CppLinter()


def _read(file_path: str):
    """Returns (source, error_message).  Exactly one is non-None."""
    try:
        return read_source(file_path), None
    except (OSError, ValueError) as e:
        return None, f"Error: {e}"


# ═══════════════════════════════════════════════════════════════════════
#  Tool 1 — Lint File
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def lint_file(file_path: str) -> str:
    """
    Lints a C++ source file and lists every issue in document order.

    Args:
        file_path: Path to the .cpp/.h file to check.
    """
    source, error = _read(file_path)
    if error:
        return error

    result = linter.lint(source)
    md = format_markdown(result.diagnostics, f"Lint results for `{file_path}`")
    if result.has_syntax_errors:
        md += "\n> ⚠ The file has syntax errors; unparsable regions were not checked.\n"
    if result.deletions:
        md += f"\n{len(result.deletions)} issue(s) can be fixed automatically with `fix_file`.\n"
    return md


# ═══════════════════════════════════════════════════════════════════════
#  Tool 2 — Lint Code
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def lint_code(code: str) -> str:
    """
    Lints a C++ snippet passed directly as text.

    Args:
        code: C++ source text.
    """
    result = linter.lint(code)
    return format_markdown(result.diagnostics, "Lint results")


# ═══════════════════════════════════════════════════════════════════════
#  Tool 3 — Explain Rule
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def explain_rule(rule_id: str) -> str:
    """
    Explains a lint rule: rationale, non-compliant and compliant examples,
    and how to fix it.

    Args:
        rule_id: e.g. 'short-name', 'using-namespace-std'.
    """
    return format_rule_explanation(rule_id.strip())


# ═══════════════════════════════════════════════════════════════════════
#  Tool 4 — Fix File
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def fix_file(file_path: str, dry_run: bool = False) -> str:
    """
    Applies every available auto-fix to a file and writes it back.

    Args:
        file_path: Path to the C++ file.
        dry_run:   If True, show the rewritten source without saving it.
    """
    source, error = _read(file_path)
    if error:
        return error

    result = linter.lint(source)
    if not result.deletions:
        return f"No auto-fixable issues in `{file_path}`."

    fixable = {rid for rid, rule in get_all_rules().items() if rule.auto_fixable}
    fixed_rules = sorted({d.category.value for d in result.diagnostics} & fixable)
    summary = (
        f"Removed {len(result.deletions)} span(s) "
        f"({', '.join(fixed_rules)}) from `{file_path}`."
    )

    if dry_run:
        preview = result.fixed_source.decode("utf-8", errors="replace")
        return f"[Dry Run] {summary}\n\n```cpp\n{preview}\n```"

    try:
        write_source(file_path, result.fixed_source)
    except OSError as e:
        return f"Error writing {file_path}: {e}"
    return summary


# ═══════════════════════════════════════════════════════════════════════
#  Tool 5 — Coverage Report
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def coverage_report() -> str:
    """Lists every rule the linter checks."""
    rules = get_all_rules()
    md = f"## Rule Coverage\n\n{len(rules)} rules, "
    md += f"{sum(1 for r in rules.values() if r.auto_fixable)} with auto-fix.\n\n"
    md += "| Rule | Title | Severity | Auto-fix |\n"
    md += "|------|-------|----------|----------|\n"
    for rule in rules.values():
        md += f"| `{rule.rule_id}` | {rule.title} | {rule.severity} | {'✅' if rule.auto_fixable else '—'} |\n"
    return md


if __name__ == "__main__":
    mcp.run()
