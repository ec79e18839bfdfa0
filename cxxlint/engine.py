"""
C++ Linter — rule-driven tree walk over a tree-sitter-cpp syntax tree.

  • Parses source bytes with tree-sitter (C++ grammar)
  • Walks the tree pre-order, children left to right, with an explicit
    cursor (no Python recursion, so deep nesting is safe)
  • Runs every rule registered for the node's kind, in table order
  • Schedules byte-range deletions for fix-bearing rules
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple, Union

import tree_sitter_cpp as tscpp
from tree_sitter import Language, Node, Parser, Tree

from cxxlint.config import DEFAULT_SETTINGS, LintSettings
from cxxlint.diagnostics import Diagnostic
from cxxlint.node_kinds import NodeKind
from cxxlint.rewriter import ByteRange, SourceRewriter, apply_deletions
from cxxlint.rules import RULES, Rule, RuleContext, index_rules

logger = logging.getLogger(__name__)

CPP_LANGUAGE = Language(tscpp.language())
_parser = Parser(CPP_LANGUAGE)


@dataclass
class LintResult:
    """Outcome of one lint pass."""
    diagnostics: List[Diagnostic]
    source: bytes
    fixed_source: bytes
    deletions: List[ByteRange] = field(default_factory=list)
    has_syntax_errors: bool = False

    @property
    def has_issues(self) -> bool:
        return bool(self.diagnostics)

    @property
    def modified(self) -> bool:
        return self.fixed_source != self.source


def parse(source: Union[bytes, str]) -> Tree:
    if isinstance(source, str):
        source = source.encode("utf-8")
    return _parser.parse(source)


# ────────────────────────────────────────────────────────────────
#  Tree traversal helpers
# ────────────────────────────────────────────────────────────────

def walk_preorder(root: Node) -> Iterator[Tuple[Node, int]]:
    """Yield ``(node, depth)`` for every node under ``root``, pre-order."""
    cursor = root.walk()
    depth = 0
    visited = False
    while True:
        if not visited:
            yield cursor.node, depth
            if cursor.goto_first_child():
                depth += 1
                continue
        if depth == 0:
            break
        if cursor.goto_next_sibling():
            visited = False
            continue
        cursor.goto_parent()
        depth -= 1
        visited = True


def dump_tree(root: Node) -> str:
    """Indented one-line-per-node dump of a syntax tree."""
    lines = []
    for node, depth in walk_preorder(root):
        (sr, sc), (er, ec) = node.start_point, node.end_point
        kind = node.type if node.is_named else repr(node.type)
        lines.append(f"{'  ' * depth}{kind} [{sr}, {sc}] - [{er}, {ec}]")
    return "\n".join(lines)


# ────────────────────────────────────────────────────────────────
#  Linter
# ────────────────────────────────────────────────────────────────

class CppLinter:
    """Runs the fixed rule table over C++ sources."""

    def __init__(self, settings: Optional[LintSettings] = None,
                 rules: Tuple[Rule, ...] = RULES):
        self.settings = settings or DEFAULT_SETTINGS
        self._rules_by_kind: Dict[NodeKind, Tuple[Rule, ...]] = index_rules(rules)

    def lint(self, source: Union[bytes, str]) -> LintResult:
        if isinstance(source, str):
            source = source.encode("utf-8")
        return self.lint_tree(parse(source), source)

    def lint_tree(self, tree: Tree, source: bytes) -> LintResult:
        root = tree.root_node
        if root.has_error:
            logger.warning("Source contains syntax errors; unparsable regions are not checked")

        ctx = RuleContext(source=source, settings=self.settings)
        rewriter = SourceRewriter(source)
        pending: List[ByteRange] = []
        diagnostics: List[Diagnostic] = []

        for node, _ in walk_preorder(root):
            for rule in self._rules_by_kind[NodeKind.of(node)]:
                found = rule.check(node, ctx)
                if not found:
                    continue
                diagnostics.extend(found)
                if rule.fix is not None and self.settings.apply_fixes:
                    span = rule.fix(node)
                    if self.settings.fix_strategy == "eager":
                        rewriter.delete(*span)
                    else:
                        pending.append(span)

        if self.settings.fix_strategy == "eager":
            fixed, deletions = rewriter.source, rewriter.deletions
        else:
            fixed, deletions = apply_deletions(source, pending), sorted(pending)

        logger.debug("Lint pass: %d diagnostics, %d deletions", len(diagnostics), len(deletions))
        return LintResult(
            diagnostics=diagnostics,
            source=source,
            fixed_source=fixed,
            deletions=deletions,
            has_syntax_errors=root.has_error,
        )
