"""
Rule set.

The whole rule table lives here, in the order rules fire on a node.  Each
rule is keyed to the node kinds it inspects; the engine only calls a check
for nodes of those kinds.  Checks are independent: none reads another
rule's output.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterator, List, Optional, Tuple

from tree_sitter import Node

from cxxlint.config import LintSettings
from cxxlint.diagnostics import Diagnostic, RuleId
from cxxlint.naming import is_all_uppercase, is_camel_case
from cxxlint.node_kinds import CONTROL_FLOW_KINDS, NodeKind

logger = logging.getLogger(__name__)

CONSTANT_QUALIFIERS = frozenset({"const", "constexpr", "constinit"})
CONTROL_FLOW_OPENERS = ("for (", "if (", "while (")


@dataclass(frozen=True)
class RuleContext:
    source: bytes
    settings: LintSettings


CheckFn = Callable[[Node, RuleContext], List[Diagnostic]]
FixFn = Callable[[Node], Tuple[int, int]]


@dataclass(frozen=True)
class Rule:
    rule_id: RuleId
    kinds: FrozenSet[NodeKind]
    check: CheckFn
    fix: Optional[FixFn] = None


# ────────────────────────────────────────────────────────────────
#  Node helpers
# ────────────────────────────────────────────────────────────────

def node_text(node: Node, source: bytes) -> Optional[str]:
    """Decode a node's span, or None if it does not decode as UTF-8."""
    try:
        return source[node.start_byte:node.end_byte].decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Undecodable span %d-%d skipped", node.start_byte, node.end_byte)
        return None


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _column(node: Node) -> int:
    return node.start_point[1] + 1


def _diag(node: Node, rule_id: RuleId, message: str) -> Diagnostic:
    return Diagnostic(message=message, line=_line(node), column=_column(node), category=rule_id)


def _declared_identifiers(declaration: Node) -> Iterator[Node]:
    """Yield identifier nodes declared by a declaration, in source order.

    Covers plain declarators (``int x;``) and init-declarators whose
    declarator is an identifier (``int x = 1;``).  Pointer, array and
    function declarators are not identifiers and are left alone.
    """
    for declarator in declaration.children_by_field_name("declarator"):
        if declarator.type == "identifier":
            yield declarator
        elif declarator.type == "init_declarator":
            inner = declarator.child_by_field_name("declarator")
            if inner is not None and inner.type == "identifier":
                yield inner


def _is_constant(declaration: Node, source: bytes) -> bool:
    for child in declaration.children:
        # grammar versions disagree on where constexpr lives
        if child.type in ("type_qualifier", "storage_class_specifier") \
                and node_text(child, source) in CONSTANT_QUALIFIERS:
            return True
    return False


def _in_for_header(declaration: Node) -> bool:
    parent = declaration.parent
    return parent is not None and parent.type == "for_statement"


# ────────────────────────────────────────────────────────────────
#  Checks
# ────────────────────────────────────────────────────────────────

def check_main_function(node: Node, ctx: RuleContext) -> List[Diagnostic]:
    declarator = node.child_by_field_name("declarator")
    if declarator is None:
        return []
    name_node = declarator.child_by_field_name("declarator")
    if name_node is None:
        return []
    if node_text(name_node, ctx.source) != "main":
        return []
    return [_diag(node, RuleId.MAIN_FUNCTION,
                  f"Function named 'main' found at line {_line(node)}")]


def check_declaration_naming(node: Node, ctx: RuleContext) -> List[Diagnostic]:
    constant = _is_constant(node, ctx.source)
    found = []
    for ident in _declared_identifiers(node):
        name = node_text(ident, ctx.source)
        if name is None:
            continue
        if constant:
            if not is_all_uppercase(name):
                found.append(_diag(ident, RuleId.DECLARATION_NAMING,
                                   f"Constant '{name}' is not all uppercase at line {_line(ident)}"))
        elif not is_camel_case(name):
            found.append(_diag(ident, RuleId.DECLARATION_NAMING,
                               f"Variable '{name}' is not in camel case at line {_line(ident)}"))
    return found


def check_short_name(node: Node, ctx: RuleContext) -> List[Diagnostic]:
    # Loop counters like ``i`` are fine
    if _in_for_header(node):
        return []
    found = []
    for ident in _declared_identifiers(node):
        name = node_text(ident, ctx.source)
        if name is not None and len(name) < ctx.settings.min_name_length:
            found.append(_diag(ident, RuleId.SHORT_NAME,
                               f"Variable name '{name}' is too short at line {_line(ident)}"))
    return found


def check_using_namespace_std(node: Node, ctx: RuleContext) -> List[Diagnostic]:
    text = node_text(node, ctx.source)
    if text is None or "namespace std" not in text:
        return []
    return [_diag(node, RuleId.USING_NAMESPACE_STD,
                  f"Usage of 'using namespace std' found at line {_line(node)}")]


def fix_using_namespace_std(node: Node) -> Tuple[int, int]:
    return node.start_byte, node.end_byte


def check_goto(node: Node, ctx: RuleContext) -> List[Diagnostic]:
    return [_diag(node, RuleId.GOTO,
                  f"Usage of 'goto' statement found at line {_line(node)}")]


def check_control_flow_spacing(node: Node, ctx: RuleContext) -> List[Diagnostic]:
    text = node_text(node, ctx.source)
    if text is None or any(opener in text for opener in CONTROL_FLOW_OPENERS):
        return []
    return [_diag(node, RuleId.CONTROL_FLOW_SPACING,
                  f"Missing space before parenthesis in control-flow statement at line {_line(node)}")]


def check_range_based_for(node: Node, ctx: RuleContext) -> List[Diagnostic]:
    text = node_text(node, ctx.source)
    if text is None or "for (" not in text or ":" in text:
        return []
    return [_diag(node, RuleId.RANGE_BASED_FOR,
                  f"Consider using a range-based for loop at line {_line(node)}")]


def check_call_spacing(node: Node, ctx: RuleContext) -> List[Diagnostic]:
    text = node_text(node, ctx.source)
    if text is None or " (" not in text:
        return []
    return [_diag(node, RuleId.CALL_SPACING,
                  f"Unexpected space before call parenthesis at line {_line(node)}")]


def check_umbrella_include(node: Node, ctx: RuleContext) -> List[Diagnostic]:
    text = node_text(node, ctx.source)
    if text is None:
        return []
    for header in ctx.settings.umbrella_headers:
        if header in text:
            return [_diag(node, RuleId.UMBRELLA_INCLUDE,
                          f"Avoid including <{header}> at line {_line(node)}")]
    return []


# ────────────────────────────────────────────────────────────────
#  Rule table (firing order)
# ────────────────────────────────────────────────────────────────

RULES: Tuple[Rule, ...] = (
    Rule(RuleId.MAIN_FUNCTION, frozenset({NodeKind.FUNCTION_DEFINITION}), check_main_function),
    Rule(RuleId.DECLARATION_NAMING, frozenset({NodeKind.DECLARATION}), check_declaration_naming),
    Rule(RuleId.SHORT_NAME, frozenset({NodeKind.DECLARATION}), check_short_name),
    Rule(RuleId.USING_NAMESPACE_STD, frozenset({NodeKind.USING_DECLARATION}),
         check_using_namespace_std, fix=fix_using_namespace_std),
    Rule(RuleId.GOTO, frozenset({NodeKind.GOTO_STATEMENT}), check_goto),
    Rule(RuleId.CONTROL_FLOW_SPACING, CONTROL_FLOW_KINDS, check_control_flow_spacing),
    Rule(RuleId.RANGE_BASED_FOR, frozenset({NodeKind.FOR_STATEMENT}), check_range_based_for),
    Rule(RuleId.CALL_SPACING, frozenset({NodeKind.CALL_EXPRESSION}), check_call_spacing),
    Rule(RuleId.UMBRELLA_INCLUDE, frozenset({NodeKind.PREPROC_INCLUDE}), check_umbrella_include),
)


def index_rules(rules: Tuple[Rule, ...] = RULES) -> Dict[NodeKind, Tuple[Rule, ...]]:
    """Group rules by node kind, keeping table order within each kind.

    ``NodeKind.IGNORED`` always maps to no rules.
    """
    by_kind: Dict[NodeKind, List[Rule]] = {kind: [] for kind in NodeKind}
    for rule in rules:
        for kind in rule.kinds:
            if kind is NodeKind.IGNORED:
                raise ValueError(f"Rule {rule.rule_id.value} cannot target ignored nodes")
            by_kind[kind].append(rule)
    return {kind: tuple(found) for kind, found in by_kind.items()}
