"""
Closed set of tree-sitter-cpp node kinds the rule table dispatches on.

Any other grammar category (including ``ERROR`` nodes and anonymous
punctuation/keyword nodes) maps to ``NodeKind.IGNORED``.
"""

from enum import Enum

from tree_sitter import Node


class NodeKind(str, Enum):
    FUNCTION_DEFINITION = "function_definition"
    DECLARATION = "declaration"
    USING_DECLARATION = "using_declaration"
    GOTO_STATEMENT = "goto_statement"
    FOR_STATEMENT = "for_statement"
    FOR_RANGE_LOOP = "for_range_loop"
    IF_STATEMENT = "if_statement"
    WHILE_STATEMENT = "while_statement"
    CALL_EXPRESSION = "call_expression"
    PREPROC_INCLUDE = "preproc_include"
    IGNORED = ""

    @classmethod
    def of(cls, node: Node) -> "NodeKind":
        if not node.is_named:
            return cls.IGNORED
        try:
            return cls(node.type)
        except ValueError:
            return cls.IGNORED


CONTROL_FLOW_KINDS = frozenset({
    NodeKind.FOR_STATEMENT,
    NodeKind.FOR_RANGE_LOOP,
    NodeKind.IF_STATEMENT,
    NodeKind.WHILE_STATEMENT,
})
