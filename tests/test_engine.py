"""
Traversal engine tests: visiting order, statelessness, fix strategies and
malformed input.
"""

import os
import sys
import unittest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from cxxlint.config import LintSettings
from cxxlint.diagnostics import RuleId
from cxxlint.engine import CppLinter, dump_tree, parse, walk_preorder
from cxxlint.node_kinds import NodeKind

MIXED_SOURCE = """\
#include <bits/stdc++.h>
using namespace std;
int bad_name = 1;
void run() {
    if(bad_name) { goto out; }
out:
    return;
}
"""

TWO_DIRECTIVES = """\
using namespace std;
int value = 1;
namespace app { using namespace std; }
"""


def _recursive_preorder(node):
    yield node
    for child in node.children:
        yield from _recursive_preorder(child)


class TestWalk(unittest.TestCase):

    def test_matches_recursive_preorder(self):
        tree = parse(MIXED_SOURCE)
        walked = [(n.type, n.start_byte, n.end_byte) for n, _ in walk_preorder(tree.root_node)]
        expected = [(n.type, n.start_byte, n.end_byte) for n in _recursive_preorder(tree.root_node)]
        self.assertEqual(walked, expected)

    def test_depths(self):
        tree = parse("int value = 1;")
        nodes = list(walk_preorder(tree.root_node))
        self.assertEqual((nodes[0][0].type, nodes[0][1]), ("translation_unit", 0))
        self.assertEqual((nodes[1][0].type, nodes[1][1]), ("declaration", 1))

    def test_subtree_walk_stays_inside(self):
        tree = parse("int first = 1;\nint second = 2;\n")
        first_decl = tree.root_node.children[0]
        for node, _ in walk_preorder(first_decl):
            self.assertLessEqual(node.end_byte, first_decl.end_byte)

    def test_deep_nesting_does_not_recurse(self):
        depth = 3000
        code = "void run() " + "{" * depth + "}" * depth
        result = CppLinter().lint(code)
        self.assertEqual(result.diagnostics, [])

    def test_dump_tree(self):
        dump = dump_tree(parse("int value = 1;").root_node)
        lines = dump.splitlines()
        self.assertTrue(lines[0].startswith("translation_unit [0, 0]"))
        self.assertTrue(lines[1].startswith("  declaration [0, 0]"))
        self.assertIn("'='", dump)


class TestNodeKind(unittest.TestCase):

    def test_named_nodes(self):
        root = parse("int value = 1;").root_node
        self.assertIs(NodeKind.of(root), NodeKind.IGNORED)
        self.assertIs(NodeKind.of(root.children[0]), NodeKind.DECLARATION)

    def test_anonymous_nodes_are_ignored(self):
        root = parse("int value = 1;").root_node
        semicolon = root.children[0].children[-1]
        self.assertFalse(semicolon.is_named)
        self.assertIs(NodeKind.of(semicolon), NodeKind.IGNORED)


class TestLintPass(unittest.TestCase):

    def test_document_order(self):
        diags = CppLinter().lint(MIXED_SOURCE).diagnostics
        self.assertEqual([d.category for d in diags], [
            RuleId.UMBRELLA_INCLUDE,
            RuleId.USING_NAMESPACE_STD,
            RuleId.DECLARATION_NAMING,
            RuleId.CONTROL_FLOW_SPACING,
            RuleId.GOTO,
        ])
        lines = [d.line for d in diags]
        self.assertEqual(lines, sorted(lines))
        self.assertEqual(lines, [1, 2, 3, 5, 5])

    def test_idempotent(self):
        linter = CppLinter()
        first = linter.lint(MIXED_SOURCE)
        second = linter.lint(MIXED_SOURCE)
        self.assertEqual(first.diagnostics, second.diagnostics)
        self.assertEqual(first.fixed_source, second.fixed_source)

    def test_str_and_bytes_inputs_agree(self):
        linter = CppLinter()
        self.assertEqual(linter.lint(MIXED_SOURCE).diagnostics,
                         linter.lint(MIXED_SOURCE.encode("utf-8")).diagnostics)

    def test_clean_source(self):
        result = CppLinter().lint("int value = 1;\n")
        self.assertFalse(result.has_issues)
        self.assertFalse(result.modified)
        self.assertEqual(result.fixed_source, result.source)

    def test_rewrite_locality(self):
        result = CppLinter().lint(MIXED_SOURCE)
        expected = MIXED_SOURCE.replace("using namespace std;", "", 1).encode()
        self.assertEqual(result.fixed_source, expected)

    def test_eager_and_batch_strategies_agree(self):
        eager = CppLinter(LintSettings(fix_strategy="eager")).lint(TWO_DIRECTIVES)
        batch = CppLinter(LintSettings(fix_strategy="batch")).lint(TWO_DIRECTIVES)
        expected = TWO_DIRECTIVES.replace("using namespace std;", "").encode()
        self.assertEqual(eager.fixed_source, expected)
        self.assertEqual(batch.fixed_source, expected)
        self.assertEqual(eager.deletions, batch.deletions)
        self.assertEqual(len(eager.deletions), 2)

    def test_syntax_errors_do_not_abort(self):
        result = CppLinter().lint("int main( {\n  goto out;\n")
        self.assertTrue(result.has_syntax_errors)
        self.assertIsInstance(result.diagnostics, list)

    def test_non_utf8_source_does_not_abort(self):
        result = CppLinter().lint(b"int caf\xe9 = 1;\nint my_var = 2;\n")
        self.assertIn(RuleId.DECLARATION_NAMING, [d.category for d in result.diagnostics])


if __name__ == "__main__":
    unittest.main()
