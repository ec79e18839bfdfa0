"""
MCP server and rule catalog tests.

Tool functions are called directly; FastMCP registers them and hands the
plain functions back.
"""

import os
import sys
import tempfile
import unittest

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

import lint_server
from cxxlint.diagnostics import RuleId
from cxxlint.rule_catalog import format_rule_explanation, get_all_rules, get_rule
from cxxlint.rules import RULES

FIXABLE_SOURCE = b"using namespace std;\nint value = 1;\n"


class TestRuleCatalog(unittest.TestCase):

    def test_every_rule_is_documented_in_table_order(self):
        self.assertEqual(list(get_all_rules()), [r.rule_id.value for r in RULES])

    def test_fields_complete(self):
        for rid, rule in get_all_rules().items():
            for field_name in ("rule_id", "title", "severity", "rationale",
                               "non_compliant", "compliant", "fix_strategy"):
                with self.subTest(rule=rid, field=field_name):
                    self.assertTrue(getattr(rule, field_name))

    def test_auto_fixable_matches_rule_table(self):
        for rule in RULES:
            with self.subTest(rule=rule.rule_id.value):
                self.assertEqual(get_rule(rule.rule_id.value).auto_fixable, rule.fix is not None)

    def test_related_rules_exist(self):
        for rule in get_all_rules().values():
            for related in rule.related:
                self.assertIsNotNone(get_rule(related))

    def test_explanation(self):
        text = format_rule_explanation(RuleId.SHORT_NAME.value)
        self.assertIn("## short-name — Variable name too short", text)
        self.assertIn("### Compliant Example", text)
        self.assertIn("### Related Rules", text)
        self.assertEqual(format_rule_explanation("nope"), "Unknown rule: nope")


class TestServerTools(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.path = os.path.join(self.tmp.name, "fixable.cpp")
        with open(self.path, "wb") as f:
            f.write(FIXABLE_SOURCE)

    def test_lint_file(self):
        md = lint_server.lint_file(self.path)
        self.assertIn("`using-namespace-std`", md)
        self.assertIn("can be fixed automatically", md)

    def test_lint_file_missing(self):
        md = lint_server.lint_file(os.path.join(self.tmp.name, "missing.cpp"))
        self.assertTrue(md.startswith("Error:"))

    def test_lint_code(self):
        md = lint_server.lint_code("int main() { return 0; }")
        self.assertIn("`main-function`", md)
        self.assertIn("No issues found.", lint_server.lint_code("int value = 1;"))

    def test_explain_rule(self):
        self.assertIn("using namespace std", lint_server.explain_rule(" using-namespace-std "))

    def test_fix_file_dry_run_leaves_file(self):
        md = lint_server.fix_file(self.path, dry_run=True)
        self.assertTrue(md.startswith("[Dry Run] Removed 1 span(s) (using-namespace-std)"))
        with open(self.path, "rb") as f:
            self.assertEqual(f.read(), FIXABLE_SOURCE)

    def test_fix_file_writes_back(self):
        md = lint_server.fix_file(self.path)
        self.assertTrue(md.startswith("Removed 1 span(s)"))
        with open(self.path, "rb") as f:
            self.assertEqual(f.read(), b"\nint value = 1;\n")
        self.assertTrue(lint_server.fix_file(self.path).startswith("No auto-fixable issues"))

    def test_coverage_report(self):
        md = lint_server.coverage_report()
        self.assertIn("9 rules, 1 with auto-fix.", md)
        for rule in RULES:
            self.assertIn(f"`{rule.rule_id.value}`", md)


if __name__ == "__main__":
    unittest.main()
