"""
Rule Catalog

Human-readable data for every rule in the rule table: title, rationale,
compliant / non-compliant examples and how to fix.  The checks themselves
live in rules.py; this module only explains them.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass, field

from cxxlint.diagnostics import RuleId


@dataclass
class RuleInfo:
    rule_id: str
    title: str
    severity: str                          # "style" | "warning"
    rationale: str
    non_compliant: str                     # code example
    compliant: str                         # fixed code example
    fix_strategy: str                      # human-readable guidance
    auto_fixable: bool = False
    related: List[str] = field(default_factory=list)


_RULES: Dict[str, RuleInfo] = {}

def _add(rule: RuleInfo):
    _RULES[rule.rule_id] = rule


_add(RuleInfo(
    rule_id=RuleId.MAIN_FUNCTION.value,
    title="Function named 'main'",
    severity="warning",
    rationale=(
        "Library and module sources should not define the program entry "
        "point.  A stray 'main' usually means test or scratch code was left "
        "in a translation unit that is linked elsewhere."
    ),
    non_compliant="""\
int main() {
    return run();
}""",
    compliant="""\
int run() {
    return process();
}""",
    fix_strategy=(
        "Move the entry point into its own source file, or rename the "
        "function to describe what it does."
    ),
))

_add(RuleInfo(
    rule_id=RuleId.DECLARATION_NAMING.value,
    title="Variable and constant naming",
    severity="style",
    rationale=(
        "Variables use lowerCamelCase and constants use UPPERCASE so the two "
        "can be told apart at the point of use.  Acronyms are written as "
        "words (myId, not myID).  Constants must be letters only."
    ),
    non_compliant="""\
int item_count = 0;
const int maxSize = 10;""",
    compliant="""\
int itemCount = 0;
const int MAXSIZE = 10;""",
    fix_strategy=(
        "Rename the variable to lowerCamelCase, or the constant to all "
        "uppercase letters, and update every reference."
    ),
    related=[RuleId.SHORT_NAME.value],
))

_add(RuleInfo(
    rule_id=RuleId.SHORT_NAME.value,
    title="Variable name too short",
    severity="style",
    rationale=(
        "One- and two-letter names carry no meaning outside a tight loop.  "
        "Counters declared in a for-loop header are exempt."
    ),
    non_compliant="""\
int x = readValue();""",
    compliant="""\
int sample = readValue();""",
    fix_strategy="Give the variable a name that says what it holds.",
    related=[RuleId.DECLARATION_NAMING.value],
))

_add(RuleInfo(
    rule_id=RuleId.USING_NAMESPACE_STD.value,
    title="using namespace std",
    severity="warning",
    rationale=(
        "Pulling the whole standard namespace into scope invites name "
        "collisions (count, distance, data ...) and hides where a symbol "
        "comes from."
    ),
    non_compliant="""\
using namespace std;
vector<int> values;""",
    compliant="""\
std::vector<int> values;""",
    fix_strategy=(
        "Delete the using-directive and qualify names with std::, or import "
        "single names with 'using std::vector;'.  The directive is removed "
        "automatically."
    ),
    auto_fixable=True,
))

_add(RuleInfo(
    rule_id=RuleId.GOTO.value,
    title="goto statement",
    severity="warning",
    rationale=(
        "goto makes control flow hard to follow and easy to break when code "
        "is moved around."
    ),
    non_compliant="""\
if (failed) goto cleanup;
work();
cleanup:
release();""",
    compliant="""\
if (!failed) {
    work();
}
release();""",
    fix_strategy=(
        "Restructure with early returns, loops with break/continue, or RAII "
        "objects that release resources on scope exit."
    ),
))

_add(RuleInfo(
    rule_id=RuleId.CONTROL_FLOW_SPACING.value,
    title="Space before control-flow parenthesis",
    severity="style",
    rationale=(
        "Keywords are followed by a space so they read differently from "
        "function calls."
    ),
    non_compliant="""\
if(ready) {
    start();
}""",
    compliant="""\
if (ready) {
    start();
}""",
    fix_strategy="Insert a single space between the keyword and '('.",
    related=[RuleId.CALL_SPACING.value],
))

_add(RuleInfo(
    rule_id=RuleId.RANGE_BASED_FOR.value,
    title="Index-based for loop",
    severity="style",
    rationale=(
        "A range-based for loop cannot get its bounds wrong and states the "
        "intent (visit every element) directly."
    ),
    non_compliant="""\
for (size_t idx = 0; idx < items.size(); idx++) {
    total += items[idx];
}""",
    compliant="""\
for (const auto& item : items) {
    total += item;
}""",
    fix_strategy=(
        "Iterate the container directly when the index itself is not needed."
    ),
))

_add(RuleInfo(
    rule_id=RuleId.CALL_SPACING.value,
    title="Space before call parenthesis",
    severity="style",
    rationale=(
        "Calls are written without a space so they read differently from "
        "control-flow keywords."
    ),
    non_compliant="""\
compute (value);""",
    compliant="""\
compute(value);""",
    fix_strategy="Remove the space between the callee and '('.",
    related=[RuleId.CONTROL_FLOW_SPACING.value],
))

_add(RuleInfo(
    rule_id=RuleId.UMBRELLA_INCLUDE.value,
    title="Umbrella standard-library include",
    severity="warning",
    rationale=(
        "<bits/stdc++.h> is a non-standard GCC internal header.  It pulls in "
        "the entire library, slows builds and does not compile elsewhere."
    ),
    non_compliant="""\
#include <bits/stdc++.h>""",
    compliant="""\
#include <vector>
#include <string>""",
    fix_strategy="Include only the standard headers the file uses.",
))


# ═══════════════════════════════════════════════════════════════════════
#  Public API
# ═══════════════════════════════════════════════════════════════════════

def get_rule(rule_id: str) -> Optional[RuleInfo]:
    """Look up a single rule by its ID (e.g. 'short-name')."""
    return _RULES.get(rule_id)


def get_all_rules() -> Dict[str, RuleInfo]:
    """Return the entire catalog, in rule-table order."""
    return dict(_RULES)


def format_rule_explanation(rule_id: str) -> str:
    """Return a rich, human-readable explanation of a rule."""
    rule = get_rule(rule_id)
    if rule is None:
        return f"Unknown rule: {rule_id}"

    explanation = f"""## {rule.rule_id} — {rule.title}
**Severity**: {rule.severity}
**Auto-fix**: {"yes" if rule.auto_fixable else "no"}

### Rationale
{rule.rationale}

### Non-Compliant Example
```cpp
{rule.non_compliant}
```

### Compliant Example
```cpp
{rule.compliant}
```

### How to Fix
{rule.fix_strategy}"""

    if rule.related:
        explanation += f"\n\n### Related Rules\n{', '.join(rule.related)}"

    return explanation
