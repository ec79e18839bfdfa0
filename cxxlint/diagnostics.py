"""
Diagnostic model.

Every issue the linter reports is a frozen ``Diagnostic``.  A lint pass
returns them as a plain list, in the order their triggering nodes were
visited (pre-order, document order).
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class RuleId(str, Enum):
    """Category of a diagnostic; one member per rule in the rule table."""
    MAIN_FUNCTION = "main-function"
    DECLARATION_NAMING = "declaration-naming"
    SHORT_NAME = "short-name"
    USING_NAMESPACE_STD = "using-namespace-std"
    GOTO = "goto"
    CONTROL_FLOW_SPACING = "control-flow-spacing"
    RANGE_BASED_FOR = "range-based-for"
    CALL_SPACING = "call-spacing"
    UMBRELLA_INCLUDE = "umbrella-include"


class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    line: int = Field(ge=1)
    column: int = Field(default=1, ge=1)
    category: RuleId

    def to_dict(self) -> Dict:
        return {
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "category": self.category.value,
        }


def count_by_category(diagnostics: List[Diagnostic]) -> Dict[str, int]:
    """Tally diagnostics per rule id, keeping first-seen order."""
    counts: Dict[str, int] = {}
    for diag in diagnostics:
        counts[diag.category.value] = counts.get(diag.category.value, 0) + 1
    return counts
