"""
Lint settings.

The rule set itself is fixed; these only tune thresholds and how fixes are
applied.
"""

from typing import Literal, Tuple

from pydantic import BaseModel, Field


class LintSettings(BaseModel):
    min_name_length: int = Field(default=3, ge=1)
    umbrella_headers: Tuple[str, ...] = ("bits/stdc++.h",)
    apply_fixes: bool = True
    # "eager": delete while walking; "batch": collect, then apply bottom-up
    fix_strategy: Literal["eager", "batch"] = "eager"


DEFAULT_SETTINGS = LintSettings()
