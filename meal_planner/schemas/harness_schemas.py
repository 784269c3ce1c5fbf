"""
Pydantic schemas for the parser differential harness.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from .ingredient_schemas import ParsedIngredient


class ParserTestCase(BaseModel):
    """A literal ingredient line with the record the parsers should produce."""
    input: str
    expected: ParsedIngredient


class FieldDifference(BaseModel):
    """One field on which the two parsers disagree."""
    field: str
    rule_based: Any = None
    llm: Any = None


class IndexDifference(BaseModel):
    """Disagreement at a single position of the two outputs."""
    index: int
    missing_in: Optional[str] = Field(default=None, description="'rule-based' or 'LLM' when one side has no record here")
    changed_fields: List[FieldDifference] = Field(default_factory=list)


class ParserComparison(BaseModel):
    """Result of running both parsers on one input."""
    input: str
    rule_based: List[ParsedIngredient] = Field(default_factory=list)
    llm: List[ParsedIngredient] = Field(default_factory=list)
    length_mismatch: bool = False
    differences: List[IndexDifference] = Field(default_factory=list)
    expected: Optional[ParsedIngredient] = None
    matches_expected: Optional[bool] = None


class ParserTestReport(BaseModel):
    """All comparisons from one harness run."""
    comparisons: List[ParserComparison] = Field(default_factory=list)

    @property
    def total_differences(self) -> int:
        return sum(len(c.differences) for c in self.comparisons)


class CompareParsersResponse(BaseModel):
    """Structured report plus the rendered log of a comparison run."""
    report: ParserTestReport
    output: str
