"""
Parser Differential Harness

Runs the rule-based parser and a prompt-driven parser on the same input and
reports, field by field, where they disagree. Used by the test suite and by
the parser comparison endpoint.

Every entry is written to a sink rather than printed, so a caller can
collect a run's output for display without touching global logging.
"""

import json
import logging
from typing import Any, List, Optional, Protocol, Sequence, Tuple

from ..core.config import settings
from ..schemas.harness_schemas import (
    FieldDifference,
    IndexDifference,
    ParserComparison,
    ParserTestCase,
    ParserTestReport,
)
from ..schemas.ingredient_schemas import ParsedIngredient, ParserKind
from .base_parser import IngredientTextParser
from .llm_parsers import get_ingredient_parser
from .rule_based_parser import parse_ingredients_with_rules

logger = logging.getLogger(__name__)

COMPARED_FIELDS = ("quantity", "unit", "item", "notes")

STANDARD_TEST_CASES: List[ParserTestCase] = [
    ParserTestCase(
        input="2 cups flour",
        expected=ParsedIngredient(quantity=2, unit="cups", item="flour"),
    ),
    ParserTestCase(
        input="1/2 tablespoon salt",
        expected=ParsedIngredient(quantity=0.5, unit="tablespoon", item="salt"),
    ),
    ParserTestCase(
        input="3-4 large eggs, beaten",
        expected=ParsedIngredient(quantity=4, unit="", item="large eggs", notes="beaten"),
    ),
]


# =============================================================================
# Sinks
# =============================================================================

class ComparisonSink(Protocol):
    def write(self, message: str, data: Any = None) -> None:
        ...


class LoggingSink:
    """Forwards harness entries to this module's logger."""

    def write(self, message: str, data: Any = None) -> None:
        if data is None:
            logger.info("%s", message)
        else:
            logger.info("%s %s", message, json.dumps(data, default=str))


class CollectingSink:
    """Keeps harness entries in memory for display."""

    def __init__(self):
        self.entries: List[Tuple[str, Any]] = []

    def write(self, message: str, data: Any = None) -> None:
        self.entries.append((message, data))

    def render(self) -> str:
        lines = []
        for message, data in self.entries:
            if data is None:
                lines.append(message)
            else:
                lines.append(f"{message} {json.dumps(data, indent=2, default=str)}")
        return "\n".join(lines)


# =============================================================================
# Diffing
# =============================================================================

def diff_parser_outputs(
    rule_based: Sequence[ParsedIngredient],
    llm: Sequence[ParsedIngredient],
) -> Tuple[bool, List[IndexDifference]]:
    """
    Compare two parser outputs index by index.

    Positions present on only one side are reported as missing on the
    other; positions present on both list the compared fields that differ.

    Returns:
        Tuple of (length_mismatch, differences)
    """
    length_mismatch = len(rule_based) != len(llm)
    differences = []

    for index in range(max(len(rule_based), len(llm))):
        rule_item = rule_based[index] if index < len(rule_based) else None
        llm_item = llm[index] if index < len(llm) else None

        if rule_item is None or llm_item is None:
            differences.append(
                IndexDifference(index=index, missing_in="rule-based" if rule_item is None else "LLM")
            )
            continue

        fields = [
            FieldDifference(field=name, rule_based=getattr(rule_item, name), llm=getattr(llm_item, name))
            for name in COMPARED_FIELDS
            if getattr(rule_item, name) != getattr(llm_item, name)
        ]
        if fields:
            differences.append(IndexDifference(index=index, changed_fields=fields))

    return length_mismatch, differences


def _matches_expected(records: Sequence[ParsedIngredient], expected: ParsedIngredient) -> bool:
    if len(records) != 1:
        return False
    return all(getattr(records[0], name) == getattr(expected, name) for name in COMPARED_FIELDS)


async def compare_parser_outputs(
    text: str,
    llm_parser: IngredientTextParser,
    sink: ComparisonSink,
    expected: Optional[ParsedIngredient] = None,
) -> ParserComparison:
    """Run both parsers on ``text`` and write the comparison to ``sink``."""
    sink.write(f"Testing Input: {text}")

    rule_output = parse_ingredients_with_rules(text)
    sink.write("Rule-based Output:", [i.model_dump() for i in rule_output])

    llm_output = await llm_parser.parse(text)
    sink.write("LLM Output:", [i.model_dump() for i in llm_output])

    length_mismatch, differences = diff_parser_outputs(rule_output, llm_output)

    sink.write("Differences:")
    if length_mismatch:
        sink.write(f"Length mismatch: Rule-based ({len(rule_output)}) vs LLM ({len(llm_output)})")
    for difference in differences:
        if difference.missing_in:
            sink.write(f"Index {difference.index}: Missing in {difference.missing_in} parser")
        else:
            sink.write(
                f"Index {difference.index} differences:",
                {f.field: {"ruleBased": f.rule_based, "llm": f.llm} for f in difference.changed_fields},
            )

    comparison = ParserComparison(
        input=text,
        rule_based=rule_output,
        llm=llm_output,
        length_mismatch=length_mismatch,
        differences=differences,
    )
    if expected is not None:
        comparison.expected = expected
        comparison.matches_expected = _matches_expected(rule_output, expected)
    return comparison


async def run_parser_tests(
    custom_input: Optional[str] = None,
    llm_parser: Optional[IngredientTextParser] = None,
    sink: Optional[ComparisonSink] = None,
    cases: Optional[Sequence[ParserTestCase]] = None,
) -> ParserTestReport:
    """
    Compare the rule-based parser against a prompt-driven parser.

    Args:
        custom_input: Ingredients text to compare; the built-in cases run when omitted
        llm_parser: Parser to compare against; the configured default LLM parser when omitted
        sink: Where comparison entries are written; the module logger when omitted
        cases: Overrides the built-in test cases

    Returns:
        ParserTestReport with one comparison per input
    """
    if llm_parser is None:
        kind = settings.default_parser if settings.default_parser != ParserKind.RULES else ParserKind.GEMINI
        llm_parser = get_ingredient_parser(kind)
    if sink is None:
        sink = LoggingSink()

    report = ParserTestReport()

    if custom_input:
        report.comparisons.append(await compare_parser_outputs(custom_input, llm_parser, sink))
        return report

    sink.write("Running standard test cases...")
    for case in cases if cases is not None else STANDARD_TEST_CASES:
        report.comparisons.append(
            await compare_parser_outputs(case.input, llm_parser, sink, expected=case.expected)
        )

    return report
