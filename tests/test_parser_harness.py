"""
Tests for the parser differential harness.

Run with:
    pytest tests/test_parser_harness.py -v
"""

import asyncio
import logging
from typing import List

from meal_planner.schemas.harness_schemas import IndexDifference, ParserTestCase
from meal_planner.schemas.ingredient_schemas import ParsedIngredient
from meal_planner.services.base_parser import IngredientTextParser
from meal_planner.services.parser_harness import (
    STANDARD_TEST_CASES,
    CollectingSink,
    diff_parser_outputs,
    run_parser_tests,
)
from meal_planner.services.rule_based_parser import parse_ingredients_with_rules


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class EchoParser(IngredientTextParser):
    """Agrees with the rule-based parser on everything."""

    name = "echo"

    def __init__(self):
        self.calls: List[str] = []

    async def parse(self, text):
        self.calls.append(text)
        return parse_ingredients_with_rules(text)


class StaticParser(IngredientTextParser):
    name = "static"

    def __init__(self, records):
        self.records = records

    async def parse(self, text):
        return list(self.records)


def _messages(sink):
    return [message for message, _ in sink.entries]


# ---------------------------------------------------------------------------
# diff_parser_outputs
# ---------------------------------------------------------------------------

def test_diff_identical_outputs():
    records = parse_ingredients_with_rules("2 cups flour\n1 egg")
    length_mismatch, differences = diff_parser_outputs(records, list(records))
    assert length_mismatch is False
    assert differences == []


def test_diff_reports_field_differences_only():
    rule_based = [ParsedIngredient(quantity=2, unit="cups", item="flour", category="Pantry")]
    llm = [ParsedIngredient(quantity=2.0, unit="cup", item="flour", notes="sifted", category="Baking")]

    _, [difference] = diff_parser_outputs(rule_based, llm)

    assert difference.index == 0
    assert difference.missing_in is None
    assert {f.field for f in difference.changed_fields} == {"unit", "notes"}


def test_diff_missing_in_rule_based():
    llm = parse_ingredients_with_rules("1 egg")
    length_mismatch, differences = diff_parser_outputs([], llm)
    assert length_mismatch is True
    assert differences == [IndexDifference(index=0, missing_in="rule-based")]


# ---------------------------------------------------------------------------
# run_parser_tests
# ---------------------------------------------------------------------------

def test_custom_input_with_agreeing_parsers_reports_no_differences():
    sink = CollectingSink()
    parser = EchoParser()

    report = asyncio.run(run_parser_tests("2 cups flour\nsalt and pepper to taste", llm_parser=parser, sink=sink))

    assert parser.calls == ["2 cups flour\nsalt and pepper to taste"]
    [comparison] = report.comparisons
    assert comparison.length_mismatch is False
    assert comparison.differences == []
    assert report.total_differences == 0
    assert "Differences:" in _messages(sink)
    assert not any(m.startswith("Index") for m in _messages(sink))


def test_length_mismatch_reports_missing_tail():
    text = "2 cups flour\n1 egg\n1 cup milk"
    shorter = parse_ingredients_with_rules(text)[:2]
    sink = CollectingSink()

    report = asyncio.run(run_parser_tests(text, llm_parser=StaticParser(shorter), sink=sink))

    [comparison] = report.comparisons
    assert len(comparison.rule_based) == 3
    assert len(comparison.llm) == 2
    assert comparison.length_mismatch is True
    assert comparison.differences == [IndexDifference(index=2, missing_in="LLM")]
    assert "Length mismatch: Rule-based (3) vs LLM (2)" in _messages(sink)
    assert "Index 2: Missing in LLM parser" in _messages(sink)


def test_field_differences_are_written_to_sink():
    llm = [ParsedIngredient(quantity=2, unit="cups", item="all-purpose flour")]
    sink = CollectingSink()

    asyncio.run(run_parser_tests("2 cups flour", llm_parser=StaticParser(llm), sink=sink))

    [(message, data)] = [entry for entry in sink.entries if entry[0].startswith("Index")]
    assert message == "Index 0 differences:"
    assert data == {"item": {"ruleBased": "flour", "llm": "all-purpose flour"}}
    assert '"llm": "all-purpose flour"' in sink.render()


def test_standard_cases_run_when_no_input():
    sink = CollectingSink()
    parser = EchoParser()

    report = asyncio.run(run_parser_tests(llm_parser=parser, sink=sink))

    assert _messages(sink)[0] == "Running standard test cases..."
    assert parser.calls == [case.input for case in STANDARD_TEST_CASES]
    assert len(report.comparisons) == len(STANDARD_TEST_CASES)
    assert all(c.matches_expected for c in report.comparisons)


def test_custom_cases_flag_expected_mismatch():
    cases = [
        ParserTestCase(
            input="2 cups flour",
            expected=ParsedIngredient(quantity=3, unit="cups", item="flour"),
        )
    ]
    report = asyncio.run(run_parser_tests(llm_parser=EchoParser(), sink=CollectingSink(), cases=cases))
    assert report.comparisons[0].matches_expected is False


def test_default_sink_logs(caplog):
    with caplog.at_level(logging.INFO, logger="meal_planner.services.parser_harness"):
        asyncio.run(run_parser_tests("2 cups flour", llm_parser=EchoParser()))
    assert "Testing Input: 2 cups flour" in caplog.text


def test_concurrent_runs_do_not_share_output():
    async def both():
        first, second = CollectingSink(), CollectingSink()
        await asyncio.gather(
            run_parser_tests("2 cups flour", llm_parser=EchoParser(), sink=first),
            run_parser_tests("1 egg", llm_parser=EchoParser(), sink=second),
        )
        return first, second

    first, second = asyncio.run(both())
    assert _messages(first)[0] == "Testing Input: 2 cups flour"
    assert _messages(second)[0] == "Testing Input: 1 egg"
    assert not any("1 egg" in m for m in _messages(first))
