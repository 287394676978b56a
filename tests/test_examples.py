"""
Test the example calculators against the example configuration.

Validates that each calculator reads its containers through the query
operations and produces the expected running totals.
"""

import pytest

from statictypes.containers import HeterogeneousList, KeyValueMap, OrderedList, TextList
from statictypes.errors import KeyNotFoundError, OutOfRangeError
from statictypes.examples import (
    CoefficientCalculator,
    GroupedCalculator,
    PairedCalculator,
    build_example_groupdefs,
    compute_total,
)


def test_coefficient_calculator():
    assert CoefficientCalculator().update() == pytest.approx(2.4312)


def test_paired_calculator_running_totals():
    calc = PairedCalculator()
    assert calc.update() == pytest.approx(2.25)
    assert calc.values == pytest.approx([0.5, 1.5, 1.75, 2.25])


def test_paired_calculator_is_repeatable():
    calc = PairedCalculator()
    calc.update()
    assert calc.update() == pytest.approx(2.25)
    assert len(calc.values) == 4


def test_grouped_calculator():
    calc = GroupedCalculator()
    assert calc.update() == pytest.approx(0.75)
    # "chicken" has no "baz" members, so its two terms add nothing
    assert calc.values == pytest.approx([0.0, 0.0, 0.5, 0.75])


def test_grouped_calculator_counts_sentinel_members():
    calc = GroupedCalculator()
    assert calc.count_members("chicken") == 0
    assert calc.count_members("beef") == 1


def test_grouped_calculator_unknown_group():
    calc = GroupedCalculator(groups=TextList(("chicken", "pork")))
    with pytest.raises(KeyNotFoundError):
        calc.update()


def test_grouped_calculator_custom_config():
    groupdefs = KeyValueMap({"a": TextList(("x", "x", "y"))})
    calc = GroupedCalculator(
        groups=TextList(("a",)),
        groupdefs=groupdefs,
        coefs=OrderedList((1.0,)),
        sentinel="x",
    )
    assert calc.update() == pytest.approx(2.0)


def test_empty_product_has_no_result():
    calc = PairedCalculator(coefs=OrderedList((), value_type=float))
    with pytest.raises(OutOfRangeError):
        calc.update()


def test_example_groupdefs():
    groupdefs = build_example_groupdefs()
    assert groupdefs.keys() == ("chicken", "beef")
    assert groupdefs.get("beef", 0) == "baz"


def test_visit_calculators():
    calculators = HeterogeneousList.of_types(CoefficientCalculator, PairedCalculator)
    results = []
    calculators.visit(lambda calc: results.append(calc.update()))
    assert results == pytest.approx([2.4312, 2.25])


def test_visit_single_calculator():
    calculators = HeterogeneousList.of_types(CoefficientCalculator, PairedCalculator)
    results = []
    calculators.visit(lambda calc: results.append(calc.update()), 1)
    assert results == pytest.approx([2.25])


def test_compute_total():
    # 2.4312 + 2.25 + 0.75, then 2.4312 + 2.25 again from the visit
    assert compute_total() == pytest.approx(10.1124)
