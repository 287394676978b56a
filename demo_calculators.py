"""
Demo: Run the example calculators and print their results.
"""

from statictypes.analyzer import analyze_map
from statictypes.examples import (
    CoefficientCalculator,
    GroupedCalculator,
    PairedCalculator,
    build_example_groupdefs,
    compute_total,
)
from statictypes.serialization import container_to_yaml


def print_results():
    """Pretty-print each calculator's running totals and the combined total."""
    print()
    print("=" * 70)
    print("EXAMPLE CALCULATORS")
    print("=" * 70)
    print()

    print(f"  Coefficient sum:       {CoefficientCalculator().update():.4f}")

    paired = PairedCalculator()
    paired.update()
    print(f"  Paired running totals: {', '.join(f'{v:.4f}' for v in paired.values)}")

    grouped = GroupedCalculator()
    grouped.update()
    print(f"  Grouped running totals:{', '.join(f'{v:.4f}' for v in grouped.values)}")
    print()

    print(f"  Combined total:        {compute_total():.4f}")
    print()


if __name__ == "__main__":
    print_results()

    groupdefs = build_example_groupdefs()
    report = analyze_map(groupdefs)
    if report.warnings:
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("NO WARNINGS - group definitions look clean!")
    print()

    print(container_to_yaml(groupdefs))
