"""
Example aggregation clients built on the fixed-content containers.

Three calculators read their configuration only through the container
query operations (size / at / get / visit):
    - CoefficientCalculator: sums a list of coefficients
    - PairedCalculator: running weighted sum over coefficient x identifier pairs
    - GroupedCalculator: counts sentinel members per group, weights by coefficients

Every calculator is default-constructible with the example configuration,
so a HeterogeneousList can build and visit them.
"""
from typing import List, Optional

from statictypes.containers import HeterogeneousList, KeyValueMap, OrderedList, TextList
from statictypes.errors import OutOfRangeError


DEFAULT_COEFS = (0.9999, 0.998, 0.9333, 0.5)
PAIRED_COEFS = (0.5, 0.25)
PAIRED_IDS = (1, 2)
GROUPS = ("chicken", "beef")
GROUP_MEMBERS = {
    "chicken": ("foo", "bar"),
    "beef": ("baz", "bat"),
}
SENTINEL = "baz"


def build_example_groupdefs() -> KeyValueMap:
    return KeyValueMap({name: TextList(members) for name, members in GROUP_MEMBERS.items()})


def _last_running_total(values: List[float]) -> float:
    if not values:
        raise OutOfRangeError(-1, 0, "running totals")
    return values[-1]


class CoefficientCalculator:
    """Sums every coefficient in an OrderedList."""

    def __init__(self, coefs: Optional[OrderedList] = None):
        self.coefs = coefs if coefs is not None else OrderedList(DEFAULT_COEFS, value_type=float)

    def update(self) -> float:
        total = 0.0
        for i in range(self.coefs.size()):
            total += self.coefs.at(i)
        return total


class PairedCalculator:
    """
    Running weighted sum over the Cartesian product of coefs and ids.

    Pairs are taken in (i, j) order, i over coefs and j over ids, each
    adding coefs[i] * ids[j]. Every running total is kept in `values`;
    update() returns the last one.
    """

    def __init__(self, coefs: Optional[OrderedList] = None, ids: Optional[OrderedList] = None):
        self.coefs = coefs if coefs is not None else OrderedList(PAIRED_COEFS, value_type=float)
        self.ids = ids if ids is not None else OrderedList(PAIRED_IDS, value_type=int)
        self.values: List[float] = []

    def update(self) -> float:
        total = 0.0
        self.values = []
        for i in range(self.coefs.size()):
            for j in range(self.ids.size()):
                total += self.coefs.at(i) * self.ids.at(j)
                self.values.append(total)
        return _last_running_total(self.values)


class GroupedCalculator:
    """
    Weights the number of sentinel members in each group by every coefficient.

    For each group name (in order), counts the members of that group's
    list in `groupdefs` equal to `sentinel`, then adds count * coefs[j]
    to the running total for each coefficient j.
    """

    def __init__(
        self,
        groups: Optional[TextList] = None,
        groupdefs: Optional[KeyValueMap] = None,
        coefs: Optional[OrderedList] = None,
        sentinel: str = SENTINEL,
    ):
        self.groups = groups if groups is not None else TextList(GROUPS)
        self.groupdefs = groupdefs if groupdefs is not None else build_example_groupdefs()
        self.coefs = coefs if coefs is not None else OrderedList(PAIRED_COEFS, value_type=float)
        self.sentinel = sentinel
        self.values: List[float] = []

    def count_members(self, group: str) -> int:
        count = 0
        for n in range(self.groupdefs.size(group)):
            if self.groupdefs.get(group, n) == self.sentinel:
                count += 1
        return count

    def update(self) -> float:
        total = 0.0
        self.values = []
        for i in range(self.groups.size()):
            count = self.count_members(self.groups.at(i))
            for j in range(self.coefs.size()):
                total += count * self.coefs.at(j)
                self.values.append(total)
        return _last_running_total(self.values)


def compute_total() -> float:
    """
    Run all three example calculators, then visit a heterogeneous list of
    a coefficient and a paired calculator and add their results as well.
    """
    total = CoefficientCalculator().update()
    total += PairedCalculator().update()
    total += GroupedCalculator().update()

    revisited = 0.0

    def accumulate(calculator) -> None:
        nonlocal revisited
        revisited += calculator.update()

    calculators = HeterogeneousList.of_types(CoefficientCalculator, PairedCalculator)
    calculators.visit(accumulate)

    return total + revisited
