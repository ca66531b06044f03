"""
Option table projection: type filter, expiration filter and sort.

Contract values are feed text, so comparisons decide per pair whether to
compare numerically or as locale-collated strings. Every function here is
pure and leaves the caller's contract list untouched.
"""

import locale
from collections.abc import Iterable, Sequence
from dataclasses import fields
from enum import Enum
from functools import cmp_to_key
from typing import Any, Optional

from ..data.models import (
    ContractType,
    FilterSpec,
    OptionContract,
    SortDirection,
    SortSpec,
    TypeFilter,
)
from ..data.validators import is_numeric_text

# camelCase column names used by the front end -> OptionContract attributes
SORT_KEY_ALIASES = {
    "strikePrice": "strike_price",
    "lastPrice": "last_price",
    "openInterest": "open_interest",
    "contractID": "contract_id",
    "contractName": "contract_id",
    "contractType": "type",
}

_TYPE_FOR_FILTER = {
    TypeFilter.CALLS: ContractType.CALL,
    TypeFilter.PUTS: ContractType.PUT,
}

# Only declared fields are sortable; methods and dunders are not columns
_SORTABLE_FIELDS = frozenset(f.name for f in fields(OptionContract))


def resolve_sort_key(key: str) -> str:
    """Map a front-end column name to the contract attribute it sorts on."""
    return SORT_KEY_ALIASES.get(key, key)


def contract_value(contract: OptionContract, key: str) -> Optional[str]:
    """Value of a contract field as text, None when absent or unknown."""
    name = resolve_sort_key(key)
    if name not in _SORTABLE_FIELDS:
        return None

    value: Any = getattr(contract, name)
    if isinstance(value, Enum):
        return value.value
    return value


def compare_values(a: str, b: str) -> int:
    """
    Three-way compare of two feed values.

    Numeric strings compare by value; anything else compares with the
    current locale's collation.
    """
    if is_numeric_text(a) and is_numeric_text(b):
        x, y = float(a), float(b)
        return (x > y) - (x < y)

    result = locale.strcoll(str(a), str(b))
    return (result > 0) - (result < 0)


def filter_contracts(contracts: Iterable[OptionContract], filter_spec: FilterSpec) -> list[OptionContract]:
    """Apply the type filter, then the exact-match expiration filter."""
    wanted_type = _TYPE_FOR_FILTER.get(TypeFilter(filter_spec.type_filter))

    filtered = [c for c in contracts if wanted_type is None or c.type == wanted_type]

    if filter_spec.expiration:
        filtered = [c for c in filtered if c.expiration == filter_spec.expiration]

    return filtered


def sort_contracts(contracts: Iterable[OptionContract], sort_spec: SortSpec) -> list[OptionContract]:
    """
    Stable sort by sort_spec.key.

    Contracts without a value for the key go last in input order, whichever
    direction is requested.
    """
    valued = []
    missing = []
    for contract in contracts:
        if contract_value(contract, sort_spec.key) is None:
            missing.append(contract)
        else:
            valued.append(contract)

    sign = -1 if SortDirection(sort_spec.direction) is SortDirection.DESCENDING else 1

    def compare(a: OptionContract, b: OptionContract) -> int:
        return sign * compare_values(contract_value(a, sort_spec.key), contract_value(b, sort_spec.key))

    return sorted(valued, key=cmp_to_key(compare)) + missing


def project(
    contracts: Sequence[OptionContract],
    filter_spec: FilterSpec,
    sort_spec: SortSpec
) -> list[OptionContract]:
    """
    Produce the option table view: filter by type and expiration, then sort.

    Args:
        contracts: Most recently fetched contracts (not modified)
        filter_spec: Type and expiration filters
        sort_spec: Sort key and direction

    Returns:
        New list holding a subset of the input contracts
    """
    return sort_contracts(filter_contracts(contracts, filter_spec), sort_spec)


def distinct_expirations(contracts: Iterable[OptionContract]) -> list[str]:
    """Unique expiration dates across all contracts, ascending."""
    return sorted({c.expiration for c in contracts if c.expiration is not None})


def next_sort_spec(current: SortSpec, key: str) -> SortSpec:
    """
    Sort spec after a column header is chosen.

    Choosing the active column while ascending flips it to descending; any
    other choice sorts the chosen column ascending.
    """
    key = resolve_sort_key(key)
    if resolve_sort_key(current.key) == key and SortDirection(current.direction) is SortDirection.ASCENDING:
        return SortSpec(key=key, direction=SortDirection.DESCENDING)
    return SortSpec(key=key, direction=SortDirection.ASCENDING)
