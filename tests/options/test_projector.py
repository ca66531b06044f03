"""Tests for the option table projector."""

import pytest

from quote_app.data.models import (
    ContractType, FilterSpec, OptionContract, SortDirection, SortSpec, TypeFilter
)
from quote_app.options.projector import (
    compare_values, contract_value, distinct_expirations, filter_contracts,
    next_sort_spec, project, resolve_sort_key,
)


ASC = SortDirection.ASCENDING
DESC = SortDirection.DESCENDING


def contract(strike=None, type_=ContractType.CALL, expiration="2024-06-21", **kwargs):
    return OptionContract(symbol="IBM", type=type_, expiration=expiration, strike_price=strike, **kwargs)


class TestProject:
    """Filter then sort pipeline."""

    def test_calls_sorted_by_strike(self, sample_contracts):
        """Calls only, ascending strike."""
        view = project(sample_contracts, FilterSpec(type_filter=TypeFilter.CALLS),
                       SortSpec(key="strikePrice", direction=ASC))

        assert [c.strike_price for c in view] == ["100", "110"]
        assert all(c.type == ContractType.CALL for c in view)

    def test_puts_only(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(type_filter=TypeFilter.PUTS), SortSpec())
        assert [c.strike_price for c in view] == ["90"]
        assert all(c.type == ContractType.PUT for c in view)

    def test_all_types_kept(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(), SortSpec(key="strike_price"))
        assert [c.strike_price for c in view] == ["90", "100", "110"]

    def test_expiration_filter_exact_match(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(expiration="2024-06-21"), SortSpec())
        assert {c.expiration for c in view} == {"2024-06-21"}
        assert len(view) == 2

    def test_expiration_filter_no_match(self, sample_contracts):
        assert project(sample_contracts, FilterSpec(expiration="2030-01-01"), SortSpec()) == []

    def test_combined_filters(self, sample_contracts):
        view = project(
            sample_contracts,
            FilterSpec(type_filter=TypeFilter.CALLS, expiration="2024-07-19"),
            SortSpec(),
        )
        assert [c.strike_price for c in view] == ["110"]

    def test_descending(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(), SortSpec(key="strike_price", direction=DESC))
        assert [c.strike_price for c in view] == ["110", "100", "90"]

    def test_numeric_strings_compare_by_value(self):
        contracts = [contract("9.5"), contract("10"), contract("100"), contract("2")]
        view = project(contracts, FilterSpec(), SortSpec(key="strike_price"))
        assert [c.strike_price for c in view] == ["2", "9.5", "10", "100"]

    def test_adjacent_pairs_ordered(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(), SortSpec(key="last_price", direction=ASC))
        values = [float(c.last_price) for c in view]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_string_field_sorts_lexically(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(), SortSpec(key="expiration", direction=DESC))
        assert view[0].expiration == "2024-07-19"

    def test_sort_by_contract_type(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(), SortSpec(key="type", direction=DESC))
        assert view[0].type == ContractType.PUT

    @pytest.mark.parametrize("direction", [ASC, DESC])
    def test_missing_values_sort_last(self, direction):
        contracts = [contract(None, contract_id="a"), contract("5", contract_id="b"),
                     contract(None, contract_id="c"), contract("1", contract_id="d")]
        view = project(contracts, FilterSpec(), SortSpec(key="strike_price", direction=direction))

        assert [c.contract_id for c in view[2:]] == ["a", "c"]
        assert all(c.strike_price is not None for c in view[:2])

    def test_ties_keep_input_order(self):
        contracts = [contract("50", contract_id=str(i)) for i in range(5)]
        view = project(contracts, FilterSpec(), SortSpec(key="strike_price", direction=DESC))
        assert [c.contract_id for c in view] == ["0", "1", "2", "3", "4"]

    def test_unknown_key_preserves_order(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(), SortSpec(key="impliedVolatility"))
        assert view == sample_contracts

    @pytest.mark.parametrize("key", ["to_dict", "__init__", "__hash__", "__class__", "__dataclass_fields__"])
    @pytest.mark.parametrize("direction", [ASC, DESC])
    def test_non_field_attribute_key_preserves_order(self, key, direction):
        contracts = [
            OptionContract(symbol="ZZZ", type=ContractType.PUT, strike_price="1"),
            OptionContract(symbol="AAA", type=ContractType.CALL, strike_price="2"),
        ]
        view = project(contracts, FilterSpec(), SortSpec(key=key, direction=direction))
        assert view == contracts

    def test_ties_keep_input_order_ascending(self):
        contracts = [contract("50", contract_id=str(i)) for i in range(5)]
        view = project(contracts, FilterSpec(), SortSpec(key="strike_price", direction=ASC))
        assert [c.contract_id for c in view] == ["0", "1", "2", "3", "4"]

    def test_descending_ties_stay_stable_between_distinct_values(self):
        contracts = [contract("10", contract_id="a"), contract("20", contract_id="b"),
                     contract("10", contract_id="c"), contract("20", contract_id="d")]
        view = project(contracts, FilterSpec(), SortSpec(key="strike_price", direction=DESC))
        assert [c.contract_id for c in view] == ["b", "d", "a", "c"]

    def test_source_not_mutated(self, sample_contracts):
        original = list(sample_contracts)
        project(sample_contracts, FilterSpec(), SortSpec(key="strike_price", direction=DESC))
        assert sample_contracts == original

    def test_view_is_subset_without_duplicates(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(), SortSpec(key="bid"))
        ids = [id(c) for c in view]
        assert len(ids) == len(set(ids))
        assert set(ids) <= {id(c) for c in sample_contracts}

    def test_empty_input(self):
        assert project([], FilterSpec(type_filter=TypeFilter.CALLS), SortSpec()) == []

    def test_string_enum_values_accepted(self, sample_contracts):
        view = project(sample_contracts, FilterSpec(type_filter="PUTS"), SortSpec(direction="descending"))
        assert len(view) == 1


class TestHelpers:
    """Comparison, key resolution and filter helpers."""

    def test_compare_values_numeric(self):
        assert compare_values("9", "10") == -1
        assert compare_values("10", "9") == 1
        assert compare_values("1.0", "1") == 0

    def test_compare_values_mixed_falls_back_to_text(self):
        assert compare_values("10", "abc") == -1

    def test_resolve_sort_key(self):
        assert resolve_sort_key("strikePrice") == "strike_price"
        assert resolve_sort_key("openInterest") == "open_interest"
        assert resolve_sort_key("bid") == "bid"

    def test_contract_value(self, sample_contracts):
        assert contract_value(sample_contracts[0], "strikePrice") == "100"
        assert contract_value(sample_contracts[0], "type") == "CALL"
        assert contract_value(sample_contracts[0], "nonexistent") is None
        assert contract_value(sample_contracts[0], "to_dict") is None
        assert contract_value(sample_contracts[0], "__repr__") is None

    def test_filter_contracts_all(self, sample_contracts):
        assert filter_contracts(sample_contracts, FilterSpec()) == sample_contracts


class TestDistinctExpirations:
    """Expiration selector population."""

    def test_sorted_and_unique(self, sample_contracts):
        assert distinct_expirations(sample_contracts) == ["2024-06-21", "2024-07-19"]

    def test_ignores_missing(self):
        contracts = [contract("1", expiration=None), contract("2", expiration="2024-09-20"),
                     contract("3", expiration="2024-08-16"), contract("4", expiration="2024-09-20")]
        assert distinct_expirations(contracts) == ["2024-08-16", "2024-09-20"]

    def test_empty(self):
        assert distinct_expirations([]) == []


class TestNextSortSpec:
    """Column header toggling."""

    def test_same_key_ascending_flips(self):
        spec = next_sort_spec(SortSpec(key="strike_price", direction=ASC), "strikePrice")
        assert spec == SortSpec(key="strike_price", direction=DESC)

    def test_same_key_descending_returns_to_ascending(self):
        spec = next_sort_spec(SortSpec(key="bid", direction=DESC), "bid")
        assert spec == SortSpec(key="bid", direction=ASC)

    def test_new_key_starts_ascending(self):
        spec = next_sort_spec(SortSpec(key="bid", direction=DESC), "ask")
        assert spec == SortSpec(key="ask", direction=ASC)
