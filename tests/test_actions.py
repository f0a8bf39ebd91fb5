import pytest

from counter.actions import CounterAction, CounterResult, apply_action
from counter.exceptions import CounterError, InvalidActionError, InvalidCounterInput, MissingDefaultError
from counter.services import counter_url, parse_count, resolve_count
from tests.utils import stored_default


class TestCounterAction:
    """Tests for parsing action labels into the closed action set."""

    @pytest.mark.parametrize("label, expected", [
        ("inc", CounterAction.INC),
        ("dec", CounterAction.DEC),
        ("default", CounterAction.DEFAULT),
        ("set-default", CounterAction.SET_DEFAULT),
    ])
    def test_known_labels(self, label, expected):
        assert CounterAction.parse(label) is expected

    @pytest.mark.parametrize("label", ["frobnicate", "", "INC", "set_default"])
    def test_unknown_labels(self, label):
        with pytest.raises(InvalidActionError) as excinfo:
            CounterAction.parse(label)
        assert str(excinfo.value) == f"{label} is not a valid action"
        assert isinstance(excinfo.value, CounterError)


class TestApplyAction:
    """Tests for computing the next count and the redirect query."""

    @pytest.mark.parametrize("n", [-5, 0, 41, 2**40])
    def test_inc_and_dec(self, n):
        assert apply_action(n, "inc") == CounterResult(count=n + 1, query_count=n + 1)
        assert apply_action(n, "dec") == CounterResult(count=n - 1, query_count=n - 1)

    def test_default_defers_to_store(self, default_count):
        default_count(10)
        result = apply_action(99, "default")
        assert result.query_count is None
        assert result.count is None
        assert result.resolved_count() == 10

    def test_set_default_persists(self, default_count):
        default_count(10)
        result = apply_action(4, CounterAction.SET_DEFAULT)
        assert result == CounterResult(count=4, query_count=None)
        assert stored_default() == 4
        assert apply_action(0, "default").resolved_count() == 4

    def test_invalid_action_leaves_store_untouched(self, default_count):
        default_count(10)
        with pytest.raises(InvalidActionError):
            apply_action(3, "frobnicate")
        assert stored_default() == 10


class TestResolveAndUrls:
    """Tests for count resolution, parsing and URL building."""

    def test_explicit_count_wins(self):
        # no database access needed
        assert resolve_count(5) == 5
        assert resolve_count(0) == 0

    def test_falls_back_to_store(self, default_count):
        default_count(12)
        assert resolve_count() == 12

    def test_missing_default_is_reported(self, empty_settings):
        with pytest.raises(MissingDefaultError, match="No `DefaultCount` in database"):
            resolve_count()

    @pytest.mark.parametrize("raw, expected", [("5", 5), ("-2", -2), (" 7 ", 7), ("abc", None), (None, None), ("", None)])
    def test_parse_count(self, raw, expected):
        assert parse_count(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "1.5", "eleven"])
    def test_parse_count_required(self, raw):
        with pytest.raises(InvalidCounterInput):
            parse_count(raw, required=True)

    def test_counter_url_is_relative_to_base(self):
        assert counter_url("/my/cool/counter") == "/my/cool/counter"
        assert counter_url("/my/cool/counter", 11) == "/my/cool/counter?count=11"
        assert counter_url("/elsewhere/counter", -1) == "/elsewhere/counter?count=-1"


class TestCountRange:
    """Tests for keeping counts inside the signed 64-bit range of the store."""

    @pytest.mark.parametrize("raw", [str(2**63), str(-2**63 - 1), str(2**70)])
    def test_out_of_range_required_count(self, raw):
        with pytest.raises(InvalidCounterInput, match="outside the range"):
            parse_count(raw, required=True)

    def test_out_of_range_query_count_is_ignored(self):
        assert parse_count(str(2**63)) is None
        assert parse_count(str(2**63 - 1)) == 2**63 - 1

    def test_inc_past_max(self):
        with pytest.raises(InvalidCounterInput):
            apply_action(2**63 - 1, "inc")

    def test_dec_past_min(self):
        with pytest.raises(InvalidCounterInput):
            apply_action(-2**63, "dec")

    def test_bounds_are_reachable(self):
        assert apply_action(2**63 - 2, "inc").count == 2**63 - 1
        assert apply_action(-2**63 + 1, "dec").count == -2**63
