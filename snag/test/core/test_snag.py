"""Tests for snag.core.snag module."""

from __future__ import annotations

import copy
import pickle

import pytest

from snag.core.render import line_print, pretty_print
from snag.core.result import Err, Ok, Result
from snag.core.snag import Snag, context, error, layer, map_error, new


class TestNew:
    """Tests for new() and error()."""

    def test_new_has_no_cause(self) -> None:
        snag = new("Directory not writable")
        assert snag.issue == "Directory not writable"
        assert snag.cause == ()

    def test_new_accepts_empty_issue(self) -> None:
        assert new("").issue == ""

    def test_error_wraps_fresh_snag(self) -> None:
        result: Result[int, Snag] = error("boom")
        assert result == Err(new("boom"))


class TestConstructor:
    """Tests for building a Snag from an issue and a cause sequence."""

    def test_empty_cause_list(self) -> None:
        snag = Snag("X", [])
        assert snag == new("X")
        assert pretty_print(snag) == "error: X\n"
        assert line_print(snag) == "error: X"

    def test_positional_cause_tuple(self) -> None:
        snag = Snag("B", ("A",))
        assert snag.cause == ("A",)
        assert pretty_print(snag) == "error: B\n\ncause:\n  0: A\n"

    def test_keyword_cause(self) -> None:
        snag = Snag(issue="Save failed", cause=("Could not open file", "Directory not writable"))
        assert snag.issue == "Save failed"
        assert snag.cause == ("Could not open file", "Directory not writable")

    def test_cause_from_generator(self) -> None:
        assert Snag("top", (f"c{i}" for i in range(3))).cause == ("c0", "c1", "c2")

    def test_matches_layering(self) -> None:
        built = new("Directory not writable").layer("Could not open file").layer("Save failed")
        assert built == Snag("Save failed", ["Could not open file", "Directory not writable"])

    def test_single_string_cause_rejected(self) -> None:
        with pytest.raises(TypeError, match="not a single str"):
            Snag("B", "A")

    def test_link_is_not_a_constructor_argument(self) -> None:
        with pytest.raises(TypeError):
            Snag("B", below=new("A"))  # type: ignore[call-arg]


class TestLayer:
    """Tests for layer()."""

    def test_layer_moves_issue_into_cause(self) -> None:
        snag = layer(new("A"), "B")
        assert snag.issue == "B"
        assert snag.cause == ("A",)

    def test_layer_prepends_exactly_one_entry(self) -> None:
        base = Snag("C", ["B", "A"])
        layered = layer(base, "D")
        assert layered.issue == "D"
        assert layered.cause == (base.issue, *base.cause)
        assert len(layered.cause) == len(base.cause) + 1

    def test_layer_leaves_original_untouched(self) -> None:
        base = new("A")
        layer(base, "B")
        layer(base, "C")
        assert base == new("A")

    def test_branches_share_history_independently(self) -> None:
        base = new("root")
        left = layer(base, "left")
        right = layer(base, "right")
        assert left.cause == ("root",)
        assert right.cause == ("root",)
        assert left != right

    def test_method_form_matches_function(self) -> None:
        assert new("A").layer("B") == layer(new("A"), "B")

    def test_deep_chain_keeps_order(self) -> None:
        snag = new("0")
        for i in range(1, 5000):
            snag = layer(snag, str(i))
        assert snag.issue == "4999"
        assert snag.cause[0] == "4998"
        assert snag.cause[-1] == "0"
        assert len(snag) == 5000


class TestSnagValue:
    """Tests for Snag value semantics."""

    def test_equality_is_by_value(self) -> None:
        assert new("A").layer("B") == Snag("B", ["A"])
        assert new("A").layer("B") != Snag("B", ["X"])
        assert new("A") != new("A").layer("A")

    def test_not_equal_to_other_types(self) -> None:
        assert new("A") != "A"

    def test_hash_follows_equality(self) -> None:
        snags = {new("A").layer("B"), Snag("B", ["A"])}
        assert len(snags) == 1

    def test_frozen(self) -> None:
        snag = new("A")
        with pytest.raises(AttributeError):
            snag.issue = "B"  # type: ignore[misc]

    def test_root_cause(self) -> None:
        assert new("A").root_cause == "A"
        assert new("A").layer("B").layer("C").root_cause == "A"

    def test_len_counts_layers(self) -> None:
        assert len(new("A")) == 1
        assert len(new("A").layer("B").layer("C")) == 3

    def test_repr(self) -> None:
        assert repr(new("A").layer("B")) == "Snag(issue='B', cause=('A',))"

    def test_str_is_line_rendering(self) -> None:
        assert str(new("A").layer("B")) == "error: B <- A"

    def test_pattern_matching(self) -> None:
        match new("A").layer("B"):
            case Snag(issue, cause):
                assert issue == "B"
                assert cause == ("A",)


class TestCopying:
    """Pickling and copying rebuild the chain without recursion."""

    @pytest.fixture
    def deep(self) -> Snag:
        snag = new("root")
        for i in range(5000):
            snag = snag.layer(f"layer {i}")
        return snag

    def test_pickle_round_trip(self) -> None:
        snag = Snag("Save failed", ["Could not open file", "Directory not writable"])
        assert pickle.loads(pickle.dumps(snag)) == snag

    def test_pickle_deep_chain(self, deep: Snag) -> None:
        restored = pickle.loads(pickle.dumps(deep))
        assert restored == deep
        assert restored.root_cause == "root"

    def test_deepcopy_deep_chain(self, deep: Snag) -> None:
        assert copy.deepcopy(deep) == deep

    def test_copy(self) -> None:
        snag = new("A").layer("B")
        assert copy.copy(snag) == snag


class TestContext:
    """Tests for context()."""

    def test_ok_is_returned_unchanged(self) -> None:
        result: Result[int, Snag] = Ok(7)
        assert context(result, "ignored") is result

    def test_err_gets_new_layer(self) -> None:
        result = context(error("A"), "B")
        assert result == Err(Snag("B", ("A",)))

    def test_chained_context_reads_outward(self) -> None:
        result = context(context(error("Directory not writable"), "Could not open file"), "Save failed")
        assert isinstance(result, Err)
        assert result.error.issue == "Save failed"
        assert result.error.cause == ("Could not open file", "Directory not writable")


class TestMapError:
    """Tests for map_error()."""

    def test_ok_skips_describer(self) -> None:
        calls: list[int] = []

        def describer(code: int) -> str:
            calls.append(code)
            return "never"

        result: Result[str, int] = Ok("done")
        assert map_error(result, describer) == Ok("done")
        assert calls == []

    def test_err_becomes_root_snag(self) -> None:
        result: Result[str, int] = Err(13)
        assert map_error(result, lambda code: f"exit status {code}") == Err(Snag("exit status 13", []))

    def test_describer_called_once(self) -> None:
        calls: list[OSError] = []

        def describer(exc: OSError) -> str:
            calls.append(exc)
            return exc.strerror or "unknown"

        exc = OSError(2, "No such file or directory")
        result: Result[bytes, OSError] = Err(exc)
        mapped = map_error(result, describer)
        assert mapped == Err(new("No such file or directory"))
        assert calls == [exc]

    def test_then_context(self) -> None:
        result: Result[str, int] = Err(1)
        layered = context(map_error(result, lambda code: f"exit status {code}"), "Build failed")
        assert layered == Err(Snag("Build failed", ["exit status 1"]))
