"""Tests for ListValueMap."""

import pytest as _pytest

import manymap.maps as maps


class TestConstruction:
    """Constructor and of()."""

    def test_constructor_entries(self) -> None:
        """Entries passed to the constructor are stored."""
        colors = maps.ListValueMap([("color", ["red", "green", "blue"])])

        assert "red" in colors.get("color")

    def test_of_matches_constructor(self) -> None:
        """of() builds the same map as the constructor."""
        colors = maps.ListValueMap.of([("color", ["red", "green", "blue"])])

        assert colors.get("color") == ["red", "green", "blue"]

    def test_none_entries_start_empty(self) -> None:
        """None or no entries gives an empty map."""
        assert maps.ListValueMap(None).is_empty()
        assert maps.ListValueMap().size == 0

    def test_none_key_and_value(self) -> None:
        """None is a valid key and a valid value."""
        odd = maps.ListValueMap.of([(None, [None])])

        assert odd.size == 1
        assert odd.delete_by_values(None) is True
        assert odd.size == 0


class TestGetSet:
    """get() and set()."""

    def test_get_missing_returns_none(self, palette: maps.ListValueMap) -> None:
        assert palette.get("shape") is None

    def test_get_missing_returns_default(self, palette: maps.ListValueMap) -> None:
        assert palette.get("shape", ["circle"]) == ["circle"]

    def test_set_replaces_list(self, palette: maps.ListValueMap) -> None:
        """set() replaces the whole list."""
        palette.set("color", ["white"])

        assert palette.get("color") == ["white"]
        assert palette.size == 2

    def test_set_copies_input(self) -> None:
        """Mutating the caller's list after set() does not change the map."""
        values = ["red"]
        colors = maps.ListValueMap()
        colors.set("color", values)

        values.append("green")

        assert colors.get("color") == ["red"]

    @_pytest.mark.parametrize("bad", ["yellow", b"yellow", bytearray(b"yellow")])
    def test_string_value_list_rejected(self, palette: maps.ListValueMap, bad: object) -> None:
        """A bare string is not split into characters."""
        with _pytest.raises(TypeError):
            palette.set("color", bad)  # type: ignore[arg-type]
        with _pytest.raises(TypeError):
            palette.push("color", bad)  # type: ignore[arg-type]
        with _pytest.raises(TypeError):
            maps.ListValueMap([("color", bad)])  # type: ignore[list-item]

        assert palette.get("color") == ["red", "green", "blue"]

    def test_push_rejected_string_creates_no_entry(self) -> None:
        colors = maps.ListValueMap()

        with _pytest.raises(TypeError):
            colors.push("color", "yellow")  # type: ignore[arg-type]

        assert not colors.has_key("color")

    def test_get_returns_copy(self, palette: maps.ListValueMap) -> None:
        """Mutating the returned list does not change the map."""
        palette.get("color").append("black")

        assert palette.get("color") == ["red", "green", "blue"]

    def test_set_existing_key_keeps_position(self, palette: maps.ListValueMap) -> None:
        """Replacing a list keeps the key's insertion position."""
        palette.set("color", ["white"])

        assert palette.keys() == ["color", "position"]


class TestPush:
    """push()."""

    def test_push_appends_in_order(self, palette: maps.ListValueMap) -> None:
        """Pushed values follow existing ones."""
        palette.push("color", ["yellow", "black"])

        assert palette.get("color") == ["red", "green", "blue", "yellow", "black"]

    def test_push_keeps_duplicates(self, palette: maps.ListValueMap) -> None:
        palette.push("color", ["red", "red"])

        assert palette.get("color") == ["red", "green", "blue", "red", "red"]

    def test_push_creates_missing_key(self) -> None:
        colors = maps.ListValueMap()

        colors.push("color", ["red"])

        assert colors.get("color") == ["red"]

    def test_push_empty_creates_empty_entry(self) -> None:
        """Pushing nothing to a missing key still creates the entry."""
        colors = maps.ListValueMap()

        colors.push("color", [])

        assert colors.has_key("color")
        assert colors.get("color") == []


class TestDelete:
    """delete_* operations."""

    def test_delete_by_key(self, palette: maps.ListValueMap) -> None:
        assert palette.delete_by_key("color") is True
        assert palette.size == 1

    def test_delete_by_key_twice(self, palette: maps.ListValueMap) -> None:
        """Second delete of the same key reports False."""
        assert palette.delete_by_key("color") is True
        assert palette.delete_by_key("color") is False
        assert palette.size == 1

    def test_delete_by_keys_attempts_every_key(self, palette: maps.ListValueMap) -> None:
        """All keys are removed, not just the first that succeeds."""
        assert palette.delete_by_keys("color", "position") is True
        assert palette.is_empty()

    def test_delete_by_keys_none_present(self, palette: maps.ListValueMap) -> None:
        assert palette.delete_by_keys("shape", "size") is False
        assert palette.size == 2

    def test_delete_by_keys_no_args(self, palette: maps.ListValueMap) -> None:
        assert palette.delete_by_keys() is False

    def test_delete_by_value_removes_whole_entry(self) -> None:
        colors = maps.ListValueMap([("color", ["red", "green", "blue"])])

        assert colors.delete_by_values("red") is True
        assert colors.size == 0

    def test_delete_by_value_removes_every_match(self) -> None:
        """Every entry holding the value is removed."""
        tags = maps.ListValueMap(
            [("a", ["x", "y"]), ("b", ["y"]), ("c", ["z"])]
        )

        assert tags.delete_by_value("y") is True
        assert tags.keys() == ["c"]

    def test_delete_by_value_missing(self, palette: maps.ListValueMap) -> None:
        assert palette.delete_by_value("black") is False
        assert palette.size == 2

    def test_delete_by_values_attempts_every_value(self, palette: maps.ListValueMap) -> None:
        assert palette.delete_by_values("red", "top") is True
        assert palette.is_empty()

    def test_delete_by_value_uses_value_equality_for_strings(self) -> None:
        """An equal but distinct string matches."""
        colors = maps.ListValueMap([("color", ["red"])])

        assert colors.delete_by_value("".join(["r", "ed"])) is True

    def test_delete_by_value_uses_identity_for_lists(self) -> None:
        """An equal but distinct list does not match."""
        stored = ["x"]
        nested = maps.ListValueMap([("key", [stored])])

        assert nested.delete_by_value(["x"]) is False
        assert nested.delete_by_value(stored) is True

    def test_delete_value_of_key_removes_all_occurrences(self) -> None:
        colors = maps.ListValueMap([("color", ["red", "green", "blue", "blue"])])

        assert colors.delete_value_of_key("color", "blue") is True
        assert colors.get("color") == ["red", "green"]

    def test_delete_value_of_key_keeps_empty_entry(self) -> None:
        colors = maps.ListValueMap([("color", ["red"])])

        assert colors.delete_value_of_key("color", "red") is True
        assert colors.has_key("color")
        assert colors.get("color") == []

    def test_delete_value_of_key_missing(self, palette: maps.ListValueMap) -> None:
        assert palette.delete_value_of_key("color", "black") is False
        assert palette.delete_value_of_key("shape", "red") is False
        assert not palette.has_key("shape")

    def test_clear(self, palette: maps.ListValueMap) -> None:
        palette.clear()

        assert palette.is_empty()
        assert not palette.is_not_empty()


class TestKeyQueries:
    """has_key and friends."""

    def test_has_key(self, palette: maps.ListValueMap) -> None:
        assert palette.has_key("color")
        assert not palette.has_key("shape")

    def test_has_key_value(self, palette: maps.ListValueMap) -> None:
        assert palette.has_key_value("color", "green")
        assert not palette.has_key_value("color", "top")
        assert not palette.has_key_value("shape", "green")

    def test_has_any_keys(self, palette: maps.ListValueMap) -> None:
        assert palette.has_any_keys("shape", "color")
        assert not palette.has_any_keys("shape", "size")
        assert not palette.has_any_keys()

    def test_has_all_keys(self, palette: maps.ListValueMap) -> None:
        assert palette.has_all_keys("color", "position")
        assert not palette.has_all_keys("color", "shape")
        assert not palette.has_all_keys()

    def test_key_queries_on_empty_map(self) -> None:
        empty = maps.ListValueMap()

        assert not empty.has_any_keys("color")
        assert not empty.has_all_keys("color")


class TestValueQueries:
    """has_value and friends."""

    def test_exact_match_ignores_order(self, palette: maps.ListValueMap) -> None:
        assert palette.has_value(["blue", "red", "green"], exact=True)

    def test_exact_rejects_proper_subset(self, palette: maps.ListValueMap) -> None:
        assert not palette.has_value(["red", "green"], exact=True)

    def test_subset_match(self, palette: maps.ListValueMap) -> None:
        assert palette.has_value(["red", "green"], exact=False)
        assert palette.has_value(["red", "green", "blue"], exact=False)

    def test_subset_rejects_missing_element(self, palette: maps.ListValueMap) -> None:
        assert not palette.has_value(["red", "black"], exact=False)

    def test_exact_is_default(self, palette: maps.ListValueMap) -> None:
        assert not palette.has_value(["red"])

    def test_empty_candidate_never_matches(self, palette: maps.ListValueMap) -> None:
        assert not palette.has_value([], exact=True)
        assert not palette.has_value([], exact=False)

    def test_empty_candidate_does_not_match_empty_list(self) -> None:
        blank = maps.ListValueMap([("blank", [])])

        assert not blank.has_value([], exact=True)

    def test_exact_counts_duplicates(self) -> None:
        """Exact matching is a multiset comparison."""
        letters = maps.ListValueMap([("letters", ["a", "a", "b"])])

        assert letters.has_value(["a", "b", "a"], exact=True)
        assert not letters.has_value(["a", "b", "b"], exact=True)

    def test_has_any_values(self, palette: maps.ListValueMap) -> None:
        assert not palette.has_any_values(["red", "black"], ["green", "blue"])
        assert palette.has_any_values(["top", "right"], ["top", "right", "bottom", "left"])

    def test_has_all_values(self, palette: maps.ListValueMap) -> None:
        assert palette.has_all_values(
            ["red", "green", "blue"], ["left", "bottom", "right", "top"]
        )
        assert not palette.has_all_values(["red", "green", "blue"], ["top"])

    def test_value_queries_without_candidates(self, palette: maps.ListValueMap) -> None:
        assert not palette.has_any_values()
        assert not palette.has_all_values()


class TestSnapshots:
    """keys(), values(), entries() and iteration."""

    def test_keys_values_entries(self, palette: maps.ListValueMap) -> None:
        assert palette.keys() == ["color", "position"]
        assert palette.values() == [
            ["red", "green", "blue"],
            ["top", "right", "bottom", "left"],
        ]
        assert palette.entries() == [
            ("color", ["red", "green", "blue"]),
            ("position", ["top", "right", "bottom", "left"]),
        ]

    def test_entries_are_snapshots(self, palette: maps.ListValueMap) -> None:
        """Later changes do not show up in an earlier snapshot."""
        keys = palette.keys()

        palette.set("shape", ["circle"])

        assert keys == ["color", "position"]

    def test_iteration_is_restartable(self, palette: maps.ListValueMap) -> None:
        assert list(palette) == list(palette)
        assert [key for key, _ in palette] == ["color", "position"]

    def test_iteration_reflects_start_state(self, palette: maps.ListValueMap) -> None:
        """An iterator sees the entries present when it was created."""
        iterator = iter(palette)
        palette.clear()

        assert len(list(iterator)) == 2


class TestForEach:
    """for_each family."""

    def test_for_each(self, palette: maps.ListValueMap) -> None:
        seen: list[tuple[str, list[str]]] = []

        palette.for_each(lambda values, key, owner: seen.append((key, values)))

        assert seen == palette.entries()

    def test_for_each_passes_map(self, palette: maps.ListValueMap) -> None:
        owners: list[object] = []

        palette.for_each(lambda values, key, owner: owners.append(owner))

        assert owners == [palette, palette]

    def test_for_each_indexing(self, palette: maps.ListValueMap) -> None:
        indexes: list[tuple[int, str]] = []

        palette.for_each_indexing(lambda values, key, index, owner: indexes.append((index, key)))

        assert indexes == [(0, "color"), (1, "position")]

    def test_for_each_survives_mutation(self, palette: maps.ListValueMap) -> None:
        """Deleting entries from the callback does not disturb iteration."""
        seen: list[str] = []

        def visit(values: list[str], key: str, owner: maps.ListValueMap) -> None:
            seen.append(key)
            owner.clear()

        palette.for_each(visit)

        assert seen == ["color", "position"]
        assert palette.is_empty()

    def test_for_each_breakable_halts(self, palette: maps.ListValueMap) -> None:
        """A falsy result stops the iteration by default."""
        seen: list[str] = []

        def visit(values: list[str], key: str, owner: maps.ListValueMap) -> bool:
            seen.append(key)
            return False

        palette.for_each_breakable(visit)

        assert seen == ["color"]

    def test_for_each_breakable_continues_on_true(self, palette: maps.ListValueMap) -> None:
        seen: list[str] = []

        palette.for_each_breakable(lambda values, key, owner: seen.append(key) or True)

        assert seen == ["color", "position"]

    def test_for_each_breakable_non_halting_mode(self) -> None:
        """With breakable_halts=False every entry is visited."""
        colors = maps.ListValueMap(
            [("a", [1]), ("b", [2]), ("c", [3])], breakable_halts=False
        )
        seen: list[str] = []

        def visit(values: list[int], key: str, owner: maps.ListValueMap) -> bool:
            seen.append(key)
            return False

        colors.for_each_breakable(visit)

        assert seen == ["a", "b", "c"]


class TestDictStyle:
    """Dunder conveniences."""

    def test_len_and_contains(self, palette: maps.ListValueMap) -> None:
        assert len(palette) == 2
        assert "color" in palette
        assert "shape" not in palette

    def test_getitem(self, palette: maps.ListValueMap) -> None:
        assert palette["color"] == ["red", "green", "blue"]

    def test_getitem_missing_raises(self, palette: maps.ListValueMap) -> None:
        with _pytest.raises(KeyError):
            _ = palette["shape"]

    def test_setitem(self, palette: maps.ListValueMap) -> None:
        palette["shape"] = ["circle"]

        assert palette.get("shape") == ["circle"]

    def test_delitem(self, palette: maps.ListValueMap) -> None:
        del palette["color"]

        assert not palette.has_key("color")

    def test_delitem_missing_raises(self, palette: maps.ListValueMap) -> None:
        with _pytest.raises(KeyError):
            del palette["shape"]


class TestRendering:
    """str() and repr()."""

    def test_str(self, palette: maps.ListValueMap) -> None:
        assert str(palette) == "color:[red,green,blue];position:[top,right,bottom,left]"

    def test_str_empty(self) -> None:
        assert str(maps.ListValueMap()) == ""

    def test_str_empty_list(self) -> None:
        assert str(maps.ListValueMap([("blank", [])])) == "blank:[]"

    def test_repr(self) -> None:
        colors = maps.ListValueMap([("color", ["red"])])

        assert repr(colors) == "ListValueMap([('color', ['red'])])"
