"""as_path_string tests: breadcrumb normalization."""

import pytest

from interest_proxy.domain.paths import as_path_string


class TestAsPathString:

    def test_string_passes_through(self):
        assert as_path_string("Interests > Games") == "Interests > Games"

    def test_list_joined_with_separator(self):
        assert as_path_string(["Interests", "Games", "Action games"]) == "Interests > Games > Action games"

    def test_non_string_elements_dropped(self):
        assert as_path_string(["Interests", 3, None, "Games", {"x": 1}]) == "Interests > Games"

    def test_tuple_accepted(self):
        assert as_path_string(("A", "B")) == "A > B"

    def test_empty_list_is_empty_string(self):
        assert as_path_string([]) == ""

    @pytest.mark.parametrize("value", [None, 42, 1.5, {"path": "x"}, True])
    def test_other_types_are_empty(self, value):
        assert as_path_string(value) == ""

    @pytest.mark.parametrize("value", [["Interests", 1, "Games"], "Interests > Games", ["x"], None])
    def test_idempotent(self, value):
        once = as_path_string(value)
        assert as_path_string(once) == once
