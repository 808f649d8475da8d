"""Unit tests for deep merge semantics."""

import pytest

from scaffoldgen.core.merge import deep_merge


@pytest.mark.unit
class TestDeepMerge:
    def test_keys_absent_from_patch_are_kept(self):
        base = {"a": 1, "b": {"c": 2, "d": 3}}

        result = deep_merge(base, {"b": {"c": 20}})

        assert result == {"a": 1, "b": {"c": 20, "d": 3}}

    def test_does_not_mutate_inputs(self):
        base = {"b": {"c": 2}}
        patch = {"b": {"d": 3}}

        deep_merge(base, patch)

        assert base == {"b": {"c": 2}}
        assert patch == {"b": {"d": 3}}

    @pytest.mark.parametrize(
        "base_value,patch_value",
        [
            ([1, 2, 3], [4]),
            ({"nested": True}, "scalar"),
            ("scalar", {"nested": True}),
            (1, None),
        ],
    )
    def test_non_mapping_values_are_replaced_wholesale(self, base_value, patch_value):
        result = deep_merge({"key": base_value}, {"key": patch_value})

        assert result["key"] == patch_value

    def test_existing_key_keeps_its_position(self):
        result = deep_merge({"first": 1, "second": 2}, {"third": 3, "first": 10})

        assert list(result) == ["first", "second", "third"]
