"""Unit tests for the generation context and its builder."""

from pathlib import Path

import pytest

from scaffoldgen.core.context import Context
from scaffoldgen.core.errors import InvalidArgument
from scaffoldgen.core.models import RenderedArtifact, TemplateEntry


@pytest.mark.unit
class TestContextMerge:
    def test_data_is_deep_merged(self):
        ctx = Context()
        ctx.merge({"data": {"project": {"name": "demo", "version": 1}, "tags": ["a"]}})

        ctx.merge({"data": {"project": {"version": 2}, "tags": ["b", "c"]}})

        assert ctx.data == {"project": {"name": "demo", "version": 2}, "tags": ["b", "c"]}

    def test_data_shape_change_replaces_value(self):
        ctx = Context().merge({"data": {"name": "A"}})

        ctx.merge({"data": [{"name": "A"}, {"name": "B"}]})

        assert ctx.data == [{"name": "A"}, {"name": "B"}]

    def test_callable_patch_receives_current_context(self):
        ctx = Context().merge({"data": {"count": 1}})

        ctx.merge(lambda current: {"data": {"count": current.data["count"] + 1}})

        assert ctx.data == {"count": 2}

    def test_callable_exceptions_propagate(self):
        def broken(_ctx):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            Context().merge(broken)

    def test_templates_accept_strings_mappings_and_entries(self):
        entry = TemplateEntry(logical_path="c.txt", source_path=Path("/src/c.txt"), content="C")
        ctx = Context()

        ctx.merge(
            {
                "templates": {
                    "a.txt": "A",
                    "b.txt": {"content": "B", "source_path": "/src/b.txt.j2"},
                    "c.txt": entry,
                }
            }
        )

        assert list(ctx.templates) == ["a.txt", "b.txt", "c.txt"]
        assert ctx.templates["a.txt"].content == "A"
        assert ctx.templates["a.txt"].logical_path == "a.txt"
        assert ctx.templates["b.txt"].source_path == Path("/src/b.txt.j2")
        assert ctx.templates["c.txt"] is entry

    def test_remerged_template_replaces_entry_in_place(self):
        ctx = Context().merge({"templates": {"one": "1", "two": "2"}})

        ctx.merge({"templates": {"one": "uno"}})

        assert list(ctx.templates) == ["one", "two"]
        assert ctx.templates["one"].content == "uno"

    def test_extra_keys_are_kept(self):
        ctx = Context().merge({"meta": {"author": "x"}})

        ctx.merge({"meta": {"year": 2024}})

        assert dict(ctx.extras) == {"meta": {"author": "x", "year": 2024}}

    @pytest.mark.parametrize("patch", [42, "data", ["templates"]])
    def test_non_mapping_patch_is_rejected(self, patch):
        with pytest.raises(InvalidArgument):
            Context().merge(patch)

    def test_rendered_cannot_be_merged(self):
        with pytest.raises(InvalidArgument, match="render stage"):
            Context().merge({"rendered": []})

    def test_invalid_template_value_is_rejected(self):
        with pytest.raises(InvalidArgument, match="'bad'"):
            Context().merge({"templates": {"bad": 3}})


@pytest.mark.unit
class TestContextViews:
    def test_templates_view_is_read_only(self):
        ctx = Context().merge({"templates": {"a": "A"}})

        with pytest.raises(TypeError):
            ctx.templates["b"] = "B"  # type: ignore[index]

    def test_rendered_is_append_only_snapshot(self):
        ctx = Context()
        first = RenderedArtifact(output_path=Path("/out/a"), content="a")
        second = RenderedArtifact(output_path=Path("/out/b"), content="b")

        ctx.append_rendered([first])
        snapshot = ctx.rendered
        ctx.append_rendered([second])

        assert snapshot == (first,)
        assert ctx.rendered == (first, second)
