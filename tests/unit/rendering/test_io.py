"""Unit tests for artifact writing."""

import logging
import stat
from pathlib import Path

import pytest

from scaffoldgen.core.errors import WriteFailure
from scaffoldgen.core.models import RenderedArtifact
from scaffoldgen.rendering import io
from scaffoldgen.rendering.io import ArtifactWriter, atomic_write_text


@pytest.mark.unit
class TestAtomicWriteText:
    def test_writes_and_overwrites(self, tmp_path):
        target = tmp_path / "file.txt"

        atomic_write_text(target, "first")
        atomic_write_text(target, "second")

        assert target.read_text() == "second"
        assert [p.name for p in tmp_path.iterdir()] == ["file.txt"]

    def test_applies_file_mode(self, tmp_path):
        target = tmp_path / "run.sh"

        atomic_write_text(target, "#!/bin/sh\n", mode=0o755)

        assert stat.S_IMODE(target.stat().st_mode) == 0o755

    def test_newlines_are_written_verbatim(self, tmp_path):
        target = tmp_path / "crlf.txt"

        atomic_write_text(target, "a\r\nb\n")

        assert target.read_bytes() == b"a\r\nb\n"


@pytest.mark.unit
class TestArtifactWriter:
    def test_creates_parent_directories(self, run, tmp_path):
        path = tmp_path / "a" / "b" / "c.txt"

        run(ArtifactWriter().write_artifact(RenderedArtifact(output_path=path, content="hi")))

        assert path.read_text() == "hi"

    def test_directory_failure_is_logged_and_write_still_attempted(
        self, run, tmp_path, monkeypatch, caplog
    ):
        def refuse(_path):
            raise PermissionError("denied")

        monkeypatch.setattr(io, "ensure_parent", refuse)
        path = tmp_path / "exists.txt"

        with caplog.at_level(logging.ERROR, logger="scaffoldgen"):
            run(ArtifactWriter().write_artifact(RenderedArtifact(output_path=path, content="ok")))

        assert path.read_text() == "ok"
        assert "Failed to create output directory" in caplog.text
        assert "denied" in caplog.text

    def test_content_failure_raises(self, run, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        path = blocker / "child.txt"

        with caplog.at_level(logging.ERROR, logger="scaffoldgen"):
            with pytest.raises(WriteFailure) as exc_info:
                run(ArtifactWriter().write_artifact(RenderedArtifact(output_path=path, content="x")))

        assert exc_info.value.path == path
        assert isinstance(exc_info.value, OSError)
        assert "Failed to create output directory" in caplog.text
