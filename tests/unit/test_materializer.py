import sys
from pathlib import Path

import pytest

from eventcontent.dataset.materializer import (
    BuildRequest,
    CommandMaterializer,
    CopyMaterializer,
    SourceMaterializer,
    materialized_workspace,
)
from eventcontent.errors import MaterializeError


class RecordingMaterializer(SourceMaterializer):
    def __init__(self, fail=False):
        self.fail = fail
        self.requests = []

    def materialize(self, request: BuildRequest) -> None:
        self.requests.append(request)
        if self.fail:
            raise MaterializeError("boom")
        request.events_dir.mkdir()


def test_copy_materializer_copies_record_tree(project_root):
    with materialized_workspace(CopyMaterializer(), project_root, project_root / "data") as events_dir:
        assert (events_dir / "shared.pt.json").is_file()
        assert (events_dir / "generated" / "shared.en.json").is_file()
        workspace = events_dir.parent
    assert not workspace.exists()


def test_copy_materializer_requires_events_dir(tmp_path):
    with pytest.raises(MaterializeError, match="Missing record directory"):
        with materialized_workspace(CopyMaterializer(), tmp_path, tmp_path / "data"):
            pass


def test_workspace_removed_when_materializer_fails(tmp_path):
    materializer = RecordingMaterializer(fail=True)
    with pytest.raises(MaterializeError, match="boom"):
        with materialized_workspace(materializer, tmp_path, tmp_path / "data"):
            pass
    assert not materializer.requests[0].workspace.exists()


def test_workspace_removed_when_body_fails(tmp_path):
    materializer = RecordingMaterializer()
    with pytest.raises(RuntimeError):
        with materialized_workspace(materializer, tmp_path, tmp_path / "data"):
            raise RuntimeError("load failed")
    assert not materializer.requests[0].workspace.exists()


def _python(code):
    return [sys.executable, "-c", code]


def test_command_failure_surfaces_stderr(tmp_path):
    command = _python("import sys; sys.stderr.write('tsc: type error in event_3.ts\\n'); sys.exit(2)")
    with pytest.raises(MaterializeError) as exc:
        with materialized_workspace(CommandMaterializer(command), tmp_path, tmp_path / "data"):
            pass
    assert str(exc.value) == "tsc: type error in event_3.ts"
    assert exc.value.returncode == 2


def test_command_failure_without_output(tmp_path):
    with pytest.raises(MaterializeError, match="Build command exited with 3"):
        with materialized_workspace(CommandMaterializer(_python("raise SystemExit(3)")), tmp_path, tmp_path):
            pass


def test_command_writes_into_build_dir(tmp_path):
    code = (
        "import os, pathlib; "
        "d = pathlib.Path(os.environ['EVENTCONTENT_BUILD_DIR']) / 'events'; "
        "d.mkdir(); (d / 'shared.pt.json').write_text('{}')"
    )
    with materialized_workspace(CommandMaterializer(_python(code)), tmp_path, tmp_path / "data") as events_dir:
        assert (events_dir / "shared.pt.json").read_text() == "{}"


def test_command_without_records_fails(tmp_path):
    with pytest.raises(MaterializeError, match="produced no records"):
        with materialized_workspace(CommandMaterializer(_python("pass")), tmp_path, tmp_path):
            pass


def test_missing_executable_is_a_materialize_error(tmp_path):
    missing = str(Path(tmp_path) / "no-such-build-tool")
    with pytest.raises(MaterializeError):
        with materialized_workspace(CommandMaterializer([missing]), tmp_path, tmp_path):
            pass


def test_empty_command_rejected():
    with pytest.raises(ValueError):
        CommandMaterializer([])
