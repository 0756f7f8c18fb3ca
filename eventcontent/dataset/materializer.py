"""
Source materialization (build step).

Records are read from a temporary build workspace rather than from the data
directory itself. A materializer populates ``<workspace>/events`` and is
injected into the service, so the loader/merge core can be exercised without
spawning any process.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from ..errors import MaterializeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildRequest:
    """Everything a materializer needs to populate a workspace."""

    project_root: Path
    data_dir: Path
    workspace: Path

    @property
    def events_dir(self) -> Path:
        return self.workspace / "events"


class SourceMaterializer(ABC):
    """Produces a loadable record tree inside a build workspace."""

    @abstractmethod
    def materialize(self, request: BuildRequest) -> None:
        """Populate ``request.events_dir``; raise MaterializeError on failure."""


class CopyMaterializer(SourceMaterializer):
    """Copies the record tree verbatim (records are plain JSON)."""

    def materialize(self, request: BuildRequest) -> None:
        source = request.data_dir / "events"
        if not source.is_dir():
            raise MaterializeError(f"Missing record directory at {source}")
        try:
            shutil.copytree(source, request.events_dir)
        except OSError as e:
            raise MaterializeError(f"Failed to copy records: {e}") from e


class CommandMaterializer(SourceMaterializer):
    """
    Runs an external build command that writes records into the workspace.

    The command runs in the project root with EVENTCONTENT_PROJECT_ROOT,
    EVENTCONTENT_DATA_DIR and EVENTCONTENT_BUILD_DIR set. Its captured stderr
    (or stdout) becomes the failure message when it exits non-zero.
    """

    def __init__(self, command: Sequence[str], timeout: Optional[float] = None):
        if not command:
            raise ValueError("build command must not be empty")
        self.command: List[str] = list(command)
        self.timeout = timeout

    def materialize(self, request: BuildRequest) -> None:
        env = dict(os.environ)
        env.update({
            "EVENTCONTENT_PROJECT_ROOT": str(request.project_root),
            "EVENTCONTENT_DATA_DIR": str(request.data_dir),
            "EVENTCONTENT_BUILD_DIR": str(request.workspace),
        })
        logger.debug("Running build command: %s", " ".join(self.command))
        try:
            result = subprocess.run(
                self.command,
                cwd=request.project_root,
                env=env,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise MaterializeError(f"Build command timed out after {e.timeout}s") from e
        except OSError as e:
            raise MaterializeError(str(e)) from e

        if result.returncode != 0:
            message = (
                result.stderr.strip()
                or result.stdout.strip()
                or f"Build command exited with {result.returncode}"
            )
            raise MaterializeError(message, returncode=result.returncode)
        if not request.events_dir.is_dir():
            raise MaterializeError(f"Build command produced no records at {request.events_dir}")


@contextmanager
def materialized_workspace(
    materializer: SourceMaterializer,
    project_root: Path,
    data_dir: Path,
) -> Iterator[Path]:
    """
    Materialize records into a temporary workspace and yield its events dir.

    The workspace is removed on every exit path.
    """
    workspace = Path(tempfile.mkdtemp(prefix="events-build-"))
    try:
        request = BuildRequest(project_root=project_root, data_dir=data_dir, workspace=workspace)
        materializer.materialize(request)
        yield request.events_dir
    finally:
        shutil.rmtree(workspace, ignore_errors=True)
