"""
Dataset Service

The three operations exposed to callers (CLI or an external tool-call adapter):
export-for-translation, apply-translation and build-final-dataset. Each call
runs the full synchronous sequence materialize -> load -> validate/merge ->
respond and shares no state with other calls beyond the filesystem.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config.settings import Settings, get_settings
from ..dataset.loader import load_derived_bundle, load_source_bundle
from ..dataset.materializer import (
    CommandMaterializer,
    CopyMaterializer,
    SourceMaterializer,
    materialized_workspace,
)
from ..merge.engine import merge_bundles
from ..translation.normalizer import export_dataset, language_name, normalize_translation_payload
from ..translation.renderer import render_derived_records, write_derived_records
from ..utils.file_io import write_json_atomic

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def materializer_from_settings(settings: Settings) -> SourceMaterializer:
    """CommandMaterializer when a build command is configured, else CopyMaterializer."""
    if settings.build_command_args:
        return CommandMaterializer(settings.build_command_args, timeout=settings.build_timeout)
    return CopyMaterializer()


class DatasetService:
    """Command surface over the content pipeline."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        materializer: Optional[SourceMaterializer] = None,
    ):
        """
        Initialize the service.

        Args:
            settings: Pipeline settings (defaults to the process-wide settings)
            materializer: Build step producing loadable records (defaults from settings)
        """
        self.settings = settings or get_settings()
        self.materializer = materializer or materializer_from_settings(self.settings)

    @property
    def source_language(self) -> str:
        return self.settings.source_language

    @property
    def target_language(self) -> str:
        return self.settings.target_language

    def _workspace(self):
        return materialized_workspace(
            self.materializer,
            self.settings.resolved_project_root,
            self.settings.resolved_data_dir,
        )

    def _resolve_path(self, path: PathLike) -> Path:
        path = Path(path).expanduser()
        if not path.is_absolute():
            path = self.settings.resolved_project_root / path
        return path.resolve()

    def _display_path(self, path: Path) -> str:
        try:
            return path.relative_to(self.settings.resolved_project_root).as_posix()
        except ValueError:
            return str(path)

    def export_for_translation(self, output_path: Optional[PathLike] = None) -> Dict[str, Any]:
        """
        Dump the source dataset together with translation instructions.

        Args:
            output_path: Optional file receiving the dataset JSON

        Returns:
            ``{"instructions": str, "dataset": {"shared": ..., "events": [...]}}``
        """
        with self._workspace() as events_dir:
            source = load_source_bundle(events_dir, self.source_language)
        result = export_dataset(source, self.target_language)
        if output_path is not None:
            resolved = self._resolve_path(output_path)
            write_json_atomic(resolved, result["dataset"])
            logger.info("Source dataset written to %s", resolved)
        return result

    def apply_translation(self, payload: str) -> Dict[str, str]:
        """
        Validate a translation payload and regenerate every derived record.

        Args:
            payload: Serialized translation bundle

        Returns:
            ``{"message": str}``
        """
        translation = normalize_translation_payload(payload)
        with self._workspace() as events_dir:
            source = load_source_bundle(events_dir, self.source_language)
            files = render_derived_records(source, translation, self.target_language)
        generated_dir = self.settings.generated_dir
        write_derived_records(generated_dir, files)
        message = (
            f"{language_name(self.target_language)} data regenerated in "
            f"{self._display_path(generated_dir)}/."
        )
        return {"message": message}

    def build_final_dataset(self, output_path: Optional[PathLike] = None) -> Dict[str, Any]:
        """
        Merge source and derived records into the bilingual dataset.

        Args:
            output_path: Destination file; relative paths resolve against the project root

        Returns:
            ``{"message": str, "data": {"events": [...]}, "path": str}``
        """
        resolved = self._resolve_path(output_path) if output_path is not None else self.settings.output_json
        with self._workspace() as events_dir:
            source = load_source_bundle(events_dir, self.source_language)
            derived = load_derived_bundle(events_dir / "generated", self.target_language)
            merged = merge_bundles(source, derived)
        data = merged.to_wire()
        write_json_atomic(resolved, data)
        return {"message": f"Final JSON written to {resolved}", "data": data, "path": str(resolved)}
