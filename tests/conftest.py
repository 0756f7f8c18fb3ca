import json
import os
import shutil
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eventcontent.config import settings as settings_module
from eventcontent.config.settings import Settings
from eventcontent.services.dataset_service import DatasetService

REPO_DATA = Path(__file__).resolve().parents[1] / "data"

# style tokens are copied verbatim into a translation
UNTRANSLATED_KEYS = {"button"}


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch):
    for name in list(os.environ):
        if name.startswith("EVENTCONTENT_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "_settings", None)
    yield
    settings_module._settings = None


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """A project whose data dir holds the sample source and derived records."""
    shutil.copytree(REPO_DATA / "events", tmp_path / "data" / "events")
    return tmp_path


@pytest.fixture()
def events_dir(project_root: Path) -> Path:
    return project_root / "data" / "events"


@pytest.fixture()
def generated_dir(events_dir: Path) -> Path:
    return events_dir / "generated"


@pytest.fixture()
def settings(project_root: Path) -> Settings:
    return Settings(project_root=project_root)


@pytest.fixture()
def service(settings: Settings) -> DatasetService:
    return DatasetService(settings)


def _translate_text(value: Any, transform: Callable[[str], str]) -> Any:
    if isinstance(value, str):
        return transform(value)
    if isinstance(value, list):
        return [_translate_text(item, transform) for item in value]
    if isinstance(value, dict):
        return {
            key: item if key in UNTRANSLATED_KEYS else _translate_text(item, transform)
            for key, item in value.items()
        }
    return value


def build_payload(
    dataset: Dict[str, Any],
    transform: Callable[[str], str] = lambda text: f"EN {text}",
    language: str = "pt",
) -> Dict[str, Any]:
    """Translation payload whose text is a deterministic transform of the source text."""
    shared = dataset["shared"]
    schedules = {
        key: {
            "timezoneCountry": schedule["timezoneCountry"],
            "timezoneId": schedule["timezoneId"],
            "periods": [
                {
                    "start": period["start"],
                    "end": period["end"],
                    "label": transform(period["label"][language]),
                }
                for period in schedule["periods"]
            ],
        }
        for key, schedule in shared["schedules"].items()
    }
    return {
        "shared": {
            "schedules": schedules,
            "intro": _translate_text(shared["intro"][language], transform),
            "howItWorks": _translate_text(shared["howItWorks"][language], transform),
            "plans": _translate_text(shared["plans"][language], transform),
        },
        "events": [
            {
                "slug": event["slug"],
                "translations": _translate_text(event["translations"][language], transform),
            }
            for event in dataset["events"]
        ],
    }


@pytest.fixture()
def source_dataset(service: DatasetService) -> Dict[str, Any]:
    return service.export_for_translation()["dataset"]


@pytest.fixture()
def make_payload(source_dataset):
    """Factory returning a translation payload dict for the sample dataset."""
    def _make(transform: Callable[[str], str] = lambda text: f"EN {text}") -> Dict[str, Any]:
        return build_payload(source_dataset, transform)
    return _make


@pytest.fixture()
def write_record():
    return write_json
