"""
File I/O Utilities

Centralized JSON reading/writing and directory replacement used by the loader,
the renderer and the build step. Writes are deterministic (2-space indent,
UTF-8, trailing newline) so identical content yields identical bytes.
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

PathLike = Union[str, Path]


def dumps_json(data: Any) -> str:
    """Serialize data the way every generated file is written."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def read_json(path: PathLike) -> Any:
    """Read a JSON file, stripping a leading BOM if present."""
    with open(path, "r", encoding="utf-8-sig") as f:
        return json.load(f)


def write_text_atomic(path: PathLike, text: str) -> Path:
    """
    Write text to path via a temporary sibling file and an atomic rename.

    The previous file (if any) is left untouched when writing fails.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return path


def write_json_atomic(path: PathLike, data: Any) -> Path:
    return write_text_atomic(path, dumps_json(data))


def replace_directory(target: PathLike, files: Dict[str, str]) -> Path:
    """
    Replace ``target`` wholesale with a directory holding exactly ``files``.

    Files are written to a staging directory next to ``target`` first; the old
    directory is only removed once every file has been written.

    Args:
        target: Directory to replace
        files: Mapping of file name -> text content

    Returns:
        The target path
    """
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    staging = Path(tempfile.mkdtemp(prefix=f".{target.name}.staging-", dir=target.parent))
    try:
        for name, content in files.items():
            with open(staging / name, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        if target.exists():
            shutil.rmtree(target)
        os.replace(staging, target)
    except BaseException:
        shutil.rmtree(staging, ignore_errors=True)
        raise
    return target
