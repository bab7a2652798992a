"""
Artifact writer — persist a generated file under the config root.

This is the regeneration step; verification never calls it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from swaggerdocs.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


def write_generated_file(root: Path, file: GeneratedFile) -> dict:
    """Write a GeneratedFile to disk.

    Args:
        root: Directory ``file.path`` is relative to.
        file: The file to write.

    Returns:
        {"ok": True, "path": "...", "written": True, "changed": bool} or {"error": "..."}
    """
    if not file.path or not file.content:
        return {"error": "Missing path or content"}

    target = root / file.path

    if target.exists() and not file.overwrite:
        return {
            "error": f"File already exists: {file.path} (use overwrite=true to replace)",
            "path": file.path,
            "written": False,
        }

    data = file.content.encode("utf-8")
    changed = not target.is_file() or target.read_bytes() != data

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
    except OSError as e:
        return {"error": f"Cannot write {file.path}: {e}", "path": file.path, "written": False}

    logger.info("Wrote generated file: %s", target)
    return {"ok": True, "path": file.path, "written": True, "changed": changed}
