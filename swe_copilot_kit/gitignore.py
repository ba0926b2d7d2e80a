from __future__ import annotations

import logging
from pathlib import Path

from .config import GITIGNORE_MARKER, GITIGNORE_PATTERNS

logger = logging.getLogger(__name__)


def update_gitignore(target_dir: Path) -> bool:
    """Append the generated-files block to ``.gitignore`` once.

    Returns True when the file was modified, False when the marker is already
    present or the file could not be written.
    """
    gitignore_path = target_dir / ".gitignore"
    block = "\n".join((GITIGNORE_MARKER, *GITIGNORE_PATTERNS)) + "\n"

    try:
        gitignore_path.touch(exist_ok=True)
        content = gitignore_path.read_text(encoding="utf-8")
        if GITIGNORE_MARKER in content:
            return False

        prefix = "" if not content or content.endswith("\n") else "\n"
        with gitignore_path.open("a", encoding="utf-8") as handle:
            handle.write(prefix + block)
    except OSError as error:
        logger.error("Failed to update %s: %s", gitignore_path, error)
        return False

    return True
