"""JSON document I/O for the stores under the Nex home.

Reads are forgiving: a missing or corrupt document reads as an empty
object so that a damaged store degrades to defaults. Writes replace the
whole document atomically.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def load_json(path: Path) -> Any:
    """Load a JSON document, returning {} if absent or unparseable."""
    if not path.exists():
        return {}

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Treating unreadable %s as empty: %s", path, e)
        return {}

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Treating corrupt %s as empty: %s", path, e)
        return {}


def save_json(path: Path, value: Any) -> None:
    """Write a JSON document atomically.

    Writes to a temporary sibling first, then renames over the target.
    Keys keep insertion order.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = path.with_suffix(path.suffix + ".tmp")
    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(value, f, indent=2, ensure_ascii=False)
        f.write("\n")

    temp_path.replace(path)
    logger.debug("Wrote %s", path)
