import json
from pathlib import Path
from typing import Any, Dict, Optional

from .config import DEFAULT_HISTORY_PATH


def log_event(action: str, payload: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Append one codec operation to the JSON-lines history file."""
    record = {"action": action, **payload}
    target = path or DEFAULT_HISTORY_PATH
    try:
        with target.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        # History failures should not break core functionality.
        pass
