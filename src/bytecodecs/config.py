import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from .encoding import Encoding

CONFIG_PATH = Path.home() / ".bytecodecs.json"
DEFAULT_HISTORY_PATH = Path.home() / ".bytecodecs_history.jsonl"

ENV_MAPPING: Dict[str, str] = {
    "history_path": "BYTECODECS_HISTORY_PATH",
    "text_encoding": "BYTECODECS_TEXT_ENCODING",
    "default_encoding": "BYTECODECS_DEFAULT_ENCODING",
}
NO_HISTORY_ENV = "BYTECODECS_NO_HISTORY"
TRUTHY = ("1", "true", "yes", "on")


def _as_bool(value: object, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return bool(value)


@dataclass
class Settings:
    history: bool = True
    history_path: str = ""
    text_encoding: str = ""
    default_encoding: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "history": self.history,
            "history_path": self.history_path,
            "text_encoding": self.text_encoding,
            "default_encoding": self.default_encoding,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Settings":
        return cls(
            history=_as_bool(data.get("history")),
            history_path=str(data.get("history_path", "") or ""),
            text_encoding=str(data.get("text_encoding", "") or ""),
            default_encoding=str(data.get("default_encoding", "") or ""),
        )

    @property
    def encoding(self) -> Encoding:
        return Encoding.parse(self.default_encoding or Encoding.BASE36.value)


def _merge_env(settings: Settings) -> Settings:
    for field_name, env_var in ENV_MAPPING.items():
        env_val = os.getenv(env_var, "")
        if env_val and not getattr(settings, field_name):
            setattr(settings, field_name, env_val)
    if os.getenv(NO_HISTORY_ENV, "").strip().lower() in TRUTHY:
        settings.history = False
    return settings


def load_settings(path: Path = CONFIG_PATH) -> Settings:
    settings = Settings()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                settings = Settings.from_dict(data)
        except (OSError, ValueError):
            # Fall back to defaults/env if file malformed.
            settings = Settings()
    settings = _merge_env(settings)
    if settings.default_encoding:
        try:
            Encoding.parse(settings.default_encoding)
        except ValueError:
            settings.default_encoding = ""
    return settings


def save_settings(settings: Settings, path: Path = CONFIG_PATH) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")


def resolve_history_path(settings: Optional[Settings] = None) -> Path:
    cfg = settings or load_settings()
    if cfg.history_path:
        return Path(cfg.history_path).expanduser()
    return DEFAULT_HISTORY_PATH
