import json
import os
import platform
from pathlib import Path
from typing import Optional

DEFAULT_TEXT = "BLOCK\\nTEXT"


def get_default_config_dir() -> Path:
    """Get the appropriate config directory for the current platform"""
    system = platform.system()
    if system == "Windows":
        base = os.environ.get("APPDATA", os.path.expanduser("~\\AppData\\Roaming"))
        return Path(base) / "blocktext-cli"
    elif system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "blocktext-cli"
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        return Path(xdg_config) / "blocktext-cli"


def resolve_config_path(path_arg: Optional[str]) -> Path:
    """Resolve user-provided config path or use default"""
    if path_arg:
        p = Path(os.path.expanduser(path_arg))
        if p.is_dir() or str(p).endswith(os.sep):
            return p / "config.json"
        # Treat as a file path
        return p
    return get_default_config_dir() / "config.json"


class BlockTextConfig:
    def __init__(self, path_arg: Optional[str] = None):
        self.config_path: Path = resolve_config_path(path_arg)
        self.data = self.load_config()

    @property
    def config_dir(self) -> Path:
        return self.config_path.parent

    @property
    def history_path(self) -> Path:
        return self.config_dir / "history"

    def _default_config(self) -> dict:
        return {
            "default_color": None,
            "default_text": None,
            "recent_colors": []
        }

    def load_config(self) -> dict:
        """Load configuration from file"""
        if self.config_path.exists():
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (ValueError, OSError):
                return self._default_config()
            if not isinstance(data, dict):
                return self._default_config()
            return self._sanitize(data)
        return self._default_config()

    def _sanitize(self, data: dict) -> dict:
        """Drop values of the wrong type so they fall back to defaults"""
        config = self._default_config()
        for key in ("default_color", "default_text"):
            value = data.get(key)
            if value is None or isinstance(value, str):
                config[key] = value
        recent = data.get("recent_colors")
        if isinstance(recent, list):
            config["recent_colors"] = [c for c in recent if isinstance(c, str)]
        return config

    def save_config(self):
        """Persist configuration to file"""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
        except OSError:
            pass

    def reset(self) -> bool:
        """Delete the config file. Returns False if there was nothing to delete."""
        self.data = self._default_config()
        if not self.config_path.exists():
            return False
        self.config_path.unlink()
        return True

    @property
    def default_color(self) -> Optional[str]:
        return self.data.get("default_color")

    @property
    def default_text(self) -> str:
        return self.data.get("default_text") or DEFAULT_TEXT

    def set_default_color(self, color_name: str):
        color_name = color_name.lower()
        self.data["default_color"] = color_name
        recent = [c for c in self.data.get("recent_colors", []) if c != color_name]
        recent.insert(0, color_name)
        self.data["recent_colors"] = recent[:10]
        self.save_config()

    def set_default_text(self, text: str):
        self.data["default_text"] = text
        self.save_config()
