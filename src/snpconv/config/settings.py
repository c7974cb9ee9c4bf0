"""
Configuration management with XDG-compliant persistent settings.

Provides cross-platform configuration storage following OS conventions:
- Linux/Unix: XDG_CONFIG_HOME (~/.config/snpconv/)
- macOS: ~/Library/Application Support/snpconv/
- Windows: %APPDATA%/snpconv/
"""

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .constants import (
    DEFAULT_FILENAME_PREFIX,
    DEFAULT_FORMAT_HINT,
    DEFAULT_ORDERING,
    DEFAULT_OUTPUT_FOLDER,
    DEFAULT_PORT_A,
    DEFAULT_PORT_B,
    DEFAULT_PORT_COUNT,
    MAX_INPUT_HISTORY,
)


@dataclass
class AppSettings:
    """Converter settings that persist across sessions."""

    # N-port extraction
    n_ports: int = DEFAULT_PORT_COUNT
    port_a: int = DEFAULT_PORT_A
    port_b: int = DEFAULT_PORT_B
    ordering: str = DEFAULT_ORDERING  # "col", "row", "auto"
    format_override: str = ""  # "", "RI", "MA", "DB"

    # 2-port retargeting
    format_hint: str = DEFAULT_FORMAT_HINT  # "auto", "RI", "MA", "DB"
    target_format: str = "DB"  # "DB", "RI", "MA"

    # Output settings
    output_folder: str = DEFAULT_OUTPUT_FOLDER
    filename_prefix: str = DEFAULT_FILENAME_PREFIX
    use_custom_filename: bool = False
    custom_filename: str = ""
    export_plot: bool = False

    input_history: list[str] = None

    def __post_init__(self):
        """Initialize mutable defaults."""
        if self.input_history is None:
            self.input_history = []


class SettingsManager:
    """Manages converter settings with automatic persistence."""

    APP_NAME = "snpconv"
    CONFIG_FILE = "settings.json"

    MAX_INPUT_HISTORY = MAX_INPUT_HISTORY

    def __init__(self):
        """Initialize settings manager."""
        self.config_dir = Path(user_config_dir(self.APP_NAME))
        self.config_file = self.config_dir / self.CONFIG_FILE
        self.settings = AppSettings()

    def load(self) -> AppSettings:
        """
        Load settings from disk.

        Returns:
            Loaded settings (or defaults if file doesn't exist)
        """
        if not self.config_file.exists():
            return self.settings

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = json.load(f)

            # Drop keys written by other versions
            known = AppSettings.__dataclass_fields__.keys()
            self.settings = AppSettings(**{k: v for k, v in data.items() if k in known})
            return self.settings

        except (json.JSONDecodeError, TypeError, ValueError, AttributeError):
            # If config is corrupted, start fresh with defaults
            self.settings = AppSettings()
            return self.settings

    def save(self, settings: AppSettings | None = None) -> None:
        """
        Save settings to disk.

        Args:
            settings: Settings to save (uses current if None)
        """
        if settings is not None:
            self.settings = settings

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(asdict(self.settings), f, indent=2)

    def add_input_to_history(self, path: str) -> None:
        """
        Add an input file path to history (most recent first).

        Args:
            path: Input file path to add
        """
        if not path or not path.strip():
            return

        path = path.strip()

        if path in self.settings.input_history:
            self.settings.input_history.remove(path)

        self.settings.input_history.insert(0, path)

        if len(self.settings.input_history) > self.MAX_INPUT_HISTORY:
            self.settings.input_history = self.settings.input_history[
                : self.MAX_INPUT_HISTORY
            ]
