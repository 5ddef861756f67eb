"""Configuration persistence manager for the halftone generator.

This module handles loading and saving of generation settings to/from JSON files.
"""

import json
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, HalftoneConfig, RenderStyle


class ConfigManager:
    """Handles loading and saving of halftone configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.halftone_config.json)
        """
        self.config_path = config_path

    def load(self) -> HalftoneConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            HalftoneConfig with loaded or default values
        """
        config = HalftoneConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                    # Update config with loaded values (fallback to defaults)
                    config.cell_size = int(data.get("cell_size", config.cell_size))
                    config.seed = self._parse_seed(data.get("seed", config.seed))
                    config.preview_width = int(
                        data.get("preview_width", config.preview_width)
                    )
                    style = data.get("render_style")
                    if style is not None:
                        try:
                            config.render_style = RenderStyle(style)
                        except ValueError:
                            print(f"Warning: Unknown render style '{style}', using default")
                print(f"✓ Loaded configuration from {self.config_path}")
        except Exception as e:
            print(f"Warning: Could not load config file: {e}")

        return config

    @staticmethod
    def _parse_seed(value) -> Optional[int]:
        """Seed as an int, or None (fresh entropy) if it is not a non-negative whole number."""
        if value is None:
            return None
        try:
            seed = int(value)
        except (TypeError, ValueError):
            seed = -1
        if seed < 0:
            print(f"Warning: Invalid seed {value!r}, using a random seed")
            return None
        return seed

    def save(self, config: HalftoneConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: HalftoneConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        data = {
            "cell_size": config.cell_size,
            "render_style": config.render_style.value,
            "seed": config.seed,
            "preview_width": config.preview_width,
        }
        try:
            with open(self.config_path, "w") as f:
                json.dump(data, f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)
