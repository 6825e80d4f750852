# theme.py
"""
Light/dark theme state for the backdrop window.

The particle layer only ever pulls the current accent color from here; it
never gets notified of a change. Switching themes therefore shows up on the
very next frame without touching the particles.
"""
import json
import logging
import os
import pygame
from typing import Dict, Any, Optional
from constants import DEFAULT_THEME, THEME_PALETTES

# --- Data Contracts ---
#
# class ThemeManager:
#   - __init__(self, palettes: Optional[dict] = None, state_file: Optional[str] = None,
#              default_theme: str = DEFAULT_THEME):
#     - Inputs:
#       - palettes: {"dark": {"background": rgb, "accent_primary": rgb}, "light": {...}}
#         from the configuration. Missing entries fall back to THEME_PALETTES.
#       - state_file: JSON file the chosen theme is persisted to, or None.
#       - default_theme: theme used when nothing valid is persisted.
#     - Side Effects: Reads state_file if it exists.
#
#   - toggle_theme(self) -> str:
#     - Side Effects: Flips dark <-> light and writes state_file.
#
#   - accent_color(self) -> pygame.Color:
#     - Outputs: the active palette's accent color, resolved at call time.

COLOR_KEYS = ("background", "accent_primary")


def parse_color(value) -> pygame.Color:
    """Accepts "#rrggbb" / named strings or [r, g, b(, a)] sequences."""
    if isinstance(value, str):
        return pygame.Color(value)
    return pygame.Color(*value)


class ThemeManager:
    """
    Holds the active theme and its palette.
    """
    def __init__(
        self,
        palettes: Optional[Dict[str, Dict[str, Any]]] = None,
        state_file: Optional[str] = None,
        default_theme: str = DEFAULT_THEME,
    ):
        self.palettes = self._initialize_palettes(palettes)
        self.state_file = state_file

        if default_theme not in self.palettes:
            msg = (
                f"Configuration error: default theme '{default_theme}' is not one "
                f"of {sorted(self.palettes)}."
            )
            logging.critical(msg)
            raise ValueError(msg)
        self.default_theme = default_theme

        self.current_theme = self._load_theme()
        logging.info(f"ThemeManager initialized with '{self.current_theme}' theme.")

    def _initialize_palettes(self, config_palettes: Optional[dict]) -> Dict[str, Dict[str, pygame.Color]]:
        """Builds palettes from config, falling back to the built-in colors per entry."""
        palettes = {
            name: {key: parse_color(rgb) for key, rgb in colors.items()}
            for name, colors in THEME_PALETTES.items()
        }
        if not config_palettes:
            logging.info("No theme palettes found in config. Using built-in palettes.")
            return palettes

        for name, colors in config_palettes.items():
            if not isinstance(colors, dict):
                logging.warning(f"Palette for theme '{name}' must be an object. Ignoring it.")
                continue
            palette = dict(palettes.get(name, palettes[DEFAULT_THEME]))
            for key in COLOR_KEYS:
                if key not in colors:
                    continue
                try:
                    palette[key] = parse_color(colors[key])
                except (ValueError, TypeError) as e:
                    logging.error(
                        f"Could not parse '{key}' for theme '{name}': {e}. "
                        f"Keeping the default color."
                    )
            palettes[name] = palette
        return palettes

    def _load_theme(self) -> str:
        """Reads the persisted theme, falling back to the default."""
        if not self.state_file or not os.path.exists(self.state_file):
            return self.default_theme
        try:
            with open(self.state_file, 'r') as f:
                theme = json.load(f).get('theme')
        except (OSError, ValueError, AttributeError) as e:
            logging.warning(f"Could not read theme state from {self.state_file}: {e}.")
            return self.default_theme

        if not isinstance(theme, str) or theme not in self.palettes:
            logging.warning(f"Persisted theme '{theme}' is unknown. Using '{self.default_theme}'.")
            return self.default_theme
        logging.debug(f"Restored theme '{theme}' from {self.state_file}.")
        return theme

    def set_theme(self, theme: str):
        if theme not in self.palettes:
            msg = f"Unknown theme '{theme}'. Available: {sorted(self.palettes)}."
            logging.error(msg)
            raise ValueError(msg)
        self.current_theme = theme
        logging.info(f"Theme set to '{theme}'.")

    def toggle_theme(self) -> str:
        """Switches between dark and light and persists the choice."""
        self.set_theme('light' if self.current_theme == 'dark' else 'dark')
        self.save_theme()
        return self.current_theme

    def save_theme(self):
        if not self.state_file:
            return
        state_dir = os.path.dirname(self.state_file)
        try:
            if state_dir:
                os.makedirs(state_dir, exist_ok=True)
            with open(self.state_file, 'w') as f:
                json.dump({'theme': self.current_theme}, f)
        except OSError as e:
            logging.error(
                f"Could not save theme state to {self.state_file}: {e}. "
                f"Keeping '{self.current_theme}' for this session only."
            )
            return
        logging.debug(f"Theme '{self.current_theme}' saved to {self.state_file}.")

    def accent_color(self) -> pygame.Color:
        return pygame.Color(self.palettes[self.current_theme]['accent_primary'])

    def background_color(self) -> pygame.Color:
        return pygame.Color(self.palettes[self.current_theme]['background'])
