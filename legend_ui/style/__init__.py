from .theme import DEFAULT_THEME, LegendTheme, validate_legend_theme

__all__ = ["DEFAULT_THEME", "LegendTheme", "validate_legend_theme"]
