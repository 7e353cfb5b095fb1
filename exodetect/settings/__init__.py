from .config import Settings, settings, get_settings

__all__ = ["Settings", "settings", "get_settings"]
