from .settings import Settings, get_settings, DEFAULT_TEMPLATES_DIR

__all__ = ["Settings", "get_settings", "DEFAULT_TEMPLATES_DIR"]
