from core.utils import debug, info, warn, error, get_locale, DEFAULT_LOCALE

__all__ = [
    "debug",
    "info",
    "warn",
    "error",
    "get_locale",
    "DEFAULT_LOCALE",
]
