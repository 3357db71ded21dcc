import os
import sys

_DEBUG_ENABLED = bool(os.getenv("OH_DEBUG"))

DEFAULT_LOCALE = "en"


def debug(*args, **kwargs):
    if _DEBUG_ENABLED:
        prefix = "\033[1m[DEBUG]\033[0m"
        print(prefix, *args, file=sys.stderr, **kwargs)


def info(*args, **kwargs):
    prefix = "\033[1;34m[INFO]\033[0m"
    print(prefix, *args, file=sys.stderr, **kwargs)


def warn(*args, **kwargs):
    prefix = "\033[1;33m[WARNING]\033[0m"
    print(prefix, *args, file=sys.stderr, **kwargs)


def error(*args, **kwargs):
    prefix = "\033[1;31m[ERROR]\033[0m"
    print(prefix, *args, file=sys.stderr, **kwargs)


def get_locale() -> str:
    """Locale used for message lookup (OH_LOCALE, defaults to English)."""
    locale = os.environ.get("OH_LOCALE", "").strip()
    return locale or DEFAULT_LOCALE
