"""
Message catalog for human-readable error strings.

Messages are stored as .j2 templates under messages/<locale>/<key>.j2 and
receive their positional arguments as `args`. Callers go through tr(), which
delegates to an injected translator when one is installed.
"""

from pathlib import Path
from typing import Callable, Optional

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from core.utils import debug, get_locale, DEFAULT_LOCALE

_MESSAGES_DIR = Path(__file__).parent / "messages"

Translator = Callable[..., str]

_env = Environment(
    loader=FileSystemLoader(_MESSAGES_DIR),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)

_translator: Optional[Translator] = None


def set_translator(translator: Optional[Translator]) -> None:
    """Install a (key, *args) -> str callable; None restores the catalog."""
    global _translator
    _translator = translator


def get_translator() -> Optional[Translator]:
    return _translator


def _fallback(key: str, args) -> str:
    if not args:
        return key
    return f"{key}: " + ", ".join(str(a) for a in args)


def render_message(key: str, *args, locale: Optional[str] = None) -> str:
    """Render a catalog message.

    Args:
        key: Message key (template file name without extension)
        *args: Positional message arguments
        locale: Catalog locale; defaults to OH_LOCALE

    Returns:
        Rendered message. Missing locales fall back to English, missing
        keys fall back to the key followed by its arguments.
    """
    locale = locale or get_locale()
    candidates = [locale] if locale == DEFAULT_LOCALE else [locale, DEFAULT_LOCALE]
    for candidate in candidates:
        try:
            template = _env.get_template(f"{candidate}/{key}.j2")
        except TemplateNotFound:
            debug(f"[i18n] no message {key!r} for locale {candidate!r}")
            continue
        return template.render(args=args)
    return _fallback(key, args)


def tr(key: str, *args) -> str:
    """Translate a message key with positional arguments."""
    if _translator is not None:
        return _translator(key, *args)
    return render_message(key, *args)


__all__ = ["Translator", "set_translator", "get_translator", "render_message", "tr"]
