import os
import sys
from pathlib import Path

import pytest


# Ensure the project `src` directory is on sys.path so tests can import
# packages like `openinghours`, `i18n`, `core`, etc.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def isolated_i18n():
    """Use the English catalog with no injected translator for each test."""
    import i18n

    old_translator = i18n.get_translator()
    old_locale = os.environ.pop("OH_LOCALE", None)
    i18n.set_translator(None)

    yield

    i18n.set_translator(old_translator)
    if old_locale is not None:
        os.environ["OH_LOCALE"] = old_locale
    else:
        os.environ.pop("OH_LOCALE", None)
