"""Message catalogs for the trainer's screens.

Usage:
    from mahjong_trainer.ui.i18n import t, set_language

    set_language("ja")
    t("label.shanten")                    # -> "向聴数"
    t("feedback.good", loss=1)            # -> "ほぼ正解です。..."

A key missing from the active catalog falls back to English, then to the
key itself.
"""

import importlib
from typing import Dict

SUPPORTED_LANGUAGES = ("en", "ja")
FALLBACK_LANGUAGE = "en"


class I18n:
    """Process-wide active language; catalogs are imported once each."""

    _lang: str = FALLBACK_LANGUAGE
    _catalogs: Dict[str, dict] = {}

    @classmethod
    def set_language(cls, lang: str):
        if lang not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"unsupported language {lang!r}, expected one of {', '.join(SUPPORTED_LANGUAGES)}")
        cls._catalog(lang)
        cls._lang = lang

    @classmethod
    def _catalog(cls, lang: str) -> dict:
        if lang not in cls._catalogs:
            module = importlib.import_module(f"mahjong_trainer.ui.locales.{lang}")
            cls._catalogs[lang] = module.TRANSLATIONS
        return cls._catalogs[lang]

    @classmethod
    def lookup(cls, key: str) -> str:
        text = cls._catalog(cls._lang).get(key)
        if text is None:
            text = cls._catalog(FALLBACK_LANGUAGE).get(key, key)
        return text

    @classmethod
    def get_language(cls) -> str:
        return cls._lang


def t(key: str, **kwargs) -> str:
    """Translate a key; format arguments the template lacks are ignored."""
    text = I18n.lookup(key)
    if not kwargs:
        return text
    try:
        return text.format(**kwargs)
    except (KeyError, IndexError):
        return text


def set_language(lang: str):
    I18n.set_language(lang)


def get_language() -> str:
    return I18n.get_language()
