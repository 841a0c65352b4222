"""
Process-wide language tables.
Both mappings are read-only views built once at import time.
"""
from types import MappingProxyType
from typing import Dict, List, Optional

LANGUAGE_NAMES = MappingProxyType({
    "tr": "Türkçe",
    "en": "English",
    "de": "Deutsch",
    "fr": "Français",
    "es": "Español",
    "it": "Italiano",
    "pt": "Português",
    "ru": "Русский",
    "zh": "中文",
    "ja": "日本語",
    "ar": "العربية",
    "ko": "한국어",
})

LANGUAGE_FLAGS = MappingProxyType({
    "tr": "🇹🇷",
    "en": "🇬🇧",
    "de": "🇩🇪",
    "fr": "🇫🇷",
    "es": "🇪🇸",
    "it": "🇮🇹",
    "pt": "🇵🇹",
    "ru": "🇷🇺",
    "zh": "🇨🇳",
    "ja": "🇯🇵",
    "ar": "🇸🇦",
    "ko": "🇰🇷",
})

# word -> {target code -> literal}
# Entries over 3 characters never reach the short-word path; kept for parity.
SHORT_WORD_TABLE = MappingProxyType({
    word: MappingProxyType(targets)
    for word, targets in {
        "me": {"en": "me", "de": "mich", "fr": "moi", "es": "mí"},
        "sen": {"en": "you", "de": "du", "fr": "tu", "es": "tú"},
        "ben": {"en": "I", "de": "ich", "fr": "je", "es": "yo"},
        "hi": {"tr": "merhaba", "de": "hallo", "fr": "salut", "es": "hola"},
        "hello": {"tr": "merhaba", "de": "hallo", "fr": "salut", "es": "hola"},
        "ok": {"tr": "tamam", "de": "ok", "fr": "d'accord", "es": "ok"},
        "evet": {"en": "yes", "de": "ja", "fr": "oui", "es": "sí"},
        "hayır": {"en": "no", "de": "nein", "fr": "non", "es": "no"},
        "teşekkür": {"en": "thanks", "de": "danke", "fr": "merci", "es": "gracias"},
    }.items()
})


def is_supported(code: str) -> bool:
    return code in LANGUAGE_NAMES


def display_name(code: str) -> str:
    """Native display name, or the raw code for anything outside the table."""
    return LANGUAGE_NAMES.get(code, code)


def lookup_short_word(word: str, target_lang: str) -> Optional[str]:
    return SHORT_WORD_TABLE.get(word.strip().lower(), {}).get(target_lang)


def list_languages() -> List[Dict[str, str]]:
    return [
        {"code": code, "name": name, "flag": LANGUAGE_FLAGS[code]}
        for code, name in LANGUAGE_NAMES.items()
    ]
