# Copyright (c) 2025 Trae AI. All rights reserved.

import re
from typing import Dict, Optional, Tuple

# ISO 639-1 code -> every label that names it (English name, native name,
# ISO 639-2/B and 639-2/T codes, common regional variants).
LANGUAGE_ALIASES: Dict[str, Tuple[str, ...]] = {
    "ar": ("arabic", "ara", "العربية"),
    "bg": ("bulgarian", "bul", "български"),
    "ca": ("catalan", "cat", "català"),
    "cs": ("czech", "cze", "ces", "čeština", "cestina"),
    "da": ("danish", "dan", "dansk"),
    "de": ("german", "ger", "deu", "deutsch"),
    "el": ("greek", "gre", "ell", "ελληνικά"),
    "en": ("english", "eng", "english sdh", "english us", "english uk", "american english", "british english"),
    "es": (
        "spanish", "spa", "español", "espanol", "castilian", "castellano",
        "latin american spanish", "spanish latin america", "spanish latin american", "spanish spain",
        "european spanish",
    ),
    "et": ("estonian", "est", "eesti"),
    "fa": ("persian", "farsi", "per", "fas"),
    "fi": ("finnish", "fin", "suomi"),
    "fr": ("french", "fre", "fra", "français", "francais", "canadian french", "french canadian", "french france"),
    "he": ("hebrew", "heb", "עברית"),
    "hi": ("hindi", "hin", "हिन्दी"),
    "hr": ("croatian", "hrv", "hrvatski"),
    "hu": ("hungarian", "hun", "magyar"),
    "id": ("indonesian", "ind", "bahasa indonesia"),
    "is": ("icelandic", "ice", "isl", "íslenska"),
    "it": ("italian", "ita", "italiano"),
    "ja": ("japanese", "jpn", "日本語"),
    "ko": ("korean", "kor", "한국어"),
    "lt": ("lithuanian", "lit", "lietuvių"),
    "lv": ("latvian", "lav", "latviešu"),
    "ms": ("malay", "may", "msa", "bahasa melayu"),
    "nl": ("dutch", "dut", "nld", "nederlands", "flemish"),
    "no": ("norwegian", "nor", "norsk", "norwegian bokmal", "norwegian bokmål", "bokmål", "bokmal", "nob"),
    "pl": ("polish", "pol", "polski"),
    "pt": (
        "portuguese", "por", "português", "portugues", "brazilian portuguese", "portuguese brazil",
        "portuguese brazilian", "european portuguese", "portuguese portugal",
    ),
    "ro": ("romanian", "rum", "ron", "română", "romana"),
    "ru": ("russian", "rus", "русский"),
    "sk": ("slovak", "slo", "slk", "slovenčina"),
    "sl": ("slovenian", "slovene", "slv", "slovenščina"),
    "sr": ("serbian", "srp", "српски", "srpski"),
    "sv": ("swedish", "swe", "svenska"),
    "ta": ("tamil", "tam", "தமிழ்"),
    "te": ("telugu", "tel", "తెలుగు"),
    "th": ("thai", "tha", "ไทย"),
    "tl": ("tagalog", "tgl", "filipino", "fil"),
    "tr": ("turkish", "tur", "türkçe", "turkce"),
    "uk": ("ukrainian", "ukr", "українська"),
    "vi": ("vietnamese", "vie", "tiếng việt", "tieng viet"),
    "zh": (
        "chinese", "chi", "zho", "中文", "mandarin", "cantonese", "chinese simplified",
        "simplified chinese", "chinese traditional", "traditional chinese", "简体中文", "繁體中文",
        "chs", "cht",
    ),
}


LOCALE_PATTERN = re.compile(r"^([a-z]{2}) [a-z]{2,4}$")


def _normalize(label: str) -> str:
    cleaned = re.sub(r"[\W_]+", " ", label.casefold())
    return cleaned.strip()


def _build_table() -> Dict[str, str]:
    table: Dict[str, str] = {}
    for code, aliases in LANGUAGE_ALIASES.items():
        table[code] = code
        for alias in aliases:
            key = _normalize(alias)
            if key in table and table[key] != code:
                raise ValueError(f"Language alias {alias!r} maps to both {table[key]} and {code}")
            table[key] = code
    return table


class LanguageResolver:
    """
    Resolves free-text language labels ("English", "eng", "pt_BR"...) to ISO 639-1 codes.
    """

    def __init__(self):
        self.table = _build_table()

    def resolve(self, label: str) -> Optional[str]:
        """
        Returns the 2-letter code for `label`, or None when the label is unknown.
        """
        key = _normalize(label)
        if not key:
            return None
        code = self.table.get(key)
        if code is not None:
            return code

        # Locale tags such as "pt br", "en us", "zh hans"
        locale = LOCALE_PATTERN.match(key)
        if locale and locale.group(1) in LANGUAGE_ALIASES:
            return locale.group(1)
        return None
