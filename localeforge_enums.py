"""
LocaleForge Enum Definitions

Type-safe enums for locale languages and localized asset payload kinds.
"""

from enum import Enum
from typing import Optional


class Language(str, Enum):
    """Languages a locale item can hold. UNKNOWN marks an unset placeholder."""
    UNKNOWN = 'Unknown'
    AFRIKAANS = 'Afrikaans'
    ARABIC = 'Arabic'
    BASQUE = 'Basque'
    BELARUSIAN = 'Belarusian'
    BULGARIAN = 'Bulgarian'
    CATALAN = 'Catalan'
    CHINESE = 'Chinese'
    CHINESE_SIMPLIFIED = 'ChineseSimplified'
    CHINESE_TRADITIONAL = 'ChineseTraditional'
    CZECH = 'Czech'
    DANISH = 'Danish'
    DUTCH = 'Dutch'
    ENGLISH = 'English'
    ESTONIAN = 'Estonian'
    FAROESE = 'Faroese'
    FINNISH = 'Finnish'
    FRENCH = 'French'
    GERMAN = 'German'
    GREEK = 'Greek'
    HEBREW = 'Hebrew'
    HUNGARIAN = 'Hungarian'
    ICELANDIC = 'Icelandic'
    INDONESIAN = 'Indonesian'
    ITALIAN = 'Italian'
    JAPANESE = 'Japanese'
    KOREAN = 'Korean'
    LATVIAN = 'Latvian'
    LITHUANIAN = 'Lithuanian'
    NORWEGIAN = 'Norwegian'
    POLISH = 'Polish'
    PORTUGUESE = 'Portuguese'
    ROMANIAN = 'Romanian'
    RUSSIAN = 'Russian'
    SERBO_CROATIAN = 'SerboCroatian'
    SLOVAK = 'Slovak'
    SLOVENIAN = 'Slovenian'
    SPANISH = 'Spanish'
    SWEDISH = 'Swedish'
    THAI = 'Thai'
    TURKISH = 'Turkish'
    UKRAINIAN = 'Ukrainian'
    VIETNAMESE = 'Vietnamese'

    @property
    def code(self) -> Optional[str]:
        """Language code understood by machine translation vendors."""
        return LANGUAGE_CODES.get(self)

    @property
    def is_placeholder(self) -> bool:
        return self is Language.UNKNOWN

    @classmethod
    def parse(cls, value: str) -> 'Language':
        """Parse a stored language name, falling back to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


# Google-style codes (deep-translator accepts these)
LANGUAGE_CODES = {
    Language.AFRIKAANS: 'af',
    Language.ARABIC: 'ar',
    Language.BASQUE: 'eu',
    Language.BELARUSIAN: 'be',
    Language.BULGARIAN: 'bg',
    Language.CATALAN: 'ca',
    Language.CHINESE: 'zh-CN',
    Language.CHINESE_SIMPLIFIED: 'zh-CN',
    Language.CHINESE_TRADITIONAL: 'zh-TW',
    Language.CZECH: 'cs',
    Language.DANISH: 'da',
    Language.DUTCH: 'nl',
    Language.ENGLISH: 'en',
    Language.ESTONIAN: 'et',
    Language.FAROESE: 'fo',
    Language.FINNISH: 'fi',
    Language.FRENCH: 'fr',
    Language.GERMAN: 'de',
    Language.GREEK: 'el',
    Language.HEBREW: 'iw',
    Language.HUNGARIAN: 'hu',
    Language.ICELANDIC: 'is',
    Language.INDONESIAN: 'id',
    Language.ITALIAN: 'it',
    Language.JAPANESE: 'ja',
    Language.KOREAN: 'ko',
    Language.LATVIAN: 'lv',
    Language.LITHUANIAN: 'lt',
    Language.NORWEGIAN: 'no',
    Language.POLISH: 'pl',
    Language.PORTUGUESE: 'pt',
    Language.ROMANIAN: 'ro',
    Language.RUSSIAN: 'ru',
    Language.SERBO_CROATIAN: 'sr',
    Language.SLOVAK: 'sk',
    Language.SLOVENIAN: 'sl',
    Language.SPANISH: 'es',
    Language.SWEDISH: 'sv',
    Language.THAI: 'th',
    Language.TURKISH: 'tr',
    Language.UKRAINIAN: 'uk',
    Language.VIETNAMESE: 'vi',
}


class ValueType(str, Enum):
    """Payload kinds of a localized asset. Only TEXT is machine-translatable."""
    TEXT = 'text'
    SPRITE = 'sprite'
    TEXTURE = 'texture'
    AUDIO_CLIP = 'audio_clip'
    VIDEO_CLIP = 'video_clip'
    FONT = 'font'


class ChangeKind(str, Enum):
    """Structural changes reported to the asset store."""
    ADD_LOCALE = 'add_locale'
    REMOVE_LOCALE = 'remove_locale'
    PROMOTE_TO_DEFAULT = 'promote_to_default'
    RENAME = 'rename'
    SET_LANGUAGE = 'set_language'
