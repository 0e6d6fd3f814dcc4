"""
Language and timezone preferences
"""

from datetime import datetime, timezone
from typing import Optional
from src.config.constants import SUPPORTED_LANGUAGES
from src.config.settings import settings
from src.services.local_store import LocalStore
from src.utils.date_utils import get_timezone
from src.utils.error_handler import ValidationError

LANGUAGE_KEY = "language"
TIMEZONE_KEY = "timezone"

_DATE_FORMATS = {
    "pt": "%d/%m/%Y %H:%M",
    "es": "%d/%m/%Y %H:%M",
    "en": "%m/%d/%Y %I:%M %p",
}


class PreferencesService:
    """Persisted language/timezone choice"""

    def __init__(self, store: LocalStore):
        self.store = store

    @property
    def language(self) -> str:
        language = self.store.get(LANGUAGE_KEY)
        return language if language in SUPPORTED_LANGUAGES else settings.DEFAULT_LANGUAGE

    @property
    def timezone(self) -> str:
        return self.store.get(TIMEZONE_KEY) or settings.DEFAULT_TIMEZONE

    def set_language(self, language: str):
        if language not in SUPPORTED_LANGUAGES:
            raise ValidationError(f"Idioma não suportado: {language}")
        self.store.set(LANGUAGE_KEY, language)

    def set_timezone(self, tz_name: str):
        # get_timezone falls back to UTC, so check the name resolves as given
        if get_timezone(tz_name).key != tz_name:
            raise ValidationError(f"Fuso horário inválido: {tz_name}")
        self.store.set(TIMEZONE_KEY, tz_name)

    def format_datetime(self, value: datetime, language: Optional[str] = None) -> str:
        """
        Format a moment in the preferred timezone and language

        Naive datetimes are taken as UTC.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        local = value.astimezone(get_timezone(self.timezone))
        return local.strftime(_DATE_FORMATS.get(language or self.language, _DATE_FORMATS["pt"]))
