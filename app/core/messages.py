"""
Localized response messages.

Templates are keyed by operation and take the model display name as
``{model}``. Display names are keyed by table name, so ``rooms`` resolves to
"Room" / "Rooms" in English.
"""
from typing import Dict, List, Optional, Tuple
from fastapi import Header
import inflect
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)

inflector = inflect.engine()

FALLBACK_LOCALE = "en"

CATALOGS: Dict[str, Dict[str, Dict]] = {
    "en": {
        "messages": {
            "retrieved": "{model} retrieved successfully.",
            "saved": "{model} saved successfully.",
            "updated": "{model} updated successfully.",
            "deleted": "{model} deleted successfully.",
            "not_found": "{model} not found",
            "validation_failed": "The given data was invalid.",
            "error": "Something went wrong.",
        },
        "models": {
            "rooms": {"singular": "Room", "plural": "Rooms"},
            "students": {"singular": "Student", "plural": "Students"},
        },
    },
    "vi": {
        "messages": {
            "retrieved": "Lấy {model} thành công.",
            "saved": "Lưu {model} thành công.",
            "updated": "Cập nhật {model} thành công.",
            "deleted": "Xóa {model} thành công.",
            "not_found": "Không tìm thấy {model}",
            "validation_failed": "Dữ liệu không hợp lệ.",
            "error": "Đã có lỗi xảy ra.",
        },
        "models": {
            "rooms": {"singular": "phòng học", "plural": "danh sách phòng học"},
            "students": {"singular": "học viên", "plural": "danh sách học viên"},
        },
    },
}

SUPPORTED_LOCALES = tuple(CATALOGS.keys())


class Translator:
    def __init__(self, locale: str = FALLBACK_LOCALE):
        self.locale = locale if locale in CATALOGS else FALLBACK_LOCALE

    def _lookup(self, section: str, key: str):
        for locale in (self.locale, FALLBACK_LOCALE):
            value = CATALOGS[locale][section].get(key)
            if value is not None:
                return value
        return None

    def message(self, key: str, **replace) -> str:
        template = self._lookup("messages", key)
        if template is None:
            logger.warning(f"Missing message key '{key}' for locale '{self.locale}'")
            return key
        return template.format(**replace)

    def model_name(self, key: str, plural: bool = False, fallback: Optional[str] = None) -> str:
        """Display name for a model; derived from ``fallback`` with inflect when the catalog has no entry."""
        names = self._lookup("models", key)
        if names is not None:
            return names["plural" if plural else "singular"]

        singular = fallback or key
        return inflector.plural(singular) if plural else singular

    def model_message(self, key: str, model_key: str, plural: bool = False, fallback: Optional[str] = None) -> str:
        return self.message(key, model=self.model_name(model_key, plural=plural, fallback=fallback))


def _parse_accept_language(header: str) -> List[Tuple[str, float]]:
    tags = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        lang, _, params = part.partition(";")
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        tags.append((lang.strip().lower(), quality))
    # sorted() is stable, so equal weights keep header order
    return sorted(tags, key=lambda tag: tag[1], reverse=True)


def resolve_locale(accept_language: Optional[str]) -> str:
    """Pick the best supported locale from an Accept-Language header."""
    if accept_language:
        for tag, quality in _parse_accept_language(accept_language):
            if quality <= 0:
                continue
            primary = tag.split("-")[0]
            if primary in CATALOGS:
                return primary

    if settings.DEFAULT_LOCALE in CATALOGS:
        return settings.DEFAULT_LOCALE
    return FALLBACK_LOCALE


def get_translator(accept_language: Optional[str] = Header(None)) -> Translator:
    return Translator(resolve_locale(accept_language))
