"""Message catalogs and Accept-Language negotiation."""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"


def _parse_accept_language(header: str) -> list[str]:
    """Return the primary subtags of an Accept-Language header, best first."""
    weighted: list[tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        pieces = [piece.strip() for piece in part.split(";")]
        tag = pieces[0].lower()
        if not tag or tag == "*":
            continue

        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.partition("=")
            if name.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue

        weighted.append((-quality, position, tag.split("-")[0]))

    return [tag for _, _, tag in sorted(weighted)]


class Translator:
    """
    Translates stable message keys into the caller's language.

    A key missing from the requested language falls back to the default
    language, then to the key itself.
    """

    def __init__(
        self,
        catalogs: dict[str, dict[str, str]],
        default_language: str = "en",
    ):
        if default_language not in catalogs:
            msg = f"No catalog for default language: {default_language}"
            raise ValueError(msg)
        self._catalogs = catalogs
        self._default_language = default_language

    @classmethod
    def from_directory(
        cls,
        directory: Path = LOCALES_DIR,
        default_language: str = "en",
    ) -> "Translator":
        catalogs = {}
        for path in sorted(directory.glob("*.json")):
            with path.open(encoding="utf-8") as f:
                catalogs[path.stem] = json.load(f)
        logger.debug("Loaded catalogs: %s", ", ".join(catalogs))
        return cls(catalogs, default_language)

    def negotiate(self, accept_language: Optional[str]) -> str:
        if accept_language:
            for tag in _parse_accept_language(accept_language):
                if tag in self._catalogs:
                    return tag
        return self._default_language

    def translate(self, key: str, language: Optional[str] = None) -> str:
        catalog = self._catalogs.get(language or self._default_language, {})
        if key in catalog:
            return catalog[key]
        return self._catalogs[self._default_language].get(key, key)
