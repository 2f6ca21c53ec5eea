import json
from pathlib import Path
from typing import Optional

import config
from enums.dashboard import Dashboard

L10N_DIR = Path(__file__).resolve().parent.parent / "l10n"


class Localizator:
    _cache: dict[str, dict] = {}

    @staticmethod
    def _load(language: str) -> dict:
        if language not in Localizator._cache:
            with open(L10N_DIR / f"{language}.json", "r", encoding="UTF-8") as f:
                Localizator._cache[language] = json.loads(f.read())
        return Localizator._cache[language]

    @staticmethod
    def get_text(entity: Dashboard, key: str, lang: Optional[str] = None) -> str:
        """
        Get localized text for given dashboard and key.

        The dashboard section (client, agent, admin) overrides the common
        section; keys missing there are looked up in common.

        Args:
            entity: Dashboard the text is shown on
            key: Localization key
            lang: Optional language code. If None, uses config.LANGUAGE.

        Returns:
            Localized text string

        Raises:
            KeyError: If the key exists in neither section
        """
        language = lang if lang is not None else config.LANGUAGE
        data = Localizator._load(language)
        section = data.get(entity.value, {})
        if key in section:
            return section[key]
        return data["common"][key]
