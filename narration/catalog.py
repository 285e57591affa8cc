"""
Message catalog - all text the ruler sees, stored as YAML data.

Each language lives in messages/<language>.yaml as a flat mapping of
message keys to str.format templates. Keeping the wording out of the code
means the engine never carries inline literals in any particular encoding.
"""

import os
import logging
from typing import Dict, List

import yaml

logger = logging.getLogger(__name__)

MESSAGES_DIR = os.path.join(os.path.dirname(__file__), "messages")
DEFAULT_LANGUAGE = "en"


class CatalogNotFoundError(Exception):
    """Raised when no catalog file exists for a language."""

    pass


def available_languages() -> List[str]:
    """List languages that have a catalog file."""
    if not os.path.exists(MESSAGES_DIR):
        logger.warning(f"Messages directory not found: {MESSAGES_DIR}")
        return []

    return sorted(
        filename.rsplit(".", 1)[0]
        for filename in os.listdir(MESSAGES_DIR)
        if filename.endswith(".yaml") or filename.endswith(".yml")
    )


class MessageCatalog:
    """Renders narration and prompts for one language."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        """
        Load the catalog for a language.

        Args:
            language: Catalog name, e.g. "en" or "ru"

        Raises:
            CatalogNotFoundError: If messages/<language>.yaml is missing
        """
        self.language = language
        self.messages: Dict[str, str] = self._load_messages(language)

    def _load_messages(self, language: str) -> Dict[str, str]:
        """Load one YAML catalog file."""
        filepath = os.path.join(MESSAGES_DIR, f"{language}.yaml")

        if not os.path.exists(filepath):
            raise CatalogNotFoundError(
                f"No message catalog for language '{language}'. "
                f"Available: {available_languages()}"
            )

        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise CatalogNotFoundError(
                f"Message catalog {filepath} must be a mapping, got {type(data).__name__}"
            )

        logger.info(f"Loaded message catalog: {language} ({len(data)} messages)")
        return {str(key): str(value) for key, value in data.items()}

    def render(self, key: str, **values) -> str:
        """
        Render a message template.

        Args:
            key: Message key in the catalog
            **values: Placeholder values for str.format

        Returns:
            The formatted message

        Raises:
            KeyError: If the key is not in the catalog
        """
        if key not in self.messages:
            raise KeyError(f"Message '{key}' missing from '{self.language}' catalog")
        return self.messages[key].format(**values)

    def keys(self) -> List[str]:
        return sorted(self.messages)
