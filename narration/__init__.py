"""
Narration layer for turning engine events into text for the ruler.

This module provides the YAML-backed message catalog that holds every
prompt, report and rating message in each supported language.
"""

from .catalog import MessageCatalog, CatalogNotFoundError, available_languages

__all__ = ["MessageCatalog", "CatalogNotFoundError", "available_languages"]
