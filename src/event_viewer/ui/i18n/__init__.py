from .manager import CATALOG_DOMAIN, TranslationManager

__all__ = ["CATALOG_DOMAIN", "TranslationManager"]
