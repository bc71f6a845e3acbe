from .catalog import LanguageCatalog

__all__ = ["LanguageCatalog"]
