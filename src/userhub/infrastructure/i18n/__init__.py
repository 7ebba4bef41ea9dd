from userhub.infrastructure.i18n.translator import LOCALES_DIR, Translator

__all__ = ["LOCALES_DIR", "Translator"]
