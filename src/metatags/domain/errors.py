class MetaTagsError(Exception):
    """Base error for the meta tags helper."""


class MissingTranslationError(MetaTagsError):
    """Raised by translation backends when a path has no entry."""

    def __init__(self, path: str):
        super().__init__(f"translation missing: {path}")
        self.path = path


class MetasNotFoundError(MetaTagsError):
    pass


class NoMatchingTemplateError(MetaTagsError):
    pass


class SubstitutionError(MetaTagsError, KeyError):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class SettingsError(MetaTagsError):
    pass


class TranslationLoadError(MetaTagsError):
    pass
