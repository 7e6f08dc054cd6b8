"""Data models for translation statistics."""

from enum import Enum

from pydantic import BaseModel, RootModel


class Version(str, Enum):
    PY27 = "27"
    PY35 = "35"
    PY36 = "36"
    PY37 = "37"
    PY38 = "38"
    PY39 = "39"
    NEWEST = "newest"


class TranslatedStats(BaseModel):
    percentage: float | None = None


class LanguageStats(BaseModel):
    translated: TranslatedStats | None = None

    @property
    def percentage(self) -> float:
        """Translated ratio, treating missing or null values as zero."""
        if self.translated is None or self.translated.percentage is None:
            return 0.0
        return self.translated.percentage


class ProjectStats(BaseModel):
    """Subset of the Transifex project details response we care about."""

    stats: dict[str, LanguageStats | None] | None = None


class TranslationStats(RootModel[dict[str, str]]):
    """Language code -> formatted percentage, e.g. {"ja": "87.32%"}."""
