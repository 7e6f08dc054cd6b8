"""Utility functions."""

from tx_badge.models import Version

SUPPORTED_VERSIONS = frozenset(v.value for v in Version if v is not Version.NEWEST)


def normalize_version(token: str) -> Version:
    """Map a raw path token to a release line, falling back to newest."""
    if token in SUPPORTED_VERSIONS:
        return Version(token)
    return Version.NEWEST


def format_percentage(ratio: float) -> str:
    """Format a 0..1 ratio as a percentage with two decimals."""
    return f"{ratio * 100:.2f}%"
