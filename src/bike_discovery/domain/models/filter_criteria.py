"""Filter criteria domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterCriteria:
    """Attribute filters applied to a network list."""

    country_code: str | None = None
    search_term: str | None = None

    @property
    def is_empty(self) -> bool:
        """Return True when neither filter would restrict the result."""
        return not (self.country_code or "").strip() and not (self.search_term or "").strip()
