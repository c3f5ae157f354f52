"""Case-insensitive substring search over identifiers."""

from zonekit.core.catalog import TimezoneCatalog


class TimezoneSearch:
    """Partial-match search in catalog order."""

    def __init__(self, catalog: TimezoneCatalog) -> None:
        self.catalog = catalog

    def search(self, term: str, limit: int = 0) -> list[str]:
        """
        Search timezones by partial match.

        Args:
            term: Search term (trimmed, case-insensitive)
            limit: Maximum results to return (0 or less = unlimited)

        Returns:
            Matching identifiers in catalog order; [] for a blank term

        Example:
            >>> search.search("york")
            ['America/New_York']
        """
        term = term.strip().lower()
        if not term:
            return []

        matches: list[str] = []
        for timezone in self.catalog.all():
            if term in timezone.lower():
                matches.append(timezone)
                if 0 < limit <= len(matches):
                    break
        return matches
