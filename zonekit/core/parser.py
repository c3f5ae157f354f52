"""Identifier taxonomy parsing (Region/City[/SubCity...])."""


def get_label(timezone: str) -> str:
    """
    Get display label for an identifier.

    Region is kept and the "/" separator preserved; only underscores change.

    Example:
        >>> get_label("America/New_York")
        'America/New York'
    """
    return timezone.replace("_", " ")


def get_region(timezone: str) -> str:
    """
    Get region part (before the first "/"), or the whole identifier.

    Example:
        >>> get_region("America/Argentina/Buenos_Aires")
        'America'
        >>> get_region("UTC")
        'UTC'
    """
    return timezone.split("/", 1)[0]


def get_city(timezone: str) -> str:
    """
    Get city/location part (after the first "/") with underscores as spaces.

    Falls back to the whole identifier when there is no "/".

    Example:
        >>> get_city("America/Argentina/Buenos_Aires")
        'Argentina/Buenos Aires'
        >>> get_city("UTC")
        'UTC'
    """
    _, sep, city = timezone.partition("/")
    return get_label(city if sep else timezone)
