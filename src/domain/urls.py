from urllib.parse import urlsplit


def is_absolute_url(value: str) -> bool:
    """True when ``value`` has both a scheme and a host."""
    if not value or any(ch.isspace() for ch in value.strip()):
        return False
    try:
        parts = urlsplit(value.strip())
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)
