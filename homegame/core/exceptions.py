"""Error taxonomy for schedule fetching and configuration."""


class HomegameError(Exception):
    """Base class for all homegame errors."""


class UpstreamHttpError(HomegameError):
    """A required upstream request failed (non-2xx or transport error)."""

    def __init__(self, url: str, status_code: int | None = None, message: str | None = None):
        self.url = url
        self.status_code = status_code
        if message is None:
            message = f"HTTP {status_code} for {url}" if status_code else f"Request failed for {url}"
        super().__init__(message)


class UpstreamDecodeError(UpstreamHttpError):
    """A required upstream response was not valid JSON."""

    def __init__(self, url: str, status_code: int | None = None):
        super().__init__(url, status_code, f"Malformed JSON from {url}")


class UpstreamTimeoutError(UpstreamHttpError, TimeoutError):
    """A required upstream request exceeded the fixed timeout."""

    def __init__(self, url: str, timeout: float | None = None):
        self.timeout = timeout
        super().__init__(url, None, f"Timed out after {timeout}s for {url}")


class UnknownSportError(HomegameError, ValueError):
    """Sport tag has no registered adapter."""

    def __init__(self, sport: str):
        self.sport = sport
        super().__init__(f"Unknown sport adapter: {sport}")


class ConfigurationError(HomegameError):
    """Invalid static configuration (team file, missing api id, etc.)."""


class DuplicateSlugError(ConfigurationError):
    """Two teams share the same slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Duplicate team slug: {slug}")
