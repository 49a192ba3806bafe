"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class FetchError(AdapterError):
    """A remote document could not be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")
