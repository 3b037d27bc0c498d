class LinkTrackerError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LinkTrackerError):
    """A required field is missing from a client request."""
    status_code = 400


class ApiError(LinkTrackerError):
    """GitHub answered with a non-2xx status."""

    def __init__(self, status: int, text: str):
        super().__init__(f"GitHub API error: {status} {text}")
        self.status = status
        self.text = text

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    @property
    def is_validation_failed(self) -> bool:
        return self.status == 422

    @property
    def is_rate_limited(self) -> bool:
        return self.status in (403, 429)


class TransportError(LinkTrackerError):
    """The request never produced a usable JSON response."""


class ConfigurationError(LinkTrackerError):
    """Raised at startup; the process must not serve."""


def error_response(error: LinkTrackerError):
    return {'error': error.message}, error.status_code
