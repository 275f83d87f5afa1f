class GenericException(Exception):
    message: str
    code: int = 500  # Default code is 500
    detail: str | list[str] | None = None

    def __init__(
        self,
        message: str,
        code: int | None = None,
        detail: str | list[str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if detail is not None:
            self.detail = detail

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"{self.__class__.__name__}: {self.message}"


class ClientError(GenericException):
    """
    Raised when a client error occurs. Use this as an exception base class for all client
    exceptions.
    """

    code: int = 400


class ServiceError(GenericException):
    """
    Raised when an error that is not caused by bad user input occurs within the service
    """

    code: int = 500


class InvalidArgumentError(ClientError):
    """
    Raised for malformed call parameters before any request is sent, e.g. an
    unknown sort field or a `previous` page request without a cursor.
    """

    code = 400


class ValidationError(ClientError):
    """
    The backend rejected a request payload. `field_errors` maps each offending
    property to its messages.
    """

    code = 400

    def __init__(
        self,
        message: str,
        code: int | None = None,
        detail: str | list[str] | None = None,
        field_errors: dict[str, list[str]] | None = None,
    ):
        super().__init__(message, code=code, detail=detail)
        self.field_errors = field_errors or {}


class UnauthorizedError(ClientError):
    """Missing, expired or invalid bearer token. The caller should re-authenticate."""

    code = 401


class ForbiddenError(ClientError):
    """Valid token without the privilege for the operation. Not retryable."""

    code = 403


class NotFoundError(ClientError):
    code = 404


class UpstreamError(ServiceError):
    """
    The backend answered with a server error or an unreadable body. Safe to
    retry for idempotent operations.
    """

    code = 502


class TransportError(ServiceError):
    """
    Network, DNS or timeout failure before a response arrived. Safe to retry for
    idempotent operations.
    """

    code = 503


class RequestCancelledError(GenericException):
    """The caller's cancellation signal aborted the request."""

    code = 499
