from typing import Any

from hoopers_api.adapters.http.port import HttpResponse
from hoopers_api.domain.exceptions import (
    ClientError,
    ForbiddenError,
    GenericException,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
    UpstreamError,
    ValidationError,
)

MESSAGE_FIELDS = ("message", "error", "title", "detail", "description")


def extract_error_message(response: HttpResponse) -> str | None:
    """Extract error message from response if possible."""
    body = response.body
    if isinstance(body, dict):
        lowered = {str(key).lower(): value for key, value in body.items()}
        for field in MESSAGE_FIELDS:
            value = lowered.get(field)
            if isinstance(value, dict):
                value = value.get("message")
            if isinstance(value, str) and value:
                return value
    if isinstance(body, str) and body:
        return body[:200]
    if response.text:
        return response.text[:200]
    return None


def extract_field_errors(body: Any) -> dict[str, list[str]]:
    """
    Collect field-level validation messages.

    Understands ASP.NET problem details (`{"errors": {"Name": ["..."]}}`) and
    FastAPI validation bodies (`{"detail": [{"loc": [...], "msg": "..."}]}`).
    """
    if not isinstance(body, dict):
        return {}
    lowered = {str(key).lower(): value for key, value in body.items()}

    field_errors: dict[str, list[str]] = {}
    errors = lowered.get("errors")
    if isinstance(errors, dict):
        for field, messages in errors.items():
            if isinstance(messages, list):
                field_errors[str(field)] = [str(message) for message in messages]
            elif messages is not None:
                field_errors[str(field)] = [str(messages)]

    detail = lowered.get("detail")
    if isinstance(detail, list):
        for entry in detail:
            if not isinstance(entry, dict):
                continue
            location = [str(part) for part in entry.get("loc", []) if part != "body"]
            field = ".".join(location) or "__root__"
            field_errors.setdefault(field, []).append(str(entry.get("msg", "")))

    return field_errors


def error_for_status(response: HttpResponse, context: str = "") -> GenericException:
    """
    Map a non-2xx response to its domain exception.

    Error handling logic:
    - 400, 422 → ValidationError (with field errors)
    - 401 → UnauthorizedError
    - 403 → ForbiddenError
    - 404 → NotFoundError
    - Other 4xx → ClientError
    - 5xx → UpstreamError
    """
    status_code = response.status_code
    message = extract_error_message(response) or f"HTTP {status_code}"
    if context:
        message = f"{context}: {message}"

    if status_code in (400, 422):
        return ValidationError(
            message,
            code=status_code,
            field_errors=extract_field_errors(response.body),
        )
    if status_code == 401:
        return UnauthorizedError(message)
    if status_code == 403:
        return ForbiddenError(message)
    if status_code == 404:
        return NotFoundError(message)
    if 400 <= status_code < 500:
        return ClientError(message, code=status_code)
    if 500 <= status_code < 600:
        return UpstreamError(message, code=status_code, detail=response.text[:200])
    return ServiceError(f"Unexpected response status {status_code}", code=status_code)


def raise_for_status(response: HttpResponse, context: str = "") -> HttpResponse:
    if response.is_success:
        return response
    raise error_for_status(response, context)
