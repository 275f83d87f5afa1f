import pytest

from hoopers_api.adapters.http.port import HttpResponse
from hoopers_api.domain.exceptions import (
    ClientError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    UpstreamError,
    ValidationError,
)
from hoopers_api.utils.http_errors import (
    error_for_status,
    extract_error_message,
    extract_field_errors,
    raise_for_status,
)


@pytest.mark.unit
class TestErrorForStatus:
    @pytest.mark.parametrize(
        "status_code, expected",
        [
            (400, ValidationError),
            (422, ValidationError),
            (401, UnauthorizedError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (409, ClientError),
            (500, UpstreamError),
            (503, UpstreamError),
        ],
    )
    def test_status_classification(self, status_code, expected):
        error = error_for_status(HttpResponse(status_code=status_code))
        assert type(error) is expected
        assert error.code == status_code

    def test_validation_error_carries_field_errors(self):
        response = HttpResponse(
            status_code=400,
            body={
                "title": "One or more validation errors occurred.",
                "errors": {"Name": ["The Name field is required."]},
            },
        )
        error = error_for_status(response, "Creating Run")
        assert error.message == "Creating Run: One or more validation errors occurred."
        assert error.field_errors == {"Name": ["The Name field is required."]}

    def test_raise_for_status_passes_success_through(self):
        response = HttpResponse(status_code=204)
        assert raise_for_status(response) is response

    def test_raise_for_status_raises(self):
        with pytest.raises(NotFoundError):
            raise_for_status(HttpResponse(status_code=404))


@pytest.mark.unit
class TestExtractors:
    def test_message_lookup_is_case_insensitive(self):
        response = HttpResponse(status_code=400, body={"Message": "Bad run"})
        assert extract_error_message(response) == "Bad run"

    def test_message_falls_back_to_text(self):
        response = HttpResponse(status_code=500, text="Server exploded")
        assert extract_error_message(response) == "Server exploded"

    def test_fastapi_detail_list(self):
        body = {
            "detail": [
                {"loc": ["body", "points"], "msg": "Input should be a valid integer"}
            ]
        }
        assert extract_field_errors(body) == {
            "points": ["Input should be a valid integer"]
        }

    def test_non_dict_body_has_no_field_errors(self):
        assert extract_field_errors(["oops"]) == {}
