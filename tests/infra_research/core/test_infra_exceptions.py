from infra_research.core.exceptions import (
    ApplicationError,
    InfraApiError,
    NetworkError,
    RequestFailedError,
    ResponseDecodeError,
    RouteNotFoundError,
    error_payload,
    raw_snippet,
)


def test_all_errors_share_the_base_class():
    for cls in (ApplicationError, NetworkError, RequestFailedError, ResponseDecodeError, RouteNotFoundError):
        assert issubclass(cls, InfraApiError)


def test_route_not_found_message_and_status():
    exc = RouteNotFoundError("http://a.example/api/x")
    assert str(exc) == "Route not found on http://a.example/api/x"
    assert exc.status_code == 404
    assert exc.code == "route_not_found"


def test_network_error_defaults_empty_message():
    exc = NetworkError("", target="http://a.example")
    assert str(exc) == "Network request failed"
    assert exc.target == "http://a.example"
    assert exc.status_code is None


def test_error_payload_shape():
    exc = ApplicationError("Invalid province", status_code=400, details={"error": "Invalid province"})
    assert error_payload(exc) == {
        "error": "Invalid province",
        "code": "application_error",
        "type": "ApplicationError",
        "status_code": 400,
        "details": {"error": "Invalid province"},
    }


def test_error_payload_omits_empty_context():
    assert error_payload(RequestFailedError("failed")) == {
        "error": "failed",
        "code": "request_failed",
        "type": "RequestFailedError",
    }


def test_explicit_code_overrides_default():
    assert ResponseDecodeError("bad", code="custom").code == "custom"


def test_raw_snippet_limit():
    assert raw_snippet("abc", limit=2) == "ab"
    assert raw_snippet("abc") == "abc"
