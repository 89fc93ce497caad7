import httpx
import pytest

from template_helpers import Capabilities, HelperSettings, build_registry, create_environment
from template_helpers.errors import HelperIOError


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/version":
        return httpx.Response(200, text='{"version": "3.2.1"}')
    if request.url.path == "/down":
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(404, text="nope")


@pytest.fixture
def render_http():
    capabilities = Capabilities(
        http_client_factory=lambda: httpx.Client(transport=httpx.MockTransport(_handler)),
        http_timeout=5.0,
    )
    registry = build_registry(HelperSettings(groups={"http", "data", "string"}), capabilities)
    env = create_environment(registry=registry)

    def _render(template: str) -> str:
        return env.from_string(template).render()

    return _render


def test_http_get_returns_body(render_http):
    rendered = render_http('{{ http_get("https://example.test/version") }}')
    assert rendered == '{"version": "3.2.1"}'


def test_http_get_feeds_query(render_http):
    rendered = render_http(
        '{{ unquote(json_str_query("version", '
        'http_get("https://example.test/version"), format="json")) }}'
    )
    assert rendered == "3.2.1"


def test_error_status_raises(render_http):
    with pytest.raises(HelperIOError) as exc_info:
        render_http('{{ http_get("https://example.test/missing") }}')

    assert exc_info.value.helper == "http_get"
    assert exc_info.value.detail == "HTTP 404"


def test_transport_failure_raises(render_http):
    with pytest.raises(HelperIOError) as exc_info:
        render_http('{{ http_get("https://example.test/down") }}')

    assert "connection refused" in exc_info.value.detail
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
