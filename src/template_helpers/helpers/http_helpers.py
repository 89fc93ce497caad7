from __future__ import annotations

import logging

import httpx

from template_helpers.capabilities import Capabilities
from template_helpers.core import HelperRegistry, ParamSpec
from template_helpers.errors import HelperIOError

logger = logging.getLogger(__name__)


def make_http_get(capabilities: Capabilities):
    def http_get(url: str) -> str:
        logger.debug("GET %s", url)
        try:
            with capabilities.http_client_factory() as client:
                response = client.get(url, timeout=capabilities.http_timeout)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as exc:
            raise HelperIOError(
                target=url, message=f"HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise HelperIOError(target=url, message=str(exc) or type(exc).__name__) from exc

    return http_get


def register(registry: HelperRegistry, capabilities: Capabilities) -> None:
    registry.register_function(
        "http_get",
        make_http_get(capabilities),
        (ParamSpec(name="url"),),
        description="Body of a GET request, as text.",
    )
