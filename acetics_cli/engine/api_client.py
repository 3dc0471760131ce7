"""
Acetics API Client — Thin JSON transport over httpx with bearer auth.

One request per call, library-default timeouts, no retries, no caching.
Request bodies may be pydantic models or plain JSON values; responses are
returned raw or validated into a pydantic model when a response type is
given.

Usage:
    client = AceticsClient.from_config(config)
    result = await client.json_request("POST", "tasks/create", task)
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Type, TypeVar, overload

import httpx
from pydantic import BaseModel, ValidationError

from acetics_cli.engine.config import AceticsConfig
from acetics_cli.engine.errors import AceticsIntegrationError
from acetics_cli.records.task import Task

logger = logging.getLogger("acetics_cli.engine.api_client")

CREATE_TASK_PATH = "tasks/create"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def join_url(endpoint: str, path: str) -> str:
    """Join endpoint and path with exactly one '/'."""
    return f"{endpoint.rstrip('/')}/{path.lstrip('/')}"


def _encode_body(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json")
    return body


class AceticsClient:
    """
    Sends JSON requests to the configured Acetics endpoint.

    A custom httpx transport can be injected (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        endpoint: str,
        token: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._endpoint = endpoint
        self._token = token
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: AceticsConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "AceticsClient":
        return cls(config.endpoint, config.token, transport=transport)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @overload
    async def json_request(self, method: str, path: str, body: Any) -> Any: ...

    @overload
    async def json_request(
        self, method: str, path: str, body: Any, response_type: Type[ResponseT]
    ) -> ResponseT: ...

    async def json_request(
        self,
        method: str,
        path: str,
        body: Any,
        response_type: Optional[Type[ResponseT]] = None,
    ) -> Any:
        """
        Send *body* as JSON and decode the JSON response.

        Args:
            method: HTTP method, e.g. "POST".
            path: Path relative to the configured endpoint.
            body: Pydantic model or JSON-serializable value.
            response_type: Optional pydantic model to validate the response into.

        Returns:
            Decoded JSON, or a response_type instance.

        Raises:
            AceticsIntegrationError on transport failure, non-2xx status,
            or a response that is not valid JSON for response_type.
        """
        method = method.upper()
        url = join_url(self._endpoint, path)
        logger.debug(f"{method} {url}")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(
                    method,
                    url,
                    headers=self.headers(),
                    json=_encode_body(body),
                )
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise AceticsIntegrationError(
                f"{method} {url} failed: {e}", method=method, url=url
            ) from e

        logger.debug(f"{method} {url} -> {response.status_code}")

        if not response.is_success:
            raise AceticsIntegrationError(
                f"{method} {url} failed with HTTP {response.status_code}",
                method=method,
                url=url,
                status_code=response.status_code,
                response_body=response.text,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise AceticsIntegrationError(
                f"{method} {url} returned a non-JSON body",
                method=method,
                url=url,
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        if response_type is None:
            return payload

        try:
            return response_type.model_validate(payload)
        except ValidationError as e:
            raise AceticsIntegrationError(
                f"{method} {url} returned an unexpected body: {e}",
                method=method,
                url=url,
                status_code=response.status_code,
                response_body=response.text,
            ) from e

    async def create_task(self, task: Task) -> Any:
        """POST the task to tasks/create and return the raw JSON response."""
        return await self.json_request("POST", CREATE_TASK_PATH, task)
