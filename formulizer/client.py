"""HTTP client for the platform's formula evaluation and object metadata endpoints"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple, Type

import httpx

from .config import Settings, settings as default_settings
from .evaluation import EvaluationRequest, EvaluationResultItem, parse_results
from .exceptions import ConfigurationError, EvaluationError, MetadataError, RemoteCallError

logger = logging.getLogger(__name__)


def extract_error_message(response: httpx.Response) -> Tuple[str, Optional[str]]:
    """Pull (message, error_code) out of a platform error response.

    The platform answers either {"message": ...} or [{"message": ..., "errorCode": ...}].
    Falls back to the HTTP reason phrase when the body carries no message.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, list) and body and isinstance(body[0], dict):
        body = body[0]
    if isinstance(body, dict) and body.get('message'):
        return str(body['message']), body.get('errorCode')

    text = response.text.strip() if response.text else ''
    return text or f"HTTP {response.status_code} {response.reason_phrase}".strip(), None


def object_options(records: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    options = []
    for rec in records:
        name = rec.get('QualifiedApiName')
        if name:
            options.append({'label': name, 'value': name})
    return options


class PlatformClient:
    """Async client for the formula service"""

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or default_settings
        if not self.config.INSTANCE_URL:
            raise ConfigurationError("FORMULIZER_INSTANCE_URL is not set.")
        self.timeout = self.config.REQUEST_TIMEOUT
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {'Accept': 'application/json'}
        if self.config.ACCESS_TOKEN:
            headers['Authorization'] = f"Bearer {self.config.ACCESS_TOKEN}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.INSTANCE_URL.rstrip('/'),
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _call(
        self,
        method: str,
        path: str,
        error_cls: Type[RemoteCallError],
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        try:
            async with self._client() as client:
                response = await client.request(method, path, json=json_body)
        except httpx.TimeoutException as e:
            logger.error(f"Timed out calling {path}: {e}")
            raise error_cls(f"The request to {path} timed out after {self.timeout} seconds.") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Transport error calling {path}: {e}")
            raise error_cls(f"Could not reach the platform: {e}") from e

        if response.is_error:
            message, error_code = extract_error_message(response)
            logger.warning(f"{path} returned {response.status_code}: {message}")
            raise error_cls(message, status_code=response.status_code, error_code=error_code)

        try:
            return response.json()
        except ValueError as e:
            raise error_cls("The platform returned a response that is not valid JSON.",
                            status_code=response.status_code) from e

    async def evaluate(self, request: EvaluationRequest) -> List[EvaluationResultItem]:
        logger.info(f"Evaluating {request.return_type} formula against {request.obj_type}")
        payload = await self._call('POST', self.config.EVALUATE_PATH, EvaluationError, request.to_payload())
        results = parse_results(payload)
        logger.debug(f"Evaluation returned {len(results)} records")
        return results

    async def list_queryable_objects(self) -> List[Dict[str, Any]]:
        payload = await self._call('GET', self.config.OBJECTS_PATH, MetadataError)
        if not isinstance(payload, list):
            raise MetadataError("Unexpected response from the platform: expected a list of objects.")
        return [rec for rec in payload if isinstance(rec, dict)]
