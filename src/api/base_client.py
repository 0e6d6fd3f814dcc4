"""
Base API client with common functionality
"""

import asyncio
from typing import Optional, Dict, Any
import httpx
from src.utils.logger import logger
from src.utils.error_handler import APIError
from src.config.constants import MAX_RETRIES, RETRY_DELAY


class BaseAPIClient:
    """Base class for API clients with common functionality"""

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        cookies: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize base API client

        Args:
            base_url: Base URL for API
            timeout: Request timeout in seconds
            cookies: Session cookies sent with every request
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(timeout=timeout, cookies=cookies, transport=transport)
        self.logger = logger

    async def _request(
        self,
        method: str,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
        retries: int = MAX_RETRIES,
    ) -> Dict[str, Any]:
        """
        Make HTTP request with retry logic

        Client errors (4xx) are not retried; server and transport errors
        are retried with a linear backoff.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            endpoint: API endpoint
            headers: Request headers
            params: Query parameters
            json_data: JSON body
            retries: Number of attempts

        Returns:
            Response data as dictionary

        Raises:
            APIError: If request fails after all retries
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)

        for attempt in range(retries):
            try:
                self.logger.debug(f"Request: {method} {url} (attempt {attempt + 1}/{retries})")

                request_kwargs = {
                    "method": method,
                    "url": url,
                    "headers": request_headers,
                    "params": params,
                }

                if json_data is not None:
                    request_kwargs["json"] = json_data
                    self.logger.debug(f"Request JSON data: {json_data}")

                response = await self.client.request(**request_kwargs)

                self.logger.debug(f"Response status: {response.status_code}")
                if response.status_code >= 400:
                    self.logger.warning(f"Error response body: {response.text[:1000]}")

                response.raise_for_status()

                # Handle empty response (204 No Content or empty body)
                if response.status_code == 204 or not response.text.strip():
                    return {}

                try:
                    payload = response.json()
                except ValueError:
                    self.logger.warning(f"Non-JSON response from {url}")
                    return {}

                if not isinstance(payload, dict):
                    return {"data": payload}
                return payload

            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                if status < 500 or attempt >= retries - 1:
                    self.logger.error(f"Request {method} {url} failed with status {status}")
                    raise APIError(self._error_message(e.response), error_code=str(status)) from e
                self.logger.warning(
                    f"Request failed with status {status}, "
                    f"retrying in {RETRY_DELAY * (attempt + 1)} seconds..."
                )
                await asyncio.sleep(RETRY_DELAY * (attempt + 1))

            except httpx.RequestError as e:
                if attempt >= retries - 1:
                    self.logger.error(f"Request error after {retries} attempts: {e}")
                    raise APIError(f"Falha de comunicação com o servidor: {e}") from e
                self.logger.warning(
                    f"Request error: {e}, retrying in {RETRY_DELAY * (attempt + 1)} seconds..."
                )
                await asyncio.sleep(RETRY_DELAY * (attempt + 1))

        raise APIError(f"Request {method} {url} was not attempted")

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Backend error message ("mensagem"/"message"/"error") or HTTP status"""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("mensagem", "message", "error"):
                if body.get(key):
                    return str(body[key])
        text = response.text.strip()
        return text[:200] if text else f"HTTP {response.status_code}"

    async def get(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Make GET request"""
        return await self._request("GET", endpoint, headers=headers, params=params)

    async def post(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Make POST request"""
        return await self._request("POST", endpoint, headers=headers, params=params, json_data=json_data)

    async def patch(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Make PATCH request"""
        return await self._request("PATCH", endpoint, headers=headers, params=params, json_data=json_data)

    async def delete(
        self,
        endpoint: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Make DELETE request"""
        return await self._request("DELETE", endpoint, headers=headers, params=params)

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.close()
