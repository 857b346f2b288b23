"""
MAIS HTTP transport.

Issues authenticated GET requests against the MAIS Person API:
- TLS client certificate built from the PEM key/cert in ClientConfig
- Exponential backoff with jitter on connection-level failures (tenacity)
- 404 optionally mapped to None; other failures to typed MaisError subclasses
"""

import logging
import os
import ssl
import tempfile
from typing import Dict, Optional

import httpx
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from mais_person_client.config import ClientConfig
from mais_person_client.exceptions import raise_for_response

logger = logging.getLogger(__name__)


def build_ssl_context(api_cert: str, api_key: str) -> ssl.SSLContext:
    """
    Build an SSL context presenting the MAIS client certificate.

    The ssl module only loads certificate chains from files, so the PEM
    strings are written to a private temporary directory that is removed
    as soon as the chain is loaded.

    Raises:
        ssl.SSLError: If the certificate or key is not valid PEM
    """
    context = ssl.create_default_context()
    with tempfile.TemporaryDirectory() as tmp_dir:
        cert_path = os.path.join(tmp_dir, 'client.crt')
        key_path = os.path.join(tmp_dir, 'client.key')
        with open(cert_path, 'w', encoding='utf-8') as f:
            f.write(api_cert)
        with open(key_path, 'w', encoding='utf-8') as f:
            f.write(api_key)
        context.load_cert_chain(certfile=cert_path, keyfile=key_path)
    return context


class MaisTransport:
    """
    Blocking GET transport for the MAIS Person API.

    A new httpx.Client is opened per call, so one MaisTransport can be
    shared between threads.

    Usage:
        transport = MaisTransport(ClientConfig(base_url="https://registry-uat.stanford.edu"))
        body = transport.fetch("/doc/person/donald", allow404=True)

    Args:
        config: Connection settings
        transport: Optional httpx transport (e.g. httpx.MockTransport in tests);
                   when given, TLS settings are left to it
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.config = config
        self._transport = transport
        self._ssl_context: Optional[ssl.SSLContext] = None

        if transport is None and config.uses_client_certificate:
            self._ssl_context = build_ssl_context(config.api_cert, config.api_key)

    def _client(self) -> httpx.Client:
        kwargs = {
            'base_url': self.config.base_url,
            'headers': {'User-Agent': self.config.user_agent},
            'timeout': httpx.Timeout(self.config.timeout, connect=self.config.open_timeout),
        }
        if self._transport is not None:
            kwargs['transport'] = self._transport
        elif self._ssl_context is not None:
            kwargs['verify'] = self._ssl_context
        return httpx.Client(**kwargs)

    def _retrying(self) -> Retrying:
        return Retrying(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(self.config.max_retries + 1),
            wait=wait_exponential_jitter(
                initial=self.config.retry_interval,
                exp_base=self.config.retry_backoff_factor,
                jitter=self.config.retry_jitter,
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    def _get(self, path: str, params: Optional[Dict[str, str]]) -> httpx.Response:
        with self._client() as client:
            return client.get(path, params=params)

    def fetch(
        self,
        path: str,
        params: Optional[Dict[str, str]] = None,
        allow404: bool = False
    ) -> Optional[str]:
        """
        GET a path and return the response body.

        Args:
            path: Path relative to base_url (e.g. "/doc/person/donald")
            params: Optional query parameters
            allow404: Return None instead of raising on 404

        Returns:
            Response body text, or None for an allowed 404

        Raises:
            UnauthorizedError: On 401
            ServerError: On 500
            UnexpectedResponseError: On any other non-success status
            httpx.TransportError: If every attempt failed to connect
        """
        logger.debug(f"GET {path} params={params}")

        response = self._retrying()(self._get, path, params)

        if allow404 and response.status_code == 404:
            logger.debug(f"GET {path} returned 404, treating as not found")
            return None

        if not response.is_success:
            raise_for_response(response)

        logger.debug(f"GET {path} returned {response.status_code} ({len(response.content)} bytes)")
        return response.text
