"""
MAIS Person API client.

Fetches person and affiliation documents and wraps them in the read-only
document views from mais_person_client.parsers.
"""

import logging
from typing import List, Optional, Union

import httpx

from mais_person_client.config import ClientConfig
from mais_person_client.models.requests import FetchUserRequest
from mais_person_client.parsers.affiliations_parser import AffiliationDocument
from mais_person_client.parsers.person_parser import PersonDocument
from mais_person_client.services.transport import MaisTransport
from mais_person_client.validators import validate_sunetid

logger = logging.getLogger(__name__)


class MaisPersonClient:
    """
    Client for the MAIS Person API.

    Usage:
        config = ClientConfig(
            base_url="https://registry-uat.stanford.edu",
            api_key=key_pem,
            api_cert=cert_pem,
        )
        client = MaisPersonClient(config)

        person = client.fetch_user("donald", tags="name,email")
        if person is None:
            print("no such user")
        else:
            print(person.display_name.full_name, person.primary_email)

        affiliations = client.fetch_user_affiliations("donald")

    Every call blocks on a single request; nothing is cached.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            config: Connection settings (base URL, certificate, timeouts)
            transport: Optional httpx transport, used by tests to mock the API
        """
        self.config = config
        self._transport = MaisTransport(config, transport=transport)

    @classmethod
    def from_env(cls, **overrides) -> 'MaisPersonClient':
        """
        Build a client from MAIS_* environment variables (and .env).

        Raises:
            ValidationError: If MAIS_BASE_URL is not set
        """
        return cls(ClientConfig(**overrides))

    def fetch_user_xml(
        self,
        sunetid: str,
        tags: Optional[Union[str, List[str]]] = None
    ) -> Optional[str]:
        """
        Fetch the raw person XML.

        Args:
            sunetid: SUNetID to fetch
            tags: Sections to return, comma-separated string or list;
                  defaults to every allowed tag

        Returns:
            XML body, or None if the user was not found

        Raises:
            ValidationError: If a tag is not allowed (before any request)
            MaisError: On an unexpected API response
        """
        request = FetchUserRequest(sunetid=sunetid, tags=tags)
        return self._transport.fetch(
            f"/doc/person/{request.sunetid}",
            params={'tags': request.tags_param},
            allow404=True
        )

    def fetch_user(
        self,
        sunetid: str,
        tags: Optional[Union[str, List[str]]] = None
    ) -> Optional[PersonDocument]:
        """
        Fetch a person record.

        Returns:
            PersonDocument, or None if the user was not found

        Raises:
            ValidationError: If a tag is not allowed (before any request)
            MaisError: On an unexpected API response

        Example:
            >>> person = client.fetch_user('donald')
            >>> person.first_name
            'Donald'
        """
        body = self.fetch_user_xml(sunetid, tags=tags)
        if body is None:
            logger.info(f"User {sunetid} not found")
            return None
        return PersonDocument(body)

    def fetch_user_affiliations_xml(self, sunetid: str) -> Optional[str]:
        """Fetch the raw affiliation XML, or None if the user was not found."""
        sunetid = validate_sunetid(sunetid)
        return self._transport.fetch(
            f"/doc/person/{sunetid}/affiliation",
            allow404=True
        )

    def fetch_user_affiliations(self, sunetid: str) -> Optional[AffiliationDocument]:
        """
        Fetch a person's affiliations.

        Returns:
            AffiliationDocument, or None if the user was not found

        Raises:
            ValueError: If the sunetid is blank or malformed
            MaisError: On an unexpected API response
        """
        body = self.fetch_user_affiliations_xml(sunetid)
        if body is None:
            logger.info(f"Affiliations for {sunetid} not found")
            return None
        return AffiliationDocument(body)
