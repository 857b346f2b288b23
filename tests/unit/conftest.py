"""
Pytest configuration for unit tests.

Provides XML fixtures and a client wired to an in-process mock API,
so no unit test touches the network.
"""

from pathlib import Path

import httpx
import pytest

from mais_person_client.config import ClientConfig
from mais_person_client.services.person_client import MaisPersonClient


FIXTURES_DIR = Path(__file__).parent.parent / 'fixtures'


@pytest.fixture(scope="session")
def person_xml() -> str:
    """Raw person document (Donald Duck)."""
    return (FIXTURES_DIR / 'person_sample.xml').read_text(encoding='utf-8')


@pytest.fixture(scope="session")
def affiliations_xml() -> str:
    """Raw affiliation document (Inspector Gadget)."""
    return (FIXTURES_DIR / 'affiliations_sample.xml').read_text(encoding='utf-8')


@pytest.fixture
def person(person_xml):
    from mais_person_client.parsers import PersonDocument
    return PersonDocument(person_xml)


@pytest.fixture
def affiliation_doc(affiliations_xml):
    from mais_person_client.parsers import AffiliationDocument
    return AffiliationDocument(affiliations_xml)


@pytest.fixture
def client_config() -> ClientConfig:
    """Config without a client certificate and with instant retries."""
    return ClientConfig(
        base_url='https://registry-uat.example.edu',
        api_key=None,
        api_cert=None,
        retry_interval=0,
        retry_jitter=0,
    )


@pytest.fixture
def make_client(client_config):
    """
    Factory building a MaisPersonClient backed by httpx.MockTransport.

    Usage:
        client = make_client(lambda request: httpx.Response(200, text='<Person/>'))
    """
    def _make(handler, config: ClientConfig = client_config) -> MaisPersonClient:
        return MaisPersonClient(config, transport=httpx.MockTransport(handler))

    return _make
