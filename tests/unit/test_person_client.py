"""
Unit tests for MaisPersonClient.

IMPORTANT: These are UNIT tests - the MAIS API is replaced by
httpx.MockTransport (see make_client in conftest.py).
"""

import httpx
import pytest
from pydantic import ValidationError

from mais_person_client.exceptions import ServerError, UnauthorizedError
from mais_person_client.parsers import AffiliationDocument, PersonDocument
from mais_person_client.services.person_client import MaisPersonClient


class TestFetchUser:
    """Test fetch_user() / fetch_user_xml()."""

    def test_returns_person_document(self, make_client, person_xml):
        client = make_client(lambda request: httpx.Response(200, text=person_xml))

        person = client.fetch_user('donald')

        assert isinstance(person, PersonDocument)
        assert person.sunetid == 'donald'
        assert person.display_name.full_name == 'Donald Duck'

    def test_requests_person_path_with_all_tags_by_default(self, make_client):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, text='<Person/>')

        make_client(handler).fetch_user('donald')

        assert requests[0].method == 'GET'
        assert requests[0].url.path == '/doc/person/donald'
        assert requests[0].url.params['tags'] == (
            'name,title,email,url,location,affiliation,identifier,privgroup,profile,visibility'
        )

    def test_passes_requested_tags(self, make_client):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, text='<Person/>')

        make_client(handler).fetch_user('donald', tags=['name', 'email'])

        assert requests[0].url.params['tags'] == 'name,email'

    def test_invalid_tags_fail_before_any_request(self, make_client):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, text='<Person/>')

        with pytest.raises(ValidationError, match="Invalid tag"):
            make_client(handler).fetch_user('donald', tags='name,ssn')

        assert requests == []

    def test_not_found_returns_none(self, make_client):
        client = make_client(lambda request: httpx.Response(404, text='not found'))

        assert client.fetch_user('totally-bogus') is None
        assert client.fetch_user_xml('totally-bogus') is None

    def test_fetch_user_xml_returns_raw_body(self, make_client, person_xml):
        client = make_client(lambda request: httpx.Response(200, text=person_xml))

        body = client.fetch_user_xml('donald')

        assert body.startswith('<?xml')
        assert 'sunetid="donald"' in body

    def test_unauthorized_propagates(self, make_client):
        client = make_client(lambda request: httpx.Response(401, text='no cert'))

        with pytest.raises(UnauthorizedError):
            client.fetch_user('donald')

    def test_server_error_propagates(self, make_client):
        client = make_client(lambda request: httpx.Response(500, text='boom'))

        with pytest.raises(ServerError):
            client.fetch_user('donald')


class TestFetchUserAffiliations:
    """Test fetch_user_affiliations()."""

    def test_returns_affiliation_document(self, make_client, affiliations_xml):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, text=affiliations_xml)

        doc = make_client(handler).fetch_user_affiliations('igadget')

        assert isinstance(doc, AffiliationDocument)
        assert doc.primary_org_code == 'CRIME'
        assert requests[0].url.path == '/doc/person/igadget/affiliation'
        assert 'tags' not in requests[0].url.params

    def test_not_found_returns_none(self, make_client):
        client = make_client(lambda request: httpx.Response(404))

        assert client.fetch_user_affiliations('nobody') is None

    def test_rejects_malformed_sunetid(self, make_client):
        client = make_client(lambda request: httpx.Response(200, text='<Person/>'))

        with pytest.raises(ValueError):
            client.fetch_user_affiliations('../admin')


class TestFromEnv:
    def test_builds_config_from_environment(self, monkeypatch):
        monkeypatch.setenv('MAIS_BASE_URL', 'https://registry.example.edu')
        monkeypatch.delenv('MAIS_API_KEY', raising=False)
        monkeypatch.delenv('MAIS_API_CERT', raising=False)

        client = MaisPersonClient.from_env(user_agent='test-agent', api_key=None, api_cert=None)

        assert client.config.base_url == 'https://registry.example.edu'
        assert client.config.user_agent == 'test-agent'
