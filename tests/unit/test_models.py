"""
Unit tests for Pydantic request and record models.
"""

import pytest
from pydantic import ValidationError


class TestFetchUserRequest:
    """Test suite for FetchUserRequest model."""

    def test_defaults_to_all_tags(self):
        from mais_person_client.models.requests import FetchUserRequest

        request = FetchUserRequest(sunetid='donald')

        assert request.tags[0] == 'name'
        assert len(request.tags) == 10
        assert request.tags_param == (
            'name,title,email,url,location,affiliation,identifier,privgroup,profile,visibility'
        )

    def test_accepts_string_tags(self):
        from mais_person_client.models.requests import FetchUserRequest

        request = FetchUserRequest(sunetid='donald', tags='name, email')

        assert request.tags == ['name', 'email']
        assert request.tags_param == 'name,email'

    def test_accepts_list_tags(self):
        from mais_person_client.models.requests import FetchUserRequest

        request = FetchUserRequest(sunetid='donald', tags=['affiliation'])

        assert request.tags == ['affiliation']

    def test_validates_tags_automatically(self):
        from mais_person_client.models.requests import FetchUserRequest

        with pytest.raises(ValidationError) as exc_info:
            FetchUserRequest(sunetid='donald', tags=['name', 'bogus'])

        errors = exc_info.value.errors()
        assert any(e['loc'] == ('tags',) for e in errors)

    def test_validates_sunetid(self):
        from mais_person_client.models.requests import FetchUserRequest

        with pytest.raises(ValidationError) as exc_info:
            FetchUserRequest(sunetid='  ')

        errors = exc_info.value.errors()
        assert any(e['loc'] == ('sunetid',) for e in errors)

    def test_validation_error_is_value_error(self):
        from mais_person_client.models.requests import FetchUserRequest

        with pytest.raises(ValueError):
            FetchUserRequest(sunetid='donald', tags='ssn')

    def test_is_immutable(self):
        from mais_person_client.models.requests import FetchUserRequest

        request = FetchUserRequest(sunetid='donald')

        with pytest.raises(ValidationError):
            request.sunetid = 'daisy'


class TestRecords:
    """Test shared behaviour of the immutable record models."""

    def test_fields_default_to_none(self):
        from mais_person_client.models.person import Address

        address = Address()

        assert address.type is None
        assert address.line is None
        assert address.affnum is None

    def test_structural_equality(self):
        from mais_person_client.models.person import Email

        a = Email(type='primary', full_email='a@b.c')
        b = Email(type='primary', full_email='a@b.c')

        assert a == b
        assert a != Email(type='alternate', full_email='a@b.c')

    def test_line_keeps_scalar_or_list(self):
        from mais_person_client.models.affiliations import Address

        assert Address(line='1 Main St').line == '1 Main St'
        assert Address(line=['1 Main St', 'Suite 5']).line == ('1 Main St', 'Suite 5')

    def test_records_are_frozen(self):
        from mais_person_client.models.person import Url

        url = Url(type='homepage', url='http://x')

        with pytest.raises(ValidationError):
            url.url = 'http://y'

    def test_unknown_fields_rejected(self):
        from mais_person_client.models.person import Url

        with pytest.raises(ValidationError):
            Url(type='homepage', href='http://x')

    def test_collections_default_to_empty_lists(self):
        from mais_person_client.models.person import Affiliation, EmergencyContact

        assert Affiliation().affdata == ()
        assert Affiliation().place == ()
        assert EmergencyContact().contact_telephones == ()
        assert EmergencyContact().primary is False

    def test_affiliation_record_has_type(self):
        from mais_person_client.models.affiliations import AffiliationRecord

        record = AffiliationRecord(type='faculty,nonactive')

        assert record.has_type('faculty') is True
        assert record.has_type('nonactive') is True
        assert record.has_type('student') is False
        assert AffiliationRecord().has_type('faculty') is False

    def test_collections_cannot_be_mutated(self, person):
        affiliation = person.affiliations()[0]

        with pytest.raises(AttributeError):
            affiliation.affdata.append(affiliation.affdata[0])

        assert len(affiliation.affdata) == 2

    def test_records_with_collections_are_hashable(self, person, affiliation_doc):
        affiliation = person.affiliations()[0]
        record = affiliation_doc.affiliations()[0]

        assert hash(affiliation) == hash(person.affiliations()[0])
        assert hash(record) == hash(affiliation_doc.affiliations()[0])
        assert len({affiliation, person.affiliations()[0]}) == 1

    def test_multiple_lines_become_tuple(self):
        from mais_person_client.models.person import Address

        address = Address(line=['1 Main St', 'Suite 5'])

        assert isinstance(address.line, tuple)
        assert hash(address) == hash(Address(line=('1 Main St', 'Suite 5')))
