"""
Record models for the full person document (/doc/person/{sunetid}).

Every field is optional: an attribute or element missing from the XML maps
to None, never to a placeholder string. Collections are tuples in document
order, so records stay immutable and hashable.
"""

from typing import Optional, Tuple, Union

from pydantic import Field

from mais_person_client.models.base import Record


class PersonName(Record):
    """
    A <name> element, e.g. the registered or display name.

    Attributes:
        type: 'registered', 'display', ...
        visibility: Directory privacy tag (e.g. 'world', 'none')
        full_name: Element's own text (e.g. 'Donald Duck')
        first_name / middle / last: Name parts
        first_nval / middle_nval / last_nval: Normalized ('nval') variants
    """

    type: Optional[str] = None
    visibility: Optional[str] = None
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    first_nval: Optional[str] = None
    middle: Optional[str] = None
    middle_nval: Optional[str] = None
    last: Optional[str] = None
    last_nval: Optional[str] = None


class Title(Record):
    type: Optional[str] = None
    visibility: Optional[str] = None
    title: Optional[str] = None


class Address(Record):
    """
    A postal address.

    `line` collapses: None for no <line> children, a single string for
    exactly one, a tuple of strings for two or more.
    """

    type: Optional[str] = None
    visibility: Optional[str] = None
    full_address: Optional[str] = None
    line: Optional[Union[str, Tuple[str, ...]]] = None
    city: Optional[str] = None
    state: Optional[str] = None
    state_code: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    country_alpha2: Optional[str] = None
    country_alpha3: Optional[str] = None
    country_numeric: Optional[str] = None
    affnum: Optional[str] = Field(
        default=None,
        description="Affiliation number when nested under an affiliation place"
    )


class Telephone(Record):
    type: Optional[str] = None
    visibility: Optional[str] = None
    full_number: Optional[str] = None
    icc: Optional[str] = Field(default=None, description="International calling code")
    area: Optional[str] = None
    number: Optional[str] = None
    affnum: Optional[str] = None


class Email(Record):
    type: Optional[str] = None
    visibility: Optional[str] = None
    full_email: Optional[str] = None
    user: Optional[str] = None
    host: Optional[str] = None


class Url(Record):
    type: Optional[str] = None
    visibility: Optional[str] = None
    url: Optional[str] = None


class Location(Record):
    code: Optional[str] = None
    type: Optional[str] = None
    visibility: Optional[str] = None
    location: Optional[str] = None


class Identifier(Record):
    type: Optional[str] = None
    visibility: Optional[str] = None
    nval: Optional[str] = None
    value: Optional[str] = None


class Department(Record):
    """
    Department of an affiliation.

    The person endpoint inlines the nested <organization> attributes here
    (adminid, level2orgid, ...) instead of a separate organization record.
    """

    affnum: Optional[str] = None
    name: Optional[str] = None
    organization: Optional[str] = None
    adminid: Optional[str] = None
    level2orgid: Optional[str] = None
    level2orgname: Optional[str] = None
    regid: Optional[str] = None


class AffData(Record):
    """Typed key/value extension of an affiliation (job code, stdhrs, ...)."""

    affnum: Optional[str] = None
    type: Optional[str] = None
    code: Optional[str] = None
    value: Optional[str] = None


class Place(Record):
    type: Optional[str] = None
    affnum: Optional[str] = None
    address: Tuple[Address, ...] = Field(default_factory=tuple)
    qbfr: Optional[str] = None
    telephone: Tuple[Telephone, ...] = Field(default_factory=tuple)


class Affiliation(Record):
    """
    An <affiliation> element. affnum '1' is the primary affiliation.

    `type` is a free-text, possibly comma-joined tag such as
    'faculty,nonactive'.
    """

    affnum: Optional[str] = None
    effective: Optional[str] = None
    organization: Optional[str] = None
    type: Optional[str] = None
    visibility: Optional[str] = None
    name: Optional[str] = None
    department: Optional[Department] = None
    description: Optional[str] = None
    affdata: Tuple[AffData, ...] = Field(default_factory=tuple)
    place: Tuple[Place, ...] = Field(default_factory=tuple)


class EmergencyContact(Record):
    number: Optional[str] = None
    primary: bool = False
    sync_permanent: bool = False
    visibility: Optional[str] = None
    contact_name: Optional[str] = None
    contact_relationship: Optional[str] = None
    contact_relationship_code: Optional[str] = None
    contact_telephones: Tuple[Telephone, ...] = Field(default_factory=tuple)
    contact_address: Optional[Address] = None
