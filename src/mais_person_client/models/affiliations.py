"""
Record models for the affiliation-only document
(/doc/person/{sunetid}/affiliation).

Shapes parallel models.person but differ where the two endpoints differ:
here a department wraps a full Organization record, and affnum leads the
address/telephone records.
"""

from typing import Optional, Tuple, Union

from pydantic import Field

from mais_person_client.models.base import Record


class Organization(Record):
    """
    Organization nested in a department.

    Attributes:
        acadid: Academic org id
        adminid: Administrative org code (e.g. 'CRIME')
        level2orgid / level2orgname: Parent (school-level) organization
        regid: Registry id of the organization
        name: Organization display name, whitespace-normalized
    """

    acadid: Optional[str] = None
    adminid: Optional[str] = None
    level2orgid: Optional[str] = None
    level2orgname: Optional[str] = None
    regid: Optional[str] = None
    name: Optional[str] = None


class Department(Record):
    affnum: Optional[str] = None
    name: Optional[str] = None
    organization: Optional[Organization] = None


class AffData(Record):
    affnum: Optional[str] = None
    type: Optional[str] = None
    code: Optional[str] = None
    value: Optional[str] = None


class Address(Record):
    affnum: Optional[str] = None
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


class Telephone(Record):
    affnum: Optional[str] = None
    type: Optional[str] = None
    visibility: Optional[str] = None
    full_number: Optional[str] = None
    icc: Optional[str] = None
    area: Optional[str] = None
    number: Optional[str] = None


class Place(Record):
    affnum: Optional[str] = None
    type: Optional[str] = None
    address: Tuple[Address, ...] = Field(default_factory=tuple)
    telephone: Tuple[Telephone, ...] = Field(default_factory=tuple)


class AffiliationRecord(Record):
    """One <affiliation> of the affiliation document."""

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

    def has_type(self, tag: str) -> bool:
        """Substring match on the (possibly comma-joined) type tag."""
        return self.type is not None and tag in self.type
