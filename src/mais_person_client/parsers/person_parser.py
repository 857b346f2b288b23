"""
PersonDocument: maps a full MAIS person XML document to record models.

Document shape (namespaces already stripped):

    <Person sunetid="..." regid="..." ...>
      <name type="registered">...<first nval="...">...</first>...</name>
      <title type="job">...</title>
      <biodemo visibility="..."><gender>...</gender></biodemo>
      <address type="home">...<line>...</line><city>...</city>...</address>
      <telephone type="work">...<icc/><area/><number/></telephone>
      <email type="primary">...<user/><host/></email>
      <affiliation affnum="1" type="staff">Staff
        <department affnum="1">Dept<organization adminid="..."/></department>
        <affdata type="job" code="...">...</affdata>
        <place type="work"><address/><telephone/></place>
      </affiliation>
      <identifier type="orcid" nval="...">...</identifier>
      <privgroup>...</privgroup>
      <edupersonaffiliation>...</edupersonaffiliation>
      <emergency_contact number="1" primary="true">...</emergency_contact>
    </Person>

Collection accessors walk the whole tree on every call (no caching), so
nested <address>/<telephone> elements under places are included.
"""

import logging
from typing import List, Optional, Union

from lxml import etree

from mais_person_client.models.person import (
    AffData,
    Address,
    Affiliation,
    Department,
    Email,
    EmergencyContact,
    Identifier,
    Location,
    PersonName,
    Place,
    Telephone,
    Title,
    Url,
)
from mais_person_client.parsers.xml_parser import (
    XmlDocument,
    attribute,
    child,
    children,
    collapse_lines,
    leading_text,
    normalized_text,
    text,
)

logger = logging.getLogger(__name__)

PRIMARY_AFFNUM = '1'
ACADEMIC_COUNCIL_TYPE = 'academic_council'
ACADEMIC_COUNCIL_MEMBER = 'member of academic council'


class PersonDocument:
    """
    Read-only view over a MAIS person record.

    Example:
        >>> person = PersonDocument(xml_string)
        >>> person.sunetid
        'donald'
        >>> person.first_name
        'Donald'
        >>> person.display_name.full_name
        'Donald Duck'
        >>> person.is_academic_council()
        False
    """

    HOME_ADDRESS_TYPES = ('home', 'permanent')

    def __init__(self, xml: Union[str, bytes]):
        self.xml = XmlDocument(xml)
        logger.debug(f"Parsed person document for sunetid={self.sunetid}")

    # === Root attributes ===

    @property
    def card(self) -> Optional[str]:
        return self.xml.root_attribute('card')

    @property
    def listing(self) -> Optional[str]:
        return self.xml.root_attribute('listing')

    @property
    def name_attr(self) -> Optional[str]:
        """Root `name` attribute ('Last, First Middle')."""
        return self.xml.root_attribute('name')

    @property
    def regid(self) -> Optional[str]:
        return self.xml.root_attribute('regid')

    @property
    def relationship(self) -> Optional[str]:
        return self.xml.root_attribute('relationship')

    @property
    def source(self) -> Optional[str]:
        return self.xml.root_attribute('source')

    @property
    def sunetid(self) -> Optional[str]:
        return self.xml.root_attribute('sunetid')

    @property
    def univid(self) -> Optional[str]:
        return self.xml.root_attribute('univid')

    @property
    def stanford_end_date(self) -> Optional[str]:
        """End date of the person's relationship; blank counts as absent."""
        value = self.xml.root_attribute('stanfordenddate')
        if value is None:
            return None
        stripped = value.strip()
        return stripped or None

    # === Names ===

    def names(self) -> List[PersonName]:
        return [self._build_person_name(node) for node in self.xml.find_all('name')]

    @property
    def registered_name(self) -> Optional[PersonName]:
        return next((name for name in self.names() if name.type == 'registered'), None)

    @property
    def display_name(self) -> Optional[PersonName]:
        return next((name for name in self.names() if name.type == 'display'), None)

    @property
    def first_name(self) -> Optional[str]:
        registered = self.registered_name
        return registered.first_name if registered else None

    @property
    def middle_name(self) -> Optional[str]:
        registered = self.registered_name
        return registered.middle if registered else None

    @property
    def last_name(self) -> Optional[str]:
        registered = self.registered_name
        return registered.last if registered else None

    # === Titles ===

    def titles(self) -> List[Title]:
        return [
            Title(
                type=attribute(node, 'type'),
                visibility=attribute(node, 'visibility'),
                title=text(node),
            )
            for node in self.xml.find_all('title')
        ]

    @property
    def job_title(self) -> Optional[str]:
        job = next((title for title in self.titles() if title.type == 'job'), None)
        return job.title if job else None

    # === Biodemo ===

    @property
    def gender(self) -> Optional[str]:
        return text(self.xml.find_first('//biodemo/gender'))

    @property
    def biodemo_visibility(self) -> Optional[str]:
        return attribute(self.xml.find_first('//biodemo'), 'visibility')

    # === Contact details ===

    def addresses(self) -> List[Address]:
        return [self._build_address(node) for node in self.xml.find_all('address')]

    def telephones(self) -> List[Telephone]:
        return [self._build_telephone(node) for node in self.xml.find_all('telephone')]

    def emails(self) -> List[Email]:
        return [
            Email(
                type=attribute(node, 'type'),
                visibility=attribute(node, 'visibility'),
                full_email=leading_text(node),
                user=text(child(node, 'user')),
                host=text(child(node, 'host')),
            )
            for node in self.xml.find_all('email')
        ]

    def urls(self) -> List[Url]:
        return [
            Url(
                type=attribute(node, 'type'),
                visibility=attribute(node, 'visibility'),
                url=text(node),
            )
            for node in self.xml.find_all('url')
        ]

    def locations(self) -> List[Location]:
        return [
            Location(
                code=attribute(node, 'code'),
                type=attribute(node, 'type'),
                visibility=attribute(node, 'visibility'),
                location=text(node),
            )
            for node in self.xml.find_all('location')
        ]

    def places(self) -> List[Place]:
        return [self._build_place(node) for node in self.xml.find_all('place')]

    @property
    def primary_email(self) -> Optional[str]:
        email = next((e for e in self.emails() if e.type == 'primary'), None)
        return email.full_email if email else None

    @property
    def homepage(self) -> Optional[str]:
        url = next((u for u in self.urls() if u.type == 'homepage'), None)
        return url.url if url else None

    @property
    def work_address(self) -> Optional[Address]:
        return next((a for a in self.addresses() if a.type == 'work'), None)

    @property
    def home_address(self) -> Optional[Address]:
        return next(
            (a for a in self.addresses() if a.type in self.HOME_ADDRESS_TYPES),
            None
        )

    @property
    def work_phone(self) -> Optional[Telephone]:
        return next((t for t in self.telephones() if t.type == 'work'), None)

    @property
    def mobile_phone(self) -> Optional[Telephone]:
        return next((t for t in self.telephones() if t.type == 'mobile'), None)

    # === Affiliations ===

    def affiliations(self) -> List[Affiliation]:
        return [self._build_affiliation(node) for node in self.xml.find_all('affiliation')]

    @property
    def primary_affiliation(self) -> Optional[Affiliation]:
        """The affiliation with affnum '1', if any."""
        return next(
            (aff for aff in self.affiliations() if aff.affnum == PRIMARY_AFFNUM),
            None
        )

    @property
    def primary_role(self) -> Optional[str]:
        primary = self.primary_affiliation
        return primary.type if primary else None

    @property
    def primary_org_code(self) -> Optional[str]:
        """Admin id of the primary affiliation's department organization."""
        primary = self.primary_affiliation
        if primary is None or primary.department is None:
            return None
        return primary.department.adminid

    @property
    def primary_effective_date(self) -> Optional[str]:
        primary = self.primary_affiliation
        return primary.effective if primary else None

    def is_academic_council(self) -> bool:
        """
        Whether the person is a member of the Academic Council.

        True only when some affiliation carries
        <affdata type="academic_council">Member of Academic Council</affdata>
        (case-insensitive exact match). 'NON-MEMBER' and any other value,
        as well as having no affiliations at all, yield False.
        """
        affiliations = self.affiliations()
        if not affiliations:
            return False

        return any(
            data.type == ACADEMIC_COUNCIL_TYPE
            and data.value is not None
            and data.value.lower() == ACADEMIC_COUNCIL_MEMBER
            for affiliation in affiliations
            for data in affiliation.affdata
        )

    # === Identifiers ===

    def identifiers(self) -> List[Identifier]:
        return [
            Identifier(
                type=attribute(node, 'type'),
                visibility=attribute(node, 'visibility'),
                nval=attribute(node, 'nval'),
                value=text(node),
            )
            for node in self.xml.find_all('identifier')
        ]

    def identifier_by_type(self, type: str) -> Optional[str]:
        """Value of the first identifier whose type matches exactly."""
        identifier = next((i for i in self.identifiers() if i.type == type), None)
        return identifier.value if identifier else None

    @property
    def orcid(self) -> Optional[str]:
        return self.identifier_by_type('orcid')

    @property
    def directory_id(self) -> Optional[str]:
        return self.identifier_by_type('directory')

    # === Groups and eduPerson ===

    def privgroups(self) -> List[str]:
        return [text(node) for node in self.xml.find_all('privgroup')]

    @property
    def eduperson_primary_affiliation(self) -> Optional[str]:
        return text(self.xml.find_first('//edupersonprimaryaffiliation'))

    def eduperson_affiliations(self) -> List[str]:
        return [text(node) for node in self.xml.find_all('edupersonaffiliation')]

    # === Emergency contacts ===

    def emergency_contacts(self) -> List[EmergencyContact]:
        return [
            self._build_emergency_contact(node)
            for node in self.xml.find_all('emergency_contact')
        ]

    # === Builders ===

    def _build_person_name(self, node: etree._Element) -> PersonName:
        first = child(node, 'first')
        middle = child(node, 'middle')
        last = child(node, 'last')
        return PersonName(
            type=attribute(node, 'type'),
            visibility=attribute(node, 'visibility'),
            full_name=leading_text(node),
            first_name=text(first),
            first_nval=attribute(first, 'nval'),
            middle=text(middle),
            middle_nval=attribute(middle, 'nval'),
            last=text(last),
            last_nval=attribute(last, 'nval'),
        )

    def _build_address(self, node: etree._Element) -> Address:
        state = child(node, 'state')
        country = child(node, 'country')
        return Address(
            type=attribute(node, 'type'),
            visibility=attribute(node, 'visibility'),
            full_address=leading_text(node),
            line=collapse_lines(children(node, 'line')),
            city=text(child(node, 'city')),
            state=text(state),
            state_code=attribute(state, 'code'),
            postal_code=text(child(node, 'postalcode')),
            country=text(country),
            country_alpha2=attribute(country, 'alpha2'),
            country_alpha3=attribute(country, 'alpha3'),
            country_numeric=attribute(country, 'numeric'),
            affnum=attribute(node, 'affnum'),
        )

    def _build_telephone(self, node: etree._Element, tagged: bool = True) -> Telephone:
        return Telephone(
            type=attribute(node, 'type'),
            visibility=attribute(node, 'visibility'),
            full_number=leading_text(node),
            icc=text(child(node, 'icc')),
            area=text(child(node, 'area')),
            number=text(child(node, 'number')),
            affnum=attribute(node, 'affnum') if tagged else None,
        )

    def _build_place(self, node: etree._Element) -> Place:
        return Place(
            type=attribute(node, 'type'),
            affnum=attribute(node, 'affnum'),
            address=[self._build_address(n) for n in children(node, 'address')],
            qbfr=text(child(node, 'qbfr')),
            telephone=[self._build_telephone(n) for n in children(node, 'telephone')],
        )

    def _build_department(self, node: Optional[etree._Element]) -> Optional[Department]:
        if node is None:
            return None

        org = child(node, 'organization')
        return Department(
            affnum=attribute(node, 'affnum'),
            name=leading_text(node),
            organization=normalized_text(org),
            adminid=attribute(org, 'adminid'),
            level2orgid=attribute(org, 'level2orgid'),
            level2orgname=attribute(org, 'level2orgname'),
            regid=attribute(org, 'regid'),
        )

    def _build_affiliation(self, node: etree._Element) -> Affiliation:
        return Affiliation(
            affnum=attribute(node, 'affnum'),
            effective=attribute(node, 'effective'),
            organization=attribute(node, 'organization'),
            type=attribute(node, 'type'),
            visibility=attribute(node, 'visibility'),
            name=leading_text(node),
            department=self._build_department(child(node, 'department')),
            description=text(child(node, 'description')),
            affdata=[
                AffData(
                    affnum=attribute(data, 'affnum'),
                    type=attribute(data, 'type'),
                    code=attribute(data, 'code'),
                    value=text(data),
                )
                for data in children(node, 'affdata')
            ],
            place=[self._build_place(n) for n in children(node, 'place')],
        )

    def _build_emergency_contact(self, node: etree._Element) -> EmergencyContact:
        relationship = child(node, 'contact_relationship')
        address = child(node, 'contact_address')
        return EmergencyContact(
            number=attribute(node, 'number'),
            primary=attribute(node, 'primary') == 'true',
            sync_permanent=attribute(node, 'sync_permanent') == 'true',
            visibility=attribute(node, 'visibility'),
            contact_name=text(child(node, 'contact_name')),
            contact_relationship=text(relationship),
            contact_relationship_code=attribute(relationship, 'code'),
            contact_telephones=[
                self._build_telephone(n, tagged=False)
                for n in children(node, 'contact_telephone')
            ],
            contact_address=self._build_address(address) if address is not None else None,
        )

    def __repr__(self) -> str:
        return f"PersonDocument(sunetid='{self.sunetid}', regid='{self.regid}')"
