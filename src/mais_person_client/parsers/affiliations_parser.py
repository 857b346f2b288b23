"""
AffiliationDocument: maps the affiliation-only MAIS document to records.

The affiliation endpoint returns the same <Person> root attributes as the
person endpoint but only <affiliation> children. Its department nests a
full <organization> record, which is why the record shapes live in
models.affiliations rather than being shared with models.person.
"""

import logging
from typing import List, Optional, Union

from lxml import etree

from mais_person_client.models.affiliations import (
    AffData,
    Address,
    AffiliationRecord,
    Department,
    Organization,
    Place,
    Telephone,
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


class AffiliationDocument:
    """
    Read-only view over a MAIS affiliation document.

    Type filters use substring matching on the affiliation type, because
    the API joins tags with commas ('faculty,nonactive'): such an
    affiliation is a faculty affiliation but not an active one.

    Example:
        >>> doc = AffiliationDocument(xml_string)
        >>> [aff.type for aff in doc.active_affiliations()]
        ['faculty']
        >>> doc.primary_org_code
        'CRIME'
    """

    def __init__(self, xml: Union[str, bytes]):
        self.xml = XmlDocument(xml)
        logger.debug(f"Parsed affiliation document for sunetid={self.sunetid}")

    # === Root attributes ===

    @property
    def card(self) -> Optional[str]:
        return self.xml.root_attribute('card')

    @property
    def listing(self) -> Optional[str]:
        return self.xml.root_attribute('listing')

    @property
    def name_attr(self) -> Optional[str]:
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

    # === Affiliations ===

    def affiliations(self) -> List[AffiliationRecord]:
        return [self._build_affiliation(node) for node in self.xml.find_all('affiliation')]

    def faculty_affiliations(self) -> List[AffiliationRecord]:
        return [aff for aff in self.affiliations() if aff.has_type('faculty')]

    def student_affiliations(self) -> List[AffiliationRecord]:
        return [aff for aff in self.affiliations() if aff.has_type('student')]

    def active_affiliations(self) -> List[AffiliationRecord]:
        return [aff for aff in self.affiliations() if not aff.has_type('nonactive')]

    @property
    def primary_affiliation(self) -> Optional[AffiliationRecord]:
        return next(
            (aff for aff in self.affiliations() if aff.affnum == PRIMARY_AFFNUM),
            None
        )

    def org_ids(self) -> List[str]:
        """Every organization adminid in the document, de-duplicated, in order."""
        seen = []
        for value in self.xml.xpath('//organization/@adminid'):
            admin_id = str(value)
            if admin_id not in seen:
                seen.append(admin_id)
        return seen

    @property
    def primary_org_code(self) -> Optional[str]:
        """
        Admin id of the organization under the primary affiliation.

        Queried straight from the tree, so it does not depend on the
        department being the affiliation's first <department> child.
        """
        org = self.xml.find_first(
            f"//affiliation[@affnum='{PRIMARY_AFFNUM}']//organization"
        )
        return attribute(org, 'adminid')

    @property
    def primary_org_id(self) -> Optional[str]:
        """Alias of primary_org_code."""
        return self.primary_org_code

    # === Builders ===

    def _build_affiliation(self, node: etree._Element) -> AffiliationRecord:
        return AffiliationRecord(
            affnum=attribute(node, 'affnum'),
            effective=attribute(node, 'effective'),
            organization=attribute(node, 'organization'),
            type=attribute(node, 'type'),
            visibility=attribute(node, 'visibility'),
            name=leading_text(node),
            department=self._build_department(child(node, 'department')),
            description=text(child(node, 'description')),
            affdata=self._build_affdata(node),
            place=[self._build_place(n) for n in children(node, 'place')],
        )

    def _build_department(self, node: Optional[etree._Element]) -> Optional[Department]:
        if node is None:
            return None

        return Department(
            affnum=attribute(node, 'affnum'),
            name=leading_text(node),
            organization=self._build_organization(child(node, 'organization')),
        )

    def _build_organization(self, node: Optional[etree._Element]) -> Optional[Organization]:
        if node is None:
            return None

        return Organization(
            acadid=attribute(node, 'acadid'),
            adminid=attribute(node, 'adminid'),
            level2orgid=attribute(node, 'level2orgid'),
            level2orgname=attribute(node, 'level2orgname'),
            regid=attribute(node, 'regid'),
            name=normalized_text(node),
        )

    def _build_affdata(self, node: etree._Element) -> List[AffData]:
        return [
            AffData(
                affnum=attribute(data, 'affnum'),
                type=attribute(data, 'type'),
                code=attribute(data, 'code'),
                value=text(data),
            )
            for data in children(node, 'affdata')
        ]

    def _build_place(self, node: etree._Element) -> Place:
        return Place(
            affnum=attribute(node, 'affnum'),
            type=attribute(node, 'type'),
            address=[self._build_address(n) for n in children(node, 'address')],
            telephone=[self._build_telephone(n) for n in children(node, 'telephone')],
        )

    def _build_address(self, node: etree._Element) -> Address:
        state = child(node, 'state')
        country = child(node, 'country')
        return Address(
            affnum=attribute(node, 'affnum'),
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
        )

    def _build_telephone(self, node: etree._Element) -> Telephone:
        return Telephone(
            affnum=attribute(node, 'affnum'),
            type=attribute(node, 'type'),
            visibility=attribute(node, 'visibility'),
            full_number=leading_text(node),
            icc=text(child(node, 'icc')),
            area=text(child(node, 'area')),
            number=text(child(node, 'number')),
        )

    def __repr__(self) -> str:
        return f"AffiliationDocument(sunetid='{self.sunetid}', regid='{self.regid}')"
