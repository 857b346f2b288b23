"""
XML parsing modules for MAIS Person API documents.

- xml_parser: namespace-free, best-effort navigation helpers (lxml)
- person_parser: PersonDocument for /doc/person/{sunetid}
- affiliations_parser: AffiliationDocument for /doc/person/{sunetid}/affiliation
"""

from .xml_parser import XmlDocument, parse_xml
from .person_parser import PersonDocument
from .affiliations_parser import AffiliationDocument

__all__ = [
    # XML navigation
    'XmlDocument',
    'parse_xml',
    # Documents
    'PersonDocument',
    'AffiliationDocument',
]
