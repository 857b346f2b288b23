"""
mais-person-client: client for the MAIS Person API.

Main package exports for user-facing API.
"""

from mais_person_client.config import ClientConfig
from mais_person_client.exceptions import (
    MaisError,
    ServerError,
    UnauthorizedError,
    UnexpectedResponseError,
)
from mais_person_client.parsers import AffiliationDocument, PersonDocument
from mais_person_client.services import MaisPersonClient
from mais_person_client.types import Tags

__all__ = [
    'ClientConfig',
    'MaisPersonClient',
    'PersonDocument',
    'AffiliationDocument',
    'Tags',
    'MaisError',
    'UnauthorizedError',
    'ServerError',
    'UnexpectedResponseError',
]
