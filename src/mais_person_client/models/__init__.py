"""
Pydantic models for request validation and parsed MAIS records.

Person and affiliation records live in separate modules because the two
endpoints use similar but not identical schemas; import record classes
from mais_person_client.models.person or mais_person_client.models.affiliations.
"""

from mais_person_client.models.requests import FetchUserRequest
from mais_person_client.models.base import Record

__all__ = [
    'FetchUserRequest',
    'Record',
]
