"""
Network layer for mais-person-client.

- MaisTransport: authenticated GET with retry/backoff (httpx + tenacity)
- MaisPersonClient: fetches person/affiliation documents via MaisTransport
"""

from mais_person_client.services.transport import MaisTransport
from mais_person_client.services.person_client import MaisPersonClient

__all__ = [
    'MaisTransport',
    'MaisPersonClient',
]
