"""
Discovery helper for the tags accepted by the person endpoint.

Reads the packaged tag allow-list and returns copies, so callers
cannot mutate the shared configuration.
"""

from typing import List

from mais_person_client.config import get_config


class Tags:
    """
    Helper class for discovering person-request tags.

    Example:
        >>> Tags.list_available()
        ['name', 'title', 'email', 'url', 'location', 'affiliation', ...]
        >>> Tags.is_valid('privgroup')
        True
    """

    @staticmethod
    def list_available() -> List[str]:
        """All allowed tags, in default request order."""
        return list(get_config().allowed_tags)

    @staticmethod
    def is_valid(tag: str) -> bool:
        return get_config().is_valid_tag(tag)
