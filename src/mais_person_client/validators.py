"""
Reusable field validators for Pydantic models.

These validators check caller input against the packaged tag allow-list and can be
used with the Pydantic @field_validator decorator.
"""

from typing import List, Optional, Union

from mais_person_client.config import get_config


def validate_tags(tags: Optional[Union[str, List[str]]]) -> List[str]:
    """
    Normalize and validate person-request tags against the packaged tag allow-list.

    Args:
        tags: None (request every allowed tag), a comma-separated string
              ('name, email') or a list of tag names

    Returns:
        List of tag names, in the order given

    Raises:
        ValueError: If any tag is not in the allow-list, listing every
                    invalid tag

    Example:
        >>> validate_tags('name, email')
        ['name', 'email']
        >>> validate_tags(None)[:3]
        ['name', 'title', 'email']
        >>> validate_tags(['name', 'ssn'])  # Raises ValueError
    """
    config = get_config()

    if tags is None:
        return list(config.allowed_tags)

    if isinstance(tags, str):
        tag_list = [tag.strip() for tag in tags.split(',')]
    else:
        tag_list = [str(tag) for tag in tags]

    invalid = [tag for tag in tag_list if not config.is_valid_tag(tag)]

    if invalid:
        raise ValueError(
            f"Invalid tag(s): {', '.join(invalid)}\n"
            f"Allowed tags: {config.allowed_tags}"
        )

    return tag_list


def validate_sunetid(sunetid: str) -> str:
    """
    Validate a SUNetID before it is interpolated into a request path.

    Raises:
        ValueError: If the id is blank or contains '/', '?' or '#'
    """
    if not sunetid or not sunetid.strip():
        raise ValueError("SUNetID must not be blank")

    if any(char in sunetid for char in ('/', '?', '#')):
        raise ValueError(f"SUNetID contains illegal characters: '{sunetid}'")

    return sunetid.strip()
