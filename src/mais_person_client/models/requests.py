"""
Request models for client operations.

These Pydantic models validate caller input before any network I/O.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mais_person_client.validators import validate_sunetid, validate_tags


class FetchUserRequest(BaseModel):
    """
    Request model for fetching a person record.

    Attributes:
        sunetid: SUNetID of the person to fetch
        tags: Sections of the record to return; a comma-separated string or
              a list, defaulting to every allowed tag

    Example:
        >>> request = FetchUserRequest(sunetid='donald', tags='name,email')
        >>> request.tags
        ['name', 'email']
        >>> request.tags_param
        'name,email'

    Raises:
        ValidationError: If the sunetid is blank or a tag is not allowed
    """

    sunetid: str = Field(
        ...,
        description="SUNetID of the person",
        examples=["donald"]
    )

    tags: Optional[Union[str, List[str]]] = Field(
        default=None,
        description="Tags scoping the returned record (defaults to all)",
        examples=[["name", "email", "affiliation"]]
    )

    _validate_sunetid = field_validator('sunetid')(validate_sunetid)

    @field_validator('tags', mode='after')
    @classmethod
    def validate_tag_list(cls, v: Optional[Union[str, List[str]]]) -> List[str]:
        """Expand None/strings into a validated list of tags."""
        return validate_tags(v)

    @property
    def tags_param(self) -> str:
        """Comma-joined tags as sent in the `tags` query parameter."""
        return ','.join(self.tags)

    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
        json_schema_extra={
            "examples": [{
                "sunetid": "donald",
                "tags": ["name", "email"]
            }]
        }
    )
