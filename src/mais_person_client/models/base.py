"""
Shared base for the immutable records built from MAIS XML.
"""

from pydantic import BaseModel, ConfigDict


class Record(BaseModel):
    """
    Immutable value record.

    Records are built once per accessor call and never mutated; equality is
    structural (field by field), so two parses of the same XML compare equal.
    """

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )
