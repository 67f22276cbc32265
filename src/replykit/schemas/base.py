"""Base schema configuration for wire models.

The suggestion service speaks snake_case JSON, so unlike camelCase APIs no
alias generator is configured.

Usage:
    - DownstreamRequest: For requests sent to the suggestion service
    - DownstreamResponse: For responses received from the suggestion service
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        use_enum_values=True,
        validate_default=True,
        str_strip_whitespace=False,
    )


class DownstreamRequest(_BaseSchema):
    """Base class for request bodies sent to the suggestion service.

    Frozen and strict about extra fields: we only send what we define.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )


class DownstreamResponse(_BaseSchema):
    """Base class for response bodies received from the suggestion service.

    Extra fields are ignored so the server can add properties without
    breaking older keyboards.
    """

    model_config = ConfigDict(
        extra="ignore",
    )
