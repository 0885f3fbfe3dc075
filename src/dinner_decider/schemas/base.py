"""Base schema configuration for all Pydantic models.

Usage:
    - APIRequest: incoming API request bodies
    - APIResponse: outgoing API response bodies
    - DownstreamResponse: payloads received from external services
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
    )


class APIRequest(_BaseSchema):
    """Base class for incoming API request schemas.

    Unknown properties sent by clients are ignored.
    """

    model_config = ConfigDict(extra="ignore")


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas.

    Only explicitly declared properties are ever returned.
    """

    model_config = ConfigDict(extra="forbid")


class DownstreamResponse(_BaseSchema):
    """Base class for payloads received from external services.

    Upstream services may add new properties without breaking parsing.
    """

    model_config = ConfigDict(extra="ignore")
