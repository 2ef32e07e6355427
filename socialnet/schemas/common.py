"""
SocialNet Backend — Shared Schemas
==================================

Base model configuration plus the response shapes used by every router.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """
    Base for every API schema.

    - alias_generator: JSON keys are camelCase
    - populate_by_name: services may build models with snake_case names
    - from_attributes: models can be validated straight from ORM rows
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(APIModel):
    """Plain acknowledgement body, e.g. after registration."""
    message: str = Field(description="Human-readable status message")


class ErrorResponse(APIModel):
    """
    What:  Error body returned for every handled failure.
    Why:   Clients parse one shape regardless of which layer failed.

    Example:
        {"message": "Invalid token"}

    The request correlation id travels in the X-Request-ID response header.
    """
    message: str = Field(description="Human-readable error description")


class HealthResponse(APIModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
