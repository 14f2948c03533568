from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

MAX_RATE_LIMIT_RETRIES = 10


class PropertyNamingPolicy(str, Enum):
    DEFAULT = "default"
    CAMEL_CASE = "camel_case"


@dataclass(frozen=True)
class SerializationOptions:
    """How documents are shaped before they reach Cosmos DB."""
    ignore_null_values: bool = True
    property_naming_policy: PropertyNamingPolicy = PropertyNamingPolicy.CAMEL_CASE


@dataclass(frozen=True)
class ClientOptions:
    """
    Client policy for the uploader's Cosmos DB connection.

    The Python SDK has no bulk-execution switch, so allow_bulk_execution is
    carried on the options for the writers that consume the handle.

    The retry budget reaches the SDK as retry_total. The SDK treats 0 as "use
    its default", so the budget must be at least 1. retry_total also caps the
    transport's connection retries, so connection failures get the same budget.
    """
    allow_bulk_execution: bool = True
    serializer_options: SerializationOptions = field(default_factory=SerializationOptions)
    max_retry_attempts_on_rate_limited_requests: int = MAX_RATE_LIMIT_RETRIES

    def __post_init__(self):
        if self.max_retry_attempts_on_rate_limited_requests < 1:
            raise ValueError("max_retry_attempts_on_rate_limited_requests must be >= 1")

    def to_client_kwargs(self) -> Dict[str, Any]:
        # retry_total feeds the SDK's throttling (429) retry options
        return {"retry_total": self.max_retry_attempts_on_rate_limited_requests}
