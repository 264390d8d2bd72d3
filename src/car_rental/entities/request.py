"""Transport-neutral request passed to the car handler."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CarRequest:
    """The parts of an HTTP request the car handler reads.

    Attributes:
        query: Query string values (page, pageSize, filters)
        body: Decoded JSON body
        params: Path parameters (id)
    """

    query: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)
