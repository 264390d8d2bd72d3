"""Response sink protocol.

The car handler never returns a value; it writes a status and a body into a
sink. The HTTP layer supplies a sink that renders a FastAPI response.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResponseSink(Protocol):
    """Protocol for objects receiving a handler's response."""

    def status(self, code: int) -> "ResponseSink":
        """Set the status code and return the sink for chaining."""
        ...

    def json(self, body: Any) -> "ResponseSink":
        """Set a JSON body and return the sink for chaining."""
        ...

    def end(self) -> None:
        """Finish the response without a body."""
        ...
