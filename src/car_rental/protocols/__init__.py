"""Protocol interfaces for swappable implementations.

Protocols enable:
- Easy swapping of store backends (SQLAlchemy, in-memory, ...)
- Unit testing with fake implementations instead of mocks
- Clear separation between the handler and the transport
"""

from .car_record_store import CarRecordStore
from .response_sink import ResponseSink

__all__ = [
    "CarRecordStore",
    "ResponseSink",
]
