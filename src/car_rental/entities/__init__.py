"""Domain entities for internal representation.

These are plain dataclasses used by the handler and the repositories.
They are NOT used for API contracts - use DTOs from the dto package for that.
"""

from .car import UNSET, CarFields, CarRecord, RecordUpdater, apply_defaults
from .pagination import Pagination, PaginationMeta
from .query import FILTER_ATTRIBUTES, RENTER_INCLUDE, CarQuery, IncludeDirective
from .request import CarRequest
from .result import Err, Ok, OperationFailure, Result

__all__ = [
    "CarFields",
    "UNSET",
    "CarRecord",
    "RecordUpdater",
    "apply_defaults",
    "Pagination",
    "PaginationMeta",
    "CarQuery",
    "IncludeDirective",
    "RENTER_INCLUDE",
    "FILTER_ATTRIBUTES",
    "CarRequest",
    "Ok",
    "Err",
    "OperationFailure",
    "Result",
]
