from solscan_wrapper.client import SolscanClient, query
from solscan_wrapper.errors import InvalidBoundError, MissingIdentifierError, SolscanInputError
from solscan_wrapper.response import ApiResponse

__all__ = [
    "ApiResponse",
    "InvalidBoundError",
    "MissingIdentifierError",
    "SolscanClient",
    "SolscanInputError",
    "query",
]
