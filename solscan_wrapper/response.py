"""
Result of a single Solscan request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiResponse:
    url: str
    status: int
    body: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300
