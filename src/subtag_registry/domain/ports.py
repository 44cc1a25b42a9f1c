"""
Ports — Protocol-based interfaces for infrastructure adapters.

These define WHAT the converter needs (contracts) without specifying
HOW it's done (implementation). Following hexagonal architecture:

  Domain ← Ports (protocols) ← Adapters (implementations)

Each port is a Protocol (structural typing) so adapters satisfy
the contract simply by implementing the methods — no inheritance.
The parsing core sits between the two ports and performs no I/O.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from railway.result import Result

from subtag_registry.domain.models import RegistryDocument


@runtime_checkable
class RegistrySource(Protocol):
    """
    Port: provide the full raw registry text.

    The implementation owns cache lookup, HTTP download, status checking
    and cache population. Any of those failing is a Result.failure.
    """

    def fetch(self) -> Result[str]: ...


@runtime_checkable
class DocumentSerializer(Protocol):
    """
    Port: render a decoded RegistryDocument to output text.

    Only present fields are emitted; absent ones are elided, never null.
    """

    def render(self, document: RegistryDocument) -> Result[str]: ...
