"""Fare port - Contract shared by every fare policy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.models import FareContext


@runtime_checkable
class FarePolicyPort(Protocol):
    """One step of the fare chain.

    Implementations are pure: the returned fare depends only on the
    context and the running fare passed in.
    """

    def apply(self, context: FareContext, running_fare: int) -> int:
        ...
