from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from ..model import PaymentBreakdown


class PaymentCalculator(ABC):
    """Calculator interface (Strategy Pattern for payments)."""

    @abstractmethod
    def compute(self, records: Iterable[Any], base_rate_per_minute: Optional[float] = None) -> PaymentBreakdown:
        raise NotImplementedError
