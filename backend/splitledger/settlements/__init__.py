from splitledger.settlements.models import Settlement
from splitledger.settlements.services import (
    SettlementCalculator,
    apply_settlements,
    simplify,
)

__all__ = ["Settlement", "SettlementCalculator", "apply_settlements", "simplify"]
