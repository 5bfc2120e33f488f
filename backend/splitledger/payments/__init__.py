from splitledger.payments.models import Payment

__all__ = ["Payment"]
