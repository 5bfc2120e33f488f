from splitledger.users.model import Category, Participant

__all__ = ["Category", "Participant"]
