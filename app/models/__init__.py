from app.models.user import User
from app.models.scenario import Scenario
from app.models.step import Step
from app.models.point_transaction import PointTransaction, TransactionType

__all__ = ["User", "Scenario", "Step", "PointTransaction", "TransactionType"]
