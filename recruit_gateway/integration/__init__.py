"""Backend integrations built on the gateway: authentication and budgets."""

from recruit_gateway.integration.budgets import BudgetApi
from recruit_gateway.integration.session import SessionManager

__all__ = ["BudgetApi", "SessionManager"]
