"""Stateful controllers driving the quote form."""

from .budget import BudgetController, BudgetSummary
from .form import FormController
from .notifier import ChangeNotifier

__all__ = ["BudgetController", "BudgetSummary", "ChangeNotifier", "FormController"]
