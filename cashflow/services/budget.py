"""50/30/20 budget split"""

from ..models.expense import Expense, ExpenseCategory
from ..models.profile import BudgetLine, BudgetOverview

# Share of the salary given to each category, in percent
BUDGET_RULE = {
    ExpenseCategory.NEEDS: 50,
    ExpenseCategory.WANTS: 30,
    ExpenseCategory.SAVINGS: 20,
}


def budget_split(salary: float) -> dict[ExpenseCategory, float]:
    """
    Allocate the salary across categories.

    Amounts are rounded to cents; savings takes the rounding remainder so
    the allocations always add up to the salary.
    """
    needs = round(salary * BUDGET_RULE[ExpenseCategory.NEEDS] / 100, 2)
    wants = round(salary * BUDGET_RULE[ExpenseCategory.WANTS] / 100, 2)
    savings = round(salary - needs - wants, 2)

    return {
        ExpenseCategory.NEEDS: needs,
        ExpenseCategory.WANTS: wants,
        ExpenseCategory.SAVINGS: savings,
    }


def budget_overview(salary: float, expenses: list[Expense]) -> BudgetOverview:
    """Compare each category's allocation with what was spent in it"""
    allocations = budget_split(salary)

    spent = {category: 0.0 for category in BUDGET_RULE}
    for expense in expenses:
        spent[expense.category] += expense.amount

    lines = [
        BudgetLine(
            category=category,
            percent=percent,
            allocated=allocations[category],
            spent=round(spent[category], 2),
            remaining=round(allocations[category] - spent[category], 2),
        )
        for category, percent in BUDGET_RULE.items()
    ]

    total_spent = round(sum(spent.values()), 2)
    return BudgetOverview(
        salary=salary,
        lines=lines,
        total_spent=total_spent,
        total_remaining=round(salary - total_spent, 2),
    )
