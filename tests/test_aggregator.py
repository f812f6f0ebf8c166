from budget_reconciler.aggregator import aggregate
from budget_reconciler.period import key_of

sample_expenses = [
    {"id": 1, "category": "Food & Dining", "amount": 1500, "expense_date": "2024-12-02"},
    {"id": 2, "category": "Food & Dining", "amount": "1500", "expense_date": "2024-12-10T19:00:00Z"},
    {"id": 3, "category": "Food & Dining", "amount": 1200.0, "expense_date": "2024-12-28"},
    {"id": 4, "category": "Food & Dining", "amount": 900, "expense_date": "2024-11-30"},
    {"id": 5, "category": "Transportation", "amount": 300, "expense_date": "2024-12-05"},
    {"id": 6, "category": "Transportation", "amount": 999, "expense_date": "garbage"},
    {"id": 7, "category": "Transportation", "amount": 999},
    {"id": 8, "category": "Transportation", "amount": None, "expense_date": "2024-12-06"},
]


def test_aggregate_sums_per_category_and_month():
    totals = aggregate(sample_expenses)

    december_food = totals[key_of("Food & Dining", 2024, 12)]
    assert december_food.spent == 4200.0
    assert december_food.count == 3

    november_food = totals[key_of("Food & Dining", 2024, 11)]
    assert november_food.spent == 900.0
    assert november_food.count == 1


def test_aggregate_drops_expenses_without_valid_date():
    totals = aggregate(sample_expenses)
    transport = totals[key_of("Transportation", 2024, 12)]
    # the missing amount still counts as an expense, with zero spend
    assert transport.spent == 300.0
    assert transport.count == 2
    assert len(totals) == 3


def test_aggregate_empty_input():
    assert aggregate([]) == {}


def test_aggregate_accepts_generators():
    totals = aggregate(exp for exp in sample_expenses)
    assert totals[key_of("Food & Dining", 2024, 12)].spent == 4200.0
