from budget_reconciler.period import key_for_record, key_of, period_label


def test_key_of_is_stable():
    assert key_of("Food & Dining", 2024, 12) == "Food & Dining|2024-12"
    assert key_of("Rent", 2025, 3) == key_of("Rent", 2025, 3)


def test_key_of_is_case_sensitive_and_exact():
    assert key_of("food", 2024, 12) != key_of("Food", 2024, 12)
    assert key_of("Food ", 2024, 12) != key_of("Food", 2024, 12)


def test_period_label_pads_month():
    assert period_label(2024, 3) == "2024-03"


def test_expense_and_budget_in_same_month_share_a_key():
    expense = {"category": "Groceries", "expense_date": "2024-12-18T09:15:00Z"}
    budget = {"category": "Groceries", "month_year": "2024-12-01"}
    assert key_for_record(expense, "expense_date") == key_for_record(budget, "month_year")


def test_same_month_of_another_year_does_not_share_a_key():
    this_year = {"category": "Groceries", "expense_date": "2024-12-18"}
    last_year = {"category": "Groceries", "expense_date": "2023-12-18"}
    assert key_for_record(this_year, "expense_date") != key_for_record(last_year, "expense_date")


def test_key_for_record_without_valid_date_is_none():
    assert key_for_record({"category": "Rent", "expense_date": "soon"}, "expense_date") is None
    assert key_for_record({"category": "Rent"}, "expense_date") is None


def test_missing_category_is_empty_string():
    assert key_for_record({"expense_date": "2024-12-01"}, "expense_date") == "|2024-12"
