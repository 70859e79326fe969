def _expense(**overrides):
    payload = {"title": "Rent", "amount": 1200000, "category": "office", "expense_date": "2024-03-15"}
    payload.update(overrides)
    return payload


def test_expense_month_derived_and_recomputed(client, auth_headers):
    r = client.post("/api/expenses", json=_expense(expense_month="1999-01"), headers=auth_headers)
    assert r.status_code == 201
    assert r.json()["message"] == "Expense created successfully"
    expense = r.json()["data"]
    assert expense["expense_month"] == "2024-03"

    r = client.put(
        f"/api/expenses/{expense['id']}",
        json=_expense(expense_date="2024-04-01", category=None),
        headers=auth_headers,
    )
    assert r.status_code == 200
    updated = r.json()["data"]
    assert updated["expense_month"] == "2024-04"
    assert updated["category"] is None

    fetched = client.get(f"/api/expenses/{expense['id']}", headers=auth_headers).json()["data"]
    assert fetched["expense_month"] == "2024-04"


def test_list_by_month_newest_first(client, auth_headers):
    early = client.post("/api/expenses", json=_expense(expense_date="2024-03-01"), headers=auth_headers).json()["data"]
    late = client.post("/api/expenses", json=_expense(expense_date="2024-03-20"), headers=auth_headers).json()["data"]
    client.post("/api/expenses", json=_expense(expense_date="2024-05-02"), headers=auth_headers)

    data = client.get("/api/expenses?month=2024-03", headers=auth_headers).json()["data"]
    assert [e["id"] for e in data] == [late["id"], early["id"]]
    assert len(client.get("/api/expenses", headers=auth_headers).json()["data"]) == 3


def test_expense_validation(client, auth_headers):
    r = client.post("/api/expenses", json={"title": " ", "amount": "abc", "expense_date": "2024-02-30"}, headers=auth_headers)
    assert r.status_code == 400
    assert r.json()["errors"] == [
        {"field": "title", "message": "Title is required"},
        {"field": "amount", "message": "Amount must be a positive number"},
        {"field": "expense_date", "message": "Valid expense date is required"},
    ]


def test_delete_expense(client, auth_headers):
    expense = client.post("/api/expenses", json=_expense(), headers=auth_headers).json()["data"]
    r = client.delete(f"/api/expenses/{expense['id']}", headers=auth_headers)
    assert r.json() == {"success": True, "message": "Expense deleted successfully"}
    r = client.delete(f"/api/expenses/{expense['id']}", headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["message"] == "Expense not found"
    assert client.put(f"/api/expenses/{expense['id']}", json=_expense(), headers=auth_headers).status_code == 404
