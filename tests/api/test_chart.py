"""
Tests for chart of accounts endpoints.
"""


def test_chart_grouped_by_class(client):
    response = client.get("/chart-of-accounts")
    assert response.status_code == 200

    classes = response.json()
    assert [c["class_digit"] for c in classes] == ["1", "2", "4", "5", "6", "7"]
    assert classes[0]["class_name"] == "Equity and long-term debts"
    assert [a["account_number"] for a in classes[0]["accounts"]] == ["10000", "16000"]


def test_chart_omits_class_headers(client):
    classes = client.get("/chart-of-accounts").json()
    numbers = [a["account_number"] for c in classes for a in c["accounts"]]
    assert not any(n.startswith("CLASS") for n in numbers)


def test_single_account(client):
    response = client.get("/chart-of-accounts/51200")
    assert response.status_code == 200
    assert response.json() == {
        "account_number": "51200",
        "short_number": "512",
        "account_name": "Bank",
    }


def test_unknown_account_returns_404(client):
    response = client.get("/chart-of-accounts/99999")
    assert response.status_code == 404


def test_class_header_is_not_an_account(client):
    response = client.get("/chart-of-accounts/CLASS 1")
    assert response.status_code == 404
