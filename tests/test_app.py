import pytest

from app import app
from logic import And, Implies, Variable
from tables import simple_table, steps_table

p, q = Variable("p"), Variable("q")


@pytest.fixture
def client():
    app.config.update(TESTING=True, MAX_VARIABLES=20, SHOW_STEPS=True)
    with app.test_client() as client:
        yield client


class TestIndex:

    def test_get_form(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert b"<textarea" in resp.data

    def test_post_lines(self, client):
        resp = client.post("/", data={"expr": "(p * q)\n(p *)\n\n(- p)", "steps": "on"})
        assert resp.status_code == 200
        page = resp.get_data(as_text=True)
        assert page.count("<pre>") == 2
        assert "can&#39;t parse line" in page
        assert "\\begin{tabular}{|c|}" in page

    def test_post_without_steps(self, client):
        resp = client.post("/", data={"expr": "(p => q)"})
        page = resp.get_data(as_text=True)
        assert "\\begin{tabular}{|L|L|L|}" in page

    def test_deep_line_reported(self, client):
        deep = "(- " * 2000 + "p" + ")" * 2000
        resp = client.post("/", data={"expr": deep + "\n(p * q)", "steps": "on"})
        assert resp.status_code == 200
        page = resp.get_data(as_text=True)
        assert "expression nested too deeply" in page
        assert page.count("<pre>") == 1


class TestApi:

    def test_final_column(self, client):
        resp = client.post("/api/table", json={"expr": "(p => q)", "steps": False})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["variables"] == ["p", "q"]
        assert data["headers"] == ["p", "q", "(p \\rightarrow q)"]
        assert [row[-1] for row in data["rows"]] == ["T", "T", "F", "T"]
        assert data["latex"] == simple_table(Implies(p, q))

    def test_steps_default(self, client):
        data = client.post("/api/table", json={"expr": "(p * q)"}).get_json()
        assert data["latex"] == steps_table(And(p, q))
        assert len(data["rows"]) == 4

    @pytest.mark.parametrize("payload", [{}, {"expr": ""}, {"expr": 3}, ["(p * q)"], "p", 1])
    def test_missing_expr(self, client, payload):
        resp = client.post("/api/table", json=payload)
        assert resp.status_code == 400

    def test_parse_error(self, client):
        resp = client.post("/api/table", json={"expr": "(p *)"})
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "can't parse line"}

    def test_variable_limit(self, client):
        app.config["MAX_VARIABLES"] = 1
        resp = client.post("/api/table", json={"expr": "(p + q)"})
        assert resp.status_code == 400
        assert "too many variables" in resp.get_json()["error"]

    @pytest.mark.parametrize("steps", ["false", 0, None])
    def test_steps_must_be_boolean(self, client, steps):
        resp = client.post("/api/table", json={"expr": "(p * q)", "steps": steps})
        assert resp.status_code == 400
        assert "steps" in resp.get_json()["error"]

    def test_deep_nesting(self, client):
        line = "(- " * 2000 + "p" + ")" * 2000
        resp = client.post("/api/table", json={"expr": line})
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "expression nested too deeply"}

    def test_latex_matches_rows(self, client):
        data = client.post("/api/table", json={"expr": "((p + q) => (- r))", "steps": False}).get_json()
        assert len(data["rows"]) == 8
        assert data["latex"].count(" \\\\\n") == 1 + 8
