from flask import Flask, jsonify, render_template, request

from logic import TOO_DEEP, LogicError, ParseError, parse
from reader import read
from tables import MAX_VARIABLES, latex_table, sorted_vars, table_rows

app = Flask(__name__)
app.config.from_mapping(
    MAX_VARIABLES=MAX_VARIABLES,
    SHOW_STEPS=True,
)
# LOGIKA_MAX_VARIABLES=12, LOGIKA_SHOW_STEPS=false, ...
app.config.from_prefixed_env("LOGIKA")


def max_vars():
    # 0 turns the limit off
    return app.config["MAX_VARIABLES"] or None


def build_result(line, steps):
    try:
        expr = parse(read(line))
        variables = sorted_vars(expr, max_vars())
        # limit already checked above
        headers, rows = table_rows(expr, steps=steps, max_vars=None)
    except ParseError as e:
        app.logger.info("can't parse %r: %s", line, e)
        return {"expr": line, "error": "can't parse line"}
    except LogicError as e:
        app.logger.info("rejected %r: %s", line, e)
        return {"expr": line, "error": str(e)}
    except RecursionError:
        app.logger.info("rejected %r: nested too deeply", line)
        return {"expr": line, "error": TOO_DEEP}
    return {
        "expr": line,
        "variables": variables,
        "headers": headers,
        "rows": rows,
        "latex": latex_table(headers, rows, steps=steps),
    }


@app.route("/", methods=["GET", "POST"])
def index():
    results = []
    expr_input = ""
    steps = app.config["SHOW_STEPS"]
    if request.method == "POST":
        expr_input = request.form.get("expr", "").strip()
        steps = "steps" in request.form
        expr_lines = [ln.strip() for ln in expr_input.split('\n') if ln.strip()]
        for line in expr_lines:
            if line.startswith(";"):
                continue
            results.append(build_result(line, steps))
    return render_template("index.html",
        results=results, expr=expr_input, steps=steps
    )


@app.route("/api/table", methods=["POST"])
def api_table():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify(error="expected a JSON object"), 400
    line = data.get("expr")
    if not isinstance(line, str) or not line.strip():
        return jsonify(error="missing 'expr'"), 400
    steps = data.get("steps", app.config["SHOW_STEPS"])
    if not isinstance(steps, bool):
        return jsonify(error="'steps' must be true or false"), 400
    result = build_result(line.strip(), steps)
    if "error" in result:
        return jsonify(error=result["error"]), 400
    return jsonify(result)


if __name__ == '__main__':
    app.run(debug=True)
