"""
Truth tables for logic expressions, rendered as LaTeX tabular blocks.

Variables are sorted by name. Row ``i`` gives the variable at sorted
position ``k`` the value True when bit ``k`` of ``i`` is 0, so the first
row is all T and the first variable alternates fastest.
"""

import logging

from logic import TooManyVariables

logger = logging.getLogger(__name__)

MAX_VARIABLES = 20


def format_bool(val):
    return "T" if val else "F"


def sorted_vars(expr, max_vars=MAX_VARIABLES):
    variables = sorted(expr.find_vars())
    if max_vars is not None and len(variables) > max_vars:
        raise TooManyVariables(len(variables), max_vars)
    return variables


def assignments(variables):
    for i in range(2 ** len(variables)):
        yield {var: (i >> k) & 1 == 0 for k, var in enumerate(variables)}


def table_rows(expr, steps=True, max_vars=MAX_VARIABLES):
    """
    The table as plain data: (headers, rows) with every cell "T" or "F".

    Steps mode has one column per ``expr.get_steps()`` entry, otherwise
    the variables followed by the expression.
    """
    variables = sorted_vars(expr, max_vars)
    if steps:
        columns = expr.get_steps()
        headers = [step.to_latex() for step in columns]
    else:
        columns = None
        headers = variables + [expr.to_latex()]
    logger.debug("table for %s: %d columns over %s", expr, len(headers), variables)

    rows = []
    for env in assignments(variables):
        if columns is None:
            values = [env[var] for var in variables] + [expr.solve(env)]
        else:
            values = [step.solve(env) for step in columns]
        rows.append([format_bool(v) for v in values])
    return headers, rows


def latex_table(headers, rows, steps=True):
    if steps:
        fmt_s = "|" + "c|" * len(headers)
        header_s = "\\hline\n" + "&".join(headers) + "\\\\\n\\hline\n"
        body = "".join("&".join(f" {cell} " for cell in row) + "\\\\\n\\hline\n" for row in rows)
    else:
        # last column is the result
        fmt_s = "|L|" + "L|" * (len(headers) - 1)
        header_s = "".join(f" {h} &" for h in headers[:-1]) + f"{headers[-1]} \\\\\n\\hline\n"
        body = "".join(
            "".join(f" {cell} &" for cell in row[:-1]) + f" {row[-1]} \\\\\n" for row in rows
        )
    return f"\\begin{{tabular}}{{{fmt_s}}}\n{header_s}{body}\\end{{tabular}}"


def simple_table(expr, max_vars=MAX_VARIABLES):
    """Variable columns followed by one result column."""
    headers, rows = table_rows(expr, steps=False, max_vars=max_vars)
    return latex_table(headers, rows, steps=False)


def steps_table(expr, max_vars=MAX_VARIABLES):
    headers, rows = table_rows(expr, steps=True, max_vars=max_vars)
    return latex_table(headers, rows, steps=True)


def render_table(expr, steps=True, max_vars=MAX_VARIABLES):
    if steps:
        return steps_table(expr, max_vars)
    return simple_table(expr, max_vars)
