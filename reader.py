"""
Reader for the list notation typed at the prompt.

    p              atom
    (- p)          list of two atoms
    ((- p) + q)    nested lists

Atoms come back as plain strings and lists as Python lists, nothing
else is interpreted here.
"""

from lark import Lark, Transformer, v_args
from lark.exceptions import LarkError, VisitError

from logic import TOO_DEEP, ReadError

GRAMMAR = r"""
    start: node

    ?node: atom
         | list

    atom: ATOM
    list: "(" node* ")"

    ATOM: /[^\s();]+/
    COMMENT: /;[^\n]*/
    %ignore COMMENT
    %ignore /\s+/
"""

parser = Lark(GRAMMAR, parser="lalr")


@v_args(inline=True)
class TreeBuilder(Transformer):
    def atom(self, tok):
        return str(tok)

    def list(self, *items):
        return list(items)

    def start(self, node):
        return node


tree_builder = TreeBuilder()


def read(text):
    try:
        tree = parser.parse(text)
    except LarkError as e:
        raise ReadError(str(e).strip()) from e
    try:
        return tree_builder.transform(tree)
    except RecursionError as e:
        raise ReadError(TOO_DEEP) from e
    except VisitError as e:
        # a user callback can be the frame that hits the limit
        if isinstance(e.orig_exc, RecursionError):
            raise ReadError(TOO_DEEP) from e
        raise
