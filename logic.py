from dataclasses import dataclass

NOT_SYMBOL = '-'
TOO_DEEP = "expression nested too deeply"


class LogicError(Exception):
    pass


class ReadError(LogicError):
    """Line is not a well formed list expression."""


class ParseError(LogicError):
    """List tree does not match any logic production."""


class TooManyVariables(LogicError):
    def __init__(self, count, limit):
        super().__init__(f"too many variables: {count} (limit {limit})")
        self.count = count
        self.limit = limit


class Expr:
    def solve(self, env):
        raise NotImplementedError()

    def find_vars(self):
        raise NotImplementedError()

    def step_operands(self):
        return ()

    def to_latex(self):
        raise NotImplementedError()

    def get_steps(self):
        """
        Subexpressions in evaluation order, each once, ending with self.
        Variables add nothing to their parent's steps.
        """
        prev = []
        for child in self.step_operands():
            for step in child.get_steps():
                if step not in prev:
                    prev.append(step)
        prev.append(self)
        return prev

    def __str__(self):
        return self.to_latex()


@dataclass(frozen=True)
class Variable(Expr):
    name: str

    def solve(self, env):
        return env[self.name]

    def find_vars(self):
        return {self.name}

    def to_latex(self):
        return self.name


@dataclass(frozen=True)
class Not(Expr):
    operand: Expr

    def step_operands(self):
        # variables are not steps of their own
        return () if isinstance(self.operand, Variable) else (self.operand,)

    def solve(self, env):
        return not self.operand.solve(env)

    def find_vars(self):
        return self.operand.find_vars()

    def to_latex(self):
        return f"\\neg {self.operand.to_latex()}"


@dataclass(frozen=True)
class BinOp(Expr):
    left: Expr
    right: Expr

    symbol = None

    def apply(self, a, b):
        raise NotImplementedError()

    def step_operands(self):
        return tuple(e for e in (self.left, self.right) if not isinstance(e, Variable))

    def solve(self, env):
        # no short-circuit, both sides always evaluated
        return self.apply(self.left.solve(env), self.right.solve(env))

    def find_vars(self):
        return self.left.find_vars() | self.right.find_vars()

    def to_latex(self):
        return f"({self.left.to_latex()} {self.symbol} {self.right.to_latex()})"


class And(BinOp):
    symbol = '\\wedge'

    def apply(self, a, b):
        return a & b


class Or(BinOp):
    symbol = '\\vee'

    def apply(self, a, b):
        return a | b


class Implies(BinOp):
    symbol = '\\rightarrow'

    @property
    def antecedent(self):
        return self.left

    @property
    def consequent(self):
        return self.right

    def apply(self, a, b):
        return (not a) | b


class Iff(BinOp):
    symbol = '\\iff'

    def apply(self, a, b):
        return ((not a) | b) & ((not b) | a)


BINARY_OPS = {
    '*': And,
    '+': Or,
    '=>': Implies,
    '<=>': Iff,
}


def parse(node):
    """
    Build an expression from a reader tree (atom string or list).

    (- e) is negation, (a op b) a binary connective with op one of
    * + => <=>. Anything else raises ParseError.
    """
    if isinstance(node, str):
        return Variable(node)
    if not isinstance(node, list):
        raise ParseError(f"unexpected node {node!r}")

    if len(node) == 2:
        if node[0] == NOT_SYMBOL:
            return Not(parse(node[1]))
        raise ParseError(f"expected '{NOT_SYMBOL}' before single operand")

    if len(node) == 3:
        a, op, b = node
        if not isinstance(op, str):
            raise ParseError("operator must be an atom")
        left = parse(a)
        right = parse(b)
        if op not in BINARY_OPS:
            raise ParseError(f"unknown operator {op!r}")
        return BINARY_OPS[op](left, right)

    raise ParseError(f"list of length {len(node)} is not an expression")
