from __future__ import annotations

from dataclasses import fields

from pie.core import (
    Absurd,
    Application,
    Atom,
    Core,
    Lambda,
    Nat,
    Pi,
    Quote,
    Sigma,
    Sole,
    The,
    Todo,
    Trivial,
    Universe,
    Var,
    VecNil,
    Nil,
    Zero,
)

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
}

# Keyword printed for each core form that is written as (keyword arg ...)
KEYWORDS = {
    "Add1": "add1",
    "WhichNat": "which-Nat",
    "IterNat": "iter-Nat",
    "RecNat": "rec-Nat",
    "IndNat": "ind-Nat",
    "Cons": "cons",
    "Car": "car",
    "Cdr": "cdr",
    "IndAbsurd": "ind-Absurd",
    "List": "List",
    "ListCons": "::",
    "RecList": "rec-List",
    "IndList": "ind-List",
    "Vec": "Vec",
    "VecCons": "vec::",
    "Head": "head",
    "Tail": "tail",
    "IndVec": "ind-Vec",
    "Either": "Either",
    "Left": "left",
    "Right": "right",
    "IndEither": "ind-Either",
    "Equal": "=",
    "Same": "same",
    "Replace": "replace",
    "Trans": "trans",
    "Cong": "cong",
    "Symm": "symm",
    "IndEqual": "ind-=",
}

# Core forms with no sub-expressions
ATOMS = {
    Universe: "U",
    Nat: "Nat",
    Zero: "zero",
    Atom: "Atom",
    Trivial: "Trivial",
    Sole: "sole",
    Absurd: "Absurd",
    Nil: "nil",
    VecNil: "vecnil",
    Todo: "TODO",
}


def _parts(expr: Core) -> list:
    """The printed head followed by the sub-expressions of `expr`, as a nested list."""
    match expr:
        case Var(name):
            return [str(name)]
        case Quote(atom):
            return ["'" + atom]
        case The(type_, inner):
            return ["the", type_, inner]
        case Pi(name, arg_type, result_type):
            return ["Π", [[str(name), arg_type]], result_type]
        case Sigma(name, car_type, cdr_type):
            return ["Σ", [[str(name), car_type]], cdr_type]
        case Lambda(param, body):
            return ["λ", [str(param)], body]
        case Application(fn, arg):
            return [fn, arg]
    head = KEYWORDS.get(type(expr).__name__)
    if head is None:
        return [repr(expr)]
    return [head] + [getattr(expr, f.name) for f in fields(expr)]


def _render(item) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, list):
        return "(" + " ".join(_render(x) for x in item) + ")"
    return to_sexpr(item)


def to_sexpr(expr: Core) -> str:
    """Render a core expression as a single-line s-expression."""
    atom = ATOMS.get(type(expr))
    if atom is not None:
        return atom
    parts = _parts(expr)
    if isinstance(expr, (Var, Quote)):
        return parts[0]
    return _render(parts)


# ----------------- Pretty printer -----------------
def pprint_core(expr: Core, indent: int = 0, options: dict = DEFAULT_OPTIONS) -> str:
    """Render `expr`, breaking forms that do not fit on one line.

    Broken forms keep the head and first argument on the opening line and
    indent the remaining arguments one level.
    """
    single_line = to_sexpr(expr)
    if len(single_line) + indent * 2 <= options.get("max_line_length", 80):
        return single_line
    if type(expr) in ATOMS or isinstance(expr, (Var, Quote)):
        return single_line

    parts = [
        p if isinstance(p, Core) else _render(p) for p in _parts(expr)
    ]
    rendered = [
        pprint_core(p, indent + 1, options) if isinstance(p, Core) else p
        for p in parts
    ]
    lines = ["(" + " ".join(rendered[:2])]
    for part in rendered[2:]:
        lines.append("  " * (indent + 1) + part)
    lines[-1] += ")"
    return "\n".join(lines)
