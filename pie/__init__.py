# Core type aliases for the Pie core.
# Core expressions (pie.core) are the syntax the checker and evaluator consume;
# values (pie.values) are what evaluation produces. Names are interned Symbols.
#
# Naming guidance:
# - CoreExpr: Use in checker/read-back code to denote core syntax trees.
# - PieValue: Use in evaluator/runtime code to denote semantic values.
# Both aliases resolve to `Any` so modules can annotate without import cycles.

from typing import Any

# Semantic value alias
PieValue = Any
# Core syntax alias
CoreExpr = Any
