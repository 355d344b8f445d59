# Core type aliases for yaft's data model.
# Values are plain Python objects wherever one fits:
#
# - integers -> int
# - booleans -> bool
# - quotations -> Python list (program order)
# - symbols -> Symbol (interned name)
# - mappings -> Mapping (zero or one key/value pair)
#
# Naming guidance:
# - Node: use in reader/parser code for elements of a parsed sequence.
# - Value: use in evaluator/runtime code for anything living on the stack.
# Both aliases resolve to `Any`; parsed nodes and stack values share a representation.

from typing import Any, Callable

# Runtime value alias
Value = Any
# Parsed program element (a Symbol placeholder, a nested list, or a Mapping)
Node = Value

# Evaluator re-entry: words pass a quotation to run next against the same stack
EvaluatorFn = Callable[[list[Node]], None]
