# Core type aliases for yall's data model.
# Every runtime value (cells, symbols, integers, strings, booleans, callables,
# type tags and the reader's quote wrappers) renders itself through __str__.
# The alias below is used in annotations across the reader, evaluator and
# builtins; it resolves to `Any` because values form an open set of classes
# rather than a common base.
#
# Naming guidance:
# - Expr: code-as-data produced by the reader and values produced by eval.
#   The two are the same thing in a Lisp, so a single alias covers both.

from typing import Any

Expr = Any

__version__ = "0.3.0"
