"""Special forms: def, defn, defmacro.

All three bind a name in the *current* frame and return the symbol. Binding
an already-bound name in the same frame fails.
"""

from __future__ import annotations

from yall import Expr
from yall.errors import YallArityError, YallRuntimeError
from yall.evaluation.evaluator import evaluate
from yall.evaluation.special_forms.lambda_form import make_closure
from yall.types.callables import Function, Macro
from yall.types.cell import Cell, Empty
from yall.types.environment import Environment
from yall.types.symbol import Symbol


def _signature(args: Cell, form: str) -> tuple[Symbol, Cell, Cell]:
    """Split `((name . lambda-list) body...)` into its three parts."""
    signature = args.car if args is not Empty else None
    if not isinstance(signature, Cell) or signature is Empty or not isinstance(signature.car, Symbol):
        raise YallRuntimeError(f"Can't define {form}: expected ({form} (name params...) body...)")
    return signature.car, signature.cdr, args.tail


def define_form(env: Environment, args: Cell) -> Expr:
    """
    (def name value) evaluates value and binds it.
    (def (name params...) body...) is the same as defn.
    """
    if args is not Empty and isinstance(args.car, Cell):
        return defn_form(env, args)
    if args is Empty or not isinstance(args.car, Symbol):
        raise YallRuntimeError("Can't define")
    if args.cdr is Empty:
        raise YallArityError(f"def {args.car} requires a value")

    name = args.car
    value = evaluate(args.cadr, env)
    if isinstance(value, Function):
        value.name = name.name
    env.intern(name, value)
    return name


def defn_form(env: Environment, args: Cell) -> Expr:
    """(defn (name params...) body...)"""
    name, lambda_list, body = _signature(args, "function")
    env.intern(name, Function(name.name, make_closure(env, lambda_list, body)))
    return name


def defmacro_form(env: Environment, args: Cell) -> Expr:
    """(defmacro (name params...) body...)"""
    name, lambda_list, body = _signature(args, "macro")
    env.intern(name, Macro(name.name, make_closure(env, lambda_list, body)))
    return name
