from yall import Expr
from yall.errors import YallArityError
from yall.evaluation.evaluator import begin
from yall.types.bind import bind_lambda_list
from yall.types.callables import Function, Macro
from yall.types.cell import Cell, Empty
from yall.types.environment import Environment


def make_closure(env: Environment, lambda_list: Cell, body: Cell):
    """Return a Python callable that applies `body` to an argument list.

    Each call derives a fresh frame from `env`, binds the lambda list in it
    and evaluates the body forms there.
    """
    def invoke(args: Cell) -> Expr:
        frame = env.derive()
        bind_lambda_list(frame, lambda_list, args)
        return begin(body, frame)

    return invoke


def _split(args: Cell, form: str) -> tuple[Cell, Cell]:
    if args is Empty:
        raise YallArityError(f"{form} requires a lambda list")
    return args.car, args.tail


def lambda_form(env: Environment, args: Cell) -> Expr:
    """(lambda (params...) body...) / (fn (params...) body...)"""
    lambda_list, body = _split(args, "lambda")
    return Function("#lambda", make_closure(env, lambda_list, body))


def macro_form(env: Environment, args: Cell) -> Expr:
    """(macro (params...) body...)"""
    lambda_list, body = _split(args, "macro")
    return Macro("#macro", make_closure(env, lambda_list, body))
