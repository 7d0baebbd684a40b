from yall import Expr
from yall.errors import YallArityError
from yall.evaluation.evaluator import evaluate
from yall.types.boolean import FALSE
from yall.types.cell import Cell, Empty
from yall.types.environment import Environment


def if_form(env: Environment, args: Cell) -> Expr:
    if args is Empty or args.cdr is Empty:
        raise YallArityError("if requires a condition and a then-expression")

    cond = evaluate(args.car, env)
    # only #f is false; (), 0 and "" are all true
    if cond is not FALSE:
        return evaluate(args.cadr, env)
    if args.cddr is not Empty:
        return evaluate(args.caddr, env)
    return Empty
