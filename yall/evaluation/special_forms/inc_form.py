from yall import Expr
from yall.errors import YallTypeError
from yall.types.atoms import Integer
from yall.types.cell import Cell, Empty
from yall.types.environment import Environment
from yall.types.symbol import Symbol


def inc_form(env: Environment, args: Cell) -> Expr:
    """
    (inc! name)
    Increments the Integer bound to name in place and returns it. The binding
    itself is untouched, so every closure sharing the Integer sees the change.
    """
    name = args.car if args is not Empty else None
    if not isinstance(name, Symbol):
        raise YallTypeError("inc! requires a symbol")
    value = env.lookup(name)
    if not isinstance(value, Integer):
        raise YallTypeError(f"inc! requires an integer, but {name} is {value}")
    return value.increment()
