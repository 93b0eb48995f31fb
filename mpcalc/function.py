import abc
from typing import Callable, List, Optional

from .arity import validate_arity
from .functions.base import Functions
from .representation import coerce_argument

Handler = Callable[[Optional[Functions], List], object]


class Function(abc.ABC):
    """Something the calculator can call by name."""

    name: str

    @abc.abstractmethod
    def call(self, arguments: List):
        ...


class FixedFunction(Function):
    """A function accepting between min_arguments and max_arguments arguments.

    The handler receives the implementation resolved from the arguments and
    the arguments themselves; its result is promoted before being returned.
    """

    def __init__(self, name: str, min_arguments: int, max_arguments: int, handler: Handler, resolver, promote):
        if not 0 <= min_arguments <= max_arguments:
            raise ValueError(f"Invalid arity window [{min_arguments}, {max_arguments}] for {name}")
        self.name = name
        self.min_arguments = min_arguments
        self.max_arguments = max_arguments
        self.handler = handler
        self.resolver = resolver
        self.promote = promote

    def validate(self, arguments: List) -> None:
        validate_arity(self.name, self.min_arguments, self.max_arguments, len(arguments))

    def call(self, arguments: List):
        self.validate(arguments)
        arguments = [coerce_argument(a) for a in arguments]
        functions = self.resolver.resolve(arguments)
        return self.promote(self.handler(functions, arguments))

    def __repr__(self):
        return f"FixedFunction({self.name!r}, {self.min_arguments}, {self.max_arguments})"
