import logging
import threading
from typing import Iterable, Optional, Sequence

import mpmath

from .config import CalculatorSettings, load_settings
from .function import FixedFunction, Function, Handler
from .promote import promote
from .registry import SIGNATURES, FunctionRegistry, Signature
from .resolve import TypeResolver
from . import table  # noqa: F401  (fills SIGNATURES)

logger = logging.getLogger(__name__)

# mpmath keeps one working precision for the whole process
_PRECISION_LOCK = threading.RLock()


class Calculator:
    """Evaluates named functions over integers, rationals, reals and complex numbers.

    The function table is bound once at construction. A call looks the name
    up, checks the argument count, resolves the implementation from the
    argument types, runs the handler at the configured working precision and
    promotes the result.
    """

    def __init__(self, settings: Optional[CalculatorSettings] = None, signatures: Sequence[Signature] = SIGNATURES):
        self.settings = settings if settings is not None else load_settings()
        self.resolver = TypeResolver(strict=self.settings.strict_resolution)
        self.registry = FunctionRegistry()
        for sig in signatures:
            fn = self.fixed_function(sig.name, sig.handler, sig.min_arguments, sig.max_arguments)
            self.registry.register(sig.key, fn, sig.doc)
        logger.debug("registered %d functions at %d digits", len(self.registry), self.settings.precision)

    def fixed_function(self, name: str, handler: Handler, min_arguments: int,
                       max_arguments: Optional[int] = None) -> FixedFunction:
        if max_arguments is None:
            max_arguments = min_arguments
        return FixedFunction(name, min_arguments, max_arguments, handler, self.resolver, promote)

    def set_function(self, name: str, function: Function, doc: str = "") -> None:
        self.registry.register(name, function, doc)

    def function(self, name: str, arguments: Iterable):
        args = list(arguments)
        logger.debug("%s%s", name, tuple(args))
        with _PRECISION_LOCK, mpmath.workdps(self.settings.precision):
            return self.registry.invoke(name, args)

    def list_functions(self):
        return self.registry.list_functions()
