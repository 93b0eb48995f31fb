import logging
from typing import Dict, List, NamedTuple, Optional

from .errors import UnknownFunction
from .function import Function, Handler

logger = logging.getLogger(__name__)


class Signature(NamedTuple):
    key: str            # name the function is looked up by
    name: str           # name used in error messages
    min_arguments: int
    max_arguments: int
    handler: Handler
    doc: str


SIGNATURES: List[Signature] = []


def register(name: str, arity, key: Optional[str] = None, doc: str = ""):
    """Add a handler to the default function table.

    arity is either an exact count or an inclusive (min, max) window.
    """
    lo, hi = (arity, arity) if isinstance(arity, int) else arity

    def deco(fn: Handler):
        SIGNATURES.append(Signature(key or name, name, lo, hi, fn, doc))
        return fn
    return deco


class FunctionRegistry:
    def __init__(self):
        self._functions: Dict[str, Function] = {}
        self._docs: Dict[str, str] = {}

    def register(self, name: str, function: Function, doc: str = "") -> None:
        if name in self._functions:
            logger.debug("overwriting function %s", name)
        self._functions[name] = function
        self._docs[name] = doc

    def get(self, name: str) -> Function:
        try:
            return self._functions[name]
        except KeyError:
            raise UnknownFunction(name) from None

    def invoke(self, name: str, arguments: List):
        return self.get(name).call(arguments)

    def names(self) -> List[str]:
        return sorted(self._functions)

    def __contains__(self, name: str) -> bool:
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    def list_functions(self) -> List[dict]:
        out = []
        for k in self.names():
            fn = self._functions[k]
            lo, hi = getattr(fn, "min_arguments", None), getattr(fn, "max_arguments", None)
            arity = list(range(lo, hi + 1)) if lo is not None else None
            out.append({"name": k, "function": fn.name, "arity": arity, "doc": self._docs[k]})
        return out
