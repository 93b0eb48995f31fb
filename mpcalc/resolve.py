import logging
from typing import Dict, Iterable, Mapping, Optional

from .errors import AmbiguousResolution, UnsupportedArgument
from .functions.base import Functions
from .functions.complex_functions import ComplexFunctions
from .functions.integer_functions import IntegerFunctions
from .functions.rational_functions import RationalFunctions
from .functions.real_functions import RealFunctions
from .representation import Representation, representation_of

logger = logging.getLogger(__name__)


def default_families() -> Dict[Representation, Functions]:
    return {
        Representation.INTEGER: IntegerFunctions(),
        Representation.RATIONAL: RationalFunctions(),
        Representation.REAL: RealFunctions(),
        Representation.COMPLEX: ComplexFunctions(),
    }


class TypeResolver:
    """Picks the implementation that can handle every argument of a call.

    Each argument maps to the implementation for its representation; the
    one with the highest rank wins. Implementations of equal rank but
    different type are incomparable: the first one seen is kept, unless
    strict is set, in which case AmbiguousResolution is raised.
    """

    def __init__(self, families: Optional[Mapping[Representation, Functions]] = None, strict: bool = False):
        self.families = dict(default_families() if families is None else families)
        self.strict = strict

    def functions_for(self, argument) -> Functions:
        rep = representation_of(argument)
        try:
            return self.families[rep]
        except KeyError:
            raise UnsupportedArgument(f"No implementation registered for {rep.name.lower()} numbers") from None

    def resolve(self, arguments: Iterable) -> Optional[Functions]:
        dominant = None
        for argument in arguments:
            candidate = self.functions_for(argument)
            if dominant is None or candidate.rank > dominant.rank:
                dominant = candidate
            elif candidate.rank == dominant.rank and type(candidate) is not type(dominant):
                if self.strict:
                    raise AmbiguousResolution(
                        f"Incomparable implementations {type(dominant).__name__} and {type(candidate).__name__}"
                    )
                logger.debug("keeping %r over incomparable %r", dominant, candidate)
        return dominant
