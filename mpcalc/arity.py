from .errors import ArityMismatch


def validate_arity(name: str, min_arguments: int, max_arguments: int, count: int) -> None:
    """Check an argument count against the inclusive window [min_arguments, max_arguments].

    Fixed-arity functions get a sharper message than ranged ones.
    """
    if min_arguments == max_arguments and count != min_arguments:
        plural = "" if min_arguments == 1 else "s"
        raise ArityMismatch(f"Function {name} takes {min_arguments} argument{plural}, not {count}")
    if count < min_arguments or count > max_arguments:
        raise ArityMismatch(f"Function {name} takes {min_arguments} to {max_arguments} arguments, not {count}")
