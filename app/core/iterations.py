"""
Iterations of the file server.

The server went through three releases, each refining how failures
are reported. An Iteration captures what a release does differently
so that the router can be assembled for any of them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Iteration:
    """Behavior switches for one release of the file server.

    Attributes:
        number: Release number (1-3).
        bind_root: Bind the handler to "/" instead of the URL prefix.
        validate_prefix: Reject request paths lacking the URL prefix
            with a business error.
        wrap_errors: Adapt the handler with the error-classifying wrapper.
            Without it every failure reaches the framework as a 500.
        business_errors: Report failures carrying a user message as 400.
        recover_aborts: Intercept unexpected exceptions in the wrapper.
    """

    number: int
    bind_root: bool
    validate_prefix: bool
    wrap_errors: bool
    business_errors: bool
    recover_aborts: bool


ITERATIONS: dict[int, Iteration] = {
    1: Iteration(
        number=1,
        bind_root=False,
        validate_prefix=False,
        wrap_errors=False,
        business_errors=False,
        recover_aborts=False,
    ),
    2: Iteration(
        number=2,
        bind_root=False,
        validate_prefix=False,
        wrap_errors=True,
        business_errors=False,
        recover_aborts=False,
    ),
    3: Iteration(
        number=3,
        bind_root=True,
        validate_prefix=True,
        wrap_errors=True,
        business_errors=True,
        recover_aborts=True,
    ),
}


def get_iteration(number: int) -> Iteration:
    """Return the Iteration for a release number.

    Raises:
        ValueError: If no such release exists.
    """
    try:
        return ITERATIONS[number]
    except KeyError:
        raise ValueError(f"Unknown iteration: {number}. Must be 1, 2 or 3.") from None
