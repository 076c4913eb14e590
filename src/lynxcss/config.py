from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_ITERATIONS = 100


def check_max_iterations(value: object) -> int:
    """Return *value* if it is a usable pass cap, else raise ValueError."""
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise ValueError(f"max_iterations must be a positive integer, got {value!r}")
    return value


@dataclass(frozen=True)
class ResolverOptions:
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    log_warnings: bool = True  # False silences the diagnostic channel entirely

    def __post_init__(self) -> None:
        check_max_iterations(self.max_iterations)
