from enum import Enum


class Lifetime(str, Enum):
    """Lifetime directives returned by the stock with_lifetime selectors.

    The registrar passes these to the container as they are; what each one
    means is up to the container. Any object can serve as a lifetime
    directive.

    Attributes:
        TRANSIENT: Ask the container for a fresh instance per request.
        SCOPED: Ask the container for one instance per scope.
        SINGLETON: Ask the container for one shared instance.
    """

    TRANSIENT = "transient"
    SCOPED = "scoped"
    SINGLETON = "singleton"

    def __str__(self) -> str:
        return self.value
