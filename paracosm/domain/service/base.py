"""Domain service base class."""


class Service:
    """Base for services that coordinate repositories.

    Services own the logfire spans for their operations and raise domain
    errors; they never know about HTTP.
    """
