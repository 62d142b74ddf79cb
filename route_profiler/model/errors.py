"""Error taxonomy for route profiling.

Programming errors (empty input, invalid sample budget, unknown route shape)
fail loudly. LookupFailure is an expected operational failure that the
profile assembler absorbs into a fallback profile.
"""


class RouteProfilerError(Exception):
    """Base class for all route profiler errors."""


class EmptyInputError(RouteProfilerError, ValueError):
    """No coordinates were supplied."""

    def __init__(self, message: str = "No coordinates provided") -> None:
        super().__init__(message)


class InvalidSampleBudgetError(RouteProfilerError, ValueError):
    """Sample budget cannot represent both start and end of a route."""

    def __init__(self, max_points: object) -> None:
        self.max_points = max_points
        super().__init__(f"max_points must be an integer >= 2, got {max_points!r}")


class LookupFailure(RouteProfilerError):
    """Elevation source unreachable, returned an error, or sent an unusable response."""


class RouteFormatError(RouteProfilerError, ValueError):
    """Routing response has a shape the route adapter does not recognize."""


class ShadeSimulationError(RouteProfilerError):
    """Shade plugin or API failed."""


class ShadeSimulatorNotConfiguredError(ShadeSimulationError):
    """Neither a shade plugin nor a shade API is available."""

    def __init__(self) -> None:
        super().__init__("No shade simulator plugin or API configured. Register a plugin or provide api_url.")
