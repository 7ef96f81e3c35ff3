"""Path parameter converters.

Built-in converters for route path segments like ``{routeId}`` or
``{page:int}``.
"""

from visanav.errors import ConfigurationError

# regex pattern for each supported converter; captured values stay strings
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"\d+",
    "slug": r"[A-Za-z0-9][A-Za-z0-9_-]*",
}


def segment_pattern(param_type: str) -> str:
    """Return the regex for *param_type*.

    Raises ``ConfigurationError`` if the converter is not registered.
    """
    try:
        return CONVERTERS[param_type]
    except KeyError:
        msg = (
            f"Unknown path converter {param_type!r}. "
            f"Available: {', '.join(sorted(CONVERTERS))}"
        )
        raise ConfigurationError(msg) from None
