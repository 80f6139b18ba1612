"""Domain errors and failure typing."""


class ExposureError(Exception):
    """Base class for exposure feed failures."""

    error_code = "EXPOSURE_ERROR"


class ConfigError(ExposureError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class InputError(ExposureError):
    """Raised when the feed payload cannot be read."""

    error_code = "INPUT_ERROR"


class FilterInputError(ExposureError):
    """Raised when user supplied filter values are malformed."""

    error_code = "FILTER_INPUT_ERROR"
