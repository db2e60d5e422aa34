"""Domain errors and failure typing."""


class PipelineError(Exception):
    """Base class for pipeline failures."""

    error_code = "PIPELINE_ERROR"

    @property
    def cause(self) -> BaseException | None:
        """Underlying failure this error wraps, if any."""
        return self.__cause__


class ArgumentError(PipelineError):
    """Raised for invalid or missing command-line paths."""

    error_code = "ARGUMENT_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class InputIOError(PipelineError):
    """Raised when the input directory or an input file cannot be read."""

    error_code = "INPUT_IO_ERROR"


class OutputIOError(PipelineError):
    """Raised when the output directory or an archive cannot be written."""

    error_code = "OUTPUT_IO_ERROR"
