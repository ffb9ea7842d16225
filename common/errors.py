from typing import Sequence


class BaseError(Exception):
    """Base class for all exceptions.

    :cvar fmt: A format string that daughter classes override

    """

    fmt = "Daughter classes should redefine this"

    def __init__(self, **kwargs) -> None:
        for key, value in kwargs.items():
            setattr(self, key, value)

    def __str__(self):
        return self.fmt.format([], **self.__dict__)

    def get_exit_code(self):
        """Exit code to use if this exception causes the program to exit."""
        return 2


class ValidationError(BaseError):
    pass


class InvalidClusterNameError(ValidationError):

    fmt = (
        "Error: Cluster name must contain only lowercase letters, numbers, "
        "hyphens and be under {max_length} characters."
    )

    def __init__(self, *, name: str, max_length: int) -> None:
        super().__init__(name=name, max_length=max_length)


class InvalidRegionError(ValidationError):

    fmt = "Error: Invalid AWS region: {region}"

    def __init__(self, *, region: str, available_regions: Sequence[str]) -> None:
        super().__init__(region=region, available_regions=list(available_regions))


class ConfigError(BaseError):

    fmt = "Error: Invalid configuration in {path!r}: {message}."

    def __init__(self, *, path: str, message: str) -> None:
        super().__init__(path=path, message=message)


class DependencyMissingError(BaseError):

    fmt = "Error: {dependency} is not installed or not in PATH"

    def __init__(self, *, dependency: str) -> None:
        super().__init__(dependency=dependency)

    def get_exit_code(self):
        return 1


class NotInteractiveError(BaseError):

    fmt = "Error: {program} is interactive and needs a terminal to run."

    def __init__(self, *, program: str) -> None:
        super().__init__(program=program)

    def get_exit_code(self):
        return 1


class ManifestWriteError(BaseError):

    fmt = "Error: Could not write manifest {path!r}: {message}"

    def __init__(self, *, path: str, message: str) -> None:
        super().__init__(path=path, message=message)
