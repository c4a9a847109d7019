class ExtractWindowError(Exception): ...


class InvalidRangeError(ExtractWindowError): ...


class EmptyInputError(ExtractWindowError): ...


class UnsatisfiablePolicyError(ExtractWindowError): ...


class ChunkExecutionError(ExtractWindowError):
    """Failure raised by a per-chunk operation, tagged with its chunk."""

    def __init__(self, index: int, interval, cause: BaseException):
        super().__init__(f"chunk {index} {interval} failed: {cause!r}")
        self.index = index
        self.interval = interval
        self.__cause__ = cause


class DispatchFailedError(ExtractWindowError):
    def __init__(self, errors: list[ChunkExecutionError]):
        super().__init__(
            f"{len(errors)} chunk(s) failed: "
            + ", ".join(str(e.index) for e in errors)
        )
        self.errors = errors


def require(
    condition: bool, message: str, exc: type[ExtractWindowError] = ExtractWindowError
):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
