class JSArrayError(Exception):
    pass


class ArgumentTypeError(JSArrayError, TypeError):
    """Raised when a callback or index argument has the wrong type."""

    def __init__(self, method: str, position: int, expected: str, value: object):
        super().__init__(
            f"{method}(): bad argument #{position} "
            f"({expected} expected, got {type(value).__name__})"
        )
        self.method: str = method
        self.position: int = position
        self.value: object = value


class RangeError(JSArrayError, IndexError):
    def __init__(self, method: str, index: int, length: int):
        super().__init__(f"{method}(): invalid index {index} for length {length}")
        self.index: int = index
        self.length: int = length


class EmptyReduceError(JSArrayError, TypeError):
    """Raised when reducing an empty array without an initial value."""

    def __init__(self, method: str):
        super().__init__(
            f"{method}(): attempt to reduce an empty array with no initial value"
        )


class MissingArgumentError(JSArrayError, ValueError):
    pass
