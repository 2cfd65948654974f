class InvalidInputError(ValueError):
    pass


class ArithmeticPreconditionError(InvalidInputError):
    pass


class SinkWriteError(OSError):
    index: int

    def __init__(self, index: int, cause: OSError):
        super().__init__(f'Failed to write result of task {index}: {cause}')
        self.index = index
