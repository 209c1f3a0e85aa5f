class SetupError(RuntimeError):
    """
    Raised when the word list cannot be read or decoded.
    The index is never built partially; the original error is chained.
    """

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
