class SchemeError(Exception):
    """ The single error type raised by the reader, evaluator and primitives.

    The taxonomy is flat: callers only care that an error occurred, and
    the reason string says what went wrong.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __str__(self):
        return self.reason
