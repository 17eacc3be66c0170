""" Errors raised while splitting or running commands. """


class UnmatchedQuoteError(ValueError):
    """ A quote was opened but never closed. """
    def __init__(self, kind: str, position: int):
        super().__init__(f"Unmatched {kind} quote at position {position}")
        self.kind = kind          # "single" or "double"
        self.position = position  # offset of the opening quote


class ShellExit(Exception):
    """ Raised by the interactive loop's exit command. """
    def __init__(self, status: int = 0):
        super().__init__(status)
        self.status = status
