# description/errors.py


class TMSyntaxError(ValueError):
    """Raised when a .tm description does not follow the grammar."""

    def __init__(self, message, line=None, column=None):
        self.message = message
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class StructuralError(TMSyntaxError):
    """Raised when a transition does not fit the declared tape count."""


class InvalidInputSymbolError(ValueError):
    """Raised when an input word contains a character outside the input alphabet."""

    def __init__(self, index, symbol):
        self.index = index
        self.symbol = symbol
        super().__init__(f"Input symbol {symbol!r} at index {index} is not in the input alphabet.")
