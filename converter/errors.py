class ConversionError(Exception):
    """Base class for every failure that aborts a conversion."""


class HeaderError(ConversionError):
    def __init__(self, header):
        self.header = header
        super().__init__(f"Invalid machine type header: {header}")


class TransitionParseError(ConversionError):
    """A transition line could not be parsed."""

    def __init__(self, message):
        self.message = message
        self.line_number = None
        super().__init__(message)

    def at_line(self, line_number):
        self.line_number = line_number
        return self

    def __str__(self):
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class EmptyLine(TransitionParseError):
    # Blank and comment-only lines; dropped by parse_transitions, never reported.
    def __init__(self):
        super().__init__("Line is empty")


class InvalidPartCount(TransitionParseError):
    def __init__(self, count):
        self.count = count
        super().__init__(f"Invalid number of parts, expected 5, got {count}")


class InvalidSymbol(TransitionParseError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Invalid symbol, must be a single char: '{symbol}'")


class InvalidDirection(TransitionParseError):
    def __init__(self, direction):
        self.direction = direction
        super().__init__(f"Invalid direction: {direction}")


class InputPathError(ConversionError):
    def __init__(self, path, suffix):
        self.path = str(path)
        self.suffix = suffix
        super().__init__(f"Input file name must end with '{suffix}': {path}")


class InputDecodeError(ConversionError):
    def __init__(self, path, reason):
        self.path = str(path)
        super().__init__(f"Cannot read {path} as UTF-8 text: {reason}")
