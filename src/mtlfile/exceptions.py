from typing import Optional


class MTLError(Exception):
    message: str

    def __init__(self, message: str, *args):
        super().__init__(message, *args)
        self.message = message


class ParseError(MTLError):
    line_number: Optional[int]

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number

    def __str__(self):
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class MalformedNumber(ParseError):
    pass


class IlluminationOutOfRange(ParseError):
    pass


class MissingFilePath(ParseError):
    pass


class MissingRequiredName(MTLError, ValueError):
    pass


class UnwritableValue(MTLError, ValueError):
    pass
