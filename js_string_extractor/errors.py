class ExtractionException(Exception):
    '''
    Base class for all extraction exceptions
    '''


class ParseError(ExtractionException):
    '''
    A source file could not be turned into a syntax tree
    '''
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse {path}: {reason}")


class CatalogError(ExtractionException):
    '''
    A catalog entry does not hold a string or a pair of strings
    '''
    def __init__(self, path, payload):
        self.path = path
        self.payload = payload
        super().__init__(
            f"ERROR: something went wrong in {path}: "
            f"expected a string literal, got {payload!r}")
