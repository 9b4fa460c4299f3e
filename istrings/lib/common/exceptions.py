class IStringsError(Exception):
    """Base class for every error reported by istrings"""


class UsageError(IStringsError):
    pass


class InputFileError(IStringsError):
    pass


class OutputFileError(IStringsError):
    pass
