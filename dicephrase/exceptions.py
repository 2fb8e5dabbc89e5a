class DicephraseError(Exception):
    pass


class WordListError(DicephraseError):
    pass


class IOFailure(WordListError):
    pass


class MalformedEntry(WordListError):
    def __init__(self, line_number: int, line: str, reason: str):
        super().__init__(f"line {line_number}: {reason}: {line!r}")
        self.line_number = line_number
        self.line = line


class InvalidWordListSize(WordListError):
    pass


class ArgumentError(DicephraseError):
    pass


class EntropySourceFailure(DicephraseError):
    """The secure random source failed. Must not be recovered from."""


class MissingWordForIndex(DicephraseError, KeyError):
    def __init__(self, key: int):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"no word for index {self.key}"
