from __future__ import annotations

from typing import Any


class NucleobaseError(Exception):
    pass


class UnrecognizedCode(NucleobaseError, ValueError):
    """Raised when a letter code does not name one of the five nucleobases.

    The rejected input is kept untouched on ``code``.
    """

    def __init__(self, code: Any) -> None:
        super(UnrecognizedCode, self).__init__(f'unrecognized nucleobase code: {code!r}')
        self.code = code
