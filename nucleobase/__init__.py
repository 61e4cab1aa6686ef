from .errors import NucleobaseError, UnrecognizedCode
from .nucleobases import LETTER_CODES, Nucleobase, parse, supported_nucleobases

__version__ = '0.1.0'

__all__ = [
    'LETTER_CODES',
    'Nucleobase',
    'NucleobaseError',
    'UnrecognizedCode',
    'parse',
    'supported_nucleobases',
]
