from __future__ import annotations

import dataclasses
import enum
import logging
from typing import TYPE_CHECKING

from .errors import UnrecognizedCode

if TYPE_CHECKING:
    import numpy as np


class Nucleobase(enum.Enum):
    ADENINE = 'A'
    CYTOSINE = 'C'
    GUANINE = 'G'
    THYMINE = 'T'
    URACIL = 'U'

    @classmethod
    def _missing_(cls, value):
        # lowercase codes map onto the uppercase members
        if isinstance(value, str) and len(value) == 1 and not value.isupper():
            base = cls._value2member_map_.get(value.upper())
            if base is not None:
                return base
        logging.debug(f"rejected nucleobase code {value!r}")
        raise UnrecognizedCode(value)

    @classmethod
    def from_letter_code(cls, code: str) -> Nucleobase:
        if not isinstance(code, str):
            logging.debug(f"rejected nucleobase code {code!r}")
            raise UnrecognizedCode(code)
        return cls(code)

    def __str__(self) -> str:
        return self.value

    @property
    def letter_code(self) -> str:
        return self.value

    @property
    def chemical_name(self) -> str:
        return supported_nucleobases[self].chemical_name

    @property
    def nucleoside(self) -> str:
        return supported_nucleobases[self].nucleoside

    def is_purine(self) -> bool:
        return supported_nucleobases[self].purine

    def is_pyrimidine(self) -> bool:
        return not supported_nucleobases[self].purine

    def is_ketone(self) -> bool:
        return supported_nucleobases[self].ketone

    def is_amine(self) -> bool:
        return supported_nucleobases[self].amine

    def is_ribonucleotide_base(self) -> bool:
        return supported_nucleobases[self].ribo

    def is_deoxyribonucleotide_base(self) -> bool:
        return supported_nucleobases[self].deoxyribo

    def pairs_with(self, other: Nucleobase, wobble: bool = False) -> bool:
        """Watson-Crick pairing, optionally extended by the G-U wobble pair."""
        if other.value in supported_nucleobases[self].pairedwith:
            return True
        return wobble and {self, other} == {Nucleobase.GUANINE, Nucleobase.URACIL}

    def one_hot(self) -> np.ndarray:
        """float32 unit vector in member order; needs the ``numpy`` extra."""
        import numpy as np
        v = np.zeros(len(Nucleobase), dtype=np.float32)
        v[_position[self]] = 1.
        return v


@dataclasses.dataclass(frozen=True)
class Bases:
    chemical_name: str
    nucleoside: str
    pairedwith: str
    purine: bool
    ketone: bool
    amine: bool
    ribo: bool
    deoxyribo: bool

supported_nucleobases = {
    Nucleobase.ADENINE: Bases('adenine', 'adenosine', 'TU', purine=True, ketone=False, amine=True, ribo=True, deoxyribo=True),
    Nucleobase.CYTOSINE: Bases('cytosine', 'cytidine', 'G', purine=False, ketone=False, amine=True, ribo=True, deoxyribo=True),
    Nucleobase.GUANINE: Bases('guanine', 'guanosine', 'C', purine=True, ketone=True, amine=True, ribo=True, deoxyribo=True),
    Nucleobase.THYMINE: Bases('thymine', 'thymidine', 'A', purine=False, ketone=True, amine=False, ribo=False, deoxyribo=True),
    Nucleobase.URACIL: Bases('uracil', 'uridine', 'A', purine=False, ketone=True, amine=False, ribo=True, deoxyribo=False),
}

_position = { b: i for i, b in enumerate(Nucleobase) }

LETTER_CODES = frozenset(b.value for b in Nucleobase)


def parse(code: str) -> Nucleobase:
    return Nucleobase.from_letter_code(code)
