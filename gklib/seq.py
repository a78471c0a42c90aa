"""Protein sequences with position-specific scoring and frequency matrices."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from gklib.tokenizer import tokenize

_AAORDER = "ARNDCQEGHILKMFPSTWYVBZX*"
_PSSMWIDTH = 20
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


class AlphabetMap:
    """Two-way mapping between symbols of an alphabet and their positions."""

    def __init__(self, alphabet: str) -> None:
        self.n = len(alphabet)
        self.i2c = alphabet
        self.c2i: dict[str, int] = {ch: i for i, ch in enumerate(alphabet)}


@dataclass
class Sequence:
    """A sequence of symbol indices with its PSSM and PSFM rows."""

    name: str
    sequence: list[int] = field(default_factory=list)
    pssm: list[list[int]] = field(default_factory=list)
    psfm: list[list[int]] = field(default_factory=list)
    nsymbols: int = _PSSMWIDTH

    def __len__(self) -> int:
        return len(self.sequence)


def read_gkmod_pssm(filename: str | PathLike[str]) -> Sequence:
    """Read a PSSM file in gkmod format.

    The first line names the 20 matrix columns; each further line holds a
    position, the residue, 20 PSSM scores and 20 PSFM values.
    """
    converter = AlphabetMap(_AAORDER)

    with open(filename) as fh:
        lines = fh.readlines()
    if not lines:
        raise ValueError(f"Unexpected end of file: {filename}")

    header_tokens = tokenize(lines[0].upper(), " \t\n")
    if len(header_tokens) < _PSSMWIDTH:
        raise ValueError(
            f"header of {filename} has {len(header_tokens)} columns, expected {_PSSMWIDTH}"
        )
    columns = []
    for token in header_tokens[:_PSSMWIDTH]:
        col = converter.c2i.get(token[0], -1)
        if not 0 <= col < _PSSMWIDTH:
            raise ValueError(f"unknown column symbol {token[0]!r} in {filename}")
        columns.append(col)

    result = Sequence(name=Path(filename).stem)
    for lineno, line in enumerate(lines[1:], start=2):
        tokens = tokenize(line.upper(), " \t\n")
        if len(tokens) < 2 + 2 * _PSSMWIDTH:
            raise ValueError(f"line {lineno} of {filename} has too few fields")

        result.sequence.append(converter.c2i.get(tokens[1][0], -1))
        pssm_row = [0] * _PSSMWIDTH
        psfm_row = [0] * _PSSMWIDTH
        for j, col in enumerate(columns):
            pssm_row[col] = _atoi(tokens[2 + j])
            psfm_row[col] = _atoi(tokens[2 + _PSSMWIDTH + j])
        result.pssm.append(pssm_row)
        result.psfm.append(psfm_row)

    return result