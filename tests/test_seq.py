import pytest

from gklib.seq import AlphabetMap, Sequence, read_gkmod_pssm

AAORDER = "ARNDCQEGHILKMFPSTWYVBZX*"
HEADER = AAORDER[:20][::-1]
RESIDUES = "mkvla"


def _write_pssm(path, residues=RESIDUES):
    pssm = [[i * 100 + j for j in range(20)] for i in range(len(residues))]
    psfm = [[-(i * 100 + j) for j in range(20)] for i in range(len(residues))]
    lines = ["   ".join(HEADER.lower())]
    for i, res in enumerate(residues):
        fields = [str(i + 1), res] + [str(v) for v in pssm[i]] + [str(v) for v in psfm[i]]
        lines.append("\t".join(fields))
    path.write_text("\n".join(lines) + "\n")
    return pssm, psfm


def test_alphabet_map_roundtrip():
    amap = AlphabetMap(AAORDER)
    assert amap.n == len(AAORDER)
    for i, ch in enumerate(AAORDER):
        assert amap.c2i[ch] == i
        assert amap.i2c[i] == ch
    assert amap.c2i.get("J", -1) == -1


def test_alphabet_map_repeated_symbol_keeps_last():
    amap = AlphabetMap("ABA")
    assert amap.c2i["A"] == 2


def test_read_pssm(tmp_path):
    path = tmp_path / "prot.pssm"
    pssm, psfm = _write_pssm(path)
    seq = read_gkmod_pssm(path)
    amap = AlphabetMap(AAORDER)

    assert isinstance(seq, Sequence)
    assert len(seq) == len(RESIDUES)
    assert seq.nsymbols == 20
    assert seq.sequence == [amap.c2i[r.upper()] for r in RESIDUES]
    for i in range(len(RESIDUES)):
        for j, sym in enumerate(HEADER):
            assert seq.pssm[i][amap.c2i[sym]] == pssm[i][j]
            assert seq.psfm[i][amap.c2i[sym]] == psfm[i][j]


def test_read_pssm_unknown_residue(tmp_path):
    path = tmp_path / "odd.pssm"
    _write_pssm(path, residues="aj")
    seq = read_gkmod_pssm(path)
    assert seq.sequence[1] == -1
    assert seq.sequence[0] == AAORDER.index("A")


def test_read_pssm_empty_file(tmp_path):
    path = tmp_path / "empty.pssm"
    path.write_text("")
    with pytest.raises(ValueError):
        read_gkmod_pssm(path)


def test_read_pssm_short_line(tmp_path):
    path = tmp_path / "short.pssm"
    path.write_text(" ".join(HEADER) + "\n1 A 1 2 3\n")
    with pytest.raises(ValueError):
        read_gkmod_pssm(path)


def test_read_pssm_short_header(tmp_path):
    path = tmp_path / "hdr.pssm"
    path.write_text("A R N\n")
    with pytest.raises(ValueError):
        read_gkmod_pssm(path)