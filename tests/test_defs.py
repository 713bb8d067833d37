import pytest

from rmdb.defs import (
    ColType,
    RecScan,
    Rid,
    coltype2str,
)


def test_rid_equality():
    assert Rid(1, 2) == Rid(1, 2)
    assert Rid(1, 2) != Rid(2, 1)
    assert len({Rid(1, 2), Rid(1, 2), Rid(0, 0)}) == 2


@pytest.mark.parametrize(
    "col_type, name",
    [(ColType.TYPE_INT, "INT"), (ColType.TYPE_FLOAT, "FLOAT"), (ColType.TYPE_STRING, "STRING")],
)
def test_coltype2str(col_type, name):
    assert coltype2str(col_type) == name


def test_coltype2str_unknown():
    with pytest.raises(KeyError):
        coltype2str(99)


def test_coltype_names_in_declaration_order():
    assert [coltype2str(t) for t in ColType] == ["INT", "FLOAT", "STRING"]


class _ListScan(RecScan):
    def __init__(self, rids):
        self._rids = list(rids)
        self._pos = 0

    def next(self):
        self._pos += 1

    def is_end(self):
        return self._pos >= len(self._rids)

    def rid(self):
        return self._rids[self._pos]


def test_recscan_subclass_iterates():
    rids = [Rid(1, 0), Rid(1, 1), Rid(2, 0)]
    scan = _ListScan(rids)
    seen = []
    while not scan.is_end():
        seen.append(scan.rid())
        scan.next()
    assert seen == rids


def test_recscan_is_abstract():
    with pytest.raises(TypeError):
        RecScan()