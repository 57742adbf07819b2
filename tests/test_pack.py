import random
from collections import Counter

import pytest

from donkey.common import Card
from donkey.pack import PackLoader, PlayerCount


def test_player_count():
    assert PlayerCount.parse("4") == 4
    assert PlayerCount.parse(" 2\n") == 2
    for bad in ("0", "-1", "two", "", "1.5"):
        with pytest.raises(PlayerCount.InvalidPlayerCount):
            PlayerCount.parse(bad)
    with pytest.raises(PlayerCount.InvalidPlayerCount):
        PlayerCount.validate(0)


def test_parse():
    lines = ["%d\n" % rank for rank in range(1, 9)]
    pack = PackLoader.parse(lines, 1)
    assert pack == [Card(rank) for rank in range(1, 9)]


def test_parse_error_names_line():
    lines = ["1\n", "2\n", "three\n"] + ["4\n"] * 5
    with pytest.raises(PackLoader.ParseError) as e:
        PackLoader.parse(lines, 1)
    assert "line 3" in str(e.value)
    assert "three" in str(e.value)


def test_parse_rejects_negative():
    with pytest.raises(PackLoader.ParseError):
        PackLoader.parse(["-1\n"] * 8, 1)


def test_size_mismatch():
    with pytest.raises(PackLoader.SizeMismatch) as e:
        PackLoader.parse(["1\n"] * 7, 1)
    assert "(8)" in str(e.value)
    with pytest.raises(PackLoader.SizeMismatch):
        PackLoader.parse(["1\n"] * 9, 1)
    with pytest.raises(PackLoader.SizeMismatch):
        PackLoader.parse(["1\n"] * 8, 2)


def test_load(tmp_path):
    path = tmp_path / "pack.txt"
    path.write_text("".join("%d\n" % rank for rank in range(16)))
    pack = PackLoader.load(str(path), 2)
    assert [card.rank for card in pack] == list(range(16))


def test_load_missing(tmp_path):
    with pytest.raises(PackLoader.ReadError):
        PackLoader.load(str(tmp_path / "missing.txt"), 2)
    with pytest.raises(PackLoader.ReadError):
        PackLoader.load(str(tmp_path), 2)


def test_load_binary(tmp_path):
    path = tmp_path / "pack.bin"
    path.write_bytes(b"\xff\xfe\x00\x01" * 8)
    with pytest.raises(PackLoader.Error):
        PackLoader.load(str(path), 1)


def test_errors_share_a_base():
    for error in (PackLoader.ReadError, PackLoader.ParseError, PackLoader.SizeMismatch):
        assert issubclass(error, PackLoader.Error)


def test_generate():
    pack = PackLoader.generate(3, random.Random(1))
    assert len(pack) == 24
    assert Counter(card.rank for card in pack) == {rank: 4 for rank in range(1, 7)}
    assert pack == PackLoader.generate(3, random.Random(1))


def test_dump_load(tmp_path):
    path = str(tmp_path / "pack.txt")
    pack = PackLoader.generate(2, random.Random(7))
    PackLoader.dump(pack, path)
    with open(path) as fp:
        assert len(fp.readlines()) == 16
    assert PackLoader.load(path, 2) == pack
