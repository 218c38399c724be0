import pytest

from aba.errors import MalformedLineError
from aba.trailer import Trailer


def test_trailer_layout() -> None:
    line = Trailer(net_total=0, credit_total=2000, debit_total=2000, record_count=3).encode()

    assert len(line) == 120
    assert line[0] == "7"
    assert line[1:8] == "999-999"
    assert line[8:20] == " " * 12
    assert line[20:30] == "0000000000"
    assert line[30:40] == "0000002000"
    assert line[40:50] == "0000002000"
    assert line[50:74] == " " * 24
    assert line[74:80] == "000003"
    assert line[80:] == " " * 40


def test_trailer_round_trip() -> None:
    trailer = Trailer(net_total=1500, credit_total=3500, debit_total=2000, record_count=12)

    assert Trailer.decode(trailer.encode()) == trailer


@pytest.mark.parametrize("suffix", ["\n", "\r\n"])
def test_trailer_has_no_terminator_tolerance(suffix: str) -> None:
    with pytest.raises(MalformedLineError):
        Trailer.decode(Trailer().encode() + suffix)


def test_trailer_rejects_short_line() -> None:
    with pytest.raises(MalformedLineError) as excinfo:
        Trailer.decode(Trailer().encode()[:119])
    assert excinfo.value.actual_length == 119
