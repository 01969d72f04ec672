import pytest

from thds.bnid import multihash
from thds.bnid.errors import DataTooLargeError, InvalidFrameError, SizeMismatchError


def test_frame():
    assert multihash.frame(b"\x01\x02") == b"\x00\x02\x01\x02"
    assert multihash.frame(b"") == b"\x00\x00"
    assert multihash.frame(bytes(127))[:2] == b"\x00\x7f"


def test_frame_too_large():
    with pytest.raises(DataTooLargeError, match="too large"):
        multihash.frame(bytes(128))


def test_unframe():
    assert multihash.unframe(b"\x00\x02\x01\x02") == b"\x01\x02"
    assert multihash.unframe(memoryview(b"\x00\x02\x01\x02"), expected_size=2) == b"\x01\x02"
    assert multihash.unframe(multihash.frame(bytes(127))) == bytes(127)


@pytest.mark.parametrize(
    ["framed", "error"],
    [
        pytest.param(b"", InvalidFrameError, id="empty"),
        pytest.param(b"\x00", InvalidFrameError, id="no-size"),
        pytest.param(b"\x12\x02\x01\x02", InvalidFrameError, id="sha2-256-code"),
        pytest.param(b"\x00\x80" + bytes(128), DataTooLargeError, id="size-too-large"),
        pytest.param(b"\x00\x03\x01\x02", SizeMismatchError, id="short-digest"),
        pytest.param(b"\x00\x01\x01\x02", SizeMismatchError, id="long-digest"),
    ],
)
def test_unframe_rejects(framed: bytes, error: type):
    with pytest.raises(error):
        multihash.unframe(framed)


def test_unframe_expected_size():
    with pytest.raises(SizeMismatchError, match='"32" bytes'):
        multihash.unframe(b"\x00\x02\x01\x02", expected_size=32)
