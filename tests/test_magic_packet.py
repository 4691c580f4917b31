import pytest
from wake_on_lan.exceptions import InvalidMacError
from wake_on_lan.libraries.magic_packet import build_magic_packet, MAGIC_PACKET_SIZE, SYNC_STREAM

@pytest.mark.parametrize('mac', [
    bytes([0, 17, 34, 51, 68, 85]),
    bytes([0xff] * 6),
    bytes([0] * 6),
    bytes([0xde, 0xad, 0xbe, 0xef, 0x90, 0x4c]),
])
def test_packet_layout(mac):
    packet = build_magic_packet(mac)

    assert len(packet) == MAGIC_PACKET_SIZE == 102
    assert packet[:6] == SYNC_STREAM
    assert packet[6:] == mac * 16

def test_packet_has_no_padding_bytes():
    packet = build_magic_packet(bytes([1, 2, 3, 4, 5, 6]))

    assert packet[0] == 0xff
    assert packet[-1] == 6

def test_packet_accepts_octet_list():
    assert build_magic_packet([0, 17, 34, 51, 68, 85]) == b'\xff' * 6 + bytes([0, 17, 34, 51, 68, 85]) * 16

@pytest.mark.parametrize('mac', [b'', bytes(5), bytes(7)])
def test_packet_rejects_wrong_length(mac):
    with pytest.raises(InvalidMacError):
        build_magic_packet(mac)
