from wakeonlan import create_magic_packet
from wake_on_lan.exceptions import InvalidMacError

__all__ = ['build_magic_packet', 'SYNC_STREAM', 'MAC_REPETITIONS', 'MAGIC_PACKET_SIZE']

SYNC_STREAM = b'\xff' * 6
MAC_REPETITIONS = 16
MAGIC_PACKET_SIZE = len(SYNC_STREAM) + 6 * MAC_REPETITIONS

def build_magic_packet(mac: bytes) -> bytes:
    """
    Build the Wake-On-LAN payload: 6 bytes of 0xFF followed by the MAC
    address repeated 16 times (102 bytes).
    """
    mac = bytes(mac)
    
    if len(mac) != 6:
        raise InvalidMacError(mac.hex())
    
    return create_magic_packet(mac.hex())
