import re
from wake_on_lan.exceptions import InvalidNetworkError, InvalidMacError

__all__ = ['is_valid_ipv4', 'is_valid_mac', 'parse_mac', 'resolve_broadcast']

_OCTET = r'(?:25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[0-9][0-9]?)'
_IPV4_PATTERN = re.compile(rf'{_OCTET}(?:\.{_OCTET}){{3}}')

# six 2-digit groups with one consistent separator, or 12 contiguous hex digits
_MAC_PATTERN = re.compile(r'[0-9A-Fa-f]{2}([:.-])(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}|[0-9A-Fa-f]{12}')

def is_valid_ipv4(value: str) -> bool:
    if not isinstance(value, str):
        return False
    
    return _IPV4_PATTERN.fullmatch(value) is not None

def is_valid_mac(value: str) -> bool:
    if not isinstance(value, str):
        return False
    
    return _MAC_PATTERN.fullmatch(value) is not None

def parse_mac(value: str) -> bytes:
    """
    Parse a textual MAC address into its 6 octets.
    
    Accepts 12 contiguous hex digits or six 2-digit groups separated by a
    single consistent ':', '-' or '.'. Raises InvalidMacError otherwise.
    """
    if not is_valid_mac(value):
        raise InvalidMacError(value)
    
    if len(value) == 12:
        groups = [value[i:i + 2] for i in range(0, 12, 2)]
    else:
        groups = value.split(value[2])
        
    return bytes(int(group, 16) for group in groups)

def resolve_broadcast(network: str) -> str:
    # assumes a /24 network, the last octet given is ignored
    if not is_valid_ipv4(network):
        raise InvalidNetworkError(network)
    
    return '.'.join([*network.split('.')[:3], '255'])
