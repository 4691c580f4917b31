import sys
import argparse
from pydantic import ValidationError
from wake_on_lan.manager import WakeOnLanManager
from wake_on_lan.exceptions import WakeOnLanError
from wake_on_lan.info import __app_name__, __version__, __description__

EPILOG = """
Default port for WOL is: 7 (udp).
An invalid PORT value is reported like any other input error, but a -p or
--port flag given without a value is a usage error (exit status 2).

The 'NETWORK' must be the IPv4 address of a /24 network, the packet is
broadcast to its .255 address.
Correct example: 192.168.15.0

The MAC address can be passed as a non-divided string, or with one of the
following separators: '-', ':' or '.' (never mixed).
Valid:
    00:11:22:33:44:55       00-11-22-33-44-55
    00.11.22.33.44.55       001122334455
Invalid:
    00/11/22/33/44/55       ('/' is not allowed as separator)
    0-11-22-33-44-55        (MAC bytes must be complete, even if starting with zero)

Example (waking on local network in port 9):
    wake-on-lan 192.168.15.0 ff:ff:ff:ff:ff:ff -p 9
"""

def main(argv: list[str] | None = None):
    # get args from command line
    parser = argparse.ArgumentParser(prog=__app_name__, description=__description__, epilog=EPILOG, formatter_class=argparse.RawDescriptionHelpFormatter)

    parser.add_argument('network', nargs='?', metavar='NETWORK', help='IPv4 address of the target network')
    parser.add_argument('mac', nargs='?', metavar='MAC', help='MAC address of the host to wake')
    parser.add_argument('-p', '--port', dest='port', default='7', help='UDP port to send the magic packet to (default: 7)')
    parser.add_argument('--listen', dest='reply_timeout', default='0', metavar='SECONDS', help='Wait up to SECONDS for a reply datagram (default: 0, do not wait)')
    parser.add_argument('--log-level', dest='log_level', help='Log level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument('-v', '--version', action='version', version=f'{__app_name__} {__version__}')

    args = parser.parse_args(argv)

    if args.network is None and args.mac is None:
        parser.print_help()
        sys.exit(0)

    try:
        wake_on_lan = WakeOnLanManager(log_level=args.log_level, port=args.port, reply_timeout=args.reply_timeout)
    except ValidationError as e:
        for error in e.errors(include_url=False):
            loc = '.'.join(str(x) for x in error['loc']) if error['loc'] else 'general'
            print(f"Error: Invalid {loc} provided: {error['msg']}")

        sys.exit(0)

    try:
        wake_on_lan.wake(args.network, args.mac)
    except WakeOnLanError as e:
        print(f"Error: {e}")

    sys.exit(0)
