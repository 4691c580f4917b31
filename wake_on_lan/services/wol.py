import logging
import socket
from wake_on_lan.exceptions import TransportError
from wake_on_lan.libraries.addresses import parse_mac, resolve_broadcast
from wake_on_lan.libraries.magic_packet import build_magic_packet
from wake_on_lan.models.send_result import SendResult
from wake_on_lan.models.wol import WolModel

__all__ = ['WolService']

class WolService:
    def __init__(self, config: WolModel, *, logger: logging.Logger):
        self._config: WolModel = config

        self._logger: logging.Logger = logger

        self._reply_buffer_size: int = 4096

    @property
    def port(self) -> int:
        return self._config.port

    def wake(self, mac: str, network: str) -> SendResult:
        payload = build_magic_packet(parse_mac(mac))
        host = resolve_broadcast(network)

        self._logger.debug(f'Built magic packet for {mac} ({len(payload)} bytes): {payload.hex()}')

        return self.send_magic_packet(payload, host)

    def send_magic_packet(self, payload: bytes, host: str, port: int | None = None) -> SendResult:
        if port is None:
            port = self._config.port

        self._logger.info(f'Sending magic packet to udp@{host}:{port}')

        try:
            bytes_sent, reply = self._send(payload, host, port)
        except TransportError as e:
            self._logger.debug(f'Send to udp@{host}:{port} failed', exc_info=e)
            return SendResult(host=host, port=port, success=False, error=str(e))

        return SendResult(host=host, port=port, success=True, bytes_sent=bytes_sent, reply=reply)

    def _send(self, payload: bytes, host: str, port: int) -> tuple[int, bytes | None]:
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

                bytes_sent = sock.sendto(payload, (host, port))
                reply = self._receive_reply(sock)
        except OSError as e:
            raise TransportError(str(e) or e.__class__.__name__, host, port) from e

        return bytes_sent, reply

    def _receive_reply(self, sock: socket.socket) -> bytes | None:
        if not self._config.reply_timeout:
            return None

        sock.settimeout(self._config.reply_timeout)

        try:
            reply, address = sock.recvfrom(self._reply_buffer_size)
        except OSError as e:
            # best-effort, the packet is already out
            self._logger.debug(f'No reply received: {e}')
            return None

        self._logger.debug(f'Received {len(reply)} bytes from {address[0]}:{address[1]}')

        return reply
