import logging
import socket
import pytest

class FakeSocket:
    instances = []

    def __init__(self, family=socket.AF_INET, type=socket.SOCK_DGRAM, *, send_error=None, reply=None, recv_error=None):
        self.family = family
        self.type = type
        self.options = {}
        self.sent = []
        self.timeout = None
        self.closed = False

        self._send_error = send_error
        self._reply = reply
        self._recv_error = recv_error

        FakeSocket.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def setsockopt(self, level, option, value):
        self.options[(level, option)] = value

    def sendto(self, data, address):
        if self._send_error is not None:
            raise self._send_error

        self.sent.append((bytes(data), address))

        return len(data)

    def settimeout(self, timeout):
        self.timeout = timeout

    def recvfrom(self, bufsize):
        if self._recv_error is not None:
            raise self._recv_error

        if self._reply is None:
            raise socket.timeout('timed out')

        return self._reply[:bufsize], ('192.168.15.20', 7)

    def close(self):
        self.closed = True

@pytest.fixture
def fake_socket(monkeypatch):
    """
    Replace socket.socket with a recording fake. Call the returned factory
    with send_error/reply to tune the sockets created afterwards.
    """
    FakeSocket.instances = []
    settings = {}

    def factory(*args, **kwargs):
        return FakeSocket(*args, **{**settings, **kwargs})

    def configure(**kwargs):
        settings.update(kwargs)
        return FakeSocket

    monkeypatch.setattr('wake_on_lan.services.wol.socket.socket', factory)

    return configure

@pytest.fixture(autouse=True)
def reset_logger():
    yield

    logger = logging.getLogger('wake_on_lan')

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
