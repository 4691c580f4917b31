__all__ = ['WakeOnLanError', 'InvalidNetworkError', 'InvalidMacError', 'TransportError']

class WakeOnLanError(Exception):
    pass

class InvalidNetworkError(WakeOnLanError):
    def __init__(self, network: str | None):
        super().__init__(f'Invalid network provided [{network or ""}]')
        self.network = network

class InvalidMacError(WakeOnLanError):
    def __init__(self, mac: str | None):
        super().__init__(f'Invalid MAC address provided [{mac or ""}]')
        self.mac = mac

class TransportError(WakeOnLanError):
    def __init__(self, message: str, host: str = '', port: int | None = None):
        super().__init__(message)
        self.host = host
        self.port = port
