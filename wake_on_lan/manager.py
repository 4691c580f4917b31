import logging
from wake_on_lan.exceptions import InvalidNetworkError, InvalidMacError
from wake_on_lan.libraries.addresses import is_valid_ipv4, is_valid_mac
from wake_on_lan.models.send_result import SendResult
from wake_on_lan.models.wol import WolModel
from wake_on_lan.services.wol import WolService
from wake_on_lan.utils.logging import NoExceptionFormatter

__all__ = ['WakeOnLanManager']

class WakeOnLanManager:
    def __init__(self, *, log_level: str = '', port: int | str = 7, reply_timeout: float | str = 0) -> None:
        self._log_level: str = log_level
        
        self._logger: logging.Logger = self._logger_factory(self._log_level)
        self._config: WolModel = WolModel(port=port, reply_timeout=reply_timeout)
        self._wol: WolService = self._wol_factory()

    def wake(self, network: str | None, mac: str | None) -> SendResult:
        if not network or not is_valid_ipv4(network):
            raise InvalidNetworkError(network)

        if not mac or not is_valid_mac(mac):
            raise InvalidMacError(mac)
        
        result = self._wol.wake(mac, network)
        
        self._report(result)
        
        return result

    def _report(self, result: SendResult) -> None:
        target = f'[udp@{result.host}:{result.port}]'

        if not result.success:
            self._logger.info(f'Magic packet could not be delivered to {target}: {result.error}')
            print(f'> Host unreachable >> {target}: {result.error}')
            return
        
        print(f'> Magic packet sent >> {target}')
        print(f'> Data sent ({result.bytes_sent} bytes)')
        
        if result.reply is not None:
            print(f'> Data received ({len(result.reply)} bytes)')
            print(result.reply.decode('utf-8', errors='replace'))

    def _logger_factory(self, log_level: str) -> logging.Logger:
        levels = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }

        format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        if not log_level in levels:
            log_level = "WARNING"

        logger = logging.getLogger('wake_on_lan')
        logger.setLevel(levels[log_level])

        # tracebacks are only shown when debugging
        if log_level == "DEBUG":
            formatter = logging.Formatter(format)
        else:
            formatter = NoExceptionFormatter(format)

        if not logger.handlers:
            logger.addHandler(logging.StreamHandler())

        for handler in logger.handlers:
            handler.setLevel(levels[log_level])
            handler.setFormatter(formatter)

        return logger

    def _wol_factory(self) -> WolService:
        wol_logger = self._logger.getChild('wol')
        
        return WolService(self._config, logger=wol_logger)
