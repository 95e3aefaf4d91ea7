from astrid_logger.logger import Logger
from astrid_logger.output.base import DeliveryOutcome, DispatchResponse
from astrid_logger.schemas.config import LoggerConfig, load_config
from astrid_logger.schemas.log import Severity

__all__ = [
    "DeliveryOutcome",
    "DispatchResponse",
    "Logger",
    "LoggerConfig",
    "Severity",
    "load_config",
]
