from typing import Any, Dict, Optional

class NetServiceError(Exception):
    """Base exception class for all netservice exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ConfigError(NetServiceError):
    """Raised when there is a configuration error"""
    pass

class LoggerError(NetServiceError):
    """Raised when there is a logging error"""
    pass
