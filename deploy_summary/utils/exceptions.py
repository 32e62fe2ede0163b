"""
Exception hierarchy for deploy-summary

Every failure the CLI knows how to report is a DeploySummaryError. The
summarizer and loader raise these where the failure happens; only
deploy_summary.main turns them into stderr text and an exit code.
"""

from typing import Any, Dict, Optional


class ErrorCodes:
    """Numeric codes attached to each error kind"""
    UNKNOWN = 1000
    USAGE = 1001
    CONFIG_INVALID = 1101
    LOG_READ_FAILED = 1201
    LOG_PARSE_FAILED = 1202


class DeploySummaryError(Exception):
    """Base exception class for deploy-summary"""

    default_code = ErrorCodes.UNKNOWN

    def __init__(self, message: str, code: int = None, **details):
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details: Dict[str, Any] = details
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "code": self.code,
            "details": self.details,
        }


class UsageError(DeploySummaryError):
    """Command line was missing the transaction log path"""

    default_code = ErrorCodes.USAGE


class ConfigurationError(DeploySummaryError):
    """Invalid environment or command line setting"""

    default_code = ErrorCodes.CONFIG_INVALID

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, field=field, **kwargs)


class TransactionLogError(DeploySummaryError):
    """The transaction log could not be read or parsed"""

    def __init__(self, path, reason: str, code: int = None):
        self.path = str(path)
        self.reason = reason
        super().__init__(
            f"Error reading or parsing file at {self.path}: {reason}",
            code=code,
            path=self.path,
            reason=reason,
        )


class LogReadError(TransactionLogError):
    """Transaction log is missing or unreadable"""

    default_code = ErrorCodes.LOG_READ_FAILED


class LogParseError(TransactionLogError):
    """Transaction log is not valid JSON or lacks a transactions array"""

    default_code = ErrorCodes.LOG_PARSE_FAILED
