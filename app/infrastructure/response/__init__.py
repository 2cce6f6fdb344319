"""响应格式化基础设施组件导出"""

from .response_formatter import (
    standard_response,
    error_response,
    not_found_response,
    bad_request_response,
)

__all__ = [
    "standard_response",
    "error_response",
    "not_found_response",
    "bad_request_response",
]
