"""
RequestDataLoggingMiddleware implementation.
"""

import logging
from typing import Optional

from django.http import HttpRequest, HttpResponse
from django.utils.deprecation import MiddlewareMixin

from ..config_proxy import get_setting
from ..utils.request import build_request_data_map

logger = logging.getLogger(__name__)


class RequestDataLoggingMiddleware(MiddlewareMixin):
    """
    Bind submitted form fields into a MaskingMultiValueMap and log them.

    Credential-bearing fields are masked before the map is logged. The bound
    map is attached to the request under the ``request_logging.request_attribute``
    setting so views can reuse it. Responses are never altered.
    """

    def __init__(self, get_response=None):
        super().__init__(get_response)
        self.get_response = get_response

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        if not get_setting("request_logging.enabled", False):
            return None

        methods = {
            str(method).upper()
            for method in get_setting("request_logging.methods", [])
        }
        if request.method not in methods:
            return None

        data = build_request_data_map(request)
        setattr(request, get_setting("request_logging.request_attribute"), data)

        level = logging.getLevelName(
            str(get_setting("request_logging.log_level", "DEBUG")).upper()
        )
        if not isinstance(level, int):
            level = logging.DEBUG
        logger.log(level, "%s %s form data: %s", request.method, request.path, data)
        return None
