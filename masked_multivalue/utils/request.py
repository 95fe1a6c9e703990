"""
Request utilities for masked-multivalue.

This module binds submitted request fields into a ``MaskingMultiValueMap``
with credential-bearing fields masked, ready to be logged or displayed.
"""

from typing import Iterable, List, Optional

from django.http import HttpRequest, QueryDict

from ..config_proxy import get_setting
from ..datastructures import MaskingMultiValueMap


def resolve_masked_keys(
    field_names: Iterable[str],
    terms: Optional[Iterable[str]] = None,
    match: Optional[str] = None,
) -> List[str]:
    """
    Select the field names that must be masked.

    Args:
        field_names: Submitted field names.
        terms: Sensitive terms. Defaults to the ``masked_keys`` setting.
        match: ``"contains"`` (case-insensitive substring) or ``"exact"``
            (case-insensitive equality). Defaults to ``masked_key_match``.

    Returns:
        Matching field names, in submission order.

    Examples:
        >>> resolve_masked_keys(["username", "new_password"], ["password"])
        ["new_password"]
    """
    if terms is None:
        terms = get_setting("masked_keys", [])
    if match is None:
        match = get_setting("masked_key_match", "contains")

    lowered_terms = {str(term).lower() for term in terms if term}
    if not lowered_terms:
        return []

    masked = []
    for name in field_names:
        name_lower = str(name).lower()
        if match == "exact":
            matched = name_lower in lowered_terms
        else:
            matched = any(term in name_lower for term in lowered_terms)
        if matched:
            masked.append(name)
    return masked


FORM_URLENCODED = "application/x-www-form-urlencoded"


def _form_fields(request: HttpRequest) -> QueryDict:
    """Return the submitted form fields, parsing urlencoded bodies Django skips."""
    if request.method == "POST":
        return request.POST
    if request.content_type == FORM_URLENCODED:
        return QueryDict(request.body, encoding=request.encoding)
    return QueryDict()


def _add_query_dict(data: MaskingMultiValueMap, query_dict: QueryDict) -> None:
    for key, values in query_dict.lists():
        for value in values:
            data.add(key, value)


def build_request_data_map(
    request: HttpRequest,
    *,
    masked_keys: Optional[Iterable[str]] = None,
    include_query_params: Optional[bool] = None,
) -> MaskingMultiValueMap:
    """
    Bind the request's form fields into a masking multi-value map.

    Query parameters (when included) come first, followed by the form
    fields, each in submission order. Django only parses ``POST`` bodies, so
    urlencoded bodies of other methods (PUT, PATCH, DELETE) are parsed here.

    Args:
        request: The Django request.
        masked_keys: Extra field names to mask on top of the configured ones.
        include_query_params: Also bind ``request.GET``. Defaults to the
            ``request_logging.include_query_params`` setting.

    Returns:
        The populated MaskingMultiValueMap.
    """
    if include_query_params is None:
        include_query_params = bool(
            get_setting("request_logging.include_query_params", False)
        )

    data = MaskingMultiValueMap()
    if include_query_params:
        _add_query_dict(data, request.GET)
    _add_query_dict(data, _form_fields(request))

    data.mask(*resolve_masked_keys(data.keys()))
    if masked_keys:
        data.mask(*masked_keys)
    return data


__all__ = ["resolve_masked_keys", "build_request_data_map"]
