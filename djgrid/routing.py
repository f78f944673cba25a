"""URL generation for links that keep the current page's state.

Sort headers and pagination buttons link back to the page being rendered,
with some query parameters changed. These helpers build such URLs from the
current request.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, TYPE_CHECKING, Union
from urllib.parse import urlencode

from django.http import QueryDict
from django.urls import reverse

if TYPE_CHECKING:
    from django.http import HttpRequest


def get_route_name(
    request: HttpRequest,
) -> Optional[str]:
    """Return the name of the URL pattern that served a request.

    Args:
        request (django.http.HttpRequest):
            The HTTP request from the client.

    Returns:
        str:
        The namespaced view name, or ``None`` if the request was not
        resolved or the pattern is unnamed.
    """
    resolver_match = getattr(request, 'resolver_match', None)

    if resolver_match is None:
        return None

    return resolver_match.view_name or None


def build_url(
    request: HttpRequest,
    route: Optional[str] = None,
    params: Optional[Union[QueryDict, Mapping[str, Any]]] = None,
    absolute: bool = False,
) -> str:
    """Build a URL for a route with the given query parameters.

    If ``route`` names the URL pattern of the current request, the current
    URL arguments are reused when reversing it.

    Args:
        request (django.http.HttpRequest):
            The HTTP request from the client.

        route (str, optional):
            The name of the URL pattern. If not provided, the path of the
            current request is used.

        params (django.http.QueryDict or dict, optional):
            The query parameters to include.

        absolute (bool, optional):
            Whether to return an absolute URL including the scheme and host.

    Returns:
        str:
        The resulting URL.
    """
    if route:
        resolver_match = getattr(request, 'resolver_match', None)

        if resolver_match is not None and resolver_match.view_name == route:
            path = reverse(route,
                           args=resolver_match.args,
                           kwargs=resolver_match.kwargs)
        else:
            path = reverse(route)
    else:
        path = request.path

    if isinstance(params, QueryDict):
        query = params.urlencode()
    elif params:
        query = urlencode(params, doseq=True)
    else:
        query = ''

    if query:
        url = '%s?%s' % (path, query)
    else:
        url = path

    if absolute:
        url = request.build_absolute_uri(url)

    return url
