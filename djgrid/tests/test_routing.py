"""Unit tests for djgrid.routing."""

from django.http import QueryDict

from djgrid.routing import build_url, get_route_name
from djgrid.testing.testcases import TestCase


class RoutingTests(TestCase):
    """Unit tests for djgrid.routing."""

    def test_get_route_name(self):
        """Testing get_route_name with a resolved request"""
        request = self.create_http_request('/items/')

        self.assertEqual(get_route_name(request), 'item-list')

    def test_get_route_name_without_match(self):
        """Testing get_route_name with an unresolved request"""
        request = self.create_http_request('/items/', resolve_path=False)

        self.assertIsNone(get_route_name(request))

    def test_build_url_with_current_route(self):
        """Testing build_url with the current route reuses URL arguments"""
        request = self.create_http_request('/users/5/items/')

        self.assertEqual(
            build_url(request, 'user-item-list', {'page': 2}),
            '/users/5/items/?page=2')

    def test_build_url_with_other_route(self):
        """Testing build_url with a different route"""
        request = self.create_http_request('/users/5/items/')

        self.assertEqual(build_url(request, 'item-list'), '/items/')

    def test_build_url_without_route(self):
        """Testing build_url without a route uses the request path"""
        request = self.create_http_request('/unrouted/')
        params = QueryDict(mutable=True)
        params['sort'] = '-name'

        self.assertEqual(build_url(request, params=params),
                         '/unrouted/?sort=-name')

    def test_build_url_with_absolute(self):
        """Testing build_url with absolute=True"""
        request = self.create_http_request('/items/')

        self.assertEqual(
            build_url(request, 'item-list', {'page': 3}, absolute=True),
            'http://testserver/items/?page=3')
