"""Unit tests for djgrid.sort."""

from djgrid.errors import InvalidArgumentError, UnknownAttributeError
from djgrid.sort import Sort
from djgrid.testing.testcases import TestCase


class SortTests(TestCase):
    """Unit tests for djgrid.sort.Sort."""

    def _create_sort(self, query=None, **kwargs):
        request = self.create_http_request('/items/', query)
        kwargs.setdefault('attributes', ['a', 'b', 'c'])

        return Sort(request, **kwargs)

    def test_set_attributes_with_names(self):
        """Testing Sort.set_attributes with a list of names"""
        sort = self._create_sort(attributes=['a'])

        self.assertEqual(sort.attributes, {
            'a': {
                'asc': {'a': 'asc'},
                'desc': {'a': 'desc'},
            },
        })

    def test_set_attributes_with_dict(self):
        """Testing Sort.set_attributes merges configuration over defaults"""
        sort = self._create_sort(attributes={
            'name': {
                'desc': {'last_name': 'desc', 'first_name': 'desc'},
                'label': 'Full name',
            },
            'created': None,
        })

        self.assertEqual(sort.attributes, {
            'name': {
                'asc': {'name': 'asc'},
                'desc': {'last_name': 'desc', 'first_name': 'desc'},
                'label': 'Full name',
            },
            'created': {
                'asc': {'created': 'asc'},
                'desc': {'created': 'desc'},
            },
        })

    def test_set_attributes_with_string(self):
        """Testing Sort.set_attributes with a string"""
        with self.assertRaises(InvalidArgumentError):
            self._create_sort(attributes='a')

    def test_has_attribute(self):
        """Testing Sort.has_attribute"""
        sort = self._create_sort()

        self.assertTrue(sort.has_attribute('a'))
        self.assertFalse(sort.has_attribute('z'))
        self.assertFalse(sort.has_attribute(None))

    def test_fetch_attributes_order_with_default_order(self):
        """Testing Sort.fetch_attributes_order without a sort parameter uses
        the default order
        """
        sort = self._create_sort(default_order={
            'a': Sort.DESC,
            'unknown': Sort.ASC,
        })

        self.assertEqual(sort.fetch_attributes_order(), {'a': 'desc'})

    def test_fetch_attributes_order_with_single_sort(self):
        """Testing Sort.fetch_attributes_order with single-sort uses the
        first attribute
        """
        sort = self._create_sort({'sort': 'b,-a'})

        self.assertEqual(sort.fetch_attributes_order(), {'b': 'asc'})

    def test_fetch_attributes_order_with_multi_sort(self):
        """Testing Sort.fetch_attributes_order with multi-sort keeps every
        attribute in order
        """
        sort = self._create_sort({'sort': 'b,-a'}, enable_multi_sort=True)

        self.assertEqual(list(sort.fetch_attributes_order().items()),
                         [('b', 'asc'), ('a', 'desc')])

    def test_fetch_attributes_order_with_unknown(self):
        """Testing Sort.fetch_attributes_order ignores unknown attributes"""
        sort = self._create_sort({'sort': 'zzz,-a'})

        self.assertEqual(sort.fetch_attributes_order(), {'a': 'desc'})

    def test_fetch_attributes_order_with_only_unknown(self):
        """Testing Sort.fetch_attributes_order with only unknown attributes
        uses the default order
        """
        sort = self._create_sort({'sort': 'zzz'},
                                 default_order={'c': Sort.ASC})

        self.assertEqual(sort.fetch_attributes_order(), {'c': 'asc'})

    def test_fetch_attributes_order_with_custom_param(self):
        """Testing Sort.fetch_attributes_order with a sort parameter from
        settings
        """
        with self.settings(DJGRID_SORT_PARAM='order',
                           DJGRID_SORT_SEPARATOR='|'):
            sort = self._create_sort({'order': '-c|a'},
                                     enable_multi_sort=True)

            self.assertEqual(sort.fetch_attributes_order(),
                             {'c': 'desc', 'a': 'asc'})

    def test_set_attribute_orders(self):
        """Testing Sort.set_attribute_orders"""
        sort = self._create_sort({'sort': 'a'})
        sort.set_attribute_orders({
            'unknown': Sort.ASC,
            'b': Sort.DESC,
            'c': Sort.ASC,
        })

        self.assertEqual(sort.fetch_attributes_order(), {'b': 'desc'})

    def test_fetch_orders(self):
        """Testing Sort.fetch_orders flattens attribute clauses"""
        sort = self._create_sort(
            {'sort': 'b,-a'},
            attributes={
                'a': None,
                'b': {
                    'asc': {'b1': 'asc', 'b2': 'desc'},
                },
            },
            enable_multi_sort=True)

        self.assertEqual(list(sort.fetch_orders().items()),
                         [('b1', 'asc'), ('b2', 'desc'), ('a', 'desc')])

    def test_fetch_orders_with_field_name_clause(self):
        """Testing Sort.fetch_orders with a field name clause"""
        sort = self._create_sort({'sort': 'a'},
                                 attributes={'a': {'asc': 'title'}})

        self.assertEqual(sort.fetch_orders(), {'title': 'asc'})

    def test_get_attribute_order(self):
        """Testing Sort.get_attribute_order"""
        sort = self._create_sort({'sort': '-a'})

        self.assertEqual(sort.get_attribute_order('a'), 'desc')
        self.assertIsNone(sort.get_attribute_order('b'))
        self.assertIsNone(sort.get_attribute_order(5))

    def test_create_sort_param_toggles(self):
        """Testing Sort.create_sort_param toggles the direction"""
        self.assertEqual(self._create_sort().create_sort_param('a'), 'a')
        self.assertEqual(
            self._create_sort({'sort': 'a'}).create_sort_param('a'),
            '-a')
        self.assertEqual(
            self._create_sort({'sort': '-a'}).create_sort_param('a'),
            'a')

    def test_create_sort_param_with_default_direction(self):
        """Testing Sort.create_sort_param with a configured default
        direction
        """
        sort = self._create_sort(attributes={
            'a': {'default': Sort.DESC},
        })

        self.assertEqual(sort.create_sort_param('a'), '-a')

    def test_create_sort_param_with_single_sort(self):
        """Testing Sort.create_sort_param with single-sort only includes
        the toggled attribute
        """
        sort = self._create_sort({'sort': 'b'})

        self.assertEqual(sort.create_sort_param('a'), 'a')

    def test_create_sort_param_with_multi_sort(self):
        """Testing Sort.create_sort_param with multi-sort puts the toggled
        attribute first
        """
        sort = self._create_sort({'sort': 'b,-a'}, enable_multi_sort=True)

        self.assertEqual(sort.create_sort_param('a'), 'a,b')
        self.assertEqual(sort.create_sort_param('c'), 'c,b,-a')

    def test_create_sort_param_with_unknown(self):
        """Testing Sort.create_sort_param with an unknown attribute"""
        sort = self._create_sort()

        with self.assertRaises(UnknownAttributeError):
            sort.create_sort_param('zzz')

    def test_create_url(self):
        """Testing Sort.create_url replaces the sort and drops the page"""
        sort = self._create_sort({
            'sort': 'a',
            'page': '3',
            'q': 'x',
        })

        self.assertEqual(sort.create_url('a'), '/items/?sort=-a&q=x')

    def test_create_link(self):
        """Testing Sort.create_link"""
        sort = self._create_sort({'sort': 'a'})

        self.assertHTMLEqual(
            sort.create_link('a'),
            '<a href="/items/?sort=-a" class="asc" data-sort="-a">A</a>')

    def test_create_link_with_options(self):
        """Testing Sort.create_link with a label and CSS class"""
        sort = self._create_sort({'sort': '-b'})

        self.assertHTMLEqual(
            sort.create_link('b', options={
                'class': 'sort-link',
                'label': 'Bee',
            }),
            '<a href="/items/?sort=b" class="sort-link desc"'
            ' data-sort="b">Bee</a>')

    def test_create_link_with_configured_label(self):
        """Testing Sort.create_link with a configured label"""
        sort = self._create_sort(attributes={
            'created_at': {'label': 'Created'},
            'updated_at': None,
        })

        self.assertHTMLEqual(
            sort.create_link('created_at'),
            '<a href="/items/?sort=created_at"'
            ' data-sort="created_at">Created</a>')
        self.assertHTMLEqual(
            sort.create_link('updated_at'),
            '<a href="/items/?sort=updated_at"'
            ' data-sort="updated_at">Updated at</a>')
