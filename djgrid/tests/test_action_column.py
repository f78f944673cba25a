"""Unit tests for djgrid.columns.ActionColumn."""

from djgrid.columns import ActionButton, ActionColumn
from djgrid.errors import InvalidArgumentError, MissingDependencyError
from djgrid.grids import Gridview
from djgrid.testing.testcases import TestCase


class Item:
    def __init__(self, id):
        self.id = id


def _render_button(url, icon):
    return (
        '<a href="%s"><span class="glyphicon glyphicon-%s"'
        ' aria-hidden="true">&nbsp;</span></a>'
        % (url, icon)
    )


class ActionColumnTests(TestCase):
    """Unit tests for djgrid.columns.ActionColumn."""

    def setUp(self):
        super().setUp()

        self.request = self.create_http_request('/items/')

    def test_defaults(self):
        """Testing ActionColumn defaults"""
        column = ActionColumn()

        self.assertEqual(column.label, 'Actions')
        self.assertEqual(column.format, 'raw')
        self.assertFalse(column.sortable)
        self.assertEqual(list(column.buttons), ['read', 'update', 'delete'])

        for button in column.buttons.values():
            self.assertEqual(button.kind, ActionButton.LITERAL)

        self.assertEqual(column.render_header_cell_content(),
                         '<th>Actions</th>')

    def test_create_default_button_url(self):
        """Testing ActionColumn.create_default_button_url"""
        column = ActionColumn(request=self.request)

        self.assertEqual(
            column.create_default_button_url(ActionColumn.EDIT, Item(42)),
            '/items/42/update')
        self.assertEqual(
            column.create_default_button_url(ActionColumn.SHOW, {'id': 7}),
            '/items/7/read')

    def test_create_default_button_url_without_id(self):
        """Testing ActionColumn.create_default_button_url with a row without
        an ID
        """
        column = ActionColumn(request=self.request)

        self.assertEqual(
            column.create_default_button_url(ActionColumn.EDIT, object()),
            '')
        self.assertEqual(
            column.create_default_button_url(ActionColumn.EDIT, {}),
            '')

    def test_create_default_button_url_from_grid(self):
        """Testing ActionColumn.create_default_button_url with the request
        from the grid
        """
        request = self.create_http_request('/users/5/items/')
        grid = Gridview(request)
        column = grid.add_column(ActionColumn())

        self.assertEqual(
            column.create_default_button_url(ActionColumn.DELETE, Item(3)),
            '/users/5/items/3/delete')

    def test_create_default_button_url_without_request(self):
        """Testing ActionColumn.create_default_button_url without a
        request
        """
        with self.assertRaises(MissingDependencyError):
            ActionColumn().create_default_button_url(ActionColumn.EDIT,
                                                     Item(1))

    def test_render_cell_content(self):
        """Testing ActionColumn.render_cell_content"""
        column = ActionColumn(request=self.request)

        self.assertHTMLEqual(
            column.render_cell_content(Item(42), 0),
            '<td>%s%s%s</td>' % (
                _render_button('/items/42/read', 'eye-open'),
                _render_button('/items/42/update', 'pencil'),
                _render_button('/items/42/delete', 'cross'),
            ))

    def test_render_cell_content_with_hidden_button(self):
        """Testing ActionColumn.render_cell_content with a hidden button"""
        column = ActionColumn(request=self.request,
                              hidden_buttons={ActionColumn.DELETE: True})

        self.assertHTMLEqual(
            column.render_cell_content(Item(42), 0),
            '<td>%s%s</td>' % (
                _render_button('/items/42/read', 'eye-open'),
                _render_button('/items/42/update', 'pencil'),
            ))

    def test_render_cell_content_with_hidden_predicate(self):
        """Testing ActionColumn.render_cell_content with a hiding
        function
        """
        column = ActionColumn(
            request=self.request,
            hidden_buttons={
                ActionColumn.SHOW: lambda row, url: url.endswith('/1/read'),
                ActionColumn.EDIT: False,
                ActionColumn.DELETE: lambda row, url: row.id == 1,
            })

        self.assertHTMLEqual(
            column.render_cell_content(Item(1), 0),
            '<td>%s</td>' % _render_button('/items/1/update', 'pencil'))
        self.assertHTMLEqual(
            column.render_cell_content(Item(2), 1),
            '<td>%s%s%s</td>' % (
                _render_button('/items/2/read', 'eye-open'),
                _render_button('/items/2/update', 'pencil'),
                _render_button('/items/2/delete', 'cross'),
            ))

    def test_render_cell_content_with_all_hidden(self):
        """Testing ActionColumn.render_cell_content with every button
        hidden
        """
        column = ActionColumn(request=self.request,
                              hidden_buttons={
                                  ActionColumn.SHOW: True,
                                  ActionColumn.EDIT: True,
                                  ActionColumn.DELETE: True,
                              })

        self.assertEqual(column.render_cell_content(Item(1), 0),
                         '<td>&nbsp;</td>')

    def test_render_cell_content_with_custom_urls(self):
        """Testing ActionColumn.render_cell_content with literal and
        callback URLs
        """
        column = ActionColumn(
            request=self.request,
            buttons={
                ActionColumn.SHOW: lambda row, url, index: '/view/%s/%s'
                                                            % (row.id, index),
                ActionColumn.EDIT: '/edit-me',
            },
            hidden_buttons={ActionColumn.DELETE: True})

        self.assertEqual(column.buttons[ActionColumn.SHOW].kind,
                         ActionButton.CALLBACK)
        self.assertHTMLEqual(
            column.render_cell_content(Item(9), 4),
            '<td>%s%s</td>' % (
                _render_button('/view/9/4', 'eye-open'),
                _render_button('/edit-me', 'pencil'),
            ))

    def test_render_cell_content_with_structured_button(self):
        """Testing ActionColumn.render_cell_content with a custom button"""
        column = ActionColumn(
            request=self.request,
            buttons={
                'archive': {
                    'url': '/archive',
                    'content': lambda row, url, index:
                        '<a class="archive" href="%s?id=%s">Archive</a>'
                        % (url, row.id),
                },
                ActionColumn.SHOW: {
                    'content': '<span>view</span>',
                },
            },
            hidden_buttons={
                ActionColumn.EDIT: True,
                ActionColumn.DELETE: True,
            })

        self.assertEqual(list(column.buttons),
                         ['read', 'update', 'delete', 'archive'])
        self.assertEqual(column.buttons['archive'].kind,
                         ActionButton.STRUCTURED)
        self.assertHTMLEqual(
            column.render_cell_content(Item(5), 0),
            '<td><span>view</span>'
            '<a class="archive" href="/archive?id=5">Archive</a></td>')

    def test_init_with_invalid_button(self):
        """Testing ActionColumn with an invalid button configuration"""
        with self.assertRaises(InvalidArgumentError):
            ActionColumn(buttons={ActionColumn.SHOW: 5})

        with self.assertRaises(InvalidArgumentError):
            ActionColumn(buttons={ActionColumn.SHOW: {'url': 5}})
