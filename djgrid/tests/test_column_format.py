"""Unit tests for djgrid.columns.ColumnFormat."""

from datetime import date, datetime, time, timedelta
from decimal import Decimal

import pytz

from djgrid.columns import ColumnFormat
from djgrid.errors import InvalidArgumentError, UnsupportedFormatError
from djgrid.testing.testcases import TestCase


class ColumnFormatTests(TestCase):
    """Unit tests for djgrid.columns.ColumnFormat."""

    def setUp(self):
        super().setUp()

        self.column_format = ColumnFormat()

    def test_format_html(self):
        """Testing ColumnFormat.format with the html format escapes HTML and
        template syntax
        """
        self.assertEqual(
            self.column_format.format('<b>{{ x }}</b>', 'html'),
            '&lt;b&gt;&#123;&#123; x &#125;&#125;&lt;/b&gt;')

    def test_format_raw(self):
        """Testing ColumnFormat.format with the raw format"""
        self.assertEqual(self.column_format.format('<b>x</b>', 'raw'),
                         '<b>x</b>')
        self.assertEqual(self.column_format.format(5, 'raw'), '5')
        self.assertEqual(self.column_format.format(Decimal('1.50'), 'raw'),
                         '1.50')

    def test_format_template(self):
        """Testing ColumnFormat.format with the template format"""
        self.assertEqual(
            self.column_format.format('{{ x }}', 'template'),
            '{% verbatim %}{{ x }}{% endverbatim %}')

    def test_format_none(self):
        """Testing ColumnFormat.format with None"""
        self.assertEqual(self.column_format.format(None, 'html'), '')

    def test_format_datetime_forces_date_format(self):
        """Testing ColumnFormat.format with a datetime and a non-date format
        uses the default date format
        """
        value = datetime(2024, 5, 1, 10, 30, 0)

        self.assertEqual(self.column_format.format(value, 'raw'),
                         '2024-05-01 10:30:00')
        self.assertEqual(self.column_format.format(value, 'html'),
                         '2024-05-01 10:30:00')

    def test_format_datetime_with_pattern(self):
        """Testing ColumnFormat.format with a datetime and a date pattern"""
        self.assertEqual(
            self.column_format.format(datetime(2024, 5, 1, 10, 30, 0),
                                      {'date': 'd/m/Y H:i'}),
            '01/05/2024 10:30')

    def test_format_datetime_with_timezone(self):
        """Testing ColumnFormat.format with an aware datetime and a
        timezone
        """
        column_format = ColumnFormat(
            timezone=pytz.timezone('America/New_York'))

        self.assertEqual(
            column_format.format(datetime(2024, 1, 1, 12, 0, 0,
                                          tzinfo=pytz.utc),
                                 'date'),
            '2024-01-01 07:00:00')

    def test_format_with_default_date_format(self):
        """Testing ColumnFormat.format with a custom default date format"""
        column_format = ColumnFormat(default_date_format='Y/m/d')

        self.assertEqual(column_format.format(date(2024, 5, 1), 'raw'),
                         '2024/05/01')

    def test_format_date(self):
        """Testing ColumnFormat.format with a date"""
        self.assertEqual(
            self.column_format.format(date(2024, 5, 1), {'date': 'd/m/Y'}),
            '01/05/2024')

    def test_format_time(self):
        """Testing ColumnFormat.format with a time"""
        self.assertEqual(self.column_format.format(time(8, 5, 3), 'html'),
                         '08:05:03')

    def test_format_timedelta(self):
        """Testing ColumnFormat.format with a timedelta"""
        self.assertEqual(
            self.column_format.format(timedelta(days=1, hours=2), 'raw'),
            '1 02:00:00')

    def test_format_date_string(self):
        """Testing ColumnFormat.format with a date string defers formatting
        to the template
        """
        self.assertEqual(
            self.column_format.format('2024-05-01', {'date': 'd/m/Y'}),
            '{{ "2024-05-01"|grid_date:"d/m/Y" }}')
        self.assertEqual(
            self.column_format.format(1714557600, 'date'),
            '{{ "1714557600"|grid_date:"Y-m-d H:i:s" }}')

    def test_format_date_string_with_quotes(self):
        """Testing ColumnFormat.format with a date string containing
        quotes
        """
        self.assertEqual(
            self.column_format.format('a"b', {'date': 'Y'}),
            '{{ "a\\"b"|grid_date:"Y" }}')

    def test_format_date_string_with_template_syntax(self):
        """Testing ColumnFormat.format with a date string containing
        template syntax
        """
        self.assertEqual(
            self.column_format.format('{{ x }}', 'date'),
            '&#123;&#123; x &#125;&#125;')

    def test_format_with_invalid_value(self):
        """Testing ColumnFormat.format with a non-scalar value"""
        for value in (object(), ['a'], {'a': 1}):
            with self.assertRaises(InvalidArgumentError):
                self.column_format.format(value, 'html')

    def test_format_with_invalid_format(self):
        """Testing ColumnFormat.format with an invalid format"""
        for format_spec in (5, None, {}, {1: 'x'}):
            with self.assertRaises(InvalidArgumentError):
                self.column_format.format('x', format_spec)

    def test_format_with_unknown_format(self):
        """Testing ColumnFormat.format with an unknown format name"""
        with self.assertRaises(UnsupportedFormatError):
            self.column_format.format('x', 'xml')

        with self.assertRaises(UnsupportedFormatError):
            self.column_format.format('x', {'xml': 'v1'})
