"""Unit tests for djgrid.accessors."""

from djgrid.accessors import get_row_accessor, has_row_accessor
from djgrid.errors import MissingAccessorError
from djgrid.testing.testcases import TestCase


class Book:
    def __init__(self):
        self.title = 'Dune'
        self.year = 1965

    def get_title(self):
        return self.title.upper()

    def is_published(self):
        return True

    def summary(self):
        return 'A desert planet.'

    @property
    def author(self):
        return 'Frank Herbert'


class AccessorTests(TestCase):
    """Unit tests for djgrid.accessors."""

    def test_get_row_accessor_with_getter(self):
        """Testing get_row_accessor prefers get_<name>() methods"""
        accessor = get_row_accessor(Book, 'title')

        self.assertEqual(accessor(Book()), 'DUNE')

    def test_get_row_accessor_with_is_method(self):
        """Testing get_row_accessor with is_<name>() methods"""
        accessor = get_row_accessor(Book, 'published')

        self.assertTrue(accessor(Book()))

    def test_get_row_accessor_with_attributes(self):
        """Testing get_row_accessor with attributes, properties and
        methods
        """
        book = Book()

        self.assertEqual(get_row_accessor(Book, 'year')(book), 1965)
        self.assertEqual(get_row_accessor(Book, 'author')(book),
                         'Frank Herbert')
        self.assertEqual(get_row_accessor(Book, 'summary')(book),
                         'A desert planet.')

    def test_get_row_accessor_is_cached(self):
        """Testing get_row_accessor returns the same accessor for a type"""
        self.assertIs(get_row_accessor(Book, 'title'),
                      get_row_accessor(Book, 'title'))

    def test_get_row_accessor_with_missing(self):
        """Testing get_row_accessor with a missing attribute"""
        accessor = get_row_accessor(Book, 'isbn')

        with self.assertRaises(MissingAccessorError):
            accessor(Book())

    def test_has_row_accessor(self):
        """Testing has_row_accessor"""
        book = Book()

        self.assertTrue(has_row_accessor(book, 'title'))
        self.assertTrue(has_row_accessor(book, 'published'))
        self.assertTrue(has_row_accessor(book, 'year'))
        self.assertFalse(has_row_accessor(book, 'id'))
        self.assertTrue(has_row_accessor({'id': 1}, 'id'))
        self.assertFalse(has_row_accessor({}, 'id'))
