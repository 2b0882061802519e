import io
import unittest

from rich.console import Console

from range_source import built_in_range_table
from show_ranges import display_group, display_source, resolve_group

class TestResolveGroup(unittest.TestCase):
    def setUp(self):
        self.table = built_in_range_table()

    def test_group_with_prefix(self):
        self.assertEqual(resolve_group(self.table, '979-12', '978'), ('979', '12'))

    def test_group_with_default_prefix(self):
        self.assertEqual(resolve_group(self.table, '2', '978'), ('978', '2'))
        self.assertEqual(resolve_group(self.table, '12', '979'), ('979', '12'))

    def test_isbn_digits(self):
        self.assertEqual(resolve_group(self.table, '978-2-07-040850', '978'), ('978', '2'))
        self.assertEqual(resolve_group(self.table, '9992012345', '978'), ('978', '99920'))

    def test_no_match(self):
        self.assertIsNone(resolve_group(self.table, '979-99', '978'))
        self.assertIsNone(resolve_group(self.table, 'abc', '978'))

class TestDisplay(unittest.TestCase):
    def setUp(self):
        self.table = built_in_range_table()
        self.output = io.StringIO()
        self.console = Console(file=self.output, width=200)

    def test_display_source(self):
        display_source(self.console, self.table)
        text = self.output.getvalue()
        self.assertIn('built-in', text)
        self.assertIn(self.table.serial, text)

    def test_display_group(self):
        display_group(self.console, self.table, '979', '12')
        text = self.output.getvalue()
        self.assertIn('979-12 Italy', text)
        self.assertIn('84999', text)

    def test_display_group_without_ranges(self):
        display_group(self.console, self.table, '978', '99902')
        self.assertIn('no publisher ranges assigned', self.output.getvalue())

if __name__ == '__main__':
    unittest.main()
