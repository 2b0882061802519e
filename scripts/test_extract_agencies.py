import json
from pathlib import Path
import tempfile
import unittest

from extract_agencies import process_data
from range_fixtures import STANDARD_MESSAGE
from range_message import RangeMessageParser
from range_source import built_in_range_table

class TestExtractAgencies(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.output_path = Path(self.tmpdir.name) / 'agencies.json'

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_parsed_table(self):
        process_data(RangeMessageParser().parse_text(STANDARD_MESSAGE), self.output_path)

        with self.output_path.open(encoding='utf-8') as f:
            data = json.load(f)

        self.assertEqual(data, {
            '00': 'English language',
            '02': 'French language',
            '0953': 'Croatia',
            '099902': 'Reserved Agency',
            '112': 'Italy',
        })

    def test_built_in_table(self):
        table = built_in_range_table()
        process_data(table, self.output_path)

        with self.output_path.open(encoding='utf-8') as f:
            data = json.load(f)

        self.assertEqual(len(data), len(table))
        self.assertEqual(data['099904'], 'Curaçao')
        self.assertEqual(data['18'], 'United States')

if __name__ == '__main__':
    unittest.main()
