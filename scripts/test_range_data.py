import unittest

import range_data
from range_source import BUILT_IN_SOURCE, built_in_range_table
from range_table import Range

class TestBuiltInRangeData(unittest.TestCase):
    def setUp(self):
        self.table = built_in_range_table()

    def test_metadata(self):
        self.assertEqual(self.table.source, BUILT_IN_SOURCE)
        self.assertEqual(self.table.serial, range_data.SERIAL)
        self.assertEqual(self.table.date, '20120112')

    def test_both_prefixes_present(self):
        self.assertEqual(self.table.prefixes(), ['978', '979'])
        self.assertGreater(len(self.table.groups('978')), 200)

    def test_known_group(self):
        self.assertEqual(self.table.agency_name('978', '2'), 'French language')
        ranges = self.table.publisher_ranges('978', '2')
        self.assertTrue(ranges)
        self.assertEqual(ranges[0], Range('00', '19'))

    def test_979_group(self):
        self.assertEqual(self.table.agency_name('979', '12'), 'Italy')
        self.assertEqual(self.table.publisher_ranges('979', '12'), (
            Range('200', '299'), Range('5950', '5999'), Range('80000', '84999'),
        ))

    def test_unassigned_group(self):
        self.assertEqual(self.table.agency_name('978', '99902'), 'Reserved Agency')
        self.assertEqual(self.table.publisher_ranges('978', '99902'), ())

    def test_max_group_code_length(self):
        self.assertEqual(self.table.max_group_code_length(), 5)

    def test_entries_are_well_formed(self):
        for prefix, code, entry in self.table:
            self.assertTrue(entry.agency, f"{prefix}-{code}")
            for publisher_range in entry.ranges:
                self.assertEqual(len(publisher_range.low), len(publisher_range.high), f"{prefix}-{code}")
                self.assertLessEqual(publisher_range.low, publisher_range.high, f"{prefix}-{code}")

    def test_group_codes_are_prefix_free(self):
        for prefix in self.table.prefixes():
            codes = self.table.group_codes(prefix)
            for code in codes:
                for other in codes:
                    if code != other:
                        self.assertFalse(other.startswith(code), f"{prefix}-{code} / {prefix}-{other}")

    def test_find_group(self):
        self.assertEqual(self.table.find_group('978', '0306406152'), '0')
        self.assertEqual(self.table.find_group('978', '9992012345'), '99920')
        self.assertEqual(self.table.find_group('979', '1012345678'), '10')

if __name__ == '__main__':
    unittest.main()
