"""
In-memory ISBN range table.

Maps a top-level prefix ('978' or '979') and a registration group code to the
group's agency label and the ranges a registrant (publisher) code may occupy
right after the group code:

    table.agency_name('978', '2')       -> 'French language'
    table.publisher_ranges('978', '2')  -> (Range('00', '19'), Range('200', '349'), ...)

Group codes under one prefix are prefix-free, so the group code of an
undelimited ISBN is found by trying progressively longer leading digits.
A table is never modified once built; to reload, build a new one.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

# { prefix: { group code: (agency, [(low, high), ...]) } }
RawRangeData = Dict[str, Dict[str, Tuple[str, List[Tuple[str, str]]]]]

@dataclass(frozen=True)
class Range:
    low: str
    high: str

    @property
    def length(self) -> int:
        return len(self.low)

    def matches(self, digits: str) -> bool:
        """Check whether the leading `length` digits fall inside the range."""
        if len(digits) < self.length:
            return False
        return self.low <= digits[:self.length] <= self.high

@dataclass(frozen=True)
class GroupEntry:
    agency: str
    ranges: Tuple[Range, ...] = ()

class RangeTable:
    def __init__(self, groups: Mapping[str, Mapping[str, GroupEntry]], source: str,
                 serial: Optional[str] = None, date: Optional[str] = None):
        self._groups = MappingProxyType({
            prefix: MappingProxyType(dict(group_map))
            for prefix, group_map in groups.items()
        })
        self._source = source
        self._serial = serial
        self._date = date
        self._max_group_code_length = max(
            (len(code) for group_map in self._groups.values() for code in group_map),
            default=0,
        )

    @classmethod
    def from_data(cls, data: RawRangeData, source: str,
                  serial: Optional[str] = None, date: Optional[str] = None) -> 'RangeTable':
        """Build a table from the nested literal shape used by range_data."""
        groups = {}
        for prefix, group_data in data.items():
            groups[prefix] = {
                code: GroupEntry(agency, tuple(Range(low, high) for low, high in ranges))
                for code, (agency, ranges) in group_data.items()
            }
        return cls(groups, source, serial, date)

    def to_data(self) -> RawRangeData:
        return {
            prefix: {
                code: (entry.agency, [(r.low, r.high) for r in entry.ranges])
                for code, entry in group_map.items()
            }
            for prefix, group_map in self._groups.items()
        }

    @property
    def source(self) -> str:
        """Path of the parsed document, or 'built-in'."""
        return self._source

    @property
    def serial(self) -> Optional[str]:
        return self._serial

    @property
    def date(self) -> Optional[str]:
        return self._date

    def prefixes(self) -> List[str]:
        return sorted(self._groups)

    def groups(self, prefix: str) -> Mapping[str, GroupEntry]:
        return self._groups.get(prefix, MappingProxyType({}))

    def group_codes(self, prefix: str) -> List[str]:
        return sorted(self.groups(prefix), key=lambda code: (len(code), code))

    def agency_name(self, prefix: str, group_code: str) -> Optional[str]:
        entry = self.groups(prefix).get(group_code)
        return entry.agency if entry is not None else None

    def publisher_ranges(self, prefix: str, group_code: str) -> Optional[Tuple[Range, ...]]:
        """
        Ranges for the registrant code following `group_code`, in document order.

        Returns an empty tuple for a registered group with no ranges assigned
        and None for a group that is not registered at all.
        """
        entry = self.groups(prefix).get(group_code)
        return entry.ranges if entry is not None else None

    def max_group_code_length(self) -> int:
        return self._max_group_code_length

    def find_group(self, prefix: str, digits: str) -> Optional[str]:
        """
        Find the registration group at the start of `digits`, the part of an
        ISBN-13 after its prefix (or an ISBN-10 without separators).
        """
        group_map = self.groups(prefix)
        for length in range(1, min(len(digits), self._max_group_code_length) + 1):
            if digits[:length] in group_map:
                return digits[:length]
        return None

    def __iter__(self) -> Iterator[Tuple[str, str, GroupEntry]]:
        for prefix in self.prefixes():
            for code, entry in self._groups[prefix].items():
                yield prefix, code, entry

    def __len__(self) -> int:
        return sum(len(group_map) for group_map in self._groups.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(source={self._source!r}, serial={self._serial!r}, groups={len(self)})"


import unittest

SAMPLE_DATA = {
    '978': {
        '0': ('English language', [('00', '19'), ('200', '227'), ('2280', '2289')]),
        '2': ('French language', [('00', '19'), ('200', '349')]),
        '953': ('Croatia', [('0', '0'), ('10', '14')]),
        '99902': ('Reserved Agency', []),
    },
    '979': {
        '12': ('Italy', [('200', '299'), ('5450', '5999')]),
    },
}

class TestRange(unittest.TestCase):
    def test_length(self):
        self.assertEqual(Range('2280', '2289').length, 4)

    def test_matches(self):
        publisher_range = Range('200', '227')
        self.assertTrue(publisher_range.matches('2001234'))
        self.assertTrue(publisher_range.matches('227'))
        self.assertFalse(publisher_range.matches('2281234'))
        self.assertFalse(publisher_range.matches('19'))

class TestRangeTable(unittest.TestCase):
    def setUp(self):
        self.table = RangeTable.from_data(SAMPLE_DATA, source='test', serial='serial', date='date')

    def test_metadata(self):
        self.assertEqual(self.table.source, 'test')
        self.assertEqual(self.table.serial, 'serial')
        self.assertEqual(self.table.date, 'date')

    def test_agency_name(self):
        self.assertEqual(self.table.agency_name('978', '2'), 'French language')
        self.assertEqual(self.table.agency_name('979', '12'), 'Italy')
        self.assertIsNone(self.table.agency_name('978', '12'))
        self.assertIsNone(self.table.agency_name('977', '2'))

    def test_publisher_ranges(self):
        self.assertEqual(self.table.publisher_ranges('978', '2'), (Range('00', '19'), Range('200', '349')))

    def test_registered_group_without_ranges(self):
        self.assertEqual(self.table.publisher_ranges('978', '99902'), ())

    def test_unregistered_group(self):
        self.assertIsNone(self.table.publisher_ranges('978', '99903'))

    def test_group_codes(self):
        self.assertEqual(self.table.group_codes('978'), ['0', '2', '953', '99902'])
        self.assertEqual(self.table.group_codes('977'), [])

    def test_max_group_code_length(self):
        self.assertEqual(self.table.max_group_code_length(), 5)
        self.assertEqual(RangeTable({}, source='empty').max_group_code_length(), 0)

    def test_find_group(self):
        self.assertEqual(self.table.find_group('978', '2070408504'), '2')
        self.assertEqual(self.table.find_group('978', '9531234567'), '953')
        self.assertEqual(self.table.find_group('979', '1220000000'), '12')
        self.assertIsNone(self.table.find_group('978', '1234567890'))
        self.assertIsNone(self.table.find_group('978', '95'))

    def test_iteration_and_len(self):
        self.assertEqual(len(self.table), 5)
        self.assertEqual(
            [(prefix, code) for prefix, code, _ in self.table],
            [('978', '0'), ('978', '2'), ('978', '953'), ('978', '99902'), ('979', '12')],
        )

    def test_to_data(self):
        self.assertEqual(self.table.to_data(), SAMPLE_DATA)

    def test_read_only(self):
        with self.assertRaises(TypeError):
            self.table.groups('978')['3'] = GroupEntry('German language')
        with self.assertRaises(AttributeError):
            self.table.source = 'other'

    def test_not_affected_by_source_mapping(self):
        groups = {'978': {'2': GroupEntry('French language')}}
        table = RangeTable(groups, source='test')
        groups['978']['3'] = GroupEntry('German language')
        self.assertIsNone(table.agency_name('978', '3'))

if __name__ == '__main__':
    unittest.main()
