"""
Parse an ISBN International RangeMessage document into a RangeTable.

Only the elements the table needs are picked out of the text, so the rest of
the document does not have to be well-formed XML:

    <MessageSerialNumber>...</MessageSerialNumber>
    <MessageDate>...</MessageDate>
    <RegistrationGroups>
      <Group>
        <Prefix>979-12</Prefix>
        <Agency>Italy</Agency>
        <Rules>
          <Rule><Range>0000000-1999999</Range><Length>0</Length></Rule>
          <Rule><Range>2000000-2999999</Range><Length>3</Length></Rule>
          ...

A Group that cannot be read is logged and left out; the rest still load.
"""

from functools import lru_cache
import logging
from pathlib import Path
import re
from typing import Dict, List, Optional, Tuple, Union
from xml.sax.saxutils import unescape

import zstandard

from common import GROUP_CODE_PATTERN, join_prefix, read_text, split_prefix
from range_errors import GroupSkipped, SourceUnavailable, StructureError
from range_table import GroupEntry, Range, RangeTable

logger = logging.getLogger(__name__)

@lru_cache(maxsize=None)
def _element_pattern(tag: str) -> re.Pattern:
    tag = re.escape(tag)
    return re.compile(rf'<{tag}(?:\s[^>]*)?>(.*?)</{tag}\s*>', re.DOTALL)

class TagScanner:
    """Finds the content between <Tag> and </Tag> for the tags it is asked about."""
    def __init__(self, text: str):
        self.text = text

    def find(self, tag: str) -> Optional[str]:
        match = _element_pattern(tag).search(self.text)
        return match.group(1) if match else None

    def find_all(self, tag: str) -> List[str]:
        return [match.group(1) for match in _element_pattern(tag).finditer(self.text)]

class RangeMessageParser:
    """Builds a RangeTable from RangeMessage text.

    Groups skipped during the last parse are kept in `skipped`.
    """

    def __init__(self):
        self.skipped: List[GroupSkipped] = []

    def parse_file(self, path: Union[str, Path]) -> RangeTable:
        """Read and parse a RangeMessage file (.xml, or .xml.zst).

        Raises:
            SourceUnavailable: The file could not be opened, read or decoded.
            StructureError: The file has no RegistrationGroups section.
        """
        path = Path(path)
        try:
            text = read_text(path)
        except (OSError, UnicodeDecodeError, zstandard.ZstdError) as e:
            raise SourceUnavailable(str(path), str(e)) from e

        return self.parse_text(text, source=str(path))

    def parse_text(self, text: str, source: str = '<string>') -> RangeTable:
        self.skipped = []
        scanner = TagScanner(text)

        serial = self._extract_field(scanner, 'MessageSerialNumber')
        date = self._extract_field(scanner, 'MessageDate')

        registration_groups = scanner.find('RegistrationGroups')
        if registration_groups is None:
            raise StructureError(source)

        groups: Dict[str, Dict[str, GroupEntry]] = {}
        for block in TagScanner(registration_groups).find_all('Group'):
            try:
                top_prefix, group_code, entry = self.parse_group(block)
                self._store(groups, top_prefix, group_code, entry)
            except GroupSkipped as e:
                logger.warning("%s: %s", source, e)
                self.skipped.append(e)

        return RangeTable(groups, source, serial, date)

    def parse_group(self, block: str) -> Tuple[str, str, GroupEntry]:
        scanner = TagScanner(block)

        prefix_text = scanner.find('Prefix')
        if prefix_text is None:
            raise GroupSkipped("no Prefix element")
        prefix_text = prefix_text.strip()

        split = split_prefix(prefix_text)
        if split is None:
            raise GroupSkipped("prefix does not end in a group code", prefix_text)
        top_prefix, group_code = split

        agency = scanner.find('Agency')
        if agency is None:
            raise GroupSkipped("no Agency element", prefix_text)
        # labels can carry trailing padding
        agency = unescape(agency).strip()
        if not agency:
            raise GroupSkipped("empty Agency", prefix_text)

        ranges = []
        for rule in scanner.find_all('Rule'):
            publisher_range = self.parse_rule(rule, prefix_text)
            if publisher_range is not None:
                ranges.append(publisher_range)

        return top_prefix, group_code, GroupEntry(agency, tuple(ranges))

    def parse_rule(self, block: str, prefix_text: Optional[str] = None) -> Optional[Range]:
        """
        Read one Rule as a Range truncated to the rule's Length.

        Returns None for a zero-length rule, which only marks numbers that are
        not assigned to anyone yet.
        """
        scanner = TagScanner(block)
        length_text = scanner.find('Length')
        if length_text is None:
            raise GroupSkipped("Rule without Length", prefix_text)

        try:
            length = int(length_text.strip())
        except ValueError:
            raise GroupSkipped(f"rule length {length_text!r} is not a number", prefix_text) from None

        if length == 0:
            return None
        if length < 0:
            raise GroupSkipped(f"negative rule length {length}", prefix_text)

        range_text = scanner.find('Range')
        if range_text is None:
            raise GroupSkipped("Rule without Range", prefix_text)

        low, separator, high = range_text.strip().partition('-')
        if not separator:
            raise GroupSkipped(f"rule range {range_text!r} has no separator", prefix_text)

        low = low.strip()[:length]
        high = high.strip()[:length]
        if len(low) != length or len(high) != length:
            raise GroupSkipped(f"rule range {range_text!r} is shorter than length {length}", prefix_text)
        if not (GROUP_CODE_PATTERN.fullmatch(low) and GROUP_CODE_PATTERN.fullmatch(high)):
            raise GroupSkipped(f"rule range {range_text!r} is not numeric", prefix_text)
        if low > high:
            raise GroupSkipped(f"rule range {range_text!r} is reversed", prefix_text)

        return Range(low, high)

    def _store(self, groups: Dict[str, Dict[str, GroupEntry]], top_prefix: str,
               group_code: str, entry: GroupEntry) -> None:
        group_map = groups.setdefault(top_prefix, {})

        # Group codes must stay prefix-free; an exact repeat replaces the earlier entry.
        for existing in group_map:
            if existing != group_code and (existing.startswith(group_code) or group_code.startswith(existing)):
                raise GroupSkipped(
                    f"group code collides with {join_prefix(top_prefix, existing)}",
                    join_prefix(top_prefix, group_code),
                )

        if group_code in group_map:
            logger.info("Replacing duplicate group %s", join_prefix(top_prefix, group_code))
        group_map[group_code] = entry

    @staticmethod
    def _extract_field(scanner: TagScanner, tag: str) -> Optional[str]:
        value = scanner.find(tag)
        if value is None:
            return None
        return value.strip() or None

def parse_range_message(path: Union[str, Path]) -> RangeTable:
    """Convenience wrapper around RangeMessageParser.parse_file."""
    return RangeMessageParser().parse_file(path)


import tempfile
import unittest

from range_fixtures import DATE, SERIAL, STANDARD_MESSAGE, group_xml, range_message

class TestTagScanner(unittest.TestCase):
    def test_find_first_element(self):
        scanner = TagScanner("<a><b>one</b><b>two</b></a>")
        self.assertEqual(scanner.find('b'), 'one')
        self.assertIsNone(scanner.find('c'))

    def test_find_all_spans_lines(self):
        scanner = TagScanner("<Rule>\n<Length>1</Length>\n</Rule><Rule><Length>2</Length></Rule>")
        self.assertEqual(len(scanner.find_all('Rule')), 2)

    def test_tag_names_match_exactly(self):
        """<Rules> is not a <Rule>, and attributes are allowed"""
        scanner = TagScanner('<Rules><Rule kind="x">r</Rule></Rules>')
        self.assertEqual(scanner.find_all('Rule'), ['r'])
        self.assertEqual(scanner.find('Rules'), '<Rule kind="x">r</Rule>')

class TestRangeMessageParser(unittest.TestCase):
    def setUp(self):
        self.parser = RangeMessageParser()

    def test_metadata(self):
        table = self.parser.parse_text(STANDARD_MESSAGE, source='RangeMessage.xml')
        self.assertEqual(table.source, 'RangeMessage.xml')
        self.assertEqual(table.serial, SERIAL)
        self.assertEqual(table.date, DATE)

    def test_metadata_is_optional(self):
        table = self.parser.parse_text(range_message(group_xml('978-2', 'French language', []), serial=None, date=None))
        self.assertIsNone(table.serial)
        self.assertIsNone(table.date)
        self.assertEqual(table.agency_name('978', '2'), 'French language')

    def test_missing_registration_groups(self):
        text = range_message(group_xml('978-2', 'French language', []), registration_groups=False)
        with self.assertRaises(StructureError):
            self.parser.parse_text(text)

    def test_empty_registration_groups(self):
        table = self.parser.parse_text(range_message(''))
        self.assertEqual(len(table), 0)

    def test_groups(self):
        table = self.parser.parse_text(STANDARD_MESSAGE)
        self.assertEqual(table.group_codes('978'), ['0', '2', '953', '99902'])
        self.assertEqual(table.group_codes('979'), ['12'])
        self.assertEqual(table.agency_name('978', '0'), 'English language')
        self.assertEqual(self.parser.skipped, [])

    def test_top_level_prefix_section_is_ignored(self):
        """The EAN.UCC Prefix 978 outside RegistrationGroups is not a group"""
        table = self.parser.parse_text(STANDARD_MESSAGE)
        self.assertIsNone(table.agency_name('978', '978'))

    def test_979_prefix(self):
        table = self.parser.parse_text(range_message(group_xml('979-12', 'Italy', [])))
        self.assertEqual(table.agency_name('979', '12'), 'Italy')
        self.assertIsNone(table.agency_name('978', '12'))

    def test_bare_prefix_defaults_to_978(self):
        table = self.parser.parse_text(range_message(group_xml('05', 'Somewhere', [])))
        self.assertEqual(table.agency_name('978', '05'), 'Somewhere')
        self.assertEqual(table.prefixes(), ['978'])

    def test_agency_is_trimmed(self):
        table = self.parser.parse_text(STANDARD_MESSAGE)
        self.assertEqual(table.agency_name('978', '953'), 'Croatia')

    def test_agency_entities_are_unescaped(self):
        table = self.parser.parse_text(range_message(group_xml('978-976', 'Caribbean Community &amp; Co', [])))
        self.assertEqual(table.agency_name('978', '976'), 'Caribbean Community & Co')

    def test_bounds_are_truncated_to_length(self):
        table = self.parser.parse_text(range_message(group_xml('978-2', 'French language', [('0000000-0000999', '2')])))
        self.assertEqual(table.publisher_ranges('978', '2'), (Range('00', '00'),))

    def test_ranges_keep_document_order(self):
        table = self.parser.parse_text(STANDARD_MESSAGE)
        self.assertEqual(table.publisher_ranges('978', '0'), (
            Range('00', '19'),
            Range('200', '227'),
            Range('2280', '2289'),
            Range('229', '647'),
            Range('6480000', '6489999'),
        ))

    def test_zero_length_rules_are_dropped(self):
        table = self.parser.parse_text(STANDARD_MESSAGE)
        self.assertEqual(table.publisher_ranges('979', '12'), (Range('200', '299'), Range('5450', '5999')))

    def test_only_zero_length_rules_gives_no_ranges(self):
        table = self.parser.parse_text(STANDARD_MESSAGE)
        self.assertEqual(table.agency_name('978', '99902'), 'Reserved Agency')
        self.assertEqual(table.publisher_ranges('978', '99902'), ())

    def test_duplicate_group_last_one_wins(self):
        groups = group_xml('978-2', 'French', [('0000000-1999999', '2')]) + \
            group_xml('978-2', 'French language', [('2000000-3499999', '3')])
        table = self.parser.parse_text(range_message(groups))
        self.assertEqual(table.agency_name('978', '2'), 'French language')
        self.assertEqual(table.publisher_ranges('978', '2'), (Range('200', '349'),))
        self.assertEqual(len(table), 1)

    def test_parsed_ranges_are_well_formed(self):
        table = self.parser.parse_text(STANDARD_MESSAGE)
        for prefix, code, entry in table:
            self.assertTrue(entry.agency)
            for publisher_range in entry.ranges:
                self.assertEqual(len(publisher_range.low), len(publisher_range.high))
                self.assertLessEqual(publisher_range.low, publisher_range.high)

class TestSkippedGroups(unittest.TestCase):
    def setUp(self):
        self.parser = RangeMessageParser()
        self.good = group_xml('978-2', 'French language', [('0000000-1999999', '2')])

    def parse_with_bad_group(self, bad_group):
        with self.assertLogs(logger, level='WARNING') as logs:
            table = self.parser.parse_text(range_message(self.good + bad_group))
        self.assertEqual(len(self.parser.skipped), 1)
        self.assertIsInstance(self.parser.skipped[0], GroupSkipped)
        self.assertEqual(len(logs.records), 1)
        self.assertEqual(table.agency_name('978', '2'), 'French language')
        return table

    def test_missing_prefix(self):
        self.parse_with_bad_group("\n    <Group><Agency>Nowhere</Agency></Group>")
        self.assertIsNone(self.parser.skipped[0].prefix)

    def test_non_digit_prefix(self):
        self.parse_with_bad_group(group_xml('978-AB', 'Nowhere', []))
        self.assertEqual(self.parser.skipped[0].prefix, '978-AB')

    def test_missing_agency(self):
        self.parse_with_bad_group("\n    <Group><Prefix>978-3</Prefix></Group>")

    def test_blank_agency(self):
        self.parse_with_bad_group(group_xml('978-3', '   ', []))

    def test_non_numeric_length(self):
        self.parse_with_bad_group(group_xml('978-3', 'German language', [('0000000-0299999', 'two')]))

    def test_rule_without_length(self):
        self.parse_with_bad_group(
            "\n    <Group><Prefix>978-3</Prefix><Agency>German language</Agency>"
            "<Rules><Rule><Range>0000000-0299999</Range></Rule></Rules></Group>"
        )

    def test_zero_length_rule_needs_no_range(self):
        table = self.parser.parse_text(range_message(
            "\n    <Group><Prefix>978-3</Prefix><Agency>German language</Agency>"
            "<Rules><Rule><Length>0</Length></Rule></Rules></Group>"
        ))
        self.assertEqual(self.parser.skipped, [])
        self.assertEqual(table.publisher_ranges('978', '3'), ())

    def test_range_without_separator(self):
        self.parse_with_bad_group(group_xml('978-3', 'German language', [('00000000299999', '2')]))

    def test_range_shorter_than_length(self):
        self.parse_with_bad_group(group_xml('978-3', 'German language', [('0-2', '2')]))

    def test_reversed_range(self):
        self.parse_with_bad_group(group_xml('978-3', 'German language', [('0299999-0000000', '2')]))

    def test_colliding_group_code(self):
        """A group code that starts with an existing one would break group lookup"""
        table = self.parse_with_bad_group(group_xml('978-25', 'Somewhere', []))
        self.assertIsNone(table.agency_name('978', '25'))

    def test_collisions_are_per_prefix(self):
        table = self.parser.parse_text(range_message(self.good + group_xml('979-2', 'Elsewhere', [])))
        self.assertEqual(self.parser.skipped, [])
        self.assertEqual(table.agency_name('979', '2'), 'Elsewhere')

class TestParseFile(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_plain_file(self):
        path = self.dir / 'RangeMessage.xml'
        path.write_text(STANDARD_MESSAGE, encoding='utf-8')
        table = parse_range_message(path)
        self.assertEqual(table.source, str(path))
        self.assertEqual(table.agency_name('979', '12'), 'Italy')

    def test_zstd_file(self):
        plain = self.dir / 'RangeMessage.xml'
        plain.write_text(STANDARD_MESSAGE, encoding='utf-8')
        compressed = self.dir / 'RangeMessage.xml.zst'
        compressed.write_bytes(zstandard.ZstdCompressor().compress(STANDARD_MESSAGE.encode('utf-8')))

        self.assertEqual(parse_range_message(compressed).to_data(), parse_range_message(plain).to_data())

    def test_missing_file(self):
        with self.assertRaises(SourceUnavailable) as context:
            parse_range_message(self.dir / 'missing.xml')
        self.assertIn('missing.xml', str(context.exception))

    def test_not_utf8(self):
        path = self.dir / 'RangeMessage.xml'
        path.write_bytes(b'<RegistrationGroups>\xff\xfe</RegistrationGroups>')
        with self.assertRaises(SourceUnavailable):
            parse_range_message(path)

    def test_corrupt_zstd_file(self):
        path = self.dir / 'RangeMessage.xml.zst'
        path.write_bytes(b'not zstandard data')
        with self.assertRaises(SourceUnavailable):
            parse_range_message(path)

if __name__ == '__main__':
    unittest.main()
