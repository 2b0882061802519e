"""
Pick the RangeMessage document to load and publish the resulting range table.

Candidates, the first one that exists is used:

1. the file named by the ISBN_RANGE_MESSAGE environment variable
2. RangeMessage.xml next to range_data.py
3. RangeMessage.xml in the current directory

If none exists, or the chosen one cannot be read or has no RegistrationGroups,
the built-in data from range_data.py is used. Lower-priority candidates are
not tried once a parse has failed.
"""

import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional
import warnings

import range_data
from range_errors import ConfigurationWarning, SourceUnavailable, StructureError
from range_message import RangeMessageParser
from range_table import RangeTable

logger = logging.getLogger(__name__)

ENV_VAR = 'ISBN_RANGE_MESSAGE'
RANGE_MESSAGE_FILENAME = 'RangeMessage.xml'
BUILT_IN_SOURCE = 'built-in'

DATA_DIR = Path(range_data.__file__).resolve().parent

_range_table: Optional[RangeTable] = None

def built_in_range_table() -> RangeTable:
    return RangeTable.from_data(
        range_data.RANGE_DATA,
        source=BUILT_IN_SOURCE,
        serial=range_data.SERIAL,
        date=range_data.DATE,
    )

def candidate_paths(environ: Optional[Mapping[str, str]] = None,
                    data_dir: Optional[Path] = None,
                    cwd: Optional[Path] = None,
                    stacklevel: int = 1) -> List[Path]:
    """Return the candidate documents that exist, highest priority first.

    A set but missing override is reported with a ConfigurationWarning.
    `stacklevel` is counted from the caller of this function, as in
    warnings.warn, so the warning points at the code that asked for the table.
    """
    if environ is None:
        environ = os.environ
    data_dir = DATA_DIR if data_dir is None else Path(data_dir)
    cwd = Path.cwd() if cwd is None else Path(cwd)

    candidates = []

    override = environ.get(ENV_VAR)
    if override is not None:
        # Path('') is the current directory, which always exists
        if override and Path(override).exists():
            candidates.append(Path(override))
        else:
            warnings.warn(
                f"{ENV_VAR} is set to [{override}] but that file does not exist! "
                "Trying to use the default locations",
                ConfigurationWarning,
                stacklevel=stacklevel + 1,
            )

    for path in (data_dir / RANGE_MESSAGE_FILENAME, cwd / RANGE_MESSAGE_FILENAME):
        if path.exists():
            candidates.append(path)

    return candidates

def load_range_table(environ: Optional[Mapping[str, str]] = None,
                     data_dir: Optional[Path] = None,
                     cwd: Optional[Path] = None,
                     stacklevel: int = 1) -> RangeTable:
    """Build a range table from the first existing candidate, or the built-in data.

    Never raises for missing or broken documents.
    """
    candidates = candidate_paths(environ, data_dir, cwd, stacklevel=stacklevel + 1)
    if not candidates:
        logger.info("No %s found, using built-in ISBN range data", RANGE_MESSAGE_FILENAME)
        return built_in_range_table()

    path = candidates[0]
    try:
        table = RangeMessageParser().parse_file(path)
    except (SourceUnavailable, StructureError) as e:
        logger.warning("%s, using built-in ISBN range data", e)
        return built_in_range_table()

    if not len(table):
        logger.warning("%s has no usable registration groups, using built-in ISBN range data", path)
        return built_in_range_table()

    logger.info("Loaded %d ISBN registration groups from %s", len(table), path)
    return table

def init_range_table(environ: Optional[Mapping[str, str]] = None,
                     data_dir: Optional[Path] = None,
                     cwd: Optional[Path] = None,
                     stacklevel: int = 1) -> RangeTable:
    """
    Build the range table and publish it as the process-wide table.

    Calling it again builds a new table and swaps it in; tables already handed
    out are left as they are.
    """
    global _range_table
    table = load_range_table(environ, data_dir, cwd, stacklevel=stacklevel + 1)
    _range_table = table
    return table

def get_range_table() -> RangeTable:
    table = _range_table
    if table is None:
        table = init_range_table(stacklevel=2)
    return table


import inspect
import tempfile
import unittest
from unittest import mock

from range_fixtures import STANDARD_MESSAGE, group_xml, range_message

BROKEN_MESSAGE = range_message(group_xml('978-2', 'French language', []), registration_groups=False)

class TestSourceResolution(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        root = Path(self.tmpdir.name)
        self.override_dir = root / 'override'
        self.data_dir = root / 'data'
        self.cwd = root / 'cwd'
        for directory in (self.override_dir, self.data_dir, self.cwd):
            directory.mkdir()

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, directory: Path, text: str, name: str = RANGE_MESSAGE_FILENAME) -> Path:
        path = directory / name
        path.write_text(text, encoding='utf-8')
        return path

    def load(self, environ=None):
        return load_range_table(environ=environ or {}, data_dir=self.data_dir, cwd=self.cwd)

    def test_no_documents_uses_built_in(self):
        table = self.load()
        self.assertEqual(table.source, BUILT_IN_SOURCE)
        self.assertEqual(table.agency_name('978', '2'), 'French language')

    def test_override_wins(self):
        override = self.write(self.override_dir, STANDARD_MESSAGE, 'custom.xml')
        self.write(self.data_dir, STANDARD_MESSAGE)
        self.write(self.cwd, STANDARD_MESSAGE)

        table = self.load({ENV_VAR: str(override)})
        self.assertEqual(table.source, str(override))

    def test_data_dir_before_cwd(self):
        data_path = self.write(self.data_dir, STANDARD_MESSAGE)
        self.write(self.cwd, STANDARD_MESSAGE)

        self.assertEqual(self.load().source, str(data_path))

    def test_cwd(self):
        cwd_path = self.write(self.cwd, STANDARD_MESSAGE)
        self.assertEqual(self.load().source, str(cwd_path))

    def test_missing_override_warns_and_falls_through(self):
        data_path = self.write(self.data_dir, STANDARD_MESSAGE)
        missing = self.override_dir / 'missing.xml'

        with self.assertWarns(ConfigurationWarning) as context:
            table = self.load({ENV_VAR: str(missing)})

        self.assertIn(str(missing), str(context.warning))
        self.assertEqual(table.source, str(data_path))

    def test_missing_override_and_nothing_else(self):
        with self.assertWarns(ConfigurationWarning):
            table = self.load({ENV_VAR: str(self.override_dir / 'missing.xml')})
        self.assertEqual(table.source, BUILT_IN_SOURCE)

    def test_empty_override_warns(self):
        """An empty override warns and adds no candidate of its own"""
        cwd_path = self.write(self.cwd, STANDARD_MESSAGE)

        with self.assertWarns(ConfigurationWarning) as context:
            table = self.load({ENV_VAR: ''})

        self.assertIn(f"{ENV_VAR} is set to []", str(context.warning))
        self.assertEqual(table.source, str(cwd_path))

        with self.assertWarns(ConfigurationWarning):
            candidates = candidate_paths({ENV_VAR: ''}, data_dir=self.data_dir, cwd=self.cwd)
        self.assertEqual(candidates, [cwd_path])

    def test_candidate_order(self):
        override = self.write(self.override_dir, STANDARD_MESSAGE, 'custom.xml')
        data_path = self.write(self.data_dir, STANDARD_MESSAGE)
        cwd_path = self.write(self.cwd, STANDARD_MESSAGE)

        candidates = candidate_paths({ENV_VAR: str(override)}, data_dir=self.data_dir, cwd=self.cwd)
        self.assertEqual(candidates, [override, data_path, cwd_path])

    def test_broken_document_skips_lower_candidates(self):
        """A parse failure goes straight to the built-in data, not to the next file"""
        self.write(self.data_dir, BROKEN_MESSAGE)
        self.write(self.cwd, STANDARD_MESSAGE)

        with self.assertLogs(logger, level='WARNING'):
            table = self.load()
        self.assertEqual(table.source, BUILT_IN_SOURCE)

    def test_broken_override_skips_lower_candidates(self):
        override = self.write(self.override_dir, BROKEN_MESSAGE, 'custom.xml')
        self.write(self.data_dir, STANDARD_MESSAGE)

        with self.assertLogs(logger, level='WARNING'):
            table = self.load({ENV_VAR: str(override)})
        self.assertEqual(table.source, BUILT_IN_SOURCE)

    def test_unreadable_document(self):
        (self.cwd / RANGE_MESSAGE_FILENAME).mkdir()

        with self.assertLogs(logger, level='WARNING'):
            table = self.load()
        self.assertEqual(table.source, BUILT_IN_SOURCE)

    def test_document_without_groups(self):
        self.write(self.cwd, range_message(''))

        with self.assertLogs(logger, level='WARNING'):
            table = self.load()
        self.assertEqual(table.source, BUILT_IN_SOURCE)

    def test_partially_malformed_document_is_used(self):
        text = range_message(group_xml('978-2', 'French language', []) + group_xml('978-AB', 'Nowhere', []))
        cwd_path = self.write(self.cwd, text)

        with self.assertLogs('range_message', level='WARNING'):
            table = self.load()
        self.assertEqual(table.source, str(cwd_path))
        self.assertEqual(len(table), 1)

class TestOverrideWarningLocation(unittest.TestCase):
    """The missing override warning points at the line that asked for the table"""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)
        self.environ = {ENV_VAR: str(self.dir / 'missing.xml')}

    def tearDown(self):
        global _range_table
        _range_table = None
        self.tmpdir.cleanup()

    def assertWarnedHere(self, context, lineno):
        self.assertEqual(context.filename, inspect.currentframe().f_code.co_filename)
        self.assertEqual(context.lineno, lineno)

    def test_candidate_paths(self):
        with self.assertWarns(ConfigurationWarning) as context:
            lineno = inspect.currentframe().f_lineno + 1
            candidate_paths(self.environ, data_dir=self.dir, cwd=self.dir)
        self.assertWarnedHere(context, lineno)

    def test_load_range_table(self):
        with self.assertWarns(ConfigurationWarning) as context:
            lineno = inspect.currentframe().f_lineno + 1
            load_range_table(self.environ, data_dir=self.dir, cwd=self.dir)
        self.assertWarnedHere(context, lineno)

    def test_init_range_table(self):
        with self.assertWarns(ConfigurationWarning) as context:
            lineno = inspect.currentframe().f_lineno + 1
            init_range_table(self.environ, data_dir=self.dir, cwd=self.dir)
        self.assertWarnedHere(context, lineno)

    def test_get_range_table(self):
        global _range_table
        _range_table = None
        with mock.patch.dict(os.environ, self.environ):
            with self.assertWarns(ConfigurationWarning) as context:
                lineno = inspect.currentframe().f_lineno + 1
                get_range_table()
        self.assertWarnedHere(context, lineno)

class TestPublishedTable(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)

    def tearDown(self):
        global _range_table
        _range_table = None
        self.tmpdir.cleanup()

    def test_init_publishes(self):
        table = init_range_table(environ={}, data_dir=self.dir, cwd=self.dir)
        self.assertIs(get_range_table(), table)
        self.assertIs(get_range_table(), table)

    def test_init_again_swaps(self):
        first = init_range_table(environ={}, data_dir=self.dir, cwd=self.dir)

        path = self.dir / RANGE_MESSAGE_FILENAME
        path.write_text(STANDARD_MESSAGE, encoding='utf-8')
        second = init_range_table(environ={}, data_dir=self.dir, cwd=self.dir)

        self.assertIsNot(first, second)
        self.assertIs(get_range_table(), second)
        self.assertEqual(first.source, BUILT_IN_SOURCE)
        self.assertEqual(second.source, str(path))

if __name__ == '__main__':
    unittest.main()
