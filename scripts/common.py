import io
import logging
from pathlib import Path
import re
from typing import Optional, Tuple
from rich.logging import RichHandler
import zstandard

PREFIXES = ('978', '979')

GROUP_CODE_PATTERN = re.compile(r'[0-9]+')

def normalize_isbn(isbn: str, dashes=False) -> str:
    """
    Normalize ISBN by replacing 978- with 0 and 979- with 1
    """
    if isbn.startswith('978-'):
        isbn = '0' + isbn[4:]
    elif isbn.startswith('979-'):
        isbn = '1' + isbn[4:]

    if not dashes:
        isbn = isbn.replace('-', '')
    return isbn

def split_prefix(token: str) -> Optional[Tuple[str, str]]:
    """
    Split a RangeMessage group prefix into (top-level prefix, group code).

    '979-12' -> ('979', '12'), '978-0' -> ('978', '0'), bare '05' -> ('978', '05').
    Returns None if what remains after the marker is not a run of digits.
    """
    token = token.strip()
    top_prefix = '978'
    if token[:4] == '979-':
        top_prefix = '979'
        token = token[4:]
    elif token[:4] == '978-':
        token = token[4:]

    if not GROUP_CODE_PATTERN.fullmatch(token):
        return None
    return top_prefix, token

def join_prefix(top_prefix: str, group_code: str) -> str:
    return f"{top_prefix}-{group_code}"

def read_text(path: Path) -> str:
    """Read a UTF-8 text file, decompressing it first if the name ends in .zst"""
    if path.suffix == '.zst':
        with open(path, 'rb') as fh:
            dctx = zstandard.ZstdDecompressor()
            stream_reader = dctx.stream_reader(fh)
            text_stream = io.TextIOWrapper(stream_reader, encoding='utf-8')
            return text_stream.read()

    with open(path, 'r', encoding='utf-8') as f:
        return f.read()

def setup_logging(level=logging.INFO) -> None:
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[RichHandler()])


import tempfile
import unittest

class TestPrefixes(unittest.TestCase):
    def test_normalize_isbn(self):
        self.assertEqual(normalize_isbn('978-2'), '02')
        self.assertEqual(normalize_isbn('979-12'), '112')
        self.assertEqual(normalize_isbn('979-12-200', dashes=True), '112-200')

    def test_split_979(self):
        self.assertEqual(split_prefix('979-12'), ('979', '12'))

    def test_split_978(self):
        self.assertEqual(split_prefix('978-0'), ('978', '0'))

    def test_split_bare(self):
        """A prefix without a marker belongs to 978"""
        self.assertEqual(split_prefix('05'), ('978', '05'))
        self.assertEqual(split_prefix(' 99902 '), ('978', '99902'))

    def test_split_rejects_non_digits(self):
        self.assertIsNone(split_prefix('979-'))
        self.assertIsNone(split_prefix('97-5'))
        self.assertIsNone(split_prefix('978-1-2'))
        self.assertIsNone(split_prefix(''))

    def test_join_prefix(self):
        self.assertEqual(join_prefix('979', '12'), '979-12')

class TestReadText(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_plain(self):
        path = self.dir / 'RangeMessage.xml'
        path.write_text('<Agency>Curaçao</Agency>', encoding='utf-8')
        self.assertEqual(read_text(path), '<Agency>Curaçao</Agency>')

    def test_zstd(self):
        path = self.dir / 'RangeMessage.xml.zst'
        path.write_bytes(zstandard.ZstdCompressor().compress('<Agency>Curaçao</Agency>'.encode('utf-8')))
        self.assertEqual(read_text(path), '<Agency>Curaçao</Agency>')

if __name__ == '__main__':
    unittest.main()
