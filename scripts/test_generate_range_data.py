from contextlib import redirect_stderr
import io
from pathlib import Path
import tempfile
import unittest

import range_data
from generate_range_data import process_data, render_module
from range_fixtures import SERIAL, STANDARD_MESSAGE
from range_message import RangeMessageParser
from range_source import built_in_range_table
from range_table import RangeTable

def load_module_text(text: str) -> dict:
    namespace = {}
    exec(compile(text, 'range_data.py', 'exec'), namespace)
    return namespace

class TestRenderModule(unittest.TestCase):
    def test_parsed_table_survives_rendering(self):
        table = RangeMessageParser().parse_text(STANDARD_MESSAGE)
        module = load_module_text(render_module(table))

        self.assertEqual(module['SERIAL'], SERIAL)
        self.assertEqual(module['DATE'], table.date)
        rebuilt = RangeTable.from_data(module['RANGE_DATA'], source='built-in')
        self.assertEqual(rebuilt.to_data(), table.to_data())

    def test_rendering_is_quiet(self):
        """Rendering a few hundred groups prints no progress output"""
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            render_module(built_in_range_table())
        self.assertEqual(stderr.getvalue(), '')

    def test_built_in_data_is_current(self):
        """range_data.py is exactly what the generator writes for its own data"""
        with open(range_data.__file__, encoding='utf-8') as f:
            self.assertEqual(render_module(built_in_range_table()), f.read())

class TestProcessData(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_writes_module(self):
        input_path = self.dir / 'RangeMessage.xml'
        input_path.write_text(STANDARD_MESSAGE, encoding='utf-8')
        output_path = self.dir / 'range_data.py'

        process_data(input_path, output_path)

        module = load_module_text(output_path.read_text(encoding='utf-8'))
        self.assertEqual(module['RANGE_DATA']['979']['12'], ('Italy', [('200', '299'), ('5450', '5999')]))
        self.assertEqual(module['RANGE_DATA']['978']['99902'], ('Reserved Agency', []))

if __name__ == '__main__':
    unittest.main()
