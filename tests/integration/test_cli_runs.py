"""
End-to-end runs of the command-line front end
"""

import tempfile
import unittest
from pathlib import Path

from tour_ga import cli


class TestCommandLine(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.output = self.root / "graph.dot"

    def tearDown(self):
        self.tmp.cleanup()

    def test_auto_mode_writes_graph(self):
        code = cli.main([
            "auto", "--cities", "6", "--population", "5", "--generations", "3",
            "--seed", "1", "--output", str(self.output),
        ])
        self.assertEqual(code, 0)
        text = self.output.read_text()
        self.assertTrue(text.startswith("digraph {"))
        self.assertEqual(text.count("->"), 5)
        self.assertEqual(text.count("pos = "), 6)

    def test_map_mode(self):
        map_path = self.root / "map.txt"
        map_path.write_text("4\n0 0\n3 0\n3 4\n0 4\n")
        code = cli.main([
            "map", str(map_path), "--population", "4", "--generations", "5",
            "--seed", "3", "--output", str(self.output),
        ])
        self.assertEqual(code, 0)
        self.assertEqual(self.output.read_text().count("->"), 3)

    def test_missing_map_fails_cleanly(self):
        code = cli.main(["map", str(self.root / "missing.txt"), "--output", str(self.output)])
        self.assertEqual(code, 2)
        self.assertFalse(self.output.exists())

    def test_binary_map_fails_cleanly(self):
        map_path = self.root / "map.txt"
        map_path.write_bytes(b"\xff\xfe 3 0 0")
        code = cli.main(["map", str(map_path), "--output", str(self.output)])
        self.assertEqual(code, 2)
        self.assertFalse(self.output.exists())

    def test_malformed_tsplib_fails_cleanly(self):
        map_path = self.root / "m.tsp"
        map_path.write_text(
            "NAME: m\nTYPE: TSP\nDIMENSION: abc\nEDGE_WEIGHT_TYPE: EUC_2D\n"
            "NODE_COORD_SECTION\n1 0 0\nEOF\n"
        )
        code = cli.main(["map", str(map_path), "--output", str(self.output)])
        self.assertEqual(code, 2)

    def test_unwritable_output_reports_error(self):
        output = self.root / "no_such_dir" / "graph.dot"
        code = cli.main([
            "auto", "--cities", "4", "--population", "4", "--generations", "1",
            "--seed", "2", "--output", str(output),
        ])
        self.assertEqual(code, 1)
        self.assertFalse(output.exists())

    def test_bad_population_fails_cleanly(self):
        code = cli.main(["auto", "--population", "1", "--output", str(self.output)])
        self.assertEqual(code, 2)

    def test_single_city_map_fails_cleanly(self):
        map_path = self.root / "one.txt"
        map_path.write_text("1 5 5")
        code = cli.main(["map", str(map_path), "--output", str(self.output)])
        self.assertEqual(code, 2)


if __name__ == "__main__":
    unittest.main()
