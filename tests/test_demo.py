import sys
import os
import io
import math
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))
os.environ.setdefault("MPLBACKEND", "Agg")

import demo


class TestReferenceSequence(unittest.TestCase):
    def run_example(self):
        out = io.StringIO()
        with redirect_stdout(out):
            tree = demo.example_1_reference_sequence()
        return tree, out.getvalue()

    def test_final_tree(self):
        tree, _ = self.run_example()
        self.assertEqual(tree.in_order(), [5, 10, 15, 20, 25, 35, 40, 50])
        self.assertTrue(tree.is_balanced())

    def test_progress_output(self):
        _, output = self.run_example()
        self.assertIn("Contains 30: yes", output)
        self.assertIn("Contains 35: no", output)
        self.assertIn("In-order traversal: 10 20 25 40 50", output)
        self.assertIn("Pre-order traversal: 20 10 5 15 40 25 35 50", output)
        self.assertEqual(output.count("AVL tree (h - height, b - balance):"), 3)


class TestHeightGrowth(unittest.TestCase):
    def test_chart_written_and_heights_within_bound(self):
        with tempfile.TemporaryDirectory() as tmp:
            viz_dir = Path(tmp) / "viz"
            with mock.patch.object(demo, "VIZ_DIR", viz_dir), redirect_stdout(io.StringIO()):
                sizes, heights = demo.example_2_height_growth(n=200, step=50)
            self.assertTrue((viz_dir / "height_growth.png").exists())

        self.assertEqual(sizes, [50, 100, 150, 200])
        for name in ("ascending", "shuffled"):
            self.assertEqual(len(heights[name]), len(sizes))
            for n, h in zip(sizes, heights[name]):
                self.assertLessEqual(h, 1.44 * math.log2(n + 2))


if __name__ == '__main__':
    unittest.main()
