'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr:

'''

import csv
import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from ndcube.launcher_scripts.launch_solve import run_experiment, SUMMARY_HEADER
from ndcube.solvers.local_search import SearchConfig


class TestRunExperiment(unittest.TestCase):

    def test_summary_and_trace_logs(self):
        cfg = SearchConfig(max_iterations=50)
        with tempfile.TemporaryDirectory() as tmp:
            with redirect_stdout(io.StringIO()):
                results = run_experiment(3, 2, 3, cfg, seed=1, exp_dir=tmp, trace_logs=True)
            with open(os.path.join(tmp, "summary.csv"), newline="") as f:
                rows = list(csv.reader(f))
            traces = sorted(n for n in os.listdir(tmp) if n.startswith("trace_"))

        self.assertEqual(len(results), 3)
        self.assertEqual(rows[0], SUMMARY_HEADER)
        self.assertEqual(len(rows), 4)
        for row, result in zip(rows[1:], results):
            self.assertEqual(int(row[3]), int(result.solved))
            self.assertEqual(int(row[4]), result.num_moves)
            self.assertLessEqual(int(row[5]), 50)
        self.assertEqual(traces, ["trace_0.csv", "trace_1.csv", "trace_2.csv"])
        # the shared config is left untouched
        self.assertIsNone(cfg.log_path)


if __name__ == "__main__":
    unittest.main()
