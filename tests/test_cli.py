import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from txgraph.cli import main as cli


FIXTURE = {
    "addresses": {
        "X": {"address": "X", "txs": 1, "txids": ["t1"]},
        "Y": {"address": "Y", "txs": 0},
    },
    "transactions": {
        "t1": {"txid": "t1", "value": "7", "vout": [{"value": "7", "addresses": ["Y"]}]},
    },
}


class CliTests(unittest.TestCase):
    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = cli.main(argv + ["--error-display-sec", "0"])
        return code, out.getvalue(), err.getvalue()

    def test_fixture_run_writes_outputs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fixture = Path(tmp) / "fixture.json"
            fixture.write_text(json.dumps(FIXTURE), encoding="utf-8")
            out_dir = Path(tmp) / "out"

            code, out, _ = self._run([
                "--fixture", str(fixture), "--address", "X", "--depth", "2", "--out", str(out_dir),
            ])

            self.assertEqual(code, 0)
            self.assertTrue((out_dir / "track_X.json").exists())
            self.assertTrue((out_dir / "graph.json").exists())
            self.assertTrue((out_dir / "summary.md").exists())
            self.assertIn("2 nodes • 1 links", out)

    def test_missing_address_exits_2(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fixture = Path(tmp) / "fixture.json"
            fixture.write_text(json.dumps(FIXTURE), encoding="utf-8")

            code, _, err = self._run(["--fixture", str(fixture), "--depth", "2"])

        self.assertEqual(code, 2)
        self.assertIn("Missing parameter(s)", err)

    def test_unknown_address_exits_1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            fixture = Path(tmp) / "fixture.json"
            fixture.write_text(json.dumps(FIXTURE), encoding="utf-8")

            code, _, err = self._run(["--fixture", str(fixture), "--address", "Q", "--depth", "1"])

        self.assertEqual(code, 1)
        self.assertIn("not a Bitcoin wallet", err)


if __name__ == "__main__":
    unittest.main()
