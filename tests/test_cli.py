"""Tests for the compiler command line."""
import pytest

from jurisdiction.compiler import load_module, main


class TestCompilerCli:
    def test_compile_then_check(self, write_feed, sample_rows, tmp_path):
        feed = write_feed(sample_rows)
        output = str(tmp_path / "generated.py")

        main(["--input", feed, "--output", output])
        module = load_module(output)
        assert [code.value for code in module.Alpha2] == ["NO", "GG", "AQ"]

        main(["--input", feed, "--output", output, "--check", "--cross-check"])

    def test_check_detects_stale_module(self, write_feed, sample_rows, tmp_path):
        output = str(tmp_path / "generated.py")
        main(["--input", write_feed(sample_rows), "--output", output])

        sample_rows[0]["name"] = "Kingdom of Norway"
        stale_feed = write_feed(sample_rows, filename="changed.csv")
        with pytest.raises(SystemExit) as excinfo:
            main(["--input", stale_feed, "--output", output, "--check"])
        assert excinfo.value.code == 1

    def test_invalid_feed_exits(self, write_feed, sample_rows, tmp_path):
        sample_rows[1]["country_code"] = sample_rows[0]["country_code"]
        output = tmp_path / "generated.py"
        with pytest.raises(SystemExit) as excinfo:
            main(["--input", write_feed(sample_rows), "--output", str(output)])
        assert excinfo.value.code == 1
        assert not output.exists()

    def test_missing_feed_exits(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["--input", str(tmp_path / "missing.csv"), "--output", str(tmp_path / "g.py")])
        assert excinfo.value.code == 1
