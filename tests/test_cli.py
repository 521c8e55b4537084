"""
asmkit CLI tests: run, repl and help subcommands.
"""
import io
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import asmkit


def _write(tmp_path, text, name="prog.asm"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestRunCommand:

    def test_run_file(self, tmp_path, capsys):
        path = _write(tmp_path, "SET 1 10\nADD\n")
        assert asmkit.main(["run", path]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["[0] [10]", "[10] [10]", "HALT"]

    def test_run_error_exit_code(self, tmp_path, capsys):
        path = _write(tmp_path, "SET 1 10\nJMP 0\n")
        assert asmkit.main(["run", path]) == 1
        captured = capsys.readouterr()
        assert captured.out.splitlines()[-1] == "ERROR: Unknown instruction"
        assert "Line 2: Unknown instruction" in captured.err

    def test_run_trace(self, tmp_path, capsys):
        path = _write(tmp_path, "SET 0 3\n")
        assert asmkit.main(["run", path, "--trace"]) == 0
        out = capsys.readouterr().out
        assert "0000: SET 0 3 -> [3] [0]" in out

    def test_run_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("SET 0 2\n"))
        assert asmkit.main(["run", "-"]) == 0
        assert capsys.readouterr().out.splitlines() == ["[2] [0]", "HALT"]

    def test_missing_file(self, tmp_path, capsys):
        assert asmkit.main(["run", str(tmp_path / "nope.asm")]) == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_log_file(self, tmp_path, capsys):
        path = _write(tmp_path, "SET 0 1\n")
        log_path = tmp_path / "logs" / "asmkit.log"
        assert asmkit.main(["--log-file", str(log_path), "run", path]) == 0
        capsys.readouterr()


class TestReplCommand:

    def test_session(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("SET 1 4\nBOGUS\nADD\nquit\nSET 0 1\n"))
        assert asmkit.main(["repl"]) == 0
        out = capsys.readouterr().out
        assert "[0] [4]" in out
        assert "ERROR: Unknown instruction." in out
        assert "[4] [4]" in out
        assert "[1] [4]" not in out

    def test_eof_ends_session(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("ADD\n"))
        assert asmkit.main(["repl"]) == 0


class TestHelpCommand:

    def test_help(self, capsys):
        assert asmkit.main(["help"]) == 0
        out = capsys.readouterr().out
        assert "# SET: Sets $Rn to integer value i" in out
        assert "# ADD: Sets $R0 = $R0 + $R1" in out

    def test_no_command_prints_usage(self, capsys):
        assert asmkit.main([]) == 0
        assert "usage: asmkit" in capsys.readouterr().out


class TestLogSetup:

    def test_verbosity_levels(self):
        import logging
        from asmvm.log_setup import verbosity_to_level
        assert verbosity_to_level(0) == logging.WARNING
        assert verbosity_to_level(1) == logging.INFO
        assert verbosity_to_level(2) == logging.DEBUG
        assert verbosity_to_level(5) == logging.DEBUG

    def test_setup_is_idempotent_and_writes_file(self, tmp_path):
        import logging
        from asmvm.log_setup import setup_logging
        log_path = tmp_path / "logs" / "test.log"
        logger = setup_logging("asmvm_test_logsetup", log_file=log_path)
        try:
            assert setup_logging("asmvm_test_logsetup") is logger
            assert len(logger.handlers) == 2
            logger.debug("hello from the test")
            for h in logger.handlers:
                h.flush()
            text = log_path.read_text(encoding="utf-8")
            assert "| DEBUG   | asmvm_test_logsetup |" in text
            assert "hello from the test" in text
        finally:
            for h in list(logger.handlers):
                h.close()
                logger.removeHandler(h)
