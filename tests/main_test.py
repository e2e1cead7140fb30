import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock

from ghl.__main__ import exit_status, main


class MainTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def write(self, source, name="prog.ghl"):
        path = os.path.join(self.tmp.name, name)
        with open(path, "w") as f:
            f.write(source)
        return path

    def call(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            status = main(list(argv) + ["--no-color"])
        return status, out.getvalue(), err.getvalue()

    def test_result_is_exit_status(self):
        path = self.write("let x: int = 1 + 2;\nexit(x);\n")
        self.assertEqual(self.call(path), (3, "", ""))

    def test_input_option(self):
        path = self.write("exit(2 + 3 * 4);")
        self.assertEqual(self.call("-i", path)[0], 20)

    def test_status_is_low_byte(self):
        self.assertEqual(exit_status(300), 44)
        self.assertEqual(exit_status(-1), 255)
        path = self.write("exit(300);")
        self.assertEqual(self.call(path, "--print-result"), (44, "300\n", ""))

    def test_stdin(self):
        with mock.patch("sys.stdin", io.StringIO("exit(7);")):
            self.assertEqual(self.call("-")[0], 7)

    def test_lex_error_diagnostic(self):
        path = self.write("let x: int = 2 & 3;")
        status, out, err = self.call(path)
        self.assertEqual(status, 1)
        self.assertEqual(err, f"{path}:1:16: error: LexError(UnrecognizedCharacter): illegal character '&'\n")

    def test_syntax_error_diagnostic(self):
        path = self.write("exit(2 +);")
        status, _, err = self.call(path)
        self.assertEqual(status, 1)
        self.assertEqual(err, f"{path}:1:9: error: SyntaxError(UnexpectedToken): unexpected token ')'\n")

    def test_type_mismatch_diagnostic(self):
        path = self.write("let x: bool = 5;")
        status, _, err = self.call(path)
        self.assertEqual(status, 1)
        self.assertEqual(err, f"{path}:1:5: error: TypeMismatch: "
                              "Variable 'x': assigned value of wrong type (expected bool, got int)\n")

    def test_stdin_diagnostic_name(self):
        with mock.patch("sys.stdin", io.StringIO("exit(y);")):
            status, _, err = self.call("-")
        self.assertEqual(status, 1)
        self.assertTrue(err.startswith("<stdin>:1:6: error: NameError(UndeclaredUse): "))

    def test_strict_bindings_flag(self):
        path = self.write("let x: int = 1; let x: int = 2; exit(x);")
        self.assertEqual(self.call(path)[0], 2)
        status, _, err = self.call(path, "--strict-bindings")
        self.assertEqual(status, 1)
        self.assertIn("NameError(DuplicateBinding)", err)

    def test_dump_flags(self):
        path = self.write("exit(5);")
        tokens_out = os.path.join(self.tmp.name, "toks")
        ast_out = os.path.join(self.tmp.name, "ast")
        status = self.call(path, "--dump-tokens", "--tokens-out", tokens_out, "--dump-ast", "--ast-out", ast_out)[0]
        self.assertEqual(status, 5)
        with open(ast_out) as f:
            self.assertEqual(f.read(), "Program\n  Exit\n    Number 5\n")
        with open(tokens_out) as f:
            self.assertEqual(len(f.read().splitlines()), 6)

    def test_missing_file(self):
        missing = os.path.join(self.tmp.name, "nope.ghl")
        status, _, err = self.call(missing)
        self.assertEqual(status, 1)
        self.assertTrue(err.startswith(f"error: '{missing}' could not be opened"))

    def test_internal_error(self):
        path = self.write("exit(1);")
        with mock.patch("ghl.__main__.execute", side_effect=RuntimeError("boom")):
            status, _, err = self.call(path)
        self.assertEqual(status, 2)
        self.assertEqual(err, "[internal] error: unknown error: 'RuntimeError: boom'\n")

    def test_positional_and_input_option_conflict(self):
        path = self.write("exit(1);")
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main([path, "-i", path])

    def test_no_input(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main([])


if __name__ == '__main__':
    unittest.main()
