from __future__ import annotations

import unittest

try:
    from typer.testing import CliRunner

    import cli
    from dbnum import convert
except ModuleNotFoundError as exc:  # pragma: no cover - env-dependent
    CliRunner = None  # type: ignore[assignment]
    convert = None  # type: ignore[assignment]
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


@unittest.skipIf(convert is None, f"Missing dependency: {_IMPORT_ERROR}")
class ConvertCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_table_lists_every_style(self) -> None:
        result = self.runner.invoke(convert.app, ["1005"])
        self.assertEqual(result.exit_code, 0, result.output)
        for expected in ("[DBNum1]", "[DBNum4]", "一千〇五", "壹仟零伍", "一〇〇五", "１００５"):
            self.assertIn(expected, result.output)

    def test_single_style(self) -> None:
        result = self.runner.invoke(convert.app, ["-s", "dbnum1", "10010"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("一万〇一十", result.output)
        self.assertNotIn("[warn]", result.output)

    def test_negative_value_after_separator(self) -> None:
        result = self.runner.invoke(convert.app, ["-s", "dbnum2", "--", "-5.25"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("负伍.贰伍", result.output)

    def test_one_ten_option(self) -> None:
        result = self.runner.invoke(convert.app, ["-s", "dbnum1", "-o", "12"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("一十二", result.output)

    def test_formal_notice_for_word_styles(self) -> None:
        result = self.runner.invoke(convert.app, ["-s", "dbnum1", "-f", "12"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[info]", result.output)

    def test_out_of_range_warns(self) -> None:
        result = self.runner.invoke(convert.app, ["-s", "dbnum1", "1e21"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[warn]", result.output)
        self.assertIn("1000000000000000000000", result.output)

    def test_unknown_style_is_usage_error(self) -> None:
        result = self.runner.invoke(convert.app, ["-s", "dbnum9", "1"])
        self.assertEqual(result.exit_code, 2)

    def test_mounted_under_root_cli(self) -> None:
        result = self.runner.invoke(cli.app, ["convert", "-s", "dbnum4", "123.5"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("１２３．５", result.output)


if __name__ == "__main__":
    unittest.main()
