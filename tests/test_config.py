import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from logtable.config.config import (
    RANGE_ERROR,
    QuizSettings,
    describe_settings,
    load_config,
    parse_range,
    settings_from_config,
    validate_config,
)
from logtable.drills.log_drill import Mode


class ParseRangeTests(unittest.TestCase):
    def test_full_table(self) -> None:
        self.assertEqual(parse_range("1.01", "2.00"), (1, 100))

    def test_swapped(self) -> None:
        self.assertEqual(parse_range("2.00", "1.01"), (1, 100))
        self.assertEqual(parse_range("1.5", "1.2"), (20, 50))

    def test_out_of_table(self) -> None:
        for lo, hi in (("1.00", "1.50"), ("1.01", "2.01"), ("0.5", "1.5")):
            with self.subTest(lo=lo, hi=hi):
                with self.assertRaises(ValueError) as cm:
                    parse_range(lo, hi)
                self.assertEqual(str(cm.exception), RANGE_ERROR)

    def test_unparsable(self) -> None:
        with self.assertRaises(ValueError) as cm:
            parse_range("one", "1.5")
        self.assertEqual(str(cm.exception), "Range must be between 1.01 and 2.00.")

    def test_huge_magnitude(self) -> None:
        with self.assertRaises(ValueError) as cm:
            parse_range("1e30", "2.00")
        self.assertEqual(str(cm.exception), RANGE_ERROR)


class ValidateConfigTests(unittest.TestCase):
    def test_defaults_applied(self) -> None:
        cfg = validate_config({})
        self.assertEqual(cfg["quiz"]["range_min"], "1.01")
        self.assertEqual(cfg["quiz"]["range_max"], "2.00")
        self.assertEqual(cfg["quiz"]["mode"], "normal")
        self.assertEqual(cfg["quiz"]["retry_delay_ms"], 1000)
        self.assertFalse(cfg["ui"]["explain"])
        self.assertTrue(cfg["ui"]["show_how_to_play"])

    def test_unknown_mode_falls_back(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            cfg = validate_config({"quiz": {"mode": "backwards"}})
        self.assertEqual(cfg["quiz"]["mode"], "normal")
        self.assertIn("WARNING: Unsupported mode 'backwards'", out.getvalue())

    def test_empty_sections(self) -> None:
        cfg = validate_config({"quiz": None, "ui": None})
        self.assertEqual(cfg["quiz"]["range_min"], "1.01")
        self.assertEqual(cfg["quiz"]["mode"], "normal")
        self.assertTrue(cfg["ui"]["show_how_to_play"])

    def test_mode_case_insensitive(self) -> None:
        cfg = validate_config({"quiz": {"mode": "Reverse"}})
        self.assertEqual(cfg["quiz"]["mode"], "reverse")

    def test_bad_delay_falls_back(self) -> None:
        for bad in (-5, "soon"):
            out = io.StringIO()
            with redirect_stdout(out):
                cfg = validate_config({"quiz": {"retry_delay_ms": bad}})
            self.assertEqual(cfg["quiz"]["retry_delay_ms"], 1000)
            self.assertIn("WARNING", out.getvalue())

    def test_float_range_from_yaml(self) -> None:
        cfg = validate_config({"quiz": {"range_min": 1.5, "range_max": 1.1}})
        settings = settings_from_config(cfg)
        self.assertEqual((settings.range_min, settings.range_max), (10, 50))


class LoadConfigTests(unittest.TestCase):
    def test_packaged_defaults(self) -> None:
        cfg = validate_config(load_config())
        settings = settings_from_config(cfg)
        self.assertEqual(settings, QuizSettings(range_min=1, range_max=100, mode=Mode.NORMAL, retry_delay_ms=1000))

    def test_user_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "quiz.yml")
            with open(path, "w", encoding="utf-8") as f:
                f.write('quiz:\n  range_min: "1.20"\n  range_max: "1.30"\n  mode: shuffled\n')
            settings = settings_from_config(validate_config(load_config(path)))
        self.assertEqual(settings.range_min, 20)
        self.assertEqual(settings.range_max, 30)
        self.assertEqual(settings.mode, Mode.SHUFFLED)
        self.assertEqual(settings.retry_delay_ms, 1000)

    def test_empty_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "empty.yml")
            open(path, "w").close()
            self.assertEqual(load_config(path), {})

    def test_missing_file_exits(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err):
            with self.assertRaises(SystemExit) as cm:
                load_config("/nonexistent/quiz.yml")
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("Config file not found", err.getvalue())


class QuizSettingsTests(unittest.TestCase):
    def test_rejects_reversed_range(self) -> None:
        with self.assertRaises(ValueError):
            QuizSettings(range_min=50, range_max=10)

    def test_rejects_out_of_table(self) -> None:
        with self.assertRaises(ValueError):
            QuizSettings(range_min=0, range_max=10)

    def test_describe(self) -> None:
        self.assertEqual(describe_settings(QuizSettings()), "1.01 to 2.00, normal mode")
        self.assertEqual(
            describe_settings(QuizSettings(range_min=37, range_max=50, mode=Mode.REVERSE)),
            "1.37 to 1.50, reverse mode",
        )


if __name__ == "__main__":
    unittest.main()
