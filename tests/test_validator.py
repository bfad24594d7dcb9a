import unittest

from logtable.drills.validator import MIN_SIGNIFICANT, validate
from logtable.theory.index_space import argument_text, logarithm_text
from logtable.theory.rounding import round_to_significant

LOG2 = logarithm_text(100)
LOG101 = logarithm_text(1)


class ValidateExamplesTests(unittest.TestCase):
    def test_minimum_precision(self) -> None:
        self.assertTrue(validate("0.301", LOG2))
        self.assertTrue(validate(".301", LOG2))
        self.assertTrue(validate("0.00432", LOG101))

    def test_too_few_digits_are_padded_with_zeros(self) -> None:
        # "0.3" is read as "0.300", which is not log10(2) to 3 digits.
        self.assertFalse(validate("0.3", LOG2))
        self.assertFalse(validate("0.0043", LOG101))

    def test_more_digits_raise_the_bar(self) -> None:
        self.assertTrue(validate("0.3010", LOG2))
        self.assertTrue(validate("0.30103", LOG2))
        self.assertFalse(validate("0.30102", LOG2))
        self.assertTrue(validate("0.004321", LOG101))
        self.assertFalse(validate("0.004322", LOG101))

    def test_decimal_point_alignment(self) -> None:
        self.assertFalse(validate("1.5", "0.15"))
        self.assertFalse(validate("3.01", LOG2))
        self.assertFalse(validate("301", LOG2))
        self.assertFalse(validate("", LOG2))

    def test_wrong_digit(self) -> None:
        self.assertFalse(validate("0.302", LOG2))
        self.assertFalse(validate("0.00431", LOG101))

    def test_zeros(self) -> None:
        self.assertFalse(validate("0", LOG2))
        self.assertFalse(validate("0.000", LOG101))
        self.assertTrue(validate("0", "0.000"))
        self.assertTrue(validate("0.0", "0"))

    def test_garbage_never_raises(self) -> None:
        for text in ("abc", "0.3O1", "0.3.01", "-0.301", "0,301", "0.30¹"):
            with self.subTest(text=text):
                self.assertFalse(validate(text, LOG2))

    def test_argument_answers(self) -> None:
        self.assertTrue(validate("1.37", "1.37"))
        self.assertTrue(validate("1.370", "1.37"))
        self.assertFalse(validate("1.371", "1.37"))
        self.assertFalse(validate("1.4", "1.37"))
        self.assertTrue(validate("2", "2.00"))
        self.assertFalse(validate("1.3", "1.37"))


class ValidatePropertiesTests(unittest.TestCase):
    def test_exact_self_match(self) -> None:
        for i in range(1, 101):
            text = logarithm_text(i)
            self.assertTrue(validate(text, text), text)

    def test_rounded_answer_accepted(self) -> None:
        for i in range(1, 101):
            truth = logarithm_text(i)
            for n in range(MIN_SIGNIFICANT, 8):
                answer = round_to_significant(truth, n)
                with self.subTest(index=i, n=n):
                    self.assertTrue(validate(answer, truth))

    def test_single_digit_alteration_rejected(self) -> None:
        for i in range(1, 101):
            truth = logarithm_text(i)
            answer = round_to_significant(truth, MIN_SIGNIFICANT)
            for pos, ch in enumerate(answer):
                if ch == ".":
                    continue
                altered = answer[:pos] + str((int(ch) + 1) % 10) + answer[pos + 1 :]
                with self.subTest(index=i, altered=altered):
                    self.assertFalse(validate(altered, truth))

    def test_reverse_answers_are_exact(self) -> None:
        for i in range(1, 101):
            self.assertTrue(validate(argument_text(i), argument_text(i)))
            if i < 100:
                self.assertFalse(validate(argument_text(i + 1), argument_text(i)))


if __name__ == "__main__":
    unittest.main()
