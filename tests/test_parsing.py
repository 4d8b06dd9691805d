import unittest

from rxnmatrix.errors import InvalidCoefficientError, MalformedEquationError
from rxnmatrix.parsing import TermParser, parse_coefficient, split_equation
from rxnmatrix.registry import InternedSpeciesRegistry
from rxnmatrix.tokenizer import RegexTermTokenizer


class TestSplitEquation(unittest.TestCase):
    def test_split_strips_sides(self):
        self.assertEqual(split_equation("A + 2B = 3C"), ("A + 2B", "3C"))

    def test_missing_separator(self):
        with self.assertRaises(MalformedEquationError) as ctx:
            split_equation("A + B", index=4)
        self.assertEqual(ctx.exception.index, 4)
        self.assertEqual(ctx.exception.equation, "A + B")
        self.assertIn("equation 4", str(ctx.exception))

    def test_multiple_separators_rejected(self):
        with self.assertRaises(MalformedEquationError):
            split_equation("A = B = C")

    def test_custom_separator(self):
        self.assertEqual(split_equation("A -> B", "->"), ("A", "B"))


class TestTokenizer(unittest.TestCase):
    def setUp(self):
        self.tokenizer = RegexTermTokenizer()

    def test_pairs(self):
        pairs = list(self.tokenizer.tokenize("A + 2B + 0.5 O2 + (CH3)2O"))
        self.assertEqual(pairs, [("", "A"), ("2", "B"), ("0.5", "O2"), ("", "(CH3)2O")])

    def test_lazy_and_restartable(self):
        tokens = self.tokenizer.tokenize("A + B")
        self.assertEqual(next(tokens), ("", "A"))
        self.assertEqual(list(self.tokenizer.tokenize("A + B")), [("", "A"), ("", "B")])

    def test_blank_terms_skipped(self):
        self.assertEqual(list(self.tokenizer.tokenize("")), [])
        self.assertEqual(list(self.tokenizer.tokenize("A + + B")), [("", "A"), ("", "B")])

    def test_term_without_species(self):
        with self.assertRaises(MalformedEquationError):
            list(self.tokenizer.tokenize("A + 2"))


class TestCoefficient(unittest.TestCase):
    def test_values(self):
        self.assertEqual(parse_coefficient("", "A"), 1.0)
        self.assertEqual(parse_coefficient("2", "A"), 2.0)
        self.assertEqual(parse_coefficient(".5", "A"), 0.5)
        self.assertEqual(parse_coefficient("1e-3", "A"), 0.001)

    def test_rejected(self):
        for text in ("x", "-2", "1/2", "1e999", "2..0"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidCoefficientError) as ctx:
                    parse_coefficient(text, "A")
                self.assertEqual(ctx.exception.coefficient, text)


class TestTermParser(unittest.TestCase):
    def setUp(self):
        self.registry = InternedSpeciesRegistry()
        self.parser = TermParser(RegexTermTokenizer(), self.registry)

    def test_sign_convention(self):
        terms = self.parser.parse_equation("A + 2B = 3C")
        self.assertEqual([t.coefficient for t in terms], [-1.0, -2.0, 3.0])
        self.assertEqual([t.species.name for t in terms], ["A", "B", "C"])

    def test_species_first_seen_order(self):
        self.parser.parse_equation("B + A = C")
        self.parser.parse_equation("D = A")
        self.assertEqual([h.name for h in self.parser.species], ["B", "A", "C", "D"])

    def test_repeated_species_kept(self):
        terms = self.parser.parse_equation("A + A = B")
        self.assertEqual(len(terms), 3)
        self.assertIs(terms[0].species, terms[1].species)
        self.assertEqual(len(self.parser.species), 2)

    def test_parse_side_appends_to_list(self):
        terms = self.parser.parse_side("A", True)
        result = self.parser.parse_side("2B", False, terms)
        self.assertIs(result, terms)
        self.assertEqual([t.coefficient for t in terms], [-1.0, 2.0])

    def test_invalid_coefficient_carries_context(self):
        with self.assertRaises(InvalidCoefficientError) as ctx:
            self.parser.parse_equation("xA = B", index=2)
        self.assertEqual(ctx.exception.index, 2)
        self.assertEqual(ctx.exception.equation, "xA = B")
        self.assertEqual(ctx.exception.species, "A")

    def test_tokenizer_error_gets_equation_context(self):
        with self.assertRaises(MalformedEquationError) as ctx:
            self.parser.parse_equation("A + 3 = B", index=1)
        self.assertEqual(ctx.exception.equation, "A + 3 = B")
        self.assertEqual(ctx.exception.index, 1)


if __name__ == '__main__':
    unittest.main()
