import unittest

import rdparse
from rdparse import (
    EndOfInput,
    Grammar,
    GrammarError,
    Optional,
    OrderedChoice,
    Pattern,
    Sequence,
    Span,
    Success,
    UnexpectedInput,
    parse,
)


class TestGrammar(unittest.TestCase):
    def test_self_reference(self):
        g = Grammar()
        g.define(
            "expr",
            OrderedChoice(
                Sequence("(", g.ref("expr"), ")"), Pattern(r"[0-9]+")
            ),
        )
        rule = Sequence("(", g.ref("expr"), ")")
        self.assertEqual(parse(rule, "((1))"), Success([], Span(0, 5)))
        self.assertFalse(parse(rule, "((1)"))

    def test_forward_reference(self):
        g = Grammar()
        list_ = g.define("list", "[", Optional(g.ref("items")), "]")
        g.define("items", g.ref("item"), Optional(",", g.ref("items")))
        g.define("item", OrderedChoice(Pattern(r"([0-9])"), g.ref("list")))
        self.assertEqual(parse(list_, "[1,[2,3],[]]").values, ["1", "2", "3"])

    def test_mutual_recursion(self):
        g = Grammar()
        g.define("even", Optional("a", g.ref("odd")))
        g.define("odd", "a", g.ref("even"))
        rule = Sequence(g.ref("even"), EndOfInput())
        self.assertTrue(parse(rule, ""))
        self.assertTrue(parse(rule, "aaaa"))
        self.assertFalse(parse(rule, "aaa"))

    def test_reference_identity(self):
        g = Grammar()
        self.assertIs(g.ref("a"), g.ref("a"))
        self.assertIs(g.define("a", "x"), g.ref("a"))
        self.assertEqual(repr(g.ref("a")), "Reference('a')")

    def test_reference_is_its_target(self):
        g = Grammar()
        ref = g.define("a", Pattern(r"(x)"))
        cursor = rdparse.Cursor("xx")
        self.assertEqual(ref(cursor), Success(["x"], Span(0, 1)))
        self.assertEqual(ref.match(cursor), Success(["x"], Span(1, 2)))
        self.assertEqual(cursor.depth, 0)

    def test_undefined_reference(self):
        g = Grammar()
        g.define("a", "x", g.ref("b"))
        self.assertRaises(GrammarError, g.check)
        self.assertRaises(GrammarError, g.parse, "x")
        self.assertRaises(GrammarError, parse, g.ref("b"), "x")
        self.assertRaises(GrammarError, g.__getitem__, "b")

    def test_duplicate(self):
        g = Grammar()
        g.define("a", "x")
        self.assertRaises(GrammarError, g.define, "a", "y")

    def test_frozen(self):
        g = Grammar()
        g["a"] = "x"
        self.assertFalse(g.frozen)
        self.assertTrue(g.parse("x"))
        self.assertTrue(g.frozen)
        self.assertRaises(GrammarError, g.define, "b", "y")

    def test_mapping(self):
        g = Grammar()
        g["a"] = "x"
        g.define("b", "y", "z")
        self.assertIn("a", g)
        self.assertNotIn("c", g)
        self.assertEqual(g.names(), ["a", "b"])
        self.assertIsInstance(g["a"], rdparse.Literal)
        self.assertIsInstance(g["b"], rdparse.Sequence)

    def test_start(self):
        g = Grammar()
        g.define("a", "x")
        g.define("b", "y")
        self.assertEqual(g.start, "a")
        self.assertTrue(g.parse("x"))
        self.assertFalse(g.parse("y"))
        self.assertTrue(g.parse("y", start="b"))
        self.assertRaises(GrammarError, g.parse, "y", start="c")
        self.assertRaises(GrammarError, Grammar().parse, "x")

    def test_ignored(self):
        g = Grammar(ignored=r"\s+")
        g.define("pair", Pattern(r"(\w+)"), "=", Pattern(r"(\w+)"))
        self.assertEqual(
            g.parse(" a = b"), Success(["a", "b"], Span(0, 6))
        )

    def test_flags(self):
        class Leaf(rdparse.Node):
            def __init__(self, text):
                super().__init__()
                self.text = text

        g = Grammar(track_spans=False, tag_types=True)
        g.define("leaf", rdparse.TagNode(Leaf, Pattern(r"(\w+)")))
        result = g.parse("x")
        self.assertIsNone(result.span)
        self.assertIsNone(result.values[0].span)
        self.assertEqual(result.values[0].kind, "Leaf")


class TestResults(unittest.TestCase):
    def test_unwrap(self):
        self.assertEqual(parse(Pattern(r"(a)"), "a").unwrap(), ["a"])
        with self.assertRaises(UnexpectedInput) as cm:
            parse(Sequence("a", "b"), "ac").unwrap()
        self.assertEqual(cm.exception.position, 0)
        self.assertEqual(cm.exception.furthest, 1)
        self.assertIsInstance(cm.exception, rdparse.ParsingError)

    def test_empty_success_is_true(self):
        result = parse(Optional("x"), "")
        self.assertTrue(result)
        self.assertTrue(result.matched)
        self.assertEqual(result.values, [])

    def test_reuse_cursor(self):
        cursor = rdparse.Cursor("ab")
        self.assertTrue(parse("a", cursor))
        self.assertTrue(parse("b", cursor))
        self.assertTrue(cursor.at_end())

    def test_rule_parse(self):
        self.assertEqual(
            rdparse.Literal("a").parse("a", track_spans=False),
            Success([], None),
        )


class TestArith(unittest.TestCase):
    def test_evaluate(self):
        from rdparse.tests.grammars import arith

        self.assertEqual(arith.evaluate("1 + 2 * 3"), 7)
        self.assertEqual(arith.evaluate("(1 + 2) * 3"), 9)
        self.assertEqual(arith.evaluate("10 - 4 - 3"), 3)
        self.assertEqual(arith.evaluate("2 * (3 + 4) - 5"), 9)
        self.assertEqual(arith.evaluate("7 / 2"), 3)
        self.assertEqual(arith.evaluate("2 - -3"), 5)
        self.assertEqual(arith.evaluate("  1 + # one\n 2  "), 3)

    def test_error(self):
        from rdparse.tests.grammars import arith

        result = arith.grammar.parse("1 +")
        self.assertFalse(result)
        self.assertEqual(result.position, 0)
        self.assertEqual(result.furthest, 3)
        self.assertRaises(UnexpectedInput, arith.evaluate, "(1")


class TestSexpr(unittest.TestCase):
    def test_document(self):
        from rdparse.tests.grammars import sexpr

        text = '(define x 42) ; comment\n(print "a b")'
        result = sexpr.grammar.parse(text)
        self.assertTrue(result)
        first, second = result.values
        self.assertEqual(
            first,
            sexpr.List(
                sexpr.Symbol("define"), sexpr.Symbol("x"), sexpr.Number("42")
            ),
        )
        self.assertEqual(
            second, sexpr.List(sexpr.Symbol("print"), sexpr.String("a b"))
        )
        self.assertEqual(first.span, Span(0, 13))
        self.assertEqual(second.span, Span(13, 37))
        self.assertEqual(second.items[1].span, Span(30, 36))
        self.assertEqual(second.items[1].kind, "String")
        self.assertEqual(first.kind, "List")

    def test_whitespace_in_strings(self):
        from rdparse.tests.grammars import sexpr

        result = sexpr.grammar.parse('("  ; not a comment ")')
        self.assertEqual(
            result.values[0].items[0].text, "  ; not a comment "
        )

    def test_unbalanced(self):
        from rdparse.tests.grammars import sexpr

        self.assertFalse(sexpr.grammar.parse("(a (b)"))
        self.assertFalse(sexpr.grammar.parse("a)"))


if __name__ == "__main__":
    unittest.main()
