import unittest

from mysh import errors, tokenizer


class test_tokenizer(unittest.TestCase):
    def test_split_on_whitespace_runs(self):
        self.assertEqual(tokenizer.tokenize("ls   -l\t/tmp"), ["ls", "-l", "/tmp"])

    def test_blank_lines(self):
        self.assertEqual(tokenizer.tokenize(""), [])
        self.assertEqual(tokenizer.tokenize("   \t  "), [])
        self.assertEqual(tokenizer.tokenize("\n"), [])

    def test_trailing_newline(self):
        self.assertEqual(tokenizer.tokenize("pwd\n"), ["pwd"])

    def test_no_quoting(self):
        self.assertEqual(
            tokenizer.tokenize('echo "a b"'), ["echo", '"a', 'b"']
        )

    def test_operators_need_whitespace(self):
        self.assertEqual(tokenizer.tokenize("ls|wc"), ["ls|wc"])
        self.assertEqual(tokenizer.tokenize("ls | wc"), ["ls", "|", "wc"])
        self.assertTrue(tokenizer.is_operator("|"))
        self.assertTrue(tokenizer.is_operator("<"))
        self.assertTrue(tokenizer.is_operator(">"))
        self.assertFalse(tokenizer.is_operator(">>"))

    def test_line_too_long(self):
        line = "echo " + "x" * 20
        with self.assertRaises(errors.LineTooLong) as cm:
            tokenizer.tokenize(line, limit=10)
        self.assertEqual(cm.exception.length, len(line))
        self.assertEqual(cm.exception.limit, 10)

    def test_limit_disabled(self):
        line = "echo " + "x" * 5000
        self.assertEqual(len(tokenizer.tokenize(line, limit=0)), 2)
