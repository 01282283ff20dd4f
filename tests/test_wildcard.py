import unittest

import mock

from mysh import errors, wildcard
from tests import helpers


class test_wildcard(helpers.TempDirTestCase):
    def test_has_wildcard(self):
        self.assertTrue(wildcard.has_wildcard("*.txt"))
        self.assertTrue(wildcard.has_wildcard("file?.c"))
        self.assertTrue(wildcard.has_wildcard("[ab].py"))
        self.assertFalse(wildcard.has_wildcard("plain.txt"))

    def test_expands_in_order(self):
        helpers.make_files(self.tmp, "c.txt", "a.txt", "b.txt", "d.log")
        self.assertEqual(
            wildcard.expand(["ls", "*.txt"]), ["ls", "a.txt", "b.txt", "c.txt"]
        )

    def test_no_match_keeps_pattern(self):
        self.assertEqual(wildcard.expand(["ls", "*.nothing"]), ["ls", "*.nothing"])

    def test_relative_order(self):
        helpers.make_files(self.tmp, "a.txt", "b.txt")
        tokens = ["wc", "-l", "*.txt", "extra"]
        self.assertEqual(
            wildcard.expand(tokens), ["wc", "-l", "a.txt", "b.txt", "extra"]
        )
        # the input is left alone
        self.assertEqual(tokens, ["wc", "-l", "*.txt", "extra"])

    def test_plain_tokens_untouched(self):
        tokens = ["echo", "hello", "|", "cat", ">", "out"]
        self.assertEqual(wildcard.expand(tokens), tokens)

    def test_question_mark_and_class(self):
        helpers.make_files(self.tmp, "f1", "f2", "f10")
        self.assertEqual(wildcard.expand(["f?"]), ["f1", "f2"])
        self.assertEqual(wildcard.expand(["f[2]"]), ["f2"])

    def test_matching_error(self):
        with mock.patch("mysh.wildcard.glob.glob", side_effect=OSError(13, "Permission denied")):
            with self.assertRaises(errors.WildcardError) as cm:
                wildcard.expand(["ls", "secret/*"])
        self.assertEqual(cm.exception.pattern, "secret/*")
        self.assertIn("secret/*", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
