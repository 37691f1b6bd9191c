"""
Unit tests for sorting and rendering question/answer records.
"""
import unittest

from quiz_answers.answer_formatter import format_answers, sort_answers
from quiz_answers.models import QuestionAnswer
from tests.test_fixtures import TestFixtures


class TestSortAnswers(unittest.TestCase):
    """Test cases for sort_answers."""

    def test_sorted_by_id(self):
        result = sort_answers(TestFixtures.create_sample_records())
        self.assertEqual([r.id for r in result], ["q1", "q2", "q3"])

    def test_lexical_not_numeric_order(self):
        records = [
            QuestionAnswer("10", "Ten?", "10", 0),
            QuestionAnswer("9", "Nine?", "9", 0),
            QuestionAnswer("1", "One?", "1", 0),
        ]
        self.assertEqual([r.id for r in sort_answers(records)], ["1", "10", "9"])

    def test_uppercase_sorts_before_lowercase(self):
        records = [
            QuestionAnswer("b", "?", "x", 0),
            QuestionAnswer("B", "?", "x", 0),
            QuestionAnswer("a", "?", "x", 0),
        ]
        self.assertEqual([r.id for r in sort_answers(records)], ["B", "a", "b"])

    def test_duplicate_ids_keep_input_order(self):
        records = [
            QuestionAnswer("dup", "First copy", "1", 0),
            QuestionAnswer("aaa", "Other", "2", 0),
            QuestionAnswer("dup", "Second copy", "3", 0),
        ]
        result = sort_answers(records)
        self.assertEqual([r.question for r in result], ["Other", "First copy", "Second copy"])

    def test_input_not_modified(self):
        records = TestFixtures.create_sample_records()
        original_ids = [r.id for r in records]
        sort_answers(records)
        self.assertEqual([r.id for r in records], original_ids)


class TestFormatAnswers(unittest.TestCase):
    """Test cases for format_answers."""

    def test_empty_input_gives_empty_string(self):
        self.assertEqual(format_answers([]), "")

    def test_single_record(self):
        record = QuestionAnswer("x", "What is 2+2?", "4", 1)
        self.assertEqual(format_answers([record]), "1. **What is 2+2?**\n**Answer:** `4`\n\n")

    def test_numbering_follows_sorted_order(self):
        result = format_answers(TestFixtures.create_sample_records())
        expected = (
            "1. **First?**\n**Answer:** `A`\n\n"
            "2. **Second?**\n**Answer:** `B`\n\n"
            "3. **Third?**\n**Answer:** `C`\n\n"
        )
        self.assertEqual(result, expected)

    def test_entry_count_matches_input(self):
        records = [QuestionAnswer(f"id{i:02d}", f"Q{i}", f"A{i}", 0) for i in range(12)]
        result = format_answers(records)
        self.assertEqual(result.count("**Answer:**"), 12)
        self.assertTrue(result.startswith("1. **Q0**"))
        self.assertIn("12. **Q11**", result)

    def test_multiline_question_kept(self):
        record = QuestionAnswer("x", "Line one\nLine two", "yes", 0)
        self.assertEqual(
            format_answers([record]),
            "1. **Line one\nLine two**\n**Answer:** `yes`\n\n"
        )


if __name__ == '__main__':
    unittest.main()
