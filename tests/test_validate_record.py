import unittest

from quizbank import schema
from quizbank.data_models import (
    AnswerNotInOptions,
    MalformedOptions,
    MalformedRecord,
    MissingExplanation,
    MissingField,
    Severity,
    UnknownDifficulty,
    ValidationConfig,
    WrongType,
)
from quizbank.validate.record import validate_one


def make_record(**overrides):
    record = {
        "id": "BP001",
        "question": "Who was thrown into the lions' den?",
        "options": ["Joseph", "Daniel", "David", "Jeremiah"],
        "answer": "Daniel",
        "category": "Bible People",
        "difficulty": "easy",
        "explanation": "Daniel 6.",
    }
    record.update(overrides)
    return record


def kinds(result):
    return [finding.kind for finding in result.findings]


class ValidRecordTestCase(unittest.TestCase):
    def test_valid_record(self):
        result = validate_one(make_record(), position=0)
        self.assertTrue(result.valid)
        self.assertEqual(result.findings, ())
        self.assertEqual(result.record_id, "BP001")
        self.assertEqual(result.label, "BP001")

    def test_prompt_key_accepted(self):
        record = make_record()
        record["prompt"] = record.pop("question")
        self.assertTrue(validate_one(record).valid)

    def test_extra_fields_ignored(self):
        self.assertEqual(validate_one(make_record(points=5, tags=["x"])).findings, ())

    def test_tuple_options_and_two_options(self):
        self.assertTrue(validate_one(make_record(options=("Daniel", "David"))).valid)

    def test_missing_explanation_is_fine_by_default(self):
        record = make_record()
        del record["explanation"]
        self.assertEqual(validate_one(record).findings, ())

    def test_record_not_mutated(self):
        record = make_record(options=["X", "X"], answer="Y")
        snapshot = {k: (list(v) if isinstance(v, list) else v) for k, v in record.items()}
        validate_one(record)
        self.assertEqual(record, snapshot)


class MissingFieldTestCase(unittest.TestCase):
    def test_each_missing_field_reported_alone(self):
        for field in schema.describe_required_fields():
            record = make_record()
            for key in schema.source_keys(field):
                record.pop(key, None)
            result = validate_one(record, position=4)
            with self.subTest(field=field):
                self.assertFalse(result.valid)
                self.assertEqual(result.findings, (MissingField(field=field),))

    def test_empty_values_count_as_missing(self):
        for field, value in [("id", ""), ("category", "   "), ("options", []), ("answer", None)]:
            key = schema.source_keys(field)[0]
            result = validate_one(make_record(**{key: value}))
            with self.subTest(field=field):
                self.assertEqual(result.findings, (MissingField(field=field),))

    def test_missing_id_uses_position_label(self):
        record = make_record()
        del record["id"]
        result = validate_one(record, position=7)
        self.assertIsNone(result.record_id)
        self.assertEqual(result.label, "#7")

    def test_all_fields_missing(self):
        result = validate_one({}, position=0)
        self.assertEqual(kinds(result), ["MissingField"] * 6)
        self.assertEqual([f.field for f in result.findings], schema.describe_required_fields())


class WrongTypeTestCase(unittest.TestCase):
    def test_numeric_id(self):
        result = validate_one(make_record(id=17), position=2)
        self.assertEqual(result.findings, (WrongType(field="id", expected="a string", actual="int"),))
        self.assertEqual(result.label, "#2")

    def test_non_string_answer_skips_answer_check(self):
        result = validate_one(make_record(answer=1))
        self.assertEqual(kinds(result), ["WrongType"])

    def test_non_mapping_record(self):
        for record in [None, "BP001", ["a", "b"], 12]:
            result = validate_one(record, position=1)
            with self.subTest(record=record):
                self.assertFalse(result.valid)
                self.assertEqual(len(result.findings), 1)
                self.assertIsInstance(result.findings[0], MalformedRecord)


class OptionsTestCase(unittest.TestCase):
    def test_duplicate_options(self):
        result = validate_one(make_record(options=["X", "X", "Y", "Z"], answer="X"))
        self.assertFalse(result.valid)
        self.assertEqual(kinds(result), ["MalformedOptions"])
        self.assertIn("'X'", result.findings[0].reason)

    def test_too_few_options(self):
        result = validate_one(make_record(options=["Daniel"]))
        self.assertEqual(kinds(result), ["MalformedOptions"])

    def test_blank_and_non_string_entries(self):
        result = validate_one(make_record(options=["Daniel", "", 3, "David"]))
        self.assertEqual(kinds(result), ["MalformedOptions"])
        self.assertIn("[1, 2]", result.findings[0].reason)

    def test_every_options_problem_reported(self):
        result = validate_one(make_record(options=["Daniel", "Daniel", ""], answer="Daniel"))
        self.assertEqual(kinds(result), ["MalformedOptions", "MalformedOptions"])

    def test_options_not_a_list(self):
        result = validate_one(make_record(options="Joseph, Daniel"))
        self.assertEqual(kinds(result), ["MalformedOptions"])

    def test_expected_num_options(self):
        config = ValidationConfig(expected_num_options=4)
        self.assertTrue(validate_one(make_record(), config=config).valid)
        result = validate_one(make_record(options=["Daniel", "David", "Joseph"]), config=config)
        self.assertEqual(kinds(result), ["MalformedOptions"])
        self.assertIn("exactly 4", result.findings[0].reason)


class AnswerTestCase(unittest.TestCase):
    def test_answer_not_in_options(self):
        result = validate_one(make_record(answer="Moses"))
        self.assertFalse(result.valid)
        self.assertEqual(result.findings, (AnswerNotInOptions(answer="Moses"),))

    def test_answer_match_is_exact(self):
        for answer in ["daniel", "Daniel ", " Daniel"]:
            result = validate_one(make_record(answer=answer))
            with self.subTest(answer=answer):
                self.assertEqual(kinds(result), ["AnswerNotInOptions"])

    def test_missing_options_skips_answer_check(self):
        record = make_record(answer="Moses")
        del record["options"]
        self.assertEqual(kinds(validate_one(record)), ["MissingField"])


class DifficultyTestCase(unittest.TestCase):
    def test_unknown_difficulty_is_warning(self):
        result = validate_one(make_record(difficulty="expert"))
        self.assertTrue(result.valid)
        self.assertEqual(result.findings, (UnknownDifficulty(value="expert"),))
        self.assertEqual(result.findings[0].severity, Severity.warning)
        self.assertEqual(result.errors, [])
        self.assertEqual(len(result.warnings), 1)

    def test_custom_vocabulary(self):
        config = ValidationConfig(known_difficulties=("easy", "medium", "hard", "expert"))
        self.assertEqual(validate_one(make_record(difficulty="expert"), config=config).findings, ())

    def test_warning_does_not_hide_errors(self):
        result = validate_one(make_record(difficulty="expert", answer="Moses"))
        self.assertFalse(result.valid)
        self.assertEqual(kinds(result), ["AnswerNotInOptions", "UnknownDifficulty"])


class ExplanationTestCase(unittest.TestCase):
    def test_non_string_explanation_is_wrong_type(self):
        for value in [6, ["Daniel 6."], {"ref": "Daniel 6"}]:
            result = validate_one(make_record(explanation=value))
            with self.subTest(value=value):
                self.assertFalse(result.valid)
                self.assertEqual(
                    result.findings, (WrongType(field="explanation", expected="a string", actual=type(value).__name__),)
                )

    def test_null_explanation_is_fine(self):
        self.assertEqual(validate_one(make_record(explanation=None)).findings, ())

    def test_missing_explanation_warning_when_enabled(self):
        config = ValidationConfig(warn_missing_explanation=True)
        result = validate_one(make_record(explanation=""), config=config)
        self.assertTrue(result.valid)
        self.assertEqual(result.findings, (MissingExplanation(),))


if __name__ == "__main__":
    unittest.main()
