"""Unit tests for app.services.validation: id parsing, update/signup/signin payloads, error formatting."""

import unittest

from app.core.errors import ValidationError
from app.services.validation import (
    format_validation_errors,
    parse_user_id,
    validate_signin,
    validate_signup,
    validate_user_update,
)


def _fields(exc: ValidationError) -> list[str]:
    return [d["field"] for d in exc.details or []]


class TestParseUserId(unittest.TestCase):
    """parse_user_id accepts positive integers only."""

    def test_numeric_string(self) -> None:
        self.assertEqual(parse_user_id("5"), 5)

    def test_int(self) -> None:
        self.assertEqual(parse_user_id(42), 42)

    def test_malformed_ids_rejected(self) -> None:
        for raw in ("abc", "", "0", "-3", "1.5", "5abc", None, "99999999999"):
            with self.subTest(raw=raw):
                with self.assertRaises(ValidationError) as ctx:
                    parse_user_id(raw)
                self.assertEqual(_fields(ctx.exception), ["id"])
                self.assertEqual(ctx.exception.status_code, 400)

    def test_non_canonical_numeric_strings_rejected(self) -> None:
        for raw in ("1_0", "+5", "5.0", " 5", "5 ", "5\n", "٥", True):
            with self.subTest(raw=raw):
                with self.assertRaises(ValidationError) as ctx:
                    parse_user_id(raw)
                self.assertEqual(
                    ctx.exception.details, [{"field": "id", "message": "id must be a positive integer"}]
                )

    def test_leading_zeros_are_digits(self) -> None:
        self.assertEqual(parse_user_id("007"), 7)


class TestValidateUserUpdate(unittest.TestCase):
    """validate_user_update checks present fields and reports every violation."""

    def test_empty_payload_has_no_changes(self) -> None:
        self.assertEqual(validate_user_update({}).changes(), {})

    def test_missing_body_is_empty_update(self) -> None:
        self.assertEqual(validate_user_update(None).changes(), {})

    def test_only_present_fields_are_changes(self) -> None:
        update = validate_user_update({"name": "  Alice  "})
        self.assertEqual(update.changes(), {"name": "Alice"})

    def test_email_normalized(self) -> None:
        update = validate_user_update({"email": " Alice@Example.COM "})
        self.assertEqual(update.changes(), {"email": "alice@example.com"})

    def test_role_values(self) -> None:
        self.assertEqual(validate_user_update({"role": "admin"}).changes(), {"role": "admin"})
        with self.assertRaises(ValidationError) as ctx:
            validate_user_update({"role": "superuser"})
        self.assertEqual(_fields(ctx.exception), ["role"])

    def test_collects_all_violations(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_user_update({"name": "A", "email": "not-an-email", "role": "root"})
        self.assertEqual(sorted(_fields(ctx.exception)), ["email", "name", "role"])

    def test_null_fields_rejected(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_user_update({"name": None})
        self.assertEqual(ctx.exception.details, [{"field": "name", "message": "must not be null"}])

    def test_unknown_fields_rejected(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_user_update({"password": "new-password"})
        self.assertEqual(_fields(ctx.exception), ["password"])

    def test_non_object_payload(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_user_update(["name"])
        self.assertEqual(_fields(ctx.exception), ["body"])


class TestValidateSignup(unittest.TestCase):
    def test_role_defaults_to_user(self) -> None:
        data = validate_signup({"name": "Bob", "email": "bob@example.com", "password": "s3cret-pass"})
        self.assertEqual(data.role, "user")

    def test_short_password_and_missing_name(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_signup({"email": "bob@example.com", "password": "short"})
        self.assertEqual(sorted(_fields(ctx.exception)), ["name", "password"])

    def test_missing_body(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_signup(None)
        self.assertEqual(_fields(ctx.exception), ["body"])


class TestValidateSignin(unittest.TestCase):
    def test_valid(self) -> None:
        data = validate_signin({"email": "BOB@example.com", "password": "x"})
        self.assertEqual(data.email, "bob@example.com")

    def test_empty_password(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_signin({"email": "bob@example.com", "password": ""})
        self.assertEqual(_fields(ctx.exception), ["password"])


class TestFormatValidationErrors(unittest.TestCase):
    def test_strips_body_prefix_and_value_error_prefix(self) -> None:
        details = format_validation_errors(
            [
                {"loc": ("body", "email"), "msg": "value is not a valid email address"},
                {"loc": ("name",), "msg": "Value error, must not be null"},
                {"loc": ("body", 12), "msg": "JSON decode error", "type": "json_invalid"},
            ]
        )
        self.assertEqual(
            details,
            [
                {"field": "email", "message": "value is not a valid email address"},
                {"field": "name", "message": "must not be null"},
                {"field": "body", "message": "Invalid JSON body"},
            ],
        )


if __name__ == "__main__":
    unittest.main()
