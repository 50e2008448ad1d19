"""Unit tests for app.services.authorization: the update/delete decision table."""

import unittest

from app.core.errors import Forbidden, Unauthenticated
from app.schemas.auth import Identity
from app.services.authorization import Operation, authorize, decide

ADMIN = Identity(id=1, role="admin")
USER = Identity(id=5, role="user")


class TestDecide(unittest.TestCase):
    """decide() evaluates the rules in order and never raises."""

    def test_no_identity_is_unauthenticated(self) -> None:
        for op in Operation:
            with self.subTest(op=op):
                decision = decide(None, 5, op)
                self.assertFalse(decision.allowed)
                self.assertIsInstance(decision.denial, Unauthenticated)

    def test_non_admin_other_user_forbidden(self) -> None:
        for op in Operation:
            with self.subTest(op=op):
                decision = decide(USER, 6, op)
                self.assertFalse(decision.allowed)
                self.assertIsInstance(decision.denial, Forbidden)

    def test_non_admin_self_allowed(self) -> None:
        self.assertTrue(decide(USER, 5, Operation.UPDATE).allowed)
        self.assertTrue(decide(USER, 5, Operation.DELETE).allowed)

    def test_non_admin_role_change_on_self_forbidden(self) -> None:
        decision = decide(USER, 5, Operation.UPDATE, role_change=True)
        self.assertFalse(decision.allowed)
        self.assertIsInstance(decision.denial, Forbidden)
        self.assertEqual(decision.denial.message, "Only admin users can change roles")

    def test_admin_may_do_anything(self) -> None:
        self.assertTrue(decide(ADMIN, 5, Operation.UPDATE, role_change=True).allowed)
        self.assertTrue(decide(ADMIN, 5, Operation.DELETE).allowed)
        self.assertTrue(decide(ADMIN, 1, Operation.UPDATE, role_change=True).allowed)

    def test_cross_user_checked_before_role_change(self) -> None:
        decision = decide(USER, 6, Operation.UPDATE, role_change=True)
        self.assertEqual(decision.denial.message, "You can only update your own account")

    def test_role_change_flag_ignored_for_delete(self) -> None:
        self.assertTrue(decide(USER, 5, Operation.DELETE, role_change=True).allowed)


class TestAuthorize(unittest.TestCase):
    def test_raises_denial(self) -> None:
        with self.assertRaises(Unauthenticated):
            authorize(None, 1, Operation.DELETE)
        with self.assertRaises(Forbidden):
            authorize(USER, 5, Operation.UPDATE, role_change=True)

    def test_allows_silently(self) -> None:
        self.assertIsNone(authorize(ADMIN, 9, Operation.DELETE))


if __name__ == "__main__":
    unittest.main()
