"""Unit tests for domain models."""

import pytest
from pydantic import ValidationError

from userdash.models import Company, User


def _user(id: int = 1, name: str = "Alice", email: str = "a@x.com") -> User:
    return User(id=id, name=name, username="alice", email=email, company=Company(name="Acme"))


class TestUserMatches:
    def test_matches_name_substring(self):
        """
        Given a user whose name contains the query
        When we call matches
        Then it returns True
        """
        assert _user(name="Leanne Graham").matches("Gra") is True

    def test_matches_name_case_insensitive(self):
        """
        Given a user named Alice
        When we call matches with an uppercase query
        Then it still returns True
        """
        assert _user(name="Alice").matches("ALICE") is True

    def test_matches_email_case_insensitive(self):
        """
        Given a user with a mixed-case email
        When we call matches with a lowercase fragment
        Then it returns True
        """
        assert _user(email="Sincere@april.biz").matches("sincere@") is True

    def test_username_is_not_searched(self):
        """
        Given a user whose username contains the query but name and email do not
        When we call matches
        Then it returns False
        """
        user = User(
            id=1, name="Leanne", username="Bret", email="l@x.com", company=Company(name="C")
        )
        assert user.matches("bret") is False

    def test_company_is_not_searched(self):
        """
        Given a user whose company name contains the query
        When we call matches
        Then it returns False
        """
        assert _user().matches("acme") is False

    def test_matches_empty_query(self):
        """
        Given any user
        When we call matches with an empty string
        Then it returns True
        """
        assert _user().matches("") is True


class TestUserDerivedFields:
    def test_initial_is_first_letter_of_name(self):
        assert _user(name="Ervin Howell").initial == "E"

    def test_initial_of_empty_name_is_empty(self):
        assert _user(name="").initial == ""

    @pytest.mark.parametrize(("user_id", "active"), [(1, False), (2, True), (3, False), (10, True)])
    def test_even_ids_are_active(self, user_id: int, active: bool):
        """
        Given users with odd and even ids
        When reading is_active
        Then only even ids are active
        """
        assert _user(id=user_id).is_active is active


class TestUserParsing:
    def test_parses_endpoint_record(self, leanne_record: dict):
        """
        Given a record in the endpoint's shape
        When validating it into a User
        Then every consumed field is populated
        """
        user = User.model_validate(leanne_record)
        assert user.id == 1
        assert user.name == "Leanne Graham"
        assert user.username == "Bret"
        assert user.email == "Sincere@april.biz"
        assert user.company.name == "Romaguera-Crona"

    def test_extra_fields_are_ignored(self, leanne_record: dict):
        """
        Given a record with fields the dashboard does not use
        When validating it
        Then validation succeeds and the result equals the bare record
        """
        noisy = {**leanne_record, "phone": "1-770-736-8031", "address": {"city": "Gwenborough"}}
        noisy["company"] = {**noisy["company"], "bs": "harness real-time e-markets"}
        assert User.model_validate(noisy) == User.model_validate(leanne_record)

    def test_missing_field_raises(self, leanne_record: dict):
        """
        Given a record without an email
        When validating it
        Then a ValidationError is raised
        """
        del leanne_record["email"]
        with pytest.raises(ValidationError):
            User.model_validate(leanne_record)

    def test_users_are_frozen(self):
        """
        Given a parsed user
        When assigning to one of its fields
        Then a ValidationError is raised and the record is unchanged
        """
        user = _user()
        with pytest.raises(ValidationError):
            user.name = "Mallory"  # type: ignore[misc]
        assert user.name == "Alice"
