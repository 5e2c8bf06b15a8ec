"""Unit tests for the User model mapping."""

from app.models import Base, User
from app.models.user import EMAIL_UNIQUE_INDEX


class TestUserModel:
    def test_table_registered(self):
        assert "users" in Base.metadata.tables

    def test_email_is_unique(self):
        table = User.__table__
        unique_indexes = [ix for ix in table.indexes if ix.unique]
        assert any([col.name for col in ix.columns] == ["email"] for ix in unique_indexes)
        assert {ix.name for ix in unique_indexes} == {EMAIL_UNIQUE_INDEX}

    def test_column_lengths_match_validation(self):
        table = User.__table__
        assert table.c.firstname.type.length == 20
        assert table.c.lastname.type.length == 20
        assert table.c.email.type.length == 100

    def test_repr(self):
        assert repr(User(email="a@b.com")) == "<User a@b.com>"
