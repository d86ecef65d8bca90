"""
Unit tests for domain entities and their field rules.
"""
import pytest

from devconnect.domain.exceptions import ValidationError
from devconnect.domain.models import Comment, Post, User
from devconnect.domain.models.text_rules import clean_title


class TestPost:
    def test_trims_title_and_body(self):
        post = Post(id=None, title="  Hello  ", body="\nWorld\t", author_id="a")
        assert post.title == "Hello"
        assert post.body == "World"
        assert post.likes == []
        assert post.comment_ids == []

    @pytest.mark.parametrize("title", ["", "   ", None, "x" * 201])
    def test_rejects_title_out_of_range(self, title):
        with pytest.raises(ValidationError, match="Title must be between 1 and 200 characters"):
            Post(id=None, title=title, body="body", author_id="a")

    def test_accepts_boundary_lengths(self):
        post = Post(id=None, title="x" * 200, body="y" * 5000, author_id="a")
        assert len(post.title) == 200
        assert len(post.body) == 5000

    def test_rejects_body_over_5000_characters(self):
        with pytest.raises(ValidationError, match="Body must be between 1 and 5000 characters"):
            Post(id=None, title="ok", body="y" * 5001, author_id="a")

    def test_length_is_checked_after_trimming(self):
        post = Post(id=None, title=" " + "x" * 200 + " ", body="b", author_id="a")
        assert len(post.title) == 200

    def test_rejects_duplicate_likes(self):
        with pytest.raises(ValidationError):
            Post(id=None, title="t", body="b", author_id="a", likes=["u1", "u1"])

    def test_requires_author(self):
        with pytest.raises(ValidationError):
            Post(id=None, title="t", body="b", author_id="")

    def test_like_helpers(self):
        post = Post(id="p", title="t", body="b", author_id="a", likes=["u1", "u2"])
        assert post.likes_count == 2
        assert post.is_liked_by("u1")
        assert not post.is_liked_by("u3")


class TestComment:
    def test_trims_text(self):
        comment = Comment(id=None, text="  Nice!  ", user_id="u", post_id="p")
        assert comment.text == "Nice!"

    @pytest.mark.parametrize("text", ["", "  ", "z" * 1001])
    def test_rejects_text_out_of_range(self, text):
        with pytest.raises(ValidationError, match="Comment must be between 1 and 1000 characters"):
            Comment(id=None, text=text, user_id="u", post_id="p")

    def test_requires_post_reference(self):
        with pytest.raises(ValidationError):
            Comment(id=None, text="hi", user_id="u", post_id="")


class TestUser:
    def test_normalizes_email_and_skills(self):
        user = User(
            id=None,
            name=" Ada ",
            email="  Ada@Example.COM ",
            hashed_password="hash",
            skills=[" python ", "", "  ", "mongodb"],
        )
        assert user.name == "Ada"
        assert user.email == "ada@example.com"
        assert user.skills == ["python", "mongodb"]
        assert user.bio == ""
        assert user.avatar == ""

    def test_rejects_long_bio(self):
        with pytest.raises(ValidationError, match="Bio cannot exceed 500 characters"):
            User(id=None, name="Ada", email="ada@example.com", hashed_password="h", bio="b" * 501)

    def test_rejects_missing_name(self):
        with pytest.raises(ValidationError):
            User(id=None, name="  ", email="ada@example.com", hashed_password="h")

    def test_rejects_invalid_email(self):
        with pytest.raises(ValidationError):
            User(id=None, name="Ada", email="not-an-email", hashed_password="h")


def test_clean_text_rejects_non_strings():
    with pytest.raises(ValidationError):
        clean_title(123)
