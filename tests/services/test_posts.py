"""Tests for post, comment and report services."""

from datetime import timedelta

import pytest

from student_sphere.core.errors import AuthorizationError, NotFoundError, ValidationError
from student_sphere.db.time import utcnow
from student_sphere.models import CommentTarget, Post, PostTarget, UserStatus
from student_sphere.services.posts import (
    as_target,
    create_comment,
    create_post,
    create_report,
    get_post,
    list_posts,
)
from student_sphere.services.votes import cast_vote


def test_create_post(db_session, author) -> None:
    post = create_post(
        db_session,
        author,
        title="Lost umbrella",
        description="Blue, left in the library",
        category="NON_ACADEMIC",
        subject="",
    )

    assert post.id
    assert post.category == "NON_ACADEMIC"
    assert post.subject is None
    assert post.user_id == author.id


def test_create_post_rejects_unknown_category(db_session, author) -> None:
    with pytest.raises(ValidationError):
        create_post(db_session, author, title="t", description="d", category="MEMES")


def test_suspended_user_cannot_contribute(db_session, make_user, calculus_post) -> None:
    suspended = make_user("google-oauth2|dave", "dave@uni.edu", status=UserStatus.SUSPENDED.value)

    with pytest.raises(AuthorizationError):
        create_post(db_session, suspended, title="t", description="d", category="ACADEMIC")
    with pytest.raises(AuthorizationError):
        create_comment(db_session, suspended, post_id=calculus_post.id, content="hi")
    with pytest.raises(AuthorizationError):
        create_report(db_session, suspended, target=PostTarget(calculus_post.id), reason="spam")


def test_list_posts_filters_and_sorts(db_session, author, reporter, calculus_post) -> None:
    newer = Post(
        title="Club fair",
        description="Tomorrow at noon",
        category="NON_ACADEMIC",
        user_id=author.id,
        created_at=utcnow() + timedelta(minutes=5),
    )
    db_session.add(newer)
    db_session.commit()
    cast_vote(db_session, reporter, PostTarget(calculus_post.id), 1)

    assert [s.post.id for s in list_posts(db_session)] == [newer.id, calculus_post.id]
    assert [s.post.id for s in list_posts(db_session, sort="top")] == [calculus_post.id, newer.id]
    academic = list_posts(db_session, category="ACADEMIC")
    assert [s.post.id for s in academic] == [calculus_post.id]
    assert academic[0].vote_score == 1


def test_get_post_builds_comment_tree(db_session, author, reporter, calculus_post) -> None:
    top = create_comment(db_session, reporter, post_id=calculus_post.id, content="Use parts")
    create_comment(
        db_session, author, post_id=calculus_post.id, content="Thanks!", parent_id=top.id
    )

    thread = get_post(db_session, calculus_post.id)

    assert thread.summary.comment_count == 2
    assert len(thread.comments) == 1
    assert thread.comments[0].comment.content == "Use parts"
    assert [r.comment.content for r in thread.comments[0].replies] == ["Thanks!"]


def test_get_post_missing(db_session) -> None:
    with pytest.raises(NotFoundError):
        get_post(db_session, "missing")


def test_reply_must_stay_on_the_same_post(db_session, author, calculus_post) -> None:
    other = create_post(db_session, author, title="t", description="d", category="ACADEMIC")
    foreign = create_comment(db_session, author, post_id=other.id, content="elsewhere")

    with pytest.raises(ValidationError):
        create_comment(
            db_session, author, post_id=calculus_post.id, content="x", parent_id=foreign.id
        )
    with pytest.raises(NotFoundError):
        create_comment(db_session, author, post_id=calculus_post.id, content="x", parent_id="nope")


def test_create_report_defaults(db_session, reporter, calculus_post) -> None:
    report = create_report(
        db_session,
        reporter,
        target=PostTarget(calculus_post.id),
        reason="  off-topic ",
        details="",
    )

    assert report.reason == "off-topic"
    assert report.details is None
    assert report.status == "pending"
    assert report.priority == "low"
    assert report.target == PostTarget(calculus_post.id)


def test_create_report_validation(db_session, reporter) -> None:
    with pytest.raises(ValidationError):
        create_report(db_session, reporter, target=PostTarget("x"), reason="   ")
    with pytest.raises(NotFoundError):
        create_report(db_session, reporter, target=CommentTarget("missing"), reason="spam")


def test_as_target_requires_exactly_one_id() -> None:
    assert as_target("p1", None) == PostTarget("p1")
    assert as_target(None, "c1") == CommentTarget("c1")
    with pytest.raises(ValidationError):
        as_target(None, None)
    with pytest.raises(ValidationError):
        as_target("p1", "c1")
