import pytest

from tests.helpers import (
    DirtyPost,
    Post,
    User,
)


@pytest.fixture
def post():
    return Post(
        errors={
            'author_name': ["can't be empty"],
            'body': ['foo'],
        },
        full_messages=["Author name can't be empty"],
        count=1,
    )


@pytest.fixture
def user():
    return User(
        errors={'email': ['nonempty']},
        full_messages=["User email can't be empty"],
    )


@pytest.fixture
def dirty_post():
    return DirtyPost(
        errors={'author_name': ["can't be <em>empty</em>"]},
        full_messages=["Author name can't be <em>empty</em>"],
    )


@pytest.fixture
def context(post, user):
    return dict(post=post, user=user)
