import re

from bs4 import BeautifulSoup
from tri_declarative import dispatch

from dynamic_form import (
    Column,
    ErrorBearer,
)


def reindent(s, before=" ", after="    "):
    def reindent_line(line):
        m = re.match(r'^((' + re.escape(before) + r')*)(.*)', line)
        return after * (len(m.group(1)) // len(before)) + m.group(3)

    return "\n".join(reindent_line(line) for line in s.splitlines())


@dispatch
def verify_html(*, actual_html: str, find=None, expected_html: str = None):
    if expected_html is None:
        expected_html = '<html/>'  # pragma: no cover

    expected_soup = BeautifulSoup(expected_html, 'html.parser')
    actual_soup = BeautifulSoup(actual_html, 'html.parser')

    if find is not None:
        actual_soup_orig = actual_soup
        actual_soup = actual_soup.find(**find) if isinstance(find, dict) else actual_soup.find(find)

        if not actual_soup:  # pragma: no cover
            prettied_actual = reindent(actual_soup_orig.prettify()).strip()
            print(prettied_actual)
            assert False, f"Couldn't find selector {find} in actual output"

        expected_soup = expected_soup.find(**find) if isinstance(find, dict) else expected_soup.find(find)

    prettified_actual = reindent(actual_soup.prettify()).strip()
    prettified_expected = reindent(expected_soup.prettify()).strip()
    if prettified_actual != prettified_expected:  # pragma: no cover
        print("Expected")
        print(prettified_expected)
        print("Actual")
        print(prettified_actual)

    assert prettified_actual == prettified_expected


class StubErrorBearer(ErrorBearer):
    """
    An object with canned errors. `errors` maps field name to messages,
    `full_messages` is what the model layer would have produced from them.
    """

    columns = []

    def __init__(self, *, errors=None, full_messages=None, count=None):
        self.errors = errors or {}
        self.full_messages = full_messages or []
        self.count = len(self.full_messages) if count is None else count

    def error_count(self):
        return self.count

    def full_error_messages(self):
        return list(self.full_messages)

    def errors_on(self, field):
        return self.errors.get(field, [])

    def column_for_attribute(self, field):
        return next((x for x in self.columns if x.name == field), None)


class Post(StubErrorBearer):
    columns = [
        Column(type='string', name='title', human_name='Title'),
        Column(type='text', name='body', human_name='Body'),
    ]


class User(StubErrorBearer):
    columns = [
        Column(type='string', name='email', human_name='Email'),
    ]


class DirtyPost(StubErrorBearer):
    pass
