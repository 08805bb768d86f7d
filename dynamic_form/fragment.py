from tri_declarative import (
    dispatch,
    EMPTY,
)

from dynamic_form._web_compat import format_html
from dynamic_form.attrs import render_attrs

# https://html.spec.whatwg.org/multipage/syntax.html#void-elements
_void_elements = [
    'area',
    'base',
    'br',
    'col',
    'embed',
    'hr',
    'img',
    'input',
    'link',
    'meta',
    'param',
    'source',
    'track',
    'wbr',
]


class Fragment:
    """
    `Fragment` is a small HTML element: a tag, some attributes and a list of
    children. Children are conditionally escaped, so pass `mark_safe` strings
    (or other fragments) for content that already is markup.

    .. code-block:: python

        h2 = Fragment('h2', 'Whoops')

    It's easiest to use via the html builder:

    .. code-block:: python

        h2 = html.h2('Whoops')
    """

    @dispatch(
        attrs=EMPTY,
    )
    def __init__(self, tag, *children, attrs):
        self.tag = tag
        self.children = list(children)
        self.attrs = attrs

    def __repr__(self):
        return f'<{self.__class__.__name__} tag:{self.tag} attrs:{dict(self.attrs)!r}>'

    def __str__(self):
        return self.__html__()

    def render_children(self):
        return format_html('{}' * len(self.children), *self.children)

    def __html__(self):
        rendered_children = self.render_children()
        is_void_element = self.tag in _void_elements

        if rendered_children:
            assert not is_void_element, f'{self.tag} is a void element, but it has children: {rendered_children}'
            return format_html(
                '<{tag}{attrs}>{children}</{tag}>',
                tag=self.tag,
                attrs=render_attrs(self.attrs),
                children=rendered_children,
            )
        else:
            return format_html(
                '<{tag}{attrs}>' if is_void_element else '<{tag}{attrs}></{tag}>',
                tag=self.tag,
                attrs=render_attrs(self.attrs),
            )


class Html:
    def __getattr__(self, tag):
        def fragment_constructor(*children, **kwargs):
            return Fragment(tag, *children, **kwargs)

        return fragment_constructor


html = Html()
