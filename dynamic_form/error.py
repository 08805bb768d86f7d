import logging

from tri_declarative import (
    dispatch,
    EMPTY,
    Namespace,
)

from dynamic_form._web_compat import (
    gettext,
    linebreaksbr,
    mark_safe,
    ngettext,
    settings,
)
from dynamic_form.base import (
    humanize,
    MISSING,
)
from dynamic_form.fragment import html
from dynamic_form.resolver import resolve

log = logging.getLogger('dynamic_form')


def default_container_attrs():
    return Namespace(
        id=getattr(settings, 'DYNAMIC_FORM_CONTAINER_ID', 'error_explanation'),
        **{'class': getattr(settings, 'DYNAMIC_FORM_CONTAINER_CLASS', 'error_explanation')},
    )


def default_header_message(count, object_name):
    return ngettext(
        '%(count)s error prohibited this %(object_name)s from being saved',
        '%(count)s errors prohibited this %(object_name)s from being saved',
        count,
    ) % dict(count=count, object_name=humanize(object_name))


def resolve_objects(params, object, context):
    if object is not MISSING:
        if object is None:
            return []
        objects = object if isinstance(object, (list, tuple)) else [object]
    else:
        objects = params

    return [x for x in (resolve(x, context=context) for x in objects) if x is not None]


@dispatch(
    context=None,
    object=MISSING,
    object_name=None,
    header_message=None,
    message=None,
    attrs=EMPTY,
)
def error_messages_for(*params, context, object, object_name, header_message, message, attrs):
    """
    Render a summary of the errors of one or more objects:

    .. code-block:: html

        <div id="error_explanation" class="error_explanation">
            <h2>1 error prohibited this post from being saved</h2>
            <p>There were problems with the following fields:</p>
            <ul><li>Author name can't be empty</li></ul>
        </div>

    `params` are objects, or names looked up in `context`. Pass `object` to
    skip the lookup. Messages are used as is, they are not escaped. An empty
    `header_message` or `message` leaves out that element.
    """
    objects = resolve_objects(params, object, context)

    if not any(x.has_errors() for x in objects):
        log.debug('No errors to render for %r', params)
        return ''

    count = sum(x.error_count() for x in objects)
    messages = [m for x in objects for m in x.full_error_messages()]

    if object_name is None:
        object_name = objects[0].human_name()
    if not object_name and params and isinstance(params[0], str):
        object_name = params[0]

    if header_message is None:
        header_message = default_header_message(count, object_name)
    if message is None:
        message = gettext('There were problems with the following fields:')

    return html.div(
        html.h2(header_message) if header_message else '',
        html.p(message) if message else '',
        html.ul(*[html.li(mark_safe(m)) for m in messages]),
        attrs=Namespace(default_container_attrs(), attrs),
    ).__html__()


@dispatch(
    context=None,
    prepend_text='',
    append_text='',
    css_class=None,
    html_tag=None,
)
def error_message_on(object, field, *, context, prepend_text, append_text, css_class, html_tag):
    """
    Render the first error of `field` on `object` wrapped in a tag:

    .. code-block:: html

        <div class="formError">can't be empty</div>

    Neither the message nor `prepend_text`/`append_text` is escaped.
    """
    obj = resolve(object, context=context)
    if obj is None:
        return ''

    errors = obj.errors_on(field)
    if not errors:
        return ''

    message = errors[0]
    column = obj.column_for_attribute(field)
    if column is not None and column.type == 'text':
        rendered = linebreaksbr(message, autoescape=False)
    else:
        rendered = message

    if css_class is None:
        css_class = getattr(settings, 'DYNAMIC_FORM_CSS_CLASS', 'formError')
    if html_tag is None:
        html_tag = getattr(settings, 'DYNAMIC_FORM_HTML_TAG', 'div')

    return getattr(html, html_tag)(
        mark_safe(f'{prepend_text}{rendered}{append_text}'),
        attrs__class=css_class,
    ).__html__()
