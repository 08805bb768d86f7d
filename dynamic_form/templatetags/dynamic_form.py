from django import template

from dynamic_form.error import (
    error_message_on as render_error_message_on,
    error_messages_for as render_error_messages_for,
)

register = template.Library()


@register.simple_tag(takes_context=True)
def error_messages_for(context, *params, **kwargs):
    """
    Usage: {% error_messages_for 'post' 'user' object_name='post' %}

    Names are looked up in the template context.
    """
    return render_error_messages_for(*params, context=context, **kwargs)


@register.simple_tag(takes_context=True)
def error_message_on(context, object, field, **kwargs):
    """
    Usage: {% error_message_on post 'author_name' css_class='fieldError' %}
    """
    return render_error_message_on(object, field, context=context, **kwargs)
