from django.conf import settings  # noqa: F401
from django.core.exceptions import (
    FieldDoesNotExist,  # noqa: F401
    NON_FIELD_ERRORS,  # noqa: F401
    ValidationError,  # noqa: F401
)
from django.forms import (
    BaseForm,  # noqa: F401
    Textarea,  # noqa: F401
)
from django.forms.utils import pretty_name  # noqa: F401
from django.template.defaultfilters import linebreaksbr  # noqa: F401
from django.utils.html import (
    conditional_escape,  # noqa: F401
    format_html as django_format_html,
)
from django.utils.safestring import mark_safe
from django.utils.text import camel_case_to_spaces  # noqa: F401
from django.utils.translation import (
    gettext,  # noqa: F401
    ngettext,  # noqa: F401
)


def format_html(s, *args, **kwargs):
    if not args and not kwargs:
        return mark_safe(s)
    return django_format_html(s, *args, **kwargs)
