__version__ = '1.0.0'

from dynamic_form.base import MISSING
from dynamic_form.error import (
    error_message_on,
    error_messages_for,
)
from dynamic_form.error_bearer import (
    as_error_bearer,
    Column,
    ErrorBearer,
    FormErrorBearer,
    ModelErrorBearer,
    register_error_bearer_factory,
)
from dynamic_form.fragment import (
    Fragment,
    html,
)
from dynamic_form.resolver import resolve

__all__ = [
    'as_error_bearer',
    'Column',
    'error_message_on',
    'error_messages_for',
    'ErrorBearer',
    'FormErrorBearer',
    'Fragment',
    'html',
    'MISSING',
    'ModelErrorBearer',
    'register_error_bearer_factory',
    'resolve',
]
