from abc import (
    ABC,
    abstractmethod,
)
from typing import (
    Dict,
    List,
    Optional,
)

from tri_struct import Struct

from dynamic_form._web_compat import (
    BaseForm,
    FieldDoesNotExist,
    camel_case_to_spaces,
    conditional_escape,
    mark_safe,
    NON_FIELD_ERRORS,
    pretty_name,
    settings,
    Textarea,
    ValidationError,
)
from dynamic_form.base import capitalize

_error_bearer_factory_by_class = {}


class Column(Struct):
    """
    Describes the storage type of an attribute. Only `type` is used when
    rendering, `'text'` marks a multi-line attribute.
    """

    def __init__(self, *, type, name=None, human_name=None):
        super(Column, self).__init__(type=type, name=name, human_name=human_name)


class ErrorBearer(ABC):
    """
    Base class for anything that can report validation errors to the renderers.

    Subclasses implement `error_count`, `full_error_messages` and `errors_on`.
    `human_name` defaults to the class name in lower case words (`DirtyPost`
    becomes `dirty post`) and `column_for_attribute` defaults to "no column".
    """

    @abstractmethod
    def error_count(self) -> int:
        pass  # pragma: no cover

    @abstractmethod
    def full_error_messages(self) -> List[str]:
        pass  # pragma: no cover

    @abstractmethod
    def errors_on(self, field: str) -> List[str]:
        pass  # pragma: no cover

    def has_errors(self) -> bool:
        return self.error_count() != 0

    def human_name(self) -> str:
        return camel_case_to_spaces(type(self).__name__)

    def column_for_attribute(self, field: str) -> Optional[Column]:
        return None


def full_message_format():
    return getattr(settings, 'DYNAMIC_FORM_FULL_MESSAGE_FORMAT', '{label} {message}')


def escaped_messages(messages):
    # Django messages are plain text and may contain the submitted value
    return [conditional_escape(x) for x in messages]


def full_messages(label_for, errors_by_field):
    result = []
    for field, messages in errors_by_field.items():
        for message in escaped_messages(messages):
            if field == NON_FIELD_ERRORS:
                result.append(message)
            else:
                label = conditional_escape(label_for(field))
                result.append(mark_safe(full_message_format().format(label=label, message=message)))
    return result


class FormErrorBearer(ErrorBearer):
    """
    Adapts a bound django form. Accessing `form.errors` triggers validation the
    first time, the way it does in a template.
    """

    def __init__(self, form):
        self.form = form

    def __repr__(self):
        return f'<{type(self).__name__} {type(self.form).__name__}>'

    def error_count(self):
        return sum(len(x) for x in self.form.errors.values())

    def label_for(self, field):
        form_field = self.form.fields.get(field)
        if form_field is not None and form_field.label:
            return capitalize(str(form_field.label))
        return pretty_name(field)

    def full_error_messages(self):
        return full_messages(self.label_for, self.form.errors)

    def errors_on(self, field):
        return escaped_messages(self.form.errors.get(field, []))

    def human_name(self):
        meta = getattr(self.form, '_meta', None)
        model = getattr(meta, 'model', None)
        if model is not None:
            return str(model._meta.verbose_name)
        name = type(self.form).__name__
        if name.endswith('Form') and name != 'Form':
            name = name[: -len('Form')]
        return camel_case_to_spaces(name)

    def column_for_attribute(self, field):
        form_field = self.form.fields.get(field)
        if form_field is None:
            return None
        return Column(
            type='text' if isinstance(form_field.widget, Textarea) else 'string',
            name=field,
            human_name=self.label_for(field),
        )


def _column_type(model_field):
    internal_type = model_field.get_internal_type()
    if internal_type == 'TextField':
        return 'text'
    if internal_type == 'CharField':
        return 'string'
    internal_type = internal_type.lower()
    if internal_type.endswith('field'):
        internal_type = internal_type[: -len('field')]
    return internal_type


class ModelErrorBearer(ErrorBearer):
    """
    Adapts a django model instance together with the errors the model layer
    produced for it, either a `ValidationError` or a dict from field name to
    messages.

    .. code-block:: python

        bearer = ModelErrorBearer.from_full_clean(album)
    """

    def __init__(self, instance, errors=None):
        self.instance = instance
        self.errors = _errors_by_field(errors)

    def __repr__(self):
        return f'<{type(self).__name__} {self.instance!r}>'

    @classmethod
    def from_full_clean(cls, instance, exclude=None):
        try:
            instance.full_clean(exclude=exclude)
        except ValidationError as e:
            return cls(instance, e)
        return cls(instance)

    def _model_field(self, field):
        try:
            return self.instance._meta.get_field(field)
        except FieldDoesNotExist:
            return None

    def label_for(self, field):
        model_field = self._model_field(field)
        if model_field is not None and getattr(model_field, 'verbose_name', None):
            return capitalize(str(model_field.verbose_name))
        return pretty_name(field)

    def error_count(self):
        return sum(len(x) for x in self.errors.values())

    def full_error_messages(self):
        return full_messages(self.label_for, self.errors)

    def errors_on(self, field):
        return escaped_messages(self.errors.get(field, []))

    def human_name(self):
        return str(self.instance._meta.verbose_name)

    def column_for_attribute(self, field):
        model_field = self._model_field(field)
        if model_field is None or not hasattr(model_field, 'get_internal_type'):
            return None
        return Column(
            type=_column_type(model_field),
            name=field,
            human_name=self.label_for(field),
        )


def _errors_by_field(errors) -> Dict[str, List[str]]:
    if errors is None:
        return {}
    if isinstance(errors, ValidationError):
        if hasattr(errors, 'error_dict'):
            return {field: list(messages) for field, messages in errors.message_dict.items()}
        return {NON_FIELD_ERRORS: list(errors.messages)}
    return {field: [messages] if isinstance(messages, str) else list(messages) for field, messages in errors.items()}


def register_error_bearer_factory(cls, factory):
    """
    Register how values of type `cls` (and its subclasses) are turned into an
    `ErrorBearer`. `factory` is called with the value.
    """
    _error_bearer_factory_by_class[cls] = factory


def as_error_bearer(value):
    if value is None or isinstance(value, ErrorBearer):
        return value

    for cls in type(value).__mro__:
        factory = _error_bearer_factory_by_class.get(cls)
        if factory is not None:
            return factory(value)

    raise TypeError(
        f"{type(value).__name__} is not an ErrorBearer. Subclass dynamic_form.ErrorBearer or register a factory with register_error_bearer_factory"
    )


register_error_bearer_factory(BaseForm, FormErrorBearer)
