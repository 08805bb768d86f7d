import logging

from dynamic_form.error_bearer import as_error_bearer

log = logging.getLogger('dynamic_form')


def resolve(name_or_object, context=None):
    """
    Find the `ErrorBearer` that `name_or_object` refers to.

    Strings are names, looked up with an exact match in `context` (a dict or a
    django template `Context`). A name that isn't bound resolves to `None`.
    Everything else is the object itself, adapted via `as_error_bearer`.
    """
    if isinstance(name_or_object, str):
        name = name_or_object
        value = context.get(name) if context is not None else None
        if value is None:
            log.debug('No object named %r in the rendering context', name)
            return None
        return as_error_bearer(value)

    return as_error_bearer(name_or_object)
