from dynamic_form._web_compat import mark_safe


def render_attrs(attrs):
    """
    Render HTML attributes, or return '' if no attributes needs to be rendered.

    Attributes are rendered in the order they were given, so callers control
    the order of e.g. `id` and `class`.
    """
    if not attrs:
        return ''

    def parts():
        for key, value in attrs.items():
            if value is None:
                continue
            if value is True:
                yield f'{key}'
                continue
            if isinstance(value, dict):
                if key == 'class':
                    value = render_class(value)
                elif key == 'style':
                    value = render_style(value)
                else:
                    raise TypeError(f'Only the class and style attributes can be dicts, you sent {value} for key {key}')
                if not value:
                    continue
            elif isinstance(value, (list, tuple)):
                raise TypeError(f"Attributes can't be of type {type(value).__name__}, you sent {value} for key {key}")
            elif callable(value):
                raise TypeError(f"Attributes can't be callable, you sent {value} for key {key}")
            v = f'{value}'.replace('"', '&quot;')
            yield f'{key}="{v}"'

    r = mark_safe(' %s' % ' '.join(parts()))
    return '' if r == ' ' else r


def render_class(class_dict):
    return ' '.join(sorted(name for name, flag in class_dict.items() if flag))


def render_style(class_dict):
    return '; '.join(sorted(f'{k}: {v}' for k, v in class_dict.items() if v))
