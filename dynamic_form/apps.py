from django.apps import AppConfig


class DynamicFormConfig(AppConfig):
    name = 'dynamic_form'
    verbose_name = 'dynamic form'
    default = True
