from django.apps import AppConfig


class ShwaryPaymentsConfig(AppConfig):
    name = 'shwary'
    verbose_name = 'Shwary Payments'
