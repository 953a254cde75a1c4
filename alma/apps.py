from django.apps import AppConfig


class AlmaConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "alma"
    verbose_name = "Alma"
