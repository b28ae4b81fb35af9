from django.apps import AppConfig


class TredecoCalendarConfig(AppConfig):
    name = "tredeco_calendar"
    verbose_name = "Tredeco calendar"
