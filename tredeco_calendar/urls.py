from django.urls import path

from . import views

app_name = "tredeco_calendar"

urlpatterns = [
    path("date/set/", views.set_tredeco_date, name="set_tredeco_date"),
    path("year/<int:y>/meta/", views.year_meta, name="year_meta"),
]
