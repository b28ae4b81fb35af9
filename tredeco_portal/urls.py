from django.urls import include, path

from tredeco_calendar import views as calendar_views

urlpatterns = [
    path("tredeco/", include("tredeco_calendar.urls")),
    path("api/tredeco/", include("tredeco_calendar.api.urls")),
    path(
        "api/tredeco/year/<int:y>/meta",
        calendar_views.year_meta,
        name="tredeco-calendar-year-meta",
    ),
]
