from django.urls import path

from . import views

urlpatterns = [
    path("to-tredeco/", views.ToTredeco.as_view(), name="to-tredeco"),
    path("to-standard/", views.ToStandard.as_view(), name="to-standard"),
    path("year/<int:y>/grid/", views.YearGrid.as_view(), name="year-grid"),
]
