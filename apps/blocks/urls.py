from django.urls import path

from .views import BlockFragmentView

app_name = "blocks"

urlpatterns = [
    path("<slug:block_id>/", BlockFragmentView.as_view(), name="fragment"),
]
