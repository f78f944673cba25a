from django.http import HttpResponse
from django.urls import path


def item_list(request, **kwargs):
    return HttpResponse()


urlpatterns = [
    path('items/', item_list, name='item-list'),
    path('users/<int:user_id>/items/', item_list, name='user-item-list'),
]
