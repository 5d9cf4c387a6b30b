from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from . import views

app_name = 'users'

urlpatterns = [
    # Authentication
    path('login/', views.login, name='login'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),

    # Current user
    path('me/', views.current_user, name='current-user'),

    # User management (admin role)
    path('users/', views.users, name='users'),
    path('users/<uuid:pk>/', views.delete_user, name='user-delete'),
]
