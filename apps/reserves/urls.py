from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reserves'

router = DefaultRouter()
router.register(r'accounts', views.AllocationAccountViewSet, basename='account')
router.register(r'expenditures', views.ReserveExpenditureViewSet, basename='expenditure')

urlpatterns = [
    # Allocation accounts
    # GET    /api/reserves/accounts/                        - List accounts
    # POST   /api/reserves/accounts/                        - Create account
    # PATCH  /api/reserves/accounts/{id}/                   - Edit account
    # DELETE /api/reserves/accounts/{id}/                   - Delete account

    # Expenditures
    # GET    /api/reserves/expenditures/?year=&month=       - List, newest first
    # POST   /api/reserves/expenditures/                    - Record expenditure
    # GET    /api/reserves/expenditures/summary/?year=      - Totals per account/month

    path('allocations/summary/', views.allocation_summary, name='allocation-summary'),

    path('', include(router.urls)),
]
