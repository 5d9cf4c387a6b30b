from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'bookkeeping'

router = DefaultRouter()
router.register(r'revenues', views.RevenueViewSet, basename='revenue')
router.register(r'expenses', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/bookkeeping/revenues/?year=     - Monthly revenues
    # POST   /api/bookkeeping/revenues/           - Upsert revenue for (year, month)
    # GET    /api/bookkeeping/expenses/           - List (year, month, category filters)
    # POST   /api/bookkeeping/expenses/           - Record expense
    # PATCH  /api/bookkeeping/expenses/{id}/      - Edit expense
    # DELETE /api/bookkeeping/expenses/{id}/      - Delete expense

    path('', include(router.urls)),
]
