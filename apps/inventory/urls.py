from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'inventory'

router = DefaultRouter()
router.register(r'items', views.StockItemViewSet, basename='item')
router.register(r'transactions', views.StockTransactionViewSet, basename='transaction')

urlpatterns = [
    # Stock item routes
    # GET    /api/stock/items/                       - Active items
    # POST   /api/stock/items/                       - Register item
    # GET    /api/stock/items/low-stock/             - Items at/below min stock
    # GET    /api/stock/items/{id}/price-history/    - Priced movements, newest first
    # DELETE /api/stock/items/{id}/                  - Delete or deactivate

    # Ledger routes
    # GET    /api/stock/transactions/                - List (type, item, date filters)
    # POST   /api/stock/transactions/                - Create movement
    # PATCH  /api/stock/transactions/{id}/           - Edit movement
    # DELETE /api/stock/transactions/{id}/           - Delete movement

    path('', include(router.urls)),
]
