from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from .models import StockItem, StockTransaction
from .serializers import (
    StockItemSerializer,
    StockItemInputSerializer,
    StockTransactionSerializer,
    StockTransactionCreateSerializer,
    StockTransactionUpdateSerializer,
    StockTransactionFilterSerializer,
    PriceHistoryEntrySerializer,
)

from apps.inventory.services import (
    UNSET,
    create_item,
    update_item,
    delete_item,
    get_low_stock_items,
    create_transaction,
    update_transaction,
    delete_transaction,
    get_price_history,
    # Exceptions
    InventoryServiceError,
    StockItemNotFoundError,
    StockTransactionNotFoundError,
)


class StockPagination(PageNumberPagination):
    """Custom pagination for stock ledger."""
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


def _service_error_response(error):
    """Translate an inventory service error into an HTTP response."""
    if isinstance(error, (StockItemNotFoundError, StockTransactionNotFoundError)):
        return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)
    return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)


class StockItemViewSet(viewsets.ModelViewSet):
    """
    ViewSet for stock items.

    Views are thin HTTP handlers; business logic lives in services.

    list: Active stock items
    create: Register an item (balance starts at 0)
    retrieve: Get an item
    update / partial_update: Edit descriptive fields
    destroy: Delete, or deactivate if the item has ledger entries
    """

    queryset = StockItem.objects.all()
    serializer_class = StockItemSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """Listing shows active items only; detail routes see all."""
        if self.action == 'list':
            return StockItem.objects.filter(is_active=True)
        return StockItem.objects.all()

    @extend_schema(request=StockItemInputSerializer, responses={201: StockItemSerializer})
    def create(self, request, *args, **kwargs):
        """Register a new stock item."""
        serializer = StockItemInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        item = create_item(**serializer.validated_data)

        return Response(StockItemSerializer(item).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=StockItemInputSerializer, responses={200: StockItemSerializer})
    def update(self, request, *args, **kwargs):
        """Edit descriptive fields (current_stock is read-only)."""
        partial = kwargs.pop('partial', False)
        serializer = StockItemInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            item = update_item(item_id=self.kwargs['pk'], **serializer.validated_data)
        except InventoryServiceError as e:
            return _service_error_response(e)

        return Response(StockItemSerializer(item).data)

    def destroy(self, request, *args, **kwargs):
        """Delete or deactivate a stock item."""
        try:
            deleted = delete_item(item_id=self.kwargs['pk'])
        except InventoryServiceError as e:
            return _service_error_response(e)

        if deleted:
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response({'message': 'Stock item deactivated'}, status=status.HTTP_200_OK)

    @extend_schema(responses={200: PriceHistoryEntrySerializer(many=True)})
    @action(detail=True, methods=['get'], url_path='price-history')
    def price_history(self, request, pk=None):
        """List priced movements of the item, newest first."""
        try:
            history = get_price_history(item_id=pk)
        except InventoryServiceError as e:
            return _service_error_response(e)

        return Response(PriceHistoryEntrySerializer(history, many=True).data)

    @action(detail=False, methods=['get'], url_path='low-stock')
    def low_stock(self, request):
        """Active items at or below their minimum stock."""
        items = get_low_stock_items()
        return Response(StockItemSerializer(items, many=True).data)


class StockTransactionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for the stock ledger.

    Every create/update/destroy goes through the balance maintenance
    service so item balances stay consistent with the ledger.
    """

    queryset = StockTransaction.objects.select_related('item')
    serializer_class = StockTransactionSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = StockPagination

    def get_queryset(self):
        """Filter transactions using input serializer validation."""
        queryset = super().get_queryset()

        if self.action != 'list':
            return queryset

        filter_serializer = StockTransactionFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'type' in params:
            queryset = queryset.filter(type=params['type'])
        if 'item' in params:
            queryset = queryset.filter(item_id=params['item'])
        if 'date_from' in params:
            queryset = queryset.filter(transaction_date__gte=params['date_from'])
        if 'date_to' in params:
            queryset = queryset.filter(transaction_date__lte=params['date_to'])

        return queryset

    @extend_schema(request=StockTransactionCreateSerializer, responses={201: StockTransactionSerializer})
    def create(self, request, *args, **kwargs):
        """Record a movement and apply it to the item balance."""
        serializer = StockTransactionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            stock_transaction = create_transaction(
                item_id=data['item'],
                direction=data['type'],
                quantity=data['quantity'],
                transaction_date=data['transaction_date'],
                unit_price=data.get('unit_price'),
                notes=data.get('notes', ''),
            )
        except InventoryServiceError as e:
            return _service_error_response(e)

        return Response(
            StockTransactionSerializer(stock_transaction).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=StockTransactionUpdateSerializer, responses={200: StockTransactionSerializer})
    def update(self, request, *args, **kwargs):
        """Edit a movement (reverse the old effect, apply the new one)."""
        serializer = StockTransactionUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            stock_transaction = update_transaction(
                transaction_id=self.kwargs['pk'],
                item_id=data.get('item'),
                direction=data.get('type'),
                quantity=data.get('quantity'),
                transaction_date=data.get('transaction_date'),
                unit_price=data['unit_price'] if 'unit_price' in data else UNSET,
                notes=data.get('notes'),
            )
        except InventoryServiceError as e:
            return _service_error_response(e)

        return Response(StockTransactionSerializer(stock_transaction).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a movement and reverse its effect."""
        try:
            delete_transaction(transaction_id=self.kwargs['pk'])
        except InventoryServiceError as e:
            return _service_error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)
