from rest_framework import viewsets, status, mixins
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from .models import Revenue, Expense
from .serializers import (
    RevenueSerializer,
    ExpenseSerializer,
    ExpenseInputSerializer,
    PeriodFilterSerializer,
    ExpenseFilterSerializer,
)
from .services import RevenueService, ExpenseService
from .exceptions import BookkeepingServiceError, ExpenseNotFoundError


class ExpensePagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


def _service_error_response(error):
    if isinstance(error, ExpenseNotFoundError):
        return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)
    return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)


class RevenueViewSet(mixins.ListModelMixin,
                     mixins.RetrieveModelMixin,
                     viewsets.GenericViewSet):
    """
    Monthly revenue ledger.

    list: Revenues, optionally for one year
    create: Upsert the revenue of a (year, month)
    """

    queryset = Revenue.objects.all()
    serializer_class = RevenueSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = PeriodFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return RevenueService.list_revenues(year=filter_serializer.validated_data.get('year'))

    @extend_schema(request=RevenueSerializer, responses={200: RevenueSerializer, 201: RevenueSerializer})
    def create(self, request, *args, **kwargs):
        """Record revenue; replaces the amount if the month already exists."""
        serializer = RevenueSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            revenue, created = RevenueService.upsert_revenue(**serializer.validated_data)
        except BookkeepingServiceError as e:
            return _service_error_response(e)

        return Response(
            RevenueSerializer(revenue).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )


class ExpenseViewSet(viewsets.ModelViewSet):
    """
    ViewSet for expenses.

    list: Expenses filterable by year, month and category
    create / update / partial_update / destroy: via ExpenseService
    """

    queryset = Expense.objects.all()
    serializer_class = ExpenseSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = ExpensePagination

    def get_queryset(self):
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = ExpenseFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return ExpenseService.list_expenses(**filter_serializer.validated_data)

    @extend_schema(request=ExpenseInputSerializer, responses={201: ExpenseSerializer})
    def create(self, request, *args, **kwargs):
        serializer = ExpenseInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expense = ExpenseService.create_expense(**serializer.validated_data)
        except BookkeepingServiceError as e:
            return _service_error_response(e)

        return Response(ExpenseSerializer(expense).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ExpenseInputSerializer, responses={200: ExpenseSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = ExpenseInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            expense = ExpenseService.update_expense(
                expense_id=self.kwargs['pk'],
                **serializer.validated_data
            )
        except BookkeepingServiceError as e:
            return _service_error_response(e)

        return Response(ExpenseSerializer(expense).data)

    def destroy(self, request, *args, **kwargs):
        try:
            ExpenseService.delete_expense(expense_id=self.kwargs['pk'])
        except BookkeepingServiceError as e:
            return _service_error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)
