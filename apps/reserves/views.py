from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .models import AllocationAccount, ReserveExpenditure
from .serializers import (
    AllocationAccountSerializer,
    AllocationAccountInputSerializer,
    ReserveExpenditureSerializer,
    ReserveExpenditureInputSerializer,
    ExpenditureFilterSerializer,
    ReportPeriodSerializer,
    AllocationSummarySerializer,
    ExpenditureSummarySerializer,
)

from apps.reserves.services import (
    create_account,
    update_account,
    delete_account,
    calculate_allocations,
    list_expenditures,
    create_expenditure,
    update_expenditure,
    delete_expenditure,
    summarize_expenditures,
    # Exceptions
    ReservesServiceError,
    AllocationAccountNotFoundError,
    ExpenditureNotFoundError,
)


PERIOD_PARAMETERS = [
    OpenApiParameter('year', int, required=True),
    OpenApiParameter('month', int, required=False, description='1-12; omit for the whole year'),
]


class ExpenditurePagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


def _service_error_response(error):
    """Translate a reserves service error into an HTTP response."""
    if isinstance(error, (AllocationAccountNotFoundError, ExpenditureNotFoundError)):
        return Response({'error': str(error)}, status=status.HTTP_404_NOT_FOUND)
    return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)


class AllocationAccountViewSet(viewsets.ModelViewSet):
    """
    ViewSet for allocation accounts.

    list: All accounts, active or not
    create / update / partial_update / destroy: via account management service
    """

    queryset = AllocationAccount.objects.all()
    serializer_class = AllocationAccountSerializer
    permission_classes = [IsAuthenticated]

    @extend_schema(request=AllocationAccountInputSerializer, responses={201: AllocationAccountSerializer})
    def create(self, request, *args, **kwargs):
        serializer = AllocationAccountInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            account = create_account(**serializer.validated_data)
        except ReservesServiceError as e:
            return _service_error_response(e)

        return Response(AllocationAccountSerializer(account).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=AllocationAccountInputSerializer, responses={200: AllocationAccountSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = AllocationAccountInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            account = update_account(account_id=self.kwargs['pk'], **serializer.validated_data)
        except ReservesServiceError as e:
            return _service_error_response(e)

        return Response(AllocationAccountSerializer(account).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_account(account_id=self.kwargs['pk'])
        except ReservesServiceError as e:
            return _service_error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)


class ReserveExpenditureViewSet(viewsets.ModelViewSet):
    """
    ViewSet for reserve expenditures.

    list: Expenditures, newest first (year/month filters)
    summary: Totals per account and per month
    """

    queryset = ReserveExpenditure.objects.all()
    serializer_class = ReserveExpenditureSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = ExpenditurePagination

    def get_queryset(self):
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = ExpenditureFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return list_expenditures(**filter_serializer.validated_data)

    @extend_schema(request=ReserveExpenditureInputSerializer, responses={201: ReserveExpenditureSerializer})
    def create(self, request, *args, **kwargs):
        serializer = ReserveExpenditureInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            expenditure = create_expenditure(**serializer.validated_data)
        except ReservesServiceError as e:
            return _service_error_response(e)

        return Response(ReserveExpenditureSerializer(expenditure).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ReserveExpenditureInputSerializer, responses={200: ReserveExpenditureSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = ReserveExpenditureInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            expenditure = update_expenditure(
                expenditure_id=self.kwargs['pk'],
                **serializer.validated_data
            )
        except ReservesServiceError as e:
            return _service_error_response(e)

        return Response(ReserveExpenditureSerializer(expenditure).data)

    def destroy(self, request, *args, **kwargs):
        try:
            delete_expenditure(expenditure_id=self.kwargs['pk'])
        except ReservesServiceError as e:
            return _service_error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(parameters=PERIOD_PARAMETERS, responses={200: ExpenditureSummarySerializer})
    @action(detail=False, methods=['get'])
    def summary(self, request):
        """
        Expenditure totals for a year or a month.

        GET /api/reserves/expenditures/summary/?year=2024&month=3
        """
        params = ReportPeriodSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        try:
            result = summarize_expenditures(**params.validated_data)
        except ReservesServiceError as e:
            return _service_error_response(e)

        return Response(ExpenditureSummarySerializer(result).data)


@extend_schema(
    parameters=PERIOD_PARAMETERS,
    responses={200: AllocationSummarySerializer},
    description="Distribute net profit of a month or a year across the active allocation accounts.",
    tags=['reserves'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def allocation_summary(request):
    """Allocation of net profit per account."""
    params = ReportPeriodSerializer(data=request.query_params)
    params.is_valid(raise_exception=True)

    try:
        result = calculate_allocations(**params.validated_data)
    except ReservesServiceError as e:
        return _service_error_response(e)

    return Response(AllocationSummarySerializer(result).data)
