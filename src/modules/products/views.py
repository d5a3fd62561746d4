"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Request data is validated into Pydantic DTOs; domain and validation
errors propagate to ``modules.core.exceptions.exception_handler``, which
renders them in the standard error envelope.  Persistence errors are
not caught here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.pagination import PaginationDTO
from modules.products.dtos import CreateProductDTO, ProductIdDTO, UpdateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductPageSerializer, ProductSerializer
from modules.products.services import ProductService

_UPDATABLE_FIELDS = ("name", "price")


def _payload(request: Request) -> Dict[str, Any]:
    data = request.data
    if hasattr(data, "dict"):
        data = data.dict()
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"Invalid data. Expected an object, but got {type(data).__name__}.",
            code="invalid",
        )
    return dict(data)


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("page", int, required=False),
            OpenApiParameter("limit", int, required=False),
        ],
        responses=ProductPageSerializer,
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/products/?page=&limit="""
        params = {
            key: request.query_params[key]
            for key in ("page", "limit")
            if key in request.query_params
        }
        pagination = PaginationDTO(**params)
        page = self._service.find_all(pagination)
        return Response(
            {
                "data": ProductSerializer(page.data, many=True).data,
                "meta": page.meta,
            }
        )

    @extend_schema(responses=ProductSerializer)
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.find_one(ProductIdDTO(id=pk).id)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductSerializer, responses={201: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        data = _payload(request)
        dto = CreateProductDTO(name=data.get("name"), price=data.get("price"))
        product = self._service.create(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ProductSerializer, responses=ProductSerializer)
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{pk}/"""
        data = _payload(request)
        fields = {key: data[key] for key in _UPDATABLE_FIELDS if key in data}
        dto = UpdateProductDTO(id=pk, **fields)
        product = self._service.update(dto)
        return Response(ProductSerializer(product).data)

    @extend_schema(request=ProductSerializer, responses=ProductSerializer)
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    @extend_schema(responses=ProductSerializer)
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/ (soft delete)"""
        product = self._service.remove(ProductIdDTO(id=pk).id)
        return Response(ProductSerializer(product).data)
