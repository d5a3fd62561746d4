"""Product RPC controller.

The RPC counterpart of ``ProductViewSet``: each method takes one JSON
message payload, validates it into a DTO, calls ``ProductService`` and
returns a JSON-safe result.  Domain and validation errors leave as
``RpcException`` (``{"message", "status"}``); persistence errors propagate
unmodified.
"""

from __future__ import annotations

from typing import Any, Dict, List

from modules.core.pagination import PaginationDTO
from modules.core.rpc import rpc_errors
from modules.products.dtos import (
    CreateProductDTO,
    ProductIdDTO,
    ProductOutputDTO,
    UpdateProductDTO,
    ValidateProductsDTO,
)
from modules.products.models import Product
from modules.products.services import ProductService

Payload = Dict[str, Any]


def _render(product: Product) -> Dict[str, Any]:
    return ProductOutputDTO.from_entity(product).to_wire()


class ProductRpcController:
    """Message-pattern handlers for the product catalog."""

    def __init__(self, service: ProductService) -> None:
        self._service = service

    def create(self, payload: Payload) -> Dict[str, Any]:
        with rpc_errors("create_product"):
            dto = CreateProductDTO.model_validate(payload)
            return _render(self._service.create(dto))

    def find_all(self, payload: Payload | None = None) -> Dict[str, Any]:
        with rpc_errors("find_all_products"):
            pagination = PaginationDTO.model_validate({} if payload is None else payload)
            return self._service.find_all(pagination).as_dict(_render)

    def find_one(self, payload: Payload) -> Dict[str, Any]:
        with rpc_errors("find_one_product"):
            dto = ProductIdDTO.model_validate(payload)
            return _render(self._service.find_one(dto.id))

    def update(self, payload: Payload) -> Dict[str, Any]:
        with rpc_errors("update_product"):
            dto = UpdateProductDTO.model_validate(payload)
            return _render(self._service.update(dto))

    def remove(self, payload: Payload) -> Dict[str, Any]:
        with rpc_errors("delete_product"):
            dto = ProductIdDTO.model_validate(payload)
            return _render(self._service.remove(dto.id))

    def validate_products(self, payload: Payload) -> List[Dict[str, Any]]:
        with rpc_errors("validate_products"):
            dto = ValidateProductsDTO.model_validate(payload)
            return [_render(product) for product in self._service.validate_products(dto.ids)]
