"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into status codes here;
storage faults that are not handled explicitly fall through to the
project exception handler, which renders them as 500s.
"""

from __future__ import annotations

import re

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import GenericViewSet

from modules.products.constants import (
    DATABASE_UPDATE_ERROR,
    INT32_MAX,
    INT32_MIN,
    VALIDATION_FAILED,
)
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import (
    InsufficientStock,
    ProductConcurrencyError,
    ProductIdMismatch,
    ProductNotFound,
    ProductStorageError,
    UniqueIdGenerationError,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


_INT_RE = re.compile(r"-?[0-9]+")


def _parse_int(value: str | None, name: str) -> int:
    if value is None or not _INT_RE.fullmatch(value) or not (
        INT32_MIN <= int(value) <= INT32_MAX
    ):
        raise ParseError(f"The value '{value}' is not valid for {name}.")
    return int(value)


def _validation_failed(exc: PydanticValidationError) -> Response:
    return Response(
        {"detail": VALIDATION_FAILED, "errors": CreateProductDTO.field_errors(exc)},
        status=status.HTTP_400_BAD_REQUEST,
    )


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD and stock operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    # Malformed ids must reach the view to be rejected with a 400.
    lookup_value_regex = r"[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products/"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        product_id = _parse_int(pk, "id")
        try:
            product = self._service.get_product(product_id)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products/"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _validation_failed(exc)

        try:
            product = self._service.create_product(dto)
        except UniqueIdGenerationError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        except ProductStorageError as exc:
            return Response(
                {"detail": DATABASE_UPDATE_ERROR.format(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        location = reverse("product-detail", kwargs={"pk": product.id}, request=request)
        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        product_id = _parse_int(pk, "id")
        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _validation_failed(exc)

        try:
            self._service.update_product(product_id, dto)
        except ProductIdMismatch as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except ProductConcurrencyError as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        product_id = _parse_int(pk, "id")
        try:
            self._service.delete_product(product_id)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Stock
    # ------------------------------------------------------------------

    @action(
        detail=False,
        methods=["put"],
        url_path=r"decrement-stock/(?P<product_id>[^/]+)/(?P<quantity>[^/]+)",
        url_name="decrement-stock",
    )
    def decrement_stock(
        self, request: Request, product_id: str, quantity: str
    ) -> Response:
        """PUT /api/products/decrement-stock/{id}/{quantity}"""
        id_value = _parse_int(product_id, "id")
        quantity_value = _parse_int(quantity, "quantity")
        try:
            self._service.decrement_stock(id_value, quantity_value)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        except InsufficientStock as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return Response(status=status.HTTP_200_OK)

    @action(
        detail=False,
        methods=["put"],
        url_path=r"add-to-stock/(?P<product_id>[^/]+)/(?P<quantity>[^/]+)",
        url_name="add-to-stock",
    )
    def add_to_stock(self, request: Request, product_id: str, quantity: str) -> Response:
        """PUT /api/products/add-to-stock/{id}/{quantity}"""
        id_value = _parse_int(product_id, "id")
        quantity_value = _parse_int(quantity, "quantity")
        try:
            self._service.add_to_stock(id_value, quantity_value)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_200_OK)
