"""Product use cases."""

from .create_product import (
    CreateProductInput,
    CreateProductRequest,
    CreateProductResponse,
    CreateProductUseCase,
)
from .engagement import (
    FollowProductUseCase,
    FollowInput,
    FollowRequest,
    FollowResponse,
    ToggleImpressionInput,
    ToggleImpressionRequest,
    ToggleImpressionResponse,
    ToggleImpressionUseCase,
    UnfollowProductUseCase,
)
from .get_product import (
    GetProductInput,
    GetProductRequest,
    GetProductUseCase,
    ProductDetail,
)
from .list_products import (
    ListLaunchesRequest,
    ListLaunchesUseCase,
    ListProductsRequest,
    ListProductsUseCase,
    ListRecentRequest,
    ListRecentUseCase,
    ProductEnricher,
    ProductListItem,
    ProductPage,
)
from .sync_metadata import (
    SyncMetadataInput,
    SyncMetadataRequest,
    SyncMetadataUseCase,
)
from .update_product import (
    UpdateProductInput,
    UpdateProductRequest,
    UpdateProductUseCase,
)

__all__ = [
    "CreateProductInput",
    "FollowInput",
    "GetProductInput",
    "SyncMetadataInput",
    "ToggleImpressionInput",
    "UpdateProductInput",
    "CreateProductRequest",
    "CreateProductResponse",
    "CreateProductUseCase",
    "FollowProductUseCase",
    "FollowRequest",
    "FollowResponse",
    "GetProductRequest",
    "GetProductUseCase",
    "ListLaunchesRequest",
    "ListLaunchesUseCase",
    "ListProductsRequest",
    "ListProductsUseCase",
    "ListRecentRequest",
    "ListRecentUseCase",
    "ProductDetail",
    "ProductEnricher",
    "ProductListItem",
    "ProductPage",
    "SyncMetadataRequest",
    "SyncMetadataUseCase",
    "ToggleImpressionRequest",
    "ToggleImpressionResponse",
    "ToggleImpressionUseCase",
    "UnfollowProductUseCase",
    "UpdateProductRequest",
    "UpdateProductUseCase",
]
