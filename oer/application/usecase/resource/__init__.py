"""Resource (OER) use cases."""

from .delete_resources import DeleteAllResourcesResponse, DeleteAllResourcesUseCase
from .get_count import GetCountRequest, GetCountResponse, GetCountUseCase
from .likes import (
    GetLikesRequest,
    GetLikesResponse,
    GetLikesUseCase,
    LikeRequest,
    LikeResourceUseCase,
    LikeResponse,
    UnlikeResourceUseCase,
)
from .list_top_resources import (
    ListTopResourcesRequest,
    ListTopResourcesResponse,
    ListTopResourcesUseCase,
)
from .reset_counts import ResetCountsResponse, ResetCountsUseCase
from .save_resource import (
    OERItem,
    SaveResourceRequest,
    SaveResourceResponse,
    SaveResourceUseCase,
)
from .update_count import UpdateCountRequest, UpdateCountResponse, UpdateCountUseCase

__all__ = [
    "DeleteAllResourcesResponse",
    "DeleteAllResourcesUseCase",
    "GetCountRequest",
    "GetCountResponse",
    "GetCountUseCase",
    "GetLikesRequest",
    "GetLikesResponse",
    "GetLikesUseCase",
    "LikeRequest",
    "LikeResourceUseCase",
    "LikeResponse",
    "ListTopResourcesRequest",
    "ListTopResourcesResponse",
    "ListTopResourcesUseCase",
    "OERItem",
    "ResetCountsResponse",
    "ResetCountsUseCase",
    "SaveResourceRequest",
    "SaveResourceResponse",
    "SaveResourceUseCase",
    "UpdateCountRequest",
    "UpdateCountResponse",
    "UpdateCountUseCase",
]
