from app.schemas.pagination_schemas import CursorPage, CursorPosition, SuccessResponse
from app.schemas.user_schemas import (
    UserCreate,
    UserResponse,
    ProfileStats,
    PublicProfileResponse,
    MyProfileResponse,
    ProfileUpdate
)
from app.schemas.auth_schemas import Token, TokenData, UserLogin, AuthResponse
from app.schemas.photos_schemas import (
    PhotoResponse,
    PhotoVisibilityUpdate,
    AddToAlbum,
    MembershipResponse,
    FeedPhotoResponse
)
from app.schemas.album_schemas import AlbumResponse, AlbumCreate, AlbumWithPhotosResponse
from app.schemas.likes_schemas import (
    LikeTarget,
    LikeCreate,
    LikeResponse,
    LikedPhotoView,
    LikedAlbumView,
    MyLikeItem
)
