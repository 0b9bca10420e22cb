from app.enums.visibility_enum import Visibility
from app.enums.like_target_enum import LikeTargetType
from app.enums.formats_image_enum import FormatImage
from app.enums.sort_enum import SortDirection, FeedSort, AlbumPhotosSort
