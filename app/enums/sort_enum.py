from enum import StrEnum

class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"

class FeedSort(StrEnum):
    """Orden del feed público."""
    LATEST = "latest"
    LIKES = "likes"

class AlbumPhotosSort(StrEnum):
    """Orden de las fotos de un álbum según la fecha en que fueron añadidas."""
    RECENT = "recent"
    OLDEST = "oldest"

    @property
    def direction(self) -> SortDirection:
        return SortDirection.DESC if self is AlbumPhotosSort.RECENT else SortDirection.ASC
