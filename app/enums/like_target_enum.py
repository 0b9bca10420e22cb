from enum import StrEnum
from typing import List

class LikeTargetType(StrEnum):
    PHOTO = "PHOTO"
    ALBUM = "ALBUM"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value

    @staticmethod
    def get_targets_list() -> List[str]:
        return [target.value for target in LikeTargetType]
