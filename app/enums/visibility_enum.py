from enum import StrEnum
from typing import List

class Visibility(StrEnum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value

    @staticmethod
    def get_visibility_list() -> List[str]:
        return [visibility.value for visibility in Visibility]
