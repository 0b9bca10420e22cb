from enum import StrEnum
from typing import List, Dict

class FormatImage(StrEnum):
    JPEG = "JPEG"
    PNG = "PNG"
    WEBP = "WEBP"
    GIF = "GIF"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value

    @property
    def content_type(self) -> str:
        return f"image/{self.value.lower()}"

    @property
    def extension(self) -> str:
        return ".jpg" if self is FormatImage.JPEG else f".{self.value.lower()}"

    @staticmethod
    def get_formats_list() -> List[str]:
        return [fmt.value for fmt in FormatImage]

    @staticmethod
    def get_formats_map() -> Dict[str, "FormatImage"]:
        """Mapea el nombre de formato que reporta Pillow a nuestro enum."""
        return {
            "JPEG": FormatImage.JPEG,
            "MPO": FormatImage.JPEG,
            "PNG": FormatImage.PNG,
            "WEBP": FormatImage.WEBP,
            "GIF": FormatImage.GIF
        }
