from io import BytesIO
from PIL import Image, UnidentifiedImageError

from app.enums import FormatImage
from app.errors import ValidationError

def probe_image(data: bytes, max_bytes: int) -> FormatImage:
    """
    Identifica el formato de una imagen a partir de su contenido, no de su extensión.

    Args:
        data (bytes): Contenido del archivo.
        max_bytes (int): Tamaño máximo aceptado.

    Returns:
        FormatImage: Formato detectado.

    Raises:
        ValidationError: Si el archivo está vacío, es demasiado grande o no es una imagen soportada.
    """
    if not data:
        raise ValidationError(message="El archivo está vacío")

    if len(data) > max_bytes:
        raise ValidationError(
            message="El archivo supera el tamaño máximo permitido",
            details={"size": len(data), "max_bytes": max_bytes}
        )

    try:
        with Image.open(BytesIO(data)) as img:
            detected = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ValidationError(message="El archivo no es una imagen válida", details={"error": str(e)})

    image_format = FormatImage.get_formats_map().get(detected or "")
    if image_format is None:
        raise ValidationError(
            message="Formato de imagen no soportado",
            details={"format": detected, "supported_formats": FormatImage.get_formats_list()}
        )
    return image_format
