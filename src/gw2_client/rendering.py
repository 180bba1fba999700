"""
URL construction for the GW2 render service.

Icons referenced by items (and other renderable entities) are served as
{render_base_url}/file/{signature}/{file_id}.{format}.
"""

from typing import Protocol

from gw2_client.config import get_settings

IMAGE_FORMATS = frozenset({"png", "jpg"})


class Renderable(Protocol):
    icon_file_signature: str | None
    icon_file_id: int | None


def build_render_url(file: Renderable, image_format: str = "png") -> str:
    return build_render_url_for(file.icon_file_signature, file.icon_file_id, image_format)


def build_render_url_for(
    signature: str | None, file_id: int | None, image_format: str = "png"
) -> str:
    image_format = image_format.lower()
    if image_format not in IMAGE_FORMATS:
        raise ValueError(
            f"Unsupported image format '{image_format}', expected one of {sorted(IMAGE_FORMATS)}"
        )
    if not signature or file_id is None:
        raise ValueError("Render URL requires both a file signature and a file id")

    base_url = get_settings().render_base_url.rstrip("/")
    return f"{base_url}/file/{signature}/{file_id}.{image_format}"
