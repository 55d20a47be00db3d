from .pillow_decoder import PillowDecoder, pixel_buffer_from_image

__all__ = ["PillowDecoder", "pixel_buffer_from_image"]
