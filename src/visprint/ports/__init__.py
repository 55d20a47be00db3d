from .decoder import DecoderPort

__all__ = ["DecoderPort"]
