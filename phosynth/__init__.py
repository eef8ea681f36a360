"""Audio output, G.711 conversion, phones, parser states and errors for diphone speech synthesis."""

__version__ = "0.1.0"

__all__ = ["audio", "errors", "g711", "phone", "states"]