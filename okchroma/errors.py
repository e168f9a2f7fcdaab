from enum import Enum
from typing import Optional


class ColorErrorCode(str, Enum):
    INVALID_RGB = "INVALID_RGB"
    INVALID_HSL = "INVALID_HSL"
    INVALID_OKLCH = "INVALID_OKLCH"
    INVALID_P3 = "INVALID_P3"
    INVALID_FORMAT = "INVALID_FORMAT"
    OUT_OF_GAMUT = "OUT_OF_GAMUT"


class ColorError(ValueError):
    """Raised by the Color factory when an input cannot become a color."""

    def __init__(self, code: ColorErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.code.value}, {str(self)!r})"


class ColorOutOfGamutError(ColorError):
    def __init__(self, source_color: object, target_gamut: str, message: Optional[str] = None) -> None:
        super().__init__(
            ColorErrorCode.OUT_OF_GAMUT,
            message or f"Color {source_color!r} is outside the {target_gamut} gamut",
        )
        self.source_color = source_color
        self.target_gamut = target_gamut
