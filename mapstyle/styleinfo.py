import common
import enum
import mapstyle
import typing

# Logical font roles. Style sheets only ever refer to fonts by role, the
# actual family names are chosen where fonts are created (see FontCache).
class FontFamily(enum.Enum):
    Default = 'Default'
    Wingdings = 'Wingdings'
    Glyph = 'Glyph'
    Placeholder = 'Placeholder'
    Anomaly = 'Anomaly'
    Draft = 'Draft'
    Terminal = 'Terminal'
    Mongoose = 'Mongoose'

class FontInfo(mapstyle.Freezable):
    def __init__(
            self,
            family: FontFamily,
            emSize: float,
            style: mapstyle.FontStyle = mapstyle.FontStyle.Regular
            ) -> None:
        super().__init__()
        common.validateMandatoryEnum(name='family', value=family, enumType=FontFamily)
        common.validatePositiveFloat(name='emSize', value=emSize)

        self._family = family
        self._emSize = float(emSize)
        self._style = mapstyle.FontStyle(style)

        # Font descriptors are never modified once created
        self.freeze()

    def family(self) -> FontFamily:
        return self._family

    def emSize(self) -> float:
        return self._emSize

    def style(self) -> mapstyle.FontStyle:
        return self._style

    def derive(
            self,
            family: typing.Optional[FontFamily] = None,
            emSize: typing.Optional[float] = None,
            style: typing.Optional[mapstyle.FontStyle] = None
            ) -> 'FontInfo':
        return FontInfo(
            family=family if family is not None else self._family,
            emSize=emSize if emSize is not None else self._emSize,
            style=style if style is not None else self._style)

    def toDict(self) -> typing.Dict[str, typing.Any]:
        return {
            'family': self._family.name,
            'emSize': self._emSize,
            'style': int(self._style)}

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, FontInfo):
            return self._family == other._family and \
                self._emSize == other._emSize and \
                self._style == other._style
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._family, self._emSize, int(self._style)))

    def __repr__(self) -> str:
        return f'FontInfo({self._family.name}, {self._emSize}, {self._style!r})'

class PenInfo(mapstyle.Freezable):
    def __init__(
            self,
            colour: str,
            width: float,
            style: mapstyle.LineStyle = mapstyle.LineStyle.Solid,
            pattern: typing.Optional[typing.Sequence[float]] = None
            ) -> None:
        super().__init__()
        self._colour = None
        self._width = None
        self._style = mapstyle.LineStyle.Solid
        self._pattern = None

        self.setColour(colour)
        self.setWidth(width)
        self.setStyle(style=style, pattern=pattern)

    def colour(self) -> str:
        return self._colour

    def setColour(self, colour: str) -> None:
        # Parsing validates the colour string
        mapstyle.parseHtmlColour(htmlColour=colour)
        self._colour = colour

    def width(self) -> float:
        return self._width

    def setWidth(self, width: float) -> None:
        # A hairline (zero width) pen isn't supported by the renderer so it's
        # treated as a configuration error rather than silently drawn
        common.validatePositiveFloat(name='Pen width', value=width)
        self._width = float(width)

    def style(self) -> mapstyle.LineStyle:
        return self._style

    def pattern(self) -> typing.Optional[typing.Tuple[float, ...]]:
        return self._pattern

    def setStyle(
            self,
            style: mapstyle.LineStyle,
            pattern: typing.Optional[typing.Sequence[float]] = None
            ) -> None:
        common.validateMandatoryEnum(name='style', value=style, enumType=mapstyle.LineStyle)
        if style is mapstyle.LineStyle.Custom:
            if not pattern:
                raise ValueError('A custom line style requires a dash pattern')
            common.validateMandatoryCollection(
                name='pattern',
                value=pattern,
                validationFn=lambda name, length: common.validatePositiveFloat(name=name, value=length))
            self._pattern = tuple(float(length) for length in pattern)
        else:
            self._pattern = None
        self._style = style

    def copy(self) -> 'PenInfo':
        return PenInfo(
            colour=self._colour,
            width=self._width,
            style=self._style,
            pattern=self._pattern)

    def toDict(self) -> typing.Dict[str, typing.Any]:
        return {
            'colour': self._colour,
            'width': self._width,
            'style': self._style.name,
            'pattern': list(self._pattern) if self._pattern else None}

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, PenInfo):
            return self._colour == other._colour and \
                self._width == other._width and \
                self._style == other._style and \
                self._pattern == other._pattern
        return NotImplemented

    def __repr__(self) -> str:
        return f'PenInfo({self._colour}, {self._width}, {self._style.name})'
