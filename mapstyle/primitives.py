import enum
import typing

class LineStyle(enum.Enum):
    Solid = 0
    Dot = 1
    Dash = 2
    DashDot = 3
    DashDotDot = 4
    Custom = 5

class FontStyle(enum.IntFlag):
    Regular = 0x0
    Bold = 0x1
    Italic = 0x2
    Underline = 0x4
    Strikeout = 0x8

class TextBackgroundStyle(enum.Enum):
    NoStyle = 0
    Rectangle = 1
    Shadow = 2
    Outline = 3
    Filled = 4

class MicroBorderStyle(enum.Enum):
    Hex = 0
    Square = 1
    Curve = 2

class HexStyle(enum.Enum):
    NoHex = 0
    Hex = 1
    Square = 2

class HexCoordinateStyle(enum.Enum):
    Sector = 0
    Subsector = 1

class ImageFormat(enum.Enum):
    Png = 'image/png'
    Jpeg = 'image/jpeg'

class MapOptions(enum.IntFlag):
    NoOptions = 0x0000

    SectorGrid = 0x0001
    SubsectorGrid = 0x0002

    SectorsSelected = 0x0004
    SectorsAll = 0x0008
    SectorsMask = SectorsSelected | SectorsAll

    BordersMajor = 0x0010
    BordersMinor = 0x0020
    BordersMask = BordersMajor | BordersMinor

    NamesMajor = 0x0040
    NamesMinor = 0x0080
    NamesMask = NamesMajor | NamesMinor

    WorldsCapitals = 0x0100
    WorldsHomeworlds = 0x0200
    WorldsMask = WorldsCapitals | WorldsHomeworlds

    # These are still accepted so stored option values can be loaded but
    # they have no effect
    RoutesSelectedDeprecated = 0x0400
    PrintStyleDeprecated = 0x0800
    CandyStyleDeprecated = 0x1000
    StyleMaskDeprecated = PrintStyleDeprecated | CandyStyleDeprecated

    ForceHexes = 0x2000
    WorldColours = 0x4000
    FilledBorders = 0x8000

    # Overlay options live above the 16 bit range used by the legacy
    # option values so they never collide with them
    PopulationOverlay = 0x10000
    ImportanceOverlay = 0x20000
    CapitalOverlay = 0x40000
    StellarOverlay = 0x80000

    AncientWorlds = 0x100000
    DroyneWorlds = 0x200000
    MinorHomeWorlds = 0x400000

    DimUnofficial = 0x1000000
    ColourCodeSectorStatus = 0x2000000

    def hasSectorNames(self) -> bool:
        return (self & MapOptions.SectorsMask) != 0

    def hasBorders(self) -> bool:
        return (self & MapOptions.BordersMask) != 0

    def hasNames(self) -> bool:
        return (self & MapOptions.NamesMask) != 0

    def hasWorldMarkers(self) -> bool:
        return (self & MapOptions.WorldsMask) != 0

class WorldDetails(enum.IntFlag):
    NoDetails = 0

    Type = 1 << 0 # Show world type (water/no water/asteroid/unknown)
    KeyNames = 1 << 1 # Show HiPop/Capital names
    Starport = 1 << 2 # Show starport
    GasGiant = 1 << 3 # Show gas giant glyph
    Allegiance = 1 << 4 # Show allegiance code
    Bases = 1 << 5 # Show bases
    Hex = 1 << 6 # Include hex numbers
    Zone = 1 << 7 # Show Amber/Red zones
    AllNames = 1 << 8 # Show all world names, not just HiPop/Capitals
    Uwp = 1 << 9 # Show UWP below world name
    Asteroids = 1 << 10 # Render asteroids as pseudorandom ovals
    Highlight = 1 << 11 # Highlight (text font, text color) HiPopCapital worlds

    Dotmap = NoDetails
    Atlas = Type | KeyNames | Starport | GasGiant | Allegiance | Bases | Zone | Highlight
    Poster = Atlas | Hex | AllNames | Asteroids

# NOTE: This exists because WorldDetails.Dotmap and WorldDetails.NoDetails
# have the same value so the bitmask alone can't say if worlds are drawn
class WorldDetailLevel(enum.Enum):
    NoWorlds = 0
    Dotmap = 1
    Atlas = 2
    Poster = 3

class LayerId(enum.Enum):
    #------------------------------------------------------------
    # Background
    #------------------------------------------------------------

    Background_Solid = 0
    Background_NebulaTexture = 1
    Background_Galaxy = 2

    Background_PseudoRandomStars = 3
    Background_Rifts = 4

    #------------------------------------------------------------
    #Foreground
    #------------------------------------------------------------

    Macro_Borders = 5
    Macro_Routes = 6

    Grid_Sector = 7
    Grid_Subsector = 8
    Grid_Parsec = 9

    Names_Subsector = 10

    Micro_BordersBackground = 11
    Micro_BordersForeground = 12
    Micro_Routes = 13
    Micro_BorderExplicitLabels = 14

    Names_Sector = 15

    Macro_GovernmentRiftRouteNames = 16
    Macro_CapitalsAndHomeWorlds = 17
    Mega_GalaxyScaleLabels = 18

    Worlds_Background = 19
    Worlds_Foreground = 20
    Worlds_Overlays = 21

    #------------------------------------------------------------
    # Overlays
    #------------------------------------------------------------

    Overlay_DroyneChirperWorlds = 22
    Overlay_MinorHomeworlds = 23
    Overlay_AncientsWorlds = 24
    Overlay_ReviewStatus = 25

# Base for objects that become read only once they have been fully
# configured. Freezing cascades to any freezable attributes (including ones
# held in lists/tuples) and can't be undone.
class Freezable(object):
    def __init__(self) -> None:
        object.__setattr__(self, '_frozen', False)

    def isFrozen(self) -> bool:
        return getattr(self, '_frozen', False)

    def freeze(self) -> None:
        if self.isFrozen():
            return
        object.__setattr__(self, '_frozen', True)
        for value in vars(self).values():
            if isinstance(value, Freezable):
                value.freeze()
            elif isinstance(value, (list, tuple)):
                for item in value:
                    if isinstance(item, Freezable):
                        item.freeze()

    def __setattr__(self, name: str, value: typing.Any) -> None:
        if self.isFrozen():
            raise AttributeError(
                f'Unable to set {name} as {type(self).__name__} is frozen')
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self.isFrozen():
            raise AttributeError(
                f'Unable to delete {name} as {type(self).__name__} is frozen')
        super().__delattr__(name)

class SizeF(Freezable):
    @typing.overload
    def __init__(self) -> None: ...
    @typing.overload
    def __init__(self, other: 'SizeF') -> None: ...
    @typing.overload
    def __init__(self, width: float, height: float) -> None: ...

    def __init__(self, *args, **kwargs) -> None:
        super().__init__()
        if not args and not kwargs:
            self._width = self._height = 0.0
        elif len(args) + len(kwargs) == 1:
            other = args[0] if len(args) > 0 else kwargs['other']
            if not isinstance(other, SizeF):
                raise TypeError('The other parameter must be a SizeF')
            self._width = other._width
            self._height = other._height
        else:
            self._width = float(args[0] if len(args) > 0 else kwargs['width'])
            self._height = float(args[1] if len(args) > 1 else kwargs['height'])

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, SizeF):
            return self._width == other._width and self._height == other._height
        return NotImplemented

    def __repr__(self) -> str:
        return f'SizeF({self._width}, {self._height})'

    def width(self) -> float:
        return self._width

    def height(self) -> float:
        return self._height

    def size(self) -> typing.Tuple[float, float]:
        return (self._width, self._height)

class PointF(Freezable):
    @typing.overload
    def __init__(self) -> None: ...
    @typing.overload
    def __init__(self, other: 'PointF') -> None: ...
    @typing.overload
    def __init__(self, x: float, y: float) -> None: ...

    def __init__(self, *args, **kwargs) -> None:
        super().__init__()
        if not args and not kwargs:
            self._x = self._y = 0.0
        elif len(args) + len(kwargs) == 1:
            other = args[0] if len(args) > 0 else kwargs['other']
            if not isinstance(other, PointF):
                raise TypeError('The other parameter must be a PointF')
            self._x = other._x
            self._y = other._y
        else:
            self._x = float(args[0] if len(args) > 0 else kwargs['x'])
            self._y = float(args[1] if len(args) > 1 else kwargs['y'])

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, PointF):
            return self._x == other._x and self._y == other._y
        return NotImplemented

    def __repr__(self) -> str:
        return f'PointF({self._x}, {self._y})'

    def x(self) -> float:
        return self._x

    def setX(self, x: float) -> None:
        self._x = float(x)

    def y(self) -> float:
        return self._y

    def setY(self, y: float) -> None:
        self._y = float(y)

    def point(self) -> typing.Tuple[float, float]:
        return (self._x, self._y)

    def setPoint(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = float(y)

class LabelStyle(Freezable):
    def __init__(
            self,
            rotation: float = 0,
            scale: typing.Optional[SizeF] = None,
            translation: typing.Optional[PointF] = None,
            uppercase: bool = False,
            wrap: bool = False
            ) -> None:
        super().__init__()
        self.rotation = rotation
        self.scale = SizeF(scale) if scale else SizeF(width=1, height=1)
        self.translation = PointF(translation) if translation else PointF()
        self.uppercase = uppercase
        self.wrap = wrap

    def copy(self) -> 'LabelStyle':
        return LabelStyle(
            rotation=self.rotation,
            scale=self.scale,
            translation=self.translation,
            uppercase=self.uppercase,
            wrap=self.wrap)

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, LabelStyle):
            return self.rotation == other.rotation and \
                self.scale == other.scale and \
                self.translation == other.translation and \
                self.uppercase == other.uppercase and \
                self.wrap == other.wrap
        return NotImplemented
