import mapstyle
import pytest
import threading
import typing

class FakeWorld(mapstyle.AbstractWorld):
    def __init__(
            self,
            starport: typing.Optional[str] = 'A',
            size: typing.Optional[int] = 7,
            atmosphere: typing.Optional[int] = 6,
            hydrographics: typing.Optional[int] = 5,
            populationExponent: typing.Optional[int] = 8,
            government: typing.Optional[int] = 4,
            law: typing.Optional[int] = 3,
            techLevel: typing.Optional[int] = 12,
            importance: typing.Optional[int] = 2,
            agricultural: bool = False,
            rich: bool = False,
            industrial: bool = False
            ) -> None:
        self._starport = starport
        self._size = size
        self._atmosphere = atmosphere
        self._hydrographics = hydrographics
        self._populationExponent = populationExponent
        self._government = government
        self._law = law
        self._techLevel = techLevel
        self._importance = importance
        self._agricultural = agricultural
        self._rich = rich
        self._industrial = industrial

    def starport(self) -> typing.Optional[str]:
        return self._starport

    def size(self) -> typing.Optional[int]:
        return self._size

    def atmosphere(self) -> typing.Optional[int]:
        return self._atmosphere

    def hydrographics(self) -> typing.Optional[int]:
        return self._hydrographics

    def populationExponent(self) -> typing.Optional[int]:
        return self._populationExponent

    def government(self) -> typing.Optional[int]:
        return self._government

    def law(self) -> typing.Optional[int]:
        return self._law

    def techLevel(self) -> typing.Optional[int]:
        return self._techLevel

    def importance(self) -> typing.Optional[int]:
        return self._importance

    def hasWater(self) -> bool:
        return (self._hydrographics or 0) > 0

    def isAgricultural(self) -> bool:
        return self._agricultural

    def isRich(self) -> bool:
        return self._rich

    def isIndustrial(self) -> bool:
        return self._industrial

    def isVacuum(self) -> bool:
        return self._atmosphere == 0

class FakeFont(mapstyle.AbstractFont):
    def __init__(self, family: str, emSize: float, style: mapstyle.FontStyle) -> None:
        self._family = family
        self._emSize = emSize
        self._style = style

    def family(self) -> str:
        return self._family

    def emSize(self) -> float:
        return self._emSize

    def style(self) -> mapstyle.FontStyle:
        return self._style

# Records every font it's asked to create. Families in the unavailable set
# fail the same way a missing system font would.
class FakeFontFactory(mapstyle.AbstractFontFactory):
    def __init__(self, unavailable: typing.Iterable[str] = ()) -> None:
        self.unavailable = set(unavailable)
        self.created: typing.List[typing.Tuple[str, float, mapstyle.FontStyle]] = []
        self._lock = threading.Lock()

    def createFont(
            self,
            family: str,
            emSize: float,
            style: mapstyle.FontStyle = mapstyle.FontStyle.Regular
            ) -> FakeFont:
        if family in self.unavailable:
            raise ValueError(f'Unknown font "{family}"')
        with self._lock:
            self.created.append((family, emSize, style))
        return FakeFont(family=family, emSize=emSize, style=style)

@pytest.fixture
def fakeWorld() -> typing.Callable[..., FakeWorld]:
    return FakeWorld

@pytest.fixture
def fontFactory() -> FakeFontFactory:
    return FakeFontFactory()

@pytest.fixture
def allOptions() -> mapstyle.MapOptions:
    return mapstyle.MapOptions.SectorGrid | \
        mapstyle.MapOptions.SubsectorGrid | \
        mapstyle.MapOptions.SectorsMask | \
        mapstyle.MapOptions.BordersMask | \
        mapstyle.MapOptions.NamesMask | \
        mapstyle.MapOptions.WorldsMask | \
        mapstyle.MapOptions.WorldColours | \
        mapstyle.MapOptions.FilledBorders
