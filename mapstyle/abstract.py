import mapstyle
import typing

# Read only view of a world used when matching highlight patterns and when
# picking world detail colours. Numeric fields return None when the value
# isn't known.
class AbstractWorld(object):
    def starport(self) -> typing.Optional[str]:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement starport')

    def size(self) -> typing.Optional[int]:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement size')

    def atmosphere(self) -> typing.Optional[int]:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement atmosphere')

    def hydrographics(self) -> typing.Optional[int]:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement hydrographics')

    def populationExponent(self) -> typing.Optional[int]:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement populationExponent')

    def government(self) -> typing.Optional[int]:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement government')

    def law(self) -> typing.Optional[int]:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement law')

    def techLevel(self) -> typing.Optional[int]:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement techLevel')

    def importance(self) -> typing.Optional[int]:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement importance')

    def hasWater(self) -> bool:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement hasWater')

    def isAgricultural(self) -> bool:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement isAgricultural')

    def isRich(self) -> bool:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement isRich')

    def isIndustrial(self) -> bool:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement isIndustrial')

    def isVacuum(self) -> bool:
        raise RuntimeError(f'{type(self)} is derived from AbstractWorld so must implement isVacuum')

class AbstractFont(object):
    def family(self) -> str:
        raise RuntimeError(f'{type(self)} is derived from AbstractFont so must implement family')

    def emSize(self) -> float:
        raise RuntimeError(f'{type(self)} is derived from AbstractFont so must implement emSize')

    def style(self) -> mapstyle.FontStyle:
        raise RuntimeError(f'{type(self)} is derived from AbstractFont so must implement style')

class AbstractFontFactory(object):
    # Implementations should raise an exception if the family isn't
    # available so the next family in the fallback list can be tried
    def createFont(
            self,
            family: str,
            emSize: float,
            style: mapstyle.FontStyle = mapstyle.FontStyle.Regular
            ) -> AbstractFont:
        raise RuntimeError(f'{type(self)} is derived from AbstractFontFactory so must implement createFont')
