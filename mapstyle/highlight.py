import enum
import logging
import mapstyle
import re
import typing

# Matches worlds where a single UWP style field falls within an inclusive
# range. Patterns are written as a field alias followed by a range, e.g.
#   P8    population exactly 8
#   P8+   population 8 or more
#   T9-   tech level 9 or less
#   A4-9  atmosphere between 4 and 9
# Starport ranges use the rank of the starport class (X=0, E=1 ... A=5).
class HighlightWorldPattern(object):
    class Field(enum.Enum):
        Starport = 0
        Size = 1
        Atmosphere = 2
        Hydrographics = 3
        Population = 4
        Government = 5
        Law = 6
        TechLevel = 7
        Importance = 8

    _StarportRanks = 'XEDCBA'

    _FieldAliasMap = {
        'st': Field.Starport,
        's': Field.Size,
        'a': Field.Atmosphere,
        'h': Field.Hydrographics,
        'p': Field.Population,
        'g': Field.Government,
        'l': Field.Law,
        't': Field.TechLevel,
        'ix': Field.Importance}

    # Values are limited to the range of a 32 bit signed int
    _MinValue = -(2 ** 31)
    _MaxValue = (2 ** 31) - 1

    # Order matters, it's the order the patterns are tried in. Values can
    # have an optional sign (e.g. P+8, IX-3--1)
    _ExactPattern = re.compile(r'^([A-Za-z]+)([+-]?\d+)$', re.ASCII)
    _MinPattern = re.compile(r'^([A-Za-z]+)([+-]?\d+)\+$', re.ASCII)
    _MaxPattern = re.compile(r'^([A-Za-z]+)([+-]?\d+)\-$', re.ASCII)
    _RangePattern = re.compile(r'^([A-Za-z]+)([+-]?\d+)\-([+-]?\d+)$', re.ASCII)

    def __init__(
            self,
            field: 'HighlightWorldPattern.Field',
            min: typing.Optional[int] = None,
            max: typing.Optional[int] = None
            ) -> None:
        if not isinstance(field, HighlightWorldPattern.Field):
            raise ValueError(f'Invalid highlight field {field!r}')
        if min is None and max is None:
            raise ValueError('A highlight pattern must have a minimum and/or maximum value')

        self._field = field
        self._min = int(min) if min is not None else None
        self._max = int(max) if max is not None else None

    def field(self) -> 'HighlightWorldPattern.Field':
        return self._field

    def min(self) -> typing.Optional[int]:
        return self._min

    def max(self) -> typing.Optional[int]:
        return self._max

    def matches(self, world: mapstyle.AbstractWorld) -> bool:
        value = self._fieldValue(world=world)
        if value is None:
            return False
        return self._inRange(value=value)

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, HighlightWorldPattern):
            return self._field == other._field and \
                self._min == other._min and \
                self._max == other._max
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._field, self._min, self._max))

    def __repr__(self) -> str:
        return f'HighlightWorldPattern({self._field.name}, min={self._min}, max={self._max})'

    def __setattr__(self, name: str, value: typing.Any) -> None:
        # Patterns are used as cache keys so can't change once created
        if hasattr(self, '_max'):
            raise AttributeError(f'Unable to set {name} as HighlightWorldPattern is immutable')
        super().__setattr__(name, value)

    @staticmethod
    def parse(text: typing.Optional[str]) -> typing.Optional['HighlightWorldPattern']:
        if text is None or not text.strip():
            # Nothing to highlight, this isn't an error
            return None
        text = text.strip()

        match = HighlightWorldPattern._ExactPattern.match(text)
        if match:
            field = HighlightWorldPattern._parseField(match.group(1))
            value = HighlightWorldPattern._parseValue(match.group(2))
            if field is not None and value is not None:
                return HighlightWorldPattern(field=field, min=value, max=value)
            return HighlightWorldPattern._parseFailed(text)

        match = HighlightWorldPattern._MinPattern.match(text)
        if match:
            field = HighlightWorldPattern._parseField(match.group(1))
            value = HighlightWorldPattern._parseValue(match.group(2))
            if field is not None and value is not None:
                return HighlightWorldPattern(field=field, min=value)
            return HighlightWorldPattern._parseFailed(text)

        match = HighlightWorldPattern._MaxPattern.match(text)
        if match:
            field = HighlightWorldPattern._parseField(match.group(1))
            value = HighlightWorldPattern._parseValue(match.group(2))
            if field is not None and value is not None:
                return HighlightWorldPattern(field=field, max=value)
            return HighlightWorldPattern._parseFailed(text)

        match = HighlightWorldPattern._RangePattern.match(text)
        if match:
            field = HighlightWorldPattern._parseField(match.group(1))
            minValue = HighlightWorldPattern._parseValue(match.group(2))
            maxValue = HighlightWorldPattern._parseValue(match.group(3))
            if field is not None and minValue is not None and maxValue is not None:
                return HighlightWorldPattern(field=field, min=minValue, max=maxValue)
            return HighlightWorldPattern._parseFailed(text)

        return HighlightWorldPattern._parseFailed(text)

    def _inRange(self, value: int) -> bool:
        if self._min is not None and value < self._min:
            return False
        if self._max is not None and value > self._max:
            return False
        return True

    def _fieldValue(self, world: mapstyle.AbstractWorld) -> typing.Optional[int]:
        if self._field is HighlightWorldPattern.Field.Starport:
            code = world.starport()
            if not code or len(code) != 1:
                return None
            rank = HighlightWorldPattern._StarportRanks.find(code.upper())
            return rank if rank >= 0 else None
        elif self._field is HighlightWorldPattern.Field.Size:
            return world.size()
        elif self._field is HighlightWorldPattern.Field.Atmosphere:
            return world.atmosphere()
        elif self._field is HighlightWorldPattern.Field.Hydrographics:
            return world.hydrographics()
        elif self._field is HighlightWorldPattern.Field.Population:
            return world.populationExponent()
        elif self._field is HighlightWorldPattern.Field.Government:
            return world.government()
        elif self._field is HighlightWorldPattern.Field.Law:
            return world.law()
        elif self._field is HighlightWorldPattern.Field.TechLevel:
            return world.techLevel()
        elif self._field is HighlightWorldPattern.Field.Importance:
            return world.importance()

        raise RuntimeError(f'Unknown highlight field {self._field}')

    @staticmethod
    def _parseField(alias: str) -> typing.Optional['HighlightWorldPattern.Field']:
        return HighlightWorldPattern._FieldAliasMap.get(alias.lower())

    @staticmethod
    def _parseValue(text: str) -> typing.Optional[int]:
        value = int(text)
        if value < HighlightWorldPattern._MinValue or value > HighlightWorldPattern._MaxValue:
            return None
        return value

    @staticmethod
    def _parseFailed(text: str) -> None:
        logging.debug(f'Ignoring invalid highlight pattern "{text}"')
        return None
