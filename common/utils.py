import enum
import math
import typing

def clamp(
        value: typing.Union[float, int],
        minValue: typing.Union[float, int],
        maxValue: typing.Union[float, int]
        ) -> typing.Union[float, int]:
    return max(minValue, min(value, maxValue))

def minmax(
        a: typing.Union[float, int],
        b: typing.Union[float, int]
        ) -> typing.Tuple[typing.Union[float, int], typing.Union[float, int]]:
    return (a, b) if a <= b else (b, a)

def isFiniteNumber(value: typing.Any) -> bool:
    # bool is an int subclass but passing one where a number is expected is
    # almost certainly a mistake
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)

# Returns the public, non-callable class level variables of a class. Used to
# build lookup tables from classes that are just collections of constants
def getClassVariables(
        classType: typing.Type[typing.Any],
        includeBaseClasses: bool = False
        ) -> typing.Dict[str, typing.Any]:
    types = reversed(classType.__mro__) if includeBaseClasses else [classType]
    variables = {}
    for currentType in types:
        for name, value in vars(currentType).items():
            if name.startswith('_') or callable(value) or isinstance(value, (staticmethod, classmethod, property)):
                continue
            variables[name] = value
    return variables

def enumFromName(
        enumType: typing.Type[enum.Enum],
        name: str,
        ignoreCase: bool = False
        ) -> typing.Optional[enum.Enum]:
    if name in enumType.__members__:
        return enumType.__members__[name]
    if ignoreCase:
        lowerName = name.lower()
        for memberName, member in enumType.__members__.items():
            if memberName.lower() == lowerName:
                return member
    return None
