import common
import enum
import typing

def validateMandatoryFloat(
        name: str,
        value: typing.Union[int, float],
        min: typing.Optional[typing.Union[int, float]] = None,
        max: typing.Optional[typing.Union[int, float]] = None,
        validationFn: typing.Optional[typing.Callable[[str, typing.Union[int, float]], typing.Any]] = None
        ) -> typing.Union[int, float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'{name} must be an int or float')

    if not common.isFiniteNumber(value):
        raise ValueError(f'{name} must be a finite number')

    if min is not None and max is not None and (value < min or value > max):
        raise ValueError(f'{name} must be in the range {min} to {max}')
    elif min is not None and value < min:
        raise ValueError(f'{name} must be >= {min}')
    elif max is not None and value > max:
        raise ValueError(f'{name} must be <= {max}')

    if validationFn is not None:
        validationFn(name, value)

    return value

def validatePositiveFloat(
        name: str,
        value: typing.Union[int, float]
        ) -> typing.Union[int, float]:
    validateMandatoryFloat(name=name, value=value)
    if value <= 0:
        raise ValueError(f'{name} must be > 0')
    return value

def validateMandatoryStr(
        name: str,
        value: str,
        allowEmpty: bool = True
        ) -> str:
    if not isinstance(value, str):
        raise TypeError(f'{name} must be a str')

    if not allowEmpty and not value:
        raise ValueError(f'{name} must not be empty')

    return value

def validateMandatoryEnum(
        name: str,
        value: enum.Enum,
        enumType: typing.Type[enum.Enum]
        ) -> enum.Enum:
    if not isinstance(value, enumType):
        raise ValueError(f'{name} must be a {enumType.__name__} ({value!r})')
    return value

def validateMandatoryCollection(
        name: str,
        value: typing.Collection[typing.Any],
        allowEmpty: bool = True,
        validationFn: typing.Optional[typing.Callable[[str, typing.Any], typing.Any]] = None
        ) -> typing.Collection[typing.Any]:
    if isinstance(value, str) or not isinstance(value, typing.Collection):
        raise TypeError(f'{name} must be a collection')

    if not allowEmpty and not value:
        raise ValueError(f'{name} must not be empty')

    if validationFn is not None:
        for item in value:
            validationFn(name, item)

    return value
