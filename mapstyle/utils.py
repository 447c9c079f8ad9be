import common
import logging
import mapstyle
import math
import typing

# Supported scale domain. Every threshold used when resolving a style sheet
# falls well inside this range.
MinScale = 1 / 128
MaxScale = 1024

def makeAlphaColour(
        alpha: typing.Union[float, int],
        colour: str,
        isNormalised: bool = False
        ) -> str:
    red, green, blue, _ = mapstyle.parseHtmlColour(htmlColour=colour)

    if isNormalised:
        alpha *= 255

    alpha = int(round(common.clamp(alpha, 0, 255)))
    return f'#{alpha:02X}{red:02X}{green:02X}{blue:02X}'

def floatScaleInterpolate(
        minValue: float,
        maxValue: float,
        scale: float,
        minScale: float,
        maxScale: float
        ) -> float:
    if scale <= minScale:
        return minValue
    if scale >= maxScale:
        return maxValue

    # Scale is a zoom factor so the interpolation is done in log space
    logscale = math.log2(scale)
    logmin = math.log2(minScale)
    logmax = math.log2(maxScale)
    p = (logscale - logmin) / (logmax - logmin)
    return minValue + (maxValue - minValue) * p

def intScaleInterpolate(
        minValue: int,
        maxValue: int,
        scale: float,
        minScale: float,
        maxScale: float
        ) -> int:
    return int(round(floatScaleInterpolate(
        minValue=minValue,
        maxValue=maxValue,
        scale=scale,
        minScale=minScale,
        maxScale=maxScale)))

def colourScaleInterpolate(
        scale: float,
        minScale: float,
        maxScale: float,
        colour: str
        ) -> str:
    alpha = intScaleInterpolate(
        minValue=0,
        maxValue=255,
        scale=scale,
        minScale=minScale,
        maxScale=maxScale)
    return makeAlphaColour(
        alpha=alpha,
        colour=colour)

# Linear cap applied to pen widths when zoomed in past 64. This is
# intentionally not the log interpolation used for opacities.
def penScale(scale: float) -> float:
    return 1 if scale <= 64 else (64 / scale)

def clampScale(scale: typing.Union[float, int]) -> float:
    if isinstance(scale, bool) or not isinstance(scale, (int, float)):
        raise ValueError(f'Scale must be a number ({scale!r})')
    if not math.isfinite(scale) or scale <= 0:
        raise ValueError(f'Scale must be a finite number greater than 0 ({scale})')

    clamped = common.clamp(float(scale), MinScale, MaxScale)
    if clamped != scale:
        logging.debug(f'Clamped scale {scale} to supported range {MinScale} - {MaxScale}')
    return clamped

def mapOptionsFromNames(
        names: typing.Iterable[str]
        ) -> mapstyle.MapOptions:
    options = mapstyle.MapOptions.NoOptions
    for name in names:
        option = common.enumFromName(
            enumType=mapstyle.MapOptions,
            name=name.strip(),
            ignoreCase=True)
        if option is None:
            raise ValueError(f'Unknown map option "{name}"')
        options |= option
    return mapstyle.MapOptions(options)

def mapOptionsToNames(
        options: mapstyle.MapOptions
        ) -> typing.List[str]:
    # Only single bit options are listed, composite masks are implied
    names = []
    for option in mapstyle.MapOptions:
        value = int(option)
        if value and (value & (value - 1)) == 0 and (options & value) == value:
            names.append(option.name)
    return names
