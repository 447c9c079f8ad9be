from mapstyle.primitives import LineStyle, FontStyle, TextBackgroundStyle, MicroBorderStyle, \
    HexStyle, HexCoordinateStyle, ImageFormat, MapOptions, WorldDetails, WorldDetailLevel, \
    LayerId, Freezable, SizeF, PointF, LabelStyle
from mapstyle.mapstyle import MapStyle, isLightStyle, isDarkStyle, mapStyleFromName
from mapstyle.colour import HtmlColours, parseHtmlColour, formatHtmlColour, validateHtmlColour
from mapstyle.utils import MinScale, MaxScale, makeAlphaColour, \
    floatScaleInterpolate, intScaleInterpolate, colourScaleInterpolate, penScale, clampScale, \
    mapOptionsFromNames, mapOptionsToNames
from mapstyle.styleinfo import FontFamily, FontInfo, PenInfo
from mapstyle.abstract import AbstractWorld, AbstractFont, AbstractFontFactory
from mapstyle.highlight import HighlightWorldPattern
from mapstyle.stylesheet import LayerList, StyleElement, StyleSheet, resolve
from mapstyle.fontcache import FontCache, defaultFontFamilies, splitFontFamilies
from mapstyle.stylecache import StyleSheetCache
from mapstyle.qtfont import QtFont, QtFontFactory
