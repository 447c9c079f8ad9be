import enum
import logging
import mapstyle
import typing

class LayerList(list):
    def __init__(self, other: typing.Optional[typing.Iterable[mapstyle.LayerId]] = None):
        super().__init__()
        if other:
            self.extend(other)

    def copy(self) -> 'LayerList':
        return LayerList(self)

    def moveAfter(self, target: mapstyle.LayerId, item: mapstyle.LayerId) -> None:
        self.remove(item)
        index = self.index(target)
        self.insert(index + 1, item)

class StyleElement(mapstyle.Freezable):
    FontSlots = ('font', 'smallFont', 'mediumFont', 'largeFont')

    def __init__(self) -> None:
        super().__init__()
        self.visible = False
        self.content = ''
        self.linePen: typing.Optional[mapstyle.PenInfo] = None # None means no stroke
        self.fillColour: typing.Optional[str] = None
        self.textColour: typing.Optional[str] = None
        self.textHighlightColour: typing.Optional[str] = None

        self.textStyle = mapstyle.LabelStyle()
        self.textBackgroundStyle = mapstyle.TextBackgroundStyle.NoStyle
        self.font: typing.Optional[mapstyle.FontInfo] = None
        self.smallFont: typing.Optional[mapstyle.FontInfo] = None
        self.mediumFont: typing.Optional[mapstyle.FontInfo] = None
        self.largeFont: typing.Optional[mapstyle.FontInfo] = None
        self.position = mapstyle.PointF()

    def fontInfo(self, slot: str) -> typing.Optional[mapstyle.FontInfo]:
        if slot not in StyleElement.FontSlots:
            raise ValueError(f'Unknown font slot "{slot}"')
        return getattr(self, slot)

    def setFontFamily(self, family: mapstyle.FontFamily) -> None:
        for slot in StyleElement.FontSlots:
            font = getattr(self, slot)
            if font:
                setattr(self, slot, font.derive(family=family))

    def toDict(self) -> typing.Dict[str, typing.Any]:
        return {name: _snapshotValue(value) for name, value in vars(self).items() if name != '_frozen'}

# Values that are derived while building the sheet and shared between the
# scale defaults, the per-style overrides and the final adjustments
class _StyleContext(object):
    def __init__(
            self,
            onePixel: float,
            penScale: float,
            borderPenWidth: float,
            routePenWidth: float
            ) -> None:
        self.onePixel = onePixel
        self.penScale = penScale
        self.borderPenWidth = borderPenWidth
        self.routePenWidth = routePenWidth

        # Generic colours, applied to various elements by default (see
        # _applyFinalAdjustments). May be overridden by specific styles
        self.foregroundColour = mapstyle.HtmlColours.White
        self.lightColour = mapstyle.HtmlColours.LightGray
        self.darkColour = mapstyle.HtmlColours.DarkGray
        self.dimColour = mapstyle.HtmlColours.DimGray
        self.highlightColour = mapstyle.HtmlColours.TravellerRed

        self.fadeSectorSubsectorNames = True

class StyleSheet(mapstyle.Freezable):
    _SectorGridMinScale = 1 / 2 # Below this, no sector grid is shown
    _SectorGridFullScale = 4 # Above this, sector grid opaque
    _SectorNameMinScale = 1
    _SectorNameAllSelectedScale = 4 # At this point, "Selected" == "All"
    _SectorNameMaxScale = 16
    _PseudoRandomStarsMinScale = 1 # Below this, no pseudo-random stars
    _PseudoRandomStarsMaxScale = 4 # Above this, no pseudo-random stars
    _SubsectorsMinScale = 8
    _SubsectorNameMinScale = 24
    _SubsectorNameMaxScale = 64
    _MegaLabelMaxScale = 1 / 4
    _MacroWorldsMinScale = 1 / 2
    _MacroWorldsMaxScale = 4
    _MacroLabelMinScale = 1 / 2
    _MacroLabelMaxScale = 4
    _MacroRouteMinScale = 1 / 2
    _MacroRouteMaxScale = 4
    _MacroBorderMinScale = 1 / 32
    _MicroBorderMinScale = 4
    _MicroNameMinScale = 16
    _RouteMinScale = 8 # Below this, routes not rendered
    _ParsecMinScale = 16 # Below this, parsec edges not rendered
    _ParsecHexMinScale = 48 # Below this, hex numbers not rendered
    _WorldMinScale = 4 # Below this: no worlds; above this: dotmap
    _WorldBasicMinScale = 24 # Above this: atlas-style abbreviated data
    _WorldFullMinScale = 48 # Above this: full poster-style data
    _WorldUwpMinScale = 96 # Above this: UWP shown above name

    _CandyMinWorldNameScale = 64
    _CandyMinUwpScale = 256
    _CandyMaxWorldRelativeScale = 512
    _CandyMaxBorderRelativeScale = 32
    _CandyMaxRouteRelativeScale = 32

    _T5AllegianceCodeMinScale = 64

    # Overlays that show a symbol per world get very slow to draw when zoomed
    # out so they're forced off below this scale
    _WorldSymbolOverlayMinScale = 2

    _DefaultLayerOrder = (
        # Background
        mapstyle.LayerId.Background_Solid,
        mapstyle.LayerId.Background_NebulaTexture,
        mapstyle.LayerId.Background_Galaxy,
        mapstyle.LayerId.Background_PseudoRandomStars,
        mapstyle.LayerId.Background_Rifts,

        # Foreground
        mapstyle.LayerId.Macro_Borders,
        mapstyle.LayerId.Macro_Routes,
        mapstyle.LayerId.Grid_Sector,
        mapstyle.LayerId.Grid_Subsector,
        mapstyle.LayerId.Grid_Parsec,
        mapstyle.LayerId.Names_Subsector,
        mapstyle.LayerId.Micro_BordersBackground,
        mapstyle.LayerId.Micro_BordersForeground,
        mapstyle.LayerId.Micro_Routes,
        mapstyle.LayerId.Micro_BorderExplicitLabels,
        mapstyle.LayerId.Names_Sector,
        mapstyle.LayerId.Macro_GovernmentRiftRouteNames,
        mapstyle.LayerId.Macro_CapitalsAndHomeWorlds,
        mapstyle.LayerId.Mega_GalaxyScaleLabels,
        mapstyle.LayerId.Worlds_Background,
        mapstyle.LayerId.Worlds_Foreground,
        mapstyle.LayerId.Worlds_Overlays,

        # Overlays
        mapstyle.LayerId.Overlay_DroyneChirperWorlds,
        mapstyle.LayerId.Overlay_MinorHomeworlds,
        mapstyle.LayerId.Overlay_AncientsWorlds,
        mapstyle.LayerId.Overlay_ReviewStatus)

    def __init__(
            self,
            scale: float,
            options: typing.Union[mapstyle.MapOptions, int],
            style: mapstyle.MapStyle,
            highlightPattern: typing.Optional[mapstyle.HighlightWorldPattern] = None
            ) -> None:
        super().__init__()

        if not isinstance(style, mapstyle.MapStyle):
            raise ValueError(f'Unknown map style {style!r}')
        if isinstance(options, bool) or not isinstance(options, int) or options < 0:
            raise ValueError(f'Invalid map options {options!r}')
        if highlightPattern is not None and \
                not isinstance(highlightPattern, mapstyle.HighlightWorldPattern):
            raise ValueError(f'Invalid highlight pattern {highlightPattern!r}')

        self._scale = mapstyle.clampScale(scale)
        self._options = mapstyle.MapOptions(options)
        self._style = style
        self._highlightPattern = highlightPattern

        context = self._applyScaleDefaults()
        StyleSheet._StyleOverrides[style](self, context)
        self._applyFinalAdjustments(context)

        self.freeze()

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def options(self) -> mapstyle.MapOptions:
        return self._options

    @property
    def style(self) -> mapstyle.MapStyle:
        return self._style

    @property
    def highlightPattern(self) -> typing.Optional[mapstyle.HighlightWorldPattern]:
        return self._highlightPattern

    @property
    def hasWorldOverlays(self) -> bool:
        return self.populationOverlay.visible or \
            self.importanceOverlay.visible or \
            self.highlightWorlds.visible or \
            self.showStellarOverlay or \
            self.capitalOverlay.visible

    def elements(self) -> typing.Dict[str, StyleElement]:
        return {name: value for name, value in vars(self).items() if isinstance(value, StyleElement)}

    # Returns the pen and brush colours used to draw the disc for a world.
    # Either can be None if that part of the disc shouldn't be drawn.
    def worldColours(
            self,
            world: mapstyle.AbstractWorld
            ) -> typing.Tuple[typing.Optional[str], typing.Optional[str]]:
        if self.showWorldDetailColours:
            element = None
            if world.isAgricultural() and world.isRich():
                element = self.worldRichAgricultural
            elif world.isAgricultural():
                element = self.worldAgricultural
            elif world.isRich():
                element = self.worldRich
            elif world.isIndustrial():
                element = self.worldIndustrial
            elif (world.atmosphere() or 0) > 10:
                element = self.worldHarshAtmosphere
            elif world.isVacuum():
                return (self.worldVacuum.linePen.colour(), self.worldVacuum.fillColour)

            if element:
                return (element.fillColour, element.fillColour)

        element = self.worldWater if world.hasWater() else self.worldNoWater
        return (
            element.linePen.colour() if element.linePen else None,
            element.fillColour)

    # Plain data copy of the resolved sheet, two sheets created from the
    # same inputs produce identical snapshots
    def snapshot(self) -> typing.Dict[str, typing.Any]:
        snapshot = {}
        for name, value in vars(self).items():
            if name == '_frozen':
                continue
            snapshot[name.lstrip('_')] = _snapshotValue(value)
        return snapshot

    def _applyScaleDefaults(self) -> _StyleContext:
        scale = self._scale
        options = self._options

        self.backgroundColour = mapstyle.HtmlColours.Black
        self.imageBorderColour = mapstyle.HtmlColours.LightGray

        self.showNebulaBackground = False
        self.showGalaxyBackground = False
        self.useWorldImages = False
        self.dimUnofficialSectors = False
        self.colourCodeSectorStatus = False

        self.deepBackgroundOpacity = 0.0

        self.grayscale = False
        self.lightBackground = False

        self.showRiftOverlay = False
        self.riftOpacity = 0.0

        self.hexContentScale = 1.0
        self.hexRotation = 0.0

        self.preferredImageFormat = mapstyle.ImageFormat.Png

        self.t5AllegianceCodes = False

        self.highlightWorlds = StyleElement()
        self.droyneWorlds = StyleElement()
        self.ancientsWorlds = StyleElement()
        self.minorHomeWorlds = StyleElement()

        # Worlds
        self.worlds = StyleElement()
        self.showWorldDetailColours = False
        self.populationOverlay = StyleElement()
        self.importanceOverlay = StyleElement()
        self.capitalOverlay = StyleElement()
        self.capitalOverlayAltA = StyleElement()
        self.capitalOverlayAltB = StyleElement()
        self.showStellarOverlay = False

        self.discPosition = mapstyle.PointF(0, 0)
        self.discRadius = 0.1
        self.gasGiantRadius = 0.05
        self.allegiancePosition = mapstyle.PointF(0, 0)
        self.baseTopPosition = mapstyle.PointF(0, 0)
        self.baseBottomPosition = mapstyle.PointF(0, 0)
        self.baseMiddlePosition = mapstyle.PointF(0, 0)

        self.uwp = StyleElement()
        self.starport = StyleElement()

        self.worldDetailLevel = mapstyle.WorldDetailLevel.NoWorlds
        self.worldDetails = mapstyle.WorldDetails.NoDetails
        self.lowerCaseAllegiance = False

        self.wingdingFont: typing.Optional[mapstyle.FontInfo] = None
        self.glyphFont: typing.Optional[mapstyle.FontInfo] = None

        self.showGasGiantRing = False

        self.showTL = False
        self.ignoreBaseBias = False
        self.showZonesAsPerimeters = False

        # Hex Coordinates
        self.hexNumber = StyleElement()
        self.hexCoordinateStyle = mapstyle.HexCoordinateStyle.Sector
        self.numberAllHexes = False

        # Sector Name
        self.sectorName = StyleElement()
        self.showSomeSectorNames = False
        self.showAllSectorNames = False

        self.capitals = StyleElement()
        self.subsectorNames = StyleElement()
        self.greenZone = StyleElement()
        self.amberZone = StyleElement()
        self.redZone = StyleElement()
        self.sectorGrid = StyleElement()
        self.subsectorGrid = StyleElement()
        self.parsecGrid = StyleElement()
        self.worldWater = StyleElement()
        self.worldNoWater = StyleElement()
        self.macroRoutes = StyleElement()
        self.microRoutes = StyleElement()
        self.macroBorders = StyleElement()
        self.microBorders = StyleElement()
        self.macroNames = StyleElement()
        self.megaNames = StyleElement()
        self.pseudoRandomStars = StyleElement()
        self.placeholder = StyleElement()
        self.anomaly = StyleElement()
        self.gasGiant = StyleElement()

        self.worldRichAgricultural = StyleElement()
        self.worldAgricultural = StyleElement()
        self.worldRich = StyleElement()
        self.worldIndustrial = StyleElement()
        self.worldHarshAtmosphere = StyleElement()
        self.worldVacuum = StyleElement()

        self.fillMicroBorders = False
        self.shadeMicroBorders = False
        self.showMicroNames = False
        self.microBorderStyle = mapstyle.MicroBorderStyle.Hex
        self.hexStyle = mapstyle.HexStyle.Hex
        self.overrideLineStyle: typing.Optional[mapstyle.LineStyle] = None

        self.layerOrder = LayerList(StyleSheet._DefaultLayerOrder)

        onePixel = 1.0 / scale

        self.subsectorGrid.visible = (scale >= StyleSheet._SubsectorsMinScale) and \
            ((options & mapstyle.MapOptions.SubsectorGrid) != 0)
        self.sectorGrid.visible = (scale >= StyleSheet._SectorGridMinScale) and \
            ((options & mapstyle.MapOptions.SectorGrid) != 0)
        self.parsecGrid.visible = (scale >= StyleSheet._ParsecMinScale)
        self.showSomeSectorNames = (scale >= StyleSheet._SectorNameMinScale) and \
            (scale <= StyleSheet._SectorNameMaxScale) and \
            options.hasSectorNames()
        self.showAllSectorNames = self.showSomeSectorNames and \
            ((scale >= StyleSheet._SectorNameAllSelectedScale) or \
             ((options & mapstyle.MapOptions.SectorsAll) != 0))
        self.subsectorNames.visible = (scale >= StyleSheet._SubsectorNameMinScale) and \
            (scale <= StyleSheet._SubsectorNameMaxScale) and \
            options.hasSectorNames()

        self.worlds.visible = scale >= StyleSheet._WorldMinScale
        self.pseudoRandomStars.visible = (StyleSheet._PseudoRandomStarsMinScale <= scale) and \
            (scale <= StyleSheet._PseudoRandomStarsMaxScale)
        self.showRiftOverlay = (scale <= StyleSheet._PseudoRandomStarsMaxScale) or \
            (self._style is mapstyle.MapStyle.Candy)

        self.t5AllegianceCodes = scale >= StyleSheet._T5AllegianceCodeMinScale

        self.riftOpacity = mapstyle.floatScaleInterpolate(
            minValue=0,
            maxValue=0.85,
            scale=scale,
            minScale=1 / 4,
            maxScale=4)

        self.deepBackgroundOpacity = mapstyle.floatScaleInterpolate(
            minValue=1,
            maxValue=0,
            scale=scale,
            minScale=1 / 8,
            maxScale=2)

        self.macroRoutes.visible = (scale >= StyleSheet._MacroRouteMinScale) and \
            (scale <= StyleSheet._MacroRouteMaxScale)
        self.macroNames.visible = (scale >= StyleSheet._MacroLabelMinScale) and \
            (scale <= StyleSheet._MacroLabelMaxScale)
        self.megaNames.visible = (scale <= StyleSheet._MegaLabelMaxScale) and \
            options.hasNames()
        self.showMicroNames = (scale >= StyleSheet._MicroNameMinScale) and \
            options.hasNames()
        self.capitals.visible = (scale >= StyleSheet._MacroWorldsMinScale) and \
            (scale <= StyleSheet._MacroWorldsMaxScale)

        # Below the parsec hex scale, outlines are drawn as squares unless
        # hexes are forced
        if ((options & mapstyle.MapOptions.ForceHexes) == 0) and \
                (scale < StyleSheet._ParsecHexMinScale):
            self.hexStyle = mapstyle.HexStyle.Square
        else:
            self.hexStyle = mapstyle.HexStyle.Hex
        self.microBorderStyle = \
            mapstyle.MicroBorderStyle.Square \
            if self.hexStyle is mapstyle.HexStyle.Square else \
            mapstyle.MicroBorderStyle.Hex

        self.macroBorders.visible = (scale >= StyleSheet._MacroBorderMinScale) and \
            (scale < StyleSheet._MicroBorderMinScale) and \
            options.hasBorders()
        self.microBorders.visible = (scale >= StyleSheet._MicroBorderMinScale) and \
            options.hasBorders()
        self.fillMicroBorders = self.microBorders.visible and \
            ((options & mapstyle.MapOptions.FilledBorders) != 0)
        self.microRoutes.visible = (scale >= StyleSheet._RouteMinScale)

        if not self.worlds.visible:
            self.worldDetailLevel = mapstyle.WorldDetailLevel.NoWorlds
            self.worldDetails = mapstyle.WorldDetails.NoDetails
        elif scale < StyleSheet._WorldBasicMinScale:
            self.worldDetailLevel = mapstyle.WorldDetailLevel.Dotmap
            self.worldDetails = mapstyle.WorldDetails.Dotmap
        elif scale < StyleSheet._WorldFullMinScale:
            self.worldDetailLevel = mapstyle.WorldDetailLevel.Atlas
            self.worldDetails = mapstyle.WorldDetails.Atlas
        else:
            self.worldDetailLevel = mapstyle.WorldDetailLevel.Poster
            self.worldDetails = mapstyle.WorldDetails.Poster

        self.discRadius = 0.1 if ((self.worldDetails & mapstyle.WorldDetails.Type) != 0) else 0.2

        self.showWorldDetailColours = \
            self.worldDetailLevel is mapstyle.WorldDetailLevel.Poster and \
            ((options & mapstyle.MapOptions.WorldColours) != 0)
        self.populationOverlay.visible = (options & mapstyle.MapOptions.PopulationOverlay) != 0
        self.importanceOverlay.visible = (options & mapstyle.MapOptions.ImportanceOverlay) != 0
        self.capitalOverlay.visible = (options & mapstyle.MapOptions.CapitalOverlay) != 0
        self.showStellarOverlay = (options & mapstyle.MapOptions.StellarOverlay) != 0
        self.ancientsWorlds.visible = (options & mapstyle.MapOptions.AncientWorlds) != 0
        self.droyneWorlds.visible = (options & mapstyle.MapOptions.DroyneWorlds) != 0
        self.minorHomeWorlds.visible = (options & mapstyle.MapOptions.MinorHomeWorlds) != 0

        if scale < StyleSheet._WorldSymbolOverlayMinScale:
            self.ancientsWorlds.visible = self.droyneWorlds.visible = \
                self.minorHomeWorlds.visible = False

        self.lowerCaseAllegiance = (scale < StyleSheet._WorldFullMinScale)

        self.showGasGiantRing = (scale >= StyleSheet._WorldUwpMinScale)
        self.gasGiant.visible = True

        self.worlds.textBackgroundStyle = mapstyle.TextBackgroundStyle.Rectangle

        self.hexCoordinateStyle = mapstyle.HexCoordinateStyle.Sector
        self.numberAllHexes = False

        self.dimUnofficialSectors = (options & mapstyle.MapOptions.DimUnofficial) != 0
        self.colourCodeSectorStatus = (options & mapstyle.MapOptions.ColourCodeSectorStatus) != 0

        if scale < StyleSheet._WorldFullMinScale:
            # Atlas-style
            x = 0.225
            y = 0.125

            self.baseTopPosition = mapstyle.PointF(-x, -y)
            self.baseBottomPosition = mapstyle.PointF(-x, y)
            self.gasGiant.position = mapstyle.PointF(x, -y)
            self.allegiancePosition = mapstyle.PointF(x, y)

            self.baseMiddlePosition = mapstyle.PointF(
                -0.35 if (options & mapstyle.MapOptions.ForceHexes) != 0 else -0.2,
                0)
            self.starport.position = mapstyle.PointF(0, -0.24)
            self.uwp.position = mapstyle.PointF(0, 0.24)
            self.worlds.position = mapstyle.PointF(0, 0.4)
        else:
            # Poster-style
            x = 0.25
            y = 0.18

            self.baseTopPosition = mapstyle.PointF(-x, -y)
            self.baseBottomPosition = mapstyle.PointF(-x, y)
            self.gasGiant.position = mapstyle.PointF(x, -y)
            self.allegiancePosition = mapstyle.PointF(x, y)

            self.baseMiddlePosition = mapstyle.PointF(-0.35, 0)
            self.starport.position = mapstyle.PointF(0, -0.225)
            self.uwp.position = mapstyle.PointF(0, 0.225)
            self.worlds.position = mapstyle.PointF(0, 0.37) # Don't hide hex bottom, leave room for UWP

        if self.worlds.visible and scale >= StyleSheet._WorldUwpMinScale:
            self.worldDetails |= mapstyle.WorldDetails.Uwp
            self.baseBottomPosition.setY(0.1)
            self.baseMiddlePosition.setY((self.baseBottomPosition.y() + self.baseTopPosition.y()) / 2)
            self.allegiancePosition.setY(0.1)

        if self.worlds.visible:
            fontScale = \
                1 \
                if (scale <= 96) or (self._style is mapstyle.MapStyle.Candy) else \
                96 / min(scale, 192)

            self.worlds.font = mapstyle.FontInfo(
                family=mapstyle.FontFamily.Default,
                emSize=0.2 if scale < StyleSheet._WorldFullMinScale else (0.15 * fontScale),
                style=mapstyle.FontStyle.Bold)
            self.wingdingFont = mapstyle.FontInfo(
                family=mapstyle.FontFamily.Wingdings,
                emSize=0.2 if scale < StyleSheet._WorldFullMinScale else (0.175 * fontScale))
            self.glyphFont = mapstyle.FontInfo(
                family=mapstyle.FontFamily.Glyph,
                emSize=0.175 if scale < StyleSheet._WorldFullMinScale else (0.15 * fontScale),
                style=mapstyle.FontStyle.Bold)

            self.uwp.font = self.hexNumber.font = mapstyle.FontInfo(
                family=mapstyle.FontFamily.Default,
                emSize=0.1 * fontScale)
            self.worlds.smallFont = mapstyle.FontInfo(
                family=mapstyle.FontFamily.Default,
                emSize=0.2 if scale < StyleSheet._WorldFullMinScale else (0.1 * fontScale))
            self.worlds.largeFont = self.worlds.font
            self.starport.font = \
                self.worlds.smallFont \
                if (scale < StyleSheet._WorldFullMinScale) else \
                self.worlds.font

        self.sectorName.font = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=5.5)
        self.subsectorNames.font = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=1.5)

        overlayFontSize = max(onePixel * 12, 0.375)
        self.droyneWorlds.font = self.ancientsWorlds.font = self.minorHomeWorlds.font = \
            mapstyle.FontInfo(family=mapstyle.FontFamily.Default, emSize=overlayFontSize)

        self.droyneWorlds.content = '★☆' # BLACK STAR / WHITE STAR
        self.minorHomeWorlds.content = '✻' # TEARDROP-SPOKED ASTERISK
        self.ancientsWorlds.content = '☀' # BLACK SUN WITH RAYS

        self.microBorders.font = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=0.6 if scale == StyleSheet._MicroNameMinScale else 0.25,
            style=mapstyle.FontStyle.Bold)
        self.microBorders.smallFont = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=0.15,
            style=mapstyle.FontStyle.Bold)
        self.microBorders.largeFont = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=0.75,
            style=mapstyle.FontStyle.Bold)

        self.macroNames.font = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=8 / 1.4,
            style=mapstyle.FontStyle.Bold)
        self.macroNames.smallFont = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=5 / 1.4,
            style=mapstyle.FontStyle.Regular)
        self.macroNames.mediumFont = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=6.5 / 1.4,
            style=mapstyle.FontStyle.Italic)

        megaNameScaleFactor = min(35, 0.75 * onePixel)
        self.megaNames.font = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=24 * megaNameScaleFactor,
            style=mapstyle.FontStyle.Bold)
        self.megaNames.mediumFont = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=22 * megaNameScaleFactor,
            style=mapstyle.FontStyle.Regular)
        self.megaNames.smallFont = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Default,
            emSize=18 * megaNameScaleFactor,
            style=mapstyle.FontStyle.Italic)

        # Cap pen widths when zooming in
        penScale = mapstyle.penScale(scale)

        borderPenWidth = 1
        if scale >= StyleSheet._MicroBorderMinScale and \
                scale >= StyleSheet._ParsecMinScale:
            borderPenWidth = 0.16 * penScale

        routePenWidth = 0.2 if scale <= 16 else (0.08 * penScale)

        context = _StyleContext(
            onePixel=onePixel,
            penScale=penScale,
            borderPenWidth=borderPenWidth,
            routePenWidth=routePenWidth)

        self.capitals.fillColour = mapstyle.HtmlColours.Wheat
        self.capitals.textColour = mapstyle.HtmlColours.TravellerRed
        self.amberZone.visible = self.redZone.visible = True
        self.amberZone.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.TravellerAmber,
            width=0.05 * penScale)
        self.redZone.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.TravellerRed,
            width=0.05 * penScale)
        self.macroBorders.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.TravellerRed,
            width=borderPenWidth)
        self.macroRoutes.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.White,
            width=borderPenWidth,
            style=mapstyle.LineStyle.Dash)
        self.microBorders.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.Gray,
            width=borderPenWidth)
        self.microBorders.textColour = mapstyle.HtmlColours.TravellerAmber
        self.microRoutes.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.Gray,
            width=routePenWidth)

        self.worldWater.fillColour = mapstyle.HtmlColours.DeepSkyBlue
        self.worldWater.linePen = None
        self.worldNoWater.fillColour = mapstyle.HtmlColours.White
        self.worldNoWater.linePen = None

        gridColour = mapstyle.colourScaleInterpolate(
            scale=scale,
            minScale=StyleSheet._SectorGridMinScale,
            maxScale=StyleSheet._SectorGridFullScale,
            colour=mapstyle.HtmlColours.Gray)
        self.parsecGrid.linePen = mapstyle.PenInfo(
            colour=gridColour,
            width=onePixel)
        self.subsectorGrid.linePen = mapstyle.PenInfo(
            colour=gridColour,
            width=onePixel * 2)
        self.sectorGrid.linePen = mapstyle.PenInfo(
            colour=gridColour,
            width=(4 if self.subsectorGrid.visible else 2) * onePixel)

        self.microBorders.textStyle.rotation = 0
        self.microBorders.textStyle.translation = mapstyle.PointF(0, 0)
        self.microBorders.textStyle.scale = mapstyle.SizeF(1.0, 1.0)
        self.microBorders.textStyle.uppercase = False

        self.sectorName.textStyle.rotation = -50 # degrees
        self.sectorName.textStyle.translation = mapstyle.PointF(0, 0)
        self.sectorName.textStyle.scale = mapstyle.SizeF(0.75, 1.0)
        self.sectorName.textStyle.uppercase = False
        self.sectorName.textStyle.wrap = True

        self.subsectorNames.textStyle = self.sectorName.textStyle.copy()

        self.worlds.textStyle.rotation = 0
        self.worlds.textStyle.scale = mapstyle.SizeF(1.0, 1.0)
        self.worlds.textStyle.translation = mapstyle.PointF(self.worlds.position)
        self.worlds.textStyle.uppercase = False

        self.hexNumber.position = mapstyle.PointF(0, -0.5)

        self.showNebulaBackground = False
        self.showGalaxyBackground = self.deepBackgroundOpacity > 0.0
        self.useWorldImages = False

        self.populationOverlay.fillColour = '#80FFFF00'
        self.importanceOverlay.fillColour = '#2080FF00'
        self.highlightWorlds.fillColour = '#80FF0000'

        self.capitalOverlay.fillColour = mapstyle.makeAlphaColour(
            alpha=0x80,
            colour=mapstyle.HtmlColours.TravellerGreen)
        self.capitalOverlayAltA.fillColour = mapstyle.makeAlphaColour(
            alpha=0x80,
            colour=mapstyle.HtmlColours.Blue)
        self.capitalOverlayAltB.fillColour = mapstyle.makeAlphaColour(
            alpha=0x80,
            colour=mapstyle.HtmlColours.TravellerAmber)

        return context

    def _applyPosterStyle(self, context: _StyleContext) -> None:
        pass # This is the default, no changes

    def _applyAtlasStyle(self, context: _StyleContext) -> None:
        self.grayscale = True
        self.lightBackground = True

        self.capitals.fillColour = mapstyle.HtmlColours.DarkGray
        self.capitals.textColour = mapstyle.HtmlColours.Black
        self.amberZone.linePen.setColour(mapstyle.HtmlColours.LightGray)
        self.redZone.linePen.setColour(mapstyle.HtmlColours.Black)
        self.macroBorders.linePen.setColour(mapstyle.HtmlColours.Black)
        self.macroRoutes.linePen.setColour(mapstyle.HtmlColours.Gray)
        self.microBorders.linePen.setColour(mapstyle.HtmlColours.Black)
        self.microRoutes.linePen.setColour(mapstyle.HtmlColours.Gray)

        context.foregroundColour = mapstyle.HtmlColours.Black
        self.backgroundColour = mapstyle.HtmlColours.White
        context.lightColour = mapstyle.HtmlColours.DarkGray
        context.darkColour = mapstyle.HtmlColours.DarkGray
        context.dimColour = mapstyle.HtmlColours.LightGray
        context.highlightColour = mapstyle.HtmlColours.Gray
        self.microBorders.textColour = mapstyle.HtmlColours.Gray
        self.worldWater.fillColour = mapstyle.HtmlColours.Black
        self.worldNoWater.fillColour = mapstyle.HtmlColours.White
        self.worldNoWater.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.Black,
            width=context.onePixel)

        self.riftOpacity = min(self.riftOpacity, 0.70)

        self.showWorldDetailColours = False

        self._applyMutedOverlays(
            context=context,
            populationColour=context.highlightColour,
            importanceColour=context.highlightColour,
            highlightColour=context.highlightColour)

    def _applyFasaStyle(self, context: _StyleContext) -> None:
        self.showGalaxyBackground = False
        self.deepBackgroundOpacity = 0
        self.riftOpacity = 0

        inkColour = '#5C4033'

        context.foregroundColour = inkColour
        self.backgroundColour = mapstyle.HtmlColours.White

        self.grayscale = True
        self.lightBackground = True

        self.capitals.fillColour = inkColour
        self.capitals.textColour = inkColour
        self.amberZone.linePen.setColour(inkColour)
        self.amberZone.linePen.setWidth(context.onePixel * 2)
        self.redZone.linePen = None
        self.redZone.fillColour = mapstyle.makeAlphaColour(
            alpha=0x80,
            colour=inkColour)

        self.macroBorders.linePen.setColour(inkColour)
        self.macroRoutes.linePen.setColour(inkColour)

        self.microBorders.linePen.setColour(inkColour)
        self.microBorders.linePen.setWidth(context.onePixel * 2)
        self.microBorders.font = self.microBorders.font.derive(
            emSize=self.microBorders.font.emSize() * 0.6,
            style=mapstyle.FontStyle.Regular)

        self.microRoutes.linePen.setColour(inkColour)

        context.lightColour = mapstyle.makeAlphaColour(
            alpha=0x80,
            colour=inkColour)
        context.darkColour = inkColour
        context.dimColour = inkColour
        context.highlightColour = inkColour
        self.microBorders.textColour = inkColour
        self.hexStyle = mapstyle.HexStyle.Hex
        self.microBorderStyle = mapstyle.MicroBorderStyle.Curve

        self.parsecGrid.linePen.setColour(context.lightColour)
        self.sectorGrid.linePen.setColour(context.lightColour)
        self.subsectorGrid.linePen.setColour(context.lightColour)

        self.worldWater.fillColour = inkColour
        self.worldNoWater.fillColour = inkColour
        self.worldWater.linePen = None
        self.worldNoWater.linePen = None

        self.showWorldDetailColours = False

        self.worldDetails &= ~mapstyle.WorldDetails.Starport
        self.worldDetails &= ~mapstyle.WorldDetails.Allegiance
        self.worldDetails &= ~mapstyle.WorldDetails.Bases
        self.worldDetails &= ~mapstyle.WorldDetails.GasGiant
        self.worldDetails &= ~mapstyle.WorldDetails.Highlight
        self.worldDetails &= ~mapstyle.WorldDetails.Uwp

        if self.worlds.visible:
            self.worlds.font = self.worlds.font.derive(
                emSize=self.worlds.font.emSize() * 0.85)
            self.worlds.textStyle.translation = mapstyle.PointF(0, 0.25)

        self.numberAllHexes = True
        self.hexCoordinateStyle = mapstyle.HexCoordinateStyle.Subsector
        self.overrideLineStyle = mapstyle.LineStyle.Solid

        self._applyMutedOverlays(
            context=context,
            populationColour=context.highlightColour,
            importanceColour=context.highlightColour,
            highlightColour=context.highlightColour)

    def _applyPrintStyle(self, context: _StyleContext) -> None:
        self.lightBackground = True

        context.foregroundColour = mapstyle.HtmlColours.Black
        self.backgroundColour = mapstyle.HtmlColours.White
        context.lightColour = mapstyle.HtmlColours.DarkGray
        context.darkColour = mapstyle.HtmlColours.DarkGray
        context.dimColour = mapstyle.HtmlColours.LightGray
        self.microRoutes.linePen.setColour(mapstyle.HtmlColours.Gray)

        self.microBorders.textColour = mapstyle.HtmlColours.Brown

        self.amberZone.linePen.setColour(mapstyle.HtmlColours.TravellerAmber)
        self.worldNoWater.fillColour = mapstyle.HtmlColours.White
        self.worldNoWater.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.Black,
            width=context.onePixel)

        self.riftOpacity = min(self.riftOpacity, 0.70)

        self._applyMutedOverlays(
            context=context,
            populationColour=self.populationOverlay.fillColour,
            importanceColour=self.importanceOverlay.fillColour,
            highlightColour=self.highlightWorlds.fillColour)

    def _applyDraftStyle(self, context: _StyleContext) -> None:
        inkOpacity = 0xB0

        self.showGalaxyBackground = False
        self.lightBackground = True

        self.deepBackgroundOpacity = 0

        self.backgroundColour = mapstyle.HtmlColours.AntiqueWhite
        context.foregroundColour = mapstyle.makeAlphaColour(
            alpha=inkOpacity,
            colour=mapstyle.HtmlColours.Black)
        context.highlightColour = mapstyle.makeAlphaColour(
            alpha=inkOpacity,
            colour=mapstyle.HtmlColours.TravellerRed)

        context.lightColour = mapstyle.makeAlphaColour(
            alpha=inkOpacity,
            colour=mapstyle.HtmlColours.DarkCyan)
        context.darkColour = mapstyle.makeAlphaColour(
            alpha=inkOpacity,
            colour=mapstyle.HtmlColours.Black)
        context.dimColour = mapstyle.makeAlphaColour(
            alpha=inkOpacity / 2,
            colour=mapstyle.HtmlColours.Black)

        self.subsectorGrid.linePen.setColour(mapstyle.makeAlphaColour(
            alpha=inkOpacity,
            colour=mapstyle.HtmlColours.Firebrick))

        # The large font is based on the size of the standard font before
        # the standard font is shrunk
        if self.worlds.visible:
            self.worlds.largeFont = self.worlds.font.derive(
                emSize=self.worlds.font.emSize() * 1.25,
                style=self.worlds.largeFont.style() | mapstyle.FontStyle.Underline)
            self.worlds.font = self.worlds.font.derive(
                emSize=self.worlds.font.emSize() * 0.8)
            self.worlds.setFontFamily(mapstyle.FontFamily.Draft)
            self.worlds.textStyle.uppercase = True
            # Not overwriting the parsec grid looks cluttered but it's
            # preferable to boxes behind every name
            self.worlds.textBackgroundStyle = mapstyle.TextBackgroundStyle.NoStyle

            self.starport.setFontFamily(mapstyle.FontFamily.Draft)

        self.macroNames.setFontFamily(mapstyle.FontFamily.Draft)
        self.megaNames.setFontFamily(mapstyle.FontFamily.Draft)

        self.microBorders.setFontFamily(mapstyle.FontFamily.Draft)
        self.microBorders.textStyle.uppercase = True
        self.microBorders.textColour = mapstyle.makeAlphaColour(
            alpha=inkOpacity,
            colour=mapstyle.HtmlColours.Brown)

        self.subsectorNames.setFontFamily(mapstyle.FontFamily.Draft)
        self.subsectorNames.textStyle.uppercase = True
        self.subsectorNames.visible = False

        self.sectorName.setFontFamily(mapstyle.FontFamily.Draft)
        self.sectorName.textStyle.uppercase = True

        self.worldDetails &= ~mapstyle.WorldDetails.Allegiance

        self.microBorders.linePen.setWidth(context.onePixel * 4)
        self.microBorders.linePen.setStyle(mapstyle.LineStyle.Dot)

        self.worldNoWater.fillColour = context.foregroundColour
        self.worldWater.fillColour = None
        self.worldWater.linePen = mapstyle.PenInfo(
            colour=context.foregroundColour,
            width=context.onePixel * 2)

        self.amberZone.linePen.setColour(context.foregroundColour)
        self.amberZone.linePen.setWidth(context.onePixel)
        self.redZone.linePen.setWidth(context.onePixel * 2)

        self.microRoutes.linePen.setColour(mapstyle.HtmlColours.Gray)

        self.parsecGrid.linePen.setColour(context.lightColour)

        self.riftOpacity = min(self.riftOpacity, 0.30)

        self.numberAllHexes = True

        self._applyMutedOverlays(
            context=context,
            populationColour=self.populationOverlay.fillColour,
            importanceColour=self.importanceOverlay.fillColour,
            highlightColour=self.highlightWorlds.fillColour)

    def _applyCandyStyle(self, context: _StyleContext) -> None:
        scale = self._scale

        self.useWorldImages = True
        # Deep navy rather than black so the nebula texture blends into it
        self.backgroundColour = '#0A0A1E'
        self.pseudoRandomStars.visible = False

        self.showNebulaBackground = self.deepBackgroundOpacity < 0.5

        self.hexStyle = mapstyle.HexStyle.NoHex
        self.microBorderStyle = mapstyle.MicroBorderStyle.Curve

        self.sectorGrid.visible = self.sectorGrid.visible and (scale >= 4)
        self.subsectorGrid.visible = self.subsectorGrid.visible and (scale >= 32)
        self.parsecGrid.visible = False

        self.subsectorGrid.linePen.setWidth(0.03 * (64.0 / scale))
        self.subsectorGrid.linePen.setStyle(
            style=mapstyle.LineStyle.Custom,
            pattern=[10.0, 8.0])

        self.sectorGrid.linePen.setWidth(0.03 * (64.0 / scale))
        self.sectorGrid.linePen.setStyle(
            style=mapstyle.LineStyle.Custom,
            pattern=[10.0, 8.0])

        self.worlds.textBackgroundStyle = mapstyle.TextBackgroundStyle.Shadow

        self.worldDetails = self.worldDetails & ~mapstyle.WorldDetails.Starport & \
            ~mapstyle.WorldDetails.Allegiance & ~mapstyle.WorldDetails.Bases & \
            ~mapstyle.WorldDetails.Hex

        if scale < StyleSheet._CandyMinWorldNameScale:
            self.worldDetails &= ~mapstyle.WorldDetails.KeyNames & \
                ~mapstyle.WorldDetails.AllNames
        if scale < StyleSheet._CandyMinUwpScale:
            self.worldDetails &= ~mapstyle.WorldDetails.Uwp

        self.amberZone.linePen.setColour(mapstyle.HtmlColours.Goldenrod)

        self.sectorName.textStyle.rotation = 0
        self.sectorName.textStyle.translation = mapstyle.PointF(0, -0.25)
        self.sectorName.textStyle.scale = mapstyle.SizeF(0.5, 0.25)
        self.sectorName.textStyle.uppercase = True

        self.subsectorNames.textStyle.rotation = 0
        self.subsectorNames.textStyle.translation = mapstyle.PointF(0, -0.25)
        self.subsectorNames.textStyle.scale = mapstyle.SizeF(0.3, 0.15) # Expand
        self.subsectorNames.textStyle.uppercase = True

        self.microBorders.textStyle.rotation = 0
        self.microBorders.textStyle.translation = mapstyle.PointF(0, 0.25)
        self.microBorders.textStyle.scale = mapstyle.SizeF(1.0, 0.5) # Expand
        self.microBorders.textStyle.uppercase = True

        self.microBorders.linePen.setColour(mapstyle.makeAlphaColour(
            alpha=128,
            colour=mapstyle.HtmlColours.TravellerRed))

        self.worlds.textStyle.rotation = 0
        self.worlds.textStyle.scale = mapstyle.SizeF(1, 0.5) # Expand
        self.worlds.textStyle.translation = mapstyle.PointF(0, 0)
        self.worlds.textStyle.uppercase = True

        self.gasGiant.fillColour = context.highlightColour
        self.gasGiant.linePen = mapstyle.PenInfo(
            colour=context.highlightColour,
            width=self.gasGiantRadius / 4)

        if scale > StyleSheet._CandyMaxWorldRelativeScale:
            self.hexContentScale = StyleSheet._CandyMaxWorldRelativeScale / scale

    def _applyTerminalStyle(self, context: _StyleContext) -> None:
        context.fadeSectorSubsectorNames = False
        self.showGalaxyBackground = False
        self.lightBackground = False

        self.backgroundColour = mapstyle.HtmlColours.Black
        context.foregroundColour = mapstyle.HtmlColours.Cyan
        context.highlightColour = mapstyle.HtmlColours.White

        context.lightColour = mapstyle.HtmlColours.LightBlue
        context.darkColour = mapstyle.HtmlColours.DarkBlue
        context.dimColour = mapstyle.HtmlColours.DimGray

        self.subsectorGrid.linePen.setColour(mapstyle.HtmlColours.Cyan)

        # The large font is based on the size of the standard font before
        # the standard font is shrunk
        if self.worlds.visible:
            self.worlds.largeFont = self.worlds.font.derive(
                emSize=self.worlds.font.emSize() * 1.25,
                style=self.worlds.largeFont.style() | mapstyle.FontStyle.Underline)
            self.worlds.font = self.worlds.font.derive(
                emSize=self.worlds.font.emSize() * 0.8)
            self.worlds.setFontFamily(mapstyle.FontFamily.Terminal)
            self.worlds.textStyle.uppercase = True
            self.worlds.textBackgroundStyle = mapstyle.TextBackgroundStyle.NoStyle

            self.starport.setFontFamily(mapstyle.FontFamily.Terminal)

        self.macroNames.setFontFamily(mapstyle.FontFamily.Terminal)
        self.megaNames.setFontFamily(mapstyle.FontFamily.Terminal)

        self.microBorders.setFontFamily(mapstyle.FontFamily.Terminal)
        self.microBorders.font = self.microBorders.font.derive(
            style=self.microBorders.font.style() | mapstyle.FontStyle.Underline)
        self.microBorders.textStyle.uppercase = True
        self.microBorders.linePen.setWidth(context.onePixel * 4)
        self.microBorders.linePen.setStyle(mapstyle.LineStyle.Dot)

        self.sectorName.font = self.sectorName.font.derive(
            family=mapstyle.FontFamily.Terminal,
            emSize=self.sectorName.font.emSize() * 0.5,
            style=self.sectorName.font.style() | mapstyle.FontStyle.Bold)
        self.sectorName.textColour = context.foregroundColour
        self.sectorName.textStyle.scale = mapstyle.SizeF(1, 1)
        self.sectorName.textStyle.rotation = 0
        self.sectorName.textStyle.uppercase = True

        self.subsectorNames.font = self.subsectorNames.font.derive(
            family=mapstyle.FontFamily.Terminal,
            emSize=self.subsectorNames.font.emSize() * 0.5,
            style=self.subsectorNames.font.style() | mapstyle.FontStyle.Bold)
        self.subsectorNames.textColour = context.foregroundColour
        self.subsectorNames.textStyle.scale = mapstyle.SizeF(1, 1)
        self.subsectorNames.textStyle.rotation = 0
        self.subsectorNames.textStyle.uppercase = True

        self.worldNoWater.fillColour = context.foregroundColour
        self.worldWater.fillColour = None
        self.worldWater.linePen = mapstyle.PenInfo(
            colour=context.foregroundColour,
            width=context.onePixel * 2)

        self.amberZone.linePen.setColour(context.foregroundColour)
        self.amberZone.linePen.setWidth(context.onePixel)
        self.redZone.linePen.setWidth(context.onePixel * 2)

        self.microRoutes.linePen.setColour(mapstyle.HtmlColours.Gray)

        self.parsecGrid.linePen.setColour(mapstyle.HtmlColours.Plum)
        self.microBorders.textColour = mapstyle.HtmlColours.Cyan

        self.riftOpacity = min(self.riftOpacity, 0.30)

        self.numberAllHexes = True

        if self._scale >= 64:
            self.subsectorNames.visible = False

    def _applyMongooseStyle(self, context: _StyleContext) -> None:
        self.showGalaxyBackground = False
        self.lightBackground = True
        self.showGasGiantRing = True
        self.showTL = True
        self.ignoreBaseBias = True
        self.shadeMicroBorders = True

        self.layerOrder.moveAfter(
            target=mapstyle.LayerId.Worlds_Background,
            item=mapstyle.LayerId.Micro_BordersForeground)
        self.layerOrder.moveAfter(
            target=mapstyle.LayerId.Worlds_Foreground,
            item=mapstyle.LayerId.Micro_Routes)

        self.deepBackgroundOpacity = 0

        self.backgroundColour = '#E6E7E8'
        context.foregroundColour = mapstyle.HtmlColours.Black
        context.highlightColour = mapstyle.HtmlColours.Red

        context.lightColour = mapstyle.HtmlColours.Black
        context.darkColour = mapstyle.HtmlColours.Black
        context.dimColour = mapstyle.HtmlColours.Gray

        self.sectorGrid.linePen.setColour(context.foregroundColour)
        self.subsectorGrid.linePen.setColour(context.foregroundColour)
        self.parsecGrid.linePen.setColour(context.foregroundColour)

        self.worldDetails &= ~mapstyle.WorldDetails.Allegiance

        if self.worlds.visible:
            self.worlds.font = self.worlds.font.derive(
                family=mapstyle.FontFamily.Mongoose,
                style=mapstyle.FontStyle.Regular)
            self.worlds.smallFont = self.worlds.smallFont.derive(
                family=mapstyle.FontFamily.Mongoose)
            self.worlds.largeFont = self.worlds.largeFont.derive(
                family=mapstyle.FontFamily.Mongoose,
                style=mapstyle.FontStyle.Bold)
            self.worlds.textStyle.uppercase = True
            self.worlds.textStyle.translation = mapstyle.PointF(0, -0.04)
            self.worlds.textBackgroundStyle = mapstyle.TextBackgroundStyle.NoStyle

            self.starport.font = self.starport.font.derive(
                family=mapstyle.FontFamily.Mongoose,
                style=mapstyle.FontStyle.Italic)
            self.starport.position = mapstyle.PointF(0.175, 0.17)

            self.hexNumber.font = self.worlds.font
            self.hexNumber.position.setY(-0.49)

            self.uwp.font = self.hexNumber.font
            self.uwp.textBackgroundStyle = mapstyle.TextBackgroundStyle.Filled
            self.uwp.position = mapstyle.PointF(0, 0.40)
            self.uwp.fillColour = mapstyle.HtmlColours.Black
            self.uwp.textColour = mapstyle.HtmlColours.White

        self.macroNames.setFontFamily(mapstyle.FontFamily.Mongoose)
        self.megaNames.setFontFamily(mapstyle.FontFamily.Mongoose)

        self.microBorders.setFontFamily(mapstyle.FontFamily.Mongoose)
        self.microBorders.textStyle.uppercase = True
        self.microBorders.linePen.setWidth(0.11)
        self.microBorders.linePen.setStyle(mapstyle.LineStyle.Dot)
        self.microBorders.textColour = mapstyle.HtmlColours.DarkSlateGray

        self.sectorName.setFontFamily(mapstyle.FontFamily.Mongoose)
        self.sectorName.textStyle.uppercase = True

        self.subsectorNames.setFontFamily(mapstyle.FontFamily.Mongoose)
        self.subsectorNames.textStyle.uppercase = True
        self.subsectorNames.visible = False

        self.worldWater.fillColour = mapstyle.HtmlColours.MediumBlue
        self.worldNoWater.fillColour = mapstyle.HtmlColours.DarkKhaki
        self.worldWater.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.DarkGray,
            width=context.onePixel * 2)
        self.worldNoWater.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.DarkGray,
            width=context.onePixel * 2)

        self.showZonesAsPerimeters = True

        self.greenZone.visible = True
        self.greenZone.linePen = mapstyle.PenInfo(
            colour='#80C676',
            width=0.05)
        self.amberZone.linePen.setColour('#FBB040')
        self.amberZone.linePen.setWidth(0.05)
        self.redZone.linePen.setColour(mapstyle.HtmlColours.Red)
        self.redZone.linePen.setWidth(0.05)

        self.riftOpacity = min(self.riftOpacity, 0.30)

        self.discRadius = 0.11
        self.gasGiant.position = mapstyle.PointF(0, -0.23)
        self.baseTopPosition = mapstyle.PointF(-0.22, -0.21)
        self.baseMiddlePosition = mapstyle.PointF(-0.32, 0.17)
        self.baseBottomPosition = mapstyle.PointF(0.22, -0.21)
        self.discPosition = mapstyle.PointF(-self.discRadius, 0.16)

    # Population, importance and highlight overlays are drawn translucent
    # with a gray outline on styles intended for printing
    def _applyMutedOverlays(
            self,
            context: _StyleContext,
            populationColour: str,
            importanceColour: str,
            highlightColour: str
            ) -> None:
        self.populationOverlay.fillColour = mapstyle.makeAlphaColour(
            alpha=0x40,
            colour=populationColour)
        self.populationOverlay.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.Gray,
            width=0.03 * context.penScale,
            style=mapstyle.LineStyle.Dash)

        self.importanceOverlay.fillColour = mapstyle.makeAlphaColour(
            alpha=0x20,
            colour=importanceColour)
        self.importanceOverlay.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.Gray,
            width=0.03 * context.penScale,
            style=mapstyle.LineStyle.Dot)

        self.highlightWorlds.fillColour = mapstyle.makeAlphaColour(
            alpha=0x30,
            colour=highlightColour)
        self.highlightWorlds.linePen = mapstyle.PenInfo(
            colour=mapstyle.HtmlColours.Gray,
            width=0.03 * context.penScale,
            style=mapstyle.LineStyle.DashDot)

    def _applyFinalAdjustments(self, context: _StyleContext) -> None:
        scale = self._scale

        if context.fadeSectorSubsectorNames:
            if scale < 16:
                fadeColour = context.foregroundColour
            elif scale < 48:
                fadeColour = context.darkColour
            else:
                fadeColour = context.dimColour

            if not self.sectorName.textColour:
                self.sectorName.textColour = fadeColour
            if not self.subsectorNames.textColour:
                self.subsectorNames.textColour = fadeColour

        if self._style is mapstyle.MapStyle.Candy:
            self.subsectorNames.textColour = self.sectorName.textColour = \
                mapstyle.makeAlphaColour(alpha=128, colour=mapstyle.HtmlColours.Goldenrod)

            self.amberZone.linePen.setWidth(0.035)
            self.redZone.linePen.setWidth(0.035)

            self.microRoutes.linePen.setWidth(
                context.routePenWidth
                if scale < StyleSheet._CandyMaxRouteRelativeScale else
                context.routePenWidth / 2)
            self.macroBorders.linePen.setWidth(
                context.borderPenWidth
                if scale < StyleSheet._CandyMaxBorderRelativeScale else
                context.borderPenWidth / 4)
            self.microBorders.linePen.setWidth(
                context.borderPenWidth
                if scale < StyleSheet._CandyMaxBorderRelativeScale else
                context.borderPenWidth / 4)

        # Lossy compression suits the textured backgrounds used by the candy
        # style, everything else has large areas of flat colour
        self.preferredImageFormat = \
            mapstyle.ImageFormat.Jpeg \
            if self._style is mapstyle.MapStyle.Candy else \
            mapstyle.ImageFormat.Png

        # Base element colours on foreground/light/dim/dark/highlight, if not specified by style.
        if not self.pseudoRandomStars.fillColour:
            self.pseudoRandomStars.fillColour = context.foregroundColour

        if not self.droyneWorlds.textColour:
            self.droyneWorlds.textColour = self.microBorders.textColour
        if not self.minorHomeWorlds.textColour:
            self.minorHomeWorlds.textColour = self.microBorders.textColour
        if not self.ancientsWorlds.textColour:
            self.ancientsWorlds.textColour = self.microBorders.textColour

        for element in (self.megaNames, self.macroNames, self.macroRoutes, self.worlds):
            if not element.textColour:
                element.textColour = context.foregroundColour
            if not element.textHighlightColour:
                element.textHighlightColour = context.highlightColour

        if not self.hexNumber.textColour:
            self.hexNumber.textColour = context.lightColour
        if not self.uwp.textColour:
            self.uwp.textColour = context.foregroundColour
        self.imageBorderColour = context.lightColour

        self.placeholder.content = '*'
        self.placeholder.font = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Placeholder,
            emSize=0.6)
        self.placeholder.textColour = context.foregroundColour
        self.placeholder.position = mapstyle.PointF(0, 0.17)

        self.anomaly.content = '⌖' # POSITION INDICATOR
        self.anomaly.font = mapstyle.FontInfo(
            family=mapstyle.FontFamily.Anomaly,
            emSize=0.6)
        self.anomaly.textColour = context.highlightColour

        if not self.gasGiant.fillColour:
            self.gasGiant.fillColour = self.worlds.textColour
        if not self.gasGiant.linePen:
            self.gasGiant.linePen = mapstyle.PenInfo(
                colour=self.worlds.textColour,
                width=self.gasGiantRadius / 4)

        if self.showWorldDetailColours:
            self.worldRichAgricultural.fillColour = mapstyle.HtmlColours.TravellerAmber
            self.worldAgricultural.fillColour = mapstyle.HtmlColours.TravellerGreen
            self.worldRich.fillColour = mapstyle.HtmlColours.Purple
            self.worldIndustrial.fillColour = '#888888' # Gray
            self.worldHarshAtmosphere.fillColour = '#CC6626' # Rust
            self.worldVacuum.fillColour = mapstyle.HtmlColours.Black
            waterPen = self.worldWater.linePen
            self.worldVacuum.linePen = mapstyle.PenInfo(
                colour=mapstyle.HtmlColours.White,
                width=waterPen.width() if waterPen else context.onePixel,
                style=waterPen.style() if waterPen else mapstyle.LineStyle.Solid,
                pattern=waterPen.pattern() if waterPen else None)

        self.highlightWorlds.visible = \
            self._highlightPattern is not None and self.worlds.visible

        self.layerOrder = tuple(self.layerOrder)

        logging.debug(
            f'Resolved {self._style.name} style sheet for scale {scale} with options 0x{int(self._options):X}')

    _StyleOverrides: typing.Dict[
        mapstyle.MapStyle,
        typing.Callable[['StyleSheet', _StyleContext], None]] = {
            mapstyle.MapStyle.Poster: _applyPosterStyle,
            mapstyle.MapStyle.Atlas: _applyAtlasStyle,
            mapstyle.MapStyle.Fasa: _applyFasaStyle,
            mapstyle.MapStyle.Print: _applyPrintStyle,
            mapstyle.MapStyle.Draft: _applyDraftStyle,
            mapstyle.MapStyle.Candy: _applyCandyStyle,
            mapstyle.MapStyle.Terminal: _applyTerminalStyle,
            mapstyle.MapStyle.Mongoose: _applyMongooseStyle}

def resolve(
        scale: float,
        options: typing.Union[mapstyle.MapOptions, int],
        style: mapstyle.MapStyle,
        highlightPattern: typing.Optional[mapstyle.HighlightWorldPattern] = None
        ) -> StyleSheet:
    return StyleSheet(
        scale=scale,
        options=options,
        style=style,
        highlightPattern=highlightPattern)

def _snapshotValue(value: typing.Any) -> typing.Any:
    if isinstance(value, StyleElement):
        return value.toDict()
    if isinstance(value, (mapstyle.FontInfo, mapstyle.PenInfo)):
        return value.toDict()
    if isinstance(value, mapstyle.PointF):
        return list(value.point())
    if isinstance(value, mapstyle.SizeF):
        return list(value.size())
    if isinstance(value, mapstyle.LabelStyle):
        return {
            'rotation': value.rotation,
            'scale': list(value.scale.size()),
            'translation': list(value.translation.point()),
            'uppercase': value.uppercase,
            'wrap': value.wrap}
    if isinstance(value, enum.IntFlag):
        return int(value)
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, (list, tuple)):
        return [_snapshotValue(item) for item in value]
    if isinstance(value, mapstyle.HighlightWorldPattern):
        return {
            'field': value.field().name,
            'min': value.min(),
            'max': value.max()}
    return value
