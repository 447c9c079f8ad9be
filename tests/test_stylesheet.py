import json
import mapstyle
import pytest

Scales = [2 ** (exponent / 2) for exponent in range(-14, 21)]

def test_returns_frozen_fresh_instances():
    first = mapstyle.resolve(64, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster)
    second = mapstyle.resolve(64, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster)
    assert first is not second
    assert first.isFrozen()
    assert first.snapshot() == second.snapshot()

@pytest.mark.parametrize('style', list(mapstyle.MapStyle))
@pytest.mark.parametrize('scale', [1 / 16, 1, 6, 24, 48, 64, 96, 192, 1024])
def test_resolution_is_deterministic(style, scale, allOptions):
    pattern = mapstyle.HighlightWorldPattern.parse('P8+')
    first = mapstyle.resolve(scale, allOptions, style, pattern)
    second = mapstyle.StyleSheet(scale=scale, options=allOptions, style=style, highlightPattern=pattern)
    assert first.snapshot() == second.snapshot()

def test_snapshot_is_plain_data(allOptions):
    pattern = mapstyle.HighlightWorldPattern.parse('A4-9')
    sheet = mapstyle.resolve(96, allOptions, mapstyle.MapStyle.Candy, pattern)
    snapshot = sheet.snapshot()
    assert json.loads(json.dumps(snapshot)) == snapshot
    assert snapshot['style'] == 'Candy'
    assert snapshot['options'] == int(allOptions)
    assert snapshot['highlightPattern'] == {'field': 'Atmosphere', 'min': 4, 'max': 9}
    assert snapshot['worlds']['textStyle']['uppercase'] is True

def test_frozen_sheet_rejects_mutation():
    sheet = mapstyle.resolve(64, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster)
    with pytest.raises(AttributeError):
        sheet.backgroundColour = mapstyle.HtmlColours.White
    with pytest.raises(AttributeError):
        sheet.worlds.visible = False
    with pytest.raises(AttributeError):
        sheet.amberZone.linePen.setWidth(1)
    with pytest.raises(AttributeError):
        sheet.worlds.position.setX(1)
    with pytest.raises(AttributeError):
        sheet.sectorName.textStyle.rotation = 0
    with pytest.raises(AttributeError):
        sheet.scale = 32

@pytest.mark.parametrize('style', [None, 'Poster', 3])
def test_unknown_style_raises(style):
    with pytest.raises(ValueError):
        mapstyle.resolve(64, mapstyle.MapOptions.NoOptions, style)

@pytest.mark.parametrize('options', [-1, '1', None, 1.5, True])
def test_invalid_options_raise(options):
    with pytest.raises(ValueError):
        mapstyle.resolve(64, options, mapstyle.MapStyle.Poster)

@pytest.mark.parametrize('scale', [0, -4, float('nan'), float('inf')])
def test_invalid_scale_raises(scale):
    with pytest.raises(ValueError):
        mapstyle.resolve(scale, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster)

def test_out_of_range_scale_is_clamped():
    sheet = mapstyle.resolve(1e6, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster)
    assert sheet.scale == mapstyle.MaxScale
    sheet = mapstyle.resolve(1e-6, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster)
    assert sheet.scale == mapstyle.MinScale

def test_raw_integer_options_are_accepted():
    sheet = mapstyle.resolve(64, 0x0001 | 0x0002, mapstyle.MapStyle.Poster)
    assert isinstance(sheet.options, mapstyle.MapOptions)
    assert sheet.subsectorGrid.visible
    assert sheet.sectorGrid.visible

@pytest.mark.parametrize('style', list(mapstyle.MapStyle))
def test_subsector_grid_visibility_is_monotonic(style):
    visible = [
        mapstyle.resolve(scale, mapstyle.MapOptions.SubsectorGrid, style).subsectorGrid.visible
        for scale in Scales]
    assert visible == sorted(visible)
    assert visible[-1]

def test_subsector_grid_needs_option():
    for scale in Scales:
        sheet = mapstyle.resolve(scale, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster)
        assert not sheet.subsectorGrid.visible

def test_world_detail_levels_partition_scale():
    expected = [
        (1, mapstyle.WorldDetailLevel.NoWorlds),
        (3.99, mapstyle.WorldDetailLevel.NoWorlds),
        (4, mapstyle.WorldDetailLevel.Dotmap),
        (23.99, mapstyle.WorldDetailLevel.Dotmap),
        (24, mapstyle.WorldDetailLevel.Atlas),
        (47.99, mapstyle.WorldDetailLevel.Atlas),
        (48, mapstyle.WorldDetailLevel.Poster),
        (1024, mapstyle.WorldDetailLevel.Poster)]
    for scale, level in expected:
        sheet = mapstyle.resolve(scale, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster)
        assert sheet.worldDetailLevel is level, scale
        assert sheet.worlds.visible == (level is not mapstyle.WorldDetailLevel.NoWorlds)

    levels = [
        mapstyle.resolve(scale, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster).worldDetailLevel.value
        for scale in Scales]
    assert levels == sorted(levels)

def test_poster_details_are_superset_of_atlas():
    atlas = mapstyle.resolve(24, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster).worldDetails
    poster = mapstyle.resolve(48, mapstyle.MapOptions.NoOptions, mapstyle.MapStyle.Poster).worldDetails
    assert atlas == mapstyle.WorldDetails.Atlas
    assert poster == mapstyle.WorldDetails.Poster
    assert (poster & atlas) == atlas
    assert poster != atlas

def test_uwp_detail_from_scale_96():
    assert not (mapstyle.resolve(95, 0, mapstyle.MapStyle.Poster).worldDetails & mapstyle.WorldDetails.Uwp)
    sheet = mapstyle.resolve(96, 0, mapstyle.MapStyle.Poster)
    assert sheet.worldDetails & mapstyle.WorldDetails.Uwp
    assert sheet.baseBottomPosition.y() == pytest.approx(0.1)
    assert sheet.baseMiddlePosition.y() == pytest.approx(-0.04)
    assert sheet.allegiancePosition.y() == pytest.approx(0.1)
    assert sheet.showGasGiantRing

@pytest.mark.parametrize('style', list(mapstyle.MapStyle))
def test_every_pen_has_positive_width(style, allOptions):
    optionSets = [
        mapstyle.MapOptions.NoOptions,
        allOptions,
        allOptions | mapstyle.MapOptions.ForceHexes | mapstyle.MapOptions.PopulationOverlay]
    for options in optionSets:
        for scale in Scales:
            sheet = mapstyle.resolve(scale, options, style, mapstyle.HighlightWorldPattern.parse('P8'))
            for name, element in sheet.elements().items():
                if element.linePen:
                    assert element.linePen.width() > 0, (style, scale, name)

def test_low_scale_scenario():
    options = mapstyle.MapOptions.SectorGrid | \
        mapstyle.MapOptions.SectorsSelected | \
        mapstyle.MapOptions.BordersMajor
    sheet = mapstyle.resolve(1, options, mapstyle.MapStyle.Poster)

    assert sheet.sectorGrid.visible
    assert not sheet.subsectorGrid.visible
    assert not sheet.parsecGrid.visible
    assert sheet.showSomeSectorNames
    assert not sheet.showAllSectorNames
    assert not sheet.worlds.visible
    assert sheet.worldDetails == mapstyle.WorldDetails.NoDetails
    assert sheet.pseudoRandomStars.visible
    assert sheet.macroBorders.visible
    assert not sheet.microBorders.visible
    assert sheet.macroRoutes.visible
    assert sheet.capitals.visible
    assert not sheet.megaNames.visible
    assert sheet.showRiftOverlay
    assert sheet.riftOpacity == pytest.approx(0.425)
    assert sheet.deepBackgroundOpacity == pytest.approx(0.25)
    assert sheet.showGalaxyBackground
    assert sheet.hexStyle is mapstyle.HexStyle.Square
    assert sheet.microBorderStyle is mapstyle.MicroBorderStyle.Square
    assert sheet.sectorGrid.linePen.colour() == '#55808080'
    assert sheet.sectorGrid.linePen.width() == pytest.approx(2)
    assert sheet.sectorName.textColour == mapstyle.HtmlColours.White
    assert sheet.wingdingFont is None
    assert sheet.worlds.font is None
    assert sheet.preferredImageFormat is mapstyle.ImageFormat.Png

def test_poster_scenario_at_64(allOptions):
    sheet = mapstyle.resolve(64, allOptions, mapstyle.MapStyle.Poster)

    assert sheet.worldDetailLevel is mapstyle.WorldDetailLevel.Poster
    assert sheet.worldDetails == mapstyle.WorldDetails.Poster
    assert sheet.showWorldDetailColours
    assert sheet.hexStyle is mapstyle.HexStyle.Hex
    assert sheet.parsecGrid.visible
    assert sheet.subsectorGrid.visible
    assert sheet.subsectorNames.visible
    assert sheet.showMicroNames
    assert sheet.t5AllegianceCodes
    assert not sheet.lowerCaseAllegiance
    assert sheet.microRoutes.visible
    assert not sheet.macroRoutes.visible
    assert sheet.microBorders.visible
    assert sheet.fillMicroBorders
    assert sheet.sectorGrid.linePen.width() == pytest.approx(4 / 64)
    assert sheet.microBorders.linePen.width() == pytest.approx(0.16)
    assert sheet.microRoutes.linePen.width() == pytest.approx(0.08)
    assert sheet.amberZone.linePen.width() == pytest.approx(0.05)
    assert sheet.redZone.linePen.colour() == mapstyle.HtmlColours.TravellerRed
    assert sheet.worlds.font.emSize() == pytest.approx(0.15)
    assert sheet.worlds.font.style() == mapstyle.FontStyle.Bold
    assert sheet.starport.font == sheet.worlds.font
    assert sheet.sectorName.textColour == mapstyle.HtmlColours.DimGray
    assert sheet.worlds.textColour == mapstyle.HtmlColours.White
    assert sheet.worlds.textHighlightColour == mapstyle.HtmlColours.TravellerRed
    assert sheet.hexNumber.textColour == mapstyle.HtmlColours.LightGray
    assert sheet.imageBorderColour == mapstyle.HtmlColours.LightGray
    assert sheet.gasGiant.fillColour == mapstyle.HtmlColours.White
    assert sheet.starport.position == mapstyle.PointF(0, -0.225)
    assert sheet.worlds.textStyle.translation == sheet.worlds.position
    assert sheet.layerOrder == mapstyle.StyleSheet._DefaultLayerOrder

def test_zoomed_in_pens_and_fonts_shrink():
    sheet = mapstyle.resolve(128, 0, mapstyle.MapStyle.Poster)
    assert sheet.microBorders.linePen.width() == pytest.approx(0.08)
    assert sheet.microRoutes.linePen.width() == pytest.approx(0.04)
    assert sheet.redZone.linePen.width() == pytest.approx(0.025)

    sheet = mapstyle.resolve(192, 0, mapstyle.MapStyle.Poster)
    assert sheet.worlds.font.emSize() == pytest.approx(0.075)

    # Candy doesn't shrink fonts
    sheet = mapstyle.resolve(192, 0, mapstyle.MapStyle.Candy)
    assert sheet.worlds.font.emSize() == pytest.approx(0.15)

def test_dotmap_fonts():
    sheet = mapstyle.resolve(6, 0, mapstyle.MapStyle.Poster)
    assert sheet.worlds.font.emSize() == pytest.approx(0.2)
    assert sheet.worlds.smallFont.emSize() == pytest.approx(0.2)
    assert sheet.starport.font == sheet.worlds.smallFont
    assert sheet.wingdingFont.family() is mapstyle.FontFamily.Wingdings
    assert sheet.glyphFont.family() is mapstyle.FontFamily.Glyph

def test_micro_border_font_size_at_micro_name_scale():
    assert mapstyle.resolve(16, 0, mapstyle.MapStyle.Poster).microBorders.font.emSize() == pytest.approx(0.6)
    assert mapstyle.resolve(17, 0, mapstyle.MapStyle.Poster).microBorders.font.emSize() == pytest.approx(0.25)

def test_mega_name_fonts_scale_with_pixel_size():
    sheet = mapstyle.resolve(1 / 8, mapstyle.MapOptions.NamesMajor, mapstyle.MapStyle.Poster)
    assert sheet.megaNames.visible
    assert sheet.megaNames.font.emSize() == pytest.approx(24 * 6)
    assert sheet.megaNames.mediumFont.emSize() == pytest.approx(22 * 6)
    assert sheet.megaNames.smallFont.style() == mapstyle.FontStyle.Italic

def test_atlas_glyph_positions():
    sheet = mapstyle.resolve(24, 0, mapstyle.MapStyle.Poster)
    assert sheet.starport.position == mapstyle.PointF(0, -0.24)
    assert sheet.uwp.position == mapstyle.PointF(0, 0.24)
    assert sheet.worlds.position == mapstyle.PointF(0, 0.4)
    assert sheet.baseMiddlePosition.x() == pytest.approx(-0.2)

    sheet = mapstyle.resolve(24, mapstyle.MapOptions.ForceHexes, mapstyle.MapStyle.Poster)
    assert sheet.baseMiddlePosition.x() == pytest.approx(-0.35)
    assert sheet.hexStyle is mapstyle.HexStyle.Hex

@pytest.mark.parametrize('style', list(mapstyle.MapStyle))
def test_preferred_image_format(style):
    sheet = mapstyle.resolve(64, 0, style)
    expected = mapstyle.ImageFormat.Jpeg if style is mapstyle.MapStyle.Candy else mapstyle.ImageFormat.Png
    assert sheet.preferredImageFormat is expected

def test_candy_scenario(allOptions):
    sheet = mapstyle.resolve(64, allOptions, mapstyle.MapStyle.Candy)
    assert sheet.useWorldImages
    assert sheet.hexStyle is mapstyle.HexStyle.NoHex
    assert sheet.microBorderStyle is mapstyle.MicroBorderStyle.Curve
    assert not sheet.parsecGrid.visible
    assert sheet.subsectorGrid.visible
    assert sheet.subsectorGrid.linePen.style() is mapstyle.LineStyle.Custom
    assert sheet.subsectorGrid.linePen.pattern() == (10.0, 8.0)
    assert sheet.subsectorGrid.linePen.width() == pytest.approx(0.03)
    assert sheet.sectorName.textColour == '#80DAA520'
    assert sheet.subsectorNames.textColour == '#80DAA520'
    assert sheet.amberZone.linePen.width() == pytest.approx(0.035)
    assert sheet.redZone.linePen.width() == pytest.approx(0.035)
    assert sheet.microRoutes.linePen.width() == pytest.approx(0.04)
    assert sheet.microBorders.linePen.width() == pytest.approx(0.04)
    assert not (sheet.worldDetails & mapstyle.WorldDetails.Starport)
    assert not (sheet.worldDetails & mapstyle.WorldDetails.Hex)
    assert sheet.worldDetails & mapstyle.WorldDetails.AllNames
    assert sheet.backgroundColour == '#0A0A1E'

    # Label styles are copied, not shared
    assert sheet.subsectorNames.textStyle is not sheet.sectorName.textStyle
    assert sheet.sectorName.textStyle.scale == mapstyle.SizeF(0.5, 0.25)
    assert sheet.subsectorNames.textStyle.scale == mapstyle.SizeF(0.3, 0.15)

@pytest.mark.parametrize('scale', [1 / 16, 2, 24, 64, 256])
def test_candy_differs_from_every_other_style(scale, allOptions):
    candy = mapstyle.resolve(scale, allOptions, mapstyle.MapStyle.Candy)
    for style in mapstyle.MapStyle:
        if style is mapstyle.MapStyle.Candy:
            continue
        other = mapstyle.resolve(scale, allOptions, style)
        assert other.backgroundColour != candy.backgroundColour
        assert other.preferredImageFormat != candy.preferredImageFormat

def test_candy_limits_at_extreme_scales():
    sheet = mapstyle.resolve(32, 0, mapstyle.MapStyle.Candy)
    assert not (sheet.worldDetails & mapstyle.WorldDetails.KeyNames)
    sheet = mapstyle.resolve(1024, 0, mapstyle.MapStyle.Candy)
    assert sheet.hexContentScale == pytest.approx(0.5)
    assert sheet.worldDetails & mapstyle.WorldDetails.Uwp
    assert sheet.showRiftOverlay

def test_light_styles_scenarios():
    atlas = mapstyle.resolve(64, 0, mapstyle.MapStyle.Atlas)
    assert atlas.grayscale
    assert atlas.lightBackground
    assert atlas.backgroundColour == mapstyle.HtmlColours.White
    assert atlas.worlds.textColour == mapstyle.HtmlColours.Black
    assert atlas.riftOpacity <= 0.7
    assert atlas.highlightWorlds.fillColour == '#30808080'

    fasa = mapstyle.resolve(24, 0, mapstyle.MapStyle.Fasa)
    assert fasa.hexStyle is mapstyle.HexStyle.Hex
    assert fasa.microBorderStyle is mapstyle.MicroBorderStyle.Curve
    assert fasa.overrideLineStyle is mapstyle.LineStyle.Solid
    assert fasa.hexCoordinateStyle is mapstyle.HexCoordinateStyle.Subsector
    assert fasa.riftOpacity == 0
    assert fasa.redZone.linePen is None
    for detail in (
            mapstyle.WorldDetails.Starport,
            mapstyle.WorldDetails.Allegiance,
            mapstyle.WorldDetails.Bases,
            mapstyle.WorldDetails.GasGiant,
            mapstyle.WorldDetails.Highlight):
        assert not (fasa.worldDetails & detail)
    assert fasa.worlds.font.emSize() == pytest.approx(0.2 * 0.85)

    draft = mapstyle.resolve(64, mapstyle.MapOptions.SectorsSelected, mapstyle.MapStyle.Draft)
    assert draft.backgroundColour == mapstyle.HtmlColours.AntiqueWhite
    assert not draft.subsectorNames.visible
    assert draft.worlds.font.family() is mapstyle.FontFamily.Draft
    assert draft.worlds.largeFont.style() & mapstyle.FontStyle.Underline
    assert draft.microBorders.linePen.style() is mapstyle.LineStyle.Dot
    assert draft.numberAllHexes

    printSheet = mapstyle.resolve(64, 0, mapstyle.MapStyle.Print)
    assert printSheet.lightBackground
    assert printSheet.microBorders.textColour == mapstyle.HtmlColours.Brown
    assert printSheet.highlightWorlds.linePen.style() is mapstyle.LineStyle.DashDot

def test_terminal_scenario():
    sheet = mapstyle.resolve(64, mapstyle.MapOptions.SectorsSelected, mapstyle.MapStyle.Terminal)
    assert not sheet.subsectorNames.visible
    assert sheet.sectorName.textColour == mapstyle.HtmlColours.Cyan
    assert sheet.worlds.font.family() is mapstyle.FontFamily.Terminal
    assert sheet.worlds.textColour == mapstyle.HtmlColours.Cyan

    sheet = mapstyle.resolve(32, mapstyle.MapOptions.SectorsSelected, mapstyle.MapStyle.Terminal)
    assert sheet.subsectorNames.visible
    assert sheet.subsectorNames.textColour == mapstyle.HtmlColours.Cyan

def test_mongoose_layer_order():
    sheet = mapstyle.resolve(64, 0, mapstyle.MapStyle.Mongoose)
    layers = list(sheet.layerOrder)
    assert isinstance(sheet.layerOrder, tuple)
    assert sorted(layers, key=lambda layer: layer.value) == \
        sorted(mapstyle.StyleSheet._DefaultLayerOrder, key=lambda layer: layer.value)
    worldsBackground = layers.index(mapstyle.LayerId.Worlds_Background)
    assert layers[worldsBackground + 1] is mapstyle.LayerId.Micro_BordersForeground
    worldsForeground = layers.index(mapstyle.LayerId.Worlds_Foreground)
    assert layers[worldsForeground + 1] is mapstyle.LayerId.Micro_Routes
    assert sheet.showZonesAsPerimeters
    assert sheet.greenZone.visible

def test_highlight_pattern_controls_highlight_element():
    pattern = mapstyle.HighlightWorldPattern.parse('P8+')

    sheet = mapstyle.resolve(64, 0, mapstyle.MapStyle.Poster, pattern)
    assert sheet.highlightPattern == pattern
    assert sheet.highlightWorlds.visible
    assert sheet.hasWorldOverlays

    sheet = mapstyle.resolve(1, 0, mapstyle.MapStyle.Poster, pattern)
    assert not sheet.highlightWorlds.visible

    sheet = mapstyle.resolve(64, 0, mapstyle.MapStyle.Poster)
    assert not sheet.highlightWorlds.visible
    assert not sheet.hasWorldOverlays

    with pytest.raises(ValueError):
        mapstyle.resolve(64, 0, mapstyle.MapStyle.Poster, 'P8+')

def test_symbol_overlays_are_hidden_when_zoomed_out():
    options = mapstyle.MapOptions.DroyneWorlds | mapstyle.MapOptions.AncientWorlds
    sheet = mapstyle.resolve(1, options, mapstyle.MapStyle.Poster)
    assert not sheet.droyneWorlds.visible
    assert not sheet.ancientsWorlds.visible

    sheet = mapstyle.resolve(4, options, mapstyle.MapStyle.Poster)
    assert sheet.droyneWorlds.visible
    assert sheet.ancientsWorlds.visible
    assert not sheet.minorHomeWorlds.visible
    assert sheet.droyneWorlds.content == '★☆'
    assert sheet.droyneWorlds.textColour == sheet.microBorders.textColour

def test_overlay_options():
    options = mapstyle.MapOptions.PopulationOverlay | mapstyle.MapOptions.CapitalOverlay
    sheet = mapstyle.resolve(64, options, mapstyle.MapStyle.Poster)
    assert sheet.populationOverlay.visible
    assert sheet.capitalOverlay.visible
    assert not sheet.importanceOverlay.visible
    assert sheet.hasWorldOverlays
    assert sheet.populationOverlay.fillColour == '#80FFFF00'
    assert sheet.capitalOverlay.fillColour == '#80048104'

def test_fixed_glyphs():
    sheet = mapstyle.resolve(64, 0, mapstyle.MapStyle.Poster)
    assert sheet.placeholder.content == '*'
    assert sheet.placeholder.font.family() is mapstyle.FontFamily.Placeholder
    assert sheet.placeholder.position == mapstyle.PointF(0, 0.17)
    assert sheet.anomaly.content == '⌖'
    assert sheet.anomaly.font.family() is mapstyle.FontFamily.Anomaly
    assert sheet.anomaly.textColour == mapstyle.HtmlColours.TravellerRed

def test_world_colours(fakeWorld):
    sheet = mapstyle.resolve(64, mapstyle.MapOptions.WorldColours, mapstyle.MapStyle.Poster)

    assert sheet.worldColours(fakeWorld(agricultural=True, rich=True)) == \
        (mapstyle.HtmlColours.TravellerAmber, mapstyle.HtmlColours.TravellerAmber)
    assert sheet.worldColours(fakeWorld(agricultural=True)) == \
        (mapstyle.HtmlColours.TravellerGreen, mapstyle.HtmlColours.TravellerGreen)
    assert sheet.worldColours(fakeWorld(rich=True)) == \
        (mapstyle.HtmlColours.Purple, mapstyle.HtmlColours.Purple)
    assert sheet.worldColours(fakeWorld(industrial=True)) == ('#888888', '#888888')
    assert sheet.worldColours(fakeWorld(atmosphere=11)) == ('#CC6626', '#CC6626')
    assert sheet.worldColours(fakeWorld(atmosphere=0, hydrographics=0)) == \
        (mapstyle.HtmlColours.White, mapstyle.HtmlColours.Black)
    assert sheet.worldColours(fakeWorld()) == (None, mapstyle.HtmlColours.DeepSkyBlue)
    assert sheet.worldColours(fakeWorld(hydrographics=0)) == (None, mapstyle.HtmlColours.White)

def test_world_colours_without_detail_colours(fakeWorld):
    sheet = mapstyle.resolve(64, 0, mapstyle.MapStyle.Poster)
    assert not sheet.showWorldDetailColours
    assert sheet.worldColours(fakeWorld(agricultural=True)) == (None, mapstyle.HtmlColours.DeepSkyBlue)

    # Detail colours are only used at poster scales
    sheet = mapstyle.resolve(24, mapstyle.MapOptions.WorldColours, mapstyle.MapStyle.Poster)
    assert not sheet.showWorldDetailColours

    sheet = mapstyle.resolve(64, 0, mapstyle.MapStyle.Atlas)
    assert sheet.worldColours(fakeWorld(hydrographics=0)) == \
        (mapstyle.HtmlColours.Black, mapstyle.HtmlColours.White)
    assert sheet.worldColours(fakeWorld()) == (None, mapstyle.HtmlColours.Black)

def test_layer_list_move_after():
    layers = mapstyle.LayerList([
        mapstyle.LayerId.Background_Solid,
        mapstyle.LayerId.Micro_Routes,
        mapstyle.LayerId.Worlds_Foreground])
    layers.moveAfter(
        target=mapstyle.LayerId.Worlds_Foreground,
        item=mapstyle.LayerId.Micro_Routes)
    assert layers == [
        mapstyle.LayerId.Background_Solid,
        mapstyle.LayerId.Worlds_Foreground,
        mapstyle.LayerId.Micro_Routes]
    assert isinstance(layers.copy(), mapstyle.LayerList)

def test_element_font_slots():
    sheet = mapstyle.resolve(64, 0, mapstyle.MapStyle.Poster)
    assert sheet.macroNames.fontInfo('mediumFont').style() == mapstyle.FontStyle.Italic
    with pytest.raises(ValueError):
        sheet.macroNames.fontInfo('hugeFont')
