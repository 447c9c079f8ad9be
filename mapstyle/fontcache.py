import logging
import mapstyle
import threading
import typing

_DefaultFamilies = {
    mapstyle.FontFamily.Default: 'Arial',
    mapstyle.FontFamily.Wingdings: 'Wingdings',
    mapstyle.FontFamily.Glyph: 'Arial Unicode MS,Segoe UI Symbol,Arial',
    mapstyle.FontFamily.Placeholder: 'Georgia',
    mapstyle.FontFamily.Anomaly: 'Arial Unicode MS,Segoe UI Symbol,Arial',
    mapstyle.FontFamily.Draft: 'Comic Sans MS',
    mapstyle.FontFamily.Terminal: 'Courier New',
    mapstyle.FontFamily.Mongoose: 'Calibri,Arial'}

def defaultFontFamilies() -> typing.Dict[mapstyle.FontFamily, str]:
    return dict(_DefaultFamilies)

def splitFontFamilies(families: str) -> typing.List[str]:
    return [family.strip() for family in families.split(',') if family.strip()]

# Sentinel used to tell a font that hasn't been created yet apart from a slot
# that has no font
_NotCreated = object()

# Materialises the fonts described by a style sheet. Fonts are only created
# the first time they're requested and the same font object is returned for
# all later requests, even when requested from multiple threads.
class FontCache(object):
    def __init__(
            self,
            sheet: mapstyle.StyleSheet,
            factory: mapstyle.AbstractFontFactory,
            families: typing.Optional[typing.Mapping[mapstyle.FontFamily, str]] = None
            ) -> None:
        self._sheet = sheet
        self._factory = factory
        self._families = defaultFontFamilies()
        if families:
            self._families.update(families)
        self._fonts: typing.Dict[typing.Tuple[str, str], typing.Optional[mapstyle.AbstractFont]] = {}
        self._lock = threading.Lock()

    def sheet(self) -> mapstyle.StyleSheet:
        return self._sheet

    def fontFamilies(self, family: mapstyle.FontFamily) -> typing.List[str]:
        return splitFontFamilies(self._families[family])

    def elementFont(
            self,
            element: str,
            slot: str = 'font'
            ) -> typing.Optional[mapstyle.AbstractFont]:
        styleElement = self._sheet.elements().get(element)
        if styleElement is None:
            raise ValueError(f'Unknown style element "{element}"')
        fontInfo = styleElement.fontInfo(slot)
        return self._cachedFont(key=(element, slot), fontInfo=fontInfo)

    def wingdingFont(self) -> typing.Optional[mapstyle.AbstractFont]:
        return self._cachedFont(
            key=('', 'wingdingFont'),
            fontInfo=self._sheet.wingdingFont)

    def glyphFont(self) -> typing.Optional[mapstyle.AbstractFont]:
        return self._cachedFont(
            key=('', 'glyphFont'),
            fontInfo=self._sheet.glyphFont)

    def starportFont(self) -> typing.Optional[mapstyle.AbstractFont]:
        # Same slot as the starport element so both share one font
        return self.elementFont(element='starport', slot='font')

    def _cachedFont(
            self,
            key: typing.Tuple[str, str],
            fontInfo: typing.Optional[mapstyle.FontInfo]
            ) -> typing.Optional[mapstyle.AbstractFont]:
        font = self._fonts.get(key, _NotCreated)
        if font is not _NotCreated:
            return font

        with self._lock:
            # Check again now the lock is held as another thread may have
            # created the font while this one was waiting
            font = self._fonts.get(key, _NotCreated)
            if font is _NotCreated:
                font = self._createFont(fontInfo=fontInfo)
                self._fonts[key] = font
        return font

    def _createFont(
            self,
            fontInfo: typing.Optional[mapstyle.FontInfo]
            ) -> typing.Optional[mapstyle.AbstractFont]:
        if not fontInfo:
            return None

        families = self.fontFamilies(fontInfo.family())
        for family in families:
            try:
                return self._factory.createFont(
                    family=family,
                    emSize=fontInfo.emSize(),
                    style=fontInfo.style())
            except Exception as ex:
                logging.debug(
                    f'Unable to create {fontInfo.family().name} font using family "{family}"',
                    exc_info=ex)

        raise RuntimeError(
            'Unable to create {role} font from any of the families {families}'.format(
                role=fontInfo.family().name,
                families=', '.join(families)))
