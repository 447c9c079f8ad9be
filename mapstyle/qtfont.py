import common
import mapstyle
import threading
import typing
from PyQt5 import QtGui

class QtFont(mapstyle.AbstractFont):
    # Qt doesn't have great support for fonts with floating point sizes,
    # which the style sheet em sizes are. Instead all fonts are created with
    # the same point size and the em size is used to scale text when it's
    # drawn. The actual point size is somewhat arbitrary, although fonts do
    # render noticeably differently if the value is too small
    _TextPointSize = 10

    def __init__(
            self,
            family: str,
            emSize: float,
            style: mapstyle.FontStyle
            ) -> None:
        self._family = family
        self._emSize = emSize
        self._style = style

        self._font = QtGui.QFont(family)
        self._font.setPointSizeF(QtFont._TextPointSize)
        if self._style & mapstyle.FontStyle.Bold:
            self._font.setBold(True)
        if self._style & mapstyle.FontStyle.Italic:
            self._font.setItalic(True)
        if self._style & mapstyle.FontStyle.Underline:
            self._font.setUnderline(True)
        if self._style & mapstyle.FontStyle.Strikeout:
            self._font.setStrikeOut(True)

    def family(self) -> str:
        return self._family

    def emSize(self) -> float:
        return self._emSize

    def style(self) -> mapstyle.FontStyle:
        return self._style

    def pointSize(self) -> float:
        return QtFont._TextPointSize

    def qtFont(self) -> QtGui.QFont:
        return self._font

# Creates Qt fonts, a QGuiApplication must have been created before any fonts
# are created. Fonts are shared between all the font caches that use the
# factory so switching between style sheets doesn't recreate them.
class QtFontFactory(mapstyle.AbstractFontFactory):
    # Scale applied to em sizes to get fonts rendering at the correct size
    _EmSizeScale = 1.05

    def __init__(self, capacity: int = 100) -> None:
        self._fonts = common.LRUCache[typing.Tuple[str, float, int], QtFont](capacity)
        self._installedFamilies: typing.Optional[typing.Set[str]] = None
        self._lock = threading.Lock()

    def createFont(
            self,
            family: str,
            emSize: float,
            style: mapstyle.FontStyle = mapstyle.FontStyle.Regular
            ) -> QtFont:
        if not self.isFamilyInstalled(family):
            raise ValueError(f'Unknown font "{family}"')

        emSize = emSize * QtFontFactory._EmSizeScale
        return self._fonts.getOrCreate(
            key=(family, emSize, int(style)),
            createCb=lambda: QtFont(family=family, emSize=emSize, style=style))

    def isFamilyInstalled(self, family: str) -> bool:
        with self._lock:
            if self._installedFamilies is None:
                self._installedFamilies = set(
                    name.lower() for name in QtGui.QFontDatabase().families())
            return family.lower() in self._installedFamilies

    def cachedFontCount(self) -> int:
        return len(self._fonts)
