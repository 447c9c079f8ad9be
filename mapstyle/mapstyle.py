import enum
import typing

# NOTE: The enum names are written to the config file so renaming a member
# needs a mapping for old values. The values are the display names.
class MapStyle(enum.Enum):
    Poster = 'Poster'
    Print = 'Print'
    Mongoose = 'Mongoose'
    Candy = 'Eye Candy'
    Draft = 'Draft'
    Fasa = 'FASA'
    Atlas = 'Atlas'
    Terminal = 'Terminal'

_DarkStyles = frozenset([
    MapStyle.Poster,
    MapStyle.Candy,
    MapStyle.Terminal])

def isLightStyle(style: MapStyle) -> bool:
    return style not in _DarkStyles

def isDarkStyle(style: MapStyle) -> bool:
    return style in _DarkStyles

# Accepts either the member name (e.g. 'Candy') or the display name
# (e.g. 'Eye Candy'), ignoring case
def mapStyleFromName(name: str) -> typing.Optional[MapStyle]:
    lowerName = name.strip().lower()
    for style in MapStyle:
        if style.name.lower() == lowerName or style.value.lower() == lowerName:
            return style
    return None
