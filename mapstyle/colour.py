import common
import typing

# Named colours used by the map styles. Colour strings are always in the
# '#RRGGBB' or '#AARRGGBB' form.
class HtmlColours(object):
    TravellerRed = '#E32736'
    TravellerAmber = '#FFCC00'
    TravellerGreen = '#048104'

    AntiqueWhite = '#FAEBD7'
    Black = '#000000'
    Blue = '#0000FF'
    Brown = '#A52A2A'
    Cyan = '#00FFFF'
    DarkBlue = '#00008B'
    DarkCyan = '#008B8B'
    DarkGray = '#A9A9A9'
    DarkKhaki = '#BDB76B'
    DarkSlateGray = '#2F4F4F'
    DeepSkyBlue = '#00BFFF'
    DimGray = '#696969'
    Firebrick = '#B22222'
    Goldenrod = '#DAA520'
    Gray = '#808080'
    LightBlue = '#ADD8E6'
    LightGray = '#D3D3D3'
    MediumBlue = '#0000CD'
    Plum = '#DDA0DD'
    Purple = '#800080'
    Red = '#FF0000'
    Wheat = '#F5DEB3'
    White = '#FFFFFF'

_NameToColourMap = {name.lower(): colour for name, colour in common.getClassVariables(HtmlColours).items()}

def parseHtmlColour(
        htmlColour: str
        ) -> typing.Tuple[
            int, # Red
            int, # Green
            int, # Blue
            int, # Alpha
        ]:
    if not isinstance(htmlColour, str) or not htmlColour:
        raise ValueError(f'Invalid colour "{htmlColour}"')
    if htmlColour[0] != '#':
        namedColour = _NameToColourMap.get(htmlColour.lower())
        if not namedColour:
            raise ValueError(f'Invalid colour "{htmlColour}"')
        htmlColour = namedColour

    length = len(htmlColour)
    try:
        if length == 7:
            alpha = 255
            red = int(htmlColour[1:3], 16)
            green = int(htmlColour[3:5], 16)
            blue = int(htmlColour[5:7], 16)
        elif length == 9:
            alpha = int(htmlColour[1:3], 16)
            red = int(htmlColour[3:5], 16)
            green = int(htmlColour[5:7], 16)
            blue = int(htmlColour[7:9], 16)
        else:
            raise ValueError(f'Invalid colour "{htmlColour}"')
    except ValueError:
        raise ValueError(f'Invalid colour "{htmlColour}"')

    return (red, green, blue, alpha)

def formatHtmlColour(red: int, green: int, blue: int, alpha: int = 255) -> str:
    if alpha == 255:
        return f'#{red:02X}{green:02X}{blue:02X}'
    return f'#{alpha:02X}{red:02X}{green:02X}{blue:02X}'

def validateHtmlColour(htmlColour: str) -> bool:
    try:
        parseHtmlColour(htmlColour=htmlColour)
        return True
    except ValueError:
        return False
