#!/usr/bin/env python3

import app
import argparse
import json
import logging
import mapstyle
import os
import pathlib
import sys
import typing
from PyQt5 import QtGui

def _applicationDirectory() -> str:
    if os.name == 'nt':
        return os.path.join(os.getenv('APPDATA'), app.AppName)
    else:
        return os.path.join(pathlib.Path.home(), '.' + app.AppName.lower())

def _parseArgs(argv: typing.Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=app.AppDescription)
    parser.add_argument(
        '--scale',
        type=float,
        required=True,
        help='Map scale in pixels per parsec')
    parser.add_argument(
        '--style',
        help='Map style name, defaults to the configured style')
    parser.add_argument(
        '--options',
        nargs='*',
        help='Map option names, defaults to the configured options')
    parser.add_argument(
        '--highlight',
        help='World highlight pattern (e.g. P8+ or A4-9)')
    parser.add_argument(
        '--fonts',
        action='store_true',
        help='Also create the Qt fonts for the style sheet and list the families used')
    parser.add_argument(
        '--app-dir',
        default=_applicationDirectory(),
        help='Directory containing the config file and logs')
    return parser.parse_args(argv)

def _resolveFonts(
        sheet: mapstyle.StyleSheet,
        families: typing.Mapping[mapstyle.FontFamily, str],
        cacheSize: int
        ) -> typing.Dict[str, typing.Any]:
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
    # Fonts can only be created once a gui application exists
    application = QtGui.QGuiApplication.instance() or QtGui.QGuiApplication([])

    fontCache = mapstyle.FontCache(
        sheet=sheet,
        factory=mapstyle.QtFontFactory(capacity=cacheSize),
        families=families)

    fonts = {}
    for name, element in sheet.elements().items():
        for slot in mapstyle.StyleElement.FontSlots:
            if not element.fontInfo(slot):
                continue
            font = fontCache.elementFont(element=name, slot=slot)
            fonts[f'{name}.{slot}'] = font.family()
    for name, font in (
            ('wingdingFont', fontCache.wingdingFont()),
            ('glyphFont', fontCache.glyphFont()),
            ('starportFont', fontCache.starportFont())):
        if font:
            fonts[name] = font.family()

    return fonts

def main() -> None:
    args = _parseArgs(sys.argv[1:])

    exitCode = 0
    try:
        appDir = args.app_dir
        os.makedirs(appDir, exist_ok=True)

        # Log messages only go to the file so they don't get mixed in with
        # the JSON written to stdout
        app.setupLogger(
            logDir=os.path.join(appDir, 'logs'),
            logFile=app.AppLogFile,
            consoleStream=None)
        logging.info(f'{app.AppName} v{app.AppVersion}')

        app.Config.setAppDir(appDir=appDir)
        config = app.Config.instance()

        try:
            app.setLogLevel(config.value(option=app.ConfigOption.LogLevel))
        except Exception as ex:
            logging.warning('Failed to set log level', exc_info=ex)

        if args.style:
            style = mapstyle.mapStyleFromName(args.style)
            if not style:
                raise ValueError(f'Unknown map style "{args.style}"')
        else:
            style = config.value(option=app.ConfigOption.MapStyle)

        if args.options is not None:
            options = mapstyle.mapOptionsFromNames(args.options)
        else:
            options = config.value(option=app.ConfigOption.MapOptions)

        highlightPattern = mapstyle.HighlightWorldPattern.parse(args.highlight)
        if args.highlight and not highlightPattern:
            logging.warning(f'Ignoring invalid highlight pattern "{args.highlight}"')

        styleCache = mapstyle.StyleSheetCache(
            capacity=config.value(option=app.ConfigOption.StyleCacheSize))
        sheet = styleCache.resolve(
            scale=args.scale,
            options=options,
            style=style,
            highlightPattern=highlightPattern)

        output = sheet.snapshot()
        if args.fonts:
            output['fontFamilies'] = _resolveFonts(
                sheet=sheet,
                families=config.value(option=app.ConfigOption.FontFamilies),
                cacheSize=config.value(option=app.ConfigOption.FontCacheSize))

        print(json.dumps(output, indent=4))
    except Exception as ex:
        logging.error('Failed to resolve style sheet', exc_info=ex)
        print(f'Error: {ex}', file=sys.stderr)
        exitCode = 1

    sys.exit(exitCode)

if __name__ == "__main__":
    main()
