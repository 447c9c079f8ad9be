import common
import enum
import logging
import mapstyle
import os
import threading
import typing
from PyQt5 import QtCore

class ConfigOption(enum.Enum):
    # Debug
    LogLevel = 100

    # Rendering
    MapStyle = 200
    MapOptions = 201
    StyleCacheSize = 202
    FontCacheSize = 203

    # Fonts
    FontFamilies = 300

# Holds the current and future value of a single option. Options that need a
# restart only update the future value when set, the current value is what the
# process started with. Derived classes convert values and map them to and
# from the settings file.
class ConfigItem(object):
    def __init__(
            self,
            option: ConfigOption,
            restart: bool,
            default: typing.Any
            ) -> None:
        self._option = option
        self._restart = restart
        self._default = default
        self._currentValue = self._futureValue = default

    def option(self) -> ConfigOption:
        return self._option

    def value(self, futureValue: bool = False) -> typing.Any:
        return self._futureValue if futureValue else self._currentValue

    def setValue(self, value: typing.Any) -> None:
        value = self._normalise(value)
        if value == self._futureValue:
            return

        if self._restart:
            self._futureValue = value
        else:
            self._currentValue = self._futureValue = value

    def isRestartRequired(self) -> bool:
        return self._currentValue != self._futureValue

    def read(self, settings: QtCore.QSettings) -> None:
        self._currentValue = self._futureValue = self._load(settings)

    def write(self, settings: QtCore.QSettings) -> None:
        self._save(settings, self._futureValue)

    def _normalise(self, value: typing.Any) -> typing.Any:
        return value

    def _load(self, settings: QtCore.QSettings) -> typing.Any:
        raise RuntimeError(f'{type(self)} is derived from ConfigItem so must implement _load')

    def _save(self, settings: QtCore.QSettings, value: typing.Any) -> None:
        raise RuntimeError(f'{type(self)} is derived from ConfigItem so must implement _save')

    @staticmethod
    def loadConfigSetting(
            settings: QtCore.QSettings,
            key: str,
            default: typing.Any,
            type: type
            ) -> typing.Any:
        try:
            # A missing key always gives the default. QSettings.value converts
            # a missing value to the requested type (e.g. None becomes 0.0 for
            # a float) so it can't be relied on to do this.
            if not settings.contains(key):
                return default

            return settings.value(key, defaultValue=default, type=type)
        except TypeError:
            logging.error(f'Config option {key} in "{settings.fileName()}" is not a {type.__name__}, using default')
            return default
        except Exception as ex:
            logging.error(f'Failed to read config option {key} from "{settings.fileName()}"', exc_info=ex)
            return default

class SimpleConfigItem(ConfigItem):
    def __init__(
            self,
            option: ConfigOption,
            key: str,
            type: typing.Type[object],
            default: typing.Any,
            restart: bool
            ) -> None:
        self._key = key
        self._type = type
        super().__init__(option=option, restart=restart, default=type(default))

    def _normalise(self, value: typing.Any) -> typing.Any:
        return self._type(value)

    def _load(self, settings: QtCore.QSettings) -> typing.Any:
        return self.loadConfigSetting(
            settings=settings,
            key=self._key,
            default=self._default,
            type=self._type)

    def _save(self, settings: QtCore.QSettings, value: typing.Any) -> None:
        settings.setValue(self._key, value)

class IntConfigItem(SimpleConfigItem):
    def __init__(
            self,
            option: ConfigOption,
            key: str,
            restart: bool,
            default: int,
            min: typing.Optional[int] = None,
            max: typing.Optional[int] = None
            ) -> None:
        self._min = int(min) if min is not None else None
        self._max = int(max) if max is not None else None
        if self._min is not None and self._max is not None:
            self._min, self._max = common.minmax(self._min, self._max)
        super().__init__(
            option=option,
            key=key,
            type=int,
            default=default,
            restart=restart)

    def _normalise(self, value: typing.Any) -> int:
        value = int(value)
        clamped = value
        if self._min is not None:
            clamped = max(clamped, self._min)
        if self._max is not None:
            clamped = min(clamped, self._max)
        if clamped != value:
            logging.warning(f'Clamped config option {self._key} value {value} to {clamped}')
        return clamped

    def _load(self, settings: QtCore.QSettings) -> int:
        return self._normalise(super()._load(settings))

# Stored by member name so the file doesn't depend on enum values
class EnumConfigItem(SimpleConfigItem):
    def __init__(
            self,
            option: ConfigOption,
            key: str,
            restart: bool,
            enumType: typing.Type[enum.Enum],
            default: enum.Enum
            ) -> None:
        super().__init__(
            option=option,
            key=key,
            type=enumType,
            default=default,
            restart=restart)

    def _load(self, settings: QtCore.QSettings) -> enum.Enum:
        name = self.loadConfigSetting(
            settings=settings,
            key=self._key,
            default=self._default.name,
            type=str)
        value = self._type.__members__.get(name)
        if value is None:
            logging.warning(f'Ignoring config option {self._key} as "{name}" isn\'t a valid {self._type.__name__}')
            return self._default
        return value

    def _save(self, settings: QtCore.QSettings, value: enum.Enum) -> None:
        settings.setValue(self._key, value.name)

class MappedConfigItem(SimpleConfigItem):
    def __init__(
            self,
            option: ConfigOption,
            key: str,
            restart: bool,
            keyType: typing.Type[typing.Any],
            default: typing.Any,
            toStringMap: typing.Mapping[typing.Any, str],
            fromStringMap: typing.Mapping[str, typing.Any]
            ) -> None:
        self._toStringMap = dict(toStringMap)
        self._fromStringMap = {text.lower(): value for text, value in fromStringMap.items()}
        super().__init__(
            option=option,
            key=key,
            type=keyType,
            default=default,
            restart=restart)

    def _normalise(self, value: typing.Any) -> typing.Any:
        return value if value in self._toStringMap else self._default

    def _load(self, settings: QtCore.QSettings) -> typing.Any:
        text = self.loadConfigSetting(
            settings=settings,
            key=self._key,
            default=self._toStringMap[self._default],
            type=str)
        return self._fromStringMap.get(text.strip().lower(), self._default)

    def _save(self, settings: QtCore.QSettings, value: typing.Any) -> None:
        settings.setValue(self._key, self._toStringMap[value])

# Map options are stored as one bool per option rather than the raw bit mask
# so the file stays readable and unknown options are simply ignored
class MapOptionsConfigItem(ConfigItem):
    # Deprecated bits are never written, they only exist for decoding old values
    _StoredOptions = [
        option for option in mapstyle.MapOptions
        if option.name in mapstyle.mapOptionsToNames(option) and not option.name.endswith('Deprecated')]

    def __init__(
            self,
            option: ConfigOption,
            section: str,
            restart: bool,
            default: mapstyle.MapOptions = mapstyle.MapOptions.NoOptions
            ) -> None:
        self._section = section
        super().__init__(
            option=option,
            restart=restart,
            default=mapstyle.MapOptions(default))

    def _normalise(self, value: typing.Any) -> mapstyle.MapOptions:
        return mapstyle.MapOptions(value)

    def _load(self, settings: QtCore.QSettings) -> mapstyle.MapOptions:
        options = mapstyle.MapOptions.NoOptions
        for option in MapOptionsConfigItem._StoredOptions:
            enabled = self.loadConfigSetting(
                settings=settings,
                key=f'{self._section}/{option.name}',
                default=(self._default & option) != 0,
                type=bool)
            if enabled:
                options |= option
        return mapstyle.MapOptions(options)

    def _save(self, settings: QtCore.QSettings, value: mapstyle.MapOptions) -> None:
        for option in MapOptionsConfigItem._StoredOptions:
            settings.setValue(f'{self._section}/{option.name}', (value & option) != 0)

# Each font role can be mapped to a comma separated list of family names. Only
# roles that have been overridden are written to the file.
class FontFamiliesConfigItem(ConfigItem):
    def __init__(
            self,
            option: ConfigOption,
            section: str,
            restart: bool,
            default: typing.Optional[typing.Mapping[mapstyle.FontFamily, str]] = None
            ) -> None:
        self._section = section
        super().__init__(
            option=option,
            restart=restart,
            default=dict(default) if default else mapstyle.defaultFontFamilies())

    def value(self, futureValue: bool = False) -> typing.Dict[mapstyle.FontFamily, str]:
        return dict(super().value(futureValue=futureValue))

    def _normalise(
            self,
            value: typing.Mapping[mapstyle.FontFamily, str]
            ) -> typing.Dict[mapstyle.FontFamily, str]:
        families = dict(self._default)
        families.update(value)
        return families

    def _load(self, settings: QtCore.QSettings) -> typing.Dict[mapstyle.FontFamily, str]:
        families = dict(self._default)
        for role in mapstyle.FontFamily:
            key = f'{self._section}/{role.name}'
            value = self.loadConfigSetting(
                settings=settings,
                key=key,
                default=None,
                type=str)
            if value is None:
                continue
            if not mapstyle.splitFontFamilies(value):
                logging.warning(f'Ignoring config option {key} as it contains no font families')
                continue
            families[role] = value
        return families

    def _save(
            self,
            settings: QtCore.QSettings,
            value: typing.Mapping[mapstyle.FontFamily, str]
            ) -> None:
        for role, families in value.items():
            key = f'{self._section}/{role.name}'
            if families == self._default.get(role):
                settings.remove(key)
            else:
                settings.setValue(key, families)

class Config(QtCore.QObject):
    configChanged = QtCore.pyqtSignal(
        ConfigOption, # Config option that has changed
        object, # Old value
        object) # New value

    _ConfigFileName = 'mapstyle.ini'

    _DefaultMapOptions = \
        mapstyle.MapOptions.SectorGrid | \
        mapstyle.MapOptions.SectorsSelected | \
        mapstyle.MapOptions.BordersMajor | \
        mapstyle.MapOptions.BordersMinor | \
        mapstyle.MapOptions.NamesMajor | \
        mapstyle.MapOptions.WorldsCapitals | \
        mapstyle.MapOptions.WorldsHomeworlds | \
        mapstyle.MapOptions.FilledBorders

    _LogLevelNames = {
        logging.CRITICAL: 'critical',
        logging.ERROR: 'error',
        logging.WARNING: 'warning',
        logging.INFO: 'information',
        logging.DEBUG: 'debug'}
    _LogLevelAliases = {
        'crit': logging.CRITICAL,
        'err': logging.ERROR,
        'warn': logging.WARNING,
        'info': logging.INFO,
        'dbg': logging.DEBUG}

    _instance = None # Singleton instance
    _lock = threading.Lock()
    _appDir = '.'

    @classmethod
    def instance(cls) -> 'Config':
        if not cls._instance:
            with cls._lock:
                # Recheck instance as another thread could have created it between the
                # first check and the lock
                if not cls._instance:
                    # Only publish the instance once it's fully loaded so other
                    # threads never see it half initialised
                    instance = cls.__new__(cls)
                    QtCore.QObject.__init__(instance)
                    instance._configItems = {}
                    instance._settings = QtCore.QSettings(
                        os.path.join(cls._appDir, cls._ConfigFileName),
                        QtCore.QSettings.Format.IniFormat)
                    instance.load()
                    cls._instance = instance
        return cls._instance

    @staticmethod
    def setAppDir(appDir: str) -> None:
        if Config._instance:
            raise RuntimeError('You can\'t set the app directory after the singleton has been initialised')
        Config._appDir = appDir

    @staticmethod
    def appDir() -> str:
        return Config._appDir

    def fileName(self) -> str:
        return self._settings.fileName()

    def load(self) -> None:
        self._configItems.clear()

        fromStringMap = {name: level for level, name in Config._LogLevelNames.items()}
        fromStringMap.update(Config._LogLevelAliases)
        self._addConfigItem(MappedConfigItem(
            option=ConfigOption.LogLevel,
            key='Debug/LogLevel',
            restart=True,
            keyType=int,
            default=logging.WARNING,
            toStringMap=Config._LogLevelNames,
            fromStringMap=fromStringMap))

        self._addConfigItem(EnumConfigItem(
            option=ConfigOption.MapStyle,
            key='Rendering/MapStyle',
            restart=False,
            enumType=mapstyle.MapStyle,
            default=mapstyle.MapStyle.Poster))
        self._addConfigItem(MapOptionsConfigItem(
            option=ConfigOption.MapOptions,
            section='Rendering/MapOptions',
            restart=False,
            default=Config._DefaultMapOptions))
        self._addConfigItem(IntConfigItem(
            option=ConfigOption.StyleCacheSize,
            key='Rendering/StyleCacheSize',
            restart=True,
            default=256,
            min=1,
            max=4096))
        self._addConfigItem(IntConfigItem(
            option=ConfigOption.FontCacheSize,
            key='Rendering/FontCacheSize',
            restart=True,
            default=100,
            min=1,
            max=4096))

        self._addConfigItem(FontFamiliesConfigItem(
            option=ConfigOption.FontFamilies,
            section='Fonts',
            restart=False))

    @typing.overload
    def value(self, option: typing.Literal[ConfigOption.LogLevel], futureValue: bool = False) -> int: ...
    @typing.overload
    def value(self, option: typing.Literal[ConfigOption.MapStyle], futureValue: bool = False) -> mapstyle.MapStyle: ...
    @typing.overload
    def value(self, option: typing.Literal[ConfigOption.MapOptions], futureValue: bool = False) -> mapstyle.MapOptions: ...
    @typing.overload
    def value(self, option: typing.Literal[ConfigOption.StyleCacheSize], futureValue: bool = False) -> int: ...
    @typing.overload
    def value(self, option: typing.Literal[ConfigOption.FontCacheSize], futureValue: bool = False) -> int: ...
    @typing.overload
    def value(self, option: typing.Literal[ConfigOption.FontFamilies], futureValue: bool = False) -> typing.Dict[mapstyle.FontFamily, str]: ...

    def value(
            self,
            option: ConfigOption,
            futureValue: bool = False
            ) -> typing.Any:
        return self._configItems[option].value(futureValue=futureValue)

    def setValue(
            self,
            option: ConfigOption,
            value: typing.Any
            ) -> bool:
        item = self._configItems[option]

        oldValue = item.value()
        item.setValue(value=value)
        newValue = item.value()

        # Always write, a restart item's future value can change while its
        # current value stays the same
        item.write(self._settings)

        if newValue == oldValue:
            return False

        self.configChanged.emit(option, oldValue, newValue)
        return True

    def sync(self) -> None:
        self._settings.sync()

    def isRestartRequired(self) -> bool:
        return any(item.isRestartRequired() for item in self._configItems.values())

    def _addConfigItem(self, item: ConfigItem) -> None:
        self._configItems[item.option()] = item
        try:
            item.read(settings=self._settings)
        except Exception as ex:
            logging.warning(f'Failed to read config option {item.option().name}', exc_info=ex)
