from app.appdetails import AppName, AppVersion, AppDescription, AppLogFile
from app.logger import setupLogger, setLogLevel
from app.config import ConfigOption, ConfigItem, SimpleConfigItem, IntConfigItem, EnumConfigItem, \
    MappedConfigItem, MapOptionsConfigItem, FontFamiliesConfigItem, Config
