from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Reserved enumeration namespaces in the object store
ROOM_ENUM_PREFIX = "enum.rooms."
FUNCTION_ENUM_PREFIX = "enum.functions."

ADAPTER_INSTANCE_PREFIX = "system.adapter."
HOST_PREFIX = "system.host."

DEVICE_ID_PREFIX = "device:"
