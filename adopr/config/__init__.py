from adopr.config.settings import (
    AzureDevOpsSettings,
    ExtractionSettings,
    JobSettings,
    LoggingSettings,
    OutputSettings,
    Settings,
    load_settings,
    validate_settings,
)

__all__ = [
    'Settings',
    'AzureDevOpsSettings',
    'ExtractionSettings',
    'OutputSettings',
    'JobSettings',
    'LoggingSettings',
    'load_settings',
    'validate_settings',
]
