from .config import HttpConfig, MonitoringConfig, ParserConfig, Settings, find_config_file, load_settings

__all__ = ["HttpConfig", "MonitoringConfig", "ParserConfig", "Settings", "find_config_file", "load_settings"]
