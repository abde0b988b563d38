from .loader import CONFIG_FILENAME, PackagerConfig, load_packager_config

__all__ = ["CONFIG_FILENAME", "PackagerConfig", "load_packager_config"]
