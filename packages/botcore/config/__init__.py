from .loader import ClientConfig, load_config, load_config_from_env
