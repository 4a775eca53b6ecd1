from linkgen.utils.config import GeneratorSettings, app_env, app_name, app_prefix, load_config, generator_settings
from linkgen.utils.helpers import require_environment, guarantee_500_response, path_parameter
from linkgen.utils.encoder import Encoder
from linkgen.utils.generator import LinkGenerator, normalize_base_path
from linkgen.utils.logging import initialize_logging


__all__ = [
    'Encoder',
    'LinkGenerator',
    'normalize_base_path',
    'GeneratorSettings',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'generator_settings',
    'require_environment',
    'guarantee_500_response',
    'path_parameter',
    'initialize_logging',
]
