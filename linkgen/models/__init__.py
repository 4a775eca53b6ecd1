from linkgen.models.encoder_config_model import EncoderConfig
from linkgen.models.link_model import Link
from linkgen.models.redirect_model import RedirectModel


__all__ = [
    'EncoderConfig',
    'Link',
    'RedirectModel',
]
