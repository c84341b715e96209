from .config import dotdict, load_config, dump_config, default_config, get_config, set_config
from .report import report
