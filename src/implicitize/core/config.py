from typing import *

import yaml


class YamlLimitedSafeLoader(type):
    """Meta YAML loader that skips the resolution of the specified YAML tags."""
    def __new__(cls, name, bases, namespace, do_not_resolve: List[str]) -> Type[yaml.SafeLoader]:
        do_not_resolve = set(do_not_resolve)
        implicit_resolvers = {
            key: [(tag, regex) for tag, regex in mappings if tag not in do_not_resolve]
            for key, mappings in yaml.SafeLoader.yaml_implicit_resolvers.items()
        }
        return super().__new__(
            cls,
            name,
            (yaml.SafeLoader, *bases),
            {**namespace, "yaml_implicit_resolvers": implicit_resolvers},
        )

class YamlNoTimestampSafeLoader(
    metaclass=YamlLimitedSafeLoader, do_not_resolve={"tag:yaml.org,2002:timestamp"}
):
    """A safe YAML loader that leaves timestamps as strings."""
    pass

class dotdict(dict):
    """
    dot.notation access to dictionary attributes
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            return self.__getattribute__(item)

    @classmethod
    def create(cls, cfg : Any):
        """
        - recursively replace all dicts by the dotdict.
        """
        if isinstance(cfg, dict):
            items = ( (k, cls.create(v)) for k,v in cfg.items())
            return dotdict(items)
        elif isinstance(cfg, list):
            return [cls.create(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return tuple([cls.create(i) for i in cfg])
        else:
            return cfg

    @staticmethod
    def serialize(cfg):
        if isinstance(cfg, (dict, dotdict)):
            return { k:dotdict.serialize(v) for k,v in cfg.items()}
        elif isinstance(cfg, list):
            return [dotdict.serialize(i) for i in cfg]
        elif isinstance(cfg, tuple):
            return tuple([dotdict.serialize(i) for i in cfg])
        else:
            return cfg


_defaults = dict(
    degenerate_tol=1e-12,
    # |det123| <= degenerate_tol * scale**2 makes the cubic inverse map undefined
    ill_conditioned_tol=1e-8,
    # |det123| <= ill_conditioned_tol * scale**2 is reported as a warning
    on_curve_tol=1e-9,
    # |F(x,y)| <= on_curve_tol * max|coefficient| for points on the curve
)


def default_config() -> dotdict:
    return dotdict.create(dict(_defaults))


def _merge(cfg: Dict[str, Any]) -> dotdict:
    unknown = set(cfg) - set(_defaults)
    if unknown:
        raise KeyError(f"Unknown configuration keys: {sorted(unknown)}, valid keys: {sorted(_defaults)}.")
    merged = default_config()
    # PyYAML reads '1e-10' (no dot) as a string.
    merged.update({k: float(v) for k, v in cfg.items()})
    return merged


def load_config(path) -> dotdict:
    """
    Load tolerances from the YAML file, missing keys are set from `default_config`.
    E.g.:
        degenerate_tol: 1.0e-10
        on_curve_tol: 1.0e-6
    """
    with open(path) as f:
        cfg = yaml.load(f, Loader=YamlNoTimestampSafeLoader)
    if cfg is None:
        cfg = {}
    return _merge(cfg)


def dump_config(config, path):
    with open(path, "w") as f:
        yaml.dump(dotdict.serialize(config), f)


__active_config = None

def get_config() -> dotdict:
    """
    Configuration used when tolerances are not passed explicitly.
    """
    global __active_config
    if __active_config is None:
        __active_config = default_config()
    return __active_config


def set_config(cfg: Optional[Dict[str, Any]]):
    """
    Replace the active configuration. None restores the defaults.
    """
    global __active_config
    __active_config = None if cfg is None else _merge(cfg)
