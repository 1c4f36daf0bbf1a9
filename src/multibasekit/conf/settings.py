"""
Process-wide multibasekit configuration.

Values are looked up through a ChainMap: runtime overrides first, then any
layers given to the constructor, then ``DEFAULTS``. Every write is checked
against :class:`MultibaseConfig` together with the values it shadows, and the
coerced values are what get stored, so a config module may say
``UNARY_WARN_THRESHOLD = "128"`` or ``TRACING_ENABLED = "false"``.
A rejected write raises ``pydantic.ValidationError`` and changes nothing.
"""

import importlib
import logging
import os
from collections import ChainMap
from typing import Any, Iterator, Mapping, MutableMapping

from .defaults import DEFAULTS
from .models import MultibaseConfig

logger = logging.getLogger(__name__)

ENVVAR = "MULTIBASEKIT_CONFIG_MODULE"


def _validated(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Coerce ``overrides`` as they would read on top of ``base``."""
    if not overrides:
        return {}
    values = MultibaseConfig.model_validate({**base, **overrides}).model_dump()
    return {key: values[key] for key in overrides}


class Settings(MutableMapping[str, Any]):
    """Validated, layered settings with defaults and optional overlays."""

    def __init__(self, *layers: Mapping[str, Any]) -> None:
        # validate bottom-up so each layer is checked against what it shadows
        maps: list[dict[str, Any]] = [dict(DEFAULTS)]
        for layer in reversed(layers):
            maps.insert(0, _validated(ChainMap(*maps), layer))
        self._storage = ChainMap({}, *maps)

    @property
    def _overrides(self) -> dict[str, Any]:
        return self._storage.maps[0]

    # Mapping protocol -------------------------------------------------
    def __getitem__(self, key: str) -> Any:
        return self._storage[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._overrides.update(_validated(self._storage, {key: value}))

    def __delitem__(self, key: str) -> None:
        del self._overrides[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    # Loading ----------------------------------------------------------
    def update_from_mapping(self, mapping: Mapping[str, Any], *, namespace: str | None = None) -> None:
        self._overrides.update(_validated(self._storage, _filter_by_namespace(mapping, namespace)))

    def update_from_object(self, obj: str, *, namespace: str | None = None) -> None:
        """Load the upper-case (or ``<namespace>_``-prefixed) names of module ``obj``."""
        module = importlib.import_module(obj)
        self.update_from_mapping(vars(module), namespace=namespace)

    def update_from_envvar(self, envvar: str = ENVVAR, *, namespace: str | None = None) -> None:
        module_name = os.environ.get(envvar)
        if not module_name:
            return
        logger.debug("loading multibasekit settings from %s=%s", envvar, module_name)
        self.update_from_object(module_name, namespace=namespace)

    def reset(self) -> None:
        """Drop every override, falling back to the layers and defaults."""
        self._overrides.clear()

    def as_dict(self) -> dict[str, Any]:
        return dict(self._storage)

    def as_model(self) -> MultibaseConfig:
        return MultibaseConfig.model_validate(self.as_dict())


def _filter_by_namespace(mapping: Mapping[str, Any], namespace: str | None) -> dict[str, Any]:
    if namespace is None:
        return {k: v for k, v in mapping.items() if k.isupper()}

    prefix = f"{namespace}_"
    return {key[len(prefix) :]: value for key, value in mapping.items() if key.startswith(prefix)}


settings = Settings()
settings.update_from_envvar()
